"""Infrastructure layer — filesystem, markdown conversion, templates, site.

This layer wraps the third-party engines (Python-Markdown, Pygments, Jinja2)
behind small functions the service layer can call.
"""
