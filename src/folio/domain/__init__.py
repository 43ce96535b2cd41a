"""Domain layer — page types, identity rules, and view projection.

This layer depends only on stdlib, pydantic, ruamel.yaml and python-slugify.
It must never import from services, infrastructure, commands, or config.
"""
