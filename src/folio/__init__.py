"""folio — resolve markdown content files into addressed, render-ready pages."""

__version__ = "0.1.0"
