# src/__init__.py — v1
"""Network Canvas session export to GraphML."""

from ncexport.version import __version__

__all__ = ["__version__"]
