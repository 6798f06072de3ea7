# src/graphml/__init__.py — v1
"""GraphML key schema, element and document generation."""
