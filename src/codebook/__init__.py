# src/codebook/__init__.py — v1
"""Codebook lookups and attribute type inference."""
