# src/network/__init__.py — v1
"""Session preprocessing: ego attribution, resequencing, partitioning."""
