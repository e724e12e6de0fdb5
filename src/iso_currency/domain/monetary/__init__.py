"""Monetary domain package.

This package contains the closed ISO 4217 `Currency` enumeration, its category classification and
the read-only lookup tables built on top of it.
"""
