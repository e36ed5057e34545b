"""
Core helpers for the web service client.

This package holds the pure steps of the request pipeline: URL
assembly, status classification, response splitting and payload
parsing, together with configuration and the error family.
"""

__all__ = []
