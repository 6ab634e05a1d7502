"""Diagnostics package.

Light-weight table generators built on the public API (no extras required).
"""

__all__ = ["vaisakhi_table", "mal_maas"]
