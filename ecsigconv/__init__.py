"""Conversion of ECDSA signatures between DER encoding and raw R||S form."""

__version__ = "0.1.0"
__all__ = ["signature"]