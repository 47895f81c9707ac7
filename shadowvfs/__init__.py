"""printf-style formatting, C-style integer parsing and tokenising, and a levelled logger."""

__version__ = "1.0.0"
__all__ = ["cstr", "fmtspec", "format", "intconv", "log"]