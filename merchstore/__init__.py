"""In-memory merchandise and warehouse shelf database with text output."""

__version__ = "0.1.0"
__all__ = ["ansi", "inventory", "webstore", "display"]