"""Linear-time weighted sampling with replacement, yielding sorted indices."""

__version__ = "0.1.0"
__all__ = ["sampling", "quick_start"]