"""A terminal multiple-choice quiz on Pride and Prejudice with Regency-era context."""

__version__ = "1.0.0"
__all__ = ["__version__"]