"""Scientific consensus analysis for natural-language claims."""

__version__ = "0.1.0"
