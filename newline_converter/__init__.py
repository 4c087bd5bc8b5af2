"""Replace literal ``\\n`` sequences in text files with real newlines."""

__version__ = "1.0.0"
