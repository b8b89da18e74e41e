"""wordlehelper: entropy-based Wordle solving assistant."""

__version__ = "0.1.0"
