"""Chess move hints: candidate destinations for a selected piece."""

__version__ = "0.1.0"
