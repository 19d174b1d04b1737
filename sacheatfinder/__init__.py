"""Find alphabetic codes whose JAMCRC matches known cheat hashes."""

__version__ = "0.1.0"
__all__ = ["result", "finder", "backends", "tablemodel", "controller", "cli"]