"""Chess rules engine: board model, move generation and turn control."""

__version__ = "0.1.0"
