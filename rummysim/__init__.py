"""List the legal rummy plays for a hand, a discard pile and the cards on the table."""

__version__ = "0.1.0"
__all__ = ["card", "score", "cli"]