"""Find Pokemon type combinations that resist a set of attack types."""

__version__ = "0.1.0"
