"""A small DNS client: build DNS queries, send them over UDP and print the answers."""

__version__ = "0.1.1"

__all__ = ["__version__"]