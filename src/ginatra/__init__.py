"""ginatra - view helpers for a web front-end that browses Git repositories."""

__version__ = "0.1.0"
