"""
keysmith.errors
"""


class InvalidArgument(ValueError):
    """Raised for malformed requests: negative length, or a strength score outside 0-4."""
