"""String helpers."""

import string

__all__ = ["to_upper"]

_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


def to_upper(text):
    """Upper-case ASCII letters only, leaving every other character as it is."""
    return text.translate(_UPPER)