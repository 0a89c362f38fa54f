"""Checks on words."""


def is_palindrome(text: str) -> bool:
    """Tell whether ``text`` reads the same forwards and backwards."""
    return text == text[::-1]