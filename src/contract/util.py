"""String helpers used when writing contracts."""


def is_empty(s: str) -> bool:
    """Return True when the string is empty or whitespace only."""
    return s.strip() == ""
