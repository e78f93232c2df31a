"""Credential validation and name normalization helpers.

All functions here are pure: they never touch the database or raise.
"""

import re

EMAIL_PATTERN = re.compile(
    r"^[0-9a-zA-Z._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}$", re.IGNORECASE | re.ASCII
)

# Unanchored: any run of 8 ASCII word characters anywhere qualifies.
PASSWORD_PATTERN = re.compile(r"\w{8,}", re.ASCII)

NAME_MIN_LENGTH = 3


def is_valid_email(candidate: str) -> bool:
    """Check that ``candidate`` looks like ``local@domain.tld``."""
    return EMAIL_PATTERN.fullmatch(candidate) is not None


def is_valid_password(candidate: str) -> bool:
    """Check that ``candidate`` contains at least 8 consecutive word characters."""
    return PASSWORD_PATTERN.search(candidate) is not None


def is_valid_name(candidate: str) -> bool:
    return len(candidate.strip()) >= NAME_MIN_LENGTH


def capitalize(text: str) -> str:
    """Capitalize the first letter of each word and lowercase the rest.

    Whitespace runs collapse to a single space:

        >>> capitalize("hElLo   WoRLd")
        'Hello World'

    Only the first character of an uppercased head is kept uppercase, so
    ``"ßa"`` becomes ``"Ssa"`` and stays that way on a second pass.
    """
    words = []
    for word in text.split():
        head = word[0].upper()
        words.append(head[0] + (head[1:] + word[1:]).lower())
    return " ".join(words)
