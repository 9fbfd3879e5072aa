"""Utilities for turning identifiers into display text."""

import re


def headline(name: str) -> str:
    """
    Convert an identifier into a human readable label.

    Only the first word is capitalized; the rest keep their case apart from
    camelCase boundaries, which are split and lowercased.

    Examples:
        "submit" -> "Submit"
        "delete_post" -> "Delete post"
        "archiveAll" -> "Archive all"
        "send-invoice-PDF" -> "Send invoice PDF"
    """
    # Split camelCase boundaries
    text = re.sub(r"(?<=[a-z0-9])(?=[A-Z][a-z])|(?<=[a-z])(?=[A-Z])", " ", name)

    # Underscores, hyphens and dots separate words
    text = re.sub(r"[\s_\-.]+", " ", text).strip()

    if not text:
        return ""

    words = [word if word.isupper() and len(word) > 1 else word.lower() for word in text.split(" ")]
    words[0] = words[0][0].upper() + words[0][1:]
    return " ".join(words)
