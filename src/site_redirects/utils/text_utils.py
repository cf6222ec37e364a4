"""Text helpers for slugs and category labels."""

import re

# First bracketed list literal on a line, e.g. "[SQL, Data Viz]"
_LIST_LITERAL = re.compile(r"\[(.*?)\]")

LIST_SEPARATOR = ", "


def derive_slug(folder_name: str) -> str:
    """
    Derive a post slug from its folder name.

    Args:
        folder_name: Folder name such as ``20240216_my-slug``

    Returns:
        Text after the final underscore, or the name unchanged
    """
    return folder_name.rsplit("_", 1)[-1]


def category_key(display_name: str) -> str:
    """Normalize a category label for URL paths ("Data Science" -> "data-science")."""
    return display_name.lower().replace(" ", "-")


def encode_category(display_name: str) -> str:
    """Encode a category label for the listing fragment ("Data Viz" -> "Data%20Viz")."""
    return display_name.replace(" ", "%20")


def extract_list_literal(text: str) -> list[str] | None:
    """
    Extract the items of the first ``[a, b, c]`` literal in text.

    Returns None when no bracketed literal is present. Items are split on
    ``", "`` and empty items are dropped.
    """
    match = _LIST_LITERAL.search(text)
    if not match:
        return None
    return [item for item in match.group(1).split(LIST_SEPARATOR) if item]


def unique_in_order(items) -> list:
    """Drop repeated items, keeping the first occurrence of each."""
    seen = set()
    result = []
    for item in items:
        if item not in seen:
            seen.add(item)
            result.append(item)
    return result
