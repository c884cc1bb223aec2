"""Slug generation for markdown headings."""

from __future__ import annotations


def generate_slug(title: str) -> str:
    """Generate an anchor id from a heading title.

    Lowercases the title, turns each space into a hyphen, and drops every
    character that is neither alphanumeric nor a hyphen. Unicode letters and
    digits are kept. Runs of hyphens are not collapsed, and an empty result is
    returned as-is.

    Args:
        title: The heading text to convert into a slug.

    Returns:
        str: Slug suitable for an ``id`` attribute, possibly empty.

    Examples:
        generate_slug("Hello World")  # "hello-world"
        generate_slug("What's New?")  # "whats-new"
        generate_slug("a - b")  # "a---b"
        generate_slug("!!!")  # ""
    """
    slug = title.lower().replace(" ", "-")
    return "".join(character for character in slug if character.isalnum() or character == "-")
