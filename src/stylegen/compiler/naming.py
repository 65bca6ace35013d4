"""Name and text conversion for style attribute identifiers."""

from typing import Any, Iterable, Optional


def camel_case(name: str, delimiter: str = "-") -> str:
    """Convert a hyphenated identifier to camelCase.

    The first part is kept as-is, every later part gets its first
    character upper-cased: ``text-max-width`` -> ``textMaxWidth``.
    """
    parts = name.split(delimiter)
    return parts[0] + "".join(part[:1].upper() + part[1:] for part in parts[1:])


def pascal_case(name: str, delimiter: str = "-") -> str:
    """Convert a hyphenated identifier to PascalCase."""
    camel = camel_case(name, delimiter)
    return camel[:1].upper() + camel[1:]


def format_description(description: Optional[str]) -> str:
    """Camel-case every hyphenated word of a documentation string.

    Words are split on single spaces so the original spacing survives.
    """
    words = (description or "").split(" ")
    return " ".join(camel_case(word) if "-" in word else word for word in words)


def get_requires(required_items: Optional[Iterable[Any]]) -> list[str]:
    """Attributes that must be set for this one to take effect."""
    if not required_items:
        return []
    return [camel_case(item) for item in required_items if isinstance(item, str)]


def get_disabled_by(required_items: Optional[Iterable[Any]]) -> list[str]:
    """Attributes whose presence disables this one (``{"!": name}`` entries)."""
    if not required_items:
        return []
    return [
        camel_case(item["!"])
        for item in required_items
        if isinstance(item, dict) and item.get("!")
    ]
