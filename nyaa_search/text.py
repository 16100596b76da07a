"""Text helpers for pulling fields out of raw feed markup."""

import re
from functools import lru_cache

HTML_ENTITIES = {
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
    "&#39;": "'",
    "&apos;": "'",
}

_ENTITY_RE = re.compile(r"&[#a-z0-9]+;", re.IGNORECASE)
_LEADING_INT_RE = re.compile(r"[+-]?\d+")

SIZE_MULTIPLIERS = {
    "B": 1,
    "KB": 1024,
    "KIB": 1024,
    "MB": 1024**2,
    "MIB": 1024**2,
    "GB": 1024**3,
    "GIB": 1024**3,
    "TB": 1024**4,
    "TIB": 1024**4,
}


@lru_cache(maxsize=None)
def _tag_pattern(tag_name: str) -> re.Pattern:
    # `<nyaa:category>` must not match `<nyaa:categoryId>`
    tag = re.escape(tag_name)
    return re.compile(
        rf"<{tag}(?:\s[^>]*)?><!\[CDATA\[(.*?)\]\]></{tag}\s*>"
        rf"|<{tag}(?:\s[^>]*)?>(.*?)</{tag}\s*>",
        re.IGNORECASE | re.DOTALL,
    )


def extract_tag(fragment: str, tag_name: str) -> str | None:
    """Return the stripped text of the first ``tag_name`` element in ``fragment``.

    The CDATA-wrapped form is tried before the plain one. Returns ``None``
    when the tag is not present at all.
    """
    match = _tag_pattern(tag_name).search(fragment)
    if not match:
        return None
    value = match.group(1) if match.group(1) is not None else match.group(2)
    return (value or "").strip()


def decode_html(text: str) -> str:
    """Decode the common HTML entities, leaving unknown ones untouched."""
    return _ENTITY_RE.sub(lambda m: HTML_ENTITIES.get(m.group(0), m.group(0)), text)


def format_episode(episode: int) -> str:
    """Format episode number with leading zero (e.g., 1 -> "01")."""
    return f"{episode:02d}"


def parse_int(value: str | None) -> int:
    """Parse the leading integer of ``value``; 0 when missing or negative."""
    if not value:
        return 0
    match = _LEADING_INT_RE.match(value.strip())
    if not match:
        return 0
    try:
        return max(int(match.group(0)), 0)
    except ValueError:
        # past the interpreter's int digit limit
        return 0


def parse_size(size_str: str | None) -> int:
    """Parse size string like '1.5 GiB' or '1048576' to bytes."""
    if not size_str:
        return 0
    size_str = size_str.upper().strip()
    if size_str.isdigit():
        return parse_int(size_str)
    match = re.match(r"([\d.]+)\s*(B|KB|MB|GB|TB|KIB|MIB|GIB|TIB)\b", size_str)
    if not match:
        return parse_int(size_str)
    try:
        value = float(match.group(1))
        return int(value * SIZE_MULTIPLIERS.get(match.group(2), 1))
    except (ValueError, OverflowError):
        return 0
