"""Icons shown in the header for known file types."""

from __future__ import annotations

_ICONS: dict[str, str] = {
    "cpp": "\ufb71",
    "hpp": "h",
    "c": "\ufb70",
    "h": "h",
    "java": "\uf675",
    "py": "\uf81f",
    "js": "\ue74e",
    "ts": "\ue628",
    "cs": "\uf81a",
    "html": "\uf13b",
    "md": "\uf853",
    "css": "\uf81b",
    "go": "\ufcd1",
    "ter": "\ufcb5",
    "my": "\ufcb5",
    "swift": "\ufbe3",
    "rs": "\ue7a8",
}

DEFAULT_ICON = "\uf723"


def icon_for(filetype: str) -> str:
    """Return the icon glyph for a file extension, or the generic file icon."""
    return _ICONS.get(filetype, DEFAULT_ICON)