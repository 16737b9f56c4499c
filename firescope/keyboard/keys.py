"""Translate Textual key events into the key names table views understand.

Textual reports ``escape``, ``pagedown`` and friends; the browsing state
machine speaks in the short names used on the help screen (``esc``,
``pgdown``). Printable keys are passed through as the character typed, so
``G`` and ``S`` stay distinct from ``g`` and ``s``.
"""

from __future__ import annotations

KEY_ALIASES: dict[str, str] = {
    "escape": "esc",
    "pagedown": "pgdown",
    "pageup": "pgup",
    "slash": "/",
}

# Named keys that carry a character but must keep their name.
NAMED_KEYS = frozenset({"space", "tab", "enter", "backspace"})


def normalize_key(key: str, character: str | None = None) -> str:
    """Return the browsing key name for a Textual ``key``/``character`` pair."""
    if key in KEY_ALIASES:
        return KEY_ALIASES[key]
    if key in NAMED_KEYS:
        return key
    if character is not None and len(character) == 1 and character.isprintable():
        return character
    return key


__all__ = [
    "KEY_ALIASES",
    "NAMED_KEYS",
    "normalize_key",
]
