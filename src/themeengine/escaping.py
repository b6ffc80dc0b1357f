"""
HTML escaping helper.
"""

from typing import Any


_ESCAPE_MAP = (
    ('&', '&amp;'),
    ('<', '&lt;'),
    ('>', '&gt;'),
    ('"', '&quot;'),
    ("'", '&#039;'),
)


def escape(value: Any) -> str:
    """Escape HTML special characters.

    Any value is accepted: bytes are decoded as UTF-8 with invalid sequences
    replaced, ``None`` becomes an empty string, everything else goes through
    ``str()``.
    """
    if value is None:
        return ''
    if isinstance(value, (bytes, bytearray)):
        text = bytes(value).decode('utf-8', errors='replace')
    else:
        text = str(value)

    # '&' first so entities produced below are not escaped twice
    for char, entity in _ESCAPE_MAP:
        text = text.replace(char, entity)
    return text


e = escape
