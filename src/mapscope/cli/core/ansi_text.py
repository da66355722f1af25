"""ANSI text utilities - measuring and slicing strings with escape codes."""

from __future__ import annotations

import re

# Pattern to match ANSI escape sequences
_ANSI_ESCAPE = re.compile(r'\x1b\[[0-9;?]*[A-Za-z~]')


def visible_len(s: str) -> int:
    """Get visible length of string (excluding ANSI escape codes)."""
    return len(_ANSI_ESCAPE.sub('', s))


def truncate(s: str, max_width: int) -> str:
    """
    Truncate an ANSI-escaped string to max visible width.

    Preserves ANSI codes but counts only visible characters. A reset is
    appended when anything was cut so colors do not bleed.
    """
    if max_width <= 0:
        return ""

    result: list[str] = []
    vis_len = 0
    i = 0

    while i < len(s) and vis_len < max_width:
        match = _ANSI_ESCAPE.match(s, i)
        if match:
            result.append(match.group())
            i = match.end()
        else:
            result.append(s[i])
            vis_len += 1
            i += 1

    output = ''.join(result)
    if i < len(s):
        output += '\x1b[0m'
    return output


def truncate_and_pad(s: str, width: int) -> str:
    """Truncate if too long, pad if too short. Always returns exactly width visible chars."""
    vlen = visible_len(s)
    if vlen > width:
        return truncate(s, width)
    if vlen < width:
        return s + ' ' * (width - vlen)
    return s
