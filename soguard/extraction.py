"""
JSON Extractor — Locate the first parseable JSON value in free text.

Model output often wraps JSON in prose or markdown. The extractor scans for a
balanced object (then array) and only ever returns text that parses.

Tie-break policy:
- Objects are tried before arrays.
- Only the FIRST opener of each bracket type is tried. If that candidate does
  not parse, the scanner moves on to the next bracket type; a later block of
  the same type is never considered.
"""

import json
from typing import Any, Optional

# Tried in order
BRACKET_PAIRS = (("{", "}"), ("[", "]"))


def _reject_constant(token: str) -> Any:
    raise ValueError(f"Non-standard JSON constant: {token}")


def _parse(candidate: str) -> Any:
    """Strict JSON parse. NaN and Infinity are not JSON."""
    return json.loads(candidate, parse_constant=_reject_constant)


def is_parseable(candidate: str) -> bool:
    """Check whether ``candidate`` is a complete JSON document."""
    try:
        _parse(candidate)
    except (ValueError, RecursionError):
        return False
    return True


def _balanced_span(text: str, start: int, opener: str, closer: str) -> Optional[str]:
    """
    Return text[start:end+1] where the bracket opened at ``start`` closes.

    Brackets inside strings are ignored. Returns None if the text ends first.
    """
    depth = 0
    in_string = False
    escaped = False

    for i in range(start, len(text)):
        ch = text[i]
        if escaped:
            escaped = False
            continue
        if ch == "\\" and in_string:
            escaped = True
            continue
        if ch == '"':
            in_string = not in_string
            continue
        if in_string:
            continue
        if ch == opener:
            depth += 1
        elif ch == closer:
            depth -= 1
        if depth == 0:
            return text[start:i + 1]

    return None


def extract_json(text: Optional[str]) -> Optional[str]:
    """
    Extract the first parseable JSON object or array from ``text``.

    Args:
        text: Arbitrary model output

    Returns:
        The JSON substring, or None if no parseable candidate was found
    """
    trimmed = (text or "").strip()

    for opener, closer in BRACKET_PAIRS:
        start = trimmed.find(opener)
        if start == -1:
            continue

        candidate = _balanced_span(trimmed, start, opener, closer)
        if candidate is not None and is_parseable(candidate):
            return candidate

    return None


def extract_value(text: Optional[str]) -> Any:
    """Extract and decode the first JSON value in ``text`` (None if absent)."""
    candidate = extract_json(text)
    if candidate is None:
        return None
    return _parse(candidate)
