"""Lenient JSON extraction from generator output."""

from __future__ import annotations

import json

from recruit_sandbox.errors import ParseError


def extract_json(text: str | None, empty: dict | list | None = None) -> dict | list:
    """Extract a JSON value from a generator response.

    An empty or missing body yields a copy of ``empty`` (``{}`` by default)
    so that required-field validation, not the parser, reports what is
    missing. Otherwise tries, in order:

    1. Direct ``json.loads`` on the full text
    2. The same after stripping markdown code fences
    3. The span from the first ``{`` to the last ``}``
    4. The span from the first ``[`` to the last ``]``

    Raises:
        ParseError: if none of the above yields JSON.
    """
    if text is None or not text.strip():
        return type(empty)() if empty is not None else {}

    text = text.strip()
    candidates = [text]
    stripped = _strip_code_fences(text)
    if stripped != text:
        candidates.append(stripped)

    for candidate in candidates:
        try:
            return json.loads(candidate)
        except json.JSONDecodeError:
            pass

    for candidate in candidates:
        for opener, closer in (("{", "}"), ("[", "]")):
            result = _extract_span(candidate, opener, closer)
            if result is not None:
                return result

    raise ParseError(f"Could not extract JSON from text: {text[:200]}...")


def _strip_code_fences(text: str) -> str:
    """Remove markdown code fence markers from text."""
    lines = text.split("\n")

    # Remove opening fence (```json, ```, etc.)
    if lines and lines[0].strip().startswith("```"):
        lines = lines[1:]

    while lines and lines[-1].strip() in ("```", ""):
        lines = lines[:-1]

    return "\n".join(lines).strip()


def _extract_span(text: str, opener: str, closer: str) -> dict | list | None:
    start = text.find(opener)
    end = text.rfind(closer)
    if start != -1 and end != -1 and end > start:
        try:
            return json.loads(text[start : end + 1])
        except json.JSONDecodeError:
            pass
    return None
