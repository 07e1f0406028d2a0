"""Canonicalise decoded résumé text before extraction."""

import re

_MULTI_SPACE_RE = re.compile(r" +")
_BLANK_RUN_RE = re.compile(r"\n{3,}")


def normalize_text(text: str) -> str:
    """Normalise line endings, tabs, repeated spaces and blank-line runs.

    Total over all strings; ``normalize_text(normalize_text(x)) == normalize_text(x)``.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = text.replace("\t", " ")
    text = _MULTI_SPACE_RE.sub(" ", text)
    text = _BLANK_RUN_RE.sub("\n\n", text)
    return text.strip()
