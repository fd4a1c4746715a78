from __future__ import annotations

import re
from typing import Iterable


_AZ_ONLY_RE = re.compile(r"[^A-Z]+")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_az(s: str) -> str:
    """Keep only A-Z, uppercase."""
    if s is None:
        return ""
    return _AZ_ONLY_RE.sub("", f"{s}".upper())


def strip_whitespace(s: str) -> str:
    return _WHITESPACE_RE.sub("", s)


def chunked(seq: Iterable, size: int):
    buf = []
    for x in seq:
        buf.append(x)
        if len(buf) == size:
            yield buf
            buf = []
    if buf:
        yield buf
