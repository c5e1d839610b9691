# annotator/linkify.py

from __future__ import annotations

from typing import List, Optional, Tuple

import regex as re

from annotator.config import AnnotatorConfig
from annotator.models import Link, PlainText, Run


SCHEME_RE = re.compile(r"^https?://", re.IGNORECASE)

# Optional scheme, dotted domain, 1-6 letter TLD, then an optional tail of
# URL-safe characters. Domain labels and the TLD accept Unicode letters.
LINK_RE = re.compile(
    r"(?i:https?://)?"
    r"(?:[\p{L}\p{N}-]+\.)+"
    r"\p{L}{1,6}\b"
    r"[-a-zA-Z0-9()@:%_+.~#?&/=]*"
)


def to_href(url: str, config: Optional[AnnotatorConfig] = None) -> str:
    if SCHEME_RE.match(url):
        return url
    prefix = config.scheme_prefix() if config else "https://"
    return prefix + url


def find_links(content: str) -> List[Tuple[int, int]]:
    return [m.span() for m in LINK_RE.finditer(content)]


def linkify(content: str, config: Optional[AnnotatorConfig] = None) -> List[Run]:
    """
    Split a plain-text segment into PlainText and Link runs.

    Link content is the exact matched substring; only `href` gets a scheme
    added. Empty content gives an empty list.
    """
    runs: List[Run] = []
    cursor = 0

    for start, end in find_links(content):
        if start > cursor:
            runs.append(PlainText(content[cursor:start]))
        url = content[start:end]
        runs.append(Link(url, href=to_href(url, config)))
        cursor = end

    if cursor < len(content):
        runs.append(PlainText(content[cursor:]))

    return runs
