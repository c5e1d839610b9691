# annotator/tokenize.py

from __future__ import annotations

import logging
from functools import lru_cache
from typing import List, Optional

import regex as re

from annotator.config import AnnotatorConfig, DEFAULT_STOP_CHARS
from annotator.models import MentionCandidate, Span

logger = logging.getLogger(__name__)


def build_mention_re(stop_chars: str = DEFAULT_STOP_CHARS) -> "re.Pattern[str]":
    """
    `@` followed by word characters and plain spaces, matched lazily up to
    the first whitespace, end of text or stop character.

    \\w is Unicode-aware here, so "@Zoë" is a single mention.
    """
    stops = [r"\s", r"\Z"]
    if stop_chars:
        stops.append("[" + "".join(re.escape(c) for c in stop_chars) + "]")
    return re.compile(r"@([\w ]+?)(?=" + "|".join(stops) + ")")


MENTION_RE = build_mention_re()


@lru_cache(maxsize=16)
def _mention_re_for(stop_chars: str) -> "re.Pattern[str]":
    if stop_chars == DEFAULT_STOP_CHARS:
        return MENTION_RE
    return build_mention_re(stop_chars)


def tokenize(text: str, config: Optional[AnnotatorConfig] = None) -> List[MentionCandidate]:
    """
    Find @mention candidates in `text`.

    Candidates come back in increasing start order and never overlap:
    scanning resumes right after each match. A match whose name is only
    spaces (e.g. "@ " before a newline) is dropped and stays plain text.
    """
    stop_chars = config.mention_stop_chars if config else DEFAULT_STOP_CHARS
    pattern = _mention_re_for(stop_chars)

    candidates: List[MentionCandidate] = []
    for m in pattern.finditer(text):
        user_name = m.group(1).strip(" ")
        if not user_name:
            continue
        candidates.append(
            MentionCandidate(
                span=Span(start=m.start(), end=m.end()),
                raw_match=m.group(0),
                user_name=user_name,
            )
        )

    logger.debug("tokenize: %d mention candidate(s)", len(candidates))
    return candidates
