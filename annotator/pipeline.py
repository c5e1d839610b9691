# annotator/pipeline.py

from __future__ import annotations

import logging
from typing import List, Optional

from .models import AnnotatedRun, PlainText, Run, Span
from .config import AnnotatorConfig
from .tokenize import tokenize
from .classify import classify
from .linkify import linkify

logger = logging.getLogger(__name__)


def annotate(
    text: str,
    current_user_name: Optional[str] = None,
    config: Optional[AnnotatorConfig] = None,
) -> List[Run]:
    """
    Break a chat message into typed runs for rendering.

    Mentions are found first; only the plain text between them is scanned
    for links, so a mention is never re-read as part of a URL.
    Empty text gives an empty list.
    """
    config = config or AnnotatorConfig()

    # 1) Mentions, then the gaps between them
    candidates = tokenize(text, config)
    segments = classify(text, candidates, current_user_name)

    # 2) Links inside plain-text segments only
    runs: List[Run] = []
    for seg in segments:
        if not isinstance(seg, PlainText):
            runs.append(seg)
        elif config.linkify:
            runs.extend(linkify(seg.content, config))
        elif seg.content:
            runs.append(seg)

    logger.debug(
        "annotate: %d mention(s), %d segment(s), %d run(s)",
        len(candidates),
        len(segments),
        len(runs),
    )
    return runs


def annotate_spans(
    text: str,
    current_user_name: Optional[str] = None,
    config: Optional[AnnotatorConfig] = None,
) -> List[AnnotatedRun]:
    """Like `annotate`, with each run's [start, end) offsets in `text`."""
    annotated: List[AnnotatedRun] = []
    cursor = 0
    for run in annotate(text, current_user_name, config):
        end = cursor + len(run.content)
        annotated.append(AnnotatedRun(run=run, span=Span(start=cursor, end=end)))
        cursor = end
    return annotated


def runs_to_text(runs: List[Run]) -> str:
    return "".join(run.content for run in runs)
