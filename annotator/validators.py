# annotator/validators.py

from typing import List

from annotator.models import AnnotatedRun, Run


def is_lossless(text: str, runs: List[Run]) -> bool:
    """
    Return True if the runs rebuild `text` exactly and none is empty.
    """
    if any(not run.content for run in runs):
        return False
    return "".join(run.content for run in runs) == text


def spans_are_contiguous(text: str, annotated: List[AnnotatedRun]) -> bool:
    cursor = 0
    for item in annotated:
        if item.span.start != cursor:
            return False
        if text[item.span.start:item.span.end] != item.run.content:
            return False
        cursor = item.span.end
    return cursor == len(text)
