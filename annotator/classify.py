# annotator/classify.py

from __future__ import annotations

from typing import List, Optional

from annotator.models import Mention, MentionCandidate, PlainText, Run, SelfMention


def classify(
    text: str,
    candidates: List[MentionCandidate],
    current_user_name: Optional[str] = None,
) -> List[Run]:
    """
    Partition `text` into PlainText and (Self)Mention runs.

    A mention is a SelfMention only when its user name equals
    `current_user_name` exactly (case-sensitive). With no candidates the
    whole text is returned as a single PlainText run, even when empty.
    """
    if not candidates:
        return [PlainText(text)]

    runs: List[Run] = []
    cursor = 0

    for cand in candidates:
        if cand.span.start > cursor:
            runs.append(PlainText(text[cursor:cand.span.start]))

        if current_user_name and cand.user_name == current_user_name:
            runs.append(SelfMention(cand.raw_match))
        else:
            runs.append(Mention(cand.raw_match))

        cursor = cand.span.end

    if cursor < len(text):
        runs.append(PlainText(text[cursor:]))

    return runs
