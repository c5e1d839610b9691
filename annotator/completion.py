# annotator/completion.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple


@dataclass
class MentionQuery:
    at_index: int
    query: str


def _check_cursor(text: str, cursor: int) -> None:
    if cursor < 0 or cursor > len(text):
        raise ValueError(f"Cursor {cursor} outside text of length {len(text)}")


def find_mention_query(text: str, cursor: int) -> Optional[MentionQuery]:
    """
    Return the mention being typed at `cursor`, if any.

    The last "@" before the cursor starts a query as long as no space was
    typed after it.
    """
    _check_cursor(text, cursor)
    before = text[:cursor]
    at_index = before.rfind("@")
    if at_index == -1:
        return None

    query = before[at_index + 1:]
    if " " in query:
        return None
    return MentionQuery(at_index=at_index, query=query)


def filter_names(names: Iterable[str], query: str, limit: Optional[int] = None) -> List[str]:
    needle = query.lower()
    matches = [n for n in names if needle in n.lower()]
    if limit is not None:
        matches = matches[:limit]
    return matches


def insert_mention(text: str, at_index: int, cursor: int, full_name: str) -> Tuple[str, int]:
    """
    Replace the partial mention text[at_index:cursor] with "@full_name ".

    Returns the new text and the cursor position just after the inserted
    trailing space.
    """
    _check_cursor(text, cursor)
    if at_index < 0 or at_index > cursor:
        raise ValueError(f"Invalid mention start {at_index} for cursor {cursor}")

    before = text[:at_index]
    after = text[cursor:]
    new_text = f"{before}@{full_name} {after}"
    return new_text, len(before) + len(full_name) + 2
