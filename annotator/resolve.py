# annotator/resolve.py

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Protocol

from annotator.config import AnnotatorConfig
from annotator.tokenize import tokenize

logger = logging.getLogger(__name__)


class UserDirectory(Protocol):
    """Name -> user ID lookup supplied by the host application."""

    def ids_for_names(self, names: List[str]) -> List[str]:
        ...


class InMemoryDirectory:
    def __init__(self, users: Dict[str, str]):
        # full name -> user id
        self._users = dict(users)

    def ids_for_names(self, names: List[str]) -> List[str]:
        return [self._users[n] for n in names if n in self._users]


def mentioned_names(text: str, config: Optional[AnnotatorConfig] = None) -> List[str]:
    """
    User names mentioned in `text`, first occurrence order, no duplicates.
    """
    seen: Dict[str, None] = {}
    for cand in tokenize(text, config):
        seen.setdefault(cand.user_name, None)
    return list(seen)


def mentioned_user_ids(
    text: str,
    directory: UserDirectory,
    config: Optional[AnnotatorConfig] = None,
) -> List[str]:
    """
    Resolve the mentions in `text` to user IDs through `directory`.

    The directory is not consulted when there are no mentions. A failing
    lookup is logged and treated as "nobody mentioned".
    """
    names = mentioned_names(text, config)
    if not names:
        return []

    try:
        ids: Iterable[str] = directory.ids_for_names(names)
    except Exception:
        logger.exception("User directory lookup failed for %d name(s)", len(names))
        return []

    return list(ids)
