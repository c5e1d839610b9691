# annotator/models.py

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar


@dataclass
class Span:
    start: int
    end: int

    def __post_init__(self):
        if self.start < 0 or self.start >= self.end:
            raise ValueError(f"Invalid span [{self.start}, {self.end})")

    def overlaps(self, other: "Span") -> bool:
        return not (self.end <= other.start or other.end <= self.start)

    def length(self) -> int:
        return self.end - self.start


@dataclass
class MentionCandidate:
    span: Span
    raw_match: str
    user_name: str


@dataclass(frozen=True)
class Run:
    """
    One renderable chunk of a message.

    `content` is always the exact original substring, so joining the
    content of every run in order gives back the message text.
    """

    content: str

    kind: ClassVar[str] = "run"


@dataclass(frozen=True)
class PlainText(Run):
    kind: ClassVar[str] = "text"


@dataclass(frozen=True)
class Mention(Run):
    kind: ClassVar[str] = "mention"


@dataclass(frozen=True)
class SelfMention(Run):
    kind: ClassVar[str] = "self_mention"


@dataclass(frozen=True)
class Link(Run):
    href: str

    kind: ClassVar[str] = "link"


@dataclass(frozen=True)
class AnnotatedRun:
    run: Run
    span: Span
