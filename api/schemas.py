# api/schemas.py

from typing import List, Optional
from pydantic import BaseModel, Field


class RunSchema(BaseModel):
    kind: str
    content: str
    href: Optional[str] = None
    start: int
    end: int


class AnnotateRequest(BaseModel):
    text: str
    current_user_name: Optional[str] = None


class AnnotateResponse(BaseModel):
    runs: List[RunSchema]


class MentionSchema(BaseModel):
    start: int
    end: int
    raw_match: str
    user_name: str


class MentionsRequest(BaseModel):
    text: str


class MentionsResponse(BaseModel):
    mentions: List[MentionSchema]


class CompleteRequest(BaseModel):
    text: str
    cursor: int = Field(ge=0)
    names: List[str] = []
    limit: Optional[int] = Field(default=None, ge=1)


class CompleteResponse(BaseModel):
    active: bool
    at_index: Optional[int] = None
    query: Optional[str] = None
    suggestions: List[str] = []
