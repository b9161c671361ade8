from typing import Optional

from pydantic import BaseModel


class NoteCreate(BaseModel):
    title: str = ""
    content: str = ""
    # falls back to the caller's credential when omitted
    user: Optional[str] = None


class NoteUpdate(BaseModel):
    title: str
    content: str
    user: str


class NotePatch(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    user: Optional[str] = None


class NoteOut(BaseModel):
    id: int
    title: str
    content: str
    user: str
