from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict

class Note(BaseModel):
    """Client-side copy of a stored note. Immutable; updates produce new copies."""
    model_config = ConfigDict(frozen=True, extra="ignore")
    id: str
    title: str
    content: str
    summary: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    def merged(self, **fields) -> "Note":
        return self.model_copy(update=fields)

@dataclass(frozen=True)
class NotePayload:
    """What the editor hands to its owner on save."""
    title: str
    content: str
    id: Optional[str] = None

@dataclass(frozen=True)
class AuthUser:
    id: str
    email: Optional[str] = None

@dataclass(frozen=True)
class KeyPress:
    key: str
    ctrl: bool = False
    shift: bool = False
    alt: bool = False
