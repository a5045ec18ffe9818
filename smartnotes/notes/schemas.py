from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict, model_validator

from smartnotes.notes.models import TITLE_MAX, CONTENT_MAX

PLACEHOLDER_TITLE = "Untitled Note"

class NoteCreate(BaseModel):
    title: str = Field(default="", max_length=TITLE_MAX)
    content: str = Field(default="", max_length=CONTENT_MAX)

    @model_validator(mode="after")
    def _not_blank(self):
        # a note with neither title nor content is never stored
        self.title = self.title.strip()
        self.content = self.content.strip()
        if not self.title and not self.content:
            raise ValueError("title or content is required")
        if not self.title:
            self.title = PLACEHOLDER_TITLE
        return self

class NoteUpdate(BaseModel):
    title: Optional[str] = Field(default=None, max_length=TITLE_MAX)
    content: Optional[str] = Field(default=None, max_length=CONTENT_MAX)

class SummaryUpdate(BaseModel):
    summary: str = Field(min_length=1)

class NoteOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)
    id: str
    user_id: str
    title: str
    content: str
    summary: str | None = None
    created_at: datetime
    updated_at: datetime

class NoteList(BaseModel):
    items: List[NoteOut]
    count: int
