# smartnotes/client/card.py
from typing import Callable, Optional

from smartnotes.client.models import Note
from smartnotes.client.notify import Notifier
from smartnotes.notes.schemas import PLACEHOLDER_TITLE
from smartnotes.shared.text import word_count

PREVIEW_CHARS = 200

def truncate(text: str, max_length: int) -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."

class NoteCard:
    """Read-only display of one note plus edit/delete/summarize affordances."""

    def __init__(
        self,
        note: Note,
        on_edit: Callable[[Note], object],
        on_delete: Callable[[str], object],
        on_summarize: Callable[[str, str, str], object],
        notifier: Notifier,
        is_generating_summary: bool = False,
    ):
        self.note = note
        self.on_edit = on_edit
        self.on_delete = on_delete
        self.on_summarize = on_summarize
        self.notifier = notifier
        self.is_generating_summary = is_generating_summary
        self.expanded = False

    @property
    def display_title(self) -> str:
        return self.note.title or PLACEHOLDER_TITLE

    @property
    def is_truncatable(self) -> bool:
        return len(self.note.content) > PREVIEW_CHARS

    @property
    def content_preview(self) -> str:
        if self.expanded:
            return self.note.content
        return truncate(self.note.content, PREVIEW_CHARS)

    @property
    def toggle_label(self) -> Optional[str]:
        if not self.is_truncatable:
            return None
        return "Show less" if self.expanded else "Read more"

    def toggle_expanded(self) -> bool:
        self.expanded = not self.expanded
        return self.expanded

    @property
    def summary_block(self) -> Optional[str]:
        return self.note.summary or None

    @property
    def updated_label(self) -> str:
        d = self.note.updated_at
        return f"{d.strftime('%b')} {d.day}, {d.year}"

    @property
    def word_count(self) -> int:
        return word_count(self.note.content)

    @property
    def summarize_disabled(self) -> bool:
        return self.is_generating_summary

    @property
    def summarize_label(self) -> str:
        if self.is_generating_summary:
            return "Generating..."
        return "Regenerate Summary" if self.note.summary else "Generate Summary"

    def edit(self):
        return self.on_edit(self.note)

    def delete(self):
        return self.on_delete(self.note.id)

    def summarize(self):
        if self.is_generating_summary:
            return None
        if not self.note.content.strip():
            self.notifier.error("Cannot summarize", "Please add some content to the note first.")
            return None
        return self.on_summarize(self.note.id, self.note.title, self.note.content)
