# smartnotes/client/editor.py
from typing import Callable, Optional

from smartnotes.client.models import KeyPress, Note, NotePayload
from smartnotes.notes.models import TITLE_MAX, CONTENT_MAX
from smartnotes.notes.schemas import PLACEHOLDER_TITLE
from smartnotes.shared.text import word_count

class NoteEditor:
    """Modal form for creating or editing one note.

    Holds only its own form fields. Saving normalises the fields and hands a
    `NotePayload` to `on_save`; whether the dialog closes is up to the owner.
    """

    def __init__(
        self,
        note: Optional[Note] = None,
        on_save: Callable[[NotePayload], object] = lambda p: None,
        on_cancel: Callable[[], object] = lambda: None,
        is_loading: bool = False,
    ):
        self.note = note
        self.on_save = on_save
        self.on_cancel = on_cancel
        self.is_loading = is_loading
        self._title = ""
        self._content = ""
        if note:
            self.title = note.title or ""
            self.content = note.content or ""

    # inputs clip like maxLength
    @property
    def title(self) -> str:
        return self._title

    @title.setter
    def title(self, value: str):
        self._title = (value or "")[:TITLE_MAX]

    @property
    def content(self) -> str:
        return self._content

    @content.setter
    def content(self, value: str):
        self._content = (value or "")[:CONTENT_MAX]

    @property
    def is_edit(self) -> bool:
        return bool(self.note and self.note.id)

    @property
    def heading(self) -> str:
        return "Edit Note" if self.is_edit else "Create New Note"

    @property
    def mode_hint(self) -> str:
        return "Editing existing note" if self.is_edit else "Creating new note"

    @property
    def word_count(self) -> int:
        return word_count(self._content)

    @property
    def char_count(self) -> int:
        return len(self._content)

    @property
    def can_save(self) -> bool:
        return not self.is_loading and bool(self._title.strip() or self._content.strip())

    @property
    def can_cancel(self) -> bool:
        return not self.is_loading

    @property
    def save_label(self) -> str:
        return "Saving..." if self.is_loading else "Save Note"

    def save(self) -> Optional[NotePayload]:
        if self.is_loading:
            return None
        title = self._title.strip()
        content = self._content.strip()
        if not title and not content:
            return None
        payload = NotePayload(
            id=self.note.id if self.note else None,
            title=title or PLACEHOLDER_TITLE,
            content=content,
        )
        self.on_save(payload)
        return payload

    def cancel(self) -> None:
        self.on_cancel()

    def handle_key(self, press: KeyPress) -> bool:
        """Returns True when the key was consumed; callers then skip the default action."""
        if press.ctrl and press.key == "Enter":
            self.save()
            return True
        if press.key == "Escape":
            self.cancel()
            return True
        return False
