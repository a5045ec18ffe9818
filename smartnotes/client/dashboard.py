# smartnotes/client/dashboard.py
import asyncio
import logging
from dataclasses import dataclass
from typing import Literal, Optional

from smartnotes.client.backend import BackendError, NotesBackend
from smartnotes.client.card import NoteCard
from smartnotes.client.editor import NoteEditor
from smartnotes.client.models import AuthUser, Note, NotePayload
from smartnotes.client.notify import Notifier
from smartnotes.shared.text import matches_search, word_count

logger = logging.getLogger(__name__)

EmptyState = Literal["no_notes", "no_matches"]

@dataclass(frozen=True)
class Stats:
    total: int
    summarized: int
    words: int

@dataclass(frozen=True)
class DashboardSnapshot:
    notes: tuple[Note, ...]
    visible: tuple[Note, ...]
    search_term: str
    loading: bool
    saving: bool
    generating: frozenset[str]
    editor_open: bool
    editing: Optional[Note]
    stats: Stats
    empty_state: Optional[EmptyState]

def compute_stats(notes) -> Stats:
    return Stats(
        total=len(notes),
        summarized=sum(1 for n in notes if n.summary),
        words=sum(word_count(n.content) for n in notes),
    )

class Dashboard:
    """Owns the note list and every mutation of it.

    Components never touch the list; they get immutable notes and call back
    into the command methods below. The list only changes after a backend
    call has completed successfully.
    """

    def __init__(self, backend: NotesBackend, user: Optional[AuthUser], notifier: Notifier):
        self.backend = backend
        self.user = user
        self.notifier = notifier
        self._notes: list[Note] = []
        self.search_term = ""
        self.loading = True
        self._saving = False
        self._generating: set[str] = set()
        self.editor: Optional[NoteEditor] = None
        self._tasks: set[asyncio.Task] = set()

    # ---- derived state ----
    @property
    def notes(self) -> tuple[Note, ...]:
        return tuple(self._notes)

    @property
    def saving(self) -> bool:
        return self._saving

    def _set_saving(self, value: bool) -> None:
        self._saving = value
        if self.editor:
            self.editor.is_loading = value

    @property
    def visible_notes(self) -> tuple[Note, ...]:
        return tuple(n for n in self._notes if matches_search(n, self.search_term))

    @property
    def stats(self) -> Stats:
        return compute_stats(self._notes)

    @property
    def empty_state(self) -> Optional[EmptyState]:
        if self.visible_notes:
            return None
        return "no_notes" if not self._notes else "no_matches"

    def is_generating(self, note_id: str) -> bool:
        return note_id in self._generating

    def snapshot(self) -> DashboardSnapshot:
        return DashboardSnapshot(
            notes=self.notes,
            visible=self.visible_notes,
            search_term=self.search_term,
            loading=self.loading,
            saving=self._saving,
            generating=frozenset(self._generating),
            editor_open=self.editor is not None,
            editing=self.editor.note if self.editor else None,
            stats=self.stats,
            empty_state=self.empty_state,
        )

    @property
    def greeting(self) -> str:
        name = (self.user.email or "").split("@")[0] if self.user else ""
        return f"Welcome back, {name or 'User'}"

    def set_search_term(self, term: str) -> None:
        self.search_term = term or ""

    # ---- components ----
    def open_editor(self, note: Optional[Note] = None) -> NoteEditor:
        self.editor = NoteEditor(
            note=note,
            on_save=self.request_save,
            on_cancel=self.close_editor,
            is_loading=self._saving,
        )
        return self.editor

    def close_editor(self) -> None:
        self.editor = None

    def cards(self) -> list[NoteCard]:
        return [
            NoteCard(
                note,
                on_edit=self.open_editor,
                on_delete=self.request_delete,
                on_summarize=self.request_summary,
                notifier=self.notifier,
                is_generating_summary=self.is_generating(note.id),
            )
            for note in self.visible_notes
        ]

    # ---- fire-and-forget command callbacks ----
    def _spawn(self, coro) -> asyncio.Task:
        task = asyncio.get_running_loop().create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def request_save(self, payload: NotePayload) -> Optional[asyncio.Task]:
        # one save in flight; the flag is up before the task first runs
        if self._saving:
            logger.info("save already in progress, ignoring")
            return None
        task = self._spawn(self.save_note(payload))
        self._set_saving(True)
        return task

    def request_delete(self, note_id: str) -> asyncio.Task:
        return self._spawn(self.delete_note(note_id))

    def request_summary(self, note_id: str, title: str, content: str) -> asyncio.Task:
        return self._spawn(self.generate_summary(note_id, title, content))

    async def drain(self) -> None:
        """Wait for every in-flight command, including ones started meanwhile."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks))

    # ---- operations ----
    async def fetch_notes(self) -> bool:
        if not self.user:
            return False
        try:
            self._notes = await self.backend.list_notes()
            return True
        except BackendError as e:
            self.notifier.error("Error fetching notes", e.message)
        except Exception:
            logger.exception("Error fetching notes")
            self.notifier.error("Error", "Failed to load notes")
        finally:
            self.loading = False
        return False

    async def save_note(self, payload: NotePayload) -> bool:
        self._set_saving(True)
        try:
            if not self.user:
                return False
            if not payload.title.strip() and not payload.content.strip():
                return False
            if payload.id:
                # title/content only; summary is left as stored
                saved = await self.backend.update_note(payload.id, payload.title, payload.content)
                self._notes = [
                    n.merged(**saved.model_dump()) if n.id == payload.id else n
                    for n in self._notes
                ]
                self.notifier.notify("Note updated", "Your changes have been saved successfully.")
            else:
                saved = await self.backend.insert_note(payload.title, payload.content)
                self._notes = [saved, *self._notes]
                self.notifier.notify("Note created", "Your new note has been saved successfully.")
            self.close_editor()
            return True
        except BackendError as e:
            logger.warning("Error saving note: %s", e.message)
            self.notifier.error("Error saving note", "Please try again")
            return False
        except Exception:
            logger.exception("Error saving note")
            self.notifier.error("Error saving note", "Please try again")
            return False
        finally:
            self._set_saving(False)

    async def delete_note(self, note_id: str) -> bool:
        if not self.user:
            return False
        try:
            await self.backend.delete_note(note_id)
        except BackendError as e:
            logger.warning("Error deleting note: %s", e.message)
            self.notifier.error("Error deleting note", "Please try again")
            return False
        except Exception:
            logger.exception("Error deleting note")
            self.notifier.error("Error deleting note", "Please try again")
            return False
        self._notes = [n for n in self._notes if n.id != note_id]
        self.notifier.notify("Note deleted", "The note has been removed successfully.")
        return True

    async def generate_summary(self, note_id: str, title: str, content: str) -> bool:
        if not content.strip():
            self.notifier.error("Cannot summarize", "Please add some content to the note first.")
            return False
        if note_id in self._generating:
            # one request per note at a time; later ones are dropped
            logger.info("summary already in progress for %s", note_id)
            return False

        self._generating.add(note_id)
        try:
            data = await self.backend.summarize(title, content)
            summary = (data or {}).get("summary")
            if not summary:
                raise ValueError("No summary received")
            await self.backend.set_summary(note_id, summary)
            self._notes = [
                n.merged(summary=summary) if n.id == note_id else n
                for n in self._notes
            ]
            self.notifier.notify("Summary generated!", "AI has successfully summarized your note.")
            return True
        except (BackendError, ValueError) as e:
            logger.warning("Error generating summary: %s", e)
            self.notifier.error("Failed to generate summary", str(e) or "Please try again later")
            return False
        except Exception as e:
            logger.exception("Error generating summary")
            self.notifier.error("Failed to generate summary", str(e) or "Please try again later")
            return False
        finally:
            self._generating.discard(note_id)
