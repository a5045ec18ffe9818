import logging
from sqlalchemy.orm import Session
from sqlalchemy import select, desc, or_
from smartnotes.notes.models import Note
from smartnotes.notes.schemas import NoteCreate, NoteUpdate, PLACEHOLDER_TITLE

logger = logging.getLogger(__name__)

class NoteNotFound(LookupError):
    pass

class NoteAccessDenied(PermissionError):
    """Raised when a user addresses a row owned by someone else."""

def _owned(db: Session, user_id: str, note_id: str) -> Note:
    note = db.get(Note, note_id)
    if not note:
        raise NoteNotFound(note_id)
    if note.user_id != user_id:
        # reject, never filter: the caller learns the request was refused
        logger.warning("user %s denied access to note %s", user_id, note_id)
        raise NoteAccessDenied(note_id)
    return note

def create_note(db: Session, user_id: str, payload: NoteCreate) -> Note:
    note = Note(user_id=user_id, title=payload.title, content=payload.content)
    db.add(note)
    db.commit()
    db.refresh(note)
    logger.info("note %s created for %s", note.id, user_id)
    return note

def list_notes(db: Session, user_id: str, search: str | None = None) -> list[Note]:
    stmt = select(Note).where(Note.user_id == user_id)
    term = (search or "").strip()
    if term:
        # plain substring: % and _ in the term are literal
        stmt = stmt.where(or_(
            Note.title.icontains(term, autoescape=True),
            Note.content.icontains(term, autoescape=True),
            Note.summary.icontains(term, autoescape=True),
        ))
    stmt = stmt.order_by(desc(Note.updated_at))
    return list(db.scalars(stmt).all())

def get_note(db: Session, user_id: str, note_id: str) -> Note:
    return _owned(db, user_id, note_id)

def update_note(db: Session, user_id: str, note_id: str, payload: NoteUpdate) -> Note:
    note = _owned(db, user_id, note_id)
    title = note.title if payload.title is None else payload.title.strip()
    content = note.content if payload.content is None else payload.content.strip()
    if not title and not content:
        raise ValueError("title or content is required")
    note.title = title or PLACEHOLDER_TITLE
    note.content = content
    db.commit()
    db.refresh(note)
    return note

def set_summary(db: Session, user_id: str, note_id: str, summary: str) -> Note:
    note = _owned(db, user_id, note_id)
    note.summary = summary  # overwrite, never merge
    db.commit()
    db.refresh(note)
    logger.info("summary stored for note %s", note_id)
    return note

def delete_note(db: Session, user_id: str, note_id: str) -> None:
    note = _owned(db, user_id, note_id)
    db.delete(note)
    db.commit()
    logger.info("note %s deleted", note_id)
