# smartnotes/notes/api.py
from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from smartnotes.shared.db import get_db
from smartnotes.shared.auth import current_user_id
from smartnotes.notes.schemas import NoteCreate, NoteUpdate, SummaryUpdate, NoteOut, NoteList
from smartnotes.notes.service import (
    NoteNotFound,
    NoteAccessDenied,
    create_note,
    list_notes,
    get_note,
    update_note,
    set_summary,
    delete_note,
)

router = APIRouter(prefix="/notes", tags=["Notes"])

def _row_errors(fn, *args):
    try:
        return fn(*args)
    except NoteNotFound:
        raise HTTPException(404, "Note not found")
    except NoteAccessDenied:
        raise HTTPException(403, "Not allowed to access this note")
    except ValueError as e:
        raise HTTPException(422, str(e))

@router.get("", response_model=NoteList)
def list_all(
    search: str | None = Query(None, description="Case-insensitive match on title, content, summary"),
    uid: str = Depends(current_user_id),
    db: Session = Depends(get_db),
):
    items = list_notes(db, uid, search)
    return {"items": items, "count": len(items)}

@router.post("", response_model=NoteOut, status_code=201)
def create(payload: NoteCreate, uid: str = Depends(current_user_id), db: Session = Depends(get_db)):
    return create_note(db, uid, payload)

@router.get("/{note_id}", response_model=NoteOut)
def get_one(note_id: str, uid: str = Depends(current_user_id), db: Session = Depends(get_db)):
    return _row_errors(get_note, db, uid, note_id)

@router.patch("/{note_id}", response_model=NoteOut)
def patch(note_id: str, payload: NoteUpdate, uid: str = Depends(current_user_id), db: Session = Depends(get_db)):
    return _row_errors(update_note, db, uid, note_id, payload)

@router.put("/{note_id}/summary", response_model=NoteOut)
def put_summary(note_id: str, payload: SummaryUpdate, uid: str = Depends(current_user_id), db: Session = Depends(get_db)):
    return _row_errors(set_summary, db, uid, note_id, payload.summary)

@router.delete("/{note_id}", status_code=204)
def delete(note_id: str, uid: str = Depends(current_user_id), db: Session = Depends(get_db)):
    _row_errors(delete_note, db, uid, note_id)
    return
