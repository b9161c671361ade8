import logging
from typing import Optional

from fastapi import APIRouter, Depends

from notes_api import config
from notes_api.exceptions import NoteNotFoundError
from notes_api.models.notes import NoteCreate, NoteOut, NotePatch, NoteUpdate
from notes_api.storage.backends import JsonFileBackend
from notes_api.storage.notes_store import Note, NotesStore
from notes_api.utils.auth import get_credential

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notes", tags=["notes"])

# read once per import; tests reload this module after changing the env
NOTES_FILE = config.notes_file()
ENFORCE_OWNERSHIP = config.enforce_ownership()
store = NotesStore(JsonFileBackend(NOTES_FILE))


def _get_visible_note(note_id: int, credential: str) -> Note:
    note = store.get_note(note_id)
    # a note owned by someone else looks exactly like a missing one
    if note is None or (ENFORCE_OWNERSHIP and note.user != credential):
        raise NoteNotFoundError(note_id)
    return note


@router.post("", status_code=204)
def create_note(payload: Optional[NoteCreate] = None, credential: str = Depends(get_credential)) -> None:
    if payload is None:
        # a POST without any body is an empty note
        payload = NoteCreate()
    user = payload.user if payload.user is not None else credential
    note = store.add_note(title=payload.title, content=payload.content, user=user)
    logger.info("Created note %d", note.id)
    return None


@router.get("", response_model=list[NoteOut])
def list_notes(credential: str = Depends(get_credential)) -> list[NoteOut]:
    notes = [n for n in store.list_notes() if n.user == credential]
    return [NoteOut(**n.to_dict()) for n in notes]


@router.get("/{note_id}", response_model=NoteOut)
def get_note(note_id: int, credential: str = Depends(get_credential)) -> NoteOut:
    note = _get_visible_note(note_id, credential)
    return NoteOut(**note.to_dict())


@router.put("/{note_id}", status_code=204)
def replace_note(note_id: int, payload: NoteUpdate, credential: str = Depends(get_credential)) -> None:
    _get_visible_note(note_id, credential)

    store.update_note(note_id, title=payload.title, content=payload.content, user=payload.user)
    logger.info("Replaced note %d", note_id)
    return None


@router.patch("/{note_id}", status_code=204)
def patch_note(note_id: int, payload: NotePatch, credential: str = Depends(get_credential)) -> None:
    existing = _get_visible_note(note_id, credential)

    store.update_note(
        note_id,
        title=payload.title if payload.title is not None else existing.title,
        content=payload.content if payload.content is not None else existing.content,
        user=payload.user if payload.user is not None else existing.user,
    )
    logger.info("Patched note %d", note_id)
    return None


@router.delete("/{note_id}", status_code=204)
def delete_note(note_id: int, credential: str = Depends(get_credential)) -> None:
    _get_visible_note(note_id, credential)

    store.delete_note(note_id)
    logger.info("Deleted note %d", note_id)
    return None
