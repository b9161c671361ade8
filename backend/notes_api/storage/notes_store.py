import logging
import threading
from dataclasses import dataclass
from typing import Any, Optional

from notes_api.exceptions import NoteNotFoundError, PersistenceError
from notes_api.storage.backends import Backend

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Note:
    id: int
    title: str
    content: str
    user: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "user": self.user,
        }

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> "Note":
        return cls(
            id=int(raw["id"]),
            title=str(raw.get("title") or ""),
            content=str(raw.get("content") or ""),
            user=str(raw.get("user") or ""),
        )


class NotesStore:
    """Owns every note and mirrors the whole collection to a backend.

    Ids come from a counter persisted next to the notes, so an id freed by a
    delete is never handed out again. All read-modify-write sequences run
    under one lock, and in-memory state only changes after a successful save.

    The backend is read on first use rather than on construction. A failed
    load raises PersistenceError for that call and is retried on the next.
    """

    def __init__(self, backend: Backend):
        self.backend = backend
        self._lock = threading.RLock()
        self._notes: dict[int, Note] = {}
        self._next_id = 1
        self._loaded = False

    def _ensure_loaded(self) -> None:
        if self._loaded:
            return
        raw = self.backend.load()
        if raw is not None:
            self._notes, self._next_id = self._parse(raw)
            logger.info("Loaded %d notes (next id %d)", len(self._notes), self._next_id)
        self._loaded = True

    @staticmethod
    def _parse(raw: dict[str, Any]) -> tuple[dict[int, Note], int]:
        try:
            records = [Note.from_dict(n) for n in raw.get("notes", [])]
            # documents written before the counter existed only carry the notes
            stored_next_id = int(raw.get("next_id") or 0)
        except (KeyError, TypeError, ValueError) as exc:
            raise PersistenceError(f"Malformed notes document: {exc}") from exc

        next_id = max([stored_next_id] + [n.id + 1 for n in records] + [1])
        notes: dict[int, Note] = {}
        for note in records:
            if note.id in notes:
                # count-based ids from older files can collide after a delete
                logger.warning("Duplicate note id %d in stored notes; reassigning as %d", note.id, next_id)
                note = Note(id=next_id, title=note.title, content=note.content, user=note.user)
                next_id += 1
            notes[note.id] = note
        return notes, next_id

    def _commit(self, notes: dict[int, Note], next_id: int) -> None:
        document = {
            "next_id": next_id,
            "notes": [n.to_dict() for n in notes.values()],
        }
        try:
            self.backend.save(document)
        except PersistenceError:
            logger.exception("Saving %d notes failed; keeping previous state", len(notes))
            raise
        self._notes = notes
        self._next_id = next_id

    def list_notes(self) -> list[Note]:
        with self._lock:
            self._ensure_loaded()
            return list(self._notes.values())

    def get_note(self, note_id: int) -> Optional[Note]:
        with self._lock:
            self._ensure_loaded()
            return self._notes.get(note_id)

    def add_note(self, title: str, content: str, user: str) -> Note:
        with self._lock:
            self._ensure_loaded()
            note = Note(id=self._next_id, title=title, content=content, user=user)
            notes = dict(self._notes)
            notes[note.id] = note
            self._commit(notes, self._next_id + 1)
            return note

    def update_note(self, note_id: int, title: str, content: str, user: str) -> Note:
        with self._lock:
            self._ensure_loaded()
            if note_id not in self._notes:
                raise NoteNotFoundError(note_id)
            note = Note(id=note_id, title=title, content=content, user=user)
            notes = dict(self._notes)
            notes[note_id] = note
            self._commit(notes, self._next_id)
            return note

    def delete_note(self, note_id: int) -> None:
        with self._lock:
            self._ensure_loaded()
            if note_id not in self._notes:
                raise NoteNotFoundError(note_id)
            notes = dict(self._notes)
            del notes[note_id]
            self._commit(notes, self._next_id)
