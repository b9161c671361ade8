from __future__ import annotations


class NotesError(Exception):
    """Base class for errors raised by the notes service."""

    def __init__(self, message: str = "Notes service error"):
        self.message = message
        super().__init__(message)


class NoteNotFoundError(NotesError):
    def __init__(self, note_id: int):
        self.note_id = note_id
        super().__init__(f"Note with ID {note_id} was not found.")


class PersistenceError(NotesError):
    """Durable storage could not be read or written.

    The message is meant for logs only; HTTP clients get a generic 500.
    """

    def __init__(self, message: str = "Note storage operation failed"):
        super().__init__(message)
