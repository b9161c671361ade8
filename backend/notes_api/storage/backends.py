import copy
import json
import os
from pathlib import Path
from typing import Any, Optional, Protocol

from notes_api.exceptions import PersistenceError


def _atomic_write_json(path: Path, data: dict[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    try:
        with tmp_path.open("w", encoding="utf-8") as f:
            json.dump(data, f, ensure_ascii=False, indent=2)
            f.flush()
            os.fsync(f.fileno())
        tmp_path.replace(path)
    except Exception:
        tmp_path.unlink(missing_ok=True)
        raise


class Backend(Protocol):
    def load(self) -> Optional[dict[str, Any]]: ...

    def save(self, document: dict[str, Any]) -> None: ...


class JsonFileBackend:
    """Whole-document JSON file; every save overwrites the file atomically."""

    def __init__(self, path: Path):
        self.path = path

    def load(self) -> Optional[dict[str, Any]]:
        if not self.path.exists():
            return None
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            raise PersistenceError(f"Could not read notes file {self.path}: {exc}") from exc
        if not isinstance(raw, dict):
            raise PersistenceError(f"Notes file {self.path} does not hold a JSON object")
        return raw

    def save(self, document: dict[str, Any]) -> None:
        try:
            _atomic_write_json(self.path, document)
        except (OSError, ValueError) as exc:
            # ValueError covers UnicodeEncodeError from lone surrogates
            raise PersistenceError(f"Could not write notes file {self.path}: {exc}") from exc


class MemoryBackend:
    def __init__(self, document: Optional[dict[str, Any]] = None):
        self.document = copy.deepcopy(document)

    def load(self) -> Optional[dict[str, Any]]:
        return copy.deepcopy(self.document)

    def save(self, document: dict[str, Any]) -> None:
        self.document = copy.deepcopy(document)
