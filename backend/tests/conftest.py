import importlib

import pytest
from fastapi.testclient import TestClient


@pytest.fixture()
def client(tmp_path, monkeypatch):
    # isolate data dir per test
    monkeypatch.setenv("APP_DATA_DIR", str(tmp_path))
    monkeypatch.delenv("NOTES_FILE", raising=False)
    monkeypatch.delenv("NOTES_ENFORCE_OWNERSHIP", raising=False)

    # reload modules so that api/notes.py picks up new env vars
    import notes_api.api.notes
    import notes_api.main
    importlib.reload(notes_api.api.notes)
    importlib.reload(notes_api.main)

    return TestClient(notes_api.main.app)
