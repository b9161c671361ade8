import logging
import sys

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from notes_api import config
from notes_api.api import notes
from notes_api.exceptions import NoteNotFoundError, PersistenceError

logger = logging.getLogger(__name__)


def setup_logging() -> None:
    logging.basicConfig(
        level=config.log_level(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


setup_logging()

app = FastAPI(title="Notes API")
app.include_router(notes.router)


@app.exception_handler(NoteNotFoundError)
async def handle_note_not_found(request: Request, exc: NoteNotFoundError) -> JSONResponse:
    return JSONResponse(status_code=404, content={"detail": exc.message})


@app.exception_handler(PersistenceError)
async def handle_persistence_error(request: Request, exc: PersistenceError) -> JSONResponse:
    # exc.message may name file paths; keep it in the log only
    logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=500, content={"detail": "Note storage is unavailable"})


@app.get("/health")
def health():
    return {"ok": True}
