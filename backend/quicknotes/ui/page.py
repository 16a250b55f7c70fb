"""
QuickNotes UI — Page Route
============================

What:  Serves the single notes page at GET /.
How:   The page is a static HTML file shipped inside the package; its script
       calls /api/notes on the same origin, so no CORS setup is needed.

The script in index.html repeats the behavior of ui.state.NotesController
(required-field check, shared busy flag, re-fetch after every mutation).
Only the Python controller is covered by tests; the script is not.
"""

from functools import lru_cache
from importlib import resources

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

router = APIRouter(tags=["UI"])


@lru_cache(maxsize=1)
def load_page() -> str:
    return resources.files("quicknotes").joinpath("static/index.html").read_text(encoding="utf-8")


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def notes_page() -> HTMLResponse:
    return HTMLResponse(content=load_page())
