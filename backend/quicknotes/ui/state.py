"""
QuickNotes UI — View State and Controller
===========================================

What:  The notes page's behavior, independent of how it is drawn: one explicit
       state object plus the three user actions (load, add, delete).
How:   NotesController talks to the HTTP API through an httpx.AsyncClient and
       replaces NotesViewState after each response (fetch → replace → render).
Who:   Drives any renderer via the `on_change` callback; the browser page in
       static/index.html implements the same contract in JavaScript.

Behavior contract:
    - One busy flag shared by load/add/delete. While it is set every mutating
      control is disabled and further actions are ignored.
    - No optimistic updates: `notes` changes only on a successful full fetch,
      which follows every successful add or delete.
    - Each failure sets one generic message; nothing is retried.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Callable, List, Optional

import httpx
from pydantic import BaseModel, Field, TypeAdapter

from quicknotes.schemas.note import REQUIRED_FIELDS_MESSAGE, NoteResponse

logger = logging.getLogger(__name__)

NOTES_PATH = "/api/notes"

LOAD_FAILED_MESSAGE = "Failed to load notes. Please try again."
ADD_FAILED_MESSAGE = "Failed to add note. Please try again."
DELETE_FAILED_MESSAGE = "Failed to delete note. Please try again."

_NOTE_LIST = TypeAdapter(List[NoteResponse])


class NotesViewState(BaseModel):
    """Everything the page shows. Replaced field by field, never patched item by item."""
    notes: List[NoteResponse] = Field(default_factory=list)
    title: str = ""
    content: str = ""
    busy: bool = False
    error: Optional[str] = None


class NotesController:
    """
    Owns a NotesViewState and performs the page's actions against the API.

    Args:
        client:    AsyncClient whose base_url points at the notes backend
        on_change: Called with the state after every change (render hook)
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        on_change: Optional[Callable[[NotesViewState], None]] = None,
    ):
        self._client = client
        self._on_change = on_change
        self.state = NotesViewState()

    # ── Derived view flags ────────────────────────────────────────────────

    @property
    def controls_disabled(self) -> bool:
        """Inputs, the add button and every delete button."""
        return self.state.busy

    @property
    def show_loading(self) -> bool:
        return self.state.busy

    @property
    def show_empty(self) -> bool:
        return not self.state.notes and not self.state.busy

    # ── Input ─────────────────────────────────────────────────────────────

    def set_title(self, value: str) -> None:
        if self.controls_disabled:
            return
        self.state.title = value
        self._notify()

    def set_content(self, value: str) -> None:
        if self.controls_disabled:
            return
        self.state.content = value
        self._notify()

    # ── Actions ───────────────────────────────────────────────────────────

    async def load(self) -> None:
        """Fetch the full list (initial mount, or a manual refresh)."""
        if self.state.busy:
            return
        async with self._busy():
            await self._fetch_notes()

    async def add_note(self) -> None:
        """
        Create a note from the current inputs.

        Blank title or content (after trimming) sets the required-fields
        message and sends nothing. On success the inputs are cleared and the
        list re-fetched; on failure the inputs are kept.
        """
        if self.state.busy:
            return
        title, content = self.state.title, self.state.content
        if not title.strip() or not content.strip():
            self.state.error = REQUIRED_FIELDS_MESSAGE
            self._notify()
            return

        async with self._busy():
            try:
                response = await self._client.post(
                    NOTES_PATH, json={"title": title, "content": content}
                )
                response.raise_for_status()
            except httpx.HTTPError as exc:
                logger.warning("Adding note failed: %s", exc)
                self.state.error = ADD_FAILED_MESSAGE
                return

            self.state.title = ""
            self.state.content = ""
            self.state.error = None
            await self._fetch_notes()

    async def delete_note(self, note_id: int) -> None:
        """Delete one note, then re-fetch. The list is untouched on failure."""
        if self.state.busy:
            return
        async with self._busy():
            try:
                response = await self._client.delete(f"{NOTES_PATH}/{note_id}")
                response.raise_for_status()
            except httpx.HTTPError as exc:
                logger.warning("Deleting note %s failed: %s", note_id, exc)
                self.state.error = DELETE_FAILED_MESSAGE
                return

            await self._fetch_notes()

    # ── Internals ─────────────────────────────────────────────────────────

    async def _fetch_notes(self) -> None:
        try:
            response = await self._client.get(NOTES_PATH)
            response.raise_for_status()
            notes = _NOTE_LIST.validate_python(response.json())
        except (httpx.HTTPError, ValueError) as exc:
            # ValueError covers a non-JSON body and pydantic validation errors
            logger.warning("Loading notes failed: %s", exc)
            self.state.error = LOAD_FAILED_MESSAGE
            return

        self.state.notes = notes
        self.state.error = None

    @asynccontextmanager
    async def _busy(self) -> AsyncIterator[None]:
        self.state.busy = True
        self._notify()
        try:
            yield
        finally:
            self.state.busy = False
            self._notify()

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change(self.state)
