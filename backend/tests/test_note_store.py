"""
QuickNotes Backend — Note Store Tests
=======================================

What:  Tests for NoteStore (insert, list_all, delete_by_id).
How:   Mock sessions for failure translation; a real in-memory SQLite session
       for the id-assignment and delete-outcome behavior.

What we test:
    ✅ Insert flushes and returns the note with its database id
    ✅ Identical notes get distinct ids
    ✅ Delete reports REMOVED exactly once, then NOT_FOUND
    ✅ SQLAlchemy failures surface as DatabaseError with a generic message
"""

import pytest
from unittest.mock import MagicMock

from sqlalchemy.exc import OperationalError

from quicknotes.exceptions import DatabaseError
from quicknotes.services.note_store import DeleteOutcome, NoteStore


def _operational_error() -> OperationalError:
    return OperationalError("SELECT 1", {}, Exception("connection reset"))


class TestNoteStoreWithMockSession:
    """Store behavior against a mocked AsyncSession."""

    def setup_method(self):
        self.store = NoteStore()

    @pytest.mark.asyncio
    async def test_insert_adds_and_flushes(self, mock_db_session):
        note = await self.store.insert(mock_db_session, title="T", content="C")

        mock_db_session.add.assert_called_once_with(note)
        mock_db_session.flush.assert_awaited_once()
        assert note.title == "T"
        assert note.content == "C"

    @pytest.mark.asyncio
    async def test_insert_failure_raises_database_error(self, mock_db_session):
        mock_db_session.flush.side_effect = _operational_error()

        with pytest.raises(DatabaseError) as exc_info:
            await self.store.insert(mock_db_session, title="T", content="C")

        assert exc_info.value.message == "Failed to create note"
        assert "connection reset" not in exc_info.value.message

    @pytest.mark.asyncio
    async def test_list_all_returns_rows(self, mock_db_session):
        rows = [MagicMock(), MagicMock()]
        mock_result = MagicMock()
        mock_result.scalars.return_value.all.return_value = rows
        mock_db_session.execute.return_value = mock_result

        result = await self.store.list_all(mock_db_session)

        assert result == rows

    @pytest.mark.asyncio
    async def test_list_all_failure_raises_database_error(self, mock_db_session):
        mock_db_session.execute.side_effect = _operational_error()

        with pytest.raises(DatabaseError):
            await self.store.list_all(mock_db_session)

    @pytest.mark.asyncio
    async def test_delete_maps_rowcount_to_outcome(self, mock_db_session):
        mock_db_session.execute.return_value = MagicMock(rowcount=1)
        assert await self.store.delete_by_id(mock_db_session, 1) is DeleteOutcome.REMOVED

        mock_db_session.execute.return_value = MagicMock(rowcount=0)
        assert await self.store.delete_by_id(mock_db_session, 1) is DeleteOutcome.NOT_FOUND

    @pytest.mark.asyncio
    async def test_delete_failure_raises_database_error(self, mock_db_session):
        mock_db_session.execute.side_effect = _operational_error()

        with pytest.raises(DatabaseError) as exc_info:
            await self.store.delete_by_id(mock_db_session, 5)

        assert exc_info.value.context["note_id"] == 5


class TestNoteStoreWithDatabase:
    """Store behavior against a real (in-memory SQLite) database."""

    def setup_method(self):
        self.store = NoteStore()

    @pytest.mark.asyncio
    async def test_insert_assigns_distinct_ids(self, session_factory):
        async with session_factory() as session:
            first = await self.store.insert(session, title="Same", content="Same")
            second = await self.store.insert(session, title="Same", content="Same")
            await session.commit()

        assert isinstance(first.id, int)
        assert first.id != second.id

    @pytest.mark.asyncio
    async def test_list_all_orders_by_id(self, session_factory):
        async with session_factory() as session:
            for i in range(3):
                await self.store.insert(session, title=f"t{i}", content=f"c{i}")
            await session.commit()

        async with session_factory() as session:
            notes = await self.store.list_all(session)

        ids = [note.id for note in notes]
        assert ids == sorted(ids)
        assert [note.title for note in notes] == ["t0", "t1", "t2"]

    @pytest.mark.asyncio
    async def test_delete_removes_exactly_one(self, session_factory):
        async with session_factory() as session:
            keep = await self.store.insert(session, title="keep", content="k")
            drop = await self.store.insert(session, title="drop", content="d")
            await session.commit()

        async with session_factory() as session:
            assert await self.store.delete_by_id(session, drop.id) is DeleteOutcome.REMOVED
            await session.commit()

        async with session_factory() as session:
            assert await self.store.delete_by_id(session, drop.id) is DeleteOutcome.NOT_FOUND
            remaining = await self.store.list_all(session)

        assert [note.id for note in remaining] == [keep.id]
