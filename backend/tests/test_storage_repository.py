"""
PhotoStudio Backend — Storage Access Layer Tests
==================================================

What:  Tests for EntityRepository / Storage against a real in-memory SQLite store.

What we test:
    ✅ create → list grows by exactly one, fields preserved, id generated
    ✅ client-supplied id / created_at are never written
    ✅ update changes only the patched field; absent id → None, no row created
    ✅ empty patch returns the current row unchanged
    ✅ delete is idempotent and removes the row from list
    ✅ ids outside the INTEGER key range are misses, never driver errors
    ✅ surrounding whitespace in text fields is stored as sent
    ✅ store faults and timeouts surface as StorageError
"""

import asyncio
from datetime import date

import pytest

from photostudio.exceptions import StorageError
from photostudio.schemas.entities import MessageCreate, PortfolioItemUpdate


PORTFOLIO_ITEM = {
    "title": "Golden Hour",
    "description": "Couple portrait at sunset",
    "image_url": "https://res.cloudinary.com/demo/image/upload/v1/golden.jpg",
    "category": "portraits",
}


class TestCreateAndList:

    @pytest.mark.asyncio
    async def test_list_empty_table(self, storage):
        assert await storage.contacts.list() == []

    @pytest.mark.asyncio
    async def test_create_then_list_contains_one_more(self, storage):
        before = await storage.messages.list()

        row = await storage.messages.create({"sender": "A", "body": "hi"})

        after = await storage.messages.list()
        assert len(after) == len(before) + 1
        assert row.id is not None
        assert [m.id for m in after].count(row.id) == 1
        stored = next(m for m in after if m.id == row.id)
        assert stored.sender == "A"
        assert stored.body == "hi"
        assert stored.email is None

    @pytest.mark.asyncio
    async def test_create_accepts_insert_model(self, storage):
        row = await storage.messages.create(MessageCreate(sender="B", body="hello"))
        assert row.sender == "B"
        assert row.created_at is not None

    @pytest.mark.asyncio
    async def test_create_ignores_client_id(self, storage):
        first = await storage.messages.create({"sender": "A", "body": "one"})
        second = await storage.messages.create({"id": first.id, "sender": "A", "body": "two"})

        assert second.id != first.id
        assert len(await storage.messages.list()) == 2

    @pytest.mark.asyncio
    async def test_create_booking_preserves_date(self, storage):
        row = await storage.bookings.create({
            "name": "Dana",
            "email": "dana@example.com",
            "event_type": "wedding",
            "event_date": "2026-12-05",
        })
        rows = await storage.bookings.list()
        assert rows[0].id == row.id
        assert rows[0].event_date == date(2026, 12, 5)
        assert rows[0].phone is None

    @pytest.mark.asyncio
    async def test_ids_are_distinct(self, storage):
        ids = {
            (await storage.contacts.create({
                "name": f"n{i}",
                "email": f"n{i}@example.com",
                "subject": "s",
                "message": "m",
            })).id
            for i in range(3)
        }
        assert len(ids) == 3


    @pytest.mark.asyncio
    async def test_surrounding_whitespace_is_kept(self, storage):
        row = await storage.messages.create({"sender": " A ", "subject": "\tRe: June", "body": "hi\n\n"})
        [stored] = await storage.messages.list()
        assert (row.sender, row.subject, row.body) == (" A ", "\tRe: June", "hi\n\n")
        assert (stored.sender, stored.subject, stored.body) == (" A ", "\tRe: June", "hi\n\n")


class TestUsers:

    @pytest.mark.asyncio
    async def test_lookup_by_id_and_username(self, storage):
        user = await storage.users.create({"username": "admin", "password": "secret"})

        assert (await storage.users.get_by_id(user.id)).username == "admin"
        assert (await storage.users.get_by(username="admin")).id == user.id
        assert await storage.users.get_by(username="nobody") is None
        assert await storage.users.get_by_id(user.id + 100) is None

    @pytest.mark.asyncio
    async def test_duplicate_username_is_storage_error(self, storage):
        await storage.users.create({"username": "admin", "password": "a"})
        with pytest.raises(StorageError) as exc_info:
            await storage.users.create({"username": "admin", "password": "b"})
        assert exc_info.value.context["entity"] == "user"
        assert exc_info.value.context["operation"] == "create"

    @pytest.mark.asyncio
    async def test_get_by_unknown_column(self, storage):
        with pytest.raises(ValueError, match="no column"):
            await storage.users.get_by(email="x@example.com")

    @pytest.mark.asyncio
    async def test_update_unsupported(self, storage):
        with pytest.raises(TypeError):
            await storage.users.update(1, {"username": "root"})


class TestPortfolioUpdate:

    @pytest.mark.asyncio
    async def test_update_changes_only_patched_field(self, storage):
        item = await storage.portfolio_items.create(PORTFOLIO_ITEM)

        updated = await storage.portfolio_items.update(item.id, {"title": "Blue Hour"})

        assert updated.id == item.id
        assert updated.title == "Blue Hour"
        assert updated.description == PORTFOLIO_ITEM["description"]
        assert updated.image_url == PORTFOLIO_ITEM["image_url"]
        assert updated.category == PORTFOLIO_ITEM["category"]

        [stored] = await storage.portfolio_items.list()
        assert stored.title == "Blue Hour"
        assert stored.category == "portraits"

    @pytest.mark.asyncio
    async def test_update_can_clear_description(self, storage):
        item = await storage.portfolio_items.create(PORTFOLIO_ITEM)
        updated = await storage.portfolio_items.update(
            item.id, PortfolioItemUpdate.model_validate({"description": None})
        )
        assert updated.description is None
        assert updated.title == PORTFOLIO_ITEM["title"]

    @pytest.mark.asyncio
    async def test_update_absent_id_returns_none_and_creates_nothing(self, storage):
        assert await storage.portfolio_items.update(999, {"title": "Ghost"}) is None
        assert await storage.portfolio_items.list() == []

    @pytest.mark.asyncio
    async def test_empty_patch_returns_current_row(self, storage):
        item = await storage.portfolio_items.create(PORTFOLIO_ITEM)
        same = await storage.portfolio_items.update(item.id, {})
        assert same.id == item.id
        assert same.title == PORTFOLIO_ITEM["title"]

    @pytest.mark.asyncio
    async def test_patch_cannot_rewrite_id(self, storage):
        item = await storage.portfolio_items.create(PORTFOLIO_ITEM)
        updated = await storage.portfolio_items.update(item.id, {"id": 500, "category": "weddings"})
        assert updated.id == item.id
        assert await storage.portfolio_items.get_by_id(500) is None


class TestDelete:

    @pytest.mark.asyncio
    async def test_delete_is_idempotent(self, storage):
        row = await storage.messages.create({"sender": "A", "body": "hi"})

        assert await storage.messages.delete(row.id) is True
        assert await storage.messages.delete(row.id) is False
        assert row.id not in [m.id for m in await storage.messages.list()]

    @pytest.mark.asyncio
    async def test_delete_leaves_other_rows(self, storage):
        keep = await storage.messages.create({"sender": "A", "body": "keep"})
        drop = await storage.messages.create({"sender": "B", "body": "drop"})

        await storage.messages.delete(drop.id)

        assert [m.id for m in await storage.messages.list()] == [keep.id]


class TestKeyRange:
    """Ids no INTEGER key can hold are answered as misses without touching the store."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("entity_id", [0, -1, 2**31, 2**63])
    async def test_out_of_range_ids_are_absent(self, storage, entity_id):
        item = await storage.portfolio_items.create(PORTFOLIO_ITEM)

        assert await storage.portfolio_items.get_by_id(entity_id) is None
        assert await storage.portfolio_items.update(entity_id, {"title": "Ghost"}) is None
        assert await storage.portfolio_items.delete(entity_id) is False

        [stored] = await storage.portfolio_items.list()
        assert stored.id == item.id
        assert stored.title == PORTFOLIO_ITEM["title"]

    @pytest.mark.asyncio
    async def test_largest_key_is_still_queried(self, storage):
        assert await storage.messages.delete(2**31 - 1) is False
        assert await storage.messages.get_by_id(2**31 - 1) is None

    @pytest.mark.asyncio
    async def test_out_of_range_id_never_reaches_the_store(self, broken_storage):
        # broken_storage has no tables: any statement would raise StorageError
        assert await broken_storage.messages.delete(2**63) is False
        assert await broken_storage.messages.get_by_id(2**63) is None


class TestFaults:

    @pytest.mark.asyncio
    async def test_list_fault_raises_storage_error(self, broken_storage):
        with pytest.raises(StorageError) as exc_info:
            await broken_storage.messages.list()
        err = exc_info.value
        assert err.message == "A database error occurred. Please try again later."
        assert err.context["operation"] == "list"
        assert "error" in err.context

    @pytest.mark.asyncio
    async def test_timeout_raises_storage_error(self, storage):
        repo = storage.messages
        repo._timeout = 0.01

        async def slow():
            await asyncio.sleep(1)

        with pytest.raises(StorageError) as exc_info:
            await repo._run("list", slow)
        assert exc_info.value.context["error_type"] == "TimeoutError"

    @pytest.mark.asyncio
    async def test_ping(self, storage):
        assert await storage.ping() is True

