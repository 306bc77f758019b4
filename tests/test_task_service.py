"""
Tests for owner-scoped task operations.
"""

import uuid

import pytest

from tasks.service import normalize_changes
from utils.errors import NotFoundError, ValidationError

ALICE = uuid.uuid4()
BOB = uuid.uuid4()


class TestCreateAndGet:
    @pytest.mark.asyncio
    async def test_round_trip(self, task_service):
        created = await task_service.create(ALICE, "Buy milk")
        fetched = await task_service.get(created.id, ALICE)

        assert fetched.id == created.id
        assert fetched.title == "Buy milk"
        assert fetched.description is None
        assert fetched.is_completed is False
        assert fetched.user_id == ALICE
        assert fetched.created_at is not None
        assert fetched.updated_at is not None

        await task_service.delete(created.id, ALICE)
        with pytest.raises(NotFoundError, match="Task not found"):
            await task_service.get(created.id, ALICE)

    @pytest.mark.asyncio
    async def test_get_accepts_string_id(self, task_service):
        created = await task_service.create(ALICE, "Buy milk", "2 litres")
        fetched = await task_service.get(str(created.id), ALICE)
        assert fetched.description == "2 litres"

    @pytest.mark.asyncio
    async def test_blank_title_rejected(self, task_service):
        with pytest.raises(ValidationError):
            await task_service.create(ALICE, "   ")

    @pytest.mark.asyncio
    @pytest.mark.parametrize("bad_id", ["42", "not-a-uuid", ""])
    async def test_malformed_id_is_not_found(self, task_service, bad_id):
        with pytest.raises(NotFoundError):
            await task_service.get(bad_id, ALICE)


class TestOwnership:
    @pytest.mark.asyncio
    async def test_other_user_cannot_see_update_or_delete(self, task_service):
        task = await task_service.create(ALICE, "Private")

        with pytest.raises(NotFoundError) as missing:
            await task_service.get(uuid.uuid4(), BOB)
        with pytest.raises(NotFoundError) as foreign:
            await task_service.get(task.id, BOB)
        assert missing.value.message == foreign.value.message

        with pytest.raises(NotFoundError):
            await task_service.update(task.id, BOB, {"title": "Hijacked"})
        with pytest.raises(NotFoundError):
            await task_service.delete(task.id, BOB)

        still_there = await task_service.get(task.id, ALICE)
        assert still_there.title == "Private"

    @pytest.mark.asyncio
    async def test_list_is_scoped_and_newest_first(self, task_service):
        for title in ("first", "second", "third"):
            await task_service.create(ALICE, title)
        await task_service.create(BOB, "bob's")

        tasks = await task_service.list_by_owner(ALICE)

        assert {t.title for t in tasks} == {"first", "second", "third"}
        stamps = [t.created_at for t in tasks]
        assert stamps == sorted(stamps, reverse=True)

    @pytest.mark.asyncio
    async def test_list_empty_for_new_user(self, task_service):
        assert await task_service.list_by_owner(uuid.uuid4()) == []


class TestUpdate:
    @pytest.mark.asyncio
    async def test_partial_update_leaves_other_fields(self, task_service):
        task = await task_service.create(ALICE, "Buy milk", "semi-skimmed")

        updated = await task_service.update(task.id, ALICE, {"is_completed": True})

        assert updated.is_completed is True
        assert updated.title == "Buy milk"
        assert updated.description == "semi-skimmed"

    @pytest.mark.asyncio
    async def test_legacy_and_canonical_flag_store_the_same(self, task_service):
        a = await task_service.create(ALICE, "a")
        b = await task_service.create(ALICE, "b")

        via_legacy = await task_service.update(a.id, ALICE, {"completed": True})
        via_canonical = await task_service.update(b.id, ALICE, {"is_completed": True})

        assert via_legacy.is_completed is via_canonical.is_completed is True

    @pytest.mark.asyncio
    async def test_completion_can_be_toggled_back(self, task_service):
        task = await task_service.create(ALICE, "toggle")
        await task_service.update(task.id, ALICE, {"is_completed": True})
        reopened = await task_service.update(task.id, ALICE, {"completed": False})
        assert reopened.is_completed is False

    @pytest.mark.asyncio
    async def test_description_can_be_cleared(self, task_service):
        task = await task_service.create(ALICE, "t", "details")
        updated = await task_service.update(task.id, ALICE, {"description": None})
        assert updated.description is None
        assert updated.title == "t"

    @pytest.mark.asyncio
    async def test_blank_title_rejected_on_update(self, task_service):
        task = await task_service.create(ALICE, "t")
        with pytest.raises(ValidationError):
            await task_service.update(task.id, ALICE, {"title": ""})

    @pytest.mark.asyncio
    async def test_non_boolean_flag_rejected(self, task_service):
        task = await task_service.create(ALICE, "t")
        with pytest.raises(ValidationError):
            await task_service.update(task.id, ALICE, {"is_completed": None})


class TestNormalizeChanges:
    def test_legacy_name_mapped(self):
        assert normalize_changes({"completed": True}) == {"is_completed": True}

    def test_canonical_wins_over_legacy(self):
        assert normalize_changes({"is_completed": False, "completed": True}) == {"is_completed": False}
        assert normalize_changes({"completed": True, "is_completed": False}) == {"is_completed": False}

    def test_unknown_and_protected_fields_dropped(self):
        changes = {"user_id": uuid.uuid4(), "id": uuid.uuid4(), "title": "x"}
        assert normalize_changes(changes) == {"title": "x"}
