import pytest
import sqlite3
from uuid import uuid4

from models.category import Category
from models.page import PageRequest
from repositories.categories import CategoryRepository
from services.errors import CategoryNotFoundError


@pytest.fixture
def repository(db_manager_with_schema):
    return CategoryRepository(db_manager_with_schema)


def _new(name, description=None):
    return Category(id=None, uuid=uuid4(), name=name, description=description)


class TestCategoryRepository:
    """Tests for CategoryRepository."""

    def test_save_inserts_new_category(self, repository):
        """Test that saving a category without id inserts it and assigns an id."""
        category = _new("Groceries", "Food and groceries")

        saved = repository.save(category)

        assert saved.id is not None
        assert saved.id > 0
        assert saved.uuid == category.uuid
        assert saved.name == "Groceries"
        assert repository.count() == 1

    def test_save_updates_existing_category(self, repository):
        saved = repository.save(_new("Old", "Old description"))
        saved.name = "New"
        saved.description = None

        repository.save(saved)

        found = repository.find_by_uuid(saved.uuid)
        assert found.id == saved.id
        assert found.name == "New"
        assert found.description is None
        assert repository.count() == 1

    def test_save_update_of_missing_row_raises(self, repository):
        ghost = Category(id=9999, uuid=uuid4(), name="Ghost")

        with pytest.raises(CategoryNotFoundError) as exc_info:
            repository.save(ghost)

        assert exc_info.value.field == "id"
        assert exc_info.value.value == 9999

    def test_duplicate_name_raises_integrity_error(self, repository):
        repository.save(_new("Duplicate"))

        with pytest.raises(sqlite3.IntegrityError):
            repository.save(_new("Duplicate"))

    def test_duplicate_uuid_raises_integrity_error(self, repository):
        first = repository.save(_new("First"))

        with pytest.raises(sqlite3.IntegrityError):
            repository.save(Category(id=None, uuid=first.uuid, name="Second"))

    def test_find_by_uuid(self, repository):
        saved = repository.save(_new("Transport", "Transportation"))

        found = repository.find_by_uuid(saved.uuid)

        assert found == saved

    def test_find_by_uuid_not_found(self, repository):
        assert repository.find_by_uuid(uuid4()) is None

    def test_find_by_name_case_sensitive(self, repository):
        repository.save(_new("Shopping"))

        assert repository.find_by_name("Shopping") is not None
        assert repository.find_by_name("shopping") is None

    def test_find_by_description_returns_first_match(self, repository):
        first = repository.save(_new("One", "Shared"))
        repository.save(_new("Two", "Shared"))

        found = repository.find_by_description("Shared")

        assert found.id == first.id

    def test_find_by_description_not_found(self, repository):
        repository.save(_new("Something"))

        assert repository.find_by_description("Something") is None

    def test_find_all_empty(self, repository):
        page = repository.find_all(PageRequest.of(0, 10))

        assert page.content == []
        assert page.total_elements == 0
        assert page.total_pages == 0

    def test_find_all_orders_by_name_and_slices(self, repository):
        for name in ["Zebra", "Alpha", "Beta", "Gamma"]:
            repository.save(_new(name))

        first = repository.find_all(PageRequest.of(0, 3))
        second = repository.find_all(PageRequest.of(1, 3))

        assert [c.name for c in first] == ["Alpha", "Beta", "Gamma"]
        assert [c.name for c in second] == ["Zebra"]
        assert first.total_elements == second.total_elements == 4

    def test_find_all_past_the_end(self, repository):
        repository.save(_new("Only"))

        page = repository.find_all(PageRequest.of(5, 10))

        assert page.content == []
        assert page.total_elements == 1

    def test_delete(self, repository):
        keep = repository.save(_new("Keep"))
        gone = repository.save(_new("Delete"))

        repository.delete(gone)

        assert repository.find_by_uuid(gone.uuid) is None
        assert repository.find_by_uuid(keep.uuid) is not None
        assert repository.count() == 1

    def test_special_characters_round_trip(self, repository):
        saved = repository.save(_new("Food & Drink", "Cookbooks, drinks, & dining"))

        found = repository.find_by_name("Food & Drink")

        assert found.description == "Cookbooks, drinks, & dining"
        assert found.uuid == saved.uuid
