"""Category repository: SQL access to the categories table."""

from typing import Optional
from uuid import UUID

from models.category import Category
from models.page import Page, PageRequest
from services.errors import CategoryNotFoundError

_CATEGORY_SELECT_FIELDS = "id, uuid, name, description"


def _row_to_category(row) -> Category:
    return Category(id=row[0], uuid=UUID(row[1]), name=row[2], description=row[3])


class CategoryRepository:
    """Reads and writes Category rows.

    Lookups return None when nothing matches; deciding whether that is an
    error is left to the caller.
    """

    def __init__(self, db_manager):
        """Initialize the repository.

        Args:
            db_manager: Database manager instance for database operations.
        """
        self.db_manager = db_manager

    def _find_one(self, column: str, value) -> Optional[Category]:
        with self.db_manager.connect() as conn:
            cursor = conn.execute(
                f"SELECT {_CATEGORY_SELECT_FIELDS} FROM categories "
                f"WHERE {column} = ? ORDER BY id LIMIT 1",
                (value,),
            )
            row = cursor.fetchone()

            if row:
                return _row_to_category(row)
            return None

    def find_by_uuid(self, uuid: UUID) -> Optional[Category]:
        """Get a single category by its public UUID.

        Args:
            uuid: The category UUID to find.

        Returns:
            Category object if found, None otherwise.
        """
        return self._find_one("uuid", str(uuid))

    def find_by_name(self, name: str) -> Optional[Category]:
        """Get a single category by name (case-sensitive)."""
        return self._find_one("name", name)

    def find_by_description(self, description: str) -> Optional[Category]:
        """Get the first category (lowest id) with exactly this description."""
        return self._find_one("description", description)

    def find_all(self, page_request: PageRequest) -> Page[Category]:
        """Get one page of categories ordered by name.

        Args:
            page_request: Which page to fetch and how large it is.

        Returns:
            Page of Category objects with the total category count.
        """
        with self.db_manager.connect() as conn:
            total = conn.execute("SELECT COUNT(*) FROM categories").fetchone()[0]
            cursor = conn.execute(
                f"SELECT {_CATEGORY_SELECT_FIELDS} FROM categories "
                "ORDER BY name, id LIMIT ? OFFSET ?",
                (page_request.size, page_request.offset),
            )
            rows = cursor.fetchall()

            return Page(
                content=[_row_to_category(row) for row in rows],
                request=page_request,
                total_elements=total,
            )

    def count(self) -> int:
        with self.db_manager.connect() as conn:
            return conn.execute("SELECT COUNT(*) FROM categories").fetchone()[0]

    def save(self, category: Category) -> Category:
        """Insert a new category or update an existing one.

        A category without an id is inserted; otherwise the row with that id
        gets the category's name and description.

        Args:
            category: Category to persist.

        Returns:
            The persisted Category, with id populated on insert.

        Raises:
            sqlite3.IntegrityError: If the name or UUID is already taken.
            CategoryNotFoundError: If an update targets a row that no longer exists.
        """
        with self.db_manager.connect() as conn:
            if category.id is None:
                cursor = conn.execute(
                    "INSERT INTO categories (uuid, name, description) VALUES (?, ?, ?)",
                    (str(category.uuid), category.name, category.description),
                )
                conn.commit()

                return Category(
                    id=cursor.lastrowid,
                    uuid=category.uuid,
                    name=category.name,
                    description=category.description,
                )

            cursor = conn.execute(
                "UPDATE categories SET name = ?, description = ? WHERE id = ?",
                (category.name, category.description, category.id),
            )
            conn.commit()

            if cursor.rowcount == 0:
                raise CategoryNotFoundError("id", category.id)

            return category

    def delete(self, category: Category) -> None:
        """Delete the row backing the given category."""
        with self.db_manager.connect() as conn:
            conn.execute("DELETE FROM categories WHERE id = ?", (category.id,))
            conn.commit()
