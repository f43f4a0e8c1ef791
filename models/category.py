"""Category model for organizing books in the library."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID


@dataclass
class Category:
    """Represents a book category as stored in the database.

    Attributes:
        id: Internal row identifier, None until the category is saved.
        uuid: Public identifier, stable for the lifetime of the category.
        name: Category name (unique).
        description: Optional description of what belongs in this category.
    """

    id: Optional[int]
    uuid: UUID
    name: str
    description: Optional[str] = None
