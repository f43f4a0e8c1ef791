"""Pydantic schemas exchanged at the category service boundary."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from models.category import Category


class CategoryDto(BaseModel):
    """Public view of a category. The internal row id is never included."""

    uuid: UUID
    name: str
    description: Optional[str] = None


class CreateCategoryRequest(BaseModel):
    """Payload for creating a category or overwriting an existing one."""

    name: str
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Category name cannot be empty")
        return value

    @classmethod
    def from_category(cls, category: Category) -> "CreateCategoryRequest":
        """Build a payload carrying the mutable fields of an existing category."""
        return cls(name=category.name, description=category.description)
