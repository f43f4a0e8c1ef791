"""Conversions between Category entities and their transfer shapes."""

from uuid import uuid4

from models.category import Category
from schemas.category import CategoryDto, CreateCategoryRequest


class CategoryMapper:
    """Maps categories to DTOs and request payloads to new categories."""

    def to_dto(self, category: Category) -> CategoryDto:
        return CategoryDto(
            uuid=category.uuid,
            name=category.name,
            description=category.description,
        )

    def to_entity(self, request: CreateCategoryRequest) -> Category:
        """Create an unsaved Category with a freshly generated UUID."""
        return Category(
            id=None,
            uuid=uuid4(),
            name=request.name,
            description=request.description,
        )
