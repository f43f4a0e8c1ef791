"""Category service: the application-level category operations."""

from uuid import UUID

from logger import get_logger
from models.page import Page, PageRequest
from schemas.category import CategoryDto, CreateCategoryRequest
from services.errors import CategoryNotFoundError

logger = get_logger()


class CategoryService:
    """Service for managing categories.

    Persistence is delegated to a repository and conversion to and from
    transfer objects to a mapper, so both can be swapped out in tests.
    """

    def __init__(self, repository, mapper):
        """Initialize the category service.

        Args:
            repository: CategoryRepository used for persistence.
            mapper: CategoryMapper used to build entities and DTOs.
        """
        self.repository = repository
        self.mapper = mapper

    def _get_by_uuid(self, uuid: UUID):
        category = self.repository.find_by_uuid(uuid)
        if category is None:
            logger.debug(f"No category with uuid {uuid}")
            raise CategoryNotFoundError("uuid", uuid)
        return category

    def save(self, payload: CreateCategoryRequest) -> CategoryDto:
        """Create a new category from a request payload.

        Args:
            payload: Name and description of the new category.

        Returns:
            DTO of the stored category, including its generated UUID.

        Raises:
            sqlite3.IntegrityError: If a category with this name already exists.
        """
        category = self.mapper.to_entity(payload)
        saved = self.repository.save(category)
        logger.info(f"Created category '{saved.name}' ({saved.uuid})")
        return self.mapper.to_dto(saved)

    def update(self, payload: CreateCategoryRequest, uuid: UUID) -> CategoryDto:
        """Overwrite the name and description of an existing category.

        Args:
            payload: New name and description.
            uuid: UUID of the category to update.

        Returns:
            DTO of the updated category.

        Raises:
            CategoryNotFoundError: If no category has this UUID.
        """
        category = self._get_by_uuid(uuid)
        category.name = payload.name
        category.description = payload.description

        self.repository.save(category)
        logger.info(f"Updated category {uuid}")
        return self.mapper.to_dto(category)

    def find_by_uuid(self, uuid: UUID) -> CategoryDto:
        """Get a category by UUID.

        Raises:
            CategoryNotFoundError: If no category has this UUID.
        """
        return self.mapper.to_dto(self._get_by_uuid(uuid))

    def find_by_name(self, name: str) -> CategoryDto:
        """Get a category by its exact name.

        Raises:
            CategoryNotFoundError: If no category has this name.
        """
        category = self.repository.find_by_name(name)
        if category is None:
            logger.debug(f"No category named '{name}'")
            raise CategoryNotFoundError("name", name)
        return self.mapper.to_dto(category)

    def find_by_description(self, description: str) -> CategoryDto:
        """Get a category by its exact description.

        Raises:
            CategoryNotFoundError: If no category has this description.
        """
        category = self.repository.find_by_description(description)
        if category is None:
            logger.debug(f"No category described as '{description}'")
            raise CategoryNotFoundError("description", description)
        return self.mapper.to_dto(category)

    def delete_by_uuid(self, uuid: UUID) -> None:
        """Delete the category with the given UUID.

        Raises:
            CategoryNotFoundError: If no category has this UUID.
        """
        category = self._get_by_uuid(uuid)
        self.repository.delete(category)
        logger.info(f"Deleted category '{category.name}' ({uuid})")

    def find_all(self, page_request: PageRequest) -> Page[CategoryDto]:
        """Get one page of categories as DTOs.

        Args:
            page_request: Page number and size.

        Returns:
            Page of CategoryDto objects with the total category count.
        """
        page = self.repository.find_all(page_request)
        return page.map(self.mapper.to_dto)
