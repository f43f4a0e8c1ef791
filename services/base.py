"""Base services container for dependency injection."""

from config import Config
from db.manager import DatabaseManager


class Services:
    """Container for all application services.

    This class provides a centralized way to access services and makes
    it easy to inject a test database.

    Args:
        config: Application configuration object.
        db_manager: Optional database manager for testing. If provided, the
            database settings in config are ignored.
    """

    def __init__(self, config: Config, db_manager=None):
        self.config = config
        self.db_manager = db_manager or DatabaseManager(config)

        # Lazy import to avoid circular dependencies
        from repositories.categories import CategoryRepository
        from mapping.categories import CategoryMapper
        from services.categories import CategoryService

        self.category_repository = CategoryRepository(self.db_manager)
        self.category_mapper = CategoryMapper()
        self.categories = CategoryService(
            self.category_repository, self.category_mapper
        )
