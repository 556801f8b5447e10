from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...infrastructure.db.mongo_connection import get_mongo_client

if TYPE_CHECKING:
    from ..base_container import BaseContainer

MONGO_BACKEND = "mongo"


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the database connection in the container.
        Nothing is registered when the in-memory store is configured.
        """
        settings = get_settings()
        if settings.store_backend != MONGO_BACKEND:
            return

        # Get MongoDB client manager instance
        mongo_client = get_mongo_client()

        # Register MongoDB client as singleton
        container.register_singleton("mongo_client", mongo_client)
