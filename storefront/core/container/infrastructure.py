"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Logging (structlog console adapter)
- Database (SQLAlchemy async engine)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from storefront.core.config import get_settings
from storefront.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from storefront.domain.protocols.logger_protocol import LoggerProtocol


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Get logger singleton (app-scoped).

    Renders JSON in testing/CI and production, colored console output in
    development. Level comes from settings.log_level.

    Returns:
        Logger implementing LoggerProtocol.
    """
    from storefront.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    return ConsoleAdapter(
        use_json=not settings.is_development,
        level="DEBUG" if settings.debug else settings.log_level,
    )


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns:
        Database bound to settings.database_url.

    Usage:
        async with get_database().get_session() as session:
            repo = get_customer_repository(session)
    """
    settings = get_settings()
    return Database(database_url=settings.database_url, echo=settings.db_echo)
