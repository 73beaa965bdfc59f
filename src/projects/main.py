"""Process entry point: settings, logging, wiring, menu loop."""

from src.projects.cli import ProjectsApp
from src.projects.core.config import get_settings
from src.projects.core.db import TransactionScope, create_schema, dispose_engine, get_engine
from src.projects.core.logging import get_logger, setup_logging
from src.projects.repositories import ProjectRepository
from src.projects.services import ProjectService

logger = get_logger(__name__)


def create_app() -> ProjectsApp:
    """Wire engine -> transaction scope -> repository -> service -> menu."""
    settings = get_settings()
    engine = get_engine()
    if settings.database_create_schema:
        create_schema(engine)

    repository = ProjectRepository(TransactionScope(engine))
    return ProjectsApp(ProjectService(repository))


def main() -> None:
    settings = get_settings()
    setup_logging(settings.debug)
    logger.info(f"Starting {settings.app_name}", env=settings.app_env)

    try:
        create_app().run()
    except KeyboardInterrupt:
        logger.info("Interrupted")
    finally:
        dispose_engine()
        logger.info("Shutdown complete")


if __name__ == "__main__":
    main()
