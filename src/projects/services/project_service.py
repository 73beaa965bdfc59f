"""Project service - turns repository outcomes into user-facing failures."""

from src.projects.core.exceptions import ProjectNotFound
from src.projects.core.logging import get_logger
from src.projects.models import Project
from src.projects.repositories import ProjectRepository

logger = get_logger(__name__)


class ProjectService:
    """Sits between the menu and the repository.

    The repository reports a missing id as None/False; this is the only
    layer that turns that into ProjectNotFound. StoreFault from the
    repository propagates unchanged.
    """

    def __init__(self, project_repo: ProjectRepository):
        self.project_repo = project_repo

    def add_project(self, project: Project) -> Project:
        """Insert a project and return it with its generated id."""
        return self.project_repo.insert(project)

    def fetch_all_projects(self) -> list[Project]:
        """List every project (scalar fields only), ordered by id."""
        return self.project_repo.fetch_all()

    def fetch_project_by_id(self, project_id: int) -> Project:
        """Get a project with materials, steps and categories.

        Raises:
            ProjectNotFound: If no project has this id.
        """
        project = self.project_repo.fetch_by_id(project_id)
        if project is None:
            logger.info("Project not found", project_id=project_id)
            raise ProjectNotFound(project_id)
        return project

    def modify_project_details(self, project: Project) -> None:
        """Overwrite a project's scalar fields.

        Raises:
            ProjectNotFound: If no row was updated.
        """
        if not self.project_repo.update(project):
            raise ProjectNotFound(project.project_id)

    def delete_project(self, project_id: int) -> None:
        """Delete a project by id.

        Raises:
            ProjectNotFound: If no row was deleted.
            StoreFault: If child rows still reference the project.
        """
        if not self.project_repo.delete(project_id):
            raise ProjectNotFound(project_id)
