"""Repository for the Project aggregate."""

from collections.abc import Callable
from typing import TypeVar

from sqlalchemy import Connection, delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError

from src.projects.core.db.transaction import TransactionScope
from src.projects.core.exceptions import GeneratedKeyMissing, StoreFault
from src.projects.core.logging import get_logger
from src.projects.models import Category, Material, Project, ProjectCategory, Step
from src.projects.repositories.rows import (
    category_from_row,
    material_from_row,
    project_from_row,
    project_params,
    step_from_row,
)

logger = get_logger(__name__)

T = TypeVar("T")

# Core tables behind the SQLModel classes; binding through their columns
# gives every parameter the column's declared type.
PROJECT_TABLE = Project.__table__  # type: ignore[attr-defined]
MATERIAL_TABLE = Material.__table__  # type: ignore[attr-defined]
STEP_TABLE = Step.__table__  # type: ignore[attr-defined]
CATEGORY_TABLE = Category.__table__  # type: ignore[attr-defined]
PROJECT_CATEGORY_TABLE = ProjectCategory.__table__  # type: ignore[attr-defined]


class ProjectRepository:
    """CRUD for projects, one transaction per call.

    Repositories handle data access only: they report "not affected" as
    False/None and leave the decision to raise to the service layer. Every
    SQLAlchemy error is rolled back by the transaction scope and surfaces
    here as StoreFault.
    """

    def __init__(self, scope: TransactionScope):
        self.scope = scope

    def _run(self, action: str, work: Callable[[Connection], T]) -> T:
        try:
            return self.scope.with_transaction(work)
        except SQLAlchemyError as e:
            logger.warning("Store fault, transaction rolled back", action=action, error=str(e))
            raise StoreFault(f"Database error during {action}", e) from e

    def insert(self, project: Project) -> Project:
        """Insert the scalar fields and return ``project`` with its new id set.

        Raises:
            GeneratedKeyMissing: The store did not return a generated key.
            StoreFault: Any other store failure.
        """

        def work(conn: Connection) -> int:
            result = conn.execute(insert(PROJECT_TABLE).values(**project_params(project)))
            key = result.inserted_primary_key
            if key is None or key[0] is None:
                raise GeneratedKeyMissing(PROJECT_TABLE.name)
            return int(key[0])

        project.project_id = self._run("insert project", work)
        logger.info("Project inserted", project_id=project.project_id)
        return project

    def fetch_all(self) -> list[Project]:
        """All projects ordered by id, scalar fields only."""

        def work(conn: Connection) -> list[Project]:
            stmt = select(PROJECT_TABLE).order_by(PROJECT_TABLE.c.project_id.asc())
            return [project_from_row(row) for row in conn.execute(stmt).mappings()]

        return self._run("fetch all projects", work)

    def fetch_by_id(self, project_id: int) -> Project | None:
        """Get a fully hydrated project, or None if the id does not exist.

        The project row and its three collections are read in one
        transaction, so the result is a single consistent snapshot.
        """

        def work(conn: Connection) -> Project | None:
            stmt = select(PROJECT_TABLE).where(PROJECT_TABLE.c.project_id == project_id)
            row = conn.execute(stmt).mappings().first()
            if row is None:
                return None

            project = project_from_row(row)
            materials = self._fetch_materials(conn, project_id)
            steps = self._fetch_steps(conn, project_id)
            categories = self._fetch_categories(conn, project_id)

            # Attach only once every read has succeeded
            project.materials = materials
            project.steps = steps
            project.categories = categories
            return project

        return self._run("fetch project", work)

    def _fetch_materials(self, conn: Connection, project_id: int) -> list[Material]:
        stmt = (
            select(MATERIAL_TABLE)
            .where(MATERIAL_TABLE.c.project_id == project_id)
            .order_by(MATERIAL_TABLE.c.material_id)
        )
        return [material_from_row(row) for row in conn.execute(stmt).mappings()]

    def _fetch_steps(self, conn: Connection, project_id: int) -> list[Step]:
        stmt = (
            select(STEP_TABLE)
            .where(STEP_TABLE.c.project_id == project_id)
            .order_by(STEP_TABLE.c.step_order, STEP_TABLE.c.step_id)
        )
        return [step_from_row(row) for row in conn.execute(stmt).mappings()]

    def _fetch_categories(self, conn: Connection, project_id: int) -> list[Category]:
        stmt = (
            select(CATEGORY_TABLE)
            .join(
                PROJECT_CATEGORY_TABLE,
                PROJECT_CATEGORY_TABLE.c.category_id == CATEGORY_TABLE.c.category_id,
            )
            .where(PROJECT_CATEGORY_TABLE.c.project_id == project_id)
            .order_by(CATEGORY_TABLE.c.category_id)
        )
        return [category_from_row(row) for row in conn.execute(stmt).mappings()]

    def update(self, project: Project) -> bool:
        """Overwrite all five scalar columns. True if exactly one row changed."""

        def work(conn: Connection) -> int:
            stmt = (
                update(PROJECT_TABLE)
                .where(PROJECT_TABLE.c.project_id == project.project_id)
                .values(**project_params(project))
            )
            return conn.execute(stmt).rowcount

        rows = self._run("update project", work)
        logger.info("Project update executed", project_id=project.project_id, rows=rows)
        return rows == 1

    def delete(self, project_id: int) -> bool:
        """Delete a project row. True if exactly one row was removed.

        Child rows still referencing the project make the store reject the
        delete; that surfaces as StoreFault and nothing is removed.
        """

        def work(conn: Connection) -> int:
            stmt = delete(PROJECT_TABLE).where(PROJECT_TABLE.c.project_id == project_id)
            return conn.execute(stmt).rowcount

        rows = self._run("delete project", work)
        logger.info("Project delete executed", project_id=project_id, rows=rows)
        return rows == 1
