"""Association table linking projects to categories."""

from sqlmodel import Field, SQLModel


class ProjectCategory(SQLModel, table=True):
    """Many-to-many join between ``project`` and ``category``."""

    __tablename__ = "project_category"

    project_id: int = Field(foreign_key="project.project_id", primary_key=True)
    category_id: int = Field(foreign_key="category.category_id", primary_key=True)
