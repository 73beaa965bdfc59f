"""Project model - the aggregate root."""

from decimal import Decimal
from typing import TYPE_CHECKING

from sqlmodel import Field, Relationship, SQLModel

from src.projects.models.project_category import ProjectCategory

if TYPE_CHECKING:
    from src.projects.models.category import Category
    from src.projects.models.material import Material
    from src.projects.models.step import Step


class Project(SQLModel, table=True):
    """A project and, when fully fetched, its materials, steps and categories.

    Note: The collections are filled explicitly by the repository on a full
    fetch. A project coming from a listing leaves them empty.
    """

    __tablename__ = "project"

    project_id: int | None = Field(default=None, primary_key=True)
    project_name: str = Field(max_length=128)
    estimated_hours: Decimal | None = Field(default=None, max_digits=7, decimal_places=2)
    actual_hours: Decimal | None = Field(default=None, max_digits=7, decimal_places=2)
    difficulty: int | None = Field(default=None)
    notes: str | None = Field(default=None)

    materials: list["Material"] = Relationship()
    steps: list["Step"] = Relationship()
    categories: list["Category"] = Relationship(link_model=ProjectCategory)

    def __repr__(self) -> str:
        return f"<Project {self.project_id}: {self.project_name}>"
