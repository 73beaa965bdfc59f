"""Step model - one instruction within a project."""

from sqlmodel import Field, SQLModel


class Step(SQLModel, table=True):
    __tablename__ = "step"

    step_id: int | None = Field(default=None, primary_key=True)
    project_id: int = Field(foreign_key="project.project_id", index=True)
    step_text: str
    step_order: int
