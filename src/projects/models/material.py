"""Material model - a supply needed by one project."""

from decimal import Decimal

from sqlmodel import Field, SQLModel


class Material(SQLModel, table=True):
    __tablename__ = "material"

    material_id: int | None = Field(default=None, primary_key=True)
    project_id: int = Field(foreign_key="project.project_id", index=True)
    material_name: str = Field(max_length=128)
    num_required: int | None = Field(default=None)
    cost: Decimal | None = Field(default=None, max_digits=7, decimal_places=2)
