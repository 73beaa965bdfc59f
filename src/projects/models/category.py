"""Category model - shared labels attached to projects through project_category."""

from sqlmodel import Field, SQLModel


class Category(SQLModel, table=True):
    __tablename__ = "category"

    category_id: int | None = Field(default=None, primary_key=True)
    category_name: str = Field(max_length=128, unique=True)
