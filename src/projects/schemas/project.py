"""Project schemas for operator input."""

from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from src.projects.core.exceptions import InvalidInput
from src.projects.models import Project
from src.projects.models.base import to_money

MAX_HOURS = Decimal("99999.99")  # NUMERIC(7, 2)


def parse_int(raw: str | None) -> int | None:
    """Parse a menu or list number. Blank input means "nothing entered"."""
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError as e:
        raise InvalidInput(raw.strip(), "number") from e


def _blank_to_none(v: object) -> object:
    if isinstance(v, str) and not v.strip():
        return None
    return v


class ProjectCreate(BaseModel):
    """Schema for creating a project from prompted text."""

    project_name: str = Field(min_length=1, max_length=128)
    estimated_hours: Decimal | None = Field(default=None, ge=0, le=MAX_HOURS)
    actual_hours: Decimal | None = Field(default=None, ge=0, le=MAX_HOURS)
    difficulty: int | None = Field(default=None, ge=1, le=5)
    notes: str | None = None

    @field_validator("project_name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Project name cannot be empty or whitespace only")
        return v

    @field_validator("estimated_hours", "actual_hours", "difficulty", mode="before")
    @classmethod
    def blank_is_missing(cls, v: object) -> object:
        return _blank_to_none(v)

    @field_validator("estimated_hours", "actual_hours")
    @classmethod
    def quantize_hours(cls, v: Decimal | None) -> Decimal | None:
        return to_money(v)

    @field_validator("notes")
    @classmethod
    def validate_notes(cls, v: str | None) -> str | None:
        if v is not None:
            v = v.strip()
            if not v:
                return None
        return v

    def to_project(self) -> Project:
        return Project(**self.model_dump())


class ProjectUpdate(BaseModel):
    """Schema for updating a project. Fields left blank keep their current value."""

    project_name: str | None = Field(default=None, max_length=128)
    estimated_hours: Decimal | None = Field(default=None, ge=0, le=MAX_HOURS)
    actual_hours: Decimal | None = Field(default=None, ge=0, le=MAX_HOURS)
    difficulty: int | None = Field(default=None, ge=1, le=5)
    notes: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def blank_is_missing(cls, v: object) -> object:
        return _blank_to_none(v)

    @field_validator("project_name", "notes")
    @classmethod
    def strip_text(cls, v: str | None) -> str | None:
        return v.strip() if v is not None else None

    @field_validator("estimated_hours", "actual_hours")
    @classmethod
    def quantize_hours(cls, v: Decimal | None) -> Decimal | None:
        return to_money(v)

    def apply_to(self, current: Project) -> Project:
        """Return a new scalar-only Project: entered values over ``current``'s."""
        changes = self.model_dump(exclude_none=True)
        return Project(
            project_id=current.project_id,
            project_name=changes.get("project_name", current.project_name),
            estimated_hours=changes.get("estimated_hours", current.estimated_hours),
            actual_hours=changes.get("actual_hours", current.actual_hours),
            difficulty=changes.get("difficulty", current.difficulty),
            notes=changes.get("notes", current.notes),
        )
