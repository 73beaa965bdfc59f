"""Row mapping: one explicit function per entity, RowMapping in, model out."""

from typing import Any

from sqlalchemy.engine import RowMapping

from src.projects.models import Category, Material, Project, Step
from src.projects.models.base import to_money


def project_from_row(row: RowMapping) -> Project:
    """Build a scalar-only Project from a ``project`` row."""
    return Project(
        project_id=row["project_id"],
        project_name=row["project_name"],
        estimated_hours=to_money(row["estimated_hours"]),
        actual_hours=to_money(row["actual_hours"]),
        difficulty=row["difficulty"],
        notes=row["notes"],
    )


def material_from_row(row: RowMapping) -> Material:
    return Material(
        material_id=row["material_id"],
        project_id=row["project_id"],
        material_name=row["material_name"],
        num_required=row["num_required"],
        cost=to_money(row["cost"]),
    )


def step_from_row(row: RowMapping) -> Step:
    return Step(
        step_id=row["step_id"],
        project_id=row["project_id"],
        step_text=row["step_text"],
        step_order=row["step_order"],
    )


def category_from_row(row: RowMapping) -> Category:
    return Category(
        category_id=row["category_id"],
        category_name=row["category_name"],
    )


def project_params(project: Project) -> dict[str, Any]:
    """Scalar column values for an INSERT/UPDATE, hours quantized for binding."""
    return {
        "project_name": project.project_name,
        "estimated_hours": to_money(project.estimated_hours),
        "actual_hours": to_money(project.actual_hours),
        "difficulty": project.difficulty,
        "notes": project.notes,
    }
