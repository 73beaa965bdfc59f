"""Test helper functions for common data creation patterns."""

from sqlalchemy import Engine, func, select
from sqlmodel import Session

from src.projects.models import Category, Material, ProjectCategory, Step
from tests.factories import CategoryFactory, MaterialFactory, StepFactory


def add_material(engine: Engine, project_id: int, **material_kwargs) -> Material:
    """Insert a material row for ``project_id`` and return it with its id."""
    material = MaterialFactory.build(project_id=project_id, **material_kwargs)
    with Session(engine, expire_on_commit=False) as session:
        session.add(material)
        session.commit()
    return material


def add_step(engine: Engine, project_id: int, step_order: int = 1, **step_kwargs) -> Step:
    """Insert a step row for ``project_id`` and return it with its id."""
    step = StepFactory.build(project_id=project_id, step_order=step_order, **step_kwargs)
    with Session(engine, expire_on_commit=False) as session:
        session.add(step)
        session.commit()
    return step


def link_category(engine: Engine, project_id: int, **category_kwargs) -> Category:
    """Create a category and link it to ``project_id`` through project_category."""
    category = CategoryFactory.build(**category_kwargs)
    with Session(engine, expire_on_commit=False) as session:
        session.add(category)
        session.flush()
        session.add(ProjectCategory(project_id=project_id, category_id=category.category_id))
        session.commit()
    return category


def count_children(engine: Engine, project_id: int) -> dict[str, int]:
    """Count rows referencing ``project_id`` in each child table."""
    counts: dict[str, int] = {}
    with engine.connect() as conn:
        for name, model in (
            ("materials", Material),
            ("steps", Step),
            ("categories", ProjectCategory),
        ):
            table = model.__table__  # type: ignore[attr-defined]
            counts[name] = conn.scalar(
                select(func.count()).select_from(table).where(table.c.project_id == project_id)
            )
    return counts
