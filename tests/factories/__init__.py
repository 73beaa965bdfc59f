"""Test factories for generating test data.

Re-exports all factories for convenient imports:
    from tests.factories import ProjectFactory, MaterialFactory, ...
"""

from tests.factories.base import BaseFactory, random_hours, unique_suffix
from tests.factories.project import (
    CategoryFactory,
    MaterialFactory,
    ProjectFactory,
    StepFactory,
)

__all__ = [
    # Base
    "BaseFactory",
    "random_hours",
    "unique_suffix",
    # Project
    "ProjectFactory",
    # Children
    "MaterialFactory",
    "StepFactory",
    "CategoryFactory",
]
