"""Model exports.

Import from here: `from src.projects.models import Project, Material`
Importing this package registers every table on SQLModel.metadata.
"""

from src.projects.models.category import Category
from src.projects.models.material import Material
from src.projects.models.project import Project
from src.projects.models.project_category import ProjectCategory
from src.projects.models.step import Step

__all__ = [
    "Category",
    "Material",
    "Project",
    "ProjectCategory",
    "Step",
]
