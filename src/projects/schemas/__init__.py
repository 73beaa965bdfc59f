from src.projects.schemas.project import ProjectCreate, ProjectUpdate, parse_int

__all__ = [
    # Project
    "ProjectCreate",
    "ProjectUpdate",
    "parse_int",
]
