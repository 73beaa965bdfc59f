"""Repository layer - data access abstraction."""

from src.projects.repositories.project_repository import ProjectRepository

__all__ = ["ProjectRepository"]
