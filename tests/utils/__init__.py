"""Test utilities."""

from tests.utils.cleanup import remove_project_children

__all__ = ["remove_project_children"]
