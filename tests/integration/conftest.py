"""Integration test fixtures for database operations.

By default each test gets a fresh SQLite database file with foreign keys
enforced. Set TEST_DATABASE_URL to run against another synchronous database
(the tables are dropped and recreated around every test).
Uses polyfactory for type-safe test data generation.
"""

import os
from collections.abc import Iterator
from pathlib import Path

import pytest
from sqlalchemy import Engine

from src.projects.core.db import TransactionScope, build_engine, create_schema, drop_schema
from src.projects.models import Project
from src.projects.repositories import ProjectRepository
from src.projects.services import ProjectService
from tests.factories import ProjectFactory


@pytest.fixture
def engine(tmp_path: Path) -> Iterator[Engine]:
    """Create a test engine with an empty schema."""
    url = os.environ.get("TEST_DATABASE_URL") or f"sqlite:///{tmp_path / 'projects.db'}"
    test_engine = build_engine(url)

    drop_schema(test_engine)
    create_schema(test_engine)

    yield test_engine

    drop_schema(test_engine)
    test_engine.dispose()


@pytest.fixture
def scope(engine: Engine) -> TransactionScope:
    return TransactionScope(engine)


@pytest.fixture
def project_repo(scope: TransactionScope) -> ProjectRepository:
    return ProjectRepository(scope)


@pytest.fixture
def project_service(project_repo: ProjectRepository) -> ProjectService:
    return ProjectService(project_repo)


@pytest.fixture
def saved_project(project_repo: ProjectRepository) -> Project:
    """A project already inserted, with no children."""
    return project_repo.insert(ProjectFactory.build())
