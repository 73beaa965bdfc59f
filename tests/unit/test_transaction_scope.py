"""Unit tests for TransactionScope: exactly one terminal action, always closed."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import OperationalError

from src.projects.core.db import TransactionScope

pytestmark = pytest.mark.unit


def _db_error(message: str) -> OperationalError:
    return OperationalError("SELECT 1", {}, Exception(message))


@pytest.fixture
def mock_engine() -> MagicMock:
    return MagicMock()


@pytest.fixture
def connection(mock_engine: MagicMock) -> MagicMock:
    return mock_engine.connect.return_value


@pytest.fixture
def transaction(connection: MagicMock) -> MagicMock:
    return connection.begin.return_value


@pytest.fixture
def scope(mock_engine: MagicMock) -> TransactionScope:
    return TransactionScope(mock_engine)


class TestWithTransaction:
    def test_success_commits_once_and_closes(self, scope, connection, transaction):
        result = scope.with_transaction(lambda conn: conn)

        assert result is connection
        transaction.commit.assert_called_once()
        transaction.rollback.assert_not_called()
        connection.close.assert_called_once()

    def test_failure_rolls_back_once_and_reraises_same_exception(
        self, scope, connection, transaction
    ):
        error = ValueError("boom")

        def work(conn):
            raise error

        with pytest.raises(ValueError) as exc_info:
            scope.with_transaction(work)

        assert exc_info.value is error
        transaction.rollback.assert_called_once()
        transaction.commit.assert_not_called()
        connection.close.assert_called_once()

    def test_commit_failure_propagates_and_still_closes(self, scope, connection, transaction):
        transaction.commit.side_effect = _db_error("commit failed")

        with pytest.raises(OperationalError):
            scope.with_transaction(lambda conn: None)

        transaction.rollback.assert_not_called()
        connection.close.assert_called_once()

    def test_rollback_failure_keeps_original_exception(self, scope, connection, transaction):
        transaction.rollback.side_effect = _db_error("rollback failed")

        def work(conn):
            raise KeyError("original")

        with pytest.raises(KeyError):
            scope.with_transaction(work)

        connection.close.assert_called_once()

    def test_connect_failure_propagates_without_terminal_action(
        self, scope, mock_engine, transaction
    ):
        mock_engine.connect.side_effect = _db_error("connection refused")

        with pytest.raises(OperationalError):
            scope.with_transaction(lambda conn: None)

        transaction.commit.assert_not_called()
        transaction.rollback.assert_not_called()

    def test_each_call_uses_its_own_connection(self, scope, mock_engine):
        scope.with_transaction(lambda conn: None)
        scope.with_transaction(lambda conn: None)

        assert mock_engine.connect.call_count == 2


def test_engine_defaults_to_global_engine(monkeypatch):
    sentinel = MagicMock()
    monkeypatch.setattr("src.projects.core.db.transaction.get_engine", lambda: sentinel)

    assert TransactionScope().engine is sentinel
