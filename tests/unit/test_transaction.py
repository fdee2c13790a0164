"""Tests for transaction management utilities."""
import pytest
from unittest.mock import MagicMock


class TestTransactionContext:
    """Tests for TransactionContext context manager."""

    def test_transaction_commits_on_success(self):
        """Transaction commits when block completes successfully."""
        from flowviz.utils.transaction import TransactionContext

        mock_session = MagicMock()
        with TransactionContext(mock_session):
            pass

        mock_session.commit.assert_called_once()
        mock_session.rollback.assert_not_called()

    def test_transaction_rolls_back_on_exception(self):
        """Transaction rolls back when exception occurs."""
        from flowviz.utils.transaction import TransactionContext

        mock_session = MagicMock()
        with pytest.raises(ValueError):
            with TransactionContext(mock_session):
                raise ValueError("Test error")

        mock_session.rollback.assert_called_once()
        mock_session.commit.assert_not_called()

    def test_transaction_re_raises_exception(self):
        """Transaction context re-raises the original exception."""
        from flowviz.utils.transaction import TransactionContext

        mock_session = MagicMock()
        with pytest.raises(ValueError) as exc_info:
            with TransactionContext(mock_session):
                raise ValueError("Original error")

        assert str(exc_info.value) == "Original error"

    def test_failed_commit_rolls_back_and_raises(self):
        """A commit failure rolls back and propagates."""
        from flowviz.utils.transaction import TransactionContext

        mock_session = MagicMock()
        mock_session.commit.side_effect = RuntimeError("commit failed")

        with pytest.raises(RuntimeError, match="commit failed"):
            with TransactionContext(mock_session):
                pass

        mock_session.rollback.assert_called_once()
