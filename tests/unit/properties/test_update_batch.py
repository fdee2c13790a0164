"""Tests for UpdateBatch."""
import pytest
from unittest.mock import MagicMock

from flowviz.properties.errors import ErrorKind, StoreTransactionError
from flowviz.properties.query import PROPERTY_NAME
from flowviz.properties.store import PropertyStore
from flowviz.properties.update import SET_PROPERTY, VALUE, Update, UpdateBatch, UpdateItem


@pytest.fixture
def store():
    return MagicMock(spec=PropertyStore)


class TestUpdate:
    """Tests for the Update value."""

    def test_add_item_keeps_order(self):
        update = Update(SET_PROPERTY)
        update.add_item(PROPERTY_NAME, "/a")
        update.add_item(VALUE, "x")

        assert update.items == [UpdateItem(PROPERTY_NAME, "/a"), UpdateItem(VALUE, "x")]
        assert update.item(VALUE) == "x"
        assert update.item("missing") is None


class TestUpdateBatch:
    """Tests for building and executing update batches."""

    def test_add_update_builds_items(self):
        batch = UpdateBatch()
        handle = batch.add_update(SET_PROPERTY, [(PROPERTY_NAME, "/a"), (VALUE, "1")])

        update = batch.update(handle)
        assert update.operation == SET_PROPERTY
        assert update.item(PROPERTY_NAME) == "/a"
        assert update.item(VALUE) == "1"

    def test_items_can_be_added_through_handle(self):
        batch = UpdateBatch()
        handle = batch.add_update(SET_PROPERTY)
        batch.update(handle).add_item(PROPERTY_NAME, "/a")
        batch.update(handle).add_item(VALUE, "1")

        assert batch.updates[0].item(VALUE) == "1"

    def test_execute_is_deferred_until_called(self, store):
        batch = UpdateBatch()
        batch.add_update(SET_PROPERTY, [(PROPERTY_NAME, "/a"), (VALUE, "1")])
        store.execute_updates.assert_not_called()

        batch.execute(store)

        store.execute_updates.assert_called_once()
        sent = store.execute_updates.call_args[0][0]
        assert [u.item(PROPERTY_NAME) for u in sent] == ["/a"]

    def test_execute_sends_all_updates_together(self, store):
        batch = UpdateBatch()
        batch.add_update(SET_PROPERTY, [(PROPERTY_NAME, "/a"), (VALUE, "1")])
        batch.add_update(SET_PROPERTY, [(PROPERTY_NAME, "/b"), (VALUE, "2")])

        batch.execute(store)

        store.execute_updates.assert_called_once()
        assert len(store.execute_updates.call_args[0][0]) == 2

    def test_execute_propagates_failure(self, store):
        store.execute_updates.side_effect = StoreTransactionError(
            ErrorKind.STORE_UNAVAILABLE, "unreachable"
        )
        batch = UpdateBatch()
        batch.add_update(SET_PROPERTY, [(PROPERTY_NAME, "/a"), (VALUE, "1")])

        with pytest.raises(StoreTransactionError, match="unreachable"):
            batch.execute(store)

    def test_failed_execute_cannot_be_retried(self, store):
        store.execute_updates.side_effect = StoreTransactionError(
            ErrorKind.STORE_UNAVAILABLE, "unreachable"
        )
        batch = UpdateBatch()
        batch.add_update(SET_PROPERTY, [(PROPERTY_NAME, "/a"), (VALUE, "1")])

        with pytest.raises(StoreTransactionError):
            batch.execute(store)
        with pytest.raises(RuntimeError, match="already executed"):
            batch.execute(store)

        assert store.execute_updates.call_count == 1

    def test_empty_batch_is_noop(self, store):
        UpdateBatch().execute(store)
        store.execute_updates.assert_not_called()

    def test_executes_exactly_once(self, store):
        batch = UpdateBatch()
        handle = batch.add_update(SET_PROPERTY, [(PROPERTY_NAME, "/a"), (VALUE, "1")])
        batch.execute(store)

        with pytest.raises(RuntimeError, match="already executed"):
            batch.execute(store)
        with pytest.raises(RuntimeError):
            batch.update(handle)
        assert store.execute_updates.call_count == 1
