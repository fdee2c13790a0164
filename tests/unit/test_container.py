"""Tests for the dependency injection container."""
import pytest
from unittest.mock import MagicMock

from flowviz.container import Container
from flowviz.properties.memory_store import InMemoryPropertyStore
from flowviz.repositories.property_repository import PropertyRepository
from flowviz.services.configuration_workflow import ConfigurationWorkflow, WorkflowState
from flowviz.services.form_renderer import JsonFormRenderer


def _container(backend):
    container = Container()
    container.config.from_dict({
        "property_store": backend,
        "project_name": "Flowviz",
        "plugin_manager_url": "/landing",
    })
    container.db_session.override(MagicMock())
    return container


class TestContainer:
    """Test provider wiring."""

    def test_memory_backend_is_singleton(self):
        container = _container("memory")

        store = container.property_store()

        assert isinstance(store, InMemoryPropertyStore)
        assert container.property_store() is store

    def test_sql_backend_builds_repository_per_call(self):
        container = _container("sql")

        first = container.property_store()
        second = container.property_store()

        assert isinstance(first, PropertyRepository)
        assert first is not second

    def test_workflow_is_request_scoped(self):
        container = _container("memory")

        first = container.configuration_workflow()
        second = container.configuration_workflow()

        assert isinstance(first, ConfigurationWorkflow)
        assert first is not second
        assert first.state == WorkflowState.IDLE
        assert first.property_path == "/projects/Flowviz/dotPath"

    def test_workflow_redirects_to_configured_landing(self):
        container = _container("memory")

        result = container.configuration_workflow().handle({"formId": "f", "action": "Cancel"})

        assert result.target == "/landing"

    def test_form_renderer_default(self):
        assert isinstance(_container("memory").form_renderer(), JsonFormRenderer)

    @pytest.mark.parametrize("backend", ["memory", "sql"])
    def test_activity_logger_is_singleton(self, backend):
        container = _container(backend)
        assert container.activity_logger() is container.activity_logger()
