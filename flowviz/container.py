"""Dependency injection container."""
from dependency_injector import containers, providers

from flowviz.properties.memory_store import InMemoryPropertyStore
from flowviz.repositories.property_repository import PropertyRepository
from flowviz.services.activity_logger import ActivityLogger
from flowviz.services.configuration_workflow import ConfigurationWorkflow
from flowviz.services.form_renderer import JsonFormRenderer


class Container(containers.DeclarativeContainer):
    """
    Application dependency injection container.

    Usage:
        container = Container()
        container.config.from_dict({"property_store": "memory", ...})
        container.db_session.override(db.session)

        workflow = container.configuration_workflow()
    """

    # Configuration
    config = providers.Configuration()

    # Database session - must be overridden with actual db.session
    db_session = providers.Dependency()

    # ==================
    # Property store
    # ==================

    property_store = providers.Selector(
        config.property_store,
        sql=providers.Factory(
            PropertyRepository,
            session=db_session
        ),
        memory=providers.Singleton(
            InMemoryPropertyStore
        ),
    )

    # ==================
    # Services
    # ==================

    activity_logger = providers.Singleton(
        ActivityLogger
    )

    form_renderer = providers.Singleton(
        JsonFormRenderer
    )

    configuration_workflow = providers.Factory(
        ConfigurationWorkflow,
        property_store=property_store,
        project_name=config.project_name,
        landing_url=config.plugin_manager_url,
        activity_logger=activity_logger
    )
