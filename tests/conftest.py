"""Shared test fixtures."""
import os
import pytest

os.environ["FLASK_ENV"] = "testing"


@pytest.fixture
def app():
    """Create application backed by the in-memory property store."""
    from flowviz.app import create_app

    app = create_app({
        "TESTING": True,
        "PROPERTY_STORE": "memory",
        "FLOWVIZ_PROJECT_NAME": "Flowviz",
        "AUTO_CREATE_TABLES": False,
    })

    yield app


@pytest.fixture
def client(app):
    """Create test client."""
    return app.test_client()


@pytest.fixture
def sql_app():
    """Create application backed by the SQL property store on in-memory SQLite."""
    from flowviz.app import create_app
    from flowviz.extensions import db

    app = create_app({
        "TESTING": True,
        "PROPERTY_STORE": "sql",
        "FLOWVIZ_PROJECT_NAME": "Flowviz",
        "SQLALCHEMY_DATABASE_URI": "sqlite:///:memory:",
        "SQLALCHEMY_ENGINE_OPTIONS": {},
        "AUTO_CREATE_TABLES": True,
    })

    yield app

    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def sql_client(sql_app):
    """Create test client for the SQL-backed application."""
    return sql_app.test_client()
