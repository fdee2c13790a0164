"""Flask application factory."""
import logging
from flask import Flask, jsonify
from typing import Optional, Dict, Any

from flowviz.properties.errors import PropertyStoreError

logger = logging.getLogger(__name__)


def create_app(config: Optional[Dict[str, Any]] = None) -> Flask:
    """
    Create and configure Flask application.

    Args:
        config: Optional configuration dictionary to override defaults.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__)

    # Load configuration
    from flowviz.config import get_config
    app.config.from_object(get_config()())
    if config:
        app.config.update(config)

    # Initialize extensions
    from flowviz.extensions import db
    db.init_app(app)

    if app.config.get("AUTO_CREATE_TABLES"):
        import flowviz.models  # noqa: F401 - register tables
        with app.app_context():
            db.create_all()

    # Initialize DI container
    from flowviz.container import Container
    container = Container()
    container.config.from_dict({
        "property_store": app.config["PROPERTY_STORE"],
        "project_name": app.config["FLOWVIZ_PROJECT_NAME"],
        "plugin_manager_url": app.config["PLUGIN_MANAGER_URL"],
    })
    # db.session is scoped to the app context, so one override serves
    # every request and CLI command
    container.db_session.override(db.session)
    app.container = container

    # Register blueprints
    from flowviz.routes import configure_bp
    app.register_blueprint(configure_bp)

    # Register CLI commands
    from flowviz.cli import properties_cli
    app.cli.add_command(properties_cli)

    # Health check endpoint
    @app.route("/api/v1/health")
    def health():
        """Health check endpoint."""
        return jsonify({
            "status": "ok",
            "service": "flowviz",
            "version": "0.1.0"
        }), 200

    # Error handlers
    @app.errorhandler(PropertyStoreError)
    def property_store_error(error):
        """Fail the request when a property batch fails."""
        logger.error(f"Property store error ({error.kind.value}): {error}")
        return jsonify({
            "error": "Property store error",
            "kind": error.kind.value,
            "message": str(error)
        }), 500

    @app.errorhandler(404)
    def not_found(error):
        """Handle 404 errors."""
        return jsonify({"error": "Not found"}), 404

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 errors."""
        return jsonify({"error": "Internal server error"}), 500

    return app
