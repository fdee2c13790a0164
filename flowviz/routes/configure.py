"""Flowviz plugin configuration page."""
from flask import Blueprint, current_app, redirect, request

from flowviz.services.configuration_workflow import Redirect

configure_bp = Blueprint("flowviz_configure", __name__, url_prefix="/plugins/flowviz")


@configure_bp.route("/configure", methods=["GET", "POST"])
def configure():
    """Show the dot path form, or save/cancel a submission and redirect."""
    container = current_app.container
    workflow = container.configuration_workflow()

    result = workflow.handle(request.form)
    if isinstance(result, Redirect):
        return redirect(result.target)

    return container.form_renderer().render(result)
