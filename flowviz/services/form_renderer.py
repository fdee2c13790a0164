"""Form-rendering collaborators for the configuration page."""
from abc import ABC, abstractmethod

from flask import jsonify

from flowviz.services.configuration_workflow import RenderForm

PAGE_TITLE = "Flowviz"
ACTION_TITLE = "configuration"


class FormRenderer(ABC):
    """Turns the initial form state into a response."""

    @abstractmethod
    def render(self, form: RenderForm):
        ...


class JsonFormRenderer(FormRenderer):
    """Describes the configuration form as JSON for the admin frontend."""

    def render(self, form: RenderForm):
        return jsonify({
            "title": f"{PAGE_TITLE} - {ACTION_TITLE}",
            "header": {"title": PAGE_TITLE, "title2": ACTION_TITLE},
            "form": {
                "id": form.form_id,
                "noPostAction": True,
                "elements": [
                    {
                        "label": form.label,
                        "name": form.field_name,
                        "initialValue": form.initial_value,
                    }
                ],
            },
        }), 200
