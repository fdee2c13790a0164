"""Request workflow for the Flowviz configuration page."""
import enum
import logging
from dataclasses import dataclass
from typing import Mapping, Optional, Union

from flowviz.properties.errors import ErrorKind
from flowviz.properties.path import PropertyPath
from flowviz.properties.query import GET_PROPERTY, PROPERTY_NAME, QueryBatch
from flowviz.properties.store import PropertyStore
from flowviz.properties.update import SET_PROPERTY, VALUE, UpdateBatch
from flowviz.services.activity_logger import ActivityLogger

logger = logging.getLogger(__name__)

# Inbound form fields
FORM_ID_FIELD = "formId"
ACTION_FIELD = "action"
DOT_PATH_FIELD = "dotPath"
CANCEL_ACTION = "Cancel"

DOT_PATH_PROPERTY = "/dotPath"
DOT_PATH_LABEL = "Path to dot executable:"
FORM_ID = "selectSearchFilter"


class WorkflowState(enum.Enum):
    """Lifecycle of one configuration request."""

    IDLE = "idle"
    LOADING = "loading"
    RENDERED = "rendered"
    SUBMITTING = "submitting"
    REDIRECTED = "redirected"


class RequestIntent(enum.Enum):
    """What an inbound request asks for."""

    LOAD = "load"
    SAVE = "save"
    CANCEL = "cancel"


@dataclass(frozen=True)
class RenderForm:
    """Show the form with the given initial value."""

    initial_value: str
    label: str = DOT_PATH_LABEL
    field_name: str = DOT_PATH_FIELD
    form_id: str = FORM_ID


@dataclass(frozen=True)
class Redirect:
    """Navigate away to the target location."""

    target: str


WorkflowResult = Union[RenderForm, Redirect]


def classify_request(form: Mapping[str, str]) -> RequestIntent:
    """
    Decide between load, save and cancel from the submitted fields.

    A request without formId is a plain display. Any submitted action
    other than exactly "Cancel" (including none) saves.
    """
    if FORM_ID_FIELD not in form:
        return RequestIntent.LOAD
    if form.get(ACTION_FIELD) == CANCEL_ACTION:
        return RequestIntent.CANCEL
    return RequestIntent.SAVE


class ConfigurationWorkflow:
    """
    Handles one request to the configuration page.

    Loads the stored dot path for display, or saves/cancels a submission
    and redirects to the plugin manager. An instance serves exactly one
    request.
    """

    def __init__(
        self,
        property_store: PropertyStore,
        project_name: str,
        landing_url: str,
        activity_logger: Optional[ActivityLogger] = None,
    ):
        """
        Initialize workflow.

        Args:
            property_store: Store executing query and update batches
            project_name: Project owning the plugin properties
            landing_url: Redirect target after a submission
            activity_logger: Optional audit logger
        """
        self._store = property_store
        self._landing_url = landing_url
        self._activity_logger = activity_logger
        self._state = WorkflowState.IDLE
        self.property_path = PropertyPath(project_name, DOT_PATH_PROPERTY).key

    @property
    def state(self) -> WorkflowState:
        return self._state

    def handle(self, form: Mapping[str, str]) -> WorkflowResult:
        """
        Process a request's form fields.

        Returns:
            RenderForm for a plain display, Redirect after save or cancel.

        Raises:
            PropertyStoreError: If the store fails; no redirect is produced.
            RuntimeError: If this workflow already handled a request.
        """
        if self._state is not WorkflowState.IDLE:
            raise RuntimeError(f"Workflow already handled a request ({self._state.value})")

        intent = classify_request(form)
        if intent is RequestIntent.LOAD:
            return self._load()

        self._transition(WorkflowState.SUBMITTING)
        if intent is RequestIntent.SAVE:
            self._save(form.get(DOT_PATH_FIELD) or "")
        else:
            logger.info(f"Configuration of '{self.property_path}' cancelled")
            self._record("dot_path_cancelled")

        self._transition(WorkflowState.REDIRECTED)
        return Redirect(target=self._landing_url)

    def _load(self) -> RenderForm:
        self._transition(WorkflowState.LOADING)

        batch = QueryBatch()
        handle = batch.add_query(GET_PROPERTY, [(PROPERTY_NAME, self.property_path)])
        batch.set_suppressed_errors(handle, {ErrorKind.NO_SUCH_PROPERTY})
        batch.execute(self._store)

        response = batch.response(handle)
        initial_value = response.value if response.present else ""

        self._transition(WorkflowState.RENDERED)
        return RenderForm(initial_value=initial_value)

    def _save(self, value: str) -> None:
        batch = UpdateBatch()
        update = batch.update(batch.add_update(SET_PROPERTY))
        update.add_item(PROPERTY_NAME, self.property_path)
        update.add_item(VALUE, value)
        batch.execute(self._store)

        logger.info(f"Saved '{self.property_path}'")
        self._record("dot_path_saved", {"path": self.property_path, "value": value})

    def _record(self, action: str, metadata: Optional[dict] = None) -> None:
        if self._activity_logger:
            self._activity_logger.log(action, metadata or {"path": self.property_path})

    def _transition(self, state: WorkflowState) -> None:
        logger.debug(f"Workflow {self._state.value} -> {state.value}")
        self._state = state
