"""Property store CLI commands."""
import click
from flask import current_app
from flask.cli import with_appcontext

from flowviz.properties.errors import ErrorKind, PropertyStoreError
from flowviz.properties.path import resolve
from flowviz.properties.query import GET_PROPERTY, PROPERTY_NAME, QueryBatch
from flowviz.properties.update import SET_PROPERTY, VALUE, UpdateBatch
from flowviz.services.configuration_workflow import DOT_PATH_PROPERTY


def _project_option(func):
    return click.option(
        "--project",
        default=None,
        help="Project name (defaults to FLOWVIZ_PROJECT_NAME).",
    )(func)


def _resolve(project, sub_path):
    return resolve(project or current_app.config["FLOWVIZ_PROJECT_NAME"], sub_path)


@click.group("properties")
def properties_cli():
    """Property store commands."""
    pass


@properties_cli.command("get")
@click.argument("sub_path", default=DOT_PATH_PROPERTY)
@_project_option
@with_appcontext
def get_property(sub_path, project):
    """Print a project property."""
    path = _resolve(project, sub_path)

    batch = QueryBatch()
    handle = batch.add_query(GET_PROPERTY, [(PROPERTY_NAME, path)])
    batch.set_suppressed_errors(handle, {ErrorKind.NO_SUCH_PROPERTY})
    try:
        batch.execute(current_app.container.property_store())
    except PropertyStoreError as e:
        raise click.ClickException(str(e)) from e

    response = batch.response(handle)
    if not response.present:
        click.echo(f"Property '{path}' is not set.")
        return
    click.echo(response.value)


@properties_cli.command("set")
@click.argument("sub_path")
@click.argument("value")
@_project_option
@with_appcontext
def set_property(sub_path, value, project):
    """Write a project property."""
    path = _resolve(project, sub_path)

    batch = UpdateBatch()
    batch.add_update(SET_PROPERTY, [(PROPERTY_NAME, path), (VALUE, value)])
    try:
        batch.execute(current_app.container.property_store())
    except PropertyStoreError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Property '{path}' saved.")
