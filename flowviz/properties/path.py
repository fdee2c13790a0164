"""Hierarchical property keys."""
from dataclasses import dataclass

PROJECTS_ROOT = "/projects/"


def resolve(project_id: str, sub_path: str = "") -> str:
    """
    Build the canonical key of a project property.

    Plain concatenation: separators in ``sub_path`` are taken as given.

    Args:
        project_id: Project identifier
        sub_path: Path relative to the project, e.g. "/dotPath"

    Returns:
        Canonical property key, e.g. "/projects/Flowviz/dotPath".
    """
    return f"{PROJECTS_ROOT}{project_id}{sub_path}"


@dataclass(frozen=True)
class PropertyPath:
    """A project-relative property address."""

    project_id: str
    sub_path: str = ""

    @property
    def key(self) -> str:
        """Canonical property key."""
        return resolve(self.project_id, self.sub_path)

    def __str__(self) -> str:
        return self.key
