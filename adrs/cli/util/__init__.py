"""CLI utilities (opening the collection, error reporting)."""

from adrs.cli.util.project import fail, open_repository, open_service, resolve_project

__all__ = [
    "fail",
    "open_repository",
    "open_service",
    "resolve_project",
]
