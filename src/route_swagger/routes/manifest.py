"""Route manifest: a YAML/JSON file standing in for the host router.

Serves both as the Router (routes + middleware aliases) and as the
OAuth scope registry.
"""

import logging
from pathlib import Path
from typing import Protocol

import yaml
from pydantic import BaseModel, ValidationError

from route_swagger.errors import ManifestError
from route_swagger.routes.base import RawRoute, Scope

logger = logging.getLogger(__name__)


class Router(Protocol):
    def list_routes(self) -> list[RawRoute]: ...

    def middleware_map(self) -> dict[str, str]: ...


class ScopeRegistry(Protocol):
    def list_scopes(self) -> list[Scope]: ...


class RouteManifest(BaseModel):
    """Registered routes, middleware aliases and OAuth scopes."""

    routes: list[RawRoute] = []
    middleware_aliases: dict[str, str] = {}  # alias -> implementation path
    scopes: list[Scope] = []

    def list_routes(self) -> list[RawRoute]:
        return list(self.routes)

    def middleware_map(self) -> dict[str, str]:
        return dict(self.middleware_aliases)

    def list_scopes(self) -> list[Scope]:
        return list(self.scopes)


def load_manifest(file_path: Path) -> RouteManifest:
    """Load a route manifest from a YAML or JSON file."""
    text = file_path.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ManifestError(f"{file_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ManifestError(f"{file_path}: expected a mapping at the top level")

    try:
        manifest = RouteManifest(**data)
    except ValidationError as e:
        raise ManifestError(f"{file_path}: {e}") from e

    logger.debug("Loaded %d routes from %s", len(manifest.routes), file_path)
    return manifest
