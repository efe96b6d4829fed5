"""OAuth2 security definitions and per-operation security requirements."""

import logging

from route_swagger.config import AUTH_FLOWS, SwaggerConfig
from route_swagger.errors import ConfigurationError
from route_swagger.routes.base import Route
from route_swagger.routes.manifest import ScopeRegistry

logger = logging.getLogger(__name__)

SECURITY_DEFINITION_NAME = "OAuth2"
OAUTH_TOKEN_PATH = "/oauth/token"
OAUTH_AUTHORIZE_PATH = "/oauth/authorize"


class ScopeGuardClassifier:
    """Decides whether a middleware enforces OAuth scopes.

    The middleware name is resolved to its implementation through the
    router's alias map. The implementation qualifies when its full path or
    its last dotted segment is listed in ``guard_names``.
    """

    def __init__(self, middleware_map: dict[str, str], guard_names: list[str]):
        self.middleware_map = middleware_map
        self.guard_names = set(guard_names)

    def __call__(self, middleware_name: str) -> bool:
        resolved = self.middleware_map.get(middleware_name)
        if resolved is None:
            return False
        return resolved in self.guard_names or resolved.rsplit(".", 1)[-1] in self.guard_names


def has_oauth_routes(routes: list[Route]) -> bool:
    """True when both the token and the authorize endpoints are registered."""
    uris = {route.uri for route in routes}
    return OAUTH_TOKEN_PATH in uris and OAUTH_AUTHORIZE_PATH in uris


class SecurityDefinitionBuilder:
    def __init__(self, config: SwaggerConfig, scope_registry: ScopeRegistry | None = None):
        self.config = config
        self.scope_registry = scope_registry

    def build(self) -> dict:
        """Build the ``securityDefinitions`` block.

        Raises ConfigurationError for an unknown ``auth_flow``.
        """
        flow = self.config.auth_flow
        if flow not in AUTH_FLOWS:
            raise ConfigurationError(
                f"Invalid OAuth flow {flow!r}, expected one of: {', '.join(AUTH_FLOWS)}"
            )

        definition = {"type": "oauth2", "flow": flow}
        if flow in ("implicit", "accessCode"):
            definition["authorizationUrl"] = self._endpoint(OAUTH_AUTHORIZE_PATH)
        if flow in ("password", "application", "accessCode"):
            definition["tokenUrl"] = self._endpoint(OAUTH_TOKEN_PATH)
        definition["scopes"] = self._scopes()

        return {SECURITY_DEFINITION_NAME: definition}

    def _endpoint(self, path: str) -> str:
        return self.config.host.rstrip("/") + path

    def _scopes(self) -> dict[str, str]:
        if self.scope_registry is None:
            logger.debug("No scope registry, emitting empty scopes")
            return {}
        return {scope.id: scope.description for scope in self.scope_registry.list_scopes()}


def route_security(route: Route, is_scope_guard) -> dict | None:
    """Security requirement for a route's operations.

    When several scope-guard middleware are attached, the last one wins.
    """
    security = None
    for middleware in route.middleware:
        if is_scope_guard(middleware.name):
            security = {SECURITY_DEFINITION_NAME: list(middleware.parameters)}
    return security

