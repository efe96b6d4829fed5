"""Swagger 2.0 document generator.

Drives route discovery, filtering and per-(route, method) operation
assembly. Each operation is built from an immutable OperationContext and
merged into ``paths`` exactly once.
"""

import logging
from dataclasses import dataclass
from typing import Callable

from route_swagger.config import SwaggerConfig
from route_swagger.docblock import DocBlock, DocBlockParser, DocParser
from route_swagger.filters import Filters
from route_swagger.introspect import ActionIntrospector, ImportingIntrospector
from route_swagger.parameters.body import BodyParameterGenerator
from route_swagger.parameters.path import PathParameterGenerator
from route_swagger.parameters.query import QueryParameterGenerator
from route_swagger.routes.base import Route
from route_swagger.routes.manifest import Router, ScopeRegistry
from route_swagger.security import (
    ScopeGuardClassifier,
    SecurityDefinitionBuilder,
    has_oauth_routes,
    route_security,
)

logger = logging.getLogger(__name__)

BODY_METHODS = ("post", "put", "patch")


@dataclass(frozen=True)
class OperationContext:
    route: Route
    method: str
    with_security: bool


class Generator:
    """Builds a Swagger 2.0 document from the routes of a Router."""

    def __init__(
        self,
        config: SwaggerConfig,
        router: Router,
        route_filters: list[str] | None = None,
        *,
        introspector: ActionIntrospector | None = None,
        doc_parser: DocParser | None = None,
        scope_registry: ScopeRegistry | None = None,
        scope_guard: Callable[[str], bool] | None = None,
    ):
        self.config = config
        self.router = router
        self.route_filters = route_filters
        self.introspector = introspector or ImportingIntrospector()
        self.doc_parser = doc_parser or DocBlockParser()
        self.scope_registry = scope_registry
        self.scope_guard = scope_guard or ScopeGuardClassifier(
            router.middleware_map(), config.scope_middleware
        )

    def generate(self) -> dict:
        """Generate the document.

        Raises ConfigurationError when security parsing is enabled with an
        invalid auth flow; no document is produced in that case.
        """
        routes = [Route.from_raw(raw) for raw in self.router.list_routes()]
        filters = Filters(self.config, routes, self.route_filters)

        docs = self._base_info()
        with_security = False
        if self.config.parse_security and has_oauth_routes(routes):
            docs["securityDefinitions"] = SecurityDefinitionBuilder(
                self.config, self.scope_registry
            ).build()
            with_security = True

        paths: dict[str, dict] = {}
        for route in filters.unfiltered_app_routes():
            path_item = paths.setdefault(route.uri, {})
            for method in filters.unfiltered_request_methods(route):
                ctx = OperationContext(route=route, method=method, with_security=with_security)
                path_item[method] = self._build_operation(ctx)
        docs["paths"] = paths

        logger.info(
            "Generated %d paths from %d discovered routes",
            len(paths), len(routes),
        )
        return docs

    def _base_info(self) -> dict:
        info = {
            "swagger": "2.0",
            "info": {
                "title": self.config.title,
                "description": self.config.description,
                "version": self.config.app_version,
            },
            "host": self.config.host,
            "basePath": self.config.base_path,
        }
        for key in ("schemes", "consumes", "produces"):
            value = getattr(self.config, key)
            if value:
                info[key] = list(value)
        return info

    # -- operation assembly ---------------------------------------------------

    def _build_operation(self, ctx: OperationContext) -> dict:
        doc = self._doc_block(ctx.route)
        operation = {
            "summary": doc.summary,
            "description": doc.description,
            "deprecated": doc.deprecated,
            "responses": {
                "200": {"description": "OK"},
            },
        }

        parameters = self._parameters(ctx)
        if parameters:
            operation["parameters"] = parameters

        if ctx.with_security:
            security = route_security(ctx.route, self.scope_guard)
            if security is not None:
                operation["security"] = security

        return operation

    def _doc_block(self, route: Route) -> DocBlock:
        if not self.config.parse_doc_block:
            return DocBlock()

        raw = self.introspector.doc_comment(route.action)
        if not raw:
            return DocBlock()

        try:
            return self.doc_parser.parse(raw)
        except Exception as e:
            logger.warning("Could not parse doc comment of %s: %s", route.action, e)
            return DocBlock()

    def _parameters(self, ctx: OperationContext) -> list[dict]:
        parameters = PathParameterGenerator(ctx.route.original_uri).get_parameters()

        rules = self.introspector.validation_rules(ctx.route.action)
        if rules:
            if ctx.method in BODY_METHODS:
                generator = BodyParameterGenerator(rules)
            else:
                generator = QueryParameterGenerator(rules)
            parameters.extend(generator.get_parameters())

        return parameters
