"""Route and request-method filtering.

A route is kept when its URI starts with one of the configured prefixes
and neither its controller nor its controller method is denied. A request
method is kept when none of the ignore tables lists it.
"""

from route_swagger.config import SwaggerConfig
from route_swagger.routes.base import Route


class Filters:
    def __init__(self, config: SwaggerConfig, routes: list[Route], route_filters: list[str] | None = None):
        self.config = config
        self.routes = routes
        self.route_filters = list(config.filters if route_filters is None else route_filters)

    def unfiltered_app_routes(self) -> list[Route]:
        return [
            route for route in self.routes
            if not self.is_filtered_route(route)
            and not self.is_filtered_controller(route)
            and not self.is_filtered_controller_method(route)
        ]

    def unfiltered_request_methods(self, route: Route) -> list[str]:
        return [
            method for method in route.methods
            if not self.is_ignored_request_method(method)
            and not self.is_ignored_controller_request_method(route.controller, method)
            and not self.is_ignored_controller_method_request_method(
                route.controller, route.controller_method, method
            )
        ]

    # -- route filters --------------------------------------------------------

    def is_filtered_route(self, route: Route) -> bool:
        """True when prefixes are configured and the URI matches none of them."""
        if not self.route_filters:
            return False
        return not any(route.uri.startswith(prefix) for prefix in self.route_filters)

    def is_filtered_controller(self, route: Route) -> bool:
        return route.controller in self.config.controller_filters

    def is_filtered_controller_method(self, route: Route) -> bool:
        denied = self.config.controller_method_filters.get(route.controller, [])
        return route.controller_method in denied

    # -- request method filters -----------------------------------------------

    def is_ignored_request_method(self, method: str) -> bool:
        return method in self.config.global_ignored_request_methods

    def is_ignored_controller_request_method(self, controller: str, method: str) -> bool:
        ignored = self.config.controller_ignored_request_methods.get(controller, [])
        return method in ignored

    def is_ignored_controller_method_request_method(self, controller: str, controller_method: str, method: str) -> bool:
        by_method = self.config.controller_method_ignored_request_methods.get(controller, {})
        return method in by_method.get(controller_method, [])
