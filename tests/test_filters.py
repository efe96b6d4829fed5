from route_swagger.config import SwaggerConfig
from route_swagger.filters import Filters
from route_swagger.routes.base import RawRoute, Route


def _route(uri, action="app.UserController@index", methods=("GET",)) -> Route:
    return Route.from_raw(RawRoute(uri=uri, methods=list(methods), action=action))


ROUTES = [
    _route("/api/users", "app.UserController@index", ("GET", "HEAD")),
    _route("/api/users/{id}", "app.UserController@show", ("GET", "HEAD")),
    _route("/api/posts", "app.PostController@store", ("POST",)),
    _route("/admin/x", "app.AdminController@index", ("GET",)),
]


class TestRouteFilters:
    def test_empty_prefix_list_keeps_every_route(self):
        filters = Filters(SwaggerConfig(filters=[]), ROUTES)
        assert filters.unfiltered_app_routes() == ROUTES

    def test_prefix_allowlist(self):
        filters = Filters(SwaggerConfig(filters=["/api/"]), ROUTES)
        uris = [r.uri for r in filters.unfiltered_app_routes()]
        assert "/admin/x" not in uris
        assert uris == ["/api/users", "/api/users/{id}", "/api/posts"]

    def test_any_prefix_matches(self):
        filters = Filters(SwaggerConfig(filters=["/admin", "/api/posts"]), ROUTES)
        uris = [r.uri for r in filters.unfiltered_app_routes()]
        assert uris == ["/api/posts", "/admin/x"]

    def test_prefix_is_literal(self):
        routes = [_route("/api.v1/users"), _route("/apixv1/users")]
        filters = Filters(SwaggerConfig(filters=["/api.v1"]), routes)
        assert [r.uri for r in filters.unfiltered_app_routes()] == ["/api.v1/users"]

    def test_explicit_route_filters_override_config(self):
        filters = Filters(SwaggerConfig(filters=["/api/"]), ROUTES, ["/admin"])
        assert [r.uri for r in filters.unfiltered_app_routes()] == ["/admin/x"]

    def test_controller_filter(self):
        config = SwaggerConfig(filters=[], controller_filters=["UserController"])
        filters = Filters(config, ROUTES)
        controllers = {r.controller for r in filters.unfiltered_app_routes()}
        assert controllers == {"PostController", "AdminController"}

    def test_controller_method_filter(self):
        config = SwaggerConfig(filters=[], controller_method_filters={"UserController": ["show"]})
        filters = Filters(config, ROUTES)
        assert "/api/users/{id}" not in [r.uri for r in filters.unfiltered_app_routes()]
        assert "/api/users" in [r.uri for r in filters.unfiltered_app_routes()]

    def test_filtering_is_idempotent(self):
        filters = Filters(SwaggerConfig(filters=["/api/"]), ROUTES)
        assert filters.unfiltered_app_routes() == filters.unfiltered_app_routes()


class TestRequestMethodFilters:
    def test_global_ignore(self):
        filters = Filters(SwaggerConfig(), ROUTES)
        assert filters.unfiltered_request_methods(ROUTES[0]) == ["get"]

    def test_controller_ignore(self):
        config = SwaggerConfig(
            global_ignored_request_methods=[],
            controller_ignored_request_methods={"UserController": ["get"]},
        )
        filters = Filters(config, ROUTES)
        assert filters.unfiltered_request_methods(ROUTES[0]) == ["head"]
        assert filters.unfiltered_request_methods(ROUTES[2]) == ["post"]

    def test_controller_method_ignore(self):
        config = SwaggerConfig(
            global_ignored_request_methods=[],
            controller_method_ignored_request_methods={"UserController": {"show": ["head"]}},
        )
        filters = Filters(config, ROUTES)
        assert filters.unfiltered_request_methods(ROUTES[0]) == ["get", "head"]
        assert filters.unfiltered_request_methods(ROUTES[1]) == ["get"]

    def test_unknown_controller_is_not_matched(self):
        config = SwaggerConfig(
            controller_ignored_request_methods={"Other": ["post"]},
            controller_method_ignored_request_methods={"Other": {"store": ["post"]}},
        )
        filters = Filters(config, ROUTES)
        assert filters.unfiltered_request_methods(ROUTES[2]) == ["post"]
