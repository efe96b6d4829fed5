"""Data models for discovered routes.

The router hands over RawRoute records; everything downstream works on
the normalized, immutable Route built from them.
"""

from pydantic import BaseModel, ConfigDict, field_validator


class RawRoute(BaseModel):
    """A route exactly as the host router registered it."""

    uri: str  # may lack the leading slash, may hold {param?} segments
    methods: list[str]
    action: str = "Closure"  # package.module.Class@method
    middleware: list[str] = []

    @field_validator("middleware", mode="before")
    @classmethod
    def _wrap_middleware(cls, value):
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value


class Middleware(BaseModel):
    """A middleware attached to a route, e.g. ``scopes:read,write``."""

    model_config = ConfigDict(frozen=True)

    name: str
    parameters: tuple[str, ...] = ()

    @classmethod
    def parse(cls, raw: str) -> "Middleware":
        name, _, params = raw.partition(":")
        parameters = tuple(params.split(",")) if params else ()
        return cls(name=name, parameters=parameters)


class Scope(BaseModel):
    """An OAuth2 scope known to the application."""

    id: str
    description: str = ""


class Route(BaseModel):
    """A normalized route."""

    model_config = ConfigDict(frozen=True)

    original_uri: str  # leading slash, optional markers kept
    uri: str  # optional markers stripped
    methods: tuple[str, ...]
    action: str
    controller: str
    controller_method: str
    middleware: tuple[Middleware, ...] = ()

    @classmethod
    def from_raw(cls, raw: RawRoute) -> "Route":
        original_uri = raw.uri if raw.uri.startswith("/") else "/" + raw.uri
        controller, controller_method = _split_action(raw.action)
        return cls(
            original_uri=original_uri,
            uri=strip_optional_char(original_uri),
            methods=tuple(m.lower() for m in raw.methods),
            action=raw.action,
            controller=controller,
            controller_method=controller_method,
            middleware=tuple(Middleware.parse(m) for m in raw.middleware),
        )


def strip_optional_char(uri: str) -> str:
    """Remove optional-segment markers: ``/users/{id?}`` -> ``/users/{id}``."""
    return uri.replace("?", "")


def _split_action(action: str) -> tuple[str, str]:
    subject = action.split(".")[-1]
    parts = subject.split("@")
    return parts[0], parts[-1]
