"""Generator configuration.

Keys are snake_case. ``controller_filters`` is a flat list of controller
names; ``controller_method_filters`` maps a controller to a list of its
methods. Unknown keys (including the legacy camelCase spellings such as
``appVersion`` or ``parseSecurity``) are rejected.
"""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from route_swagger.errors import ConfigurationError

AUTH_FLOWS = ("implicit", "password", "application", "accessCode")


class SwaggerConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    # Basic info
    title: str = Field(default_factory=lambda: os.getenv("APP_NAME", "API"))
    description: str = Field(default_factory=lambda: os.getenv("APP_DESCRIPTION", ""))
    app_version: str = Field(default_factory=lambda: os.getenv("APP_VERSION", "1.0.0"))
    host: str = Field(default_factory=lambda: os.getenv("APP_URL", "localhost"))
    base_path: str = Field(default="/", alias="basePath")
    schemes: list[str] = ["http"]
    consumes: list[str] = []
    produces: list[str] = []

    # Ignored request methods
    global_ignored_request_methods: list[str] = ["head"]
    controller_ignored_request_methods: dict[str, list[str]] = {}
    controller_method_ignored_request_methods: dict[str, dict[str, list[str]]] = {}

    # Doc comments and security
    parse_doc_block: bool = True
    parse_security: bool = True
    auth_flow: str = "accessCode"  # checked against AUTH_FLOWS when security is built
    scope_middleware: list[str] = ["CheckScopes", "CheckForAnyScope"]

    # Output
    output: str = "console"  # console / file
    file_type: str = "json"  # json / yaml
    path: str = "swagger"
    file_name: str = "swagger"

    # Filters
    filters: list[str] = ["/api/"]
    controller_filters: list[str] = []
    controller_method_filters: dict[str, list[str]] = {}


def load_config(file_path: Path | None = None) -> SwaggerConfig:
    """Load configuration from a YAML file, or defaults when no file is given."""
    if file_path is None:
        return SwaggerConfig()

    try:
        data = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ConfigurationError(f"{file_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"{file_path}: expected a mapping at the top level")

    try:
        return SwaggerConfig(**data)
    except ValidationError as e:
        raise ConfigurationError(f"{file_path}: {e}") from e


def default_config_yaml() -> str:
    """Render the default configuration as YAML."""
    data = SwaggerConfig().model_dump(by_alias=True)
    return yaml.safe_dump(data, sort_keys=False)
