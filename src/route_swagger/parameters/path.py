"""Path parameters from URI placeholders."""

import re

from route_swagger.routes.base import strip_optional_char

PLACEHOLDER_RE = re.compile(r"\{(.*?)\}")


class PathParameterGenerator:
    """Emits one ``in: path`` parameter per ``{name}`` or ``{name?}`` placeholder."""

    def __init__(self, uri: str):
        self.uri = uri

    def get_parameters(self) -> list[dict]:
        params = []
        for placeholder in PLACEHOLDER_RE.findall(self.uri):
            params.append({
                "in": "path",
                "name": strip_optional_char(placeholder),
                "type": "string",
                "required": not placeholder.endswith("?"),
                "description": "",
            })
        return params
