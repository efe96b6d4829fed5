"""Serialize a generated document to JSON or YAML."""

import json

import yaml

from route_swagger.errors import InvalidFormatError


def _to_json(docs: dict) -> str:
    return json.dumps(docs, indent=4, ensure_ascii=False)


def _to_yaml(docs: dict) -> str:
    return yaml.safe_dump(docs, sort_keys=False, allow_unicode=True)


FORMATTERS = {
    "json": _to_json,
    "yaml": _to_yaml,
}


def format_document(docs: dict, fmt: str = "json") -> str:
    formatter = FORMATTERS.get(fmt.lower())
    if formatter is None:
        raise InvalidFormatError(
            f"Invalid format {fmt!r}, expected one of: {', '.join(FORMATTERS)}"
        )
    return formatter(docs)
