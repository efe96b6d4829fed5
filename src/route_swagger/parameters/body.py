"""Body parameter from validation rules."""

from route_swagger.parameters.rules import (
    RuleSet,
    get_enum_values,
    get_param_type,
    is_param_required,
    split_rules,
)


class BodyParameterGenerator:
    """Folds all rule-bearing fields into a single ``in: body`` object schema.

    Dotted field names nest: ``address.city`` becomes a ``city`` property of
    the ``address`` object and ``items.*.id`` an ``id`` property of the
    ``items`` array's item objects.
    """

    def __init__(self, rules: dict[str, RuleSet]):
        self.rules = rules

    def get_parameters(self) -> list[dict]:
        required = []
        properties: dict[str, dict] = {}

        for field, rules in self.rules.items():
            field_rules = split_rules(rules)
            self._add_to_properties(properties, field.split("."), field_rules)
            if "." not in field and is_param_required(field_rules):
                required.append(field)

        schema: dict = {"type": "object"}
        if required:
            schema["required"] = required
        schema["properties"] = properties

        return [{
            "in": "body",
            "name": "body",
            "description": "",
            "schema": schema,
        }]

    def _add_to_properties(self, properties: dict[str, dict], tokens: list[str], rules: list[str]) -> None:
        name, rest = tokens[0], tokens[1:]

        if not rest:
            prop = properties.setdefault(name, {})
            # Nested rules already fixed the shape
            if "properties" in prop or "items" in prop:
                return
            prop["type"] = get_param_type(rules)
            enum = get_enum_values(rules)
            if enum:
                prop["enum"] = enum
            return

        if rest[0] == "*":
            prop = properties.setdefault(name, {})
            prop["type"] = "array"
            items = prop.setdefault("items", {})
            if len(rest) == 1:
                items["type"] = get_param_type(rules)
            else:
                items["type"] = "object"
                self._add_to_properties(items.setdefault("properties", {}), rest[1:], rules)
            return

        prop = properties.setdefault(name, {})
        prop["type"] = "object"
        self._add_to_properties(prop.setdefault("properties", {}), rest, rules)
