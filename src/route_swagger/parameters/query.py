"""Query parameters from validation rules."""

from route_swagger.parameters.rules import (
    RuleSet,
    get_enum_values,
    get_param_type,
    is_array_item_field,
    is_param_required,
    split_rules,
)


def _query_type(rules: list[str]) -> str:
    """Swagger 2.0 allows ``file`` only in formData."""
    param_type = get_param_type(rules)
    return "string" if param_type == "file" else param_type


class QueryParameterGenerator:
    """Maps each rule-bearing field to an ``in: query`` parameter."""

    def __init__(self, rules: dict[str, RuleSet]):
        self.rules = rules

    def get_parameters(self) -> list[dict]:
        params: dict[str, dict] = {}
        item_rules: dict[str, list[str]] = {}

        for field, rules in self.rules.items():
            field_rules = split_rules(rules)
            if is_array_item_field(field):
                item_rules[field[:-2]] = field_rules
                continue

            param = {
                "in": "query",
                "name": field,
                "type": _query_type(field_rules),
                "required": is_param_required(field_rules),
                "description": "",
            }
            enum = get_enum_values(field_rules)
            if enum:
                param["enum"] = enum
            if param["type"] == "array":
                param["items"] = {"type": "string"}
            params[field] = param

        self._add_array_items(params, item_rules)
        return list(params.values())

    def _add_array_items(self, params: dict[str, dict], item_rules: dict[str, list[str]]) -> None:
        for field, rules in item_rules.items():
            param = params.get(field)
            if param is None:
                # Item rules without a rule for the array itself
                param = params[field] = {
                    "in": "query",
                    "name": field,
                    "type": "array",
                    "required": False,
                    "description": "",
                }
            param["type"] = "array"
            param["items"] = {"type": _query_type(rules)}
            enum = get_enum_values(rules)
            if enum:
                param["items"]["enum"] = enum
            param["collectionFormat"] = "multi"
