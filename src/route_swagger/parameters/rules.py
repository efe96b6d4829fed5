"""Helpers for reading validation rules.

A field's rules are either a list of rule strings or a single
``|``-delimited string, e.g. ``"required|string|max:255"``.
"""

RuleSet = list[str] | str

TYPE_RULES = {
    "integer": "integer",
    "numeric": "number",
    "boolean": "boolean",
    "array": "array",
    "string": "string",
    "file": "file",
}


def split_rules(rules: RuleSet) -> list[str]:
    if isinstance(rules, str):
        return [r for r in rules.split("|") if r]
    return [str(r) for r in rules]


def rule_name(rule: str) -> str:
    """Rule keyword without its arguments: ``max:255`` -> ``max``."""
    return rule.split(":", 1)[0].strip()


def get_param_type(rules: list[str]) -> str:
    """First recognized type rule wins, ``string`` otherwise."""
    for rule in rules:
        param_type = TYPE_RULES.get(rule_name(rule))
        if param_type:
            return param_type
    return "string"


def is_param_required(rules: list[str]) -> bool:
    return any(rule_name(r) == "required" for r in rules)


def get_enum_values(rules: list[str]) -> list[str]:
    """Values of an ``in:a,b,c`` rule, empty when there is none."""
    for rule in rules:
        name, _, args = rule.partition(":")
        if name.strip() == "in" and args:
            return args.split(",")
    return []


def is_array_item_field(field: str) -> bool:
    """``tags.*`` describes the items of the ``tags`` array."""
    return field.endswith(".*")
