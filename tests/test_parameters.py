from route_swagger.parameters.body import BodyParameterGenerator
from route_swagger.parameters.path import PathParameterGenerator
from route_swagger.parameters.query import QueryParameterGenerator
from route_swagger.parameters.rules import get_enum_values, get_param_type, is_param_required, split_rules


class TestRules:
    def test_split_pipe_string(self):
        assert split_rules("required|string|max:255") == ["required", "string", "max:255"]

    def test_split_list_passthrough(self):
        assert split_rules(["required", "integer"]) == ["required", "integer"]

    def test_first_recognized_type_wins(self):
        assert get_param_type(["required", "numeric", "integer"]) == "number"
        assert get_param_type(["boolean", "string"]) == "boolean"

    def test_default_type_is_string(self):
        assert get_param_type(["required", "max:10"]) == "string"
        assert get_param_type([]) == "string"

    def test_required(self):
        assert is_param_required(["required", "string"]) is True
        assert is_param_required(["nullable", "string"]) is False
        assert is_param_required(["required_if:a,b"]) is False

    def test_enum_values(self):
        assert get_enum_values(["string", "in:a,b,c"]) == ["a", "b", "c"]
        assert get_enum_values(["string"]) == []


class TestPathParameterGenerator:
    def test_required_placeholder(self):
        params = PathParameterGenerator("/users/{id}").get_parameters()
        assert params == [{
            "in": "path",
            "name": "id",
            "type": "string",
            "required": True,
            "description": "",
        }]

    def test_optional_placeholder(self):
        params = PathParameterGenerator("/users/{id}/avatar/{size?}").get_parameters()
        assert [p["name"] for p in params] == ["id", "size"]
        assert params[0]["required"] is True
        assert params[1]["required"] is False

    def test_no_placeholders(self):
        assert PathParameterGenerator("/users").get_parameters() == []


class TestQueryParameterGenerator:
    def test_fields_in_rule_order(self):
        params = QueryParameterGenerator({
            "page": ["required", "integer"],
            "q": "string",
        }).get_parameters()
        assert [p["name"] for p in params] == ["page", "q"]
        assert params[0] == {
            "in": "query",
            "name": "page",
            "type": "integer",
            "required": True,
            "description": "",
        }
        assert params[1]["required"] is False

    def test_enum(self):
        params = QueryParameterGenerator({"status": "in:active,banned"}).get_parameters()
        assert params[0]["enum"] == ["active", "banned"]
        assert params[0]["type"] == "string"

    def test_array_items_from_star_rules(self):
        params = QueryParameterGenerator({"tags": "array", "tags.*": "integer"}).get_parameters()
        assert len(params) == 1
        assert params[0]["type"] == "array"
        assert params[0]["items"] == {"type": "integer"}
        assert params[0]["collectionFormat"] == "multi"

    def test_file_rule_becomes_string(self):
        params = QueryParameterGenerator({"avatar": "file", "docs.*": "file"}).get_parameters()
        assert params[0]["type"] == "string"
        assert params[1]["items"] == {"type": "string"}

    def test_plain_array_defaults_items_to_string(self):
        params = QueryParameterGenerator({"ids": ["array"]}).get_parameters()
        assert params[0]["items"] == {"type": "string"}


class TestBodyParameterGenerator:
    def test_single_body_parameter(self):
        params = BodyParameterGenerator({
            "name": ["required", "string"],
            "age": ["integer"],
        }).get_parameters()
        assert len(params) == 1
        body = params[0]
        assert body["in"] == "body"
        assert body["name"] == "body"
        assert body["schema"]["type"] == "object"
        assert body["schema"]["required"] == ["name"]
        assert list(body["schema"]["properties"]) == ["name", "age"]
        assert body["schema"]["properties"]["name"] == {"type": "string"}
        assert body["schema"]["properties"]["age"] == {"type": "integer"}

    def test_required_omitted_when_empty(self):
        body = BodyParameterGenerator({"age": "integer"}).get_parameters()[0]
        assert "required" not in body["schema"]

    def test_nested_object(self):
        body = BodyParameterGenerator({
            "address": "array",
            "address.city": "required|string",
        }).get_parameters()[0]
        address = body["schema"]["properties"]["address"]
        assert address["type"] == "object"
        assert address["properties"]["city"] == {"type": "string"}
        assert "required" not in body["schema"]

    def test_child_rule_before_parent_keeps_object(self):
        body = BodyParameterGenerator({
            "address.city": "string",
            "address": "required|string",
        }).get_parameters()[0]
        address = body["schema"]["properties"]["address"]
        assert address == {"type": "object", "properties": {"city": {"type": "string"}}}
        assert body["schema"]["required"] == ["address"]

    def test_item_rule_before_parent_keeps_array(self):
        body = BodyParameterGenerator({"ids.*": "integer", "ids": "string"}).get_parameters()[0]
        assert body["schema"]["properties"]["ids"] == {"type": "array", "items": {"type": "integer"}}

    def test_array_of_scalars(self):
        body = BodyParameterGenerator({"ids": "array", "ids.*": "integer"}).get_parameters()[0]
        assert body["schema"]["properties"]["ids"] == {"type": "array", "items": {"type": "integer"}}

    def test_array_of_objects(self):
        body = BodyParameterGenerator({"items.*.sku": "required|string"}).get_parameters()[0]
        items = body["schema"]["properties"]["items"]
        assert items["type"] == "array"
        assert items["items"]["type"] == "object"
        assert items["items"]["properties"]["sku"] == {"type": "string"}
