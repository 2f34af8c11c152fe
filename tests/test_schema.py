"""
Tests for argument schemas.

Covers both declaration modes (pydantic model classes and JSON-Schema
dictionaries) and checks that they report violations with the same
vocabulary of kinds.
"""

import pytest

from configcat_mcp.domains.configcat import CreateTagArguments, StaleFlagsArguments, UpdateTagArguments
from configcat_mcp.errors import ArgumentValidationError, ConfigurationError
from configcat_mcp.schema import (
    INVALID_ENUM_VALUE,
    INVALID_LITERAL,
    INVALID_STRING,
    INVALID_TYPE,
    INVALID_UNION,
    REQUIRED,
    TOO_BIG,
    TOO_SMALL,
    ArgumentSchema,
    JsonSchema,
    ModelSchema,
    compile_schema,
    validate_arguments,
)

PRODUCT_ID = "08d86d63-2726-47cd-8bfc-59608ecb91e2"


def kinds(violations) -> dict[str, str]:
    return {v.path: v.kind for v in violations}


UPDATE_CONFIG_SCHEMA = {
    "type": "object",
    "properties": {
        "configId": {"type": "string"},
        "requestBody": {
            "type": "object",
            "properties": {
                "name": {"type": "string", "maxLength": 255},
                "description": {"type": ["string", "null"], "maxLength": 1000},
                "order": {"type": ["integer", "null"]},
            },
            "required": ["name"],
        },
    },
    "required": ["configId", "requestBody"],
}


# -----------------------------------------------------------------------------
# compile_schema
# -----------------------------------------------------------------------------


class TestCompileSchema:
    """Tests for picking the right validator for a declared schema."""

    def test_model_class_becomes_model_schema(self):
        schema = compile_schema(CreateTagArguments)
        assert isinstance(schema, ModelSchema)
        assert isinstance(schema, ArgumentSchema)

    def test_mapping_becomes_json_schema(self):
        schema = compile_schema({"type": "object", "properties": {}})
        assert isinstance(schema, JsonSchema)

    def test_compiled_schema_is_returned_as_is(self):
        schema = JsonSchema({"type": "object"})
        assert compile_schema(schema) is schema

    def test_unsupported_source_rejected(self):
        with pytest.raises(ConfigurationError):
            compile_schema(42)

    def test_non_object_root_rejected(self):
        with pytest.raises(ConfigurationError):
            JsonSchema({"type": "string"})

    def test_unknown_type_rejected_at_compile_time(self):
        with pytest.raises(ConfigurationError, match="Invalid input schema"):
            JsonSchema({"type": "object", "properties": {"x": {"type": "decimal"}}})

    def test_malformed_keyword_rejected_at_compile_time(self):
        with pytest.raises(ConfigurationError, match="Invalid input schema"):
            JsonSchema({"properties": {"name": {"type": "string", "maxLength": -1}}})

    def test_nullable_keyword_rewritten_for_clients(self):
        schema = JsonSchema(
            {"properties": {"scope": {"type": "string", "enum": ["a", "b"], "nullable": True}}}
        )
        scope = schema.json_schema()["properties"]["scope"]

        assert "nullable" not in scope
        assert scope["type"] == ["string", "null"]
        assert scope["enum"] == ["a", "b", None]

    def test_missing_root_type_defaults_to_object(self):
        schema = JsonSchema({"properties": {"a": {"type": "string"}}})
        assert schema.json_schema()["type"] == "object"
        assert schema.properties == frozenset({"a"})


# -----------------------------------------------------------------------------
# JSON Schema dictionaries
# -----------------------------------------------------------------------------


class TestJsonSchemaRequired:
    """Tests for required fields."""

    def test_missing_required_field_reported_by_name(self):
        schema = JsonSchema(UPDATE_CONFIG_SCHEMA)
        _, violations = schema.check({"requestBody": {"name": "n"}})

        assert kinds(violations) == {"configId": REQUIRED}

    def test_missing_body_reports_nested_required_leaf(self):
        schema = JsonSchema(UPDATE_CONFIG_SCHEMA)

        with pytest.raises(ArgumentValidationError) as exc_info:
            validate_arguments("update-config", schema, {"configId": "c1"})

        message = str(exc_info.value)
        assert message.startswith("Invalid arguments for tool 'update-config':")
        assert "requestBody.name" in message
        assert "(required)" in message
        assert kinds(exc_info.value.violations) == {"requestBody.name": REQUIRED}

    def test_missing_nested_field_reported_with_path(self):
        schema = JsonSchema(UPDATE_CONFIG_SCHEMA)
        _, violations = schema.check({"configId": "c1", "requestBody": {}})

        assert kinds(violations) == {"requestBody.name": REQUIRED}

    def test_empty_arguments_report_every_required_field(self):
        schema = JsonSchema(UPDATE_CONFIG_SCHEMA)
        _, violations = schema.check({})

        assert set(kinds(violations)) == {"configId", "requestBody.name"}

    def test_absent_arguments_treated_as_empty(self):
        schema = JsonSchema({"type": "object", "properties": {"a": {"type": "string"}}})
        assert validate_arguments("t", schema, None) == {}


class TestJsonSchemaStrings:
    """Tests for string bounds and formats."""

    def test_max_length_boundary_accepted(self):
        schema = JsonSchema(UPDATE_CONFIG_SCHEMA)
        validated = validate_arguments(
            "update-config", schema, {"configId": "c1", "requestBody": {"name": "x" * 255}}
        )
        assert validated["requestBody"]["name"] == "x" * 255

    def test_max_length_exceeded_rejected(self):
        schema = JsonSchema(UPDATE_CONFIG_SCHEMA)
        _, violations = schema.check({"configId": "c1", "requestBody": {"name": "x" * 256}})

        assert kinds(violations) == {"requestBody.name": TOO_BIG}
        assert "at most 255" in violations[0].message

    def test_min_length(self):
        schema = JsonSchema({"properties": {"key": {"type": "string", "minLength": 1}}})
        _, violations = schema.check({"key": ""})
        assert kinds(violations) == {"key": TOO_SMALL}

    @pytest.mark.parametrize(
        "fmt,good,bad",
        [
            ("uuid", PRODUCT_ID, "not-a-uuid"),
            ("date-time", "2024-05-01T10:00:00Z", "2024-05-01"),
            ("uri", "https://configcat.com/docs/sdk-reference/python", "just text"),
            ("email", "dev@example.com", "dev.example.com"),
        ],
    )
    def test_formats(self, fmt, good, bad):
        schema = JsonSchema({"properties": {"v": {"type": "string", "format": fmt}}})

        assert schema.check({"v": good})[1] == []
        _, violations = schema.check({"v": bad})
        assert kinds(violations) == {"v": INVALID_STRING}

    def test_unknown_format_is_not_enforced(self):
        schema = JsonSchema({"properties": {"v": {"type": "string", "format": "color"}}})
        assert schema.check({"v": "anything"})[1] == []

    def test_length_counts_code_points(self):
        schema = JsonSchema(UPDATE_CONFIG_SCHEMA)
        emoji = "\U0001F680"

        ok = {"configId": "c1", "requestBody": {"name": emoji * 255}}
        too_long = {"configId": "c1", "requestBody": {"name": emoji * 256}}

        assert schema.check(ok)[1] == []
        assert kinds(schema.check(too_long)[1]) == {"requestBody.name": TOO_BIG}


class TestJsonSchemaTypes:
    """Tests for type checks, numbers and nullability."""

    def test_wrong_type_rejected(self):
        schema = JsonSchema({"properties": {"order": {"type": "integer"}}})
        _, violations = schema.check({"order": "first"})

        assert kinds(violations) == {"order": INVALID_TYPE}
        assert "Expected integer, received string" in violations[0].message

    def test_boolean_is_not_an_integer(self):
        schema = JsonSchema({"properties": {"order": {"type": "integer"}}})
        _, violations = schema.check({"order": True})
        assert kinds(violations) == {"order": INVALID_TYPE}

    def test_integral_float_is_narrowed_to_int(self):
        schema = JsonSchema({"properties": {"order": {"type": "integer"}}})
        validated = validate_arguments("t", schema, {"order": 3.0})

        assert validated["order"] == 3
        assert isinstance(validated["order"], int)

    def test_nested_integers_narrowed(self):
        schema = JsonSchema(
            {
                "properties": {
                    "requestBody": {
                        "type": "object",
                        "properties": {
                            "order": {"type": ["integer", "null"]},
                            "tags": {"type": "array", "items": {"type": "integer"}},
                            "ratio": {"type": "number"},
                        },
                    },
                },
            }
        )
        validated = validate_arguments(
            "t", schema, {"requestBody": {"order": 2.0, "tags": [1.0, 2.0], "ratio": 4.0}}
        )

        body = validated["requestBody"]
        assert body == {"order": 2, "tags": [1, 2], "ratio": 4.0}
        assert isinstance(body["order"], int)
        assert all(isinstance(tag, int) for tag in body["tags"])
        assert isinstance(body["ratio"], float)

    def test_fractional_float_is_not_an_integer(self):
        schema = JsonSchema({"properties": {"order": {"type": "integer"}}})
        _, violations = schema.check({"order": 3.5})
        assert kinds(violations) == {"order": INVALID_TYPE}

    def test_numeric_bounds(self):
        schema = JsonSchema(
            {"properties": {"percentage": {"type": "integer", "minimum": 0, "maximum": 100}}}
        )
        assert schema.check({"percentage": 0})[1] == []
        assert schema.check({"percentage": 100})[1] == []
        assert kinds(schema.check({"percentage": -1})[1]) == {"percentage": TOO_SMALL}
        assert kinds(schema.check({"percentage": 101})[1]) == {"percentage": TOO_BIG}

    def test_exclusive_bounds(self):
        schema = JsonSchema(
            {"properties": {"n": {"type": "number", "exclusiveMinimum": 0, "exclusiveMaximum": 1}}}
        )
        assert schema.check({"n": 0.5})[1] == []
        assert kinds(schema.check({"n": 0})[1]) == {"n": TOO_SMALL}
        assert kinds(schema.check({"n": 1})[1]) == {"n": TOO_BIG}

    def test_null_type_in_union_accepts_none(self):
        schema = JsonSchema(UPDATE_CONFIG_SCHEMA)
        args = {"configId": "c1", "requestBody": {"name": "n", "description": None, "order": None}}
        assert schema.check(args)[1] == []

    def test_nullable_keyword_accepts_none(self):
        schema = JsonSchema(
            {"properties": {"comparator": {"type": "string", "enum": ["isOneOf"], "nullable": True}}}
        )
        assert schema.check({"comparator": None})[1] == []

    def test_none_rejected_when_not_nullable(self):
        schema = JsonSchema({"properties": {"name": {"type": "string"}}})
        _, violations = schema.check({"name": None})
        assert kinds(violations) == {"name": INVALID_TYPE}


class TestJsonSchemaEnumsAndUnions:
    """Tests for enum, const and anyOf."""

    def test_enum_member_accepted(self):
        schema = JsonSchema({"properties": {"scope": {"type": "string", "enum": ["config", "product"]}}})
        assert schema.check({"scope": "config"})[1] == []

    def test_enum_non_member_rejected(self):
        schema = JsonSchema({"properties": {"scope": {"type": "string", "enum": ["config", "product"]}}})
        _, violations = schema.check({"scope": "global"})

        assert kinds(violations) == {"scope": INVALID_ENUM_VALUE}
        assert "'config' | 'product'" in violations[0].message

    def test_enum_does_not_confuse_true_with_one(self):
        schema = JsonSchema({"properties": {"v": {"enum": [1, 2]}}})
        _, violations = schema.check({"v": True})
        assert kinds(violations) == {"v": INVALID_ENUM_VALUE}

    def test_const(self):
        schema = JsonSchema({"properties": {"op": {"const": "replace"}}})
        assert schema.check({"op": "replace"})[1] == []
        assert kinds(schema.check({"op": "add"})[1]) == {"op": INVALID_LITERAL}

    def test_any_of_accepts_any_branch(self):
        schema = JsonSchema(
            {"properties": {"value": {"anyOf": [{"type": "boolean"}, {"type": "string"}, {"type": "number"}]}}}
        )
        for value in (True, "on", 1.5):
            assert schema.check({"value": value})[1] == []

    def test_any_of_rejects_when_no_branch_matches(self):
        schema = JsonSchema(
            {"properties": {"value": {"anyOf": [{"type": "boolean"}, {"type": "string"}]}}}
        )
        _, violations = schema.check({"value": {"nested": True}})
        assert kinds(violations) == {"value": INVALID_UNION}

    def test_one_of(self):
        schema = JsonSchema({"properties": {"v": {"oneOf": [{"type": "integer"}, {"type": "null"}]}}})
        assert schema.check({"v": None})[1] == []
        assert kinds(schema.check({"v": "x"})[1]) == {"v": INVALID_UNION}

    def test_one_of_rejects_value_matching_two_branches(self):
        schema = JsonSchema({"properties": {"v": {"oneOf": [{"type": "integer"}, {"type": "number"}]}}})
        assert kinds(schema.check({"v": 3})[1]) == {"v": INVALID_UNION}

    def test_type_mismatch_reported_once(self):
        schema = JsonSchema({"properties": {"scope": {"type": "string", "enum": ["config"]}}})
        _, violations = schema.check({"scope": 5})

        assert len(violations) == 1
        assert violations[0].kind == INVALID_TYPE


class TestJsonSchemaNesting:
    """Tests for arrays, nested objects and pass-through."""

    SCHEMA = {
        "type": "object",
        "properties": {
            "rules": {
                "type": "array",
                "maxItems": 2,
                "items": {
                    "type": "object",
                    "properties": {"percentage": {"type": "integer", "maximum": 100}},
                    "required": ["percentage"],
                },
            },
        },
    }

    def test_array_items_reported_by_index(self):
        schema = JsonSchema(self.SCHEMA)
        _, violations = schema.check({"rules": [{"percentage": 10}, {"percentage": 150}]})
        assert kinds(violations) == {"rules.1.percentage": TOO_BIG}

    def test_missing_field_in_array_item(self):
        schema = JsonSchema(self.SCHEMA)
        _, violations = schema.check({"rules": [{}]})
        assert kinds(violations) == {"rules.0.percentage": REQUIRED}

    def test_array_length_bounds(self):
        schema = JsonSchema(self.SCHEMA)
        _, violations = schema.check({"rules": [{"percentage": 1}] * 3})
        assert kinds(violations) == {"rules": TOO_BIG}

    def test_unknown_fields_pass_through(self):
        schema = JsonSchema(UPDATE_CONFIG_SCHEMA)
        args = {
            "configId": "c1",
            "requestBody": {"name": "n", "futureField": [1, 2]},
            "extra": {"kept": True},
        }
        validated = validate_arguments("update-config", schema, args)

        assert validated == args

    def test_values_are_not_coerced(self):
        schema = JsonSchema({"properties": {"n": {"type": "number"}}})
        validated = validate_arguments("t", schema, {"n": 3})
        assert validated["n"] == 3
        assert isinstance(validated["n"], int)

    def test_multiple_violations_all_reported(self):
        schema = JsonSchema(UPDATE_CONFIG_SCHEMA)

        with pytest.raises(ArgumentValidationError) as exc_info:
            validate_arguments(
                "update-config", schema, {"configId": 7, "requestBody": {"name": "x" * 300}}
            )

        assert kinds(exc_info.value.violations) == {
            "configId": INVALID_TYPE,
            "requestBody.name": TOO_BIG,
        }


# -----------------------------------------------------------------------------
# Native pydantic models
# -----------------------------------------------------------------------------


class TestModelSchema:
    """Tests for pydantic-backed schemas."""

    def test_valid_arguments_dumped_as_json_values(self):
        schema = compile_schema(CreateTagArguments)
        validated = validate_arguments(
            "create-tag", schema, {"productId": PRODUCT_ID, "requestBody": {"name": "beta"}}
        )

        assert validated == {"productId": PRODUCT_ID, "requestBody": {"name": "beta"}}

    def test_unset_optionals_stay_absent(self):
        schema = compile_schema(CreateTagArguments)
        validated, _ = schema.check({"productId": PRODUCT_ID, "requestBody": {"name": "beta"}})
        assert "color" not in validated["requestBody"]

    def test_unknown_fields_pass_through(self):
        schema = compile_schema(CreateTagArguments)
        validated = validate_arguments(
            "create-tag",
            schema,
            {"productId": PRODUCT_ID, "requestBody": {"name": "beta", "icon": "star"}, "trace": "t1"},
        )

        assert validated["requestBody"]["icon"] == "star"
        assert validated["trace"] == "t1"

    def test_missing_fields_use_required_kind(self):
        schema = compile_schema(CreateTagArguments)
        _, violations = schema.check({"productId": PRODUCT_ID, "requestBody": {}})
        assert kinds(violations) == {"requestBody.name": REQUIRED}

    def test_missing_body_reports_nested_required_leaf(self):
        schema = compile_schema(CreateTagArguments)

        with pytest.raises(ArgumentValidationError) as exc_info:
            validate_arguments("create-tag", schema, {"productId": PRODUCT_ID})

        assert kinds(exc_info.value.violations) == {"requestBody.name": REQUIRED}
        assert "requestBody.name (required)" in str(exc_info.value)

    def test_both_modes_report_missing_body_alike(self):
        native = compile_schema(CreateTagArguments)
        declared = JsonSchema(
            {
                "properties": {
                    "productId": {"type": "string", "format": "uuid"},
                    "requestBody": {
                        "type": "object",
                        "properties": {"name": {"type": "string"}, "color": {"type": ["string", "null"]}},
                        "required": ["name"],
                    },
                },
                "required": ["productId", "requestBody"],
            }
        )

        for schema in (native, declared):
            _, violations = schema.check({})
            assert kinds(violations) == {"productId": REQUIRED, "requestBody.name": REQUIRED}

    def test_length_counts_code_points(self):
        schema = compile_schema(CreateTagArguments)
        emoji = "\U0001F680"

        assert schema.check({"productId": PRODUCT_ID, "requestBody": {"name": emoji * 255}})[1] == []
        _, violations = schema.check({"productId": PRODUCT_ID, "requestBody": {"name": emoji * 256}})
        assert kinds(violations) == {"requestBody.name": TOO_BIG}

    def test_integral_float_is_narrowed_to_int(self):
        schema = compile_schema(UpdateTagArguments)
        validated = validate_arguments("update-tag", schema, {"tagId": 5.0, "requestBody": {}})
        assert validated["tagId"] == 5
        assert isinstance(validated["tagId"], int)

    def test_max_length_boundary(self):
        schema = compile_schema(CreateTagArguments)
        ok = {"productId": PRODUCT_ID, "requestBody": {"name": "x" * 255}}
        too_long = {"productId": PRODUCT_ID, "requestBody": {"name": "x" * 256}}

        assert schema.check(ok)[1] == []
        assert kinds(schema.check(too_long)[1]) == {"requestBody.name": TOO_BIG}

    def test_bad_uuid_is_invalid_string(self):
        schema = compile_schema(CreateTagArguments)
        _, violations = schema.check({"productId": "nope", "requestBody": {"name": "beta"}})
        assert kinds(violations) == {"productId": INVALID_STRING}

    def test_literal_and_bounds(self):
        schema = compile_schema(StaleFlagsArguments)
        _, violations = schema.check(
            {"productId": PRODUCT_ID, "scope": "everything", "staleFlagAgeDays": 0}
        )
        assert kinds(violations) == {
            "scope": INVALID_ENUM_VALUE,
            "staleFlagAgeDays": TOO_SMALL,
        }

    def test_json_schema_comes_from_model(self):
        schema = compile_schema(CreateTagArguments)
        rendered = schema.json_schema()

        assert rendered["type"] == "object"
        assert set(rendered["required"]) == {"productId", "requestBody"}
