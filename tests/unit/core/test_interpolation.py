"""
Unit tests for template splitting and interpolation.
"""

import logging
from types import SimpleNamespace

import pytest

from literal_sql.core.interpolation import Raw, SQLTemplate, interpolate, to_template
from literal_sql.errors import ParameterObjectError, TemplateError


@pytest.mark.unit
class TestSQLTemplateFromFormat:
    """Tests for splitting format-style templates."""

    def test_automatic_fields(self):
        template = SQLTemplate.from_format("WHERE a = {} AND b = {}", (1, "x"))
        assert template.segments == ("WHERE a = ", " AND b = ", "")
        assert template.values == (1, "x")

    def test_manual_and_keyword_fields(self):
        template = SQLTemplate.from_format(
            "WHERE a = {1} AND b = {0} AND c = {name}", ("first", "second"), {"name": 3}
        )
        assert template.values == ("second", "first", 3)

    def test_attribute_and_index_lookup(self):
        user = SimpleNamespace(id=7)
        template = SQLTemplate.from_format(
            "WHERE id = {user.id} AND tag = {tags[0]}", (), {"user": user, "tags": ["a"]}
        )
        assert template.values == (7, "a")

    def test_escaped_braces_are_literal(self):
        template = SQLTemplate.from_format("WHERE data @> '{{}}'::jsonb AND id = {}", (1,))
        assert template.segments == ("WHERE data @> '{}'::jsonb AND id = ", "")

    def test_no_fields(self):
        template = SQLTemplate.from_format("SELECT 1")
        assert template.segments == ("SELECT 1",)
        assert template.values == ()

    def test_missing_value_raises(self):
        with pytest.raises(TemplateError):
            SQLTemplate.from_format("WHERE a = {} AND b = {}", (1,))

    def test_missing_keyword_raises(self):
        with pytest.raises(TemplateError):
            SQLTemplate.from_format("WHERE a = {name}")

    def test_mixed_numbering_raises(self):
        with pytest.raises(TemplateError):
            SQLTemplate.from_format("{} {0}", (1,))

    def test_format_spec_raises(self):
        with pytest.raises(TemplateError):
            SQLTemplate.from_format("LIMIT {:d}", (1,))

    def test_conversion_raises(self):
        with pytest.raises(TemplateError):
            SQLTemplate.from_format("WHERE a = {!r}", ("x",))

    def test_unbalanced_brace_raises(self):
        with pytest.raises(TemplateError):
            SQLTemplate.from_format("WHERE a = {", ())

    def test_segment_count_checked(self):
        with pytest.raises(TemplateError):
            SQLTemplate(("a", "b"), ())


@pytest.mark.unit
class TestToTemplate:
    """Tests for normalizing template shapes."""

    def test_template_string_like_object(self):
        t_string = SimpleNamespace(strings=("WHERE id = ", ""), values=(5,))
        template = to_template(t_string)
        assert template == SQLTemplate(("WHERE id = ", ""), (5,))

    def test_sql_template_passthrough(self):
        template = SQLTemplate(("LIMIT 1",))
        assert to_template(template) is template

    def test_extra_args_with_prebuilt_template_raise(self):
        with pytest.raises(TemplateError):
            to_template(SQLTemplate(("LIMIT 1",)), (1,))

    def test_unsupported_type_raises(self):
        with pytest.raises(TemplateError):
            to_template(42)


@pytest.mark.unit
class TestInterpolate:
    """Tests for resolving values into placeholders."""

    def test_primitives_become_numbered_params(self):
        template = SQLTemplate(("a = ", " AND b = ", " AND c = ", ""), (1, "John", True))
        result = interpolate(template, {}, 0)

        assert result.text == "a = $1 AND b = $2 AND c = $3"
        assert dict(result.params) == {1: 1, 2: "John", 3: True}
        assert result.param_counter == 3

    def test_numbering_continues_from_counter(self):
        template = SQLTemplate(("AND name = ", ""), ("John",))
        result = interpolate(template, {1: 1}, 1)

        assert result.text == "AND name = $2"
        assert dict(result.params) == {1: 1, 2: "John"}

    def test_none_becomes_null_without_slot(self):
        template = SQLTemplate(("a = ", " AND b = ", ""), (1, None))
        result = interpolate(template, {}, 0)

        assert result.text == "a = $1 AND b = NULL"
        assert result.param_counter == 1

    def test_raw_inlined(self):
        template = SQLTemplate(("ORDER BY ", " DESC"), (Raw("created_at"),))
        result = interpolate(template, {}, 0)

        assert result.text == "ORDER BY created_at DESC"
        assert result.param_counter == 0

    def test_extra_inline_types(self):
        template = SQLTemplate(("x IN (", ")"), (SimpleNamespace(),))
        result = interpolate(template, {}, 0, inline_types=(Raw, SimpleNamespace))

        assert result.text == "x IN (namespace())"
        assert result.param_counter == 0

    def test_non_primitive_values_are_params(self):
        template = SQLTemplate(("id = ANY(", ")"), ([1, 2, 3],))
        result = interpolate(template, {}, 0)

        assert result.text == "id = ANY($1)"
        assert result.params[1] == [1, 2, 3]

    def test_single_key_mapping_is_param_object(self):
        template = SQLTemplate(("id = ", ""), ({"id": 42},))
        result = interpolate(template, {}, 0, strict=True)

        assert result.text == "id = $1"
        assert result.params[1] == 42

    def test_multi_key_mapping_rejected_when_strict(self):
        template = SQLTemplate(("id = ", ""), ({"id": 42, "name": "x"},))

        with pytest.raises(ParameterObjectError) as exc_info:
            interpolate(template, {}, 0, strict=True)

        assert exc_info.value.keys == ["id", "name"]
        assert exc_info.value.to_dict()["error_type"] == "ParameterObjectError"

    def test_multi_key_mapping_keeps_first_when_lenient(self, caplog):
        caplog.set_level(logging.WARNING)
        template = SQLTemplate(("id = ", ""), ({"id": 42, "name": "x"},))

        result = interpolate(template, {}, 0, strict=False)

        assert result.text == "id = $1"
        assert result.params[1] == 42
        assert any("param_object_truncated" in r.getMessage() for r in caplog.records)

    def test_empty_mapping_lenient_stores_none(self):
        template = SQLTemplate(("id = ", ""), ({},))
        result = interpolate(template, {}, 0, strict=False)

        assert result.params[1] is None

    def test_strict_defaults_to_setting(self, monkeypatch):
        monkeypatch.setenv("LITERAL_SQL_STRICT_PARAM_OBJECTS", "false")

        template = SQLTemplate(("id = ", ""), ({"a": 1, "b": 2},))
        result = interpolate(template, {}, 0)

        assert result.params[1] == 1

    def test_input_params_not_modified(self):
        params = {1: "a"}
        interpolate(SQLTemplate(("x = ", ""), ("b",)), params, 1)

        assert params == {1: "a"}

    def test_params_read_only(self):
        result = interpolate(SQLTemplate(("x = ", ""), ("b",)), {}, 0)

        with pytest.raises(TypeError):
            result.params[2] = "c"
