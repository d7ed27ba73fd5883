"""Tests for template metadata parsing."""

import pytest

from rulekit.constants import TEMPLATE_CONSTANTS
from rulekit.templates.parser import (
    LoadedTemplate,
    TemplateMetadata,
    derive_template_key,
    derive_template_name,
    parse_template_metadata,
    template_base_name,
)


class TestDeriveTemplateKey:
    """Test key normalization."""

    @pytest.mark.parametrize("base_name, expected", [
        ("example", "auth"),
        ("example-foo", "foo"),
        ("example-foo-bar", "foo_bar"),
        ("my-rule", "my_rule"),
        ("plain", "plain"),
        ("examples-x", "examples_x"),
    ])
    def test_key_derivation(self, base_name, expected):
        assert derive_template_key(base_name) == expected

    def test_example_dash_alone_is_empty(self):
        """Only the prefix is stripped, nothing else."""
        assert derive_template_key("example-") == ""


class TestDeriveTemplateName:
    """Test filename-based names."""

    def test_strips_example_prefix_and_capitalizes(self):
        assert derive_template_name("example-react-components") == "React components"

    def test_plain_name(self):
        assert derive_template_name("my-rule") == "My rule"

    def test_bare_example_falls_back(self):
        assert derive_template_name("example") == "Custom Rule"

    def test_underscore_start_unchanged(self):
        assert derive_template_name("_private") == "_private"

    def test_non_ascii_start_unchanged(self):
        """Only ASCII word characters are capitalized."""
        assert derive_template_name("élan-rule") == "élan rule"


class TestTemplateBaseName:
    """Test extension stripping."""

    def test_strips_template_extension(self, tmp_path):
        assert template_base_name(tmp_path / "example-foo.mdc.liquid") == "example-foo"

    def test_other_extension_kept(self):
        assert template_base_name("notes.md") == "notes.md"


class TestParseTemplateMetadata:
    """Test directive extraction."""

    def test_all_directives(self, auth_template):
        meta = parse_template_metadata("/rules/example.mdc.liquid", auth_template)

        assert meta == {
            "key": "auth",
            "name": "Authentication Rules",
            "description": "Auth conventions",
            "globs": "**/*.ts",
            "always_apply": True,
        }

    def test_defaults_when_no_directives(self):
        meta = parse_template_metadata("/rules/my-rule.mdc.liquid", "just text\n")

        assert meta["description"] == "Rules for my-rule"
        assert meta["globs"] == TEMPLATE_CONSTANTS["DEFAULT_GLOBS"]
        assert meta["always_apply"] is False
        assert meta["name"] == "My rule"
        assert meta["key"] == "my_rule"

    def test_single_quoted_values(self):
        content = "{% assign rule_description = 'Single quoted' %}\n{% assign globs = 'src/**' %}"
        meta = parse_template_metadata("x.mdc.liquid", content)

        assert meta["description"] == "Single quoted"
        assert meta["globs"] == "src/**"

    def test_always_apply_false(self):
        meta = parse_template_metadata("x.mdc.liquid", "{% assign alwaysApply = false %}")
        assert meta["always_apply"] is False

    def test_always_apply_true_anywhere(self):
        content = "lots of text\n<!-- {% assign alwaysApply = true %} -->\nmore text"
        meta = parse_template_metadata("x.mdc.liquid", content)
        assert meta["always_apply"] is True

    def test_first_directive_wins(self):
        content = (
            '{% assign rule_description = "first" %}\n'
            '{% assign rule_description = "second" %}\n'
        )
        meta = parse_template_metadata("x.mdc.liquid", content)
        assert meta["description"] == "first"

    def test_header_outside_content_block_ignored(self):
        content = "## Outside\n{% block content %}\nno header here\n{% endblock %}"
        meta = parse_template_metadata("example-foo-bar.mdc.liquid", content)
        assert meta["name"] == "Foo bar"

    def test_header_is_trimmed(self):
        content = "{% block content %}\n\n##   Spaced Title   \n{% endblock %}"
        meta = parse_template_metadata("x.mdc.liquid", content)
        assert meta["name"] == "Spaced Title"

    def test_empty_description_uses_default(self):
        meta = parse_template_metadata("x.mdc.liquid", '{% assign rule_description = "" %}')
        assert meta["description"] == "Rules for x"

    def test_bare_example_file(self):
        meta = parse_template_metadata("example.mdc.liquid", "")
        assert meta["key"] == "auth"
        assert meta["name"] == "Custom Rule"
        assert meta["description"] == "Rules for example"


class TestTemplateMetadata:
    """Test serialization."""

    def test_to_dict_uses_camel_case_flag(self, tmp_path):
        meta = TemplateMetadata(
            key="auth",
            name="Auth",
            description="d",
            path=tmp_path / "example.mdc.liquid",
            globs="**/*",
            always_apply=True,
        )
        data = meta.to_dict()

        assert data["alwaysApply"] is True
        assert data["path"] == str(tmp_path / "example.mdc.liquid")
        assert "always_apply" not in data

    def test_loaded_template_includes_content(self, tmp_path):
        loaded = LoadedTemplate(
            key="auth",
            name="Auth",
            description="d",
            path=tmp_path / "example.mdc.liquid",
            globs="**/*",
            always_apply=False,
            content="body",
        )
        assert loaded.to_dict()["content"] == "body"
        assert isinstance(loaded, TemplateMetadata)
