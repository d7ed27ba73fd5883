"""
Template Parser

Extracts rule metadata from the raw text of a ``.mdc.liquid`` template.
Directives are matched by fixed regexes wherever they first appear; there is
no Liquid parsing here.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

from rulekit.constants import TEMPLATE_CONSTANTS, TEMPLATE_REGEX


@dataclass
class TemplateMetadata:
    """Metadata for one discovered rule template."""
    key: str
    name: str
    description: str
    path: Path
    globs: str
    always_apply: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "name": self.name,
            "description": self.description,
            "path": str(self.path),
            "globs": self.globs,
            "alwaysApply": self.always_apply,
        }


@dataclass
class LoadedTemplate(TemplateMetadata):
    """Template metadata together with the file body as read at lookup time."""
    content: str

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["content"] = self.content
        return data


def template_base_name(file_path: Path | str) -> str:
    """File name with the template extension stripped."""
    name = Path(file_path).name
    extension = TEMPLATE_CONSTANTS["TEMPLATE_EXTENSION"]
    if name.endswith(extension) and name != extension:
        return name[: -len(extension)]
    return name


def derive_template_key(base_name: str) -> str:
    """
    Normalize a base file name into a registry key.

    example-foo-bar -> foo_bar, example -> auth, my-rule -> my_rule
    """
    key = base_name
    if key.startswith("example-"):
        key = key[TEMPLATE_CONSTANTS["EXAMPLE_PREFIX_LENGTH"]:]
    elif key == "example":
        key = TEMPLATE_CONSTANTS["DEFAULT_KEY"]
    return TEMPLATE_REGEX["DASHES"].sub("_", key)


def derive_template_name(base_name: str) -> str:
    """Readable title from a base file name, or the generic fallback."""
    name = TEMPLATE_REGEX["EXAMPLE_PREFIX"].sub("", base_name)
    name = TEMPLATE_REGEX["DASHES"].sub(" ", name)
    name = TEMPLATE_REGEX["WORD_START"].sub(lambda m: m.group(0).upper(), name)
    return name or TEMPLATE_CONSTANTS["DEFAULT_NAME"]


def parse_template_metadata(file_path: Path | str, content: str) -> dict[str, Any]:
    """
    Parse template metadata from liquid file content.

    Args:
        file_path: Location of the template, used for filename-derived fields
        content: Raw template text

    Returns:
        Every TemplateMetadata field except ``path``
    """
    base_name = template_base_name(file_path)

    rule_desc_match = TEMPLATE_REGEX["RULE_DESCRIPTION"].search(content)
    globs_match = TEMPLATE_REGEX["GLOBS"].search(content)
    always_apply_match = TEMPLATE_REGEX["ALWAYS_APPLY"].search(content)
    header_match = TEMPLATE_REGEX["CONTENT_HEADER"].search(content)

    header = header_match.group(1).strip() if header_match else ""

    return {
        "key": derive_template_key(base_name),
        "name": header or derive_template_name(base_name),
        "description": rule_desc_match.group(1) if rule_desc_match else f"Rules for {base_name}",
        "globs": globs_match.group(1) if globs_match else TEMPLATE_CONSTANTS["DEFAULT_GLOBS"],
        "always_apply": bool(always_apply_match) and always_apply_match.group(1) == "true",
    }
