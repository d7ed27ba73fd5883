"""
Constants
Patterns and defaults used to discover and parse rule templates.
"""

import re

TEMPLATE_REGEX = {
    # {% assign rule_description = "value" %}
    "RULE_DESCRIPTION": re.compile(r"""\{%\s*assign\s+rule_description\s*=\s*["']([^"']+)["']"""),
    # {% assign globs = "value" %}
    "GLOBS": re.compile(r"""\{%\s*assign\s+globs\s*=\s*["']([^"']+)["']"""),
    # {% assign alwaysApply = true|false %}
    "ALWAYS_APPLY": re.compile(r"\{%\s*assign\s+alwaysApply\s*=\s*(true|false)"),
    # First ## header after {% block content %}
    "CONTENT_HEADER": re.compile(r"\{%\s*block\s+content\s*%\}.*?##\s*([^\n]+)", re.DOTALL),
    # ASCII word characters only, like a JavaScript \w
    "WORD_START": re.compile(r"^\w", re.ASCII),
    "EXAMPLE_PREFIX": re.compile(r"^example-?"),
    "DASHES": re.compile(r"-"),
}

TEMPLATE_CONSTANTS = {
    # len("example-")
    "EXAMPLE_PREFIX_LENGTH": 8,
    "DEFAULT_GLOBS": "**/*.{ts,tsx,js,jsx}",
    "TEMPLATE_EXTENSION": ".mdc.liquid",
    # layouts and partials are building blocks, not rules
    "SKIP_DIRECTORIES": ("layout", "partials", "src", "node_modules"),
    "DEFAULT_NAME": "Custom Rule",
    "DEFAULT_KEY": "auth",
}

SUPPORTED_EXTENSIONS = (".ts", ".tsx", ".js", ".jsx")
