"""
Shared pytest fixtures for rulekit tests.

Provides template-tree builders and resets the process-wide config and
default registry between tests.
"""

import logging
import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

# Add project root to Python path
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


AUTH_TEMPLATE = """{% layout 'layout/cursor.mdc.liquid' %}
{% assign rule_description = "Auth conventions" %}
{% assign globs = "**/*.ts" %}
{% assign alwaysApply = true %}

{% block content %}
## Authentication Rules

- Check sessions first.
{% endblock %}
"""

PLAIN_TEMPLATE = """{% block content %}
Nothing but text.
{% endblock %}
"""


def write_template(root: Path, relative: str, content: str = PLAIN_TEMPLATE) -> Path:
    """Create a template file (and parents) under root."""
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture
def make_template():
    """write_template(root, relative, content) as a fixture."""
    return write_template


@pytest.fixture
def auth_template():
    return AUTH_TEMPLATE


@pytest.fixture
def template_tree(tmp_path):
    """
    A small template root:

    rules/
    ├── example.mdc.liquid             -> auth
    ├── example-api-routes.mdc.liquid  -> api_routes
    ├── team/my-rule.mdc.liquid        -> my_rule
    ├── notes.md                       (ignored, wrong extension)
    ├── layout/cursor.mdc.liquid       (skipped directory)
    └── partials/header.mdc.liquid     (skipped directory)
    """
    root = tmp_path / "rules"
    write_template(root, "example.mdc.liquid", AUTH_TEMPLATE)
    write_template(
        root,
        "example-api-routes.mdc.liquid",
        '{% assign rule_description = "HTTP handler rules" %}\n'
        "{% block content %}\n## API Route Rules\n{% endblock %}\n",
    )
    write_template(root, "team/my-rule.mdc.liquid")
    write_template(root, "notes.md", "# not a template")
    write_template(root, "layout/cursor.mdc.liquid", "{% block content %}{% endblock %}")
    write_template(root, "partials/header.mdc.liquid", "# header")
    return root


@pytest.fixture
def logger():
    """Standard mock logger for all tests."""
    from rulekit.utils.logger import Logger
    return Mock(spec=Logger)


@pytest.fixture(autouse=True)
def reset_singletons(monkeypatch):
    """Fresh config and default registry for every test."""
    from rulekit.config import ConfigManager
    from rulekit.templates import set_default_registry

    monkeypatch.delenv("RULEKIT_TEMPLATES_DIR", raising=False)
    monkeypatch.delenv("RULEKIT_SKIP_DIRS", raising=False)
    monkeypatch.setattr(ConfigManager, "_instance", None)
    set_default_registry(None)
    yield
    set_default_registry(None)

    # Logger() binds a handler to whatever stderr was current; drop it
    names = ["rulekit"] + [
        name for name in logging.root.manager.loggerDict if name.startswith("rulekit.")
    ]
    for name in names:
        package_logger = logging.getLogger(name)
        for handler in list(package_logger.handlers):
            package_logger.removeHandler(handler)
        package_logger.setLevel(logging.NOTSET)
