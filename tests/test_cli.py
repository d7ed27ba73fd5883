"""Tests for the rulekit CLI."""

import json
from unittest.mock import patch

from rulekit import __version__
from rulekit.cli import main


class TestCli:
    """Test CLI commands."""

    def test_version(self, capsys):
        assert main(["--version"]) == 0
        assert __version__ in capsys.readouterr().out

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out.lower()

    def test_list(self, template_tree, capsys):
        assert main(["--templates-dir", str(template_tree), "list"]) == 0

        out = capsys.readouterr().out
        assert "auth" in out
        assert "Authentication Rules [always]" in out
        assert "cursor" not in out

    def test_list_json(self, template_tree, capsys):
        assert main(["-d", str(template_tree), "list", "--json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert sorted(t["key"] for t in data) == ["api_routes", "auth", "my_rule"]

    def test_list_empty(self, tmp_path, capsys):
        assert main(["-d", str(tmp_path), "list"]) == 0
        assert "No templates found." in capsys.readouterr().out

    def test_list_uses_env_root(self, template_tree, monkeypatch, capsys):
        monkeypatch.setenv("RULEKIT_TEMPLATES_DIR", str(template_tree))

        assert main(["list", "--json"]) == 0
        assert len(json.loads(capsys.readouterr().out)) == 3

    def test_show(self, template_tree, capsys):
        assert main(["-d", str(template_tree), "show", "auth"]) == 0
        assert "## Authentication Rules" in capsys.readouterr().out

    def test_show_json(self, template_tree, capsys):
        assert main(["-d", str(template_tree), "show", "my_rule", "--json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data["description"] == "Rules for my-rule"
        assert "content" in data

    def test_show_unknown_key(self, template_tree, capsys):
        assert main(["-d", str(template_tree), "show", "nope"]) == 1

        err = capsys.readouterr().err
        assert "Template not found: nope" in err
        assert "auth" in err

    def test_find(self, template_tree, capsys):
        assert main(["-d", str(template_tree), "find", "http", "-i"]) == 0

        out = capsys.readouterr().out
        assert "api_routes" in out
        assert "my_rule" not in out

    def test_find_invalid_pattern(self, template_tree, capsys):
        assert main(["-d", str(template_tree), "find", "("]) == 2
        assert "Invalid pattern" in capsys.readouterr().err

    def test_paths(self, template_tree, capsys):
        assert main(["-d", str(template_tree), "paths"]) == 0

        out = capsys.readouterr().out
        assert str(template_tree) in out
        assert "cursor_layout" in out
        assert "header_partial" in out

    def test_serve(self, template_tree):
        with patch("rulekit.server.RuleKitMCPServer") as server_cls:
            server_cls.return_value.start.return_value = None

            with patch("rulekit.cli.asyncio.run") as run:
                assert main(["-d", str(template_tree), "serve"]) == 0

            run.assert_called_once()
            registry = server_cls.call_args.args[0]
            assert registry.templates_root == template_tree
