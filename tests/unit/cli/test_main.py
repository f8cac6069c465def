"""Tests for the command line entry point."""

import io
import json
from unittest.mock import patch

import pytest
import yaml

from src._package import DESCRIPTION
from src.cli.main import main, parse_args


def _exit_code(argv):
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


class TestParseArgs:
    def test_run_options(self):
        args = parse_args(["patterns", "run", "factory-method", "--machine-type", "3"])
        assert args.resource == "patterns"
        assert args.action == "run"
        assert args.name == "factory-method"
        assert args.machine_type == 3
        assert args.choice is None

    def test_global_options(self):
        args = parse_args(["--format", "yaml", "--log-level", "DEBUG", "config", "show"])
        assert args.format == "yaml"
        assert args.log_level == "DEBUG"

    def test_help_describes_package(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--help"])
        assert exc_info.value.code == 0
        assert DESCRIPTION in capsys.readouterr().out

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            parse_args(["--version"])
        assert exc_info.value.code == 0
        assert "1.0.0" in capsys.readouterr().out


class TestMainCatalog:
    def test_patterns_list_json(self, capsys):
        main(["patterns", "list"])

        data = json.loads(capsys.readouterr().out)
        assert data["count"] == 12

    def test_patterns_list_yaml_by_category(self, capsys):
        main(["--format", "yaml", "patterns", "list", "--category", "creational"])

        data = yaml.safe_load(capsys.readouterr().out)
        assert [p["name"] for p in data["patterns"]] == [
            "abstract-factory",
            "builder",
            "factory-method",
            "singleton",
            "prototype",
        ]

    def test_patterns_list_table(self, capsys):
        main(["patterns", "list", "--format", "table"])

        out = capsys.readouterr().out
        assert "abstract-factory" in out
        assert "Summary" in out

    def test_patterns_show_list_format(self, capsys):
        main(["patterns", "show", "bridge", "--format", "list"])

        out = capsys.readouterr().out
        assert out.startswith("Pattern: bridge")
        assert "Category: structural" in out

    def test_unknown_pattern_is_an_error(self, capsys):
        assert _exit_code(["patterns", "show", "visitor"]) == 1
        assert "Error: Pattern with ID visitor not found" in capsys.readouterr().err

    def test_quiet_suppresses_error_message(self, capsys):
        assert _exit_code(["--quiet", "patterns", "show", "visitor"]) == 1
        assert "Error:" not in capsys.readouterr().err

    def test_missing_resource(self, capsys):
        assert _exit_code([]) == 1
        assert "No resource specified" in capsys.readouterr().err

    def test_missing_action(self, capsys):
        assert _exit_code(["patterns"]) == 1
        assert "No action specified for patterns" in capsys.readouterr().err


class TestMainRun:
    def test_run_success(self, capsys):
        assert _exit_code(["patterns", "run", "decorator"]) == 0
        assert "Description: Simple Coffee, Milk, Sugar, Whipped Cream" in capsys.readouterr().out

    def test_run_with_choice(self, capsys):
        assert _exit_code(["patterns", "run", "abstract-factory", "--choice", "2"]) == 0
        assert "Preparing espresso." in capsys.readouterr().out

    def test_run_invalid_choice(self, capsys):
        assert _exit_code(["patterns", "run", "abstract-factory", "--choice", "7"]) == 1
        assert "Invalid choice!" in capsys.readouterr().out

    def test_run_reads_stdin(self, capsys):
        with patch("sys.stdin", io.StringIO("oops\n")):
            assert _exit_code(["patterns", "run", "abstract-factory"]) == 1
        assert "Invalid input!" in capsys.readouterr().out

    def test_run_unknown_machine_type(self):
        assert _exit_code(["patterns", "run", "factory-method", "--machine-type", "99"]) == 1

    def test_run_all(self, capsys):
        assert _exit_code(["patterns", "run-all"]) == 0
        out = capsys.readouterr().out
        assert "=== proxy ===" in out
        assert "Balance with wrong pin: 0" in out

    def test_domain_error_from_demo(self, capsys):
        from src.domain.creational.builder import CoffeeValidationError

        with patch(
            "src.interface.creational_command_handlers.BuilderDemoHandler.run",
            side_effect=CoffeeValidationError("Requestor name cannot be empty."),
        ):
            assert _exit_code(["patterns", "run", "builder"]) == 1
        assert "Error: Requestor name cannot be empty." in capsys.readouterr().err

    def test_invalid_machine_setting_is_a_domain_error(self, capsys):
        from src.domain.creational.prototype import SimpleCoffeeMachine

        with patch(
            "src.interface.creational_command_handlers.PrototypeDemoHandler.run",
            side_effect=lambda: SimpleCoffeeMachine().set_cup_size(5),
        ):
            assert _exit_code(["patterns", "run", "prototype"]) == 1

        err = capsys.readouterr().err
        assert "Error: Cup size must be one of (1, 2, 3), got 5" in err
        assert "Unexpected error" not in err

    def test_unexpected_error(self, capsys):
        with patch(
            "src.interface.structural_command_handlers.AdapterDemoHandler.run",
            side_effect=RuntimeError("boom"),
        ):
            assert _exit_code(["patterns", "run", "adapter"]) == 1
        assert "Unexpected error: boom" in capsys.readouterr().err

    def test_keyboard_interrupt(self, capsys):
        with patch(
            "src.interface.structural_command_handlers.ProxyDemoHandler.run",
            side_effect=KeyboardInterrupt,
        ):
            assert _exit_code(["patterns", "run", "proxy"]) == 130
        assert "Operation cancelled by user." in capsys.readouterr().err


class TestMainConfig:
    def test_config_show(self, capsys, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("demos:\n  facade:\n    movie: Up\n")

        main(["--config", str(path), "config", "show"])
        data = json.loads(capsys.readouterr().out)
        assert data["config_file"] == str(path)
        assert data["config"]["demos"]["facade"]["movie"] == "Up"

    def test_config_validate(self, capsys, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"environment": "testing"}))

        main(["config", "validate", "--file", str(path)])
        assert json.loads(capsys.readouterr().out)["valid"] is True

    def test_invalid_config_file(self, capsys, tmp_path):
        path = tmp_path / "config.yml"
        path.write_text("logging:\n  level: LOUD\n")

        assert _exit_code(["--config", str(path), "patterns", "list"]) == 1
        assert "Error: Invalid configuration" in capsys.readouterr().err

    def test_missing_config_file(self, capsys, tmp_path):
        assert _exit_code(["--config", str(tmp_path / "missing.yml"), "config", "show"]) == 1
        assert "Configuration file not found" in capsys.readouterr().err
