"""Integration tests for the command-line runner."""

import argparse
import logging
import pytest
import yaml
import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from pydantic import ValidationError

from apps.runner import RunnerConfig
from apps.runner.main import AnytimeRunner, apply_overrides, build_parser, load_config, main
from algorithms import SelectionSort, NewtonSqrt, ArgmaxSearch
from pkgs.observability import PROJECT_NAMESPACES


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    namespaces = {name: logging.getLogger(name).level for name in PROJECT_NAMESPACES}
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    for name, ns_level in namespaces.items():
        logging.getLogger(name).setLevel(ns_level)


@pytest.fixture
def config_file(tmp_path):
    def _write(config):
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump(config))
        return str(path)
    return _write


class TestConfig:
    """Test suite for configuration loading and validation."""

    def test_defaults(self):
        config = RunnerConfig()
        assert config.run.algorithm == "sort"
        assert config.run.deadline_ms == 10.0
        assert config.data.size == 1000
        assert config.logging.format == "structured"

    def test_default_yaml_matches_schema(self):
        path = os.path.join(os.path.dirname(__file__), '..', 'configs', 'default.yaml')
        config = RunnerConfig.model_validate(load_config(path))
        assert config == RunnerConfig()

    def test_missing_file_falls_back(self, tmp_path):
        assert load_config(str(tmp_path / "absent.yaml")) == {}
        assert load_config(None) == {}

    def test_empty_file_is_empty_config(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert load_config(str(path)) == {}

    def test_non_mapping_file_rejected(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- 1\n- 2\n")
        with pytest.raises(ValueError, match="must be a mapping"):
            load_config(str(path))

    def test_non_mapping_section_rejected(self):
        args = build_parser().parse_args([])
        with pytest.raises(ValueError, match="'run'"):
            apply_overrides({"run": 5}, args)

    def test_invalid_values_rejected(self):
        with pytest.raises(ValidationError):
            RunnerConfig.model_validate({"run": {"deadline_ms": -1}})
        with pytest.raises(ValidationError):
            RunnerConfig.model_validate({"run": {"algorithm": "bogosort"}})

    def test_flags_override_yaml(self):
        raw = {"run": {"algorithm": "sqrt", "deadline_ms": 5}, "data": {"size": 10}}
        args = build_parser().parse_args(["--deadline-ms", "250", "--seed", "3", "--record", "-v"])

        merged = apply_overrides(raw, args)
        config = RunnerConfig.model_validate(merged)

        assert config.run.algorithm == "sqrt"
        assert config.run.deadline_ms == 250.0
        assert config.run.record is True
        assert config.data.size == 10
        assert config.data.seed == 3
        assert config.logging.level == "DEBUG"
        assert raw["run"]["deadline_ms"] == 5

    def test_overrides_without_flags(self):
        args = argparse.Namespace(algorithm=None, deadline_ms=None, record=False,
                                  size=None, seed=None, verbose=False)
        assert apply_overrides({}, args) == {"run": {}, "data": {}, "logging": {}, "output": {}}


class TestAnytimeRunner:
    """Test suite for building and running computations."""

    def test_build_selects_algorithm(self):
        for algorithm, cls in (("sort", SelectionSort), ("sqrt", NewtonSqrt), ("argmax", ArgmaxSearch)):
            config = RunnerConfig.model_validate({
                "run": {"algorithm": algorithm},
                "data": {"size": 8, "seed": 1},
                "output": {"show_data": False}
            })
            assert isinstance(AnytimeRunner(config).build(), cls)

    def test_generated_data_is_seeded(self):
        config = RunnerConfig.model_validate({"data": {"size": 16, "seed": 42, "low": 0, "high": 10}})
        first = AnytimeRunner(config).generate_data()
        second = AnytimeRunner(config).generate_data()
        assert first == second
        assert len(first) == 16
        assert all(0 <= x < 10 for x in first)

    def test_run_to_completion(self, capsys):
        config = RunnerConfig.model_validate({
            "run": {"deadline_ms": 60000},
            "data": {"size": 20, "seed": 5}
        })
        result = AnytimeRunner(config).run()

        assert result.success
        assert result.output == sorted(result.output)
        out = capsys.readouterr().out
        assert "Input:" in out
        assert "Completed in" in out

    def test_run_with_zero_deadline_reports_partial(self, capsys):
        config = RunnerConfig.model_validate({
            "run": {"deadline_ms": 0},
            "data": {"size": 50, "seed": 5}
        })
        result = AnytimeRunner(config).run()

        assert not result.success
        assert result.steps == 1
        out = capsys.readouterr().out
        assert "Deadline missed by" in out
        assert "Partial result:" in out
        assert "items were sorted" in out

    def test_recording(self, tmp_path):
        config = RunnerConfig.model_validate({
            "run": {"algorithm": "sqrt", "deadline_ms": 60000, "record": True},
            "output": {"recordings_path": str(tmp_path / "trace"), "show_data": False}
        })
        runner = AnytimeRunner(config)
        result = runner.run()

        assert len(runner.recorder.rows) == result.steps
        assert runner.recorder.metadata["algorithm"] == "sqrt"
        assert (tmp_path / "trace.csv").exists()
        assert (tmp_path / "trace.jsonl").exists()


class TestMain:
    """Test suite for the CLI entry point."""

    def test_main_success(self, config_file, capsys):
        path = config_file({"run": {"deadline_ms": 60000}, "data": {"size": 10, "seed": 1}})
        assert main(["--config", path]) == 0
        assert "Completed in" in capsys.readouterr().out

    def test_main_timeout_is_not_an_error(self, config_file, capsys):
        path = config_file({"data": {"size": 100, "seed": 2}})
        assert main(["--config", path, "--deadline-ms", "0"]) == 0
        assert "Deadline missed by" in capsys.readouterr().out

    def test_main_invalid_config(self, config_file):
        path = config_file({"run": {"deadline_ms": -5}})
        assert main(["--config", path]) == 1

    def test_main_rejects_non_mapping_config(self, tmp_path):
        for text in ("- 1\n- 2\n", "just a string\n", "42\n"):
            path = tmp_path / "config.yaml"
            path.write_text(text)
            assert main(["--config", str(path)]) == 1

    def test_main_rejects_scalar_section(self, tmp_path):
        for text in ("run: 5\n", "data: [1, 2]\n", "logging: quiet\n"):
            path = tmp_path / "config.yaml"
            path.write_text(text)
            assert main(["--config", str(path)]) == 1

    def test_main_logs_config_load(self, config_file, capsys):
        path = config_file({"run": {"deadline_ms": 60000}, "data": {"size": 5, "seed": 1}})
        assert main(["--config", path]) == 0
        assert f"Loaded configuration from {path}" in capsys.readouterr().out

    def test_main_run_failure(self, config_file):
        path = config_file({"run": {"algorithm": "argmax"}, "data": {"size": 0}})
        assert main(["--config", path]) == 1


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
