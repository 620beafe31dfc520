r"""
Tests for perf_harness.cli module.
"""

import logging
import re

import pytest
from typer.testing import CliRunner

from perf_harness.cli import app
from perf_harness.config import ENV_PREFIX

WORKLOADS = """\
def register_workloads(registry, config):
    registry.register("alpha", lambda: None)

    @registry.workload("beta")
    def beta():
        '''Reads the data location.'''
        return config.data_path
"""

SUMMARY = re.compile(
    r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} \S* ?Python version: Run count = 2, "
    r"all median time costs\[2\] : alpha=0; beta=0$",
    re.MULTILINE,
)


@pytest.fixture
def runner():
    return CliRunner()


class TestRunCommand:
    def test_prints_report(self, runner, workload_module, tmp_path):
        module = workload_module(WORKLOADS)
        staging = tmp_path / "staging"

        result = runner.invoke(app, ["run", str(staging), "2", "file:///data", "-w", module])

        assert result.exit_code == 0, result.output
        assert "beta: min=0,max=0,mean=0,median=0,count=2,[0,0]" in result.stdout
        assert "alpha: min=0,max=0,mean=0,median=0,count=2,[0,0]" in result.stdout
        assert SUMMARY.search(result.stdout)
        assert result.stdout.index("beta:") < result.stdout.index("alpha:")
        assert staging.is_dir()

    def test_workload_module_from_env(self, runner, workload_module, tmp_path, monkeypatch):
        monkeypatch.setenv(f"{ENV_PREFIX}WORKLOADS", workload_module(WORKLOADS))

        result = runner.invoke(app, ["run", str(tmp_path), "1", "data", "--only", "beta"])

        assert result.exit_code == 0, result.output
        assert "beta: min=0" in result.stdout
        assert "alpha:" not in result.stdout

    @pytest.mark.parametrize("args", [[], ["/tmp/perf"], ["/tmp/perf", "10"], ["/tmp/perf", "10", "data", "extra"]])
    def test_wrong_arity_prints_usage(self, runner, args):
        result = runner.invoke(app, ["run", *args])

        assert result.exit_code == 0
        assert "Usage   : perf-harness run" in result.stdout
        assert "Example :" in result.stdout

    def test_negative_run_count_reaches_validation(self, runner, workload_module, tmp_path):
        result = runner.invoke(app, ["run", str(tmp_path), "-1", "data", "-w", workload_module(WORKLOADS)])

        assert result.exit_code == 1
        assert "No such option" not in result.output
        assert "Invalid run count '-1'" in result.output

    def test_fail_fast_closes_environment(self, runner, workload_module, tmp_path, caplog):
        module = workload_module(
            "def register_workloads(registry, config):\n"
            "    registry.register('broken', lambda: 1 / 0)\n"
        )

        with caplog.at_level(logging.INFO, logger="perf_harness"):
            result = runner.invoke(app, ["run", str(tmp_path), "2", "data", "-w", module, "--fail-fast"])

        assert result.exit_code == 1
        assert "run aborted by ZeroDivisionError" in result.output
        assert "Closed environment" in caplog.text
        assert caplog.text.index("Opened environment") < caplog.text.index("Closed environment")

    def test_failing_run_without_fail_fast_still_reports(self, runner, workload_module, tmp_path):
        module = workload_module(
            "def register_workloads(registry, config):\n"
            "    registry.register('broken', lambda: 1 / 0)\n"
        )

        result = runner.invoke(app, ["run", str(tmp_path), "2", "data", "-w", module])

        assert result.exit_code == 0, result.output
        assert "broken: min=0,max=0,mean=0,median=0,count=2,[0,0]" in result.stdout

    def test_missing_workload_module(self, runner, tmp_path, monkeypatch):
        monkeypatch.delenv(f"{ENV_PREFIX}WORKLOADS", raising=False)

        result = runner.invoke(app, ["run", str(tmp_path), "1", "data"])

        assert result.exit_code == 1
        assert "no workload module" in result.output

    def test_duplicate_workload(self, runner, workload_module, tmp_path):
        module = workload_module(
            "def register_workloads(registry, config):\n"
            "    registry.register('a', lambda: None)\n"
            "    registry.register('a', lambda: None)\n"
        )

        result = runner.invoke(app, ["run", str(tmp_path), "1", "data", "-w", module])

        assert result.exit_code == 1
        assert "already registered" in result.output


class TestListCommand:
    def test_lists_in_run_order(self, runner, workload_module):
        result = runner.invoke(app, ["list", "-w", workload_module(WORKLOADS)])

        assert result.exit_code == 0, result.output
        assert "  - beta: Reads the data location." in result.stdout
        assert result.stdout.index("beta") < result.stdout.index("alpha")


class TestNoCommand:
    def test_prints_usage(self, runner):
        result = runner.invoke(app, [])

        assert result.exit_code == 0
        assert "Usage   : perf-harness run" in result.stdout
