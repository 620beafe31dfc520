r"""
Command-line interface for perf-harness.

    perf-harness run /tmp/perf 10 hdfs:///perfdata/deletions/* -w my_suite.workloads
    perf-harness list -w my_suite.workloads
"""

import logging
from typing import Annotated

import typer

from perf_harness.config import HarnessConfig, get_env
from perf_harness.errors import HarnessError
from perf_harness.reporting import ReportGenerator
from perf_harness.runner import CoordinatorConfig, RunCoordinator, StagingEnvironment, open_environment
from perf_harness.workloads import WorkloadRegistry, load_workload_module

__all__ = ["app", "main"]

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

USAGE = """\
Usage   : perf-harness run  local-dir          run-count  data-path
Example : perf-harness run  /tmp/perfTest      10         hdfs:///perfdata/freebasedeletions/*
Example : perf-harness run  /tmp/perfTest      1          hdfs:///perf/data/deletions/deletions.csv-00000-of-00020
Example : perf-harness run  /tmp/perfTest      1          file:///data/mobius/deletions/*
Example : perf-harness run  /tmp/perfTest      1          /data/mobius/deletions"""

app = typer.Typer(
    name="perf-harness",
    help="Run named benchmark workloads repeatedly and report their timings.",
)


@app.callback(invoke_without_command=True)
def usage(ctx: typer.Context) -> None:
    """Run named benchmark workloads repeatedly and report their timings."""
    if ctx.invoked_subcommand is None:
        typer.echo(USAGE)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging level."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)


def _load_registry(module_name: str | None, config: HarnessConfig) -> WorkloadRegistry:
    module_name = module_name or get_env("WORKLOADS")
    if not module_name:
        typer.echo("Error: no workload module given (use --workloads or PERF_HARNESS_WORKLOADS)", err=True)
        raise typer.Exit(1)

    registry = WorkloadRegistry()
    load_workload_module(module_name, registry, config)
    return registry


@app.command(context_settings={"allow_extra_args": True, "ignore_unknown_options": True})
def run(
    ctx: typer.Context,
    local_dir: Annotated[str | None, typer.Argument(help="Working/staging directory")] = None,
    run_count: Annotated[str | None, typer.Argument(help="Runs per workload")] = None,
    data_path: Annotated[str | None, typer.Argument(help="Data location handed to workloads")] = None,
    workloads: Annotated[
        str | None, typer.Option("-w", "--workloads", help="Module defining register_workloads(registry, config)")
    ] = None,
    only: Annotated[str | None, typer.Option("--only", help="Workloads to run (comma-separated)")] = None,
    fail_fast: Annotated[bool, typer.Option("--fail-fast", help="Stop at the first failing run")] = False,
    verbose: Annotated[bool, typer.Option("-v", "--verbose", help="Verbose output")] = False,
) -> None:
    """Run every workload RUN_COUNT times and print the report."""
    args = [a for a in (local_dir, run_count, data_path) if a is not None]
    if len(args) != 3 or ctx.args:
        typer.echo(USAGE)
        return

    setup_logging(verbose)
    logger.info("Arguments are %s", ",".join(args))

    try:
        config = HarnessConfig.from_args(*args)
        registry = _load_registry(workloads, config)

        coordinator = RunCoordinator(
            config=CoordinatorConfig(
                workloads=only.split(",") if only else None,
                continue_on_error=not fail_fast,
            )
        )
        environment = StagingEnvironment(config.local_dir, app_name=config.app_name)
        with open_environment(environment):
            outcome = coordinator.run(registry, config.run_count)
    except HarnessError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)
    except typer.Exit:
        raise
    except Exception as e:
        logger.exception("Perf run aborted")
        typer.echo(f"Error: run aborted by {type(e).__name__}: {e}", err=True)
        raise typer.Exit(1)

    logger.info(
        "Completed %d workload(s) in %.1fs, %d failed run(s)",
        len(outcome.results),
        outcome.duration_seconds,
        outcome.failure_count,
    )
    logger.info("** Printing results of the perf run (Python) **")
    typer.echo(ReportGenerator().render(outcome.results))


@app.command("list")
def list_workloads(
    workloads: Annotated[
        str | None, typer.Option("-w", "--workloads", help="Module defining register_workloads(registry, config)")
    ] = None,
    data_path: Annotated[str, typer.Option("--data-path", help="Data location handed to the module")] = "",
) -> None:
    """List registered workloads in run order."""
    config = HarnessConfig.from_args(".", 0, data_path)
    try:
        registry = _load_registry(workloads, config)
    except HarnessError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo("Registered workloads:")
    for workload in registry.list_all():
        typer.echo(f"  - {workload.name}: {workload.description}")


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
