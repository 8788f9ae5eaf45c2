from __future__ import annotations

from pathlib import Path

import typer

app = typer.Typer(name="minunit", help="Run explicitly listed minunit suites")


@app.command()
def run(
    targets: list[str] | None = typer.Argument(
        None, help="Suites to run, as module:attribute (defaults to the config's suites)"
    ),
    config: str | None = typer.Option(
        None, "--config", "-c", help="Path to minunit YAML config"
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Also print passed assertions"
    ),
    quiet: bool = typer.Option(
        False, "--quiet", "-q", help="Disable the print sink entirely"
    ),
):
    """Run suites in order, stopping at the first failing one."""
    from pydantic import ValidationError

    from minunit.config import DEFAULT_CONFIG_NAME, MinunitConfig, build_sink, load_config
    from minunit.driver import MAX_EXIT_STATUS, report, resolve_suite, suite_status
    from minunit.errors import ConfigError
    from minunit.sink import set_default_sink

    if config is None and Path(DEFAULT_CONFIG_NAME).exists():
        config = DEFAULT_CONFIG_NAME

    try:
        if config is not None:
            config_path = Path(config)
            run_config = load_config(config_path)
            search_path = config_path.parent
        else:
            run_config = MinunitConfig()
            search_path = Path.cwd()
    except (ConfigError, ValidationError) as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if verbose:
        run_config.verbose = True
    if quiet:
        run_config.print_enabled = False

    refs = list(targets) if targets else run_config.suites
    if not refs:
        typer.echo("Error: no suites given and none listed in the config", err=True)
        raise typer.Exit(1)

    try:
        suites = [resolve_suite(ref, search_path=search_path) for ref in refs]
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    previous_sink = set_default_sink(build_sink(run_config))
    try:
        status = 0
        for suite in suites:
            if len(suites) > 1:
                typer.echo(f"== {suite.name}")
            result = suite.execute()
            report(result, echo=typer.echo)
            status += suite_status(result)
            if not result.passed:
                break
    finally:
        set_default_sink(previous_sink)

    raise typer.Exit(min(status, MAX_EXIT_STATUS))


EXAMPLE_CONFIG = """\
print: true
verbose: false
suites:
  - example_suite:suite
"""

EXAMPLE_SUITE = '''\
"""Example minunit suite. Run it with: minunit run -c minunit.yaml"""

import sys
import threading

from minunit import Suite, assert_print, case, check, first_failure, mu_assert, run_main

state = {}


def init():
    state["items"] = [3, 1, 2]
    return None


def sorting_orders_items():
    if failure := check("sorted ascending", sorted(state["items"]) == [1, 2, 3]):
        return failure
    return check("original untouched", state["items"] == [3, 1, 2])


@case
def sum_and_length():
    mu_assert("sum", sum(state["items"]) == 6)
    mu_assert("length", len(state["items"]) == 3)


def chained_checks():
    return first_failure(
        lambda: check("min", min(state["items"]) == 1),
        lambda: check("max", max(state["items"]) == 3),
    )


def background_worker():
    def worker():
        assert_print("worker sees items", bool(state["items"]))

    thread = threading.Thread(target=worker)
    thread.start()
    thread.join()
    return None


def cleanup():
    state.clear()
    return None


suite = Suite(
    "example",
    [sorting_orders_items, sum_and_length, chained_checks, background_worker],
    setup=init,
    teardown=cleanup,
)


if __name__ == "__main__":
    sys.exit(run_main(suite))
'''


@app.command()
def init(
    dir: str = typer.Option(
        ".", "--dir", help="Directory to write minunit.yaml and the example suite into"
    ),
):
    """Write an example config and suite."""
    project_dir = Path(dir)

    if not project_dir.exists():
        project_dir.mkdir(parents=True, exist_ok=True)

    config_file = project_dir / "minunit.yaml"
    if config_file.exists():
        typer.echo(f"minunit.yaml already exists in {dir}, skipping.")
        return

    config_file.write_text(EXAMPLE_CONFIG)
    (project_dir / "example_suite.py").write_text(EXAMPLE_SUITE)

    typer.echo(f"Initialized minunit project in {dir}:")
    typer.echo("  minunit.yaml      - config listing the suites to run")
    typer.echo("  example_suite.py  - example suite")
