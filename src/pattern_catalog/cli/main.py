"""CLI entrypoint for pattern-catalog — typer app with `run`, `run-all`, `list`, and `show`."""

import logging
import sys
from pathlib import Path

import structlog
import typer
from rich.console import Console

from pattern_catalog.catalog.application.runner import DemonstrationRunner
from pattern_catalog.catalog.domain.catalog import PatternCatalog
from pattern_catalog.catalog.domain.pattern import CATEGORIES
from pattern_catalog.catalog.infrastructure.observer import StructlogCatalogObserver
from pattern_catalog.catalog.infrastructure.registry import create_catalog
from pattern_catalog.cli.output.render import catalog_table, print_details, print_trace
from pattern_catalog.config.domain.config import CatalogConfig
from pattern_catalog.config.infrastructure.observer import StructlogConfigObserver
from pattern_catalog.config.infrastructure.yaml_loader import YamlConfigLoader
from pattern_catalog.core.errors import PatternCatalogError

app = typer.Typer(
    add_completion=False,
    help="Run textbook design pattern demonstrations.",
)

_CONFIG_OPTION = typer.Option(
    None, "--config", "-c", help="Path to a catalog config YAML"
)
_LOG_FORMAT_OPTION = typer.Option(
    "console", "--log-format", help="Log format: 'console' or 'json'"
)
_VERBOSE_OPTION = typer.Option(
    False, "--verbose", "-v", help="Log every demonstration at INFO level"
)


def _configure_structlog(log_format: str, verbose: bool) -> None:
    """Configure structlog based on the requested format.

    Logs go to stderr so that stdout carries only demonstration output.
    """
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(
            f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.",
            err=True,
        )
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            logging.INFO if verbose else logging.WARNING
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=False,
    )


def _load_config(config_path: Path | None) -> CatalogConfig:
    if config_path is None:
        return CatalogConfig()
    loader = YamlConfigLoader(observer=StructlogConfigObserver())
    return loader.load(path=config_path)


def _build_runner(catalog: PatternCatalog) -> DemonstrationRunner:
    return DemonstrationRunner(
        catalog=catalog,
        observer=StructlogCatalogObserver(),
    )


def _fail(exc: PatternCatalogError) -> typer.Exit:
    typer.echo(str(exc), err=True)
    return typer.Exit(code=1)


@app.command()
def run(
    pattern_id: str = typer.Argument(..., help="Pattern identifier, e.g. 'observer'"),
    arguments: list[str] | None = typer.Argument(
        None, help="Demonstration input; omit to use the sample input"
    ),
    config_path: Path | None = _CONFIG_OPTION,
    log_format: str = _LOG_FORMAT_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Print the demonstration trace of one pattern."""
    _configure_structlog(log_format=log_format, verbose=verbose)
    try:
        catalog = create_catalog(config=_load_config(config_path=config_path))
        runner = _build_runner(catalog=catalog)
        trace = runner.run_arguments(pattern_id=pattern_id, arguments=arguments or [])
    except PatternCatalogError as exc:
        raise _fail(exc) from exc

    for line in trace.lines:
        typer.echo(line)


@app.command("run-all")
def run_all(
    config_path: Path | None = _CONFIG_OPTION,
    log_format: str = _LOG_FORMAT_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Run every demonstration with its sample input."""
    _configure_structlog(log_format=log_format, verbose=verbose)
    try:
        catalog = create_catalog(config=_load_config(config_path=config_path))
        traces = _build_runner(catalog=catalog).run_all()
    except PatternCatalogError as exc:
        raise _fail(exc) from exc

    console = Console()
    for trace in traces:
        info = catalog.get(trace.pattern_id).info
        print_trace(console=console, info=info, trace=trace)


@app.command("list")
def list_patterns(
    category: str | None = typer.Option(
        None, "--category", help="Only list one category"
    ),
    config_path: Path | None = _CONFIG_OPTION,
    log_format: str = _LOG_FORMAT_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """List every pattern in the catalog."""
    _configure_structlog(log_format=log_format, verbose=verbose)
    if category is not None and category not in CATEGORIES:
        typer.echo(
            f"Invalid category: {category!r}. Must be one of: {', '.join(CATEGORIES)}.",
            err=True,
        )
        raise typer.Exit(code=1)

    try:
        catalog = create_catalog(config=_load_config(config_path=config_path))
    except PatternCatalogError as exc:
        raise _fail(exc) from exc
    Console().print(catalog_table(infos=catalog.infos(category=category)))


@app.command()
def show(
    pattern_id: str = typer.Argument(..., help="Pattern identifier"),
    config_path: Path | None = _CONFIG_OPTION,
    log_format: str = _LOG_FORMAT_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Describe one pattern and print its sample trace."""
    _configure_structlog(log_format=log_format, verbose=verbose)
    try:
        catalog = create_catalog(config=_load_config(config_path=config_path))
        trace = _build_runner(catalog=catalog).run(pattern_id=pattern_id)
        demonstration = catalog.get(pattern_id)
    except PatternCatalogError as exc:
        raise _fail(exc) from exc

    print_details(
        console=Console(),
        info=demonstration.info,
        sample=demonstration.sample_payload(),
        trace=trace,
    )


if __name__ == "__main__":
    app()
