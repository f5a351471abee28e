"""CLI entrypoint for pw-strength — typer app with `check` and `criteria` commands."""

import json
import logging
import sys
from pathlib import Path

import structlog
import typer
from rich.console import Console

from pw_strength.cli.output.console import render_criteria, render_report
from pw_strength.cli.output.json_report import build_report_json
from pw_strength.config.domain.config import CheckerConfig
from pw_strength.config.infrastructure.observer import StructlogConfigObserver
from pw_strength.config.infrastructure.yaml_loader import YamlConfigLoader
from pw_strength.core.errors import PwStrengthError
from pw_strength.criterion.infrastructure.registry import create_criteria
from pw_strength.evaluation.application.evaluator import Evaluator
from pw_strength.evaluation.domain.strength import classify_strength
from pw_strength.evaluation.infrastructure.observer import StructlogEvaluationObserver

app = typer.Typer(add_completion=False)

_LOG_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}
_OUTPUT_FORMATS = ("text", "json")


def _configure_structlog(log_format: str, log_level: str) -> None:
    """Configure structlog based on the requested format and level.

    Logs go to stderr so that stdout carries only the report.
    """
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    level = _LOG_LEVELS.get(log_level.lower())
    if level is None:
        typer.echo(
            f"Invalid log level: {log_level!r}. Must be one of: "
            f"{', '.join(_LOG_LEVELS)}."
        )
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _load_config(config_path: Path | None) -> CheckerConfig:
    """Return the config at *config_path*, or the defaults when none is given."""
    if config_path is None:
        return CheckerConfig()
    loader = YamlConfigLoader(observer=StructlogConfigObserver())
    return loader.load(path=config_path)


def _build_evaluator(config: CheckerConfig) -> Evaluator:
    return Evaluator(
        observer=StructlogEvaluationObserver(),
        criteria=create_criteria(config.criteria),
    )


@app.command()
def check(
    password: str | None = typer.Option(
        None,
        "--password",
        "-p",
        help="Password to evaluate. Prompted for (hidden) when omitted.",
    ),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a checker config YAML",
    ),
    output_format: str = typer.Option(
        "text",
        "--format",
        "-f",
        help="Report format: 'text' or 'json'",
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
    log_level: str = typer.Option(
        "warning",
        "--log-level",
        help="Minimum log level: debug, info, warning or error",
    ),
) -> None:
    """Evaluate a password and print its strength report."""
    try:
        _configure_structlog(log_format=log_format, log_level=log_level)
        if output_format not in _OUTPUT_FORMATS:
            typer.echo(
                f"Invalid format: {output_format!r}. Must be 'text' or 'json'."
            )
            raise typer.Exit(code=1)

        config = _load_config(config_path=config_path)
        evaluator = _build_evaluator(config=config)

        if password is None:
            password = typer.prompt(
                "Enter your password",
                default="",
                show_default=False,
                hide_input=True,
            )

        if not password:
            typer.echo("No password entered.")
            return

        report = evaluator.evaluate(password)
        label = classify_strength(report=report, thresholds=config.thresholds)

        if output_format == "json":
            typer.echo(json.dumps(build_report_json(report=report, label=label)))
        else:
            render_report(report=report, label=label, console=Console())

    except typer.Exit:
        raise
    except (KeyboardInterrupt, typer.Abort):
        # typer.prompt turns Ctrl-C and end-of-input into typer.Abort.
        typer.echo("Check interrupted.")
        sys.exit(1)
    except PwStrengthError as exc:
        typer.echo(str(exc))
        sys.exit(1)
    except Exception as exc:  # noqa: BLE001
        typer.echo(f"Unexpected error: {exc}\nPlease report this bug.")
        sys.exit(1)


@app.command()
def criteria(
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a checker config YAML",
    ),
) -> None:
    """List the enabled criteria and their maximum scores."""
    try:
        _configure_structlog(log_format="console", log_level="warning")
        config = _load_config(config_path=config_path)
        evaluator = _build_evaluator(config=config)
        render_criteria(descriptors=evaluator.descriptors, console=Console())
    except PwStrengthError as exc:
        typer.echo(str(exc))
        sys.exit(1)


if __name__ == "__main__":
    app()
