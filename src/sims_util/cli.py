"""CLI entry point for sims-util."""

from __future__ import annotations

import sys

import click

from .core.config import load_settings
from .core.elapsed import format_elapsed
from .core.errors import CheckError, ConfigError, InvalidValueError
from .observability.logger import get_logger, setup_logging
from .validation import throw

_CHECKS = ("empty", "blank", "not-empty", "not-blank")


@click.group()
@click.option("--config", default=None, help="TOML config file path")
@click.pass_context
def main(ctx: click.Context, config: str | None) -> None:
    """Small validation and formatting utilities."""
    try:
        settings = load_settings(config_path=config)
    except ConfigError as exc:
        raise click.BadParameter(str(exc), param_hint="--config") from exc
    setup_logging(
        level=settings.observability.log_level,
        format=settings.observability.log_format,
    )
    ctx.obj = settings


@main.command()
@click.argument("millis", type=int)
def elapsed(millis: int) -> None:
    """Format MILLIS as H:MM:SS.mmm."""
    try:
        click.echo(format_elapsed(millis))
    except InvalidValueError as exc:
        raise click.BadParameter(exc.message, param_hint="MILLIS") from exc


@main.command()
@click.argument("value")
@click.option(
    "--if", "checks", multiple=True, required=True,
    type=click.Choice(_CHECKS), help="Fail if VALUE is ... (repeatable)",
)
@click.option("--name", default="value", help="Name used in the failure message")
@click.pass_obj
def check(settings, value: str, checks: tuple[str, ...], name: str) -> None:
    """Run checks against VALUE; exit 1 on the first failure."""
    log = get_logger(__name__)
    chain = throw.with_message(settings.check.message_template)
    try:
        for kind in checks:
            getattr(chain, "if_" + kind.replace("-", "_"))(value, name)
    except CheckError as exc:
        log.info("check_failed", check=kind, category=exc.category.value)
        click.echo(f"{exc.category.value}: {exc.message}", err=True)
        sys.exit(1)
    click.echo("ok")
