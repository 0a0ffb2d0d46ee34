"""CLI entry point for the even increase/decrease calculator."""

from __future__ import annotations

import logging
import sys
from dataclasses import replace
from pathlib import Path

import click

from evenknit.api.calculate import calculate_from_input
from evenknit.checklist.state import mark_done, new_checklist
from evenknit.config.preferences import PreferencesError, Theme, load_preferences, save_preferences
from evenknit.schemas.result import CalculationResult, ErrorResult, ShapingResult
from evenknit.writer.writer import export_steps, render_checklist, render_result

# click.style keyword arguments per theme and role.  PLAIN never styles.
_STYLES: dict[Theme, dict[str, dict[str, object]]] = {
    Theme.LIGHT: {
        "summary": {"fg": "blue", "bold": True},
        "ok": {"fg": "green"},
        "fail": {"fg": "red", "bold": True},
    },
    Theme.DARK: {
        "summary": {"fg": "bright_cyan", "bold": True},
        "ok": {"fg": "bright_green"},
        "fail": {"fg": "bright_red", "bold": True},
    },
    Theme.PLAIN: {},
}


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )


def _style(theme: Theme, role: str, text: str) -> str:
    style = _STYLES[theme].get(role)
    if not style:
        return text
    return click.style(text, **style)


def _load_theme(ctx: click.Context) -> Theme:
    try:
        return load_preferences(ctx.obj["config_path"]).theme
    except PreferencesError as exc:
        raise click.ClickException(str(exc)) from exc


def _calculate_or_fail(raw_start: str, raw_target: str) -> CalculationResult:
    report = calculate_from_input(raw_start, raw_target)
    if report.input_error is not None or report.result is None:
        raise click.ClickException(report.input_error or "invalid input")
    if isinstance(report.result, ErrorResult):
        raise click.ClickException(report.result.message)
    return report.result


def _echo_verification(ctx: click.Context, theme: Theme, result: ShapingResult) -> None:
    verification = result.verification
    if verification.ok:
        click.echo(_style(theme, "ok", verification.text))
        return
    click.echo(_style(theme, "fail", verification.text), err=True)
    ctx.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Preferences file path",
)
@click.pass_context
def main(ctx: click.Context, verbose: bool, config_path: Path | None) -> None:
    """Spread knitting increases or decreases evenly across a row."""
    _setup_logging(verbose)
    ctx.obj = {"config_path": config_path}


@main.command()
@click.argument("start")
@click.argument("target")
@click.option(
    "--plain",
    is_flag=True,
    help="Print only the numbered steps, for copying (nothing when no change is needed)",
)
@click.pass_context
def calc(ctx: click.Context, start: str, target: str, plain: bool) -> None:
    """Show the steps to go from START to TARGET stitches."""
    result = _calculate_or_fail(start, target)
    theme = Theme.PLAIN if plain else _load_theme(ctx)

    if not isinstance(result, ShapingResult):
        # Nothing to copy when the counts already match.
        if not plain:
            click.echo(render_result(result))
        return

    if plain:
        click.echo(export_steps(result.steps))
        if not result.verification.ok:
            _echo_verification(ctx, theme, result)
        return

    click.echo(_style(theme, "summary", result.summary))
    click.echo()
    click.echo(export_steps(result.steps))
    click.echo()
    _echo_verification(ctx, theme, result)


@main.command()
@click.argument("start")
@click.argument("target")
@click.pass_context
def checklist(ctx: click.Context, start: str, target: str) -> None:
    """Work through the steps from START to TARGET one at a time.

    Answer "n" to stop; the checklist shows how far you got.
    """
    result = _calculate_or_fail(start, target)
    theme = _load_theme(ctx)

    if not isinstance(result, ShapingResult):
        click.echo(render_result(result))
        return

    click.echo(_style(theme, "summary", result.summary))
    _echo_verification(ctx, theme, result)

    state = new_checklist(result)
    for index, step in enumerate(state.steps):
        if not click.confirm(f"{index + 1}. {step.text} - done?", default=True):
            break
        state = mark_done(state, index)

    click.echo(render_checklist(state))
    if state.is_complete:
        click.echo(_style(theme, "ok", "All steps done."))


@main.command()
@click.argument("name", required=False, type=click.Choice([t.value for t in Theme]))
@click.pass_context
def theme(ctx: click.Context, name: str | None) -> None:
    """Show the display theme, or set it to NAME."""
    config_path = ctx.obj["config_path"]
    try:
        preferences = load_preferences(config_path)
    except PreferencesError as exc:
        raise click.ClickException(str(exc)) from exc

    if name is None:
        click.echo(f"Theme: {preferences.theme.value}")
        return

    try:
        written = save_preferences(replace(preferences, theme=Theme(name)), config_path)
    except PreferencesError as exc:
        raise click.ClickException(str(exc)) from exc
    click.echo(f"Theme set to {name} ({written})")
