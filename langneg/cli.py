"""CLI entrypoint for negotiating locales."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Annotated

import typer

from .loaders import LocaleSourceError, load_available_locales, scan_locale_dirs
from .models import Locale, Strategy
from .negotiation import ConfigurationError, negotiate_languages

app = typer.Typer(
    help="Negotiate requested locales against the available ones.",
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
)


def collect_available(
    available: list[str] | None,
    available_file: Path | None,
    available_dir: Path | None,
) -> list[str]:
    """Concatenate locale sources, keeping the first occurrence of each id."""
    tags = list(available or [])
    if available_file:
        tags.extend(load_available_locales(available_file))
    if available_dir:
        tags.extend(scan_locale_dirs(available_dir))
    return list(dict.fromkeys(tags))


@app.command()
def negotiate(
    requested: Annotated[
        list[str],
        typer.Argument(help="Requested locale ids, most preferred first."),
    ],
    available: Annotated[
        list[str] | None,
        typer.Option(
            "--available",
            "-a",
            help="Available locale id. May be given several times.",
        ),
    ] = None,
    available_file: Annotated[
        Path | None,
        typer.Option(
            "--available-file",
            help="JSON array of locale ids, or a CLDR availableLocales.json file.",
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            resolve_path=True,
        ),
    ] = None,
    available_dir: Annotated[
        Path | None,
        typer.Option(
            "--available-dir",
            help="I18n directory whose sub-directory names are available locale ids.",
            file_okay=False,
            dir_okay=True,
            resolve_path=True,
        ),
    ] = None,
    strategy: Annotated[
        Strategy,
        typer.Option("--strategy", "-s", help="Negotiation strategy."),
    ] = Strategy.FILTERING,
    default_locale: Annotated[
        str | None,
        typer.Option(
            "--default-locale",
            "-d",
            help="Last resort locale. Required with --strategy lookup.",
        ),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the result as a JSON array."),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Print parsed locales to stderr."),
    ] = False,
) -> None:
    """Print the negotiated locales, most preferred first."""
    try:
        available_locales = collect_available(available, available_file, available_dir)
    except LocaleSourceError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if verbose:
        for tag in requested:
            locale = Locale.parse(tag.lower())
            parsed = str(locale) if locale.well_formed else "malformed, skipped"
            typer.echo(f"Requested {tag}: {parsed}", err=True)
        typer.echo(f"Negotiating against {len(available_locales)} locales...", err=True)

    try:
        supported = negotiate_languages(
            requested,
            available_locales,
            strategy=strategy,
            default_locale=default_locale,
        )
    except ConfigurationError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(supported))
    else:
        for tag in supported:
            typer.echo(tag)


@app.command()
def parse(
    tags: Annotated[list[str], typer.Argument(help="Locale ids to parse.")],
) -> None:
    """Print the normalized form and subtags of each locale id."""
    for tag in tags:
        locale = Locale.parse(tag)
        if not locale.well_formed:
            typer.secho(f"{tag}: malformed", fg=typer.colors.YELLOW)
            continue
        fields = ", ".join(
            f"{name}={value}"
            for name, value in locale.model_dump(exclude={"well_formed"}).items()
            if value is not None
        )
        typer.echo(f"{tag}: {locale} ({fields})")


if __name__ == "__main__":
    app()
