"""
tonecraft CLI.

Commands:
- parse:    Show a color's canonical form, HSV and luminance
- contrast: Contrast ratio of two colors with WCAG verdicts
- ensure:   Adjust a foreground to reach a minimum ratio
- states:   Interaction-state and elevation variants of a color
- css:      Emit theme CSS from tonecraft.yaml
- init:     Write an example tonecraft.yaml
"""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tonecraft._version import get_version
from tonecraft.core.color import Color
from tonecraft.core.contrast import WCAG_AA_NORMAL, meets_wcag
from tonecraft.core.derive import ELEVATION_DELTAS, derive_state, to_elevation
from tonecraft.core.errors import TonecraftError
from tonecraft.core.ir.theming import ComponentState, ThemeVariant

app = typer.Typer(
    help="Accessible design-token CSS: colors, contrast, states and themes",
    no_args_is_help=True,
)

console = Console()


def version_callback(value: bool) -> None:
    if value:
        typer.echo(f"tonecraft version {get_version()}")
        raise typer.Exit()


@app.callback()
def main_callback(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """tonecraft command line."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _parse_or_exit(text: str) -> Color:
    try:
        return Color.parse(text)
    except TonecraftError as e:
        console.print(f"[red]{escape(str(e))}[/red]", highlight=False)
        raise typer.Exit(code=1)


def _verdict(passed: bool) -> str:
    return "[green]pass[/green]" if passed else "[red]fail[/red]"


@app.command(name="parse")
def parse_command(
    color: str = typer.Argument(..., help="Color text, e.g. '#1E90FF' or 'rgb(30 144 255 / .5)'"),
) -> None:
    """Parse a color and print its canonical form."""
    parsed = _parse_or_exit(color)

    table = Table(show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("hex", parsed.to_string())
    table.add_row("rgba", f"{parsed.r}, {parsed.g}, {parsed.b}, {parsed.a}")
    table.add_row("hsv", f"{parsed.h:.1f}, {parsed.s:.3f}, {parsed.v:.3f}")
    table.add_row("luminance", f"{parsed.relative_luminance():.4f}")
    table.add_row("tone", "light" if parsed.is_light() else "dark")
    console.print(table)


@app.command(name="contrast")
def contrast_command(
    foreground: str = typer.Argument(..., help="Foreground color"),
    background: str = typer.Argument(..., help="Background color"),
) -> None:
    """Contrast ratio of FOREGROUND over BACKGROUND with WCAG verdicts."""
    fg = _parse_or_exit(foreground)
    bg = _parse_or_exit(background)
    ratio = fg.contrast_ratio(bg)

    console.print(f"Contrast ratio: [bold]{ratio:.2f}:1[/bold]", highlight=False)
    table = Table("Level", "Normal text", "Large text")
    table.add_row("AA", _verdict(meets_wcag(ratio, "AA")), _verdict(meets_wcag(ratio, "AA", True)))
    table.add_row(
        "AAA", _verdict(meets_wcag(ratio, "AAA")), _verdict(meets_wcag(ratio, "AAA", True))
    )
    console.print(table)


@app.command(name="ensure")
def ensure_command(
    foreground: str = typer.Argument(..., help="Foreground color"),
    background: str = typer.Argument(..., help="Background color"),
    ratio: float = typer.Option(WCAG_AA_NORMAL, "--ratio", "-r", help="Minimum ratio (1-21)"),
) -> None:
    """Adjust FOREGROUND until it reaches RATIO against BACKGROUND."""
    fg = _parse_or_exit(foreground)
    bg = _parse_or_exit(background)

    try:
        outcome = fg.resolve_contrast(bg, ratio)
    except TonecraftError as e:
        console.print(f"[red]{escape(str(e))}[/red]", highlight=False)
        raise typer.Exit(code=1)

    status = "[green]met[/green]" if outcome.met else "[yellow]best effort[/yellow]"
    console.print(
        f"{outcome.color.to_string()}  {outcome.ratio:.2f}:1  ({status})",
        highlight=False,
    )
    if not outcome.met:
        raise typer.Exit(code=2)


@app.command(name="states")
def states_command(
    color: str = typer.Argument(..., help="Base color"),
    high_contrast: bool = typer.Option(
        False, "--high-contrast", help="High-contrast mode (no derivation)"
    ),
) -> None:
    """Interaction-state and elevation variants of COLOR."""
    base = _parse_or_exit(color)

    table = Table("Variant", "Color")
    for state in ComponentState:
        table.add_row(state.value, derive_state(base, state, high_contrast).to_string())
    for level in range(1, len(ELEVATION_DELTAS) + 1):
        derived = base if high_contrast else to_elevation(base, level)
        table.add_row(f"elevation-{level}", derived.to_string())
    console.print(table)


@app.command(name="css")
def css_command(
    config: Path = typer.Option(  # noqa: B008
        Path("tonecraft.yaml"),
        "--config",
        "-c",
        help="Theme configuration file",
    ),
    variant: str | None = typer.Option(
        None,
        "--variant",
        help="Emit only this variant's custom properties (e.g. dark)",
    ),
    prefix: str | None = typer.Option(
        None,
        "--prefix",
        help="Custom-property prefix (default: var_prefix from config)",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file (default: stdout)",
    ),
) -> None:
    """
    Emit theme CSS from a configuration file.

    Examples:
        tonecraft css                          # Full stylesheet
        tonecraft css --variant dark           # One variant, one line
        tonecraft css -c brand.yaml -o theme.css
    """
    from tonecraft.core.themeconfig_loader import load_theme_config_file
    from tonecraft.themes.builder import ThemeBuilder
    from tonecraft.themes.css_generator import generate_theme_css

    try:
        theme_config = load_theme_config_file(config)
        tree = ThemeBuilder(theme_config).build()
    except TonecraftError as e:
        console.print(f"[red]{escape(str(e))}[/red]", highlight=False)
        raise typer.Exit(code=1)

    var_prefix = prefix or theme_config.var_prefix

    if variant:
        try:
            selected = ThemeVariant.from_key(variant)
        except ValueError as e:
            console.print(f"[red]{escape(str(e))}[/red]", highlight=False)
            raise typer.Exit(code=1)
        content = tree.to_css_variables(selected, var_prefix)
    else:
        content = generate_theme_css(tree, var_prefix, theme_config.name)

    if output:
        output.write_text(content, encoding="utf-8")
        console.print(f"[green]CSS written to {output}[/green]")
    else:
        typer.echo(content)


@app.command(name="init")
def init_command(
    directory: Path = typer.Argument(  # noqa: B008
        Path("."), help="Directory to write tonecraft.yaml into"
    ),
    name: str = typer.Option("my-theme", "--name", "-n", help="Theme name"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write an example tonecraft.yaml."""
    from tonecraft.core.themeconfig_loader import (
        create_example_theme_config,
        save_theme_config,
        theme_config_exists,
    )

    if theme_config_exists(directory) and not force:
        console.print("[yellow]tonecraft.yaml already exists (use --force to overwrite)[/yellow]")
        raise typer.Exit(code=1)

    directory.mkdir(parents=True, exist_ok=True)
    path = save_theme_config(directory, create_example_theme_config(name))
    console.print(f"[green]Created {path}[/green]")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
