"""CLI for turtlepath."""

import logging
from pathlib import Path

import click
from pydantic import ValidationError

from .export import ExportFormat

FORMAT_CHOICE = click.Choice([f.value for f in ExportFormat], case_sensitive=False)


def _load_config(path: Path | None):
    from .config import Config

    if path is None:
        return Config()
    try:
        return Config.load(path)
    except (OSError, ValueError, ValidationError) as e:
        raise click.ClickException(f"Bad config {path}: {e}")


def _emit(canvas, output: Path | None, fmt: str | None, config):
    from .export import format_for_path, save, write

    try:
        if output is None:
            write(canvas, click.get_binary_stream("stdout"), fmt or ExportFormat.SVG, config)
            return
        fmt = fmt or format_for_path(output)
        save(canvas, output, fmt, config)
    except (OSError, ValueError) as e:
        raise click.ClickException(str(e))
    click.echo(f"Saved: {output} ({len(canvas.segments)} segments)", err=True)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Debug logging")
def main(verbose: bool):
    """turtlepath - Turtle graphics to SVG, EPS and gcode."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("script", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--output", "-o", type=Path, help="Output file (stdout if omitted)")
@click.option("--format", "-f", "fmt", type=FORMAT_CHOICE, help="Defaults to the output suffix")
@click.option("--config", "-c", "config_path", type=Path)
def render(script: Path, output: Path | None, fmt: str | None, config_path: Path | None):
    """Run a turtle program and export the drawing."""
    from .script import ScriptError, render as run_script

    config = _load_config(config_path)
    try:
        canvas = run_script(script.read_text(encoding="utf-8"))
    except (ScriptError, UnicodeDecodeError) as e:
        raise click.ClickException(f"{script}: {e}")
    _emit(canvas, output, fmt, config)


@main.command()
@click.option("--output", "-o", type=Path, help="Output file (stdout if omitted)")
@click.option("--format", "-f", "fmt", type=FORMAT_CHOICE, help="Defaults to the output suffix")
def demo(output: Path | None, fmt: str | None):
    """Draw a square with a gap in its top edge."""
    from .config import Config

    _emit(demo_canvas(), output, fmt, Config())


def demo_canvas():
    from .turtle import Canvas

    t = Canvas()
    t.forward(100)
    t.right(90)
    t.forward(100)
    t.pen_up()
    t.forward(10)
    t.pen_down()
    t.right(90)
    t.forward(100)
    t.right(90)
    t.forward(100)
    return t


@main.command()
def formats():
    """List supported export formats."""
    from .export import EXPORTERS, SUFFIXES

    for fmt, exporter in EXPORTERS.items():
        suffixes = " ".join(s for s, f in SUFFIXES.items() if f is fmt)
        click.echo(f"{fmt.value}: {exporter.__name__} ({suffixes})")


@main.command("init-config")
@click.argument("path", type=Path)
@click.option("--force", is_flag=True, help="Overwrite an existing file")
def init_config(path: Path, force: bool):
    """Write the default configuration as JSON."""
    from .config import Config

    if path.exists() and not force:
        raise click.ClickException(f"{path} exists (use --force to overwrite)")
    Config().save(path)
    click.echo(f"Saved: {path}")


if __name__ == "__main__":
    main()
