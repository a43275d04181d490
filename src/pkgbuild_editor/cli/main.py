"""
PKGBUILD Editor CLI — parse, query, edit and canonically format PKGBUILDs.

Usage:
    pkgbuild-editor format --check
    pkgbuild-editor --file path/to/PKGBUILD format --in-place
    pkgbuild-editor get depends
    pkgbuild-editor set pkgrel 2
    pkgbuild-editor show --json
"""

import json
import logging
from pathlib import Path

import click

logger = logging.getLogger(__name__)


def _load(ctx: click.Context):
    from pkgbuild_editor.parser import ParseError, loads

    path: Path = ctx.obj["path"]
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise click.ClickException(f"Cannot read {path}: {e.strerror or e}") from e
    try:
        return text, loads(text)
    except ParseError as e:
        logger.error(f"[CLI] {path}: {e}")
        raise click.ClickException(f"{path}: {e}") from e


def _save(ctx: click.Context, pkgbuild) -> None:
    from pkgbuild_editor.parser import dump

    dump(pkgbuild, ctx.obj["path"])
    logger.info(f"[CLI] Wrote {ctx.obj['path']}")


@click.group()
@click.version_option(package_name="pkgbuild-editor")
@click.option(
    "--file",
    "-f",
    "path",
    type=click.Path(dir_okay=False),
    default="PKGBUILD",
    envvar="PKGBUILD_FILE",
    show_default=True,
    help="PKGBUILD to operate on.",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging.")
@click.pass_context
def cli(ctx, path, verbose):
    """PKGBUILD Editor — parse, query, edit and canonically format PKGBUILDs."""
    log_level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    ctx.obj = {"path": Path(path)}


@cli.command("format")
@click.option("--in-place", "-i", is_flag=True, help="Rewrite the file instead of printing it.")
@click.option("--check", is_flag=True, help="Exit with status 1 if the file is not canonical.")
@click.pass_context
def format_(ctx, in_place, check):
    """Print the PKGBUILD in canonical layout."""
    from pkgbuild_editor.parser import dumps

    text, pkgbuild = _load(ctx)
    output = dumps(pkgbuild)
    if check:
        if output != text:
            click.echo(f"{ctx.obj['path']} would be reformatted", err=True)
            ctx.exit(1)
        return
    if in_place:
        if output != text:
            _save(ctx, pkgbuild)
        return
    click.echo(output, nl=False)


@cli.command()
@click.option("--json", "as_json", is_flag=True, help="Dump the document model as JSON.")
@click.pass_context
def show(ctx, as_json):
    """Show the containers of the PKGBUILD in source order."""
    from rich.console import Console
    from rich.table import Table

    _, pkgbuild = _load(ctx)
    if as_json:
        click.echo(json.dumps(pkgbuild.to_dict(), indent=2))
        return

    table = Table(title=str(ctx.obj["path"]))
    table.add_column("Lines", justify="right", style="dim")
    table.add_column("Name", style="bold cyan")
    table.add_column("Category")
    table.add_column("Values")
    for c in pkgbuild.sort():
        lines = "new" if c.synthetic else f"{c.begin + 1}-{c.end + 1}"
        table.add_row(lines, c.name, c.category.name.lower(), "\n".join(v.text for v in c.values))
    Console().print(table)


@cli.command()
@click.argument("name")
@click.pass_context
def get(ctx, name):
    """Print the values of variable NAME, one per line."""
    _, pkgbuild = _load(ctx)
    containers = pkgbuild.entries.get(name, [])
    if not any(c.category.is_variable for c in containers):
        raise click.ClickException(f"{name} is not set")
    for value in pkgbuild.get(name):
        click.echo(value)


@cli.command("set")
@click.argument("name")
@click.argument("values", nargs=-1)
@click.pass_context
def set_(ctx, name, values):
    """Replace the values of variable NAME, creating it when absent."""
    from pkgbuild_editor.parser.lexer import to_word

    _, pkgbuild = _load(ctx)
    pkgbuild.set_variable(name, *(to_word(v) for v in values))
    _save(ctx, pkgbuild)


@cli.command()
@click.argument("name")
@click.option("--index", "-n", type=int, default=0, show_default=True, help="Which entry named NAME to remove.")
@click.pass_context
def unset(ctx, name, index):
    """Remove entry NAME (variable or function)."""
    _, pkgbuild = _load(ctx)
    if not pkgbuild.remove(name, index):
        raise click.ClickException(f"No entry {name}[{index}]")
    _save(ctx, pkgbuild)


@cli.command()
@click.pass_context
def info(ctx):
    """Print the package summary as JSON."""
    from pkgbuild_editor.models.package import PackageInfo

    _, pkgbuild = _load(ctx)
    click.echo(json.dumps(PackageInfo.from_pkgbuild(pkgbuild).to_dict(), indent=2))


if __name__ == "__main__":
    cli()
