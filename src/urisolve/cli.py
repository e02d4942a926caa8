"""Command line interface for :mod:`urisolve`."""

from pathlib import Path
from typing import Optional

import click

from .api import describe_uri, resolve_many, resolve_reference
from .dot_segments import normalize_path
from .params import remove_query_parameter
from .resolver import is_absolute

__all__ = [
    "main",
]


@click.group()
@click.version_option()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    r"""urisolve - resolve and inspect URI references (RFC 3986).

    Resolution is purely syntactic: nothing is fetched, validated or
    percent-decoded.
    """
    import logging

    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            force=True,
        )
        logging.getLogger("urisolve").setLevel(logging.DEBUG)
    else:
        logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s", force=True)
        logging.getLogger("urisolve").setLevel(logging.NOTSET)


@main.command()
@click.argument("base")
@click.argument("reference")
@click.option("--json", "as_json", is_flag=True, help="Print the full resolution as JSON")
def resolve(base: str, reference: str, as_json: bool) -> None:
    """Resolve REFERENCE against BASE.

    Example:
      urisolve resolve "http://a/b/c/d;p?q" "../g"
    """
    try:
        resolution = resolve_reference(base, reference)
        if as_json:
            click.echo(resolution.model_dump_json(indent=2))
        else:
            click.echo(resolution.target)
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        raise click.Abort()


@main.command("is-absolute")
@click.argument("uri")
@click.pass_context
def is_absolute_command(ctx: click.Context, uri: str) -> None:
    """Check whether URI starts with a scheme.

    Prints true or false; the exit status is 0 only for absolute URIs.
    """
    absolute = is_absolute(uri)
    click.echo("true" if absolute else "false")
    ctx.exit(0 if absolute else 1)


@main.command()
@click.argument("path")
def normalize(path: str) -> None:
    """Remove "." and ".." segments from PATH."""
    click.echo(normalize_path(path))


@main.command()
@click.argument("uri")
def components(uri: str) -> None:
    """Print the scheme, authority, path, query and fragment of URI as JSON."""
    click.echo(describe_uri(uri).model_dump_json(indent=2))


@main.command("strip-param")
@click.argument("uri")
@click.argument("name")
def strip_param(uri: str, name: str) -> None:
    """Remove query parameter NAME from URI."""
    try:
        click.echo(remove_query_parameter(uri, name))
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        raise click.Abort()


@main.command()
@click.option("--base", required=True, envvar="URISOLVE_BASE", help="Base URI")
@click.option(
    "--input",
    "input_file",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="File with one reference per line",
)
@click.option("--output", help="Output CSV file (prints to console if omitted)")
def batch(base: str, input_file: str, output: Optional[str]) -> None:
    r"""Resolve every reference in a file against one base.

    Blank lines are skipped.

    Example:
      urisolve batch --base http://example.org/docs/ \
                     --input links.txt --output resolved.csv
    """
    try:
        lines = Path(input_file).read_text(encoding="utf-8").splitlines()
        references = [line.strip() for line in lines if line.strip()]
        df = resolve_many(base, references)

        if output:
            df.to_csv(output, index=False)
            click.echo(f"OK Resolved {len(df)} references: {output}")
        else:
            click.echo(df.to_string(index=False))

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        raise click.Abort()


if __name__ == "__main__":
    main()
