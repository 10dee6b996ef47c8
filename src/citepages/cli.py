import click
import sys
from pathlib import Path
from pydantic import BaseModel, ValidationError, model_validator
from citepages.config import get_settings
from citepages.parser import parse_pages
from citepages.utils import read_page_fields, write_json


class InputModel(BaseModel):
    pages: tuple[str, ...] = ()
    infile: str | None = None

    @model_validator(mode="before")
    def check_exclusivity(cls, values):
        pages, infile = values.get("pages"), values.get("infile")
        if bool(pages) == bool(infile):
            raise ValueError("You must provide exactly one of PAGES or --infile")
        return values


def validate_input(pages, infile: str | None):
    try:
        return InputModel(pages=pages, infile=infile)
    except ValidationError as e:
        raise click.UsageError(str(e))


def show_debug(debug_flag: bool):
    if debug_flag:
        click.echo(f"[DEBUG] {' '.join(sys.argv)}")


def format_result(pr) -> str:
    number_of_pages = "?" if pr.number_of_pages is None else pr.number_of_pages
    return f"{pr.literal}\tfirst={pr.page_first}\tpages={number_of_pages}"


@click.group()
def main():
    """Parse bibliographic page fields"""


@main.command("parse")
@click.argument("pages", nargs=-1)
@click.option("--infile", type=click.Path(exists=True, dir_okay=False))
@click.option("--outfile", type=click.Path(dir_okay=False, resolve_path=True))
@click.option("--debug", "debug_flag", is_flag=True)
def parse_command(pages, infile, outfile, debug_flag):
    """Normalize page fields and count their pages"""

    validate_input(pages, infile)
    show_debug(debug_flag)

    try:
        fields = read_page_fields(Path(infile)) if infile else list(pages)
    except (OSError, UnicodeDecodeError) as e:
        click.echo(f"Error: cannot read {infile}: {e}", err=True)
        sys.exit(1)

    results = []
    failed = 0
    for field in fields:
        try:
            pr = parse_pages(field)
        except ValueError as e:
            click.echo(f"Error: {e}", err=True)
            failed += 1
            continue
        results.append(pr.to_csl())
        click.echo(format_result(pr))

    if outfile:
        write_json(results, Path(outfile))
        if debug_flag:
            click.echo(f"[DEBUG] Wrote {len(results)} results to {outfile}")

    if failed:
        sys.exit(1)


@main.command("get-locale")
@click.option("--locale", default=None)
def get_locale_command(locale):
    """Get the current citation locale"""

    try:
        settings = get_settings(locale=locale)
    except ValidationError as e:
        raise click.UsageError(str(e))

    click.echo(settings.locale)


if __name__ == "__main__":
    main()
