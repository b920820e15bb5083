import logging
from pathlib import Path

import click

from kdp_page_setup.config.settings import load_profile
from kdp_page_setup.config.sizes import CUSTOM_SIZE_NAME
from kdp_page_setup.core.lookup import list_presets
from kdp_page_setup.core.models import BookType, InkType, MarginPreset, PaperType
from kdp_page_setup.core.margins import custom_margins
from kdp_page_setup.core.resolver import resolve_page_spec
from kdp_page_setup.core.units import to_points
from kdp_page_setup.core.validator import margin_warnings
from kdp_page_setup.document.base import apply_page_spec, describe_geometry
from kdp_page_setup.document.docx_target import DocxPageTarget, read_docx_geometry
from kdp_page_setup.document.pdf_proof import PdfProofTarget, read_pdf_geometry
from kdp_page_setup.errors import PageSetupError
from kdp_page_setup.store.settings_store import JsonFileStore, load_document_settings


def _choices(enum_cls):
    return click.Choice([m.value for m in enum_cls], case_sensitive=False)


def spec_options(f):
    """Options shared by every command that resolves a page spec."""
    options = [
        click.option("--size", "size_name", type=str, default="Paperback - 6 x 9", show_default=True, help=f"Preset name, or '{CUSTOM_SIZE_NAME}' with --width/--height"),
        click.option("--width", "width_in", type=float, default=None, help="Custom width in inches (4-8.5)"),
        click.option("--height", "height_in", type=float, default=None, help="Custom height in inches (6-11.69)"),
        click.option("--book-type", "book_type", type=_choices(BookType), default=None, help="Book type; hardcover presets always use hardcover"),
        click.option("--paper", "paper_type", type=_choices(PaperType), default="white", show_default=True, help="Paper colour"),
        click.option("--ink", "ink_type", type=_choices(InkType), default="black", show_default=True, help="Ink type (standard colour is paperback only)"),
        click.option("--margins", "margin_name", type=_choices(MarginPreset), default="default", show_default=True, help="Margin preset"),
        click.option("--margin", "custom_margin", type=(float, float, float, float), default=None, help="Custom margins TOP BOTTOM INSIDE OUTSIDE in inches (implies --margins custom)"),
    ]
    for option in reversed(options):
        f = option(f)
    return f


def _resolve(size_name, width_in, height_in, book_type, paper_type, ink_type, margin_name, custom_margin):
    if custom_margin is not None:
        margins = custom_margins(*custom_margin)
    else:
        margins = margin_name.lower()
    return resolve_page_spec(
        size_name,
        margins=margins,
        book_type=book_type.lower() if book_type else None,
        paper_type=paper_type.lower(),
        ink_type=ink_type.lower(),
        width_in=width_in,
        height_in=height_in,
    )


def _echo_warnings(spec):
    for issue in margin_warnings(spec):
        click.echo(f"{issue.level.upper()}: {issue.message}")


@click.group(help="Apply KDP trim sizes, margins and paper settings to documents.")
@click.option("--profile", "profile_name", type=str, default=None, help="Settings profile (local, ephemeral)")
@click.option("--verbose", is_flag=True, default=False, help="Log debug output")
@click.pass_context
def main(ctx: click.Context, profile_name: str | None, verbose: bool):
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        ctx.obj = load_profile(profile_name)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--profile")


@main.command(help="List the available page size presets.")
@click.option("--book-type", "book_type", type=_choices(BookType), default=None, help="Only show presets for this book type")
def presets(book_type: str | None):
    for p in list_presets(book_type.lower() if book_type else None):
        kind = p.book_type.value if p.book_type else "common"
        click.echo(f'{p.name:<28} {p.width_in:g}" x {p.height_in:g}"  ({to_points(p.width_in):g} x {to_points(p.height_in):g} pt)  [{kind}]')


@main.command(help="Resolve a page spec and print it without touching any document.")
@spec_options
def resolve(**kwargs):
    try:
        spec = _resolve(**kwargs)
    except PageSetupError as e:
        click.echo(f"❌ {e}")
        raise SystemExit(1)
    click.echo(f"Size: {spec.size_name} ({spec.width_in:g}\" x {spec.height_in:g}\")")
    click.echo(f"Book: {spec.book_type.value}, paper: {spec.paper_type.value}, ink: {spec.ink_type.value}")
    m = spec.margins
    click.echo(f"Margins ({spec.margin_policy.value}): top {m.top:g}\", bottom {m.bottom:g}\", inside {m.inside:g}\", outside {m.outside:g}\"")
    _echo_warnings(spec)


@main.command(help="Apply page settings to a .docx file.")
@click.argument("docx_path", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--out", "out_path", type=click.Path(dir_okay=False, path_type=Path), default=None, help="Write to this path instead of overwriting the input")
@click.option("--create", is_flag=True, default=False, help="Start from a blank document if DOCX_PATH does not exist")
@spec_options
@click.pass_obj
def apply(profile, docx_path: Path, out_path: Path | None, create: bool, **kwargs):
    store = JsonFileStore(profile.store_path) if profile.remember_settings else None
    try:
        spec = _resolve(**kwargs)
        _echo_warnings(spec)
        try:
            target = DocxPageTarget(docx_path, out_path=out_path, create=create)
        except Exception as e:
            click.echo(f"❌ Could not open {docx_path}: {e}")
            raise SystemExit(1)
        message = apply_page_spec(target, spec, store=store, key=profile.settings_key)
    except PageSetupError as e:
        click.echo(f"❌ {e}")
        raise SystemExit(1)
    click.echo(f"✅ {message}")


@main.command(help="Render a blank proof PDF with the resolved page settings.")
@click.argument("out_path", type=click.Path(dir_okay=False, path_type=Path))
@click.option("--label", type=str, default="", help="Text drawn at the top of the safe area")
@spec_options
@click.pass_obj
def proof(profile, out_path: Path, label: str, **kwargs):
    try:
        spec = _resolve(**kwargs)
        _echo_warnings(spec)
        target = PdfProofTarget(out_path, guides=profile.proof_guides, label=label)
        message = apply_page_spec(target, spec)
    except PageSetupError as e:
        click.echo(f"❌ {e}")
        raise SystemExit(1)
    click.echo(f"✅ {message}")
    click.echo(f"Proof written to {out_path}")


@main.command(help="Show the current page size and margins of a .docx or .pdf file.")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def show(path: Path):
    suffix = path.suffix.lower()
    if suffix == ".docx":
        geometry = read_docx_geometry(path)
    elif suffix == ".pdf":
        geometry = read_pdf_geometry(path)
    else:
        raise click.BadParameter(f"Unsupported file type '{suffix}'. Use .docx or .pdf", param_hint="PATH")
    click.echo("Page Settings")
    click.echo(describe_geometry(geometry))


@main.command("last-settings", help="Print the settings remembered from the last apply.")
@click.pass_obj
def last_settings(profile):
    try:
        record = load_document_settings(JsonFileStore(profile.store_path), key=profile.settings_key)
    except PageSetupError as e:
        click.echo(f"❌ {e}")
        raise SystemExit(1)
    if record is None:
        click.echo("No saved settings.")
        return
    click.echo(record.model_dump_json(indent=2))


if __name__ == "__main__":
    main()
