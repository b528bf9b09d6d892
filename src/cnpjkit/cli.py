from __future__ import annotations

import pathlib
import random
import sys
from typing import List, Optional

import structlog
import typer
from rich.console import Console
from rich.table import Table

from .codec import BASE_LENGTH, CnpjType, check_digits, detect_type, generate, is_valid, mask_cnpj, normalize
from .config import CnpjConfig, load_config
from .detect import RegexBackend
from .errors import MalformedCnpjError

console = Console()
log = structlog.get_logger()
app = typer.Typer(add_completion=False, no_args_is_help=True, help="cnpjkit: CNPJ validator and generator")


def version_callback(value: bool):
    if value:
        from . import __version__
        console.print(f"cnpjkit {__version__}")
        raise typer.Exit()


@app.callback()
def common(
    ctx: typer.Context,
    config: Optional[pathlib.Path] = typer.Option(None, "--config", help="Path to cnpjkit.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logs"),
    version: Optional[bool] = typer.Option(None, "--version", callback=version_callback, is_eager=True),
):
    """Global options (config, verbosity)."""
    structlog.configure(processors=[structlog.processors.JSONRenderer()])
    ctx.obj = {"config": load_config(config) if config else CnpjConfig(), "verbose": verbose}
    if verbose:
        log.info("verbose_enabled", config=str(config) if config else None)


@app.command()
def validate(values: List[str] = typer.Argument(..., help="One or more CNPJs, masked or bare")):
    """Check the check digits of each VALUE."""
    ok = True
    for value in values:
        kind = detect_type(value)
        if is_valid(value):
            console.print(f"[green]valid[/green]   {mask_cnpj(value)} ({kind.value})")
        else:
            ok = False
            console.print(f"[red]invalid[/red] {value}")
    if not ok:
        raise typer.Exit(code=1)


@app.command("format")
def format_(value: str = typer.Argument(..., help="CNPJ to mask")):
    """Print VALUE as AA.AAA.AAA/AAAA-DD."""
    console.print(mask_cnpj(value))


@app.command()
def strip(value: str = typer.Argument(..., help="CNPJ to normalize")):
    """Print VALUE without mask (uppercase 0-9A-Z only)."""
    console.print(normalize(value))


@app.command()
def detect(value: str = typer.Argument(..., help="CNPJ to classify")):
    """Print the encoding of VALUE: numeric or alphanumeric."""
    kind = detect_type(value)
    if kind is None:
        console.print(f"[red]not a CNPJ:[/red] {value}")
        raise typer.Exit(code=1)
    console.print(kind.value)


@app.command()
def complete(
    ctx: typer.Context,
    base: str = typer.Argument(..., help="12-character base"),
    kind: Optional[CnpjType] = typer.Option(None, "--type", case_sensitive=False, help="Defaults to the base's own encoding"),
):
    """Append the check digits to BASE."""
    clean = normalize(base)
    if kind is None:
        kind = CnpjType.NUMERIC if clean.isdigit() else CnpjType.ALPHANUMERIC
    if len(clean) != BASE_LENGTH:
        console.print(f"[red]base must have {BASE_LENGTH} characters, got {len(clean)}[/red]")
        raise typer.Exit(code=1)
    try:
        digits = check_digits(clean, kind, strict=ctx.obj["config"].checksum.strict)
    except MalformedCnpjError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)
    console.print(mask_cnpj(clean + digits))


@app.command("generate")
def generate_(
    ctx: typer.Context,
    kind: Optional[CnpjType] = typer.Option(None, "--type", case_sensitive=False, help="numeric or alphanumeric"),
    count: Optional[int] = typer.Option(None, "--count", "-n", min=1, help="How many to generate"),
    masked: Optional[bool] = typer.Option(None, "--masked/--bare", help="Apply the AA.AAA.AAA/AAAA-DD mask"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible output"),
):
    """Generate random valid CNPJs (not registered companies)."""
    gen = ctx.obj["config"].generator
    kind = kind or gen.kind
    count = count or gen.count
    masked = gen.masked if masked is None else masked
    seed = gen.seed if seed is None else seed
    rng = random.Random(seed) if seed is not None else random.SystemRandom()
    if ctx.obj["verbose"]:
        log.info("generate", kind=kind.value, count=count, seeded=seed is not None)
    for _ in range(count):
        console.print(generate(kind, rng, masked=masked))


@app.command()
def scan(
    ctx: typer.Context,
    text: Optional[str] = typer.Argument(None, help="Text to scan; reads stdin when omitted"),
):
    """List the valid CNPJs found in TEXT."""
    det = ctx.obj["config"].detector
    backend = RegexBackend(masked=det.masked, bare=det.bare)
    if text is None:
        text = sys.stdin.read()
    spans = backend.detect(text)
    table = Table("start", "end", "cnpj", "type")
    for s in spans:
        table.add_row(str(s.start), str(s.end), mask_cnpj(s.value), s.type)
    console.print(table)
    console.print(f"{len(spans)} CNPJ(s) found")
