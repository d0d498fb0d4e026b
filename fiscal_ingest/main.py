"""Command-line entry point for fiscal-ingest."""

import json
from dataclasses import asdict, replace
from pathlib import Path

import click

from fiscal_ingest.config.settings import Settings
from fiscal_ingest.logging.logger import Log
from fiscal_ingest.payroll.exceptions import PayrollValidationError
from fiscal_ingest.payroll.reconciler import PayrollReconciler
from fiscal_ingest.payroll.validator import build_payroll
from fiscal_ingest.processor.document_loader import DocumentLoader
from fiscal_ingest.processor.processor import build_processor
from fiscal_ingest.processor.result_assembler import ResultAssembler


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """F29 tax-form ingestion and payroll reconciliation."""
    settings = Settings()
    Log.configure(settings.log_level)
    ctx.obj = settings


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--media-type",
    default=None,
    help="Declared media type; guessed from the file name when omitted.",
)
@click.pass_context
def parse(ctx: click.Context, path: Path, media_type: str | None) -> None:
    """Parse an F29 PDF and print the result as JSON."""
    processor = build_processor(ctx.obj)
    document = DocumentLoader.read_path(path)
    if media_type is not None:
        document = replace(document, media_type=media_type)

    outcome = processor.process(document)
    payload = ResultAssembler().to_payload(outcome)
    click.echo(json.dumps(payload, ensure_ascii=False, indent=2))
    if not outcome.success:
        ctx.exit(1)


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def reconcile(ctx: click.Context, path: Path) -> None:
    """Check payroll totals in a JSON file against their line items."""
    try:
        items, stored = build_payroll(json.loads(path.read_text(encoding="utf-8")))
    except (json.JSONDecodeError, PayrollValidationError) as exc:
        raise click.ClickException(f"Invalid payroll file: {exc}") from exc

    result = PayrollReconciler().validate(items, stored)
    click.echo(json.dumps(asdict(result), ensure_ascii=False, indent=2))
    if not result.is_valid:
        ctx.exit(1)


if __name__ == "__main__":
    cli()
