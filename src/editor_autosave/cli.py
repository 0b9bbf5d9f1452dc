"""CLI for inspecting and managing recovery files."""

import asyncio
import sys
from pathlib import Path

import typer
from loguru import logger

from editor_autosave.config import RECOVERY_SUFFIX, StaticConfig
from editor_autosave.core.paths import RecoveryPathResolver
from editor_autosave.documents import OpenDocuments, TextDocument
from editor_autosave.logging_config import configure_logging
from editor_autosave.models import ConflictDecision, Resolution
from editor_autosave.service import AutoSaveService
from editor_autosave.storage import LocalFileStorage

app = typer.Typer(help="Auto-save recovery files: inspect, restore, snapshot and clean up.")


class TyperPrompt:
    """Ask on the terminal, unless the answer was given on the command line."""

    def __init__(self, answer: bool | None = None) -> None:
        self.answer = answer

    async def choose(self, decision: ConflictDecision) -> Resolution:
        answer = self.answer
        if answer is None:
            answer = typer.confirm(
                f"{decision.recovery_path} has changes newer than "
                f"{decision.document.path}. Restore them?",
                default=True,
            )
        return Resolution.ACCEPT if answer else Resolution.DECLINE


def _build_service(ctx: typer.Context, document: TextDocument, answer: bool | None = None) -> AutoSaveService:
    documents = OpenDocuments()
    documents.open(document)
    return AutoSaveService(
        LocalFileStorage(),
        documents,
        StaticConfig(),
        prompt=TyperPrompt(answer),
        suffix=ctx.obj["suffix"],
    )


def _load(ctx: typer.Context, file: Path) -> TextDocument:
    """Load the canonical file, exiting on anything the CLI cannot handle."""
    if RecoveryPathResolver(ctx.obj["suffix"]).is_recovery_path(file.name):
        logger.error("{} is itself a recovery file; pass the original file instead", file)
        raise typer.Exit(1)
    if not file.is_file():
        logger.error("File not found: {}", file)
        raise typer.Exit(1)
    try:
        return TextDocument.from_file(file.resolve())
    except UnicodeDecodeError:
        logger.error("{} is not UTF-8 text", file)
        raise typer.Exit(1)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    suffix: str = typer.Option(RECOVERY_SUFFIX, "--suffix", help="Recovery file suffix"),
) -> None:
    configure_logging(verbose=verbose)
    try:
        RecoveryPathResolver(suffix)
    except ValueError as e:
        logger.error("{}", e)
        raise typer.Exit(1)
    ctx.obj = {"suffix": suffix}


@app.command()
def path(ctx: typer.Context, file: Path) -> None:
    """Print where the recovery file for FILE lives."""
    typer.echo(RecoveryPathResolver(ctx.obj["suffix"]).resolve(str(file.resolve())))


async def _check(service: AutoSaveService, document: TextDocument, *, write: bool) -> Resolution | None:
    resolution = await service.detector.handle_open(document)
    if resolution is not Resolution.ACCEPT:
        return resolution
    if write:
        Path(document.path).write_text(document.get_content(), encoding="utf-8")
        document.mark_saved(Path(document.path).stat().st_mtime)
        await service.cleanup.on_explicit_save(document)
    return resolution


@app.command()
def check(
    ctx: typer.Context,
    file: Path,
    restore: bool | None = typer.Option(
        None, "--restore/--discard", help="Answer the restore prompt up front"
    ),
    write: bool = typer.Option(False, "--write", help="Save restored text over FILE"),
) -> None:
    """Look for unsaved changes newer than FILE and offer to restore them."""
    document = _load(ctx, file)
    service = _build_service(ctx, document, restore)
    resolution = asyncio.run(_check(service, document, write=write))

    if resolution is None:
        typer.echo("No newer recovery file.")
    elif resolution is Resolution.DECLINE:
        typer.echo("Recovery file discarded.")
    elif write:
        typer.echo(f"Restored changes written to {document.path}")
    else:
        typer.echo(document.get_content(), nl=False)


@app.command()
def snapshot(ctx: typer.Context, file: Path) -> None:
    """Save text from stdin as the recovery file of FILE."""
    document = _load(ctx, file)
    document.set_content(sys.stdin.read())
    service = _build_service(ctx, document)

    async def _run() -> bool:
        task = service.save_now()
        return await task if task is not None else False

    if not asyncio.run(_run()):
        logger.error("Snapshot of {} failed", file)
        raise typer.Exit(1)
    typer.echo(service.resolver.resolve(document.path))


@app.command()
def clean(ctx: typer.Context, file: Path) -> None:
    """Remove the recovery file of FILE, if any."""
    document = TextDocument(path=str(file.resolve()))
    service = _build_service(ctx, document)
    removed = asyncio.run(service.cleanup.on_explicit_save(document))
    typer.echo("Recovery file removed." if removed else "No recovery file.")
