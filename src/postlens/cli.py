"""CLI interface for postlens.

Typer-based command-line interface with Rich output formatting.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated, NoReturn

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from postlens import __version__
from postlens.config import CONFIG_FILE, PostlensConfig, default_config, load_config, save_config
from postlens.corpus import load_corpus
from postlens.exceptions import CorpusError, PostlensError
from postlens.similarity import find_link_suggestions, find_similar, similarity, tokenize
from postlens.toc import OutlineRenderer, add_heading_anchors, build_toc, slugify

__all__ = ["app"]

app = typer.Typer(
    name="postlens",
    help="Content analysis for blog posts — related posts, link suggestions, outlines.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)
console = Console()
err_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _fail(message: str) -> NoReturn:
    """Print an error and exit with status 1."""
    console.print(f"[red]{escape(message)}[/red]")
    raise typer.Exit(code=1)


def _config(ctx: typer.Context) -> PostlensConfig:
    config: PostlensConfig = ctx.obj["config"]
    return config


def _read_text(path: Path) -> str:
    """Read a markdown file, wrapping I/O failures in CorpusError."""
    if not path.is_file():
        raise CorpusError(f"File not found: {path}")
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise CorpusError(f"Cannot read {path.name}: {e}") from e


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-C", help=f"Config file (default: ./{CONFIG_FILE} if present)"),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Load configuration and set up logging for every command."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=err_console, show_path=False)],
            force=True,
        )

    path = config_path if config_path is not None else Path(CONFIG_FILE)
    try:
        if config_path is not None or path.exists():
            config = load_config(path)
        else:
            config = default_config()
    except PostlensError as e:
        _fail(str(e))

    ctx.obj = {"config": config}


@app.command()
def version() -> None:
    """Show postlens version."""
    console.print(f"postlens {__version__}")


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing config file"),
    ] = False,
) -> None:
    """Write a default postlens.toml in the current directory."""
    path = Path(CONFIG_FILE)
    if path.exists() and not force:
        console.print(
            f"[yellow]{path} already exists.[/yellow] Use [bold]--force[/bold] to overwrite."
        )
        raise typer.Exit(code=1)

    try:
        save_config(default_config(), path)
    except PostlensError as e:
        _fail(str(e))

    console.print(f"[green]Wrote default config[/green] to {path}")


@app.command()
def tokens(
    text: Annotated[str, typer.Argument(help="Text to tokenize")],
) -> None:
    """Show the index terms extracted from TEXT."""
    typer.echo(" ".join(tokenize(text)))


@app.command(name="similarity")
def similarity_cmd(
    text_a: Annotated[str, typer.Argument(help="First text")],
    text_b: Annotated[str, typer.Argument(help="Second text")],
) -> None:
    """Show the cosine similarity of two texts."""
    typer.echo(f"{similarity(text_a, text_b):.4f}")


@app.command()
def slug(
    text: Annotated[str, typer.Argument(help="Heading text")],
) -> None:
    """Show the anchor slug for TEXT."""
    typer.echo(slugify(text))


@app.command()
def related(
    ctx: typer.Context,
    corpus_dir: Annotated[Path, typer.Argument(help="Directory of markdown posts")],
    doc_id: Annotated[str, typer.Argument(help="Id of the post to find relatives for")],
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-k", help="Number of results (default from config)"),
    ] = None,
) -> None:
    """List posts related to DOC_ID by full-text similarity."""
    config = _config(ctx)
    try:
        documents = load_corpus(corpus_dir)
    except PostlensError as e:
        _fail(str(e))

    query = next((d for d in documents if d.id == doc_id), None)
    if query is None:
        _fail(f"Post not found: {doc_id}")

    results = find_similar(
        query,
        documents,
        limit=limit if limit is not None else config.related.limit,
        min_score=config.related.min_score,
    )
    if not results:
        console.print("[dim]No related posts found.[/dim]")
        return

    table = Table(title=f"Related to {escape(str(doc_id))}")
    table.add_column("id", style="bold")
    table.add_column("title")
    table.add_column("score", justify="right")
    for r in results:
        table.add_row(escape(str(r.id)), escape(r.title), f"{r.score:.4f}")
    console.print(table)


@app.command()
def links(
    ctx: typer.Context,
    corpus_dir: Annotated[Path, typer.Argument(help="Directory of markdown posts")],
    draft: Annotated[Path, typer.Argument(help="Draft markdown file")],
    limit: Annotated[
        int | None,
        typer.Option("--limit", "-k", help="Number of suggestions (default from config)"),
    ] = None,
    exclude: Annotated[
        str | None,
        typer.Option("--exclude", "-x", help="Post id to leave out (the post being edited)"),
    ] = None,
) -> None:
    """Suggest existing posts that DRAFT should link to."""
    config = _config(ctx)
    try:
        documents = load_corpus(corpus_dir)
        content = _read_text(draft)
    except PostlensError as e:
        _fail(str(e))

    suggestions = find_link_suggestions(
        content,
        documents,
        limit=limit if limit is not None else config.linking.limit,
        phrase_bonus=config.linking.phrase_bonus,
        exclude_id=exclude,
    )
    if not suggestions:
        console.print("[dim]No link suggestions.[/dim]")
        return

    table = Table(title="Link suggestions")
    table.add_column("id", style="bold")
    table.add_column("title")
    table.add_column("slug", style="dim")
    table.add_column("score", justify="right")
    for s in suggestions:
        table.add_row(escape(str(s.id)), escape(s.title), escape(s.slug or ""), str(s.score))
    console.print(table)


@app.command()
def toc(
    ctx: typer.Context,
    path: Annotated[Path, typer.Argument(help="Markdown file")],
    fmt: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format (md, html, json)"),
    ] = None,
) -> None:
    """Print the table of contents of a markdown file."""
    config = _config(ctx)
    template_dir = Path(config.toc.template_dir) if config.toc.template_dir else None
    try:
        nodes = build_toc(_read_text(path))
        renderer = OutlineRenderer(template_dir=template_dir, css_class=config.toc.css_class)
        output = renderer.render(nodes, fmt or config.toc.format)
    except PostlensError as e:
        _fail(str(e))

    if not nodes:
        logger.info("No level-2 headings in %s", path)
    typer.echo(output, nl=not output.endswith("\n"))


@app.command()
def anchors(
    path: Annotated[Path, typer.Argument(help="Markdown file")],
) -> None:
    """Print a markdown file with {#id} anchors added to its headings."""
    try:
        text = _read_text(path)
    except PostlensError as e:
        _fail(str(e))

    typer.echo(add_heading_anchors(text), nl=False)
