from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from .config import GallerySettings, load_settings
from .logging_config import setup_logging
from .navigation import NavigationController
from .paths import figure_path, output_root
from .registry import get_registry
from .render import render_to_file
from .rng import make_rng

app = typer.Typer(add_completion=False, help="Supplementary figures gallery (synthetic data + renderer)")


def _settings(ctx: typer.Context) -> GallerySettings:
    return ctx.obj if isinstance(ctx.obj, GallerySettings) else load_settings()


def _controller(settings: GallerySettings, seed: Optional[int]) -> NavigationController:
    return NavigationController(rng=make_rng(seed if seed is not None else settings.seed))


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    Browse, sample and render the supplementary figures.

    Settings are read from SUPPFIG_* environment variables.
    """
    try:
        settings = load_settings()
    except ValueError as e:
        typer.echo(f"ERROR: {e}", err=True)
        raise typer.Exit(code=1)
    setup_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings


@app.command("list")
def list_figures() -> None:
    """
    List every figure with its id and title.
    """
    registry = get_registry()
    for fig in registry:
        typer.echo(f"{fig.figure_id:>2}  {fig.title}")


@app.command()
def describe(
    figure: int = typer.Option(..., "--figure", "-f", help="Figure number (clamped to 1..15)"),
) -> None:
    """
    Show the figure's title, caption and chart bindings as JSON.
    """
    registry = get_registry()
    nav = NavigationController(registry=registry)
    try:
        view = nav.jump_to(figure)
        meta = registry.describe(view.figure_id)
        meta["columns"] = list(view.dataset.columns)
        meta["records"] = int(len(view.dataset))
    except Exception as e:
        typer.echo(f"ERROR: {e}")
        raise typer.Exit(code=1)

    typer.echo(json.dumps(meta, indent=2, sort_keys=True, ensure_ascii=False))


@app.command()
def sample(
    ctx: typer.Context,
    figure: int = typer.Option(..., "--figure", "-f", help="Figure number (clamped to 1..15)"),
    rows: int = typer.Option(10, "--rows", "-n", min=1, help="Number of records to print"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible data"),
    fmt: str = typer.Option("table", "--format", help="table|csv"),
):
    """
    Generate the figure's dataset and print the first records.
    """
    settings = _settings(ctx)
    fmt = fmt.strip().lower()
    if fmt not in {"table", "csv"}:
        typer.echo(f"Invalid format '{fmt}' (expected table or csv).", err=True)
        raise typer.Exit(code=1)
    try:
        view = _controller(settings, seed).jump_to(figure)
        head = view.dataset.head(rows)
        typer.echo(f"{view.descriptor.title} ({view.page_label}, {len(view.dataset)} records)")
        if fmt == "csv":
            typer.echo(head.to_csv(index=False).rstrip())
        else:
            typer.echo(head.to_string(index=False))
    except Exception as e:
        typer.echo(f"ERROR: {e}")
        raise typer.Exit(code=1)


@app.command()
def render(
    ctx: typer.Context,
    figure: int = typer.Option(..., "--figure", "-f", help="Figure number (clamped to 1..15)"),
    out: Optional[Path] = typer.Option(None, "--out", help="Output image path"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible data"),
    dpi: Optional[int] = typer.Option(None, "--dpi", min=1, help="Image resolution"),
):
    """
    Render one figure with freshly generated data and write it as an image.
    """
    settings = _settings(ctx)
    try:
        view = _controller(settings, seed).jump_to(figure)
        path = out or figure_path(settings.output_dir, view.figure_id, view.descriptor.title, settings.image_format)
        written = render_to_file(view, path, dpi=dpi or settings.dpi)
        typer.echo(f"Rendered {view.descriptor.title}")
        typer.echo(f"Image: {written}")
    except Exception as e:
        typer.echo(f"ERROR: {e}")
        raise typer.Exit(code=1)


@app.command("render-all")
def render_all(
    ctx: typer.Context,
    out_dir: Optional[Path] = typer.Option(None, "--out-dir", help="Directory for the images"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible data"),
):
    """
    Walk the gallery from the first to the last figure and render each one.
    """
    settings = _settings(ctx)
    target = str(out_dir) if out_dir else settings.output_dir
    nav = _controller(settings, seed)
    try:
        view = nav.jump_to(1)
        while True:
            path = figure_path(target, view.figure_id, view.descriptor.title, settings.image_format)
            render_to_file(view, path, dpi=settings.dpi)
            typer.echo(f"[{view.page_label}] {path.name}")
            if nav.at_last:
                break
            view = nav.next()
    except Exception as e:
        typer.echo(f"ERROR: {e}")
        raise typer.Exit(code=1)

    typer.echo(f"Rendered {nav.total_figures} figures to {output_root(target)}")
