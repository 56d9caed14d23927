"""Typer CLI for stock cut planning."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from stockcut.application import OptimizeCutPlanCommand
from stockcut.application.config import ConfigError, OutputFormat, load_config
from stockcut.cli.commands import validate_command
from stockcut.infrastructure import (
    CutDiagramRenderer,
    CutPlanFormatter,
    DemandFormatter,
    JsonExporter,
)

app = typer.Typer(
    name="stockcut",
    help="Plan cuts of hole-punched stock material with as few pieces as possible.",
)

app.command(name="validate")(validate_command)


@app.command()
def optimize(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file"),
    ],
    tools: Annotated[
        list[str] | None,
        typer.Option("--tool", "-t", help="Tool to plan for (repeatable; default: all)"),
    ] = None,
    output_format: Annotated[
        OutputFormat | None,
        typer.Option("--format", "-f", help="Output format: text, json, ascii"),
    ] = None,
    svg_dir: Annotated[
        Path | None,
        typer.Option("--svg-dir", help="Write one SVG cut diagram per tool here"),
    ] = None,
    show_gaps: Annotated[
        bool,
        typer.Option("--show-gaps", help="List uncut stretches of each stock piece"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log every allocation step"),
    ] = False,
) -> None:
    """Compute a cut plan for every configured tool.

    Examples:
        stockcut optimize order.json
        stockcut optimize order.json --tool wire --format ascii
        stockcut optimize order.json --svg-dir ./plans
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = load_config(config_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    result = OptimizeCutPlanCommand().execute(config, tools=tools)
    if not result.is_valid:
        for error in result.errors:
            typer.echo(f"Error: {error}", err=True)
        raise typer.Exit(code=1)

    fmt = output_format or config.output.format
    if fmt == OutputFormat.JSON:
        typer.echo(JsonExporter().export(result))
    elif fmt == OutputFormat.ASCII:
        renderer = CutDiagramRenderer()
        for plan in result.plans.values():
            typer.echo(renderer.render_ascii(plan, result.products))
            typer.echo()
    else:
        typer.echo(DemandFormatter().format(result.products))
        typer.echo()
        typer.echo(CutPlanFormatter(show_gaps=show_gaps).format(result))

    out_dir = svg_dir or (Path(config.output.svg_dir) if config.output.svg_dir else None)
    if out_dir is not None and result.grid is not None:
        out_dir.mkdir(parents=True, exist_ok=True)
        diagrams = CutDiagramRenderer().render_all_svg(
            result.plans, result.products, result.grid
        )
        for name, svg in diagrams.items():
            path = out_dir / f"cut_plan_{name}.svg"
            path.write_text(svg, encoding="utf-8")
            typer.echo(f"SVG written: {path}", err=True)


if __name__ == "__main__":
    app()
