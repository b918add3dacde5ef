"""CLI for inspecting regression objectives."""

from __future__ import annotations

from typing import Annotated, Optional

import numpy as np
import typer
from rich.console import Console
from rich.table import Table

from regboost.config import ConfigError, ObjectiveConfig
from regboost.data import Metadata
from regboost.objectives import available_objectives, create_objective, get_objective

app = typer.Typer(
    name="regboost",
    help="Inspect gradients and hessians of regression boosting objectives.",
    no_args_is_help=True,
)
console = Console()

# Config fields each objective reads
_OBJECTIVE_PARAMS: dict[str, list[str]] = {
    "regression": [],
    "regression_l1": ["gaussian_eta"],
    "huber": ["huber_delta", "gaussian_eta"],
    "fair": ["fair_c"],
}


def _parse_values(raw: str, option: str) -> np.ndarray:
    try:
        return np.array([float(v) for v in raw.split(",") if v.strip()], dtype=np.float64)
    except ValueError:
        console.print(f"[red]Invalid number in {option}: {raw}[/red]")
        raise typer.Exit(1) from None


@app.command(name="list")
def list_objectives() -> None:
    """List available objectives."""
    table = Table(title="Available Objectives")
    table.add_column("Name", style="cyan")
    table.add_column("Class", style="green")
    table.add_column("Parameters", style="yellow")

    for name in available_objectives():
        params = ", ".join(_OBJECTIVE_PARAMS.get(name, [])) or "-"
        table.add_row(name, get_objective(name).__name__, params)

    console.print(table)


@app.command()
def gradients(
    objective: Annotated[str, typer.Argument(help="Objective name or alias.")],
    label: Annotated[str, typer.Option("--label", "-y", help="Comma-separated labels.")],
    score: Annotated[str, typer.Option("--score", "-s", help="Comma-separated scores.")],
    weight: Annotated[
        Optional[str],
        typer.Option("--weight", "-w", help="Comma-separated sample weights."),
    ] = None,
    eta: Annotated[float, typer.Option("--eta", help="Gaussian bandwidth (L1, Huber).")] = 1.0,
    delta: Annotated[float, typer.Option("--delta", help="Huber threshold.")] = 1.0,
    fair_c: Annotated[float, typer.Option("--fair-c", help="Fair loss constant.")] = 1.0,
    threads: Annotated[int, typer.Option("--threads", "-j", help="Worker threads.")] = 1,
) -> None:
    """Print per-example gradients and hessians."""
    try:
        config = ObjectiveConfig.from_params(
            {"gaussian_eta": eta, "huber_delta": delta, "fair_c": fair_c, "num_threads": threads}
        )
    except ConfigError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1) from None

    try:
        obj = create_objective(objective, config)
    except KeyError:
        console.print(f"[red]Unknown objective: {objective}[/red]")
        console.print(f"Available: {available_objectives()}")
        raise typer.Exit(1) from None

    labels = _parse_values(label, "--label")
    scores = _parse_values(score, "--score")
    weights = _parse_values(weight, "--weight") if weight is not None else None
    if len(scores) != len(labels) or (weights is not None and len(weights) != len(labels)):
        console.print("[red]--label, --score and --weight must have the same length[/red]")
        raise typer.Exit(1)

    obj.init(Metadata.from_arrays(labels, weights), len(labels))
    grad, hess = obj.get_gradients(scores)

    table = Table(title=f"{obj.get_name()} derivatives")
    table.add_column("#", justify="right", style="cyan")
    table.add_column("label", justify="right")
    table.add_column("score", justify="right")
    table.add_column("residual", justify="right")
    table.add_column("gradient", justify="right", style="green")
    table.add_column("hessian", justify="right", style="yellow")

    for i in range(len(labels)):
        table.add_row(
            str(i),
            f"{labels[i]:g}",
            f"{scores[i]:g}",
            f"{scores[i] - labels[i]:g}",
            f"{grad[i]:.6g}",
            f"{hess[i]:.6g}",
        )

    console.print(table)


def main() -> None:
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
