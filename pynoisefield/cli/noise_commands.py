"""
Noise field CLI commands for pynoisefield.

Materializes a gradient noise field from the terminal and reports summary
statistics. Nothing is written to disk.
"""

import logging
import sys

import click
import numpy as np

import pynoisefield as nf
from pynoisefield import constants as cte


def _summary(grid):
    values = grid.to_numpy()
    return {
        "min": float(values.min()),
        "max": float(values.max()),
        "mean": float(values.mean()),
        "positive": float(np.count_nonzero(values >= 0.0)) / grid.size,
    }


@click.command()
@click.option("--xsize", "-x", default=cte.DEFAULT_XSIZE, show_default=True, type=int,
              help="Number of grid cells along x")
@click.option("--ysize", "-y", default=cte.DEFAULT_YSIZE, show_default=True, type=int,
              help="Number of grid cells along y")
@click.option("--scale", "-s", default=cte.DEFAULT_SCALE, show_default=True, type=float,
              help="Spacing between sample points (smaller = smoother)")
@click.option("--seed", default=cte.DEFAULT_SEED, show_default=True, type=int,
              help="Seed of the gradient lattice")
@click.option("--blend-seed", default=None, type=int,
              help="Average with a second layer built from this seed")
@click.option(
    "--interpolation",
    type=click.Choice(list(cte.INTERPOLATION_MODES)),
    default="linear",
    show_default=True,
    help="Weighting of the corner contributions",
)
@click.option(
    "--backend",
    "-b",
    type=click.Choice(list(cte.BACKENDS)),
    default="numpy",
    show_default=True,
    help="Materialization backend",
)
@click.option(
    "--arch",
    type=click.Choice(["cpu", "gpu"]),
    default="cpu",
    show_default=True,
    help="Taichi architecture (taichi backend only)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
def noisefield(xsize, ysize, scale, seed, blend_seed, interpolation, backend, arch, verbose):
    """
    Generate a gradient noise field and print its statistics.

    Samples gradient noise at (i*scale, j*scale) for every cell of an
    XSIZE x YSIZE grid and reports the value range, the mean and the share of
    cells at or above zero (land, for a sea level of 0).

    Examples:

        # Default 256x256 elevation layer
        nf-noisefield

        # Smoother field, averaged with a second layer
        nf-noisefield --scale 0.005 --seed 1 --blend-seed 2 -v
    """
    try:
        if verbose:
            logging.basicConfig(level=logging.DEBUG)
            click.echo(
                f"Materializing {xsize}x{ysize} field (scale={scale}, seed={seed}, "
                f"backend={backend})..."
            )

        if backend == "taichi":
            import taichi as ti

            ti.init(arch=ti.gpu if arch == "gpu" else ti.cpu)

        kwargs = dict(interpolation=interpolation, backend=backend)
        grid = nf.noise.noise_field(xsize, ysize, scale, seed=seed, **kwargs)
        if blend_seed is not None:
            other = nf.noise.noise_field(xsize, ysize, scale, seed=blend_seed, **kwargs)
            grid = nf.noise.average(grid, other)
            if verbose:
                click.echo(f"Averaged with layer seeded {blend_seed}")

        stats = _summary(grid)
        click.echo(f"Grid: {grid.xsize} x {grid.ysize} ({grid.size} cells)")
        click.echo(f"Value range: [{stats['min']:.4f}, {stats['max']:.4f}]")
        click.echo(f"Mean: {stats['mean']:.4f}")
        click.echo(f"Cells >= 0: {100.0 * stats['positive']:.1f}%")

    except nf.RangeError as e:
        click.echo(f"Error: {e}", err=True)
        click.echo(
            f"Scale must stay below {nf.noise.max_valid_scale(xsize, ysize):.4f} "
            "for this grid size",
            err=True,
        )
        sys.exit(1)

    except ImportError as e:
        click.echo(f"Error: Missing dependency - {e}", err=True)
        click.echo("Install taichi with: pip install pynoisefield[gpu]", err=True)
        sys.exit(1)

    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


if __name__ == "__main__":
    noisefield()
