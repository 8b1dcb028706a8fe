"""
Taichi kernels for parallel noise field materialization.

Evaluates the same gradient noise arithmetic as GradientNoise.sample_array,
one grid cell per thread, each thread writing only its own cell. Gradients
and results are single precision, so values agree with the numpy backend to
about 1e-6 rather than bit for bit.

The caller is responsible for initialising taichi (``ti.init``) before use.
"""

import numpy as np
import taichi as ti


@ti.func
def lerp(a0: ti.f32, a1: ti.f32, w: ti.f32) -> ti.f32:
    """Linear interpolation between a0 and a1 by weight w"""
    return (1.0 - w) * a0 + w * a1


@ti.func
def fade(t: ti.f32) -> ti.f32:
    """Perlin fade function: 6t^5 - 15t^4 + 10t^3"""
    return t * t * t * (t * (t * 6.0 - 15.0) + 10.0)


@ti.func
def dot_grid_gradient(gx: ti.template(), gy: ti.template(), stride: ti.i32,
                      ix: ti.i32, iy: ti.i32, x: ti.f32, y: ti.f32) -> ti.f32:
    """Dot product of the corner gradient with the offset from (ix, iy) to (x, y)"""
    idx = ix * stride + iy
    return (x - ti.cast(ix, ti.f32)) * gx[idx] + (y - ti.cast(iy, ti.f32)) * gy[idx]


@ti.kernel
def gradient_noise_kernel(out: ti.template(), gx: ti.template(), gy: ti.template(),
                          grid_xsize: ti.i32, domain_xsize: ti.i32, domain_ysize: ti.i32,
                          scale: ti.f32, output_scale: ti.f32, quintic: ti.i32):
    """
    Fill a flat grid buffer with gradient noise sampled at (i*scale, j*scale).

    Args:
        out: 1D f32 field of grid_xsize * grid_ysize cells (row-major, i fastest)
        gx, gy: 1D f32 gradient component fields of the lattice
        grid_xsize: Number of grid cells along i
        domain_xsize, domain_ysize: Sampler domain (lattice cell counts)
        scale: Spacing between sample points
        output_scale: Multiplier applied to the interpolated value
        quintic: 1 to apply the fade curve to the weights, 0 for raw weights
    """
    stride = domain_ysize + 1
    for idx in out:
        i = idx % grid_xsize
        j = idx // grid_xsize
        x = ti.cast(i, ti.f32) * scale
        y = ti.cast(j, ti.f32) * scale

        # Single precision may round a point onto the far domain edge
        ix0 = ti.min(ti.cast(ti.floor(x), ti.i32), domain_xsize - 1)
        iy0 = ti.min(ti.cast(ti.floor(y), ti.i32), domain_ysize - 1)
        ix1 = ix0 + 1
        iy1 = iy0 + 1

        sx = x - ti.cast(ix0, ti.f32)
        sy = y - ti.cast(iy0, ti.f32)
        if quintic == 1:
            sx = fade(sx)
            sy = fade(sy)

        n0 = dot_grid_gradient(gx, gy, stride, ix0, iy0, x, y)
        n1 = dot_grid_gradient(gx, gy, stride, ix1, iy0, x, y)
        g0 = lerp(n0, n1, sx)

        n2 = dot_grid_gradient(gx, gy, stride, ix0, iy1, x, y)
        n3 = dot_grid_gradient(gx, gy, stride, ix1, iy1, x, y)
        g1 = lerp(n2, n3, sx)

        out[idx] = lerp(g0, g1, sy) * output_scale


def materialize(noise, grid_xsize: int, grid_ysize: int, scale: float) -> np.ndarray:
    """
    Run gradient_noise_kernel for a GradientNoise sampler.

    Args:
        noise: GradientNoise providing the lattice and output settings
        grid_xsize, grid_ysize: Size of the grid to fill
        scale: Spacing between sample points (already range checked)

    Returns:
        numpy.ndarray: Flat float32 buffer of grid_xsize * grid_ysize values
    """
    lattice = noise.gradient
    gx = ti.field(ti.f32, shape=(lattice.array_size,))
    gy = ti.field(ti.f32, shape=(lattice.array_size,))
    gx.from_numpy(lattice.xpts.copy())
    gy.from_numpy(lattice.ypts.copy())

    out = ti.field(ti.f32, shape=(grid_xsize * grid_ysize,))
    gradient_noise_kernel(
        out, gx, gy,
        grid_xsize, lattice.xsize, lattice.ysize,
        scale, noise.output_scale,
        1 if noise.interpolation == "quintic" else 0,
    )
    return out.to_numpy()
