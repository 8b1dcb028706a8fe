"""
Pytest configuration and fixtures for the pynoisefield test suite.

Shared fixtures, marker registration and small helpers used across the
unit and integration tests.
"""
import os
import sys

import numpy as np
import pytest


def pytest_configure(config):
    """Configure pytest with custom settings."""
    # Add the package root to Python path for testing
    package_root = os.path.dirname(os.path.dirname(__file__))
    if package_root not in sys.path:
        sys.path.insert(0, package_root)

    for marker, help_text in (
        ("unit", "fast isolated tests"),
        ("integration", "tests combining several components"),
        ("importtest", "module import checks"),
        ("slow", "tests that take noticeable time"),
        ("gpu", "tests running taichi kernels"),
    ):
        config.addinivalue_line("markers", f"{marker}: {help_text}")


def pytest_collection_modifyitems(config, items):
    """Tag import tests and make every taichi test slow."""
    for item in items:
        if "gpu" in item.keywords:
            item.add_marker("slow")

        if "import" in item.name.lower() or "test_imports.py" in str(item.fspath):
            item.add_marker("importtest")


@pytest.fixture
def skip_if_no_taichi():
    """Skip test if Taichi is not available or fails to initialize."""
    try:
        import taichi as ti
        ti.init(arch=ti.cpu, offline_cache=False)
        return True
    except Exception:
        pytest.skip("Taichi not available or initialization failed")


def make_grid(xsize, ysize, value):
    """DenseGrid2D of the given size with every cell set to value."""
    from pynoisefield.grid import DenseGrid2D

    return DenseGrid2D(xsize, ysize).fill(value)


@pytest.fixture
def filled_grid():
    """Factory fixture building constant grids."""
    return make_grid


@pytest.fixture(scope="session")
def sampler():
    """A seeded 8x6 gradient noise sampler shared across tests."""
    from pynoisefield.noise import GradientNoise

    return GradientNoise(8, 6, seed=1234)


@pytest.fixture
def ramp_grid():
    """3x5 grid whose cell idx holds float(idx)."""
    from pynoisefield.grid import DenseGrid2D

    return DenseGrid2D.from_numpy(np.arange(15, dtype=np.float32).reshape(5, 3))
