"""Pytest configuration for ray tracer tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import pytest
import taichi as ti


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Only the canvas uses Taichi fields, but kernels and fields need a
    runtime. Using session scope prevents multiple ti.init() calls.
    """
    ti.init(arch=ti.cpu, random_seed=42)
    yield


@pytest.fixture
def default_world():
    """A fresh copy of the two-sphere reference world."""
    from whitted.scene.presets import default_world as make_default_world

    return make_default_world()
