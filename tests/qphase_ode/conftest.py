"""Pytest configuration for qphase_ode tests."""

import sys
from pathlib import Path

import numpy as np
import pytest

# This file is in tests/qphase_ode/
# Root is ../../
packages_dir = Path(__file__).parents[2] / "packages"
sys.path.insert(0, str(packages_dir / "qphase_ode"))


def _oscillator(x, dxdt, t):
    # dx/dt = v, dv/dt = -x
    dxdt[0] = x[1]
    dxdt[1] = -x[0]


class CountingSystem:
    """System wrapper recording every call."""

    def __init__(self, func=_oscillator):
        self.func = func
        self.calls = []

    def __call__(self, x, dxdt, t):
        self.calls.append((len(x), t))
        self.func(x, dxdt, t)


@pytest.fixture
def oscillator():
    return _oscillator


@pytest.fixture
def make_counting_system():
    return CountingSystem


@pytest.fixture
def counting_system():
    return CountingSystem()


@pytest.fixture
def oscillator_state():
    return np.array([1.0, 0.0])
