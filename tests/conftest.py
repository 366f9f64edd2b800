"""
Pytest Configuration and Fixtures for Dalenius
==============================================

Shared fixtures for the stratification test suite.
"""

import numpy as np
import pytest

from dalenius.config import StratificationConfig


# ============================================================================
# Sample Fixtures
# ============================================================================


@pytest.fixture
def ten_sample():
    """The integers 1..10, the reference two-level scenario."""
    return [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]


@pytest.fixture
def rng():
    """Seeded random generator for reproducible samples."""
    return np.random.default_rng(20241204)


@pytest.fixture
def normal_sample(rng):
    """1000 draws from N(50, 10)."""
    return rng.normal(loc=50.0, scale=10.0, size=1000)


@pytest.fixture
def skewed_sample(rng):
    """Right-skewed sample, typical of business survey size variables."""
    return rng.lognormal(mean=3.0, sigma=1.0, size=5000)


@pytest.fixture
def sample_with_missing():
    """The integers 1..10 with missing values interleaved."""
    return [1, None, 2, 3, float("nan"), 4, 5, 6, 7, 8, None, 9, 10]


# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def default_config():
    return StratificationConfig()


@pytest.fixture
def yaml_config_file(tmp_path):
    """YAML configuration file with a non-default coefficient."""
    config_path = tmp_path / "dalenius.yaml"
    config_path.write_text(
        "stratification:\n"
        "  interval_coefficient: 6.0\n"
        "  log_base: 10\n"
        "  boundary_epsilon: 1.0e-9\n"
        "  level_prefix: stratum\n",
        encoding="utf-8",
    )
    return config_path
