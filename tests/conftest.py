from __future__ import annotations

import pytest
from hypothesis import HealthCheck, settings

from greedy_tsp.common.constants import RNG_SEEDS, seed_everywhere

TEST_SEED = RNG_SEEDS.get("tests", 1337)
seed_everywhere(TEST_SEED)

settings.register_profile(
    "ci",
    max_examples=60,
    deadline=None,
    derandomize=True,
    print_blob=True,
    suppress_health_check=(
        HealthCheck.filter_too_much,
        HealthCheck.too_slow,
    ),
)
settings.load_profile("ci")


def pytest_configure(config: pytest.Config) -> None:  # pragma: no cover
    config.addinivalue_line("markers", "slow: mark test as slow")


@pytest.fixture(scope="session")
def square_cities():
    return [(1, 0.0, 0.0), (2, 0.0, 10.0), (3, 10.0, 10.0), (4, 10.0, 0.0)]
