"""Pytest configuration for the long64 test suite."""

import sys
from pathlib import Path

import pytest

# Add the project root to path for long64 imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from long64 import HostAccelerator, using_accelerator

ACCELERATORS = {
    "emulated": None,
    "host": HostAccelerator,
}


def pytest_addoption(parser):
    """Add --accelerator option."""
    parser.addoption(
        "--accelerator",
        action="append",
        default=[],
        help="Run only with the given accelerator (emulated, host); can be used multiple times",
    )


@pytest.fixture(autouse=True, params=sorted(ACCELERATORS))
def accelerator(request):
    """Run every test once on the emulated engine and once on the host accelerator."""
    selected = request.config.getoption("accelerator")
    if selected and request.param not in selected:
        pytest.skip(f"accelerator {request.param} not selected")
    factory = ACCELERATORS[request.param]
    with using_accelerator(factory() if factory is not None else None) as installed:
        yield installed
