import sys
from pathlib import Path

import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from planegeom import PlaneGeometry


@pytest.fixture(autouse=True)
def default_policy():
    """Every test starts and ends with the exact, permissive default"""
    PlaneGeometry.reset()
    yield PlaneGeometry.policy()
    PlaneGeometry.reset()
