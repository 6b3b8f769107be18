import os
import sys

import pytest

# Top-level modules live in the repo root; make them importable no matter
# where pytest is started from.
REPO_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)


@pytest.fixture
def demo_source():
    return "(add 2 (subtract 4 2))"
