import sys
from pathlib import Path

import matplotlib
import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def pytest_sessionstart(session):  # noqa: D401
    matplotlib.use("Agg")


@pytest.fixture(autouse=True)
def _fresh_table_cache():
    from biohello.codon import reset_table_cache

    reset_table_cache()
    yield
    reset_table_cache()
