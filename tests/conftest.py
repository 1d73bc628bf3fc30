"""
Shared fixtures
"""

import pytest
from loguru import logger

from wrapmaze.core.grid import Grid


SCENARIO_A = "##    #\n#  #i #\n#  O## \n   #   "

SCENARIO_B = "##   ##\ni     O\n##   ##"

# exit sealed inside an inner ring, entry inside the outer ring
SCENARIO_C = "\n".join([
    "#######",
    "#i    #",
    "# ### #",
    "# #O# #",
    "# ### #",
    "#     #",
    "#######",
])


@pytest.fixture(autouse=True)
def _reset_logger():
    """Drop handlers bound to captured streams once a test is done"""
    yield
    logger.remove()


@pytest.fixture
def grid_a() -> Grid:
    return Grid.from_text(SCENARIO_A)


@pytest.fixture
def grid_b() -> Grid:
    return Grid.from_text(SCENARIO_B)


@pytest.fixture
def grid_c() -> Grid:
    return Grid.from_text(SCENARIO_C)


@pytest.fixture
def write_map(tmp_path):
    """Write map text to a temp file and return its path"""
    def _write(text: str, name: str = "map.txt") -> str:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return str(path)
    return _write
