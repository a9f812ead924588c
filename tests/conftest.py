import io
import sys
from pathlib import Path

import pytest

# Add src to sys.path so we can import practice_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


# Common test fixtures
@pytest.fixture
def console():
    """Return a factory building (stdin, stdout) streams from input lines."""
    def _make(*lines: str):
        text = "".join(line + "\n" for line in lines)
        return io.StringIO(text), io.StringIO()
    return _make
