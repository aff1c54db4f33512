"""
Shared pytest fixtures and configuration for palette reader tests
"""

import io
import tempfile
from pathlib import Path

import pytest

from palette_reader import settings_manager

VALID_PALETTE_STRICT = """GIMP Palette
Name: Valid Palette (Strict)
Columns: 2
#Comment line 1
#Comment line 2
0 127 255 color 1
0 0 0 color2

255 255 255
#Comment line 3
88 88 88 color 4
"""

PALETTE_NO_NAME = """GIMP Palette
Columns: 2
0 127 255
"""

PALETTE_NO_COLUMNS = """GIMP Palette
Name: No Columns
0 127 255
"""

PALETTE_MALFORMED_COLUMNS = """GIMP Palette
Name: Malformed Columns
Columns: foobarxxx
0 127 255
"""

PALETTE_TRUNCATED_ROW = """GIMP Palette
Name: Valid Palette (truncated row)
Columns: 2
0 127 255
255 255
0 0 0
"""

PALETTE_OUT_OF_RANGE = """GIMP Palette
Name: Valid Palette (out of range)
Columns: 2
-100 999 255
"""

PALETTE_MALFORMED_ROW = """GIMP Palette
Name: Valid Palette (malformed row)
Columns: 2
xx 127 255
255 255 255
0 0 0
"""


class FailingStream:
    """Text stream that yields its lines and then fails instead of ending"""

    def __init__(self, text, error=None):
        self._lines = io.StringIO(text).readlines()
        self._error = error or OSError("read failed")
        self.lines_read = 0

    def __iter__(self):
        return self

    def __next__(self):
        if self.lines_read < len(self._lines):
            self.lines_read += 1
            return self._lines[self.lines_read - 1]
        raise self._error


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Keep every test away from the user's real settings directory"""
    settings_home = tmp_path / "settings_home"
    monkeypatch.setenv(settings_manager.HOME_ENV_VAR, str(settings_home))
    settings_manager.reset_settings_instance()
    yield settings_home
    settings_manager.reset_settings_instance()


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files"""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def valid_palette_text():
    return VALID_PALETTE_STRICT


@pytest.fixture
def palette_file(temp_dir):
    """Write the strict reference palette to a .gpl file"""
    path = temp_dir / "valid.gpl"
    path.write_text(VALID_PALETTE_STRICT)
    return str(path)


@pytest.fixture
def lenient_palette_file(temp_dir):
    """Write a palette that only decodes in lenient mode"""
    path = temp_dir / "lenient.gpl"
    path.write_text(PALETTE_OUT_OF_RANGE)
    return str(path)


@pytest.fixture
def sample_palettes():
    """Palette documents keyed by the irregularity they contain"""
    return {
        "valid": VALID_PALETTE_STRICT,
        "no_name": PALETTE_NO_NAME,
        "no_columns": PALETTE_NO_COLUMNS,
        "malformed_columns": PALETTE_MALFORMED_COLUMNS,
        "truncated_row": PALETTE_TRUNCATED_ROW,
        "out_of_range": PALETTE_OUT_OF_RANGE,
        "malformed_row": PALETTE_MALFORMED_ROW,
    }


@pytest.fixture
def failing_stream():
    """Factory for streams that raise after yielding their text"""
    return FailingStream
