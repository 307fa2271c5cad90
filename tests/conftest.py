import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import grading_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


# Common test fixtures
@pytest.fixture
def model_sheet() -> str:
    """A three-question model answer key as OCR might return it."""
    return (
        "Q1: Photosynthesis converts light energy into chemical energy stored in glucose.\r\n"
        "Q2: Mitochondria release energy through aerobic respiration.\r\n"
        "Q3: Osmosis is the diffusion of water across a partially permeable membrane.\r\n"
    )


@pytest.fixture
def student_sheet() -> str:
    """A student's answers: one verbatim, one partial, question 3 left blank."""
    return (
        "Q1: Photosynthesis converts light energy into chemical energy stored in glucose.\n"
        "Q2: Mitochondria make energy.\n"
        "Q3:\n"
    )


@pytest.fixture
def write_text(tmp_path: Path):
    """Write UTF-8 text to a file under tmp_path and return its path."""
    def _write(name: str, content: str) -> Path:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path
    return _write
