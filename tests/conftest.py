# tests/conftest.py
import pytest

from combodrill.utilities.logger import DrillLogger

from fakes import FakeClock, RecordingDisplay


@pytest.fixture(autouse=True)
def restore_logger():
    """Logger settings are class-level; put them back after every test."""
    saved = (
        DrillLogger.LEVEL,
        DrillLogger.PRINT_TO_CONSOLE,
        DrillLogger.WRITE_TO_FILE,
        DrillLogger.LOG_FILE_PATH,
    )
    yield
    (
        DrillLogger.LEVEL,
        DrillLogger.PRINT_TO_CONSOLE,
        DrillLogger.WRITE_TO_FILE,
        DrillLogger.LOG_FILE_PATH,
    ) = saved


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def display():
    return RecordingDisplay()
