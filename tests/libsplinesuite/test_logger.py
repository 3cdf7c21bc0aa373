"""Tests for logger — splinesuite logging hierarchy and levels."""
import io
import logging

import pytest

from splinesuite.libsplinesuite import logger
from splinesuite.libsplinesuite.spliner import CubicSplineInterpolator


@pytest.fixture
def root_logger():
    """Restore level and handlers of the splinesuite root logger afterwards."""
    root = logging.getLogger(logger.ROOT_NAME)
    level = root.level
    handlers = list(root.handlers)
    yield root
    root.setLevel(level)
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)


class TestLevels:
    def test_custom_level_names(self):
        assert logging.getLevelName(logger.DEBUG2) == "DEBUG2"
        assert logging.getLevelName(logger.DEBUG3) == "DEBUG3"

    @pytest.mark.parametrize(
        "level, expected",
        [
            (0, logging.ERROR),
            (2, logging.INFO),
            (5, logger.DEBUG2),
            (6, logger.DEBUG3),
            ("3", logging.DEBUG),
            ("warning", logging.WARNING),
            (logging.CRITICAL, logging.CRITICAL),
        ],
    )
    def test_set_level(self, root_logger, level, expected):
        logger.set_level(level)
        assert root_logger.level == expected

    def test_hierarchy(self):
        log = logger.get_logger("splinesuite.libsplinesuite.spliner")
        assert log.name.startswith(logger.ROOT_NAME)
        assert hasattr(log, "debug2") and hasattr(log, "debug3")
        assert logger.get_logger().name == logger.ROOT_NAME


class TestSetup:
    def test_stream_handler(self, root_logger):
        buf = io.StringIO()
        logger.setup(logging.DEBUG, stream=buf)
        CubicSplineInterpolator([0.0, 1.0, 2.0], [0.0, 1.0, 0.0])
        assert "natural cubic spline through 3 knots" in buf.getvalue()

    def test_setup_is_idempotent(self, root_logger):
        logger.setup(logging.INFO, stream=io.StringIO())
        n = len(root_logger.handlers)
        logger.setup(logging.DEBUG, stream=io.StringIO())
        assert len(root_logger.handlers) == n
        assert root_logger.level == logging.INFO

    def test_environment_level(self, root_logger, monkeypatch):
        monkeypatch.setenv(logger.ENV_LEVEL, "5")
        logger.setup(stream=io.StringIO())
        assert root_logger.level == logger.DEBUG2


class TestLibraryMessages:
    def test_extrapolation_logged_at_debug2(self, root_logger, caplog):
        spl = CubicSplineInterpolator([0.0, 1.0, 2.0], [0.0, 1.0, 0.0])
        with caplog.at_level(logger.DEBUG2, logger=logger.ROOT_NAME):
            spl(3.0, bounds=False)
        assert any("extrapolating" in r.getMessage() for r in caplog.records)

    def test_quiet_by_default(self, root_logger, caplog):
        root_logger.setLevel(logging.WARNING)
        with caplog.at_level(logging.WARNING):
            CubicSplineInterpolator([0.0, 1.0, 2.0], [0.0, 1.0, 0.0])
        assert not caplog.records
