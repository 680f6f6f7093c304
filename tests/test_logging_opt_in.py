import logging

from mdcode import unfence
from mdcode._logging import NoopLogger, resolve_logger


def test_resolve_logger_default_noop():
    lg = resolve_logger()
    assert isinstance(lg, NoopLogger)
    # Should not raise:
    lg.debug("hello")
    lg.warning("world")


def test_resolve_logger_enabled_creates_logger(caplog):
    with caplog.at_level(logging.DEBUG):
        lg = resolve_logger(enabled=True, name="mdcode.test")
        lg.info("test message")
    assert any("test message" in rec.message for rec in caplog.records)


def test_resolve_logger_uses_passed_logger():
    custom = logging.getLogger("x")
    assert resolve_logger(logger=custom) is custom


def test_library_is_silent_by_default(caplog):
    with caplog.at_level(logging.DEBUG):
        unfence("```py\nx = 1\n```\n")
    assert not [r for r in caplog.records if r.name.startswith("mdcode")]


def test_walk_logs_discovered_blocks_when_enabled(caplog, go_readme):
    with caplog.at_level(logging.DEBUG):
        unfence(go_readme, log=True)
    assert "found fence block at lines 5-7" in caplog.text


def test_unclosed_fence_warns(caplog):
    with caplog.at_level(logging.WARNING):
        blocks = unfence("```py\nx = 1\n", log=True)
    assert len(blocks) == 1
    assert "never closed" in caplog.text


def test_noop_logger_reports_every_level_disabled():
    lg = resolve_logger()
    assert lg is resolve_logger()
    assert not lg.isEnabledFor(logging.DEBUG)
    assert not lg.isEnabledFor(logging.CRITICAL)
