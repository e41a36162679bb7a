import logging
import types
from types import SimpleNamespace

from hostping import logging_setup


def _capture_basic_config(monkeypatch, handlers=None):
    """Pretend the root logger has `handlers` and record basicConfig() kwargs."""
    seen = {}
    root = SimpleNamespace(handlers=handlers or [])
    # Patch a private copy of the logging module seen only by logging_setup,
    # so pytest's own logging plugin keeps the real root logger.
    fake_logging = types.ModuleType("logging")
    fake_logging.__dict__.update(logging.__dict__)
    fake_logging.getLogger = lambda *a: root
    fake_logging.basicConfig = lambda **k: seen.update(k)
    monkeypatch.setattr(logging_setup, "logging", fake_logging)
    return seen


def test_default_level_is_quiet(monkeypatch):
    monkeypatch.delenv("HOSTPING_LOG_LEVEL", raising=False)
    monkeypatch.delenv("HOSTPING_DEBUG", raising=False)
    seen = _capture_basic_config(monkeypatch)
    logging_setup.setup_logging()
    assert seen["level"] == logging.WARNING


def test_env_log_level(monkeypatch):
    monkeypatch.setenv("HOSTPING_LOG_LEVEL", "info")
    monkeypatch.delenv("HOSTPING_DEBUG", raising=False)
    seen = _capture_basic_config(monkeypatch)
    logging_setup.setup_logging()
    assert seen["level"] == logging.INFO


def test_debug_env_forces_debug(monkeypatch):
    monkeypatch.setenv("HOSTPING_LOG_LEVEL", "ERROR")
    monkeypatch.setenv("HOSTPING_DEBUG", "yes")
    seen = _capture_basic_config(monkeypatch)
    logging_setup.setup_logging()
    assert seen["level"] == logging.DEBUG


def test_debug_flag_forces_debug(monkeypatch):
    monkeypatch.delenv("HOSTPING_DEBUG", raising=False)
    seen = _capture_basic_config(monkeypatch)
    logging_setup.setup_logging(debug=True)
    assert seen["level"] == logging.DEBUG


def test_existing_handlers_left_alone(monkeypatch):
    seen = _capture_basic_config(monkeypatch, handlers=[logging.NullHandler()])
    logging_setup.setup_logging(debug=True)
    assert seen == {}


def test_debug_logs_go_to_stdout(monkeypatch):
    monkeypatch.delenv("HOSTPING_DEBUG", raising=False)
    seen = _capture_basic_config(monkeypatch)
    logging_setup.setup_logging(debug=True)
    assert seen["stream"] is logging_setup.sys.stdout


def test_non_debug_logs_go_to_stderr(monkeypatch):
    monkeypatch.delenv("HOSTPING_DEBUG", raising=False)
    seen = _capture_basic_config(monkeypatch)
    logging_setup.setup_logging()
    assert seen["stream"] is logging_setup.sys.stderr
