from __future__ import annotations

import pytest

from lazy_rewrite.runtime import telemetry


@pytest.fixture(autouse=True)
def reset_config():
    yield
    telemetry.configure()


def test_configure_rejects_config_and_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="quiet")


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_get_logger_is_cached_until_reconfigured() -> None:
    telemetry.configure(preset="quiet")
    first = telemetry.get_logger("lazy_rewrite.tests")

    assert telemetry.get_logger("lazy_rewrite.tests") is first

    telemetry.configure(preset="quiet")
    assert telemetry.get_logger("lazy_rewrite.tests") is not first


def test_env_flag_parsing(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LAZY_REWRITE_LOG_JSON", " Yes ")
    monkeypatch.setenv("LAZY_REWRITE_NO_COLOR", "0")
    monkeypatch.delenv("LAZY_REWRITE_LOG_BUFFERED", raising=False)

    assert telemetry._env_flag("LOG_JSON", False) is True
    assert telemetry._env_flag("NO_COLOR", True) is False
    assert telemetry._env_flag("LOG_BUFFERED", True) is True


def test_span_collects_metadata_and_reraises() -> None:
    telemetry.configure(preset="quiet")

    with telemetry.span("tests::span", component=True, metadata={"n": 3}) as handle:
        handle.add_metadata("result", "borrowed")

    assert handle.component_name == "tests::span"
    assert handle.metadata == {"n": "3", "result": "borrowed"}

    with pytest.raises(RuntimeError):
        with telemetry.span("tests::failing", component="tests"):
            raise RuntimeError("boom")


def test_record_event_rejects_unknown_level() -> None:
    telemetry.configure(preset="quiet")

    with pytest.raises(ValueError):
        telemetry.record_event("tests.event", level="shout")
