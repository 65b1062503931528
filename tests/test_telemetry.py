from __future__ import annotations

import pytest

from motion_engine.runtime import telemetry


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="development")


def test_get_logger_is_cached() -> None:
    telemetry.configure()

    assert telemetry.get_logger("motion_engine.test") is telemetry.get_logger(
        "motion_engine.test"
    )


def test_span_reraises_and_cleans_up() -> None:
    with pytest.raises(KeyError):
        with telemetry.span("test::span", metadata={"key": "value"}):
            raise KeyError("boom")


@pytest.mark.parametrize("preset", ["development", "production"])
def test_presets_configure_working_loggers(
    preset: str, tmp_path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("MOTION_ENGINE_LOG_FILE", str(tmp_path / "motion.log"))
    try:
        telemetry.configure(preset=preset)
        telemetry.record_event("test.preset", data={"preset": preset})
        with telemetry.span("test::preset", component=True):
            pass
    finally:
        telemetry.configure()


def test_preset_selected_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MOTION_ENGINE_PRESET", "bogus")

    with pytest.raises(ValueError, match="bogus"):
        telemetry.configure()

    monkeypatch.setenv("MOTION_ENGINE_PRESET", "development")
    try:
        telemetry.configure()
        telemetry.record_event("test.env_preset")
    finally:
        monkeypatch.delenv("MOTION_ENGINE_PRESET")
        telemetry.configure()
