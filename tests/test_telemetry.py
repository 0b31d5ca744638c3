from __future__ import annotations

import pytest

from linepad.runtime import telemetry


def test_configure_rejects_config_and_preset_together() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), preset="session")


def test_configure_rejects_unknown_preset() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(preset="verbose")


def test_get_logger_is_cached_per_name() -> None:
    assert telemetry.get_logger("linepad.test") is telemetry.get_logger("linepad.test")


def test_span_collects_metadata_and_reraises() -> None:
    with telemetry.span("test::ok", component="tests", metadata={"n": 3}) as handle:
        handle.add_metadata("extra", ["a"])
    assert handle.metadata == {"n": "3", "extra": "['a']"}
    assert handle.component_name == "tests"

    with pytest.raises(RuntimeError):
        with telemetry.span("test::boom"):
            raise RuntimeError("boom")
