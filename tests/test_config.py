from __future__ import annotations

import pytest

from text_engine.runtime import EngineConfig


def test_defaults() -> None:
    config = EngineConfig()

    assert config.text_suffix == ".txt"
    assert config.encoding == "utf-8"


def test_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TEXT_ENGINE_TEXT_SUFFIX", ".md")
    monkeypatch.setenv("TEXT_ENGINE_ENCODING", "latin-1")

    config = EngineConfig.from_env()

    assert config.text_suffix == ".md"
    assert config.encoding == "latin-1"


def test_from_env_falls_back_to_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TEXT_ENGINE_TEXT_SUFFIX", raising=False)
    monkeypatch.delenv("TEXT_ENGINE_ENCODING", raising=False)

    assert EngineConfig.from_env() == EngineConfig()


def test_empty_suffix_rejected() -> None:
    with pytest.raises(ValueError):
        EngineConfig(text_suffix="")


def test_with_overrides_returns_new_config() -> None:
    base = EngineConfig()

    updated = base.with_overrides(text_suffix=".log")

    assert updated.text_suffix == ".log"
    assert base.text_suffix == ".txt"
