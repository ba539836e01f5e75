"""Logging for the text engine, backed by telelog.

Engine code logs through :func:`record_event` and :func:`span` only. Hosts
(the Textual app, the test suite) pick the output once with
:func:`configure`; until they do, settings come from ``TEXT_ENGINE_*``
environment variables.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterator, List, Optional, Tuple, cast

import telelog  # type: ignore[import]

tl = cast(Any, telelog)

ENV_PREFIX = "TEXT_ENGINE_"
ROOT_LOGGER = "text_engine"
PRESETS = ("quiet", "development", "file")

_loggers: Dict[str, Any] = {}
_active_config: Optional[Any] = None


def env(name: str, default: Optional[str] = None) -> Optional[str]:
    """Read ``TEXT_ENGINE_<name>`` from the environment."""

    return os.getenv(f"{ENV_PREFIX}{name}", default)


@dataclass(frozen=True, slots=True)
class LogSettings:
    """Where engine log lines go and how much of them."""

    level: str = "INFO"
    console: bool = True
    log_file: str = ""

    @classmethod
    def from_env(cls) -> "LogSettings":
        console = (env("LOG_CONSOLE") or "on").lower()
        return cls(
            level=(env("LOG_LEVEL") or "INFO").upper(),
            console=console not in {"0", "false", "no", "off"},
            log_file=env("LOG_FILE") or "",
        )

    def to_config(self) -> Any:
        config = tl.Config()
        config.with_min_level(self.level)
        config.with_console_output(self.console)
        if self.console:
            config.with_colored_output("NO_COLOR" not in os.environ)
        if self.log_file:
            config.with_file_output(self.log_file)
        # span() relies on logger.profile timings
        config.with_profiling(True)
        return config


def preset_settings(
    preset: str, base: Optional[LogSettings] = None
) -> LogSettings:
    """Apply a named preset on top of ``base`` (the environment by default).

    ``quiet`` keeps the terminal clean for full-screen hosts and only logs
    errors, to ``TEXT_ENGINE_LOG_FILE`` when one is set. ``development``
    logs everything to the console. ``file`` sends INFO and above to the
    log file, ``text_engine.log`` unless the environment names another.
    """

    settings = base or LogSettings.from_env()
    key = preset.lower()
    if key == "quiet":
        return replace(settings, level="ERROR", console=False)
    if key == "development":
        return replace(settings, level="DEBUG", console=True)
    if key == "file":
        return replace(
            settings, console=False, log_file=settings.log_file or "text_engine.log"
        )
    raise ValueError(f"Unknown log preset '{preset}'; expected one of {PRESETS}.")


def configure(
    *, settings: Optional[LogSettings] = None, preset: Optional[str] = None
) -> LogSettings:
    """Replace the active telelog configuration and drop cached loggers."""

    global _active_config
    if settings is not None and preset is not None:
        raise ValueError("Pass either `settings` or `preset`, not both.")
    if preset is not None:
        settings = preset_settings(preset)
    elif settings is None:
        settings = LogSettings.from_env()

    _active_config = settings.to_config()
    _loggers.clear()
    return settings


def get_logger(name: Optional[str] = None) -> Any:
    global _active_config
    logger_name = name or ROOT_LOGGER
    if logger_name not in _loggers:
        if _active_config is None:
            _active_config = LogSettings.from_env().to_config()
        _loggers[logger_name] = tl.Logger.with_config(logger_name, _active_config)
    return _loggers[logger_name]


def _pairs(data: Dict[str, Any]) -> List[Tuple[str, str]]:
    return [(str(key), str(value)) for key, value in data.items()]


def _emit(log: Any, level: str, message: str, data: Dict[str, Any]) -> None:
    name = level.lower()
    structured = getattr(log, f"{name}_with", None)
    if structured is not None:
        structured(message, _pairs(data))
        return
    plain = getattr(log, name, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {data}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Log ``event::<name>`` with ``data`` attached as key/value pairs."""

    payload = {"event": name, **(data or {})}
    _emit(get_logger(logger_name), level, f"event::{name}", payload)


@dataclass(slots=True)
class SpanHandle:
    """Reports how a :func:`span` block ended."""

    logger: Any
    name: str
    fields: Dict[str, str] = field(default_factory=dict)

    def done(self, **extra: Any) -> None:
        payload = {"span": self.name, **self.fields, **extra}
        _emit(self.logger, "debug", "span::done", payload)

    def fail(self, reason: str) -> None:
        _emit(
            self.logger,
            "error",
            "span::fail",
            {"span": self.name, **self.fields, "reason": reason},
        )


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: Optional[str] = None,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Time a block with ``logger.profile`` and attach ``metadata`` as context.

    When ``component`` is given the block is also tracked under that name.
    An exception escaping the block is logged through ``SpanHandle.fail``
    and re-raised.
    """

    log = get_logger(logger_name)
    fields = {key: str(value) for key, value in (metadata or {}).items()}
    if component:
        fields["component"] = component

    with ExitStack() as stack:
        for key, value in fields.items():
            log.add_context(key, value)
            stack.callback(log.remove_context, key)
        if component:
            stack.enter_context(log.track_component(component))
        stack.enter_context(log.profile(name))

        handle = SpanHandle(logger=log, name=name, fields=fields)
        try:
            yield handle
        except Exception as exc:
            handle.fail(str(exc))
            raise


__all__ = [
    "ENV_PREFIX",
    "LogSettings",
    "PRESETS",
    "SpanHandle",
    "configure",
    "env",
    "get_logger",
    "preset_settings",
    "record_event",
    "span",
]
