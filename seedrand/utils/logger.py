"""
Logger utility.

Responsibility boundaries:
- Handles structured event logging for seeding and generator lifecycle.
- Never installs handlers on import; applications call configure_logging().
"""

import logging
from typing import Any, Dict, Optional

from seedrand.config.config import DEFAULT_CONFIG, GeneratorConfig

ROOT_LOGGER_NAME = "seedrand"

_EVENT_LEVELS = {
    "seed_set": logging.INFO,
    "generator_started": logging.INFO,
    "generator_stopped": logging.INFO,
    "draw_rejected": logging.DEBUG,
}


class AuditLogger:
    """
    A centralized logger for audit and replay purposes.
    """

    def __init__(self, component: str) -> None:
        self.component = component
        self._logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{component}")

    def is_enabled_for(self, event_type: str) -> bool:
        return self._logger.isEnabledFor(_EVENT_LEVELS.get(event_type, logging.INFO))

    def log_event(self, event_type: str, data: Dict[str, Any]) -> None:
        """
        Log a specific event.

        Args:
            event_type: The category of the event.
            data: The event payload.
        """
        if not self.is_enabled_for(event_type):
            return
        payload = " ".join(f"{key}={value!r}" for key, value in sorted(data.items()))
        self._logger.log(
            _EVENT_LEVELS.get(event_type, logging.INFO),
            f"[{event_type}] {payload}",
            extra={"event_type": event_type, "event_data": dict(data)},
        )


def configure_logging(level: Optional[str] = None, config: Optional[GeneratorConfig] = None) -> logging.Logger:
    """
    Attach a stream handler to the package logger.

    Args:
        level: Level name; takes precedence over `config`.
        config: Source of log_level, e.g. GeneratorConfig.from_env();
            DEFAULT_CONFIG when omitted.

    Returns:
        The configured package logger.
    """
    if level is None:
        level = (config if config is not None else DEFAULT_CONFIG).log_level

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level.upper())
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(asctime)s %(name)s %(levelname)s %(message)s"))
        logger.addHandler(handler)
    return logger
