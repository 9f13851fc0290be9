"""structlog setup for command line use."""

import logging

import structlog


def configure_logging(level: str = "INFO") -> None:
    """Drop log events below ``level`` (a stdlib level name such as ``"WARNING"``)."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")

    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(numeric),
    )
