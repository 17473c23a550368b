"""Logging utilities for the Jira REST client.

Provides the package-wide stream handler setup, plus helpers that keep
credentials and oversized payloads out of log lines.
"""

import logging

LOGGER_NAMES = ("jira-rest-client", "jira-rest")


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Configure client logging with a single stream handler.

    Meant for scripts and applications; importing the package never calls it
    unless JIRA_CLIENT_VERBOSE is set.

    Args:
        level: The minimum logging level to display (default: WARNING)

    Returns:
        The configured package logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to prevent duplication
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    formatter = logging.Formatter("%(levelname)s - %(name)s - %(message)s")
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    for logger_name in LOGGER_NAMES:
        logging.getLogger(logger_name).setLevel(level)

    return logging.getLogger("jira-rest-client")


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Masks sensitive strings for logging.

    Args:
        value: The string to mask
        keep_chars: Number of characters to keep visible at start and end

    Returns:
        Masked string with most characters replaced by asterisks
    """
    if not value:
        return "Not Provided"
    if len(value) <= keep_chars * 2:
        return "*" * len(value)
    return f"{value[:keep_chars]}{'*' * (len(value) - keep_chars * 2)}{value[-keep_chars:]}"


def log_config_param(
    logger: logging.Logger,
    param: str,
    value: str | None,
    sensitive: bool = False,
) -> None:
    """Logs a Jira configuration parameter, masking it if sensitive."""
    display_value = mask_sensitive(value) if sensitive else (value or "Not Provided")
    logger.info(f"Jira {param}: {display_value}")


def loggable_body(body: bytes | str | None, limit: int = 2000) -> str:
    """Render a request or response body for a log line.

    Bytes are decoded leniently and anything past ``limit`` is cut off, so a
    large or binary payload never floods the log.
    """
    if not body:
        return "<empty>"
    text = (
        body[:limit].decode("utf-8", errors="replace")
        if isinstance(body, bytes)
        else body[:limit]
    )
    if len(body) > limit:
        text += f"... [{len(body) - limit} more]"
    return text
