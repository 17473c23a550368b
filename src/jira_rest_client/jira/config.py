"""Configuration module for Jira API interactions."""

import logging
import os
from dataclasses import dataclass

from ..models.constants import CUSTOM_FIELD_PREFIX
from ..utils.date import JIRA_TIME_LAYOUT
from ..utils.logging import log_config_param

logger = logging.getLogger("jira-rest-client")

DEFAULT_API_PATH = "/rest/api/latest"
DEFAULT_ACTIVITY_PATH = "/activity"
DEFAULT_GREENHOPPER_PATH = "/rest/greenhopper/latest"
DEFAULT_TIMESHEET_PATH = "/rest/timesheet-gadget/1.0"

# Seconds; None disables the timeout.
DEFAULT_TIMEOUT = 75.0


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("true", "1", "yes")


@dataclass(frozen=True)
class JiraConfig:
    """Jira API configuration.

    Created once and shared by every call; it is never mutated after
    construction. Authentication is HTTP Basic with ``username``/``password``
    (an API token works as the password on Jira Cloud).
    """

    url: str  # Base URL for Jira
    username: str | None = None
    password: str | None = None
    api_path: str = DEFAULT_API_PATH
    activity_path: str = DEFAULT_ACTIVITY_PATH
    greenhopper_path: str = DEFAULT_GREENHOPPER_PATH  # Alternate API root for agile calls
    timesheet_path: str = DEFAULT_TIMESHEET_PATH
    debug: bool = False  # Log URLs and bodies at DEBUG level
    timeout: float | None = DEFAULT_TIMEOUT
    ssl_verify: bool = True
    http_proxy: str | None = None
    https_proxy: str | None = None
    no_proxy: str | None = None
    time_layout: str = JIRA_TIME_LAYOUT
    custom_field_prefix: str = CUSTOM_FIELD_PREFIX

    @classmethod
    def from_env(cls) -> "JiraConfig":
        """Create configuration from environment variables.

        Returns:
            JiraConfig with values from environment variables

        Raises:
            ValueError: If required environment variables are missing or invalid
        """
        url = os.getenv("JIRA_URL")
        if not url:
            error_msg = "Missing required JIRA_URL environment variable"
            raise ValueError(error_msg)

        username = os.getenv("JIRA_USERNAME")
        password = os.getenv("JIRA_PASSWORD") or os.getenv("JIRA_API_TOKEN")
        if not username or not password:
            error_msg = "Basic authentication requires JIRA_USERNAME and JIRA_PASSWORD (or JIRA_API_TOKEN)"
            raise ValueError(error_msg)

        timeout_env = os.getenv("JIRA_TIMEOUT")
        timeout: float | None = DEFAULT_TIMEOUT
        if timeout_env is not None:
            if timeout_env.lower() in ("none", "0", ""):
                timeout = None
            else:
                try:
                    timeout = float(timeout_env)
                except ValueError as e:
                    error_msg = f"Invalid JIRA_TIMEOUT value: {timeout_env}"
                    raise ValueError(error_msg) from e

        config = cls(
            url=url,
            username=username,
            password=password,
            api_path=os.getenv("JIRA_API_PATH", DEFAULT_API_PATH),
            activity_path=os.getenv("JIRA_ACTIVITY_PATH", DEFAULT_ACTIVITY_PATH),
            greenhopper_path=os.getenv(
                "JIRA_GREENHOPPER_PATH", DEFAULT_GREENHOPPER_PATH
            ),
            timesheet_path=os.getenv("JIRA_TIMESHEET_PATH", DEFAULT_TIMESHEET_PATH),
            debug=_env_flag("JIRA_DEBUG", "false"),
            timeout=timeout,
            ssl_verify=os.getenv("JIRA_SSL_VERIFY", "true").lower()
            not in ("false", "0", "no"),
            http_proxy=os.getenv("JIRA_HTTP_PROXY", os.getenv("HTTP_PROXY")),
            https_proxy=os.getenv("JIRA_HTTPS_PROXY", os.getenv("HTTPS_PROXY")),
            no_proxy=os.getenv("JIRA_NO_PROXY", os.getenv("NO_PROXY")),
        )

        log_config_param(logger, "URL", config.url)
        log_config_param(logger, "username", config.username)
        log_config_param(logger, "password", config.password, sensitive=True)
        return config

    def is_auth_configured(self) -> bool:
        """Check if Basic credentials are present.

        Returns:
            bool: True if both username and password are set, False otherwise.
        """
        return bool(self.username and self.password)

    @property
    def proxies(self) -> dict[str, str]:
        """Proxy mapping in the shape ``requests`` expects."""
        proxies = {}
        if self.http_proxy:
            proxies["http"] = self.http_proxy
        if self.https_proxy:
            proxies["https"] = self.https_proxy
        if self.no_proxy:
            proxies["no_proxy"] = self.no_proxy
        return proxies
