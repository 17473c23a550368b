import logging
import os

from jira_rest_client.utils.logging import LOGGER_NAMES, setup_logging

__version__ = "0.3.0"

# Library loggers stay silent unless the host application configures logging
for _name in LOGGER_NAMES:
    logging.getLogger(_name).addHandler(logging.NullHandler())

# Opt-in console logging for ad-hoc debugging
if os.getenv("JIRA_CLIENT_VERBOSE", "").lower() in ("true", "1", "yes"):
    setup_logging(logging.DEBUG)

from jira_rest_client.exceptions import (  # noqa: E402
    JiraClientError,
    JiraDecodeError,
    JiraInvalidArgumentError,
    JiraReadError,
    JiraTransportError,
    JiraValidationError,
)
from jira_rest_client.jira import JiraClient, JiraConfig, JiraFetcher  # noqa: E402

__all__ = [
    "JiraClient",
    "JiraClientError",
    "JiraConfig",
    "JiraDecodeError",
    "JiraFetcher",
    "JiraInvalidArgumentError",
    "JiraReadError",
    "JiraTransportError",
    "JiraValidationError",
    "__version__",
]
