"""Base client module for Jira API interactions."""

import json
import logging
from typing import Any, Literal

import requests
from requests import Session
from requests.auth import HTTPBasicAuth

from ..exceptions import JiraReadError, JiraTransportError
from ..models.jira.activity import JiraActivityFeed
from ..utils.date import JiraTimeCodec
from ..utils.logging import loggable_body
from ..utils.urls import join_url
from .config import JiraConfig
from .decoding import T, decode_json, decode_xml

# Configure logging
logger = logging.getLogger("jira-rest")

HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]


class JiraClient:
    """Base client for Jira API interactions.

    One client holds one ``requests.Session``. Each call performs a single
    request/response exchange and keeps no per-call state on the client, so
    a client may be shared across threads to the extent ``requests.Session``
    itself is safe to share.
    """

    config: JiraConfig
    session: Session
    time_codec: JiraTimeCodec

    def __init__(
        self, config: JiraConfig | None = None, session: Session | None = None
    ) -> None:
        """Initialize the Jira client with configuration options.

        Args:
            config: Optional configuration object (will use env vars if not provided)
            session: Optional pre-built session, e.g. with custom adapters

        Raises:
            ValueError: If configuration is invalid or required credentials are missing
        """
        # Load configuration from environment variables if not provided
        self.config = config or JiraConfig.from_env()

        self.session = session or Session()
        self.session.auth = HTTPBasicAuth(
            self.config.username or "", self.config.password or ""
        )
        self.session.verify = self.config.ssl_verify
        if proxies := self.config.proxies:
            self.session.proxies.update(proxies)
        if not self.config.ssl_verify:
            logger.warning(
                f"SSL verification disabled for Jira at {self.config.url}. This is insecure."
            )

        self.time_codec = JiraTimeCodec(self.config.time_layout)

        # Debug traces go to whatever handlers the application installed
        if self.config.debug:
            logger.setLevel(logging.DEBUG)

    def api_url(self, *parts: str | int) -> str:
        """URL under the REST API path."""
        return join_url(self.config.url, self.config.api_path, *parts)

    def greenhopper_url(self, *parts: str | int) -> str:
        """URL under the greenhopper (agile) API root."""
        return join_url(self.config.url, self.config.greenhopper_path, *parts)

    def execute(
        self,
        method: HttpMethod | str,
        url: str,
        body: dict[str, Any] | list[Any] | str | bytes | None = None,
    ) -> bytes:
        """
        Execute one authenticated request and return the raw response body.

        Non-2xx responses are not treated as errors: Jira reports failures in
        the JSON body, so the body is returned for the decoder to interpret.

        Args:
            method: HTTP method
            url: Absolute request URL
            body: Optional request body; dicts and lists are sent as JSON

        Returns:
            The complete response body

        Raises:
            JiraTransportError: If the request cannot be built or sent
            JiraReadError: If the response body cannot be read
        """
        headers = {"Accept": "application/json"}
        data: str | bytes | None = None
        if body is not None:
            headers["Content-Type"] = "application/json"
            try:
                data = json.dumps(body) if isinstance(body, dict | list) else body
            except (TypeError, ValueError) as e:
                logger.error(f"Cannot serialize request body for {method} {url}: {e}")
                raise JiraTransportError(
                    f"Cannot serialize request body for {method} {url}: {e}"
                ) from e

        if self.config.debug:
            logger.debug(f"{method} {url}")
            if data is not None:
                logger.debug(f"Request body: {loggable_body(data)}")

        try:
            response = self.session.request(
                method,
                url,
                data=data,
                headers=headers,
                timeout=self.config.timeout,
                stream=True,
            )
        except requests.RequestException as e:
            logger.error(f"Error sending {method} {url}: {str(e)}")
            raise JiraTransportError(f"Error sending {method} {url}: {e}") from e

        with response:
            try:
                contents = response.content
            except (requests.RequestException, OSError) as e:
                logger.error(f"Error reading response from {method} {url}: {str(e)}")
                raise JiraReadError(
                    f"Error reading response from {method} {url}: {e}"
                ) from e

        if not 200 <= response.status_code < 300:
            logger.warning(
                f"Jira returned HTTP {response.status_code} for {method} {url}"
            )
        if self.config.debug:
            logger.debug(
                f"Response {response.status_code}: {loggable_body(contents)}"
            )

        return contents

    def decode_json(self, raw: bytes, model: type[T] | None = None, **kwargs: Any) -> Any:
        """Decode a JSON body with this client's time codec."""
        kwargs.setdefault("time_codec", self.time_codec)
        return decode_json(raw, model, **kwargs)

    def decode_xml(self, raw: bytes) -> JiraActivityFeed:
        """Decode an Atom body into an activity feed."""
        return decode_xml(raw)

    def request_json(
        self,
        method: HttpMethod | str,
        url: str,
        model: type[T] | None = None,
        body: dict[str, Any] | list[Any] | str | bytes | None = None,
        **kwargs: Any,
    ) -> Any:
        """Execute a request and decode its JSON body into ``model``."""
        return self.decode_json(self.execute(method, url, body), model, **kwargs)
