"""Server-to-Server OAuth token acquisition for the Zoom API."""

import base64
import logging
from typing import Any

import requests

from .config import TOKEN_URL
from .credentials import Credentials
from .exceptions import (
    AuthenticationError,
    NetworkError,
    ResponseParseError,
    ZoomAPIError,
)

logger = logging.getLogger(__name__)

GRANT_TYPE = "account_credentials"


def basic_auth_header(credentials: Credentials) -> str:
    """Build the HTTP Basic authorization value for the token request."""
    pair = f"{credentials.client_id}:{credentials.client_secret}".encode("utf-8")
    return "Basic " + base64.b64encode(pair).decode("ascii")


def fetch_access_token(
    credentials: Credentials,
    *,
    session: Any = None,
    token_url: str = TOKEN_URL,
    timeout: float | None = None,
) -> str:
    """Exchange the account credentials for a short-lived bearer token.

    Args:
        credentials: Loaded account and app credentials.
        session: Object with a requests-compatible ``post`` method. Defaults
            to the ``requests`` module itself.
        token_url: OAuth token endpoint.
        timeout: Request timeout in seconds, None for no timeout.

    Returns:
        The access token.

    Raises:
        NetworkError: If the request cannot be sent.
        ZoomAPIError: If the endpoint answers with a non-2xx status.
        ResponseParseError: If the body is not a JSON object.
        AuthenticationError: If the access token is missing or empty.
    """
    http = session if session is not None else requests
    headers = {
        "Authorization": basic_auth_header(credentials),
        "Content-Type": "application/x-www-form-urlencoded",
    }
    data = {"grant_type": GRANT_TYPE, "account_id": credentials.account_id}

    logger.info(f"Requesting OAuth token for account {credentials.account_id}")
    try:
        with http.post(token_url, data=data, headers=headers, timeout=timeout) as resp:
            if not resp.ok:
                raise ZoomAPIError(
                    f"Token request failed with HTTP {resp.status_code}: {resp.text[:200]}",
                    status_code=resp.status_code,
                )
            try:
                payload = resp.json()
            except ValueError as e:
                raise ResponseParseError(f"Error decoding OAuth response: {e}", cause=e)
    except requests.RequestException as e:
        raise NetworkError(f"Error retrieving OAuth token: {e}", cause=e)

    if not isinstance(payload, dict):
        raise ResponseParseError("Error decoding OAuth response: expected a JSON object")

    token = payload.get("access_token")
    if not token or not isinstance(token, str):
        raise AuthenticationError()

    logger.debug(f"OAuth token obtained: {token[:6]}...")
    return token


class TokenFetcher:
    """Token provider bound to one set of credentials.

    Every call performs a fresh token request; nothing is cached.
    """

    def __init__(
        self,
        credentials: Credentials,
        session: Any = None,
        token_url: str = TOKEN_URL,
        timeout: float | None = None,
    ):
        self._credentials = credentials
        self._session = session
        self._token_url = token_url
        self._timeout = timeout

    def __call__(self) -> str:
        return fetch_access_token(
            self._credentials,
            session=self._session,
            token_url=self._token_url,
            timeout=self._timeout,
        )
