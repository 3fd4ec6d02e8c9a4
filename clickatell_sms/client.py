"""
Clickatell HTTP Client
======================
Sends SMS messages through the Clickatell HTTP API.

Usage:
    async with ClickatellClient(ClickatellConfig()) as client:
        await client.authenticate()
        message_id = await client.send("33612345678", "Bonjour à tous")
"""

import re
from typing import Optional, Dict, Any
from urllib.parse import urlencode

import httpx
import structlog
from tenacity import (
    AsyncRetrying,
    RetryCallState,
    retry_if_exception,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from .config import ClickatellConfig
from .exceptions import (
    ClickatellError,
    AuthenticationError,
    GatewayResponseError,
    InvalidNumberError,
    ServiceUnavailableError,
    ServiceTimeoutError,
)
from .messaging import MessageEncoder

logger = structlog.get_logger(__name__)

AUTH_PATH = "/http/auth"
SENDMSG_PATH = "/http/sendmsg"

_AUTH_RESPONSE = re.compile(r"^OK: (\S+)")
_SENDMSG_RESPONSE = re.compile(r"^ID: (\S+)")
_PHONE_NUMBER = re.compile(r"[0-9]+")

# Failures raised before the request was written to the gateway
_NOT_SENT_ERRORS = (httpx.ConnectError, httpx.ConnectTimeout, httpx.PoolTimeout)


def _request_not_sent(exc: BaseException) -> bool:
    return isinstance(exc, ServiceUnavailableError) and isinstance(exc.__cause__, _NOT_SENT_ERRORS)


def _log_retry(retry_state: RetryCallState) -> None:
    logger.warning(
        "Retrying Clickatell request",
        attempt=retry_state.attempt_number,
        error=str(retry_state.outcome.exception()),
    )


class ClickatellClient:
    """
    Client for the Clickatell HTTP API.

    Features:
    - Session authentication
    - Narrow charset or unicode mode chosen per message
    - Retries with exponential backoff; sends are only retried when the
      connection was never established
    """

    def __init__(
        self,
        config: Optional[ClickatellConfig] = None,
        encoder: Optional[MessageEncoder] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.config = config or ClickatellConfig()
        self.encoder = encoder or MessageEncoder()
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None
        self._session_id: Optional[str] = None

    async def __aenter__(self):
        await self._get_client()
        return self

    async def __aexit__(self, *args):
        await self.close()

    @property
    def session_id(self) -> Optional[str]:
        return self._session_id

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.config.base_url.rstrip("/"),
                timeout=self.config.timeout,
                headers={"Content-Type": "application/x-www-form-urlencoded"},
                transport=self._transport,
            )
        return self._client

    async def close(self):
        if self._client:
            await self._client.aclose()
            self._client = None

    def _map_exception(self, exc: httpx.HTTPError) -> ClickatellError:
        """Map httpx exceptions to client exceptions."""
        if isinstance(exc, httpx.TimeoutException):
            return ServiceTimeoutError("Request timed out")
        if isinstance(exc, httpx.HTTPStatusError):
            status = exc.response.status_code
            text = exc.response.text
            if status >= 500:
                return ServiceUnavailableError("Server error", status_code=status, details=text)
            return GatewayResponseError(f"HTTP {status} Error", status_code=status, details=text)
        if isinstance(exc, httpx.TransportError):
            return ServiceUnavailableError(f"Failed to connect: {exc}")

        return ClickatellError(f"The HTTP request failed: {exc}")

    async def _request(self, path: str, body: bytes) -> str:
        client = await self._get_client()
        try:
            response = await client.post(path, content=body)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise self._map_exception(e) from e
        return response.text

    async def _post(
        self,
        path: str,
        parameters: Dict[str, Any],
        idempotent: bool = True,
    ) -> str:
        """
        POST form parameters and return the response body.

        The body is urlencoded here rather than by httpx so that bytes values
        are percent-encoded byte for byte.

        Non-idempotent requests are only retried when the connection was never
        established, since a read failure may follow an accepted request.
        """
        body = urlencode(parameters).encode("ascii")

        if idempotent:
            retry = retry_if_exception_type(ServiceUnavailableError)
        else:
            retry = retry_if_exception(_request_not_sent)

        async for attempt in AsyncRetrying(
            retry=retry,
            stop=stop_after_attempt(self.config.retry_attempts),
            wait=wait_exponential(
                multiplier=self.config.retry_min_wait,
                min=self.config.retry_min_wait,
                max=self.config.retry_max_wait,
            ),
            before_sleep=_log_retry,
            reraise=True,
        ):
            with attempt:
                return await self._request(path, body)

    async def authenticate(self) -> str:
        """
        Open a session on the gateway.

        Needed once before any number of ``send()`` calls. Call it again after
        any long pause, since sessions expire (e.g. between batch job runs).

        Returns:
            The session id

        Raises:
            AuthenticationError: If the gateway does not return a session id
        """
        response = await self._post(AUTH_PATH, {
            "api_id": self.config.api_id,
            "user": self.config.username,
            "password": self.config.password,
        })

        match = _AUTH_RESPONSE.match(response)
        if match is None:
            self._session_id = None
            logger.error("Clickatell authentication failed", response=response)
            raise AuthenticationError(f"Invalid auth response: {response}", details=response)

        self._session_id = match.group(1)
        logger.info("Clickatell session established")
        return self._session_id

    async def send(
        self,
        number: str,
        message: str,
        sender: Optional[str] = None,
    ) -> str:
        """
        Send an SMS.

        Args:
            number: Phone number in international format, without the leading +
            message: Message text, as str or UTF-8 bytes
            sender: Sender ID, or None to use the configured default

        Returns:
            The gateway message ID

        Raises:
            InvalidNumberError: If the number is not digits only
            InvalidEncodingError: If the message is not well-formed Unicode
            AuthenticationError: If ``authenticate()`` was not called first
            GatewayResponseError: If the gateway rejects the message
        """
        if not isinstance(number, str) or not _PHONE_NUMBER.fullmatch(number):
            raise InvalidNumberError("Invalid phone number.")

        encoded = self.encoder.encode(message)

        if self._session_id is None:
            raise AuthenticationError("You need to authenticate() before send()ing a message.")

        parameters: Dict[str, Any] = {
            "session_id": self._session_id,
            "to": number,
            "concat": self.config.max_concat,
        }

        if sender is None:
            sender = self.config.default_sender_id

        if sender is not None:
            parameters["from"] = sender

        parameters["unicode"] = encoded.unicode_flag
        parameters["text"] = encoded.data

        response = await self._post(SENDMSG_PATH, parameters, idempotent=False)

        match = _SENDMSG_RESPONSE.match(response)
        if match is None:
            logger.error("Clickatell send failed", to=number, response=response)
            raise GatewayResponseError(f"Invalid sendmsg response: {response}", details=response)

        message_id = match.group(1)
        logger.info(
            "SMS sent",
            to=number,
            unicode=encoded.is_wide,
            message_id=message_id,
        )
        return message_id
