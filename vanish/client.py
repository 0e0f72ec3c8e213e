"""
Vanish Email API client.

This module handles all communication with the Vanish temporary-email
service:
1. Generate disposable addresses and list available domains
2. List, fetch and delete received emails
3. Download attachments as raw bytes
4. Poll a mailbox until a new email arrives

Every call is a single request/response round trip with no retries.
Failures of any kind surface as VanishError.
"""
import asyncio
from asyncio import sleep
from time import monotonic
from typing import Any, Dict, List, Optional, Union
from urllib.parse import quote

import httpx

from vanish.config import ClientConfig, get_config
from vanish.models.email import AttachmentContent, EmailDetail, EmailSummary, PaginatedEmailList
from vanish.models.options import GenerateEmailOptions, ListEmailsOptions
from vanish.utils.errors import ErrorKind, RequestTimeoutError, VanishError
from vanish.utils.logger import get_logger

logger = get_logger(__name__)

QueryParams = Dict[str, Optional[Union[str, int]]]


class VanishClient:
    """
    Client for the Vanish Email API.

    Usage:
        client = VanishClient("https://api.vanish.host", api_key="your-key")
        email = await client.generate_email()
        emails = await client.list_emails(email)
        detail = await client.get_email(emails.data[0].id)
    """

    def __init__(
        self,
        base_url: str,
        config: Optional[ClientConfig] = None,
        *,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: API root, e.g. "https://api.vanish.host" (one trailing
                slash is stripped)
            config: Connection settings; defaults to get_config()
            api_key: Overrides config.api_key
            timeout: Overrides config.timeout (seconds)
            transport: Optional httpx transport, mainly for tests
        """
        if not base_url:
            raise ValueError("base_url is required")

        self.base_url = base_url[:-1] if base_url.endswith("/") else base_url
        self.config = (config or get_config()).merged(api_key=api_key, timeout=timeout)
        self.transport = transport

    @property
    def timeout(self) -> float:
        return self.config.timeout

    def _build_headers(self) -> Dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.config.api_key:
            headers["Authorization"] = f"Bearer {self.config.api_key}"
        return headers

    @staticmethod
    def _filter_params(params: Optional[QueryParams]) -> Optional[Dict[str, Union[str, int]]]:
        """Drop unset (None) params; falsy values like 0 and "" are kept."""
        if not params:
            return None
        filtered = {key: value for key, value in params.items() if value is not None}
        return filtered or None

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Pick the server's {"error": ...} message, else the reason phrase."""
        try:
            body = response.json()
        except ValueError:
            body = None

        error = body.get("error") if isinstance(body, dict) else None
        if error:
            return str(error)
        return response.reason_phrase or f"HTTP {response.status_code}"

    async def _send(
        self,
        method: str,
        url: str,
        params: Optional[Dict[str, Union[str, int]]],
        json_data: Any,
    ) -> httpx.Response:
        async with httpx.AsyncClient(transport=self.transport, timeout=self.config.timeout) as client:
            return await client.request(
                method=method,
                url=url,
                headers=self._build_headers(),
                params=params,
                json=json_data,
            )

    async def _request(
        self,
        method: str,
        path: str,
        params: Optional[QueryParams] = None,
        json_data: Any = None,
        raw_response: bool = False,
    ) -> Any:
        """
        Make a request to the Vanish API.

        Args:
            method: HTTP method (GET, POST, DELETE)
            path: Endpoint path relative to the base URL
            params: Query parameters; None values are omitted
            json_data: JSON request body, omitted when None
            raw_response: Return AttachmentContent instead of parsed JSON

        Returns:
            Parsed JSON, or AttachmentContent when raw_response is set

        Raises:
            VanishError: kind SERVER for non-2xx responses, TIMEOUT when the
                configured timeout is exceeded, TRANSPORT for anything else
        """
        url = f"{self.base_url}{path}"
        query = self._filter_params(params)

        try:
            response = await asyncio.wait_for(
                self._send(method, url, query, json_data),
                timeout=self.config.timeout,
            )
            logger.debug(f"{method} {path} -> {response.status_code}")

            if not response.is_success:
                message = self._error_message(response)
                logger.warning(f"Vanish API error: {method} {path} {response.status_code} - {message}")
                raise VanishError(message, response.status_code, kind=ErrorKind.SERVER)

            if raw_response:
                return AttachmentContent(data=response.content, headers=response.headers)

            return response.json()

        except VanishError:
            raise
        except (asyncio.TimeoutError, httpx.TimeoutException) as e:
            logger.warning(f"Vanish API: {method} {path} timed out after {self.config.timeout}s")
            raise RequestTimeoutError() from e
        except Exception as e:
            logger.warning(f"Vanish API: {method} {path} failed - {e}")
            raise VanishError(f"Request failed: {e}", kind=ErrorKind.TRANSPORT) from e

    async def get_domains(self) -> List[str]:
        """Get list of available email domains."""
        response = await self._request("GET", "/domains")
        return response["domains"]

    async def generate_email(
        self,
        options: Optional[GenerateEmailOptions] = None,
        *,
        domain: Optional[str] = None,
        prefix: Optional[str] = None,
    ) -> str:
        """
        Generate a unique temporary email address.

        The request body is omitted entirely when neither domain nor
        prefix is given.

        Args:
            options: GenerateEmailOptions; takes precedence over keywords
            domain: Domain to create the address on
            prefix: Prefix for the local part

        Returns:
            The new address
        """
        if options is None:
            options = GenerateEmailOptions(domain=domain, prefix=prefix)

        response = await self._request("POST", "/mailbox", json_data=options.to_body())
        email = response["email"]
        logger.info(f"Generated mailbox: {email}")
        return email

    async def list_emails(
        self,
        address: str,
        options: Optional[ListEmailsOptions] = None,
        *,
        limit: Optional[int] = None,
        cursor: Optional[str] = None,
    ) -> PaginatedEmailList:
        """
        List emails for a mailbox address.

        Args:
            address: Mailbox address
            options: ListEmailsOptions; takes precedence over keywords
            limit: Page size
            cursor: Opaque cursor from a previous page's next_cursor

        Returns:
            PaginatedEmailList with received_at parsed to datetime
        """
        if options is None:
            options = ListEmailsOptions(limit=limit, cursor=cursor)

        response = await self._request(
            "GET",
            f"/mailbox/{quote(address, safe='')}",
            params=options.to_params(),
        )
        return PaginatedEmailList.model_validate(response)

    async def get_email(self, email_id: str) -> EmailDetail:
        """Get full details of a specific email."""
        response = await self._request("GET", f"/email/{email_id}")
        return EmailDetail.model_validate(response)

    async def get_attachment(self, email_id: str, attachment_id: str) -> AttachmentContent:
        """Download an attachment and return its content with headers."""
        return await self._request(
            "GET",
            f"/email/{email_id}/attachments/{attachment_id}",
            raw_response=True,
        )

    async def delete_email(self, email_id: str) -> bool:
        """Delete a specific email."""
        response = await self._request("DELETE", f"/email/{email_id}")
        success = response["success"]
        logger.info(f"Deleted email {email_id}: {success}")
        return success

    async def delete_mailbox(self, address: str) -> int:
        """
        Delete all emails in a mailbox.

        Returns:
            Number of deleted emails
        """
        response = await self._request("DELETE", f"/mailbox/{quote(address, safe='')}")
        deleted = response["deleted"]
        logger.info(f"Deleted {deleted} emails from {address}")
        return deleted

    async def poll_for_emails(
        self,
        address: str,
        timeout: float = 60.0,
        interval: float = 5.0,
        initial_count: int = 0,
    ) -> Optional[EmailSummary]:
        """
        Poll a mailbox until a new email arrives or the timeout passes.

        Checks the newest email every ``interval`` seconds. The last sleep
        is cut short at the deadline, so at most ceil(timeout / interval)
        checks are made. Errors from list_emails are raised immediately.

        Args:
            address: Mailbox address to poll
            timeout: Maximum time to wait in seconds
            interval: Seconds between checks
            initial_count: Email count already seen; only a higher total
                counts as new

        Returns:
            The newest EmailSummary, or None if nothing arrived in time
        """
        if interval <= 0:
            raise ValueError("interval must be positive")

        logger.info(f"Waiting for email at {address} (timeout: {timeout}s)")
        deadline = monotonic() + timeout

        while monotonic() < deadline:
            result = await self.list_emails(address, limit=1)
            if result.total > initial_count and result.data:
                logger.info(f"New email received at {address}: {result.data[0].id}")
                return result.data[0]

            remaining = deadline - monotonic()
            if remaining <= 0:
                break
            await sleep(min(interval, remaining))

        logger.info(f"Timeout - no new email at {address}")
        return None


def create_client(
    base_url: str,
    config: Optional[ClientConfig] = None,
    **options: Any,
) -> VanishClient:
    """Convenience function for quick client creation."""
    return VanishClient(base_url, config, **options)
