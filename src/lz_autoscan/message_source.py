"""
Message discovery through the LayerZero Scan API.
"""

import logging

import httpx

from .config import ScanConfig
from .models import Message, MessageListing

logger = logging.getLogger(__name__)


class MessageSource:
    """Lists the most recent cross-chain messages sent by an address."""

    def __init__(self, scan_config: ScanConfig, transport: httpx.AsyncBaseTransport | None = None) -> None:
        """
        Initialize the MessageSource.

        Args:
            scan_config: Explorer settings
            transport: Optional httpx transport (tests inject a MockTransport)
        """
        self.scan_config = scan_config
        self.transport = transport

    def listing_url(self, owner: str) -> str:
        return (
            f"{self.scan_config.api_url}/messages"
            f"?address={owner}&page=1&limit={self.scan_config.page_limit}"
        )

    async def fetch_messages(self, owner: str) -> MessageListing:
        """
        Fetch the first page of messages for an owner address.

        Never raises: network, HTTP and decoding failures are logged and
        returned as an empty listing carrying the error.

        Args:
            owner: Wallet address whose messages are listed

        Returns:
            MessageListing in the order the explorer returned them
        """
        url = self.listing_url(owner)
        logger.info(f"Fetching messages: {url}")

        try:
            async with httpx.AsyncClient(
                transport=self.transport,
                timeout=self.scan_config.request_timeout
            ) as client:
                response = await client.get(url)
                response.raise_for_status()
                body = response.json()
        except Exception as e:
            logger.error(f"API error: {e}")
            return MessageListing(error=str(e) or type(e).__name__)

        match body:
            case {"messages": list() as records}:
                pass
            case _:
                logger.debug("Listing response has no messages array")
                return MessageListing()

        messages = tuple(
            Message.from_api(record)
            for record in records
            if isinstance(record, dict)
        )
        return MessageListing(messages=messages)
