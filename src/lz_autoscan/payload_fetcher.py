"""
Transaction page fetching for sender32/payload extraction.
"""

import logging

import httpx

from .config import ScanConfig
from .extractor import HexScrapeExtractor, PayloadExtractor
from .models import PayloadLookup

logger = logging.getLogger(__name__)


class PayloadFetcher:
    """Fetches a message's transaction page and runs it through an extractor."""

    def __init__(
        self,
        scan_config: ScanConfig,
        extractor: PayloadExtractor | None = None,
        transport: httpx.AsyncBaseTransport | None = None
    ) -> None:
        """
        Initialize the PayloadFetcher.

        Args:
            scan_config: Explorer settings
            extractor: Extraction strategy (defaults to HexScrapeExtractor)
            transport: Optional httpx transport (tests inject a MockTransport)
        """
        self.scan_config = scan_config
        self.extractor: PayloadExtractor = extractor or HexScrapeExtractor()
        self.transport = transport

    def page_url(self, tx_hash: str) -> str:
        return f"{self.scan_config.web_url}/tx/{tx_hash}"

    async def fetch_payload(self, tx_hash: str) -> PayloadLookup:
        """
        Fetch the transaction page and extract sender32/payload.

        Args:
            tx_hash: Source transaction hash of the message

        Returns:
            PayloadLookup; `payload` is None and `error` set on fetch failure
        """
        url = self.page_url(tx_hash)
        headers = {"User-Agent": self.scan_config.user_agent}

        try:
            async with httpx.AsyncClient(
                transport=self.transport,
                timeout=self.scan_config.request_timeout,
                follow_redirects=True
            ) as client:
                response = await client.get(url, headers=headers)
                response.raise_for_status()
                text = response.text
        except Exception as e:
            logger.error(f"Payload fetch error for {tx_hash}: {e}")
            return PayloadLookup(tx_hash=tx_hash, error=str(e) or type(e).__name__)

        logger.debug(f"Fetched {len(text)} chars from {url}")
        return PayloadLookup(tx_hash=tx_hash, payload=self.extractor.extract(text))
