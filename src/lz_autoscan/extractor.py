"""
Payload extraction strategies.

The explorer does not expose sender32/payload through its JSON API, so the
only shipped strategy scrapes them out of the transaction page text.
"""

import re
from typing import Protocol

from .models import ExtractedPayload

HEX_CANDIDATE = re.compile(r"0x[0-9a-fA-F]{64,}")
SENDER32_LENGTH = 66  # 0x + 32 bytes


class PayloadExtractor(Protocol):
    """Turns a transaction page body into an ExtractedPayload."""

    def extract(self, text: str) -> ExtractedPayload:
        ...


def extract_hexes(text: str) -> ExtractedPayload:
    """
    Pick sender32 and payload out of unstructured text.

    Candidates are `0x` followed by at least 64 hex digits, deduplicated in
    first-seen order. sender32 is the first candidate of exactly 32 bytes;
    payload is the first longer candidate with a whole number of bytes.

    Args:
        text: Page body

    Returns:
        ExtractedPayload with either field set to None when not found
    """
    unique = list(dict.fromkeys(HEX_CANDIDATE.findall(text or "")))

    sender32 = next((h for h in unique if len(h) == SENDER32_LENGTH), None)
    payload = next(
        (h for h in unique if len(h) > SENDER32_LENGTH and len(h) % 2 == 0),
        None
    )

    return ExtractedPayload(sender32=sender32, payload=payload)


class HexScrapeExtractor:
    """PayloadExtractor backed by regex scraping of the page text."""

    def extract(self, text: str) -> ExtractedPayload:
        return extract_hexes(text)
