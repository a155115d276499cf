"""Unit tests for sender32/payload extraction."""

import re

import pytest

from lz_autoscan.extractor import HexScrapeExtractor, PayloadExtractor, extract_hexes
from lz_autoscan.models import ExtractedPayload

SENDER = "0x" + "0" * 64
PAYLOAD = "0x" + "ab" * 100


class TestExtractHexes:
    """Test suite for extract_hexes."""

    def test_no_matches(self):
        """Text without hex candidates yields nothing."""
        result = extract_hexes("<html><body>Transaction not found</body></html>")

        assert result.sender32 is None
        assert result.payload is None
        assert not result.is_complete

    def test_empty_text(self):
        assert extract_hexes("") == ExtractedPayload()

    def test_single_sender_only(self):
        """Exactly one 66-char match and no longer match gives sender32 only."""
        result = extract_hexes(f'<span title="{SENDER}">sender</span>')

        assert result.sender32 == SENDER
        assert result.payload is None

    def test_sender_and_payload(self):
        html = f"""
        <div>Sender <code>{SENDER}</code></div>
        <div>Payload <pre>{PAYLOAD}</pre></div>
        """
        result = extract_hexes(html)

        assert result.sender32 == SENDER
        assert result.payload == PAYLOAD
        assert result.is_complete
        assert result.payload_size == 100

    def test_short_hex_ignored(self):
        """Addresses and other short hex values are not candidates."""
        text = "from 0x742d35Cc6634C0532925a3b844Bc9e7595f0bEb7 nonce 0x1f"
        assert extract_hexes(text) == ExtractedPayload()

    def test_odd_length_payload_skipped(self):
        """A candidate with a half byte is not a payload."""
        odd = "0x" + "f" * 65
        result = extract_hexes(f"{odd} {PAYLOAD}")

        assert result.sender32 is None
        assert result.payload == PAYLOAD

    def test_first_candidate_wins(self):
        other_sender = "0x" + "1" * 64
        other_payload = "0x" + "cd" * 40
        text = f"{SENDER} {PAYLOAD} {other_sender} {other_payload}"

        result = extract_hexes(text)

        assert result.sender32 == SENDER
        assert result.payload == PAYLOAD

    def test_duplicates_keep_first_seen_order(self):
        other_payload = "0x" + "cd" * 40
        text = f"{other_payload} {PAYLOAD} {other_payload} {SENDER}"

        result = extract_hexes(text)

        assert result.payload == other_payload
        assert result.sender32 == SENDER

    def test_hex_embedded_in_json_blob(self):
        """Hex inside inline JSON state is still found."""
        text = f'<script>{{"sender":"{SENDER}","message":"{PAYLOAD}"}}</script>'
        result = extract_hexes(text)

        assert result.sender32 == SENDER
        assert result.payload == PAYLOAD

    def test_mixed_case_hex(self):
        sender = "0x" + "aBcDeF12" * 8
        assert extract_hexes(sender).sender32 == sender

    @pytest.mark.parametrize("text", [
        "0x" + "a" * 63,
        "0x" + "a" * 64 + " 0x" + "b" * 67,
        "0x" + "c" * 66 + " 0x" + "d" * 64,
        "prefix0x" + "e" * 130 + "suffix",
        "0x" + "1" * 200 + " 0x" + "2" * 201,
    ])
    def test_result_shapes(self, text):
        """Whatever is found has the sender32/payload shape."""
        result = extract_hexes(text)

        if result.sender32 is not None:
            assert len(result.sender32) == 66
            assert re.fullmatch(r"0x[0-9a-fA-F]{64}", result.sender32)
        if result.payload is not None:
            assert len(result.payload) > 66
            assert len(result.payload) % 2 == 0


class TestHexScrapeExtractor:
    """The regex strategy behind the PayloadExtractor protocol."""

    def test_delegates_to_extract_hexes(self):
        extractor: PayloadExtractor = HexScrapeExtractor()
        result = extractor.extract(f"{SENDER}\n{PAYLOAD}")

        assert result == ExtractedPayload(sender32=SENDER, payload=PAYLOAD)
