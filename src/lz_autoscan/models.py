"""
Shared data models for the LayerZero autoscan worker.

This module contains the immutable values passed between the worker
components. Fail-soft operations return one of the result types below
instead of raising, so the poll loop can log and move on.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ExecutionStatus(str, Enum):
    """Executor status reported by LayerZero Scan."""
    WAITING = "WAITING"
    OTHER = "OTHER"

    @classmethod
    def from_raw(cls, value: Any) -> "ExecutionStatus":
        return cls.WAITING if value == cls.WAITING.value else cls.OTHER


@dataclass(frozen=True, slots=True)
class Message:
    """A cross-chain message listed by the explorer.

    Attributes:
        src_tx_hash: Hash of the source-chain transaction that sent the message
        execution_status: WAITING or OTHER
        raw_status: Status string exactly as the explorer reported it
    """
    src_tx_hash: str
    execution_status: ExecutionStatus
    raw_status: str | None = None

    @classmethod
    def from_api(cls, record: Mapping[str, Any]) -> "Message":
        """Build a Message from one entry of the `messages` array.

        A missing `executorResult` or `status` means the message is not
        waiting for execution.
        """
        executor_result = record.get("executorResult") or {}
        raw_status = executor_result.get("status") if isinstance(executor_result, Mapping) else None

        return cls(
            src_tx_hash=str(record.get("srcTxHash", "")),
            execution_status=ExecutionStatus.from_raw(raw_status),
            raw_status=None if raw_status is None else str(raw_status),
        )

    @property
    def is_waiting(self) -> bool:
        return self.execution_status is ExecutionStatus.WAITING


@dataclass(frozen=True, slots=True)
class ExtractedPayload:
    """sender32 and payload scraped from a transaction page.

    Either value may be None; that is a normal "extraction failed" outcome.
    """
    sender32: str | None = None
    payload: str | None = None

    @property
    def is_complete(self) -> bool:
        return bool(self.sender32) and bool(self.payload)

    @property
    def payload_size(self) -> int:
        """Payload length in bytes (0x prefix excluded)."""
        if not self.payload:
            return 0
        return (len(self.payload) - 2) // 2


@dataclass(frozen=True, slots=True)
class MessageListing:
    """Result of one explorer listing request."""
    messages: tuple[Message, ...] = ()
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def __len__(self) -> int:
        return len(self.messages)


@dataclass(frozen=True, slots=True)
class PayloadLookup:
    """Result of fetching and scraping one transaction page."""
    tx_hash: str
    payload: ExtractedPayload | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.payload is not None


@dataclass(frozen=True, slots=True)
class ExecutionResult:
    """Outcome of one lzReceive submission.

    Attributes:
        tx_hash: Hash of the broadcast transaction, None if broadcast failed
        block_number: Block the transaction was mined in, if confirmed
        error: Failure description, None on success
    """
    tx_hash: str | None = None
    block_number: int | None = None
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None and self.block_number is not None


@dataclass(frozen=True, slots=True)
class CycleReport:
    """Summary of a single poll cycle."""
    messages_found: int = 0
    pending: int = 0
    executed: int = 0
    skipped: int = 0
    failed: int = 0
    listing_error: str | None = None

    def __str__(self) -> str:
        return (
            f"CycleReport(found={self.messages_found}, pending={self.pending}, "
            f"executed={self.executed}, skipped={self.skipped}, failed={self.failed})"
        )
