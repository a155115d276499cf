"""Configuration management for the LayerZero autoscan worker.

This module provides type-safe configuration dataclasses with validation.
Configuration is loaded once from environment variables and handed to each
component at construction time.
"""

import logging
import os
from dataclasses import dataclass, field
from typing import ClassVar
from urllib.parse import urlparse

from web3 import Web3

logger = logging.getLogger(__name__)

DEFAULT_SCAN_API_URL = "https://api.testnet.layerzeroscan.com"
DEFAULT_SCAN_WEB_URL = "https://testnet.layerzeroscan.com"
DEFAULT_DST_EID = 40374
DEFAULT_POLL_INTERVAL_MS = 60000
DEFAULT_GAS_LIMIT = 1_000_000


def _checksum(address: str, label: str, env_name: str) -> str:
    if not address:
        raise ValueError(f"{label} is required ({env_name})")
    if not Web3.is_address(address):
        raise ValueError(f"Invalid {label.lower()}: {address}")
    return Web3.to_checksum_address(address)


def _check_url(url: str, label: str, env_name: str, schemes: tuple[str, ...]) -> None:
    if not url:
        raise ValueError(f"{label} is required ({env_name})")
    parsed = urlparse(url)
    if parsed.scheme not in schemes:
        raise ValueError(
            f"Invalid {label} scheme: {parsed.scheme}. "
            f"Expected {', '.join(schemes)}"
        )


def _int_env(name: str, default: int) -> int:
    raw = os.environ.get(name, "").strip()
    if not raw:
        return default
    try:
        return int(raw, 10)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Settings for the LayerZero Scan explorer.

    Attributes:
        api_url: Base URL of the JSON API (message listing)
        web_url: Base URL of the human-readable site (transaction pages)
        page_limit: Number of most recent messages requested per poll
        request_timeout: HTTP timeout in seconds
        user_agent: User-Agent header sent with page requests
    """

    api_url: str = DEFAULT_SCAN_API_URL
    web_url: str = DEFAULT_SCAN_WEB_URL
    page_limit: int = 20
    request_timeout: int = 30
    user_agent: str = "simple-worker-auto"

    def __post_init__(self) -> None:
        _check_url(self.api_url, "Scan API URL", "SCAN_API_URL", ("http", "https"))
        _check_url(self.web_url, "Scan web URL", "SCAN_WEB_URL", ("http", "https"))

        # Strip trailing slashes so paths can be appended directly
        object.__setattr__(self, "api_url", self.api_url.rstrip("/"))
        object.__setattr__(self, "web_url", self.web_url.rstrip("/"))

        if not 1 <= self.page_limit <= 100:
            raise ValueError(f"Page limit must be between 1 and 100, got {self.page_limit}")
        if self.request_timeout <= 0:
            raise ValueError(f"Request timeout must be positive, got {self.request_timeout}")
        if self.request_timeout > 120:
            raise ValueError(f"Request timeout too long (max 120s), got {self.request_timeout}")


@dataclass(frozen=True, slots=True)
class ExecutorConfig:
    """Settings for lzReceive submission on the destination chain.

    Attributes:
        rpc_url: Destination chain RPC endpoint
        contract_address: Checksummed executor contract address
        private_key: Signing key for the executor wallet
        destination_eid: LayerZero endpoint id passed to lzReceive
        gas_limit: Gas ceiling for every lzReceive transaction
    """

    rpc_url: str
    contract_address: str
    private_key: str = field(repr=False)
    destination_eid: int = DEFAULT_DST_EID
    gas_limit: int = DEFAULT_GAS_LIMIT

    UINT32_MAX: ClassVar[int] = 2**32 - 1

    def __post_init__(self) -> None:
        _check_url(self.rpc_url, "RPC URL", "RPC_SEPOLIA", ("http", "https"))

        object.__setattr__(
            self,
            "contract_address",
            _checksum(self.contract_address, "Executor contract address", "EXECUTOR_ADDRESS"),
        )

        if not self.private_key:
            raise ValueError("Executor private key is required (EXECUTOR_PRIVATE_KEY)")

        key = self.private_key.removeprefix("0x")
        if len(key) != 64:
            raise ValueError(
                f"Invalid private key length. Expected 64 hex characters, got {len(key)}"
            )
        try:
            int(key, 16)
        except ValueError:
            raise ValueError("Invalid private key format. Must be hexadecimal") from None

        if not 0 <= self.destination_eid <= self.UINT32_MAX:
            raise ValueError(f"Destination EID must fit in uint32, got {self.destination_eid}")
        if self.gas_limit <= 0:
            raise ValueError(f"Gas limit must be positive, got {self.gas_limit}")


@dataclass(frozen=True, slots=True)
class MonitoringConfig:
    """Poll loop settings."""

    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS

    def __post_init__(self) -> None:
        if self.poll_interval_ms <= 0:
            raise ValueError(f"Poll interval must be positive, got {self.poll_interval_ms}")

    @property
    def poll_interval_seconds(self) -> float:
        return self.poll_interval_ms / 1000


@dataclass(frozen=True, slots=True)
class WorkerConfig:
    """Main configuration for the autoscan worker.

    Attributes:
        owner_address: Wallet whose sent messages are tracked
        executor: Destination chain and signing settings
        scan: Explorer settings
        monitoring: Poll loop settings
    """

    owner_address: str
    executor: ExecutorConfig
    scan: ScanConfig = field(default_factory=ScanConfig)
    monitoring: MonitoringConfig = field(default_factory=MonitoringConfig)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "owner_address",
            _checksum(self.owner_address, "Owner address", "OWNER"),
        )

    @classmethod
    def from_env(cls) -> "WorkerConfig":
        """Load configuration from environment variables.

        Returns:
            WorkerConfig instance with loaded values

        Raises:
            ValueError: If required environment variables are missing or invalid
        """
        owner = os.environ.get("OWNER", "")
        if not owner:
            raise ValueError(
                "OWNER environment variable is required. "
                "This is the wallet that sent the bridge messages."
            )

        private_key = os.environ.get("EXECUTOR_PRIVATE_KEY", "")
        if not private_key:
            raise ValueError(
                "EXECUTOR_PRIVATE_KEY environment variable is required. "
                "This key signs the lzReceive transactions."
            )

        rpc_url = os.environ.get("RPC_SEPOLIA", "")
        if not rpc_url:
            raise ValueError(
                "RPC_SEPOLIA environment variable is required. "
                "Example: https://ethereum-sepolia.publicnode.com"
            )

        executor_address = os.environ.get("EXECUTOR_ADDRESS", "")
        if not executor_address:
            raise ValueError(
                "EXECUTOR_ADDRESS environment variable is required. "
                "This is the executor contract that receives lzReceive calls."
            )

        executor_config = ExecutorConfig(
            rpc_url=rpc_url,
            contract_address=executor_address,
            private_key=private_key,
            destination_eid=_int_env("DST_EID", DEFAULT_DST_EID),
            gas_limit=_int_env("GAS_LIMIT", DEFAULT_GAS_LIMIT),
        )

        scan_config = ScanConfig(
            api_url=os.environ.get("SCAN_API_URL") or DEFAULT_SCAN_API_URL,
            web_url=os.environ.get("SCAN_WEB_URL") or DEFAULT_SCAN_WEB_URL,
            page_limit=_int_env("SCAN_PAGE_LIMIT", 20),
            request_timeout=_int_env("REQUEST_TIMEOUT", 30),
        )

        monitoring_config = MonitoringConfig(
            poll_interval_ms=_int_env("POLL_INTERVAL", DEFAULT_POLL_INTERVAL_MS),
        )

        return cls(
            owner_address=owner,
            executor=executor_config,
            scan=scan_config,
            monitoring=monitoring_config,
        )

    def log_config(self) -> None:
        """Log configuration settings (hiding sensitive data)."""
        logger.info("=" * 60)
        logger.info("LayerZero Autoscan Worker Configuration")
        logger.info("=" * 60)

        logger.info(f"Owner: {self.owner_address}")

        logger.info("Executor:")
        logger.info(f"  RPC URL: {self.executor.rpc_url}")
        logger.info(f"  Contract: {self.executor.contract_address}")
        logger.info(f"  Destination EID: {self.executor.destination_eid}")
        logger.info(f"  Gas Limit: {self.executor.gas_limit}")
        logger.info(f"  Private Key: {'[SET]' if self.executor.private_key else '[NOT SET]'}")

        logger.info("LayerZero Scan:")
        logger.info(f"  API: {self.scan.api_url}")
        logger.info(f"  Web: {self.scan.web_url}")
        logger.info(f"  Page Limit: {self.scan.page_limit}")
        logger.info(f"  Request Timeout: {self.scan.request_timeout}s")

        logger.info("Monitoring:")
        logger.info(f"  Poll Interval: {self.monitoring.poll_interval_ms} ms")

        logger.info("=" * 60)
