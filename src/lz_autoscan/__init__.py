"""
LayerZero autoscan worker package.

Finds the owner's LayerZero messages stuck waiting for execution and
delivers them by calling lzReceive on the destination chain.
"""

from .config import WorkerConfig
from .executor import MessageExecutor
from .extractor import HexScrapeExtractor, PayloadExtractor, extract_hexes
from .message_source import MessageSource
from .models import ExecutionStatus, ExtractedPayload, Message
from .payload_fetcher import PayloadFetcher
from .worker import AutoscanWorker

__all__ = [
    "AutoscanWorker",
    "ExecutionStatus",
    "ExtractedPayload",
    "HexScrapeExtractor",
    "Message",
    "MessageExecutor",
    "MessageSource",
    "PayloadExtractor",
    "PayloadFetcher",
    "WorkerConfig",
    "extract_hexes",
]
__version__ = "0.1.0"
