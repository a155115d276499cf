"""
LayerZero autoscan worker.

This module contains the poll loop that lists the owner's messages, picks
the ones waiting for execution and drives each of them through payload
extraction and lzReceive submission.
"""

import logging

from .config import WorkerConfig
from .executor import MessageExecutor
from .message_source import MessageSource
from .models import CycleReport, Message, MessageListing
from .payload_fetcher import PayloadFetcher
from .utils.contract_utility import ContractUtility
from .utils.ticker import IntervalTicker, Ticker

logger = logging.getLogger(__name__)


class AutoscanWorker:
    """
    Poll loop orchestrating discovery, extraction and execution.

    Messages are handled one at a time, in the order the explorer lists
    them. No state is carried between cycles, so a message the explorer
    still reports as WAITING is submitted again on the next cycle.
    """

    def __init__(
        self,
        config: WorkerConfig,
        message_source: MessageSource,
        payload_fetcher: PayloadFetcher,
        executor: MessageExecutor,
        ticker: Ticker | None = None
    ):
        """
        Initialize the AutoscanWorker.

        Args:
            config: Worker configuration
            message_source: Explorer listing client
            payload_fetcher: Transaction page client
            executor: lzReceive submitter
            ticker: Scheduler between cycles (defaults to the configured interval)
        """
        self.config = config
        self.message_source = message_source
        self.payload_fetcher = payload_fetcher
        self.executor = executor
        self.ticker: Ticker = ticker or IntervalTicker(config.monitoring.poll_interval_seconds)
        self.running = False

        self.cycles = 0
        self.executed = 0
        self.failed = 0
        self.skipped = 0

    @classmethod
    def from_config(cls, config: WorkerConfig) -> "AutoscanWorker":
        """
        Build a worker with live explorer and chain clients.

        Args:
            config: Worker configuration

        Returns:
            Configured AutoscanWorker instance
        """
        contract_util = ContractUtility(
            rpc_url=config.executor.rpc_url,
            secret=config.executor.private_key,
            request_timeout=config.scan.request_timeout
        )
        logger.info(f"Executor wallet: {contract_util.address}")

        executor = MessageExecutor(
            contract_util=contract_util,
            contract_address=config.executor.contract_address,
            gas_limit=config.executor.gas_limit
        )

        return cls(
            config=config,
            message_source=MessageSource(config.scan),
            payload_fetcher=PayloadFetcher(config.scan),
            executor=executor
        )

    async def run_cycle(self) -> CycleReport:
        """
        Run one discovery/execution pass.

        Returns:
            CycleReport summarizing what happened to each listed message
        """
        try:
            listing = await self.message_source.fetch_messages(self.config.owner_address)
        except Exception as e:
            logger.error(f"API error: {e}", exc_info=True)
            listing = MessageListing(error=str(e) or type(e).__name__)

        if not listing.messages:
            logger.info("No messages found")
            return CycleReport(listing_error=listing.error)

        logger.info(f"Found {len(listing)} messages.")

        pending = executed = skipped = failed = 0
        for message in listing.messages:
            if not message.is_waiting:
                continue

            pending += 1
            logger.info(f"🔵 Pending executor message found: {message.src_tx_hash}")

            try:
                outcome = await self._execute_message(message)
            except Exception as e:
                logger.error(f"Error processing message {message.src_tx_hash}: {e}", exc_info=True)
                outcome = "failed"

            match outcome:
                case "executed":
                    executed += 1
                case "skipped":
                    skipped += 1
                case _:
                    failed += 1

        report = CycleReport(
            messages_found=len(listing),
            pending=pending,
            executed=executed,
            skipped=skipped,
            failed=failed
        )
        self.executed += executed
        self.skipped += skipped
        self.failed += failed
        return report

    async def _execute_message(self, message: Message) -> str:
        """
        Fetch a waiting message's payload and submit it.

        Returns:
            "executed", "skipped" (nothing to submit) or "failed"
        """
        tx_hash = message.src_tx_hash
        logger.info(f"=== EXECUTING message from tx: {tx_hash}")

        lookup = await self.payload_fetcher.fetch_payload(tx_hash)
        data = lookup.payload
        if not lookup.ok or data is None or not data.is_complete:
            logger.warning(f"✗ Cannot extract payload/sender for {tx_hash}")
            return "skipped"

        logger.info(f" sender32: {data.sender32}")
        logger.info(f" payload length: {data.payload_size} bytes")

        result = await self.executor.execute(
            self.config.executor.destination_eid,
            data.sender32,
            data.payload,
            self.config.executor.contract_address
        )
        return "executed" if result.succeeded else "failed"

    async def run(self, max_cycles: int | None = None) -> None:
        """
        Main loop of the worker.

        Runs until `stop()` is called or `max_cycles` cycles have completed.
        Exceptions escaping a cycle propagate to the caller.

        Args:
            max_cycles: Optional bound on the number of cycles
        """
        self.running = True
        logger.info(f"Worker autoscan started for owner: {self.config.owner_address}")

        try:
            while self.running:
                report = await self.run_cycle()
                self.cycles += 1
                logger.debug(str(report))

                if max_cycles is not None and self.cycles >= max_cycles:
                    break

                logger.info(f"Sleep {self.config.monitoring.poll_interval_ms} ms...")
                if not await self.ticker.tick():
                    break
        finally:
            self.running = False
            logger.info("Worker autoscan stopped")

    def stop(self) -> None:
        """Stop the worker; a pending sleep ends immediately."""
        self.running = False
        self.ticker.stop()

    def get_stats(self) -> dict:
        """
        Get cumulative worker statistics.

        Returns:
            Dictionary with counters since start
        """
        return {
            'cycles': self.cycles,
            'executed': self.executed,
            'failed': self.failed,
            'skipped': self.skipped
        }
