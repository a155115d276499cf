#!/usr/bin/env python3
"""Entry point for the LayerZero autoscan worker.

Loads configuration from the environment (and an optional .env file),
then runs the poll loop that executes the owner's pending messages.
"""

import argparse
import asyncio
import logging
import os
import sys

from dotenv import load_dotenv


def setup_logging(level: str = "INFO") -> None:
    """Configure logging for the application.

    Args:
        level: Logging level as string (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    log_level: int = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stdout
    )

# Get logger for this module
logger = logging.getLogger(__name__)

from lz_autoscan.config import WorkerConfig
from lz_autoscan.worker import AutoscanWorker


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser: argparse.ArgumentParser = argparse.ArgumentParser(
        description="LayerZero Autoscan Worker - execute pending LayerZero messages for a wallet",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""Environment Variables:
  OWNER                 - Wallet whose messages are scanned (required)
  EXECUTOR_PRIVATE_KEY  - Key that signs lzReceive transactions (required)
  EXECUTOR_ADDRESS      - Executor contract address (required)
  RPC_SEPOLIA           - Destination chain RPC endpoint (required)
  DST_EID               - Destination endpoint id (default: 40374)
  POLL_INTERVAL         - Poll interval in ms (default: 60000)
  LOG_LEVEL             - Logging level (can be overridden with --log-level)
        """
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path of a .env file to load before reading the environment (default: .env)"
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set the logging level (default: $LOG_LEVEL or INFO)"
    )
    parser.add_argument(
        "--once",
        action="store_true",
        default=False,
        help="Run a single scan cycle and exit"
    )
    return parser.parse_args(argv)


async def main(argv: list[str] | None = None) -> None:
    """Main entry point for the LayerZero autoscan worker.

    Raises:
        SystemExit: On configuration or runtime errors
    """
    args: argparse.Namespace = parse_args(argv)

    # Existing environment variables win over the .env file
    load_dotenv(args.env_file)
    setup_logging(args.log_level or os.environ.get("LOG_LEVEL", "INFO"))

    logger.info("=== LayerZero Autoscan Worker Starting ===")

    try:
        config: WorkerConfig = WorkerConfig.from_env()
    except ValueError as e:
        logger.error(f"Configuration Error: {e}")
        logger.error("Please check your environment variables:")
        logger.error("  - OWNER: Wallet whose messages are scanned")
        logger.error("  - EXECUTOR_PRIVATE_KEY: Key that signs lzReceive transactions")
        logger.error("  - EXECUTOR_ADDRESS: Executor contract address")
        logger.error("  - RPC_SEPOLIA: Destination chain RPC endpoint")
        sys.exit(1)

    config.log_config()

    worker: AutoscanWorker | None = None
    try:
        worker = AutoscanWorker.from_config(config)
        await worker.run(max_cycles=1 if args.once else None)

    except KeyboardInterrupt:
        logger.info("Received interrupt signal, shutting down...")
        if worker:
            worker.stop()

    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        sys.exit(0)
