#!/usr/bin/env python3
"""lzReceive submission for pending LayerZero messages.

This module broadcasts the delivery call on the destination chain from the
configured executor wallet and waits for it to be mined.
"""

import logging
from typing import TYPE_CHECKING, Any

from web3 import Web3
from web3.contract import Contract
from web3.types import HexBytes, TxReceipt

from .config import DEFAULT_GAS_LIMIT
from .models import ExecutionResult

if TYPE_CHECKING:
    from .utils.contract_utility import ContractUtility

logger = logging.getLogger(__name__)


class MessageExecutor:
    """Submits lzReceive transactions to the executor contract."""

    def __init__(
        self,
        contract_util: "ContractUtility",
        contract_address: str,
        gas_limit: int = DEFAULT_GAS_LIMIT
    ) -> None:
        """
        Initialize the MessageExecutor.

        Args:
            contract_util: Signing Web3 connection to the destination chain
            contract_address: Address of the executor contract
            gas_limit: Gas ceiling for each lzReceive transaction
        """
        self.contract_util: ContractUtility = contract_util
        self.contract_address: str = Web3.to_checksum_address(contract_address)
        self.gas_limit: int = gas_limit

        self.executor_abi: list[dict[str, Any]] = self._load_executor_abi()
        self.contract: Contract = self.contract_util.w3.eth.contract(
            address=self.contract_address,
            abi=self.executor_abi
        )

        logger.info(f"MessageExecutor initialized for {self.contract_address} (gas limit {gas_limit})")

    def _load_executor_abi(self) -> list[dict[str, Any]]:
        """ABI fragment for `lzReceive(uint32,bytes32,bytes,address)`."""
        return [
            {
                "inputs": [
                    {"internalType": "uint32", "name": "srcEid", "type": "uint32"},
                    {"internalType": "bytes32", "name": "sender", "type": "bytes32"},
                    {"internalType": "bytes", "name": "payload", "type": "bytes"},
                    {"internalType": "address", "name": "executor", "type": "address"}
                ],
                "name": "lzReceive",
                "outputs": [],
                "stateMutability": "nonpayable",
                "type": "function"
            }
        ]

    async def execute(
        self,
        dst_eid: int,
        sender32: str,
        payload: str,
        executor_address: str
    ) -> ExecutionResult:
        """
        Broadcast lzReceive and wait for the receipt.

        Callers must only pass a complete sender32/payload pair. Every
        broadcast or confirmation failure is logged and returned in the
        result; nothing is raised.

        Args:
            dst_eid: Endpoint id argument of lzReceive
            sender32: 32-byte sender identifier as 0x-prefixed hex
            payload: Message payload as 0x-prefixed hex
            executor_address: Executor address argument of lzReceive

        Returns:
            ExecutionResult with the tx hash and confirming block on success
        """
        tx_hash_hex: str | None = None

        try:
            tx_hash: HexBytes = self.contract.functions.lzReceive(
                dst_eid,
                Web3.to_bytes(hexstr=sender32),
                Web3.to_bytes(hexstr=payload),
                Web3.to_checksum_address(executor_address)
            ).transact({'gas': self.gas_limit})

            tx_hash_hex = Web3.to_hex(tx_hash)
            logger.info(f"⏳ lzReceive sent: {tx_hash_hex}")

            receipt: TxReceipt = self.contract_util.w3.eth.wait_for_transaction_receipt(tx_hash)

            if (status := receipt.get('status', 0)) != 1:
                logger.error(f"✗ lzReceive {tx_hash_hex} reverted (status={status})")
                return ExecutionResult(
                    tx_hash=tx_hash_hex,
                    block_number=receipt.get('blockNumber'),
                    error=f"transaction reverted (status={status})"
                )

            logger.info(f"✓ EXECUTED at block {receipt['blockNumber']}")
            return ExecutionResult(tx_hash=tx_hash_hex, block_number=receipt['blockNumber'])

        except Exception as e:
            logger.error(f"✗ Execution error: {e}")
            return ExecutionResult(tx_hash=tx_hash_hex, error=str(e) or type(e).__name__)
