#!/usr/bin/env python3
"""Tests for the process entry point."""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from web3 import Web3

import main

REQUIRED_ENV = {
    "OWNER": "0x85bfe05492afc3d04ff3b2ca6771acf6f853d90d",
    "EXECUTOR_PRIVATE_KEY": "0x" + "1" * 64,
    "EXECUTOR_ADDRESS": "0x742d35cc6634c0532925a3b844bc9e7595f0beb7",
    "RPC_SEPOLIA": "https://ethereum-sepolia.publicnode.com",
}


@pytest.fixture
def env(monkeypatch, tmp_path):
    for name, value in REQUIRED_ENV.items():
        monkeypatch.setenv(name, value)
    # Keep a developer's .env out of the tests
    monkeypatch.chdir(tmp_path)
    return monkeypatch


class TestMain:

    @pytest.mark.asyncio
    async def test_missing_config_exits_1(self, env):
        env.delenv("OWNER")

        with pytest.raises(SystemExit) as exc_info:
            await main.main([])

        assert exc_info.value.code == 1

    @pytest.mark.asyncio
    async def test_env_file_loaded(self, env, tmp_path):
        env.delenv("OWNER")
        env_file = tmp_path / "worker.env"
        env_file.write_text(f"OWNER={REQUIRED_ENV['OWNER']}\n")

        worker = MagicMock()
        worker.run = AsyncMock()
        with patch.object(main.AutoscanWorker, "from_config", return_value=worker) as from_config:
            await main.main(["--env-file", str(env_file), "--once"])

        config = from_config.call_args[0][0]
        assert config.owner_address == Web3.to_checksum_address(REQUIRED_ENV["OWNER"])
        worker.run.assert_awaited_once_with(max_cycles=1)

    @pytest.mark.asyncio
    async def test_runs_forever_without_once(self, env):
        worker = MagicMock()
        worker.run = AsyncMock()
        with patch.object(main.AutoscanWorker, "from_config", return_value=worker):
            await main.main([])

        worker.run.assert_awaited_once_with(max_cycles=None)

    @pytest.mark.asyncio
    async def test_uncaught_error_exits_1(self, env):
        worker = MagicMock()
        worker.run = AsyncMock(side_effect=RuntimeError("loop crashed"))
        with patch.object(main.AutoscanWorker, "from_config", return_value=worker):
            with pytest.raises(SystemExit) as exc_info:
                await main.main([])

        assert exc_info.value.code == 1

    @pytest.mark.asyncio
    async def test_keyboard_interrupt_stops_worker(self, env):
        worker = MagicMock()
        worker.run = AsyncMock(side_effect=KeyboardInterrupt)
        with patch.object(main.AutoscanWorker, "from_config", return_value=worker):
            await main.main([])

        worker.stop.assert_called_once()
