import logging
from contextlib import asynccontextmanager

import pytest
from mcp.server import Server

from crypto_mcp import main as main_module
from crypto_mcp.config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.setattr("crypto_mcp.config.load_dotenv", lambda: False)
    for name in ("COINGECKO_API_URL", "COINGECKO_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_main_exits_on_bad_timeout(monkeypatch, caplog):
    caplog.set_level(logging.INFO)
    monkeypatch.setenv("COINGECKO_TIMEOUT", "soon")

    with pytest.raises(SystemExit) as exc_info:
        main_module.main()

    assert exc_info.value.code == 1
    assert "Fatal error: COINGECKO_TIMEOUT must be a number" in caplog.text


def test_main_exits_on_bad_log_level(monkeypatch, caplog):
    caplog.set_level(logging.INFO)
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(SystemExit) as exc_info:
        main_module.main()

    assert exc_info.value.code == 1
    assert "Fatal error" in caplog.text


def test_main_runs_server_with_env_settings(monkeypatch, caplog):
    caplog.set_level(logging.INFO)
    monkeypatch.setenv("COINGECKO_TIMEOUT", "3")
    served = []

    async def fake_serve(settings):
        served.append(settings)

    monkeypatch.setattr(main_module, "serve", fake_serve)

    main_module.main()

    assert len(served) == 1
    assert served[0].timeout == 3.0


@pytest.mark.asyncio
async def test_serve_logs_ready_notice(monkeypatch, caplog):
    caplog.set_level(logging.INFO, logger="crypto_mcp")
    runs = []

    @asynccontextmanager
    async def fake_stdio_server():
        yield "read-stream", "write-stream"

    async def fake_run(self, read_stream, write_stream, initialization_options, *args, **kwargs):
        runs.append((self.name, read_stream, write_stream, initialization_options.server_name))

    monkeypatch.setattr(main_module, "stdio_server", fake_stdio_server)
    monkeypatch.setattr(Server, "run", fake_run)

    await main_module.serve(Settings())

    assert runs == [("crypto", "read-stream", "write-stream", "crypto")]
    assert "Crypto MCP Server running on stdio" in caplog.text
