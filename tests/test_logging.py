import subprocess
import sys
import textwrap
from pathlib import Path

from gemini_client.core.logging import redact_api_key

PROJECT_ROOT = Path(__file__).resolve().parents[1]

LIST_MODELS_SCRIPT = textwrap.dedent(
    """
    import asyncio
    import logging

    import httpx

    from gemini_client.client import Client
    from gemini_client.core.config import Settings
    from gemini_client.core.logging import setup_logging

    setup_logging({level!r}, {json_logs!r})


    async def list_models():
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json={{"models": []}}))
        async with httpx.AsyncClient(transport=transport) as http_client:
            client = Client(api_key="sekrit-test-key", http_client=http_client, settings=Settings(_env_file=None))
            await client.models()


    asyncio.run(list_models())
    print(logging.getLogger("httpx").level, logging.getLogger("httpcore").level)
    """
)


def run_list_models(level="INFO", json_logs=False):
    return subprocess.run(
        [sys.executable, "-c", LIST_MODELS_SCRIPT.format(level=level, json_logs=json_logs)],
        cwd=PROJECT_ROOT,
        capture_output=True,
        text=True,
        timeout=60,
    )


def test_api_key_never_reaches_log_output():
    result = run_list_models()

    assert result.returncode == 0, result.stderr
    assert "gemini_request_completed" in result.stderr
    assert "sekrit-test-key" not in result.stderr
    assert "sekrit-test-key" not in result.stdout


def test_transport_loggers_quieted_even_at_debug():
    result = run_list_models(level="DEBUG", json_logs=True)

    assert result.returncode == 0, result.stderr
    assert "sekrit-test-key" not in result.stderr
    assert result.stdout.split() == ["30", "30"]


def test_redact_api_key_masks_query_param():
    event = {
        "event": "gemini_request_failed",
        "url": "https://generativelanguage.googleapis.com/v1beta/models?pageSize=2&key=abc123",
        "other": "https://x.test/files?key=zzz",
        "status_code": 200,
    }

    redacted = redact_api_key(None, "error", event)

    assert redacted["url"] == "https://generativelanguage.googleapis.com/v1beta/models?pageSize=2&key=***"
    assert redacted["other"] == "https://x.test/files?key=***"
    assert redacted["status_code"] == 200
