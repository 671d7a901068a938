import httpx
import pytest

import gemini_client
from gemini_client.client import Client
from gemini_client.core.config import Settings
from gemini_client.errors import ApiError, ConfigurationError, DecodeError, HTTPTransportError
from gemini_client.models import Content, GenerationConfig, Models, Response, Status
from gemini_client.safety import default_safety_settings

from .fakes import error_reply, text_reply

MODELS_PAGE = {
    "models": [
        {
            "name": "models/gemini-1.5-flash",
            "version": "001",
            "displayName": "Gemini 1.5 Flash",
            "description": "Fast and versatile",
            "inputTokenLimit": 1000000,
            "outputTokenLimit": 8192,
            "supportedGenerationMethods": ["generateContent", "countTokens"],
            "temperature": 1.0,
            "topP": 0.95,
            "topK": 40,
        },
        {"name": "models/embedding-001", "supportedGenerationMethods": ["embedContent"]},
    ],
    "nextPageToken": "page-2",
}


@pytest.mark.anyio
async def test_list_models(client, fake_api):
    fake_api.reply(json_body=MODELS_PAGE)

    models = await client.models(page_size=2)

    assert isinstance(models, Models)
    assert [m.name for m in models.models] == ["models/gemini-1.5-flash", "models/embedding-001"]
    assert models.models[0].output_token_limit == 8192
    assert models.models[0].top_k == 40
    assert models.models[1].display_name == ""
    assert models.next_page_token == "page-2"

    request = fake_api.requests[0]
    assert request.method == "GET"
    assert request.url.path == "/v1beta/models"
    assert request.url.params["page_size"] == "2"
    assert request.url.params["key"] == "test-key"
    assert request.content == b""


@pytest.mark.anyio
async def test_get_model(client, fake_api):
    fake_api.reply(json_body=MODELS_PAGE["models"][0])
    model = await client.model("gemini-1.5-flash")
    assert model.display_name == "Gemini 1.5 Flash"
    assert fake_api.requests[0].url.path == "/v1beta/models/gemini-1.5-flash"


@pytest.mark.anyio
async def test_generate_content_sends_body_and_parses_reply(client, fake_api):
    fake_api.reply(json_body=text_reply("AI learns patterns from data."))

    route = client.generate_content("gemini-1.5-flash")
    route.system_instruction("Answer in one sentence.")
    route.config(GenerationConfig(temperature=0.3, max_output_tokens=64))
    route.safety_settings(default_safety_settings())
    route.message("Explain how AI works")
    response = await route

    assert isinstance(response, Response)
    assert str(response) == "AI learns patterns from data."
    assert response.usage_metadata.total_token_count == 11

    request = fake_api.requests[0]
    assert request.method == "POST"
    assert request.url.path == "/v1beta/models/gemini-1.5-flash:generateContent"
    body = fake_api.body()
    assert body["contents"] == [{"role": "user", "parts": [{"text": "Explain how AI works"}]}]
    assert body["system_instruction"] == {"parts": [{"text": "Answer in one sentence."}]}
    assert body["generationConfig"] == {"temperature": 0.3, "maxOutputTokens": 64}
    assert len(body["safetySettings"]) == 5
    assert "tools" not in body


@pytest.mark.anyio
async def test_generate_content_chained_await(client, fake_api):
    fake_api.reply(json_body=text_reply("hi there"))
    response = await client.generate_content("gemini-1.5-flash").message("hello")
    assert response.text == "hi there"


@pytest.mark.anyio
async def test_generate_content_with_explicit_contents(client, fake_api):
    fake_api.reply(json_body=text_reply("4"))
    history = [Content.user("2+2?"), Content.model("Let me think."), Content.user("Answer only.")]

    await client.generate_content("gemini-1.5-flash").contents(history)

    roles = [turn["role"] for turn in fake_api.body()["contents"]]
    assert roles == ["user", "model", "user"]


@pytest.mark.anyio
async def test_api_error_is_raised(client, fake_api):
    fake_api.reply(status_code=400, json_body=error_reply())

    with pytest.raises(ApiError) as excinfo:
        await client.models()

    assert excinfo.value.status is Status.INVALID_ARGUMENT
    assert excinfo.value.detail.message == "API key not valid."
    assert excinfo.value.to_dict()["details"]["status"] == "INVALID_ARGUMENT"


@pytest.mark.anyio
async def test_transport_failure_is_wrapped(client, fake_api):
    def boom(request):
        raise httpx.ConnectError("connection refused", request=request)

    fake_api.reply_with(boom)

    with pytest.raises(HTTPTransportError) as excinfo:
        await client.models()
    assert "ConnectError" in excinfo.value.message
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


@pytest.mark.anyio
async def test_malformed_reply_is_decode_error(client, fake_api):
    fake_api.reply(content=b"not json at all")
    with pytest.raises(DecodeError):
        await client.generate_content("gemini-1.5-flash").message("hi")


@pytest.mark.anyio
async def test_file_routes(client, fake_api):
    fake_api.reply(json_body={"files": [{"name": "files/abc", "uri": "https://x/files/abc", "sizeBytes": "12"}]})
    fake_api.reply(json_body={"name": "files/abc", "mimeType": "image/png", "state": "ACTIVE"})
    fake_api.reply(json_body={})

    listing = await client.files(page_size=1)
    fetched = await client.file("abc")
    await client.delete_file("files/abc")

    assert listing.files[0].size_bytes == 12
    assert fetched.mime_type == "image/png"
    assert [r.method for r in fake_api.requests] == ["GET", "GET", "DELETE"]
    assert fake_api.requests[0].url.params["page_size"] == "1"
    assert fake_api.requests[1].url.path == "/v1beta/files/abc"
    assert fake_api.requests[2].url.path == "/v1beta/files/abc"


def test_missing_key_raises_configuration_error():
    settings = Settings(_env_file=None, gemini_api_key=None, google_api_key=None)
    with pytest.raises(ConfigurationError):
        Client(settings=settings)


def test_explicit_key_beats_settings(settings):
    client = Client(api_key="explicit", settings=settings)
    assert client.api_key == "explicit"
    assert "explicit" not in repr(client)


def test_key_from_environment(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "env-key")
    assert Client().api_key == "env-key"


def test_shared_instance_and_module_helpers(monkeypatch):
    monkeypatch.setenv("GEMINI_API_KEY", "env-key")

    first = gemini_client.client()
    assert first is Client.instance()

    chat = gemini_client.chat("gemini-1.5-flash")
    assert chat.client is first
    assert chat.model == "gemini-1.5-flash"


@pytest.mark.anyio
async def test_context_manager_closes_owned_http_client(settings):
    async with Client(settings=settings) as client:
        http_client = client.http_client
    assert http_client.is_closed


@pytest.mark.anyio
async def test_injected_http_client_is_left_open(client):
    async with client:
        pass
    assert not client.http_client.is_closed
