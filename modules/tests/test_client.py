import pytest
import asyncio

from chat_gateway.client import ChatGateway
from chat_gateway.config import GatewayConfig
from chat_gateway.errors import ApiError
from chat_gateway.types import ChatMessage, ChatRequest
from chat_gateway.transports.base import BaseTransport


class StubTransport(BaseTransport):
    def __init__(self, reply="ok", error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def send(self, endpoint, credential, body):
        self.calls.append((endpoint, credential, body))
        if self.error is not None:
            raise self.error
        return self.reply

    async def asend(self, endpoint, credential, body):
        await asyncio.sleep(0)
        return self.send(endpoint, credential, body)


def make_gateway(transport, api_key="sk-default"):
    return ChatGateway(GatewayConfig(default_api_key=api_key), transport=transport)


def test_chat_completion_forwards_resolved_call():
    transport = StubTransport(reply="Hello!")
    gateway = make_gateway(transport)

    msgs = [ChatMessage(role="system", content="be brief"), ChatMessage(role="user", content="hi")]
    result = gateway.chat_completion(ChatRequest(messages=msgs, provider="moonshot", model="moonshot-v1-8k"))

    assert result.content == "Hello!"
    assert result.to_dict() == {"content": "Hello!"}
    endpoint, credential, body = transport.calls[0]
    assert endpoint == "https://api.moonshot.cn/v1/chat/completions"
    assert credential == "sk-default"
    assert body["model"] == "moonshot-v1-8k"
    assert [m["content"] for m in body["messages"]] == ["be brief", "hi"]


def test_chat_completion_accepts_ui_mapping():
    transport = StubTransport()
    gateway = make_gateway(transport)

    gateway.chat_completion({
        "messages": [{"role": "user", "content": "hi"}],
        "apiKey": "sk-override",
        "baseURL": "https://llm.internal/v1/",
    })

    endpoint, credential, _ = transport.calls[0]
    assert endpoint == "https://llm.internal/v1/chat/completions"
    assert credential == "sk-override"


def test_chat_completion_propagates_errors():
    transport = StubTransport(error=ApiError(429, "slow down"))
    gateway = make_gateway(transport)

    with pytest.raises(ApiError) as excinfo:
        gateway.chat_completion(ChatRequest(messages=[ChatMessage(role="user", content="hi")]))

    assert str(excinfo.value) == "API error: 429 - slow down"
    assert len(transport.calls) == 1


def test_prepare_uses_empty_default_credential():
    gateway = make_gateway(StubTransport(), api_key="")

    call = gateway.prepare(ChatRequest(messages=[]))

    assert call.endpoint == "https://api.openai.com/v1/chat/completions"
    assert call.credential == ""
    assert call.body == {"model": "gpt-3.5-turbo", "messages": [], "temperature": 0.7, "stream": False}


def test_gateway_reads_config_from_env(monkeypatch):
    monkeypatch.setenv("MOONSHOT_API_KEY", "sk-env")
    monkeypatch.delenv("CHAT_GATEWAY_TIMEOUT", raising=False)
    transport = StubTransport()
    gateway = ChatGateway(transport=transport)

    gateway.chat_completion(ChatRequest(messages=[ChatMessage(role="user", content="hi")]))

    assert gateway.config.default_api_key == "sk-env"
    assert transport.calls[0][1] == "sk-env"


@pytest.mark.asyncio
async def test_concurrent_async_calls_are_independent():
    transport = StubTransport(reply="done")
    gateway = make_gateway(transport)

    requests = [
        ChatRequest(messages=[ChatMessage(role="user", content=str(i))], api_key=f"sk-{i}")
        for i in range(5)
    ]
    results = await asyncio.gather(*(gateway.achat_completion(r) for r in requests))

    assert [r.content for r in results] == ["done"] * 5
    assert sorted(c[1] for c in transport.calls) == [f"sk-{i}" for i in range(5)]
