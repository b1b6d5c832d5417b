#!/usr/bin/env python3
import os, sys, asyncio, logging
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from chat_gateway import ChatGateway, ChatMessage, ChatRequest, GatewayError
from chat_gateway.types import AiProfile


def demo_kimi(gateway: ChatGateway):
    messages = [
        ChatMessage(role="system", content="You are a time-management assistant. Answer in less than 30 words."),
        ChatMessage(role="user", content="How long should a pomodoro be?"),
    ]
    try:
        result = gateway.chat_completion(ChatRequest(messages=messages, provider="kimi", model="moonshot-v1-8k"))
        print("Kimi response:", result.content)
    except GatewayError as e:
        print("Kimi call failed:", e)


def demo_profile(gateway: ChatGateway):
    # Self-hosted OpenAI-compatible server, as saved from the settings screen
    profile = AiProfile.from_dict({
        "id": 2,
        "name": "LM Studio",
        "provider": "custom",
        "model": "qwen/qwen3-4b",
        "baseURL": "http://localhost:1234/v1/",
        "apiKey": "lm-studio",
    })
    request = ChatRequest.from_profile(profile, [{"role": "user", "content": "Say hello."}])

    async def run():
        try:
            result = await gateway.achat_completion(request)
            print(f"{profile.name} response:", result.content)
        except GatewayError as e:
            print(f"{profile.name} call failed:", e)

    asyncio.run(run())


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    gateway = ChatGateway()
    demo_kimi(gateway)
    demo_profile(gateway)
