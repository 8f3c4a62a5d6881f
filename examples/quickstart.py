# examples/quickstart.py
"""
Quickstart — budget a request before sending it.

Run with:
  python examples/quickstart.py
"""

from chat_tokens import TokenEstimator, estimate_prompt_tokens

CONTEXT_WINDOW = 16_385
MAX_COMPLETION_TOKENS = 1_024


def main():
    request = {
        "messages": [
            {"role": "system", "content": "You are a helpful assistant."},
            {"role": "user", "content": "What is the weather in Prague?"},
        ],
        "tools": [
            {
                "type": "function",
                "function": {
                    "name": "get_weather",
                    "description": "Get the current weather in a given location",
                    "parameters": {
                        "type": "object",
                        "properties": {
                            "location": {"type": "string", "description": "The city"},
                            "unit": {"type": "string", "enum": ["celsius", "fahrenheit"]},
                        },
                        "required": ["location"],
                    },
                },
            }
        ],
    }

    tokens = estimate_prompt_tokens(request)
    print(f"Prompt tokens: {tokens}")
    print(f"Room left for the completion: {CONTEXT_WINDOW - tokens}")
    if tokens + MAX_COMPLETION_TOKENS > CONTEXT_WINDOW:
        print("Request will not fit; trim the history first.")

    breakdown = TokenEstimator().breakdown(request)
    print(breakdown.model_dump())


if __name__ == "__main__":
    main()
