# examples/recalibrate.py
"""
Recalibration — override overheads when the provider changes its framing.

Run with:
  python examples/recalibrate.py
"""

from chat_tokens import TokenEstimator


def main():
    estimator = TokenEstimator.from_dict({
        "encoding_name": "cl100k_base",
        "overheads": {"completion": 3, "definitions": 9},
    })
    tokens = estimator.estimate_prompt_tokens(
        {"messages": [{"role": "user", "content": "hello"}]}
    )
    print(f"Prompt tokens: {tokens}")


if __name__ == "__main__":
    main()
