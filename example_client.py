#!/usr/bin/env python3
"""
Example client demonstrating the Code Analysis API through the Python SDK.

Start the server first (python main.py), then run:
    python example_client.py
"""

import sys

from clients.python.client import CodeAnalysisClient, CodeAnalysisClientError

REVIEW_SAMPLE = """
function calculateTotal(items) {
  var total = 0;
  for(var i = 0; i < items.length; i++) {
    total = total + items[i].price;
  }
  return total;
}
""".strip()

EXPLAIN_SAMPLE = """
const numbers = [1, 2, 3, 4, 5];
const doubled = numbers.map(n => n * 2).filter(n => n > 5);
""".strip()

IMPROVE_SAMPLE = """
function fetchData(callback) {
  setTimeout(function() {
    var data = {name: "John", age: 30};
    callback(data);
  }, 1000);
}
""".strip()


def main():
    print("Intelligent Code Analysis API - Example Client")
    print("=" * 46)
    print()

    examples = [
        ("Code Review", "review", REVIEW_SAMPLE),
        ("Code Explanation", "explain", EXPLAIN_SAMPLE),
        ("Code Improvement", "improve", IMPROVE_SAMPLE),
    ]

    with CodeAnalysisClient() as client:
        print(f"Server: {client.base_url}")

        try:
            for index, (title, kind, code) in enumerate(examples, start=1):
                print(f"\n=== Example {index}: {title} ===")
                result = getattr(client, kind)(code, language="javascript")
                print(result.content)
        except CodeAnalysisClientError as e:
            print(f"\nFailed to complete examples: {e}")
            print("\nMake sure:")
            print("1. The server is running (python main.py)")
            print("2. You have set a valid GEMINI_API_KEY in .env")
            return 1

    print()
    print("=" * 46)
    print("Examples completed successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
