"""
A simple script to send a question to a running LegalBrain service.

Usage:
    python scripts/query_chatbot.py "How do I get anticipatory bail?" [language]

Note: This expects the service to be running at http://127.0.0.1:8000 (override with BASE_URL).
"""

import os
import sys

import requests

BASE = os.environ.get("BASE_URL", "http://127.0.0.1:8000")


def main():
    q = sys.argv[1] if len(sys.argv) > 1 else "What is section 498A?"
    language = sys.argv[2] if len(sys.argv) > 2 else "english"
    r = requests.post(f"{BASE}/api/chatbot", json={"query": q, "language": language}, timeout=10)
    print('Status:', r.status_code)
    print('Response JSON:', r.json())


if __name__ == '__main__':
    main()
