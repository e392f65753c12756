#!/usr/bin/env python3

from __future__ import annotations

import argparse
import json
import sys

import httpx

from calls_assistant.call_book import CallBook, QUICK_PROMPTS, render_call
from calls_assistant.config import config


def _print_dashboard(book: CallBook) -> None:
    print(f"Scheduled: {book.count_scheduled()}  Completed: {book.count_completed()}")
    if not book.calls:
        print("No calls scheduled")
        return
    for call in book.calls:
        print(render_call(call))


def _print_action(action: str | None, payload: dict | None) -> None:
    if not action:
        return
    if payload:
        compact = json.dumps(payload, ensure_ascii=False)
        print(f"(action: {action} payload={compact})")
    else:
        print(f"(action: {action})")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Interactive text chat with the business calls assistant via /api/chat")
    parser.add_argument("--base-url", default=config.BASE_URL, help=f"API base URL (default: {config.BASE_URL})")
    parser.add_argument("--timeout", type=float, default=15.0, help="HTTP timeout seconds (default: 15)")
    parser.add_argument("--no-demo", action="store_true", help="Start with an empty call list")
    args = parser.parse_args(argv)

    book = CallBook() if args.no_demo else CallBook.with_demo_data()

    print("Text chat started. Type /exit to quit, /calls for the dashboard, /prompts for ideas.")
    for msg in book.chat_history:
        print(f"assistant> {msg.content}")

    with httpx.Client(base_url=args.base_url.rstrip("/"), timeout=args.timeout) as client:
        while True:
            try:
                user_text = input("you> ")
            except (EOFError, KeyboardInterrupt):
                print()
                break

            command = user_text.strip().lower()
            if not command:
                continue
            if command in {"/exit", "/quit", "exit", "quit"}:
                break
            if command == "/calls":
                _print_dashboard(book)
                continue
            if command == "/prompts":
                for label, prompt in QUICK_PROMPTS.items():
                    print(f"  {label}: {prompt}")
                continue

            answer = book.send_message(client, user_text)
            print(f"assistant> {book.chat_history[-1].content}")
            if answer is not None:
                _print_action(answer.action, answer.data)

    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
