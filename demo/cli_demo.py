#!/usr/bin/env python3
"""
Interactive CLI demo for Fine Press Scout.

Type a collector's request and see what was understood and which books
matched. Prefix a line with "budget=N" and/or "keyword=WORD" to use the
explicit-parameters path, e.g.:

    budget=200 keyword=lettered Laird Barron

Start a line with "ask " to get an LLM recommendation instead of a list.
"""
import logging
import sys

from dotenv import load_dotenv

# Imports assume the package is installed (pip install -e .) or PYTHONPATH=src
from press_scout import PressScoutApp
from press_scout.agent.prompts import describe_analysis
from press_scout.config_loader import load_config_from_env
from press_scout.exceptions import PressScoutError

load_dotenv()


def print_banner():
    print("\n" + "=" * 60)
    print("  Fine Press Scout - Interactive CLI Demo")
    print("=" * 60)
    print("\nAsk for books in plain English, for example:")
    print("  • lettered edition under $200 by Laird Barron")
    print("  • Centipede Press cosmic horror")
    print("  • sold out limited editions")
    print("\nType 'quit' or 'exit' to end the session.")
    print("-" * 60 + "\n")


def parse_line(line):
    """Split leading budget=/keyword= tokens from the query text."""
    budget = None
    keyword = None
    words = line.split()
    while words and ("=" in words[0]):
        name, _, value = words.pop(0).partition("=")
        if name == "budget":
            budget = float(value)
        elif name == "keyword":
            keyword = value
        else:
            words.insert(0, f"{name}={value}")
            break
    return " ".join(words), budget, keyword


def print_response(response, query):
    print(f"\n📚 Query: {query}")
    print(f"🧭 Path: {response.resolution_path.value}")
    print(f"🔎 {describe_analysis(response.analysis)}")

    if not response.results:
        print("No books found matching the request.")
    for i, result in enumerate(response.results, start=1):
        print(
            f"  {i}. {result.title} by {result.author} "
            f"({result.publisher}, {result.edition_type}, {result.price_label}) "
            f"[{result.similarity:.2f}]"
        )

    if response.latency_ms is not None:
        print(f"⚡ Latency: {response.latency_ms}ms")
    print("-" * 60)


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    print_banner()

    try:
        app = PressScoutApp(load_config_from_env())
        print("🚀 Loading catalogue and index...")
        app.initialize()
        print("✅ Ready!\n")
    except PressScoutError as e:
        print(f"\n❌ Failed to initialize: {e}")
        print("Please check your environment variables and configuration.")
        return 1

    while True:
        try:
            line = input("You: ").strip()
            if not line:
                continue
            if line.lower() in ["quit", "exit", "q"]:
                print("\n👋 Goodbye!\n")
                break

            try:
                query, budget, keyword = parse_line(line)
            except ValueError:
                print("budget must be a number")
                continue
            if query.lower().startswith("ask "):
                query = query[4:]
                answer = app.recommend(query, budget=budget, keyword=keyword)
                print(f"\n💬 {answer.recommendation}")
                print("-" * 60)
            else:
                print_response(app.search(query, budget=budget, keyword=keyword), query)

        except (KeyboardInterrupt, EOFError):
            print("\n\n👋 Goodbye!\n")
            break

    return 0


if __name__ == "__main__":
    sys.exit(main())
