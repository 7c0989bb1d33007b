#!/usr/bin/env python3
"""
Print how sample (or given) queries are understood, without any index.

Usage:
    python demo/inspect_filters.py
    python demo/inspect_filters.py "Suntup traycased under £400"
"""
import json
import sys

from press_scout.filter_translator import to_payload_filter
from press_scout.query import QueryResolver

SAMPLE_QUERIES = [
    "Laird Barron lettered editions under $300",
    "Thomas Ligotti titles in print",
    "What does Zagava have available right now?",
    "cosmic horror under $150",
    "pre-order traycased edition",
    "sold out limited editions",
]


def main(argv):
    resolver = QueryResolver()
    for query in argv or SAMPLE_QUERIES:
        resolution = resolver.resolve(query)
        print(f"\n=== {query}")
        print(json.dumps(resolution.analysis.to_dict(), indent=2, ensure_ascii=False))
        print(f"embedding text: {resolution.embedding_text}")
        print(json.dumps(to_payload_filter(resolution.conditions), indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
