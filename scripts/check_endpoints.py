from __future__ import annotations

import argparse
import sys
from typing import Any, List

from mockhttp.endpoints import Config
from mockhttp.loader import EndpointConfigError, load_registry


def md_table(rows: List[List[Any]], headers: List[str]) -> str:
    out = ["| " + " | ".join(headers) + " |", "|" + "|".join(["---"] * len(headers)) + "|"]
    for row in rows:
        out.append("| " + " | ".join(str(x) for x in row) + " |")
    return "\n".join(out) + "\n"


def endpoint_rows(registry: Config) -> List[List[Any]]:
    rows: List[List[Any]] = []
    seen = set()
    for ep in registry:
        key = (ep.method, ep.url)
        # later duplicates can never be reached
        note = "shadowed" if key in seen else ""
        seen.add(key)
        rows.append([ep.method, ep.url, ep.response_time, len(ep.response), note])
    return rows


def main(argv: List[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Validate a mockhttp endpoints file.")
    ap.add_argument("path", help="YAML endpoints document")
    args = ap.parse_args(argv)

    try:
        registry = load_registry(args.path)
    except EndpointConfigError as exc:
        print(f"{exc.code}: {exc}", file=sys.stderr)
        return 1

    print(md_table(endpoint_rows(registry), ["method", "url", "response_ms", "body_chars", "note"]), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
