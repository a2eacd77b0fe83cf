#!/usr/bin/env python3
"""
Example: fetch a radar chart from a running radarchart server

Needs httpx, installed with:
    pip install -e ".[examples]"

Start the server first:
    python -m radarchart.main_web --port 8080

Then run:
    python examples/fetch_radar_chart.py --out chart.png
"""

import argparse
import sys
import time

import httpx

LEGACY_PARAMS = {
    "cht": "r",
    "chs": "225x225",
    "chd": "t:69.12,77,58,61.5,72|-1,-1,-1,-1,72,73,85,50,69.12",
    "chxl": "0:|note|mus|reg|ent|pab|jock|dist|sais",
}


def fetch(base_url: str) -> tuple[bytes, float]:
    started = time.perf_counter()
    response = httpx.get(f"{base_url}/chart", params=LEGACY_PARAMS, timeout=30)
    elapsed = time.perf_counter() - started
    if response.status_code != 200:
        print(f"✗ {response.status_code}: {response.text}")
        sys.exit(1)
    return response.content, elapsed


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Fetch a legacy radar chart")
    parser.add_argument("--url", default="http://localhost:8080", help="Server base URL")
    parser.add_argument("--out", default="radar-chart.png", help="Where to write the PNG")
    args = parser.parse_args()

    image, first = fetch(args.url)
    _, second = fetch(args.url)

    with open(args.out, "wb") as f:
        f.write(image)

    print(f"✓ Saved {len(image):,} bytes to {args.out}")
    print(f"  first request:  {first * 1000:.1f} ms (rendered)")
    print(f"  second request: {second * 1000:.1f} ms (cached)")
