from __future__ import annotations

import argparse
from time import perf_counter

from typosee.scan import ScanOptions, scan
from typosee.sources import load_keywords, read_fqdns


def main() -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("subdomains")
    ap.add_argument("keywords")
    ap.add_argument("--threshold", type=int, default=2)
    args = ap.parse_args()

    keywords = load_keywords(args.keywords)
    fqdns = list(read_fqdns(args.subdomains))
    if not keywords or not fqdns:
        print("Nothing to compare.")
        return 1

    t0 = perf_counter()
    result = scan(keywords, fqdns, ScanOptions(threshold=args.threshold))
    dt = perf_counter() - t0
    print(f"{result.comparisons} comparisons, {len(result.matches)} matches in {dt:.2f}s")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
