from __future__ import annotations

import argparse
from pathlib import Path

import typer

from typosee.cli import scan


def main() -> int:
    ap = argparse.ArgumentParser()
    ap.add_argument("subdomains")
    ap.add_argument("keywords")
    ap.add_argument("--threshold", type=int, default=2)
    ap.add_argument("--out-dir", default="outputs")
    args = ap.parse_args()

    out_dir = Path(args.out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)

    stem = Path(args.subdomains).stem
    try:
        scan(
            subdomains=Path(args.subdomains),
            keywords=Path(args.keywords),
            threshold=args.threshold,
            verbose=False,
            debug=False,
            no_header=False,
            out_json=str(out_dir / f"{stem}.json"),
            out_html=str(out_dir / f"{stem}.html"),
        )
    except typer.Exit as e:
        return e.exit_code
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
