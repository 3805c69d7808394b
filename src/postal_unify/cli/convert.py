from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from postal_unify.decode import LEGACY_ENCODING
from postal_unify.errors import PostalDataError
from postal_unify.pipeline import ConvertSettings, run, write_stats
from postal_unify.project import LAYOUTS


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="python -m postal_unify.cli.convert",
        description="Convert KEN_ALL.CSV and JIGYOSYO.CSV into one unified postal CSV",
    )
    parser.add_argument("--ken-all", default=os.getenv("POSTAL_KEN_ALL_CSV", "KEN_ALL.CSV"))
    parser.add_argument("--jigyosyo", default=os.getenv("POSTAL_JIGYOSYO_CSV", "JIGYOSYO.CSV"))
    parser.add_argument("--skip-jigyosyo", action="store_true", help="Convert KEN_ALL.CSV only")
    parser.add_argument("--output", default=os.getenv("POSTAL_OUTPUT_CSV", "postal.csv"))
    parser.add_argument("--input-encoding", default=LEGACY_ENCODING)
    parser.add_argument("--output-encoding", default="utf-8")
    parser.add_argument("--layout", choices=LAYOUTS, default="isolated")
    parser.add_argument("--stats", default=None, help="Write per-dataset counts to this CSV")
    parser.add_argument("--verbose", action="store_true")
    return parser


def settings_from_args(args: argparse.Namespace) -> ConvertSettings:
    return ConvertSettings(
        ken_all_path=Path(args.ken_all),
        jigyosyo_path=None if args.skip_jigyosyo else Path(args.jigyosyo),
        output_path=Path(args.output),
        input_encoding=args.input_encoding,
        output_encoding=args.output_encoding,
        layout=args.layout,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    settings = settings_from_args(args)

    try:
        stats = run(settings)
        if args.stats:
            write_stats(stats, Path(args.stats))
    except (PostalDataError, OSError) as exc:
        print(f"[STOP] {exc}", file=sys.stderr)
        return 1

    total = sum(item.rows for item in stats)
    print(f"[OK] rows={total} -> {settings.output_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
