"""
Transcode the object keys of a JSON document between snake_case and camelCase.
Run: python -m scripts.transcode_json payload.json --direction snake_to_camel -o out.json
Use "-" as input to read from stdin.
"""
import argparse
import json
import logging
import os
import sys

# Add parent so we can import from the project root
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from logging_setup import setup_logging
from utils.special_cases import Direction
from utils.transcoding import transcode

logger = logging.getLogger("scripts.transcode_json")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("input", help="JSON file to read, or - for stdin")
    parser.add_argument("-o", "--output", help="File to write (default: stdout)")
    parser.add_argument(
        "-d",
        "--direction",
        choices=[d.value for d in Direction],
        default=Direction.SNAKE_TO_CAMEL.value,
    )
    parser.add_argument("--indent", type=int, default=2)
    return parser


def _load(path: str):
    if path == "-":
        return json.load(sys.stdin)
    with open(path, encoding="utf-8") as fh:
        return json.load(fh)


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()
    try:
        data = _load(args.input)
    except (OSError, ValueError) as e:
        print(f"Cannot read {args.input}: {e}", file=sys.stderr)
        return 1

    result = transcode(data, Direction(args.direction))
    text = json.dumps(result, indent=args.indent, ensure_ascii=False)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as fh:
            fh.write(text + "\n")
        logger.info("Wrote %s (%s)", args.output, args.direction)
    else:
        print(text)
    return 0


if __name__ == "__main__":
    sys.exit(main())
