"""CLI entry point: print today's horoscope payload as JSON.

    uv run python -m rashifal.daily --ip 203.0.113.7
    uv run python -m rashifal.daily --tz Asia/Dhaka
"""

import argparse
import json
import sys

from dotenv import load_dotenv

from rashifal.compute import run
from rashifal.config import Settings
from rashifal.errors import HoroscopeError
from rashifal.models import HoroscopeQuery


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Print today's rashifal as JSON.")
    parser.add_argument("--ip", help="Visitor address to geolocate (fallback place if omitted)")
    parser.add_argument("--tz", help="IANA timezone override, e.g. Asia/Kolkata")
    args = parser.parse_args(argv)

    load_dotenv()
    try:
        result = run(HoroscopeQuery(client_ip=args.ip, tz=args.tz), settings=Settings.from_env())
    except HoroscopeError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    print(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
