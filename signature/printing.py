import json
import sys


def json_print(obj) -> None:
    try:
        print(json.dumps(obj, ensure_ascii=False, indent=2))
    except (TypeError, ValueError):
        print(str(obj))


def print_error(message: str) -> None:
    print(f" {message}", file=sys.stderr)
