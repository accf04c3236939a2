import argparse
import logging
import sys
from typing import Optional

from .config import PUBLIC_KEY, PRIVATE_KEY, HASH_ALGORITHM, REQUEST_TIMEOUT
from .hash_func import available_algorithms, get_hash_func_by_name, UnsupportedAlgorithmError
from .http import signed_post_json
from .printing import json_print, print_error
from .sign import hash_with_keys


def _add_body_args(parser: argparse.ArgumentParser) -> None:
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--body", type=str, help="Body text to hash (UTF-8)")
    source.add_argument("--file", type=str, help="Read body bytes from this file ('-' for stdin)")
    parser.add_argument("--algorithm", type=str, default=HASH_ALGORITHM, help=f"Hash algorithm (default: {HASH_ALGORITHM})")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")


def _add_key_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--public-key", type=str, help="Override SIGNATURE_PUBLIC_KEY for this call")
    parser.add_argument("--private-key", type=str, help="Override SIGNATURE_PRIVATE_KEY for this call")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="signature", description="Sign payloads with a public/private key pair")
    subparsers = parser.add_subparsers(dest="command", required=True)

    hash_parser = subparsers.add_parser("hash", help="Hash a body merged with the key pair")
    _add_body_args(hash_parser)
    _add_key_args(hash_parser)

    digest_parser = subparsers.add_parser("digest", help="Plain digest of a body, no keys")
    _add_body_args(digest_parser)

    post_parser = subparsers.add_parser("post", help="POST a signed body and print the JSON response")
    post_parser.add_argument("url", help="Endpoint to POST to")
    _add_body_args(post_parser)
    _add_key_args(post_parser)
    post_parser.add_argument("--content-type", type=str, default="application/json", help="Content-Type header (default: application/json)")
    post_parser.add_argument("--timeout", type=float, default=REQUEST_TIMEOUT, help=f"HTTP timeout seconds (default: {REQUEST_TIMEOUT})")

    subparsers.add_parser("algorithms", help="List available hash algorithms")
    return parser


def _read_body(args: argparse.Namespace) -> bytes:
    if args.body is not None:
        return args.body.encode("utf-8")
    if args.file and args.file != "-":
        with open(args.file, "rb") as fh:
            return fh.read()
    return sys.stdin.buffer.read()


def run(argv: Optional[list] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if getattr(args, "verbose", False) else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "algorithms":
        for name in available_algorithms():
            print(name)
        return 0

    try:
        func = get_hash_func_by_name(args.algorithm)
    except UnsupportedAlgorithmError as exc:
        print_error(str(exc))
        return 2

    try:
        body = _read_body(args)
    except OSError as exc:
        print_error(f"Cannot read body: {exc}")
        return 2

    if args.command == "digest":
        print(func(body))
        return 0

    public_key = PUBLIC_KEY if args.public_key is None else args.public_key
    private_key = PRIVATE_KEY if args.private_key is None else args.private_key

    if args.command == "hash":
        print(hash_with_keys(body, public_key, private_key, hash_func=func))
        return 0

    # post
    data = signed_post_json(
        args.url,
        body,
        public_key=public_key,
        private_key=private_key,
        hash_func=func,
        headers={"Content-Type": args.content_type},
        timeout=args.timeout,
    )
    if data is None:
        print_error(f"Signed request to {args.url} failed")
        return 1
    json_print(data)
    return 0


def main() -> None:
    sys.exit(run())
