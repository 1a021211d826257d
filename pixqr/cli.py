"""Command line front end for generating and checking PIX codes."""
from __future__ import annotations

import argparse
import sys
from typing import Sequence

from .keys import PixKeyType
from .logging_conf import configure_logging
from .schemas import GenerationRequest
from .services.errors import ServiceError
from .services.pix import decode, generate, generate_random_key, validate


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pixqr", description="Generate and validate static PIX copy-paste codes")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="build a PIX code")
    gen.add_argument("--key", required=True)
    gen.add_argument("--key-type", required=True, choices=[t.value for t in PixKeyType])
    gen.add_argument("--name", required=True, help="merchant name (max 25)")
    gen.add_argument("--city", required=True, help="merchant city (max 15)")
    gen.add_argument("--description")
    gen.add_argument("--txid", help="transaction id")

    check = sub.add_parser("validate", help="check a PIX code CRC")
    check.add_argument("code")

    dec = sub.add_parser("decode", help="print the fields of a PIX code as JSON")
    dec.add_argument("code")

    sub.add_parser("random-key", help="print a new random key")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        if args.command == "generate":
            request = GenerationRequest(
                key=args.key,
                key_type=args.key_type,
                merchant_name=args.name,
                merchant_city=args.city,
                description=args.description,
                transaction_id=args.txid,
            )
            print(generate(request))
        elif args.command == "validate":
            ok = validate(args.code)
            print("valid" if ok else "invalid")
            return 0 if ok else 1
        elif args.command == "decode":
            print(decode(args.code).model_dump_json(indent=2))
        else:
            print(generate_random_key())
    except ServiceError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    return 0
