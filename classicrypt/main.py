"""
classicrypt - Main Entry Point

Command-line access to the number theory and classical cipher toolkit.

Usage examples:
  classicrypt gcd 48 18
  classicrypt egcd 240 46
  classicrypt hill-enc HI "3 3 2 5"
  classicrypt hill-dec TC "3 3 2 5"
  classicrypt rsa 61 53 17 "Hello"
  classicrypt keygen --bits 512
"""

import argparse
import sys
from typing import List, Optional

from .core_crypto.rsa_math import DEFAULT_KEY_BITS, generate_rsa_keypair
from .integration.event_logger import EventLogger, EventType
from .integration.operations import Operation, perform_operation


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with one sub-command per operation."""
    parser = argparse.ArgumentParser(
        prog="classicrypt",
        description="GCD, Extended Euclid, RSA and Hill cipher toolkit.",
    )
    parser.add_argument("--audit", action="store_true",
                        help="print the operation audit log afterwards")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("gcd", help="greatest common divisor of A and B")
    p.add_argument("a")
    p.add_argument("b")

    p = sub.add_parser("egcd", help="Extended Euclidean Algorithm step table")
    p.add_argument("a")
    p.add_argument("b")

    for name, verb in (("hill-enc", "encrypt"), ("hill-dec", "decrypt")):
        p = sub.add_parser(name, help=f"{verb} 2 letters with a Hill cipher")
        p.add_argument("text", help="exactly 2 letters")
        p.add_argument("key", help='4 numbers separated by spaces, e.g. "3 3 2 5"')

    p = sub.add_parser("rsa", help="derive keys from P, Q, E then encrypt and decrypt TEXT")
    p.add_argument("p")
    p.add_argument("q")
    p.add_argument("e")
    p.add_argument("text")

    p = sub.add_parser("keygen", help="generate a random RSA key pair")
    p.add_argument("--bits", type=int, default=DEFAULT_KEY_BITS)
    p.add_argument("--pem", action="store_true", help="also print the public key as PEM")

    return parser


def _dispatch(args: argparse.Namespace, logger: EventLogger) -> int:
    if args.command == "keygen":
        try:
            keypair = generate_rsa_keypair(args.bits)
        except ValueError as exc:
            logger.log_failure("keygen", exc)
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        logger.log_operation(EventType.RSA_KEYGEN, {
            'n': keypair.modulus, 'e': keypair.public_exponent,
            'bits': keypair.key_size,
        })
        print(f"Public key (e, n):  ({keypair.public_exponent}, {keypair.modulus})")
        print(f"Private key (d, n): ({keypair.private_exponent}, {keypair.modulus})")
        if args.pem:
            print(keypair.public_pem().decode('ascii'))
        return 0

    if args.command in ("gcd", "egcd"):
        operation = Operation.GCD if args.command == "gcd" else Operation.EXTENDED_EUCLIDEAN
        inputs = {'a': args.a, 'b': args.b}
    elif args.command in ("hill-enc", "hill-dec"):
        operation = Operation.HILL_ENCRYPT if args.command == "hill-enc" else Operation.HILL_DECRYPT
        inputs = {'text': args.text, 'key': args.key}
    else:
        operation = Operation.RSA
        inputs = {'p': args.p, 'q': args.q, 'e': args.e, 'text': args.text}

    result = perform_operation(operation, inputs, logger)
    print(result.text, file=sys.stdout if result.success else sys.stderr)
    return 0 if result.success else 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for classicrypt."""
    args = build_parser().parse_args(argv)
    logger = EventLogger()
    status = _dispatch(args, logger)
    if args.audit:
        logger.print_audit_log()
    return status


if __name__ == "__main__":
    sys.exit(main())
