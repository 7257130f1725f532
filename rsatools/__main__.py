"""
Generate an RSA key, encrypt a message with it and decrypt it again.

    python -m rsatools
    python -m rsatools --bits 1024 --message deadbeef -v
"""

import argparse
import logging
import sys

from rsatools import RSA
from rsatools.error import MessageTooLarge
from rsatools.number_theory_stuff import random_prime
from rsatools.params import KEY_BITS, MESSAGE_BITS, from_env


def hexadecimal(value):
    return int(value, 16)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog='rsatools', description="Textbook RSA round trip")
    try:
        key_bits = from_env("RSATOOLS_KEY_BITS", KEY_BITS)
        message_bits = from_env("RSATOOLS_MESSAGE_BITS", MESSAGE_BITS)
    except ValueError as e:
        parser.error(str(e))

    parser.add_argument("--bits", type=int, default=key_bits, help="Modulus size in bits")
    parser.add_argument("--message-bits", type=int, default=message_bits,
                        help="Size of the random prime used as the message")
    parser.add_argument("--message", type=hexadecimal, default=None,
                        help="Hex encoded message to use instead of a random prime")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log key generation progress")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        key = RSA.generate_key(args.bits)
        message = args.message if args.message is not None else random_prime(args.message_bits)
    except ValueError as e:
        parser.error(str(e))

    try:
        ciphertext = RSA.encrypt(key, message)
    except MessageTooLarge as e:
        parser.error(f"{e.message} ({e.value.bit_length()} bits vs {e.modulus.bit_length()}-bit modulus)")

    deciphered = RSA.decrypt(key, ciphertext)

    print(key)
    print(f"message:    {message}")
    print(f"ciphertext: {ciphertext}")
    print(f"deciphered: {deciphered}")

    return 0 if deciphered == message else 1


if __name__ == "__main__":
    sys.exit(main())
