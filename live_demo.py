#!/usr/bin/env python
"""
╔══════════════════════════════════════════════════════════════════════════════╗
║                        CLASSICRYPT LIVE DEMO                                  ║
║              Number Theory & Classical Ciphers Walkthrough                    ║
╚══════════════════════════════════════════════════════════════════════════════╝

This script provides an interactive live demonstration of classicrypt:
- Euclidean GCD
- Extended Euclidean Algorithm with its step table
- Modular inverses (Extended Euclid and brute-force search)
- RSA key derivation, encryption and decryption
- Hill cipher encryption and decryption with a 2x2 key

Run with --no-pause to print everything without waiting for ENTER.
"""

import sys

from classicrypt.core_crypto.euclid import gcd, extended_gcd
from classicrypt.core_crypto.modular_inverse import find_inverse_euclid, find_inverse_search
from classicrypt.core_crypto.rsa_math import RSAKeyPair, mod_exp
from classicrypt.core_crypto.hill_cipher import HillCipher
from classicrypt.integration.event_logger import EventLogger
from classicrypt.integration.operations import Operation, format_steps_table, perform_operation


PAUSE_ENABLED = True


def print_header(title):
    """Print a formatted section header"""
    print("\n" + "═" * 70)
    print(f"  {title}")
    print("═" * 70)


def print_step(step_num, description):
    """Print a numbered step"""
    print(f"\n  [{step_num}] {description}")


def pause(message="Press ENTER to continue..."):
    """Pause for presenter to explain"""
    if not PAUSE_ENABLED:
        return
    print(f"\n  [PAUSE] {message}")
    input()


def main():

    print("\n" * 2)
    print("╔" + "═" * 68 + "╗")
    print("║" + " " * 68 + "║")
    print("║" + "        CLASSICRYPT - NUMBER THEORY & CLASSICAL CIPHERS".center(68) + "║")
    print("║" + " " * 68 + "║")
    print("╚" + "═" * 68 + "╝")

    pause("Press ENTER to begin the demonstration...")

    event_logger = EventLogger()

    print_header("PART 1: GREATEST COMMON DIVISOR")

    print_step("1.1", "Euclidean GCD")
    for a, b in [(48, 18), (17, 13), (240, 46)]:
        print(f"  gcd({a}, {b}) = {gcd(a, b)}")

    pause()

    print_step("1.2", "Extended Euclidean Algorithm for (240, 46)")
    result = extended_gcd(240, 46)
    print()
    for line in format_steps_table(result.steps).splitlines():
        print(f"  {line}")
    print(f"\n  Bezout: 240 * ({result.x}) + 46 * ({result.y}) = {result.gcd}")

    pause()

    print_header("PART 2: MODULAR INVERSES")

    print_step("2.1", "Extended Euclid: 17^(-1) mod 3120")
    inverse = find_inverse_euclid(17, 3120)
    print(f"  17 * {inverse.value} mod 3120 = {17 * inverse.value % 3120}")

    print_step("2.2", "Brute-force search: 7^(-1) mod 26")
    inverse = find_inverse_search(7, 26)
    print(f"  7 * {inverse.value} mod 26 = {7 * inverse.value % 26}")

    print_step("2.3", "No inverse: 13 mod 26")
    inverse = find_inverse_search(13, 26)
    print(f"  Sentinel: {inverse.or_sentinel()} ({inverse.reason})")

    pause()

    print_header("PART 3: RSA")

    print_step("3.1", "Key derivation with p=61, q=53, e=17")
    keypair = RSAKeyPair.from_primes(61, 53, 17)
    print(f"  n = {keypair.modulus}")
    print(f"  Public key (e, n):  ({keypair.public_exponent}, {keypair.modulus})")
    print(f"  Private key (d, n): ({keypair.private_exponent}, {keypair.modulus})")

    print_step("3.2", "Square-and-multiply: 65^17 mod 3233")
    print(f"  {mod_exp(65, 17, 3233)}")

    print_step("3.3", "Encrypt and decrypt a message")
    message = "Hello RSA"
    outcome = perform_operation(
        Operation.RSA,
        {'p': '61', 'q': '53', 'e': '17', 'text': message},
        event_logger,
    )
    print(f"  {outcome.text}")

    print_step("3.4", "Invalid exponent (e=3 shares a factor with phi=3120)")
    outcome = perform_operation(
        Operation.RSA,
        {'p': '61', 'q': '53', 'e': '3', 'text': message},
        event_logger,
    )
    print(f"  {outcome.text}")

    pause()

    print_header("PART 4: HILL CIPHER")

    cipher = HillCipher([[3, 3], [2, 5]])
    print_step("4.1", f"Key {cipher.key}, det = {cipher.determinant}")
    print(f"  Inverse key mod 26: {cipher.inverse()}")

    print_step("4.2", "Encrypt and decrypt 'HI'")
    encrypted = cipher.encrypt("HI")
    print(f"  HI -> {encrypted} -> {cipher.decrypt(encrypted)}")

    print_step("4.3", "Non-invertible key [[2, 4], [4, 8]]")
    outcome = perform_operation(Operation.HILL_ENCRYPT, {'text': 'HI', 'key': '2 4 4 8'}, event_logger)
    print(f"  {outcome.text}")
    outcome = perform_operation(Operation.HILL_DECRYPT, {'text': 'HI', 'key': '2 4 4 8'}, event_logger)
    print(f"  {outcome.text}")

    pause()

    print_header("PART 5: AUDIT LOG")
    event_logger.print_audit_log()

    print("\n  Demonstration complete.\n")


if __name__ == "__main__":
    if "--no-pause" in sys.argv[1:]:
        PAUSE_ENABLED = False
    main()
