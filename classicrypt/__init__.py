"""
classicrypt - number theory and classical cipher toolkit.

Subpackages:
- core_crypto: GCD, Extended Euclid, modular inverse, RSA, Hill cipher
- integration: operation dispatcher and audit log
"""

__version__ = "1.0.0"
