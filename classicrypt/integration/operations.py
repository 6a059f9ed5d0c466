"""
Operation Dispatcher

Runs one of the classicrypt operations from raw string inputs, the way a
form or command line supplies them, and renders the result as text.

Operations:
- gcd: GCD of two integers
- extendedEuclidean: Extended Euclidean Algorithm as a step table
- hillCipherEnc / hillCipherDec: 2-letter Hill cipher block
- rsa: derive keys from p, q, e then encrypt and decrypt a message

Any ValueError raised by the engines (including every classicrypt error
type) is caught and rendered as "Error: <message>". Everything else
propagates.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Mapping, Optional, Sequence, Union

from ..core_crypto.euclid import EuclidStep, gcd, extended_gcd
from ..core_crypto.hill_cipher import Matrix, hill_decrypt, hill_encrypt
from ..core_crypto.rsa_math import rsa_decrypt, rsa_encrypt, rsa_key_gen
from .event_logger import EventLogger, EventType, get_fingerprint


class Operation(Enum):
    """Selectable operations."""
    GCD = "gcd"
    EXTENDED_EUCLIDEAN = "extendedEuclidean"
    HILL_ENCRYPT = "hillCipherEnc"
    HILL_DECRYPT = "hillCipherDec"
    RSA = "rsa"


# Input fields each operation reads
REQUIRED_FIELDS: Dict[Operation, tuple] = {
    Operation.GCD: ('a', 'b'),
    Operation.EXTENDED_EUCLIDEAN: ('a', 'b'),
    Operation.HILL_ENCRYPT: ('text', 'key'),
    Operation.HILL_DECRYPT: ('text', 'key'),
    Operation.RSA: ('p', 'q', 'e', 'text'),
}

STEP_COLUMNS = ('Quotient', 'a', 'b', 'Remainder', 's1', 's2', 's3', 't1', 't2', 't3')


@dataclass(frozen=True)
class OperationResult:
    """Outcome of a dispatched operation."""
    operation: Operation
    success: bool
    text: str

    def __str__(self) -> str:
        return self.text


# ============================================================================
# Input Parsing
# ============================================================================

def parse_int(value: str, field_name: str) -> int:
    """
    Parse a decimal integer field.

    Raises:
        ValueError: If value is not an integer
    """
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValueError(f"'{field_name}' must be an integer, got {value!r}") from None


def parse_key_matrix(key_string: str) -> Matrix:
    """
    Parse a Hill key given as 4 numbers separated by spaces.

    "3 3 2 5" -> [[3, 3], [2, 5]]

    Raises:
        ValueError: If the string does not hold exactly 4 integers
    """
    parts = key_string.split()
    if len(parts) != 4:
        raise ValueError(
            f"Key must be 4 numbers separated by spaces (2x2 matrix), got {len(parts)}"
        )
    values = [parse_int(part, 'key') for part in parts]
    return [values[0:2], values[2:4]]


# ============================================================================
# Rendering
# ============================================================================

def format_steps_table(steps: Sequence[EuclidStep]) -> str:
    """
    Render Extended Euclidean steps as a plain-text table.

    Columns: Quotient, a, b, Remainder, s1, s2, s3, t1, t2, t3.
    Rows keep the order of steps (deepest recursion level first).
    """
    rows: List[List[str]] = [list(STEP_COLUMNS)]
    for step in steps:
        rows.append([str(v) for v in (
            step.quotient, step.a, step.b, step.remainder,
            step.s1, step.s2, step.s3,
            step.t1, step.t2, step.t3,
        )])

    widths = [max(len(row[i]) for row in rows) for i in range(len(STEP_COLUMNS))]

    def render(row: List[str]) -> str:
        return ' | '.join(cell.rjust(width) for cell, width in zip(row, widths))

    separator = '-+-'.join('-' * width for width in widths)
    lines = [render(rows[0]), separator]
    lines.extend(render(row) for row in rows[1:])
    return '\n'.join(lines)


# ============================================================================
# Dispatch
# ============================================================================

def _run_gcd(inputs: Mapping[str, str], logger: Optional[EventLogger]) -> str:
    a = parse_int(inputs['a'], 'a')
    b = parse_int(inputs['b'], 'b')
    result = gcd(a, b)
    if logger is not None:
        logger.log_operation(EventType.GCD_COMPUTED, {'a': a, 'b': b, 'gcd': result})
    return f"GCD: {result}"


def _run_extended_euclidean(inputs: Mapping[str, str], logger: Optional[EventLogger]) -> str:
    a = parse_int(inputs['a'], 'a')
    b = parse_int(inputs['b'], 'b')
    result = extended_gcd(a, b)
    if logger is not None:
        logger.log_operation(EventType.EXTENDED_GCD_COMPUTED, {
            'a': a, 'b': b, 'gcd': result.gcd,
            'x': result.x, 'y': result.y, 'steps': len(result.steps),
        })
    return format_steps_table(result.steps)


def _run_hill_encrypt(inputs: Mapping[str, str], logger: Optional[EventLogger]) -> str:
    key = parse_key_matrix(inputs['key'])
    encrypted = hill_encrypt(inputs['text'], key)
    if logger is not None:
        logger.log_operation(EventType.HILL_ENCRYPT, {
            'text_id': get_fingerprint(inputs['text'].upper()),
            'key': key,
        })
    return f"Hill Cipher (Encrypted): {encrypted}"


def _run_hill_decrypt(inputs: Mapping[str, str], logger: Optional[EventLogger]) -> str:
    key = parse_key_matrix(inputs['key'])
    decrypted = hill_decrypt(inputs['text'], key)
    if logger is not None:
        logger.log_operation(EventType.HILL_DECRYPT, {
            'cipher_id': get_fingerprint(inputs['text'].upper()),
            'key': key,
        })
    return f"Hill Cipher (Decrypted): {decrypted}"


def _run_rsa(inputs: Mapping[str, str], logger: Optional[EventLogger]) -> str:
    p = parse_int(inputs['p'], 'p')
    q = parse_int(inputs['q'], 'q')
    e = parse_int(inputs['e'], 'e')
    text = inputs['text']

    keypair = rsa_key_gen(p, q, e)
    if logger is not None:
        logger.log_operation(EventType.RSA_KEYGEN, {
            'n': keypair.modulus, 'e': keypair.public_exponent,
        })

    encrypted = rsa_encrypt(text, keypair.public_key)
    if logger is not None:
        logger.log_operation(EventType.RSA_ENCRYPT, {
            'n': keypair.modulus,
            'text_id': get_fingerprint(text),
            'length': len(text),
        })

    decrypted = rsa_decrypt(encrypted, keypair.private_key)
    if logger is not None:
        logger.log_operation(EventType.RSA_DECRYPT, {
            'n': keypair.modulus,
            'text_id': get_fingerprint(decrypted),
        })

    return f"RSA Encryption: {encrypted}, Decryption: {decrypted}"


_HANDLERS = {
    Operation.GCD: _run_gcd,
    Operation.EXTENDED_EUCLIDEAN: _run_extended_euclidean,
    Operation.HILL_ENCRYPT: _run_hill_encrypt,
    Operation.HILL_DECRYPT: _run_hill_decrypt,
    Operation.RSA: _run_rsa,
}


def perform_operation(
    operation: Union[Operation, str],
    inputs: Mapping[str, str],
    logger: Optional[EventLogger] = None
) -> OperationResult:
    """
    Run an operation from raw string inputs.

    Args:
        operation: Operation member or its string value (e.g. "gcd")
        inputs: Field name -> raw value, see REQUIRED_FIELDS
        logger: Optional EventLogger to record the operation

    Returns:
        OperationResult; on a ValueError, success is False and text is
        "Error: <message>"

    Raises:
        ValueError: If the operation name is unknown
        KeyError: If a required input field is missing
    """
    operation = Operation(operation)

    missing = [name for name in REQUIRED_FIELDS[operation] if name not in inputs]
    if missing:
        raise KeyError(f"Missing input fields for {operation.value}: {', '.join(missing)}")

    try:
        text = _HANDLERS[operation](inputs, logger)
    except ValueError as exc:
        if logger is not None:
            logger.log_failure(operation.value, exc)
        return OperationResult(operation, success=False, text=f"Error: {exc}")

    return OperationResult(operation, success=True, text=text)
