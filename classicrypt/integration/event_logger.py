"""
Event Logger Module

Audit trail for every operation dispatched through classicrypt.
Each operation is recorded as a typed event with a timestamp and details.

Features:
- One event type per operation (GCD, Extended Euclid, Hill, RSA)
- Failure events carrying the error message
- Privacy-preserving fingerprints (SHA-256) instead of plaintext messages
- Callbacks for live observers
- Export/import as JSON lines

Author: classicrypt
"""

import hashlib
import json
import time
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional, List, Dict, Any, Callable


# ============================================================================
# Constants
# ============================================================================

EVENT_VERSION = "1.0"
FINGERPRINT_LENGTH = 16  # Hex characters kept from the SHA-256 digest


# ============================================================================
# Privacy Functions
# ============================================================================

def get_fingerprint(text: str) -> str:
    """
    Compute a short privacy-preserving fingerprint of a message.

    Plaintext and ciphertext are never written to the log; the fingerprint
    still lets two events about the same message be correlated.

    Args:
        text: The message to fingerprint

    Returns:
        First FINGERPRINT_LENGTH hex characters of SHA-256(text)
    """
    return hashlib.sha256(text.encode('utf-8')).hexdigest()[:FINGERPRINT_LENGTH]


# ============================================================================
# Event Types
# ============================================================================

class EventType(Enum):
    """Types of events that can be logged."""

    # Number theory
    GCD_COMPUTED = "gcd_computed"
    EXTENDED_GCD_COMPUTED = "extended_gcd_computed"

    # Hill cipher
    HILL_ENCRYPT = "hill_encrypt"
    HILL_DECRYPT = "hill_decrypt"

    # RSA
    RSA_KEYGEN = "rsa_keygen"
    RSA_ENCRYPT = "rsa_encrypt"
    RSA_DECRYPT = "rsa_decrypt"

    # Failures and system events
    OPERATION_FAILED = "operation_failed"
    SYSTEM_START = "system_start"


# ============================================================================
# Event Structure
# ============================================================================

@dataclass
class OperationEvent:
    """A single logged operation."""
    event_type: EventType
    timestamp: int  # Unix timestamp
    details: Dict[str, Any] = field(default_factory=dict)

    def to_record(self) -> str:
        """Convert event to a compact JSON record."""
        return json.dumps({
            'version': EVENT_VERSION,
            'type': self.event_type.value,
            'time': self.timestamp,
            'iso_time': datetime.fromtimestamp(self.timestamp).isoformat(),
            'details': self.details,
        }, separators=(',', ':'))

    @classmethod
    def from_record(cls, record: str) -> 'OperationEvent':
        """Parse event from a JSON record."""
        data = json.loads(record)
        return cls(
            event_type=EventType(data['type']),
            timestamp=data['time'],
            details=data.get('details', {}),
        )

    def __str__(self) -> str:
        dt = datetime.fromtimestamp(self.timestamp)
        return f"[{dt.strftime('%Y-%m-%d %H:%M:%S')}] {self.event_type.value}"


# ============================================================================
# Event Logger
# ============================================================================

class EventLogger:
    """
    In-memory audit trail of dispatched operations.

    Events are kept in insertion order. The logger is not thread-safe;
    use one instance per caller.
    """

    def __init__(self, log_system_start: bool = True):
        """
        Initialize the event logger.

        Args:
            log_system_start: If True, record a SYSTEM_START event
        """
        self._events: List[OperationEvent] = []
        self._callbacks: List[Callable[[OperationEvent], None]] = []

        if log_system_start:
            self._add_event(OperationEvent(
                event_type=EventType.SYSTEM_START,
                timestamp=int(time.time()),
                details={'node': 'classicrypt'},
            ))

    def _add_event(self, event: OperationEvent) -> None:
        self._events.append(event)

        for callback in self._callbacks:
            try:
                callback(event)
            except Exception:
                pass  # Don't let callbacks break logging

    def add_callback(self, callback: Callable[[OperationEvent], None]) -> None:
        """Add a callback to be notified of new events."""
        self._callbacks.append(callback)

    def remove_callback(self, callback: Callable[[OperationEvent], None]) -> None:
        """Remove a callback."""
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    # ========================================================================
    # Logging
    # ========================================================================

    def log_operation(
        self,
        event_type: EventType,
        details: Optional[Dict[str, Any]] = None
    ) -> OperationEvent:
        """
        Log a completed operation.

        Args:
            event_type: Which operation ran
            details: JSON-serialisable details (no plaintext messages)

        Returns:
            The logged event
        """
        event = OperationEvent(
            event_type=event_type,
            timestamp=int(time.time()),
            details=dict(details or {}),
        )
        self._add_event(event)
        return event

    def log_failure(self, operation: str, error: Exception) -> OperationEvent:
        """
        Log a failed operation.

        Args:
            operation: Name of the operation that failed
            error: The exception raised by the engine

        Returns:
            The logged event
        """
        event = OperationEvent(
            event_type=EventType.OPERATION_FAILED,
            timestamp=int(time.time()),
            details={
                'operation': operation,
                'error': type(error).__name__,
                'message': str(error),
            },
        )
        self._add_event(event)
        return event

    # ========================================================================
    # Retrieval
    # ========================================================================

    def get_all_events(self) -> List[OperationEvent]:
        """Return all logged events, oldest first."""
        return list(self._events)

    def get_events_by_type(self, event_type: EventType) -> List[OperationEvent]:
        """Get all events of a specific type."""
        return [e for e in self._events if e.event_type == event_type]

    def get_recent_events(self, count: int = 10) -> List[OperationEvent]:
        """Get the most recent events."""
        return self._events[-count:] if count > 0 else []

    def print_audit_log(self, last_n: Optional[int] = None) -> None:
        """Print the audit log in a readable format."""
        events = self.get_all_events()
        if last_n:
            events = events[-last_n:]

        print("\n" + "=" * 70)
        print("OPERATION AUDIT LOG")
        print("=" * 70)

        for event in events:
            print(event)
            for k, v in event.details.items():
                print(f"    {k}: {v}")

        print("=" * 70)
        print(f"Total events: {len(self._events)}")
        print("=" * 70)

    def export_log(self) -> str:
        """Export the audit log as JSON lines."""
        return '\n'.join(event.to_record() for event in self._events)

    @classmethod
    def import_log(cls, records: str) -> 'EventLogger':
        """Import an audit log exported with export_log."""
        logger = cls(log_system_start=False)
        for line in records.splitlines():
            if line.strip():
                logger._events.append(OperationEvent.from_record(line))
        return logger

    def __len__(self) -> int:
        return len(self._events)


def create_event_logger() -> EventLogger:
    """Create a new event logger."""
    return EventLogger()
