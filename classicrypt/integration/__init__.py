# Integration Module
"""
Presentation and logging layer around the core engines.

- operations.py: parses string inputs, runs the selected operation and
  renders the result text
- event_logger.py: audit trail of every dispatched operation
"""

# Lazy imports to avoid RuntimeWarning when running module directly
def __getattr__(name):
    """Lazy import to avoid circular import issues."""
    from . import event_logger, operations
    for module in (operations, event_logger):
        if hasattr(module, name):
            return getattr(module, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

__all__ = [
    'EventType',
    'OperationEvent',
    'EventLogger',
    'get_fingerprint',
    'create_event_logger',
    'Operation',
    'OperationResult',
    'perform_operation',
    'format_steps_table',
    'parse_key_matrix',
]
