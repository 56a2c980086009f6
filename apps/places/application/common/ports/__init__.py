"""Common Ports."""

from apps.places.application.common.ports.transaction_manager import TransactionManager

__all__ = ["TransactionManager"]
