"""invoicelab - session-authenticated invoice portal with a deliberate IDOR, for security training."""

__version__ = "1.0.0"
