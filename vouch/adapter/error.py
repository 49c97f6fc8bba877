"""Errors raised by outbound adapters.

Callers treat these as best-effort failures: they are logged and never undo
an invitation or a verification.
"""


class AdapterError(Exception):
    """An external service could not be reached or refused a request."""


class MailDeliveryError(AdapterError):
    """Mail provider rejected or failed to accept a mail."""


class ReputationTriggerError(AdapterError):
    """Reputation service did not accept an update request."""
