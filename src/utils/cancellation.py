"""
Signal d'annulation cooperatif.

Le jeton est transmis aux operations longues, qui le consultent et
s'interrompent proprement. L'annulation n'est pas une erreur: elle se
traduit par asyncio.CancelledError.
"""

import asyncio
import threading


class CancellationToken:
    """
    Jeton d'annulation partageable entre threads et taches asyncio.

    Example:
        token = CancellationToken()
        ...
        token.cancel()
        token.raise_if_cancellation_requested()  # leve asyncio.CancelledError
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        """Demande l'annulation. Idempotent."""
        self._event.set()

    @property
    def is_cancellation_requested(self) -> bool:
        """Indique si l'annulation a ete demandee."""
        return self._event.is_set()

    def raise_if_cancellation_requested(self) -> None:
        """
        Interrompt l'operation en cours si l'annulation a ete demandee.

        Raises:
            asyncio.CancelledError: Si cancel() a ete appele
        """
        if self._event.is_set():
            raise asyncio.CancelledError("Cancellation requested")
