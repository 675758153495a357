"""
Utilitaires partagés pour shokosync.

- CancellationToken : signal d'annulation coopératif
"""

from src.utils.cancellation import CancellationToken

__all__ = [
    "CancellationToken",
]
