"""Swappable infrastructure components.

Only the component bases are exported; importing the modules registers the
production implementations as their subclasses.
"""

from .identity import IdentityProvider
from .persistence import PersistenceProvider

__all__ = [
    "IdentityProvider",
    "PersistenceProvider",
]
