"""Catalog navigation: state, reducers and the store that owns them."""

from src.navigation.state import NavigationState
from src.navigation.store import NavigationStore

__all__ = ["NavigationState", "NavigationStore"]
