# src/navigation/store.py
import logging
from typing import Callable, List, Optional

from src.core.models import Category, Product
from src.navigation import state as nav
from src.navigation.state import NavigationState

logger = logging.getLogger(__name__)

Listener = Callable[[NavigationState], None]


class NavigationStore:
    """
    Owns the current NavigationState. Screens receive the store from the app
    and change it only through these actions.
    """

    def __init__(self, initial: Optional[NavigationState] = None):
        self._state = initial or NavigationState()
        self._listeners: List[Listener] = []

    @property
    def state(self) -> NavigationState:
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, reducer, *args) -> NavigationState:
        new_state = reducer(self._state, *args)
        if new_state == self._state:
            return self._state
        self._state = new_state
        logger.debug(f"Navigation -> {new_state.mode} {list(new_state.breadcrumb)}")
        for listener in list(self._listeners):
            listener(new_state)
        return new_state

    # --- actions ---
    def navigate_to_category(self, category: Category) -> NavigationState:
        return self.dispatch(nav.navigate_to_category, category)

    def navigate_to_product(self, product: Product) -> NavigationState:
        return self.dispatch(nav.navigate_to_product, product)

    def go_back(self) -> NavigationState:
        return self.dispatch(nav.go_back)

    def go_home(self) -> NavigationState:
        return self.dispatch(nav.go_home)

    def navigate_to_breadcrumb_level(self, index: int) -> NavigationState:
        return self.dispatch(nav.navigate_to_breadcrumb_level, index)

    def toggle_menu(self) -> NavigationState:
        return self.dispatch(nav.toggle_menu)

    def close_menu(self) -> NavigationState:
        return self.dispatch(nav.close_menu)
