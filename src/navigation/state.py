# src/navigation/state.py
"""
Navigation state for the catalog menu, and the pure reducers that move it.

Home            no category open, no product selected
CategoryOpen    breadcrumb non-empty, a category's children on screen
ProductOpen     a product selected, menu closed

Every reducer takes a state and returns a new one; misuse (back at Home,
reselecting the open category) returns an equivalent state, never an error.
"""
from __future__ import annotations

from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict

from src.core.models import Category, Product


class NavigationState(BaseModel):
    model_config = ConfigDict(frozen=True)

    current_path: Tuple[str, ...] = ()
    breadcrumb: Tuple[str, ...] = ()
    category_path: Tuple[Category, ...] = ()
    current_category: Optional[Category] = None
    selected_product: Optional[Product] = None
    # Categories that were open before each drill-down
    menu_history: Tuple[Category, ...] = ()
    is_menu_open: bool = False

    @property
    def is_home(self) -> bool:
        return not self.current_path and self.selected_product is None

    @property
    def mode(self) -> str:
        if self.selected_product is not None:
            return "product"
        if self.current_path:
            return "category"
        return "home"


def _start_at(category: Category) -> NavigationState:
    return NavigationState(
        current_path=(category.id,),
        breadcrumb=(category.name,),
        category_path=(category,),
        current_category=category,
        is_menu_open=True,
    )


def navigate_to_category(state: NavigationState, category: Category) -> NavigationState:
    """
    Drill into a child of the open category, or start over at ``category``.

    Anything that is not a direct child (e.g. a pick from the bottom bar) resets the path.
    """
    current = state.current_category

    if current is not None and current.path == category.path:
        return state.model_copy(update={"selected_product": None, "is_menu_open": True})

    if not state.current_path or current is None or not current.has_child_category(category.id):
        return _start_at(category)

    return state.model_copy(update={
        "current_path": state.current_path + (category.id,),
        "breadcrumb": state.breadcrumb + (category.name,),
        "category_path": state.category_path + (category,),
        "current_category": category,
        "selected_product": None,
        "menu_history": state.menu_history + (current,),
        "is_menu_open": True,
    })


def navigate_to_product(state: NavigationState, product: Product) -> NavigationState:
    return state.model_copy(update={"selected_product": product, "is_menu_open": False})


def go_back(state: NavigationState) -> NavigationState:
    if not state.current_path:
        return state

    category_path = state.category_path[:-1]
    if not category_path:
        return go_home(state)

    return state.model_copy(update={
        "current_path": state.current_path[:-1],
        "breadcrumb": state.breadcrumb[:-1],
        "category_path": category_path,
        "current_category": category_path[-1],
        "selected_product": None,
        "menu_history": state.menu_history[:-1],
    })


def go_home(state: Optional[NavigationState] = None) -> NavigationState:
    return NavigationState()


def navigate_to_breadcrumb_level(state: NavigationState, index: int) -> NavigationState:
    """Truncate to breadcrumb ``index`` (0-based) and reopen the menu there; -1 is Home."""
    if index < 0 or not state.category_path:
        return go_home(state)

    category_path = state.category_path[:index + 1]
    return NavigationState(
        current_path=tuple(c.id for c in category_path),
        breadcrumb=tuple(c.name for c in category_path),
        category_path=category_path,
        current_category=category_path[-1],
        menu_history=category_path[:-1],
        is_menu_open=True,
    )


def toggle_menu(state: NavigationState) -> NavigationState:
    return state.model_copy(update={"is_menu_open": not state.is_menu_open})


def close_menu(state: NavigationState) -> NavigationState:
    if not state.is_menu_open:
        return state
    return state.model_copy(update={"is_menu_open": False})
