# Controller package for UI orchestration that can be tested without a widget tree.

from .navigation_controller import NavigationController, NavigationEvent, NavigationState, transition

__all__ = [
    "NavigationController",
    "NavigationEvent",
    "NavigationState",
    "transition",
]
