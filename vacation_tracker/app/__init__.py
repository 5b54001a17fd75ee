"""
Application state, view model and the controller tying them to the store.
"""

from vacation_tracker.app.controller import VacationController
from vacation_tracker.app.state import AppState
from vacation_tracker.app.view import (
    AppView,
    ConfigView,
    DashboardView,
    LoadingView,
    build_view,
)

__all__ = [
    "AppState",
    "AppView",
    "ConfigView",
    "DashboardView",
    "LoadingView",
    "VacationController",
    "build_view",
]
