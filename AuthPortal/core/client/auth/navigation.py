"""
Destination switching after a successful sign-in.

Login moves through the client-side router while the sign-up auto-login
performs a full redirect; both mechanisms are kept distinct so callers can
tell them apart.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List


class NavigationKind(Enum):
    ROUTE = "route"
    REDIRECT = "redirect"


@dataclass(frozen=True)
class NavigationEvent:
    kind: NavigationKind
    path: str


class Navigator(ABC):
    """Moves the user to another view."""

    @abstractmethod
    def navigate(self, path: str) -> None:
        """Client-side route change."""

    @abstractmethod
    def redirect(self, path: str) -> None:
        """Full reload-style redirect."""


class HistoryNavigator(Navigator):
    """Navigator that records every move in an in-memory history."""

    def __init__(self, start: str = "/"):
        self.current = start
        self.history: List[NavigationEvent] = []

    def navigate(self, path: str) -> None:
        self._go(NavigationKind.ROUTE, path)

    def redirect(self, path: str) -> None:
        self._go(NavigationKind.REDIRECT, path)

    def _go(self, kind: NavigationKind, path: str) -> None:
        self.history.append(NavigationEvent(kind, path))
        self.current = path
