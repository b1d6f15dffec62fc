"""Screen routes and a back-stack navigator."""
from enum import Enum
from typing import List, Optional
import logging

logger = logging.getLogger(__name__)


class ReaderScreens(Enum):
    ReaderHomeScreen = "ReaderHomeScreen"
    SearchScreen = "SearchScreen"
    DetailScreen = "DetailScreen"


class Navigator:
    """Keeps the route history. The last entry is the visible screen."""

    def __init__(self, start: Optional[str] = None):
        self.back_stack: List[str] = [start] if start else []

    @property
    def current(self) -> Optional[str]:
        return self.back_stack[-1] if self.back_stack else None

    def navigate(self, route: str):
        logger.info(f"Navigate to {route}")
        self.back_stack.append(route)

    def pop_back_stack(self) -> bool:
        """Drop the visible screen. False if there was nothing to go back to."""
        if len(self.back_stack) < 2:
            return False
        left = self.back_stack.pop()
        logger.info(f"Back from {left} to {self.current}")
        return True
