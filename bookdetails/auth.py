"""Session identity."""
from typing import Optional


class Session:
    """The signed-in user, if any."""

    def __init__(self, user_id: Optional[str] = None):
        self._user_id = user_id

    @property
    def current_user_id(self) -> Optional[str]:
        return self._user_id
