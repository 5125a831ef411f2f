"""
Persistent client session.

Holds the bearer token and the logged-in user between runs, the way the
browser client keeps them in local storage. With no path the session lives
in memory only.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

DEFAULT_SESSION_PATH = os.path.join(os.path.expanduser("~"), ".jobboard", "session.json")


class SessionStore:
    def __init__(self, path: Optional[str] = DEFAULT_SESSION_PATH):
        self.path = path
        self.token: Optional[str] = None
        self.user: Optional[Dict[str, Any]] = None
        self.load()

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None and self.user is not None

    def load(self) -> None:
        """Read the token and user back from disk, ignoring a missing or corrupt file."""
        if not self.path or not os.path.exists(self.path):
            return
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable session file {self.path}: {e}")
            return
        self.token = data.get("token")
        self.user = data.get("user")

    def save(self, token: str, user: Dict[str, Any]) -> None:
        self.token = token
        self.user = user
        if not self.path:
            return
        os.makedirs(os.path.dirname(self.path) or ".", exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump({"token": token, "user": user}, f)

    def clear(self) -> None:
        self.token = None
        self.user = None
        if self.path and os.path.exists(self.path):
            os.remove(self.path)
