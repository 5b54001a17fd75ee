"""
Session sign-in yielding a stable user id for store access.
"""

import hashlib
import logging
import uuid
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Session:
    """An authenticated session."""

    user_id: str
    is_anonymous: bool


class Authenticator:
    """Signs in with a custom token, falling back to an anonymous identity."""

    def __init__(self, token: Optional[str] = None, identity_path: Optional[str] = None):
        """
        Initialize the authenticator.

        Args:
            token: Optional custom token. The same token always maps to the same user.
            identity_path: Optional file that keeps the anonymous user id across runs.
                Without it the anonymous id only lives as long as this object.
        """
        self.token = token
        self.identity_path = Path(identity_path) if identity_path else None
        self._session: Optional[Session] = None

    @property
    def session(self) -> Optional[Session]:
        return self._session

    @property
    def is_ready(self) -> bool:
        return self._session is not None

    def sign_in(self) -> Session:
        """Return the current session, signing in on first use."""
        if self._session is not None:
            return self._session

        if self.token:
            user_id = hashlib.sha256(self.token.encode("utf-8")).hexdigest()[:28]
            self._session = Session(user_id=user_id, is_anonymous=False)
        else:
            self._session = Session(user_id=self._anonymous_id(), is_anonymous=True)

        logger.info(
            f"Signed in as {self._session.user_id} "
            f"({'anonymous' if self._session.is_anonymous else 'token'})"
        )
        return self._session

    def sign_out(self) -> None:
        self._session = None

    def _anonymous_id(self) -> str:
        if self.identity_path is None:
            return uuid.uuid4().hex[:28]

        if self.identity_path.exists():
            stored = self.identity_path.read_text(encoding="utf-8").strip()
            if stored:
                return stored

        user_id = uuid.uuid4().hex[:28]
        self.identity_path.parent.mkdir(parents=True, exist_ok=True)
        self.identity_path.write_text(user_id, encoding="utf-8")
        logger.debug(f"Stored anonymous identity in: {self.identity_path}")
        return user_id
