"""Bearer-token persistence between CLI invocations.

The token is the only client-side state.  It lives in a single file
(``[session] token_path``) readable by the current user only, and is
removed on sign-out or when the service rejects it.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class SessionStore:
    """Read, write, and clear the stored access token."""

    def __init__(self, path: Path) -> None:
        self.path = path

    def get_token(self) -> str | None:
        if not self.path.is_file():
            return None
        token = self.path.read_text(encoding="utf-8").strip()
        return token or None

    def set_token(self, token: str) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(token, encoding="utf-8")
        self.path.chmod(0o600)
        logger.debug("Stored access token at %s", self.path)

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()
            logger.debug("Removed access token at %s", self.path)

    @property
    def has_token(self) -> bool:
        return self.get_token() is not None
