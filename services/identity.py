"""Caller identity resolution.

Identity is resolved once, at the boundary of the application, and then passed
explicitly into every :class:`~services.tasks.TaskService` operation. Nothing
in this module keeps a process-wide "current user".
"""
from __future__ import annotations

import logging
import secrets
import uuid
from pathlib import Path
from typing import Dict, Optional, Protocol

from core.errors import Unauthenticated
from core.settings import IDENTITY_PATH
from utils.fs import write_text_atomic

logger = logging.getLogger("taskpad.identity")


class IdentityResolver(Protocol):
    def resolve(self, context: Optional[str]) -> Optional[str]:
        """Return the authenticated user id for ``context`` or ``None``."""
        ...


def require_identity(caller: Optional[str]) -> str:
    """Return ``caller`` if it names a user, otherwise raise :class:`Unauthenticated`."""

    if caller is None or not str(caller).strip():
        raise Unauthenticated()
    return str(caller)


class TokenIdentityResolver:
    """Maps verified session tokens to user ids.

    Token issuance belongs to the external auth provider; ``issue`` exists so
    that a provider callback (or a test) can register a verified session.
    """

    def __init__(self) -> None:
        self._sessions: Dict[str, str] = {}

    def issue(self, user_id: str) -> str:
        user = require_identity(user_id)
        token = secrets.token_urlsafe(32)
        self._sessions[token] = user
        logger.info("Session issued for user %s", user)
        return token

    def revoke(self, token: str) -> None:
        user = self._sessions.pop(token, None)
        if user is not None:
            logger.info("Session revoked for user %s", user)

    def resolve(self, context: Optional[str]) -> Optional[str]:
        if not context:
            return None
        return self._sessions.get(context)


def _read_existing(path: Path) -> str | None:
    try:
        if path.exists():
            value = path.read_text(encoding="utf-8").strip()
            if value:
                return value
    except OSError as exc:
        logger.warning("Could not read identity file %s: %s", path, exc)
        return None
    return None


class LocalIdentityResolver:
    """Single-user desktop mode: one stable user id per installation."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = Path(path or IDENTITY_PATH)
        self._cached: Optional[str] = None

    def resolve(self, context: Optional[str] = None) -> Optional[str]:
        if self._cached:
            return self._cached
        existing = _read_existing(self._path)
        if existing:
            self._cached = existing
            return existing

        new_id = uuid.uuid4().hex
        try:
            write_text_atomic(self._path, new_id)
        except OSError as exc:
            # Unpersisted ids would orphan every task on the next start.
            logger.error("Could not persist local identity to %s: %s", self._path, exc)
            return None
        logger.info("Created local identity %s", new_id)
        self._cached = new_id
        return new_id


__all__ = [
    "IdentityResolver",
    "LocalIdentityResolver",
    "TokenIdentityResolver",
    "require_identity",
]
