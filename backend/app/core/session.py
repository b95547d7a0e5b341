"""
Session providers.

A session is the identity of the current actor (or its absence) plus a
resolving flag. Page loaders wait for resolution before touching the
store. Providers never raise: anything that prevents identifying the
actor resolves to "no user".
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, Protocol

from jose import JWTError

from app.core.security import decode_token
from app.models.user import User, UserStatus

logger = logging.getLogger(__name__)

UserLookup = Callable[[str], Awaitable[Optional[User]]]


@dataclass(frozen=True)
class AuthSession:
    """Snapshot of a session."""
    user: Optional[User]
    resolving: bool


class SessionProvider(Protocol):
    """Interface consumed by page loaders."""

    @property
    def current_user(self) -> Optional[User]:
        ...

    @property
    def is_resolving(self) -> bool:
        ...

    async def wait_until_resolved(self) -> AuthSession:
        ...


class ResolvedSession:
    """
    Session with a settable identity.

    Created resolved by default. Pass resolving=True to start unresolved,
    then call resolve() to publish the identity to waiters.
    """

    def __init__(self, user: Optional[User] = None, resolving: bool = False):
        self._user = user
        self._resolved = asyncio.Event()
        if not resolving:
            self._resolved.set()

    @property
    def current_user(self) -> Optional[User]:
        return self._user if self._resolved.is_set() else None

    @property
    def is_resolving(self) -> bool:
        return not self._resolved.is_set()

    def resolve(self, user: Optional[User]) -> None:
        self._user = user
        self._resolved.set()

    async def wait_until_resolved(self) -> AuthSession:
        await self._resolved.wait()
        return AuthSession(user=self._user, resolving=False)


class TokenSession:
    """
    Session resolved from a JWT access token.

    Resolution runs once, on the first wait; concurrent waiters share it.
    Missing, invalid or expired tokens, unknown users and disabled
    accounts all resolve to no user.
    """

    def __init__(self, token: Optional[str], lookup_user: UserLookup):
        self.token = token
        self._lookup_user = lookup_user
        self._user: Optional[User] = None
        self._resolution: Optional[asyncio.Task] = None
        self._resolved = False

    @property
    def current_user(self) -> Optional[User]:
        return self._user

    @property
    def is_resolving(self) -> bool:
        return not self._resolved

    async def _resolve(self) -> None:
        try:
            self._user = await self._identify()
        finally:
            self._resolved = True

    async def _identify(self) -> Optional[User]:
        if not self.token:
            return None

        try:
            payload = decode_token(self.token)
        except JWTError:
            return None

        user_id = payload.get("sub")
        if not user_id:
            return None

        try:
            user = await self._lookup_user(user_id)
        except Exception as e:
            logger.warning(f"Session lookup failed for user {user_id}: {e}")
            return None

        if user is None or user.status == UserStatus.DISABLED.value:
            return None
        return user

    async def wait_until_resolved(self) -> AuthSession:
        if self._resolution is None:
            self._resolution = asyncio.ensure_future(self._resolve())
        await asyncio.shield(self._resolution)
        return AuthSession(user=self._user, resolving=False)
