"""In-memory user and forbidden-username stores."""

from __future__ import annotations

import random
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class User:
    id: str
    username: str


@dataclass(frozen=True)
class BadUsername:
    id: str
    username: str


class UserStore(Protocol):
    """Storage for registered users."""

    def get_user_by_username(self, username: str) -> User | None:
        """Return the user with this name, or None."""

    def create_user(self, username: str) -> User:
        """Store and return a new user; raise on failure."""


class BadUsernameStore(Protocol):
    """Lookup of usernames that may not be registered."""

    def get_bad_username_by_username(self, username: str) -> BadUsername | None:
        """Return the forbidden entry for this name, or None."""


_DEFAULT_BAD_USERNAMES = ("admin", "root", "test", "user", "guest")


class UserModel:
    """Users kept in a dictionary keyed by username."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._users: dict[str, User] = {}
        self._rng = rng if rng is not None else random.Random()

    def get_user_by_username(self, username: str) -> User | None:
        return self._users.get(username)

    def create_user(self, username: str) -> User:
        """Create a user with a random numeric id below one million."""
        user = User(id=str(self._rng.randrange(1_000_000)), username=username)
        self._users[user.username] = user
        return user


class BadUsernameModel:
    """A fixed list of forbidden usernames."""

    def __init__(self, usernames: Iterable[str] = _DEFAULT_BAD_USERNAMES) -> None:
        self._bad_usernames = [
            BadUsername(id=str(number), username=name)
            for number, name in enumerate(usernames, start=1)
        ]

    def get_bad_username_by_username(self, username: str) -> BadUsername | None:
        return next(
            (bad for bad in self._bad_usernames if bad.username == username), None
        )