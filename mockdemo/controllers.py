"""User registration."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from mockdemo.models import (
    BadUsernameModel,
    BadUsernameStore,
    User,
    UserModel,
    UserStore,
)


@dataclass(frozen=True)
class RegisterUserBody:
    username: str


class RegistrationError(Exception):
    """A user could not be registered."""


class UserController:
    """Validates registration requests and creates users."""

    def __init__(
        self, user_model: UserStore, bad_username_model: BadUsernameStore
    ) -> None:
        self.user_model = user_model
        self.bad_username_model = bad_username_model

    def register_user(self, body: RegisterUserBody) -> User:
        """Register the requested username and return the new user.

        Raises RegistrationError when the name is empty, holds a space,
        is forbidden, is taken, or the store fails to create it.
        """
        username = body.username
        if not username:
            raise RegistrationError("username is required")
        if " " in username:
            raise RegistrationError("username cannot contain spaces")
        if self.bad_username_model.get_bad_username_by_username(username) is not None:
            raise RegistrationError("username is not allowed")
        if self.user_model.get_user_by_username(username) is not None:
            raise RegistrationError("user already exists")
        try:
            return self.user_model.create_user(username)
        except Exception as exc:
            raise RegistrationError("failed to create user") from exc


def main(argv: Sequence[str] | None = None) -> int:
    """Wire the controller to its in-memory stores."""
    UserController(UserModel(), BadUsernameModel())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())