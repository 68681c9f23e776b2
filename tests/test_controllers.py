from unittest.mock import Mock

import pytest

from mockdemo.controllers import (
    RegisterUserBody,
    RegistrationError,
    UserController,
    main,
)
from mockdemo.models import BadUsername, BadUsernameModel, User, UserModel


@pytest.fixture
def mocks():
    user_model = Mock(spec=["get_user_by_username", "create_user"])
    bad_model = Mock(spec=["get_bad_username_by_username"])
    return user_model, bad_model, UserController(user_model, bad_model)


def test_username_required(mocks):
    user_model, bad_model, controller = mocks
    with pytest.raises(RegistrationError, match="^username is required$"):
        controller.register_user(RegisterUserBody(username=""))
    bad_model.get_bad_username_by_username.assert_not_called()


@pytest.mark.parametrize("name", ["user name", " user "])
def test_username_contains_spaces(mocks, name):
    user_model, bad_model, controller = mocks
    with pytest.raises(RegistrationError, match="^username cannot contain spaces$"):
        controller.register_user(RegisterUserBody(username=name))
    bad_model.get_bad_username_by_username.assert_not_called()


def test_username_not_allowed(mocks):
    user_model, bad_model, controller = mocks
    bad_model.get_bad_username_by_username.return_value = BadUsername(
        id="", username="admin"
    )
    with pytest.raises(RegistrationError, match="^username is not allowed$"):
        controller.register_user(RegisterUserBody(username="admin"))
    bad_model.get_bad_username_by_username.assert_called_once_with("admin")
    user_model.get_user_by_username.assert_not_called()


def test_username_already_exists(mocks):
    user_model, bad_model, controller = mocks
    bad_model.get_bad_username_by_username.return_value = None
    user_model.get_user_by_username.return_value = User(id="", username="existinguser")
    with pytest.raises(RegistrationError, match="^user already exists$"):
        controller.register_user(RegisterUserBody(username="existinguser"))
    bad_model.get_bad_username_by_username.assert_called_once_with("existinguser")
    user_model.get_user_by_username.assert_called_once_with("existinguser")
    user_model.create_user.assert_not_called()


def test_failed_to_create_user(mocks):
    user_model, bad_model, controller = mocks
    bad_model.get_bad_username_by_username.return_value = None
    user_model.get_user_by_username.return_value = None
    cause = RuntimeError("failed to create user")
    user_model.create_user.side_effect = cause
    with pytest.raises(RegistrationError, match="^failed to create user$") as info:
        controller.register_user(RegisterUserBody(username="newuser"))
    assert info.value.__cause__ is cause
    bad_model.get_bad_username_by_username.assert_called_once_with("newuser")
    user_model.get_user_by_username.assert_called_once_with("newuser")
    user_model.create_user.assert_called_once_with("newuser")


def test_register_success(mocks):
    user_model, bad_model, controller = mocks
    bad_model.get_bad_username_by_username.return_value = None
    user_model.get_user_by_username.return_value = None
    user_model.create_user.return_value = User(id="", username="newuser")
    user = controller.register_user(RegisterUserBody(username="newuser"))
    assert user == User(id="", username="newuser")
    bad_model.get_bad_username_by_username.assert_called_once_with("newuser")
    user_model.get_user_by_username.assert_called_once_with("newuser")
    user_model.create_user.assert_called_once_with("newuser")


def test_with_real_models():
    controller = UserController(UserModel(), BadUsernameModel())
    user = controller.register_user(RegisterUserBody(username="newuser"))
    assert user.username == "newuser"
    with pytest.raises(RegistrationError, match="^user already exists$"):
        controller.register_user(RegisterUserBody(username="newuser"))
    with pytest.raises(RegistrationError, match="^username is not allowed$"):
        controller.register_user(RegisterUserBody(username="admin"))


def test_main_returns_zero():
    assert main() == 0