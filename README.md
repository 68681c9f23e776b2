# mockdemo

Three small, self-contained examples of code written against an interface,
so that tests can hand it stand-in objects instead of the real ones.

## Installation

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Summing

`mockdemo.summing.sum_numbers` adds up any number of integers and returns `0`
when called with none.

```python
from mockdemo.summing import sum_numbers

sum_numbers(1, 2, 3, 4, 5)   # 15
sum_numbers()                # 0
```

`mockdemo.summing.main` takes a list of integer strings, prints their sum and
returns `0`; with no numbers it prints the sum of one through five:

```python
from mockdemo.summing import main

main(["2", "3"])             # prints 5
main()                       # prints 15
```

The command

```
mockdemo-sum
```

prints `15`.

## Human and chicken

`mockdemo.kitchen.ChickenLike` is a protocol: any object with
`take_a_bath()` and `pluck_feathers()` methods. `Human.eat` calls those two
methods in that order and then prints `Human: Eating`. If either method
raises, the exception propagates and the human does not eat, so a test can
pass in a stand-in chicken that fails on purpose.

`Chicken` is the real implementation. Each method prints what it does and
records it in the `bathed` and `plucked` attributes.

```python
from mockdemo.kitchen import Chicken, Human

chicken = Chicken()
Human().eat(chicken)
chicken.bathed, chicken.plucked   # (True, True)
```

The command

```
mockdemo-kitchen
```

prints each step as it happens.

## User registration

`mockdemo.controllers.UserController` registers users through two stores,
both defined as protocols in `mockdemo.models`:

- `UserStore`, with `get_user_by_username(username)` returning a `User` or
  `None`, and `create_user(username)` returning the new `User`;
- `BadUsernameStore`, with `get_bad_username_by_username(username)` returning
  a `BadUsername` or `None`.

`mockdemo.models` also supplies in-memory implementations:

- `UserModel` keeps users in a dictionary keyed by username and gives each new
  user a random numeric id below one million. It accepts an optional
  `random.Random` instance for repeatable ids.
- `BadUsernameModel` holds a fixed list of forbidden names, by default
  `admin`, `root`, `test`, `user` and `guest`; another list can be passed in.

`User` and `BadUsername` are frozen dataclasses with `id` and `username`.

```python
from mockdemo.controllers import RegisterUserBody, RegistrationError, UserController
from mockdemo.models import BadUsernameModel, UserModel

controller = UserController(UserModel(), BadUsernameModel())
user = controller.register_user(RegisterUserBody(username="newuser"))
print(user.username)         # newuser

try:
    controller.register_user(RegisterUserBody(username="admin"))
except RegistrationError as error:
    print(error)             # username is not allowed
```

`register_user` checks in this order and raises `RegistrationError` with the
matching message:

- `username is required` — the name is empty;
- `username cannot contain spaces` — the name holds a space;
- `username is not allowed` — the bad-username store knows the name;
- `user already exists` — the user store already has the name;
- `failed to create user` — the user store's `create_user` raised; the
  original exception is kept as the cause.

The command

```
mockdemo-register
```

builds a controller with the in-memory stores and exits.

## What it does not do

There is no HTTP server or any other way to send registration requests from
outside Python: `mockdemo-register` only wires the controller up. Users are
kept in memory and are lost when the process ends.