"""A human who prepares and eats a chicken."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol


class ChickenLike(Protocol):
    """Anything that can be prepared for eating."""

    def take_a_bath(self) -> None:
        """Get washed; raise on failure."""

    def pluck_feathers(self) -> None:
        """Lose the feathers; raise on failure."""


@dataclass
class Chicken:
    """A real chicken that remembers how far it has been prepared."""

    bathed: bool = False
    plucked: bool = False

    def take_a_bath(self) -> None:
        """Wash the chicken and report it."""
        self.bathed = True
        print("Chicken: Taking a bath")

    def pluck_feathers(self) -> None:
        """Pluck the chicken and report it."""
        self.plucked = True
        print("Chicken: Plucking feathers")


class Human:
    """Someone who eats chickens once they are prepared."""

    def eat(self, chicken: ChickenLike) -> None:
        """Bathe and pluck the chicken, then eat it.

        Any error raised while preparing the chicken propagates and the
        human does not eat.
        """
        chicken.take_a_bath()
        chicken.pluck_feathers()
        print("Human: Eating")


def main(argv: Sequence[str] | None = None) -> int:
    """Have a human eat a chicken."""
    Human().eat(Chicken())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())