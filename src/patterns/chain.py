"""Chain of Responsibility: food requests passed along a chain of animals."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

DEFAULT_FOODS = ("Nut", "Banana", "Cup of coffee")


class Handler:
    """A link in the chain. Unhandled requests go to the next link."""

    def __init__(self) -> None:
        self._next: Handler | None = None

    def set_next(self, handler: Handler) -> Handler:
        """Attach ``handler`` after this one and return it.

        Returning the argument allows ``monkey.set_next(squirrel).set_next(dog)``.
        """
        self._next = handler
        return handler

    def handle(self, request: str) -> str | None:
        if self._next is not None:
            return self._next.handle(request)
        return None


class FoodHandler(Handler):
    """Eats a single kind of food and passes on everything else."""

    name = ""
    food = ""

    def handle(self, request: str) -> str | None:
        if request == self.food:
            return f"{self.name}: I'll eat the {request}."
        return super().handle(request)


class MonkeyHandler(FoodHandler):
    name = "Monkey"
    food = "Banana"


class SquirrelHandler(FoodHandler):
    name = "Squirrel"
    food = "Nut"


class DogHandler(FoodHandler):
    name = "Dog"
    food = "MeatBall"


def build_chain(*handlers: Handler) -> Handler:
    """Link ``handlers`` in order and return the head."""
    if not handlers:
        raise ValueError("build_chain needs at least one handler")
    for current, following in zip(handlers, handlers[1:]):
        current.set_next(following)
    return handlers[0]


def client_code(handler: Handler, foods: Iterable[str] = DEFAULT_FOODS) -> Iterator[str]:
    """Offer each food to ``handler`` and yield the narration."""
    for food in foods:
        yield f"Client: Who wants a {food}?"
        result = handler.handle(food)
        if result is not None:
            yield f"   {result}"
        else:
            yield f"   {food} was left untouched."
