"""Driver routines narrating each pattern."""

from __future__ import annotations

from collections.abc import Callable

import click

from patterns.chain import DogHandler, MonkeyHandler, SquirrelHandler, client_code
from patterns.config import DemoConfig
from patterns.iterator import WordsCollection
from patterns.log import console_listener, dim
from patterns.memento import HistoryStack, StateHolder
from patterns.singleton import Singleton

Echo = Callable[[str], None]

INITIAL_STATE = "Super-duper-super-puper-super."


def run_memento(
    echo: Echo = click.echo,
    config: DemoConfig | None = None,
    *,
    color: bool = True,
) -> StateHolder:
    """Three backup/mutate rounds, a history listing, then two undos."""
    listener = console_listener(echo, color=color)
    holder = StateHolder(INITIAL_STATE, config=config, listener=listener)
    caretaker = HistoryStack(holder)
    caretaker.subscribe(listener)

    for _ in range(3):
        caretaker.backup()
        holder.mutate()

    echo("")
    for entry in caretaker.history():
        echo(dim(entry.label) if color else entry.label)

    echo("")
    echo("Client: Now, let's rollback!")
    caretaker.undo()

    echo("")
    echo("Client: Once more!")
    caretaker.undo()
    return holder


def run_chain(echo: Echo = click.echo) -> None:
    monkey = MonkeyHandler()
    squirrel = SquirrelHandler()
    dog = DogHandler()
    monkey.set_next(squirrel).set_next(dog)

    # Requests can enter the chain at any link, not only the head.
    echo("Chain: Monkey > Squirrel > Dog")
    echo("")
    for line in client_code(monkey):
        echo(line)

    echo("")
    echo("Subchain: Squirrel > Dog")
    echo("")
    for line in client_code(squirrel):
        echo(line)


def run_iterator(echo: Echo = click.echo) -> None:
    collection = WordsCollection()
    collection.add_item("First")
    collection.add_item("Second")
    collection.add_item("Third")

    echo("Straight traversal:")
    for element in collection:
        echo(element)

    echo("")
    echo("Reverse traversal:")
    collection.reverse_direction()
    for element in collection:
        echo(element)


def run_singleton(echo: Echo = click.echo) -> bool:
    s1 = Singleton.get_instance()
    s2 = Singleton.get_instance()

    if s1 is s2:
        echo("Singleton works, both variables contain the same instance.")
        return True
    echo("Singleton failed, variables contain different instances.")
    return False
