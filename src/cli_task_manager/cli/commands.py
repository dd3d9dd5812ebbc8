# src/cli_task_manager/cli/commands.py

from __future__ import annotations

import argparse
import logging
from collections.abc import Callable
from dataclasses import dataclass

from ..tasks.task_api import Emitter, add_task, list_tasks, mark_done, remove_task
from ..tasks.task_models import MAX_TASK_ID, Task
from ..tasks.task_store import TaskStore

CommandHandler = Callable[[list[Task], argparse.Namespace, Emitter], None]
ParserConfigurer = Callable[[argparse.ArgumentParser], None]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Command:
    name: str
    handler: CommandHandler
    help_text: str
    # Mutating commands write the whole list back after the handler succeeds.
    mutates: bool
    aliases: tuple[str, ...] = ()
    configure: ParserConfigurer | None = None


class CommandRegistry:
    """Subcommand registry: builds the argparse subparsers and dispatches one command per run."""

    def __init__(self) -> None:
        self._commands: dict[str, Command] = {}
        self._aliases: dict[str, str] = {}

    def register(
        self,
        name: str,
        handler: CommandHandler,
        help_text: str,
        *,
        mutates: bool,
        aliases: list[str] | None = None,
        configure: ParserConfigurer | None = None,
    ) -> None:
        aliases = aliases or []
        key = name.lower()
        self._commands[key] = Command(
            name=key,
            handler=handler,
            help_text=help_text,
            mutates=mutates,
            aliases=tuple(a.lower() for a in aliases),
            configure=configure,
        )
        self._aliases[key] = key
        for alias in aliases:
            self._aliases[alias.lower()] = key

    def names(self) -> list[str]:
        return list(self._commands)

    def get(self, name: str) -> Command:
        key = self._aliases.get(name.lower())
        if key is None:
            raise KeyError(name)
        return self._commands[key]

    def add_subparsers(self, parser: argparse.ArgumentParser) -> None:
        sub = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)
        for command in self._commands.values():
            p = sub.add_parser(
                command.name,
                aliases=list(command.aliases),
                help=command.help_text,
                description=command.help_text,
            )
            if command.configure is not None:
                command.configure(p)

    def run(self, store: TaskStore, args: argparse.Namespace, emit: Emitter = print) -> None:
        """
        Load -> one handler -> save (mutating commands only).

        Any TaskError propagates; in that case nothing has been written.
        """
        command = self.get(args.command)
        tasks = store.load()
        command.handler(tasks, args, emit)
        if command.mutates:
            store.save(tasks)
        logger.debug("Command %s finished (tasks=%d)", command.name, len(tasks))


registry = CommandRegistry()


def task_id_arg(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid task id: {raw!r}") from None
    if not 0 <= value <= MAX_TASK_ID:
        raise argparse.ArgumentTypeError(f"invalid task id: {raw!r}")
    return value


def _configure_add(p: argparse.ArgumentParser) -> None:
    p.add_argument("description", nargs="+", help="Task text (several words are joined with spaces).")


def _configure_list(p: argparse.ArgumentParser) -> None:
    p.add_argument("-a", "--all", action="store_true", help="Include completed tasks.")


def _configure_id(p: argparse.ArgumentParser) -> None:
    p.add_argument("id", type=task_id_arg, help="Task id as shown by 'list'.")


def cmd_add(tasks: list[Task], args: argparse.Namespace, emit: Emitter) -> None:
    add_task(tasks, " ".join(args.description))


def cmd_list(tasks: list[Task], args: argparse.Namespace, emit: Emitter) -> None:
    list_tasks(tasks, include_completed=args.all, emit=emit)


def cmd_done(tasks: list[Task], args: argparse.Namespace, emit: Emitter) -> None:
    mark_done(tasks, args.id)


def cmd_remove(tasks: list[Task], args: argparse.Namespace, emit: Emitter) -> None:
    remove_task(tasks, args.id)


registry.register("add", cmd_add, help_text="Add a new task.", mutates=True, configure=_configure_add)
registry.register(
    "list",
    cmd_list,
    help_text="List tasks (use --all to include completed).",
    mutates=False,
    aliases=["ls"],
    configure=_configure_list,
)
registry.register("done", cmd_done, help_text="Mark a task as completed.", mutates=True, configure=_configure_id)
registry.register(
    "remove", cmd_remove, help_text="Remove a task.", mutates=True, aliases=["rm"], configure=_configure_id
)
