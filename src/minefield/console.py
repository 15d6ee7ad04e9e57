"""
Interactive console front-end.

Reads commands such as ``o 3 4`` or ``f 0 2``, applies them to a field,
and redraws it until the game ends or the player quits.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from .field import Field, GameState
from .render import render

HELP_TEXT = "Commands: o ROW COL (open), f ROW COL (flag), q (quit)"


class Action(Enum):
    """Commands understood by the console."""

    OPEN = "open"
    FLAG = "flag"
    QUIT = "quit"


ALIASES = {
    "o": Action.OPEN,
    "open": Action.OPEN,
    "f": Action.FLAG,
    "flag": Action.FLAG,
    "q": Action.QUIT,
    "quit": Action.QUIT,
}


class CommandError(ValueError):
    """Raised for input lines that are not a valid command."""


@dataclass(frozen=True)
class Command:
    """A parsed console command."""

    action: Action
    row: int = 0
    col: int = 0


def parse_command(line: str) -> Command:
    """
    Parse one line of player input.

    Args:
        line: Raw input, e.g. "o 3 4" or "flag 0 2".

    Returns:
        The parsed command.

    Raises:
        CommandError: If the line is not a known command.
    """
    parts = line.split()
    if not parts:
        raise CommandError("Empty command")

    action = ALIASES.get(parts[0].lower())
    if action is None:
        raise CommandError(f"Unknown command: {parts[0]}")
    if action == Action.QUIT:
        return Command(action)

    if len(parts) != 3:
        raise CommandError(f"Usage: {parts[0]} ROW COL")
    try:
        row, col = int(parts[1]), int(parts[2])
    except ValueError:
        raise CommandError("ROW and COL must be integers") from None
    return Command(action, row, col)


def status_line(field: Field) -> str:
    """One-line summary shown under the board."""
    return f"Mines: {field.mine_count}  Flags: {field.flag_count}"


def run_game(
    field: Field,
    input_fn: Callable[[str], str] = input,
    output_fn: Callable[[str], None] = print,
) -> GameState:
    """
    Play a field until it is won, lost, or abandoned.

    Args:
        field: Field to play on.
        input_fn: Prompt-and-read function.
        output_fn: Line printer.

    Returns:
        The final game state; RUNNING if the player quit or input ran out.
    """
    output_fn(HELP_TEXT)
    while field.is_running:
        output_fn(render(field, coordinates=True))
        output_fn(status_line(field))
        try:
            line = input_fn("> ")
        except EOFError:
            break

        try:
            command = parse_command(line)
        except CommandError as error:
            output_fn(str(error))
            continue

        if command.action == Action.QUIT:
            break
        if command.action == Action.OPEN:
            field.open(command.row, command.col)
        else:
            field.toggle_flag(command.row, command.col)

    if not field.is_running:
        output_fn(render(field, coordinates=True))
        output_fn("You won!" if field.is_won else "Boom! You lost.")
    return field.state
