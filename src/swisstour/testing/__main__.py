"""SwissTour simulation CLI.

This module provides an interactive command-line interface to simulate
tournaments and check saved tournaments for repeat pairings.
"""

# SwissTour
# Copyright (C) 2025  SwissTour developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from swisstour.config import TournamentSettings
from swisstour.constants import APP_NAME
from swisstour.exceptions import SwissTourException
from swisstour.models import Player, Round
from swisstour.storage import JsonFileRepository
from swisstour.testing.simulator import SimulationConfig, TournamentSimulator
from swisstour.utils import format_date, setup_logger
from swisstour.validation import validate_no_repeat_opponents

logger = setup_logger(__name__)

# ANSI escapes for terminal output
GREEN = "\033[92m"
YELLOW = "\033[93m"
RED = "\033[91m"
BOLD = "\033[1m"
RESET = "\033[0m"

EXIT_WORDS = ("exit", "/exit", "quit", "q")


def format_player(player: Player, show_ratings: bool) -> str:
    if show_ratings:
        return str(player)
    return player.name


def run_simulate_command(args: argparse.Namespace) -> int:
    """Run the simulate command."""
    settings = TournamentSettings(show_ratings=not args.hide_ratings)
    config = SimulationConfig(
        num_players=args.players,
        num_rounds=args.rounds or settings.default_rounds,
        seed=args.seed,
        draw_percentage=args.draws,
    )

    repository = JsonFileRepository(args.output) if args.output else None
    result = TournamentSimulator(config, repository).run()
    tournament = result.tournament

    print(
        f"\n{BOLD}{tournament.name}{RESET} "
        f"({format_date(tournament.date)}, {tournament.rounds_total} rounds, "
        f"{config.num_players} players)\n"
    )
    print(f"  {'#':>3}  {'Player':28} {'Pts':>5} {'Buch':>6}  W/D/L")
    for row in result.standings:
        player = row.player
        print(
            f"  {row.rank:>3}  {format_player(player, settings.show_ratings):28} "
            f"{row.live_points:>5.1f} {player.buchholz:>6.1f}  "
            f"{player.wins}/{player.draws}/{player.losses}"
        )

    if result.repeat_pairings:
        print(
            f"\n{YELLOW}{len(result.repeat_pairings)} repeat pairing(s) "
            f"were unavoidable{RESET}"
        )
    else:
        print(f"\n{GREEN}No repeat pairings{RESET}")

    if args.output:
        print(
            f"{GREEN}Tournament saved to: "
            f"{Path(args.output) / (tournament.id + '.json')}{RESET}"
        )
    return 0


def run_validate_command(args: argparse.Namespace) -> int:
    """Run the validation command.

    Each round is checked against the opponent histories rebuilt from the
    rounds before it.
    """
    file_path = Path(args.file)
    if not file_path.exists():
        print(f"{RED}Error: File not found: {file_path}{RESET}")
        return 1

    print(f"\n{BOLD}Validating tournament: {file_path}{RESET}")
    with open(file_path, "r", encoding="utf-8") as f:
        document = json.load(f)

    players = [Player.from_dict(p) for p in document.get("players", [])]
    rounds = sorted(
        (Round.from_dict(r) for r in document.get("rounds", [])),
        key=lambda r: r.round_number,
    )

    # replay opponent histories from scratch
    history = {
        p.id: Player(id=p.id, tournament_id=p.tournament_id, name=p.name)
        for p in players
    }
    invalid_rounds = 0
    for round_data in rounds:
        if args.round is None or round_data.round_number == args.round:
            report = validate_no_repeat_opponents(list(history.values()), round_data)
            colour = GREEN if report.valid else RED
            print(f"  {colour}{report.summary}{RESET}")
            if not report.valid:
                invalid_rounds += 1
        for pairing in round_data.games:
            white = history.get(pairing.white_player_id)
            black = history.get(pairing.black_player_id)
            if white is not None and black is not None:
                white.opponents_played.append(black.id)
                black.opponents_played.append(white.id)

    return 1 if invalid_rounds else 0


def add_simulate_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--players", type=int, default=9, help="Number of players")
    parser.add_argument("--rounds", type=int, help="Number of rounds (3-7)")
    parser.add_argument("--seed", type=int, help="Random seed")
    parser.add_argument("--draws", type=int, default=30, help="Draw percentage")
    parser.add_argument("--output", help="Directory to save the tournament in")
    parser.add_argument(
        "--hide-ratings", action="store_true", help="Hide ratings in the standings"
    )


def add_validate_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--file", required=True, help="Tournament file (JSON)")
    parser.add_argument("--round", type=int, help="Specific round to validate")


# name -> (help, argument setup, handler, options offered by the completer)
SUBCOMMANDS = {
    "simulate": (
        "Simulate a random tournament and print the standings",
        add_simulate_arguments,
        run_simulate_command,
        ["--players", "--rounds", "--seed", "--draws", "--output", "--hide-ratings"],
    ),
    "validate": (
        "Check a saved tournament for repeat pairings",
        add_validate_arguments,
        run_validate_command,
        ["--file", "--round"],
    ),
}


def create_main_parser() -> argparse.ArgumentParser:
    """Create main argument parser."""
    parser = argparse.ArgumentParser(
        prog="swisstour-sim",
        description=f"Simulate and validate {APP_NAME} tournaments",
        epilog="Run without arguments for an interactive session.",
    )
    parser.add_argument(
        "--interactive", "-i", action="store_true", help="Start in interactive mode"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    for name, (help_text, add_arguments, handler, _) in SUBCOMMANDS.items():
        sub_parser = subparsers.add_parser(name, help=help_text)
        add_arguments(sub_parser)
        sub_parser.set_defaults(func=handler)
    return parser


def create_command_parser(command: str) -> argparse.ArgumentParser:
    """Standalone parser for one subcommand, used by the interactive session."""
    help_text, add_arguments, _, _ = SUBCOMMANDS[command]
    parser = argparse.ArgumentParser(prog=command, description=help_text)
    add_arguments(parser)
    return parser


def print_commands_list() -> None:
    print(f"\n{BOLD}Commands:{RESET}")
    for name, (help_text, _, _, _) in SUBCOMMANDS.items():
        print(f"  {GREEN}{name:10}{RESET} {help_text}")
    print(f"  {GREEN}{'help':10}{RESET} Show this list, or 'help <command>'")
    print(f"  {GREEN}{'exit':10}{RESET} Leave the session\n")


def create_completer() -> NestedCompleter:
    """Create autocomplete completer for interactive mode."""
    # "/command" and "command" are both accepted
    completions = {}
    for name, (_, _, _, options) in SUBCOMMANDS.items():
        completions[name] = completions[f"/{name}"] = WordCompleter(options)
    completions["help"] = completions["/help"] = WordCompleter(list(SUBCOMMANDS))
    completions["exit"] = None
    return NestedCompleter.from_nested_dict(completions)


def execute_command(command: str, args_list) -> Optional[int]:
    """Parse and run one interactive command line."""
    if command == "help":
        if args_list and args_list[0] in SUBCOMMANDS:
            create_command_parser(args_list[0]).print_help()
        else:
            print_commands_list()
        return None
    handler = SUBCOMMANDS[command][2]
    return handler(create_command_parser(command).parse_args(args_list))


def run_interactive_mode() -> int:
    """Run in interactive mode with autocomplete."""
    print(f"{BOLD}{APP_NAME} simulator{RESET}, type 'help' for commands")
    session = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=Style.from_dict({"prompt": "#00aa00 bold"}),
    )

    while True:
        try:
            parts = session.prompt("swisstour> ").split()
        except KeyboardInterrupt:
            print(f"{YELLOW}Use 'exit' or 'quit' to leave{RESET}")
            continue
        except EOFError:
            break
        if not parts:
            continue
        if parts[0] in EXIT_WORDS:
            break

        command = parts[0].lstrip("/")
        if command not in SUBCOMMANDS and command != "help":
            print(f"{RED}Unknown command: {command}{RESET}")
            continue
        try:
            execute_command(command, parts[1:])
        except SystemExit:
            # argparse exits on bad arguments
            continue
        except (SwissTourException, OSError, ValueError) as e:
            print(f"{RED}Error: {e}{RESET}")
            logger.exception("Command execution failed")
    return 0


def run_standard_mode(argv=None) -> int:
    """Run in standard CLI mode (non-interactive)."""
    parser = create_main_parser()
    args = parser.parse_args(argv)

    if args.interactive:
        return run_interactive_mode()

    if hasattr(args, "func"):
        try:
            return args.func(args)
        except (SwissTourException, OSError, ValueError) as e:
            print(f"{RED}Error: {e}{RESET}")
            logger.error("Command failed: %s", e)
            return 1
    parser.print_help()
    return 0


def main() -> int:
    """Main entry point for the swisstour-sim CLI."""
    if len(sys.argv) == 1:
        return run_interactive_mode()
    return run_standard_mode()


if __name__ == "__main__":
    sys.exit(main())
