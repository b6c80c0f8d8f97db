"""
multiplayerctl

Command-line tool that controls media players through playerctl and lets you
switch which player receives playback commands.

playerctl keeps its own notion of the "current" player: the one most recently
interacted with, reported first by ``playerctl --list-all``. This tool never
stores a current player of its own. ``switch`` pokes the next player in that
list with a no-op ``status`` call so playerctl moves it to the front, and every
other command goes straight to playerctl's current player.
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .backend import build_player_service
from .common import Action, ExternalServiceError, UnknownPlayerError
from .selector import switch

APP_NAME = "multiplayerctl"

_VERBOSE = False


def _log(message: str) -> None:
    if _VERBOSE:
        print(f"[{APP_NAME}] {message}", file=sys.stderr)


def _echo(output: str) -> None:
    if output:
        sys.stdout.write(output if output.endswith("\n") else output + "\n")


def _format_args(args: argparse.Namespace) -> List[str]:
    if getattr(args, "format", None):
        return [f"--format={args.format}"]
    return []


def cmd_list(service, _: argparse.Namespace) -> None:
    for player in service.list_players():
        print(player)


def cmd_player(service, _: argparse.Namespace) -> None:
    players = service.list_players()
    if players:
        print(players[0])


def cmd_switch(service, args: argparse.Namespace) -> None:
    if args.player is not None:
        _log(f"Switching to {args.player}")
    else:
        _log(f"Switching {'back' if args.back else 'forward'}")
    chosen = switch(service, target=args.player, back=args.back)
    if chosen is None:
        print("No players to switch to.", file=sys.stderr)
        return
    print(chosen)


def cmd_forward(service, args: argparse.Namespace) -> None:
    action = Action(args.command)
    _log(f"Forwarding {action.verb} to the current player")
    _echo(service.command(None, action))


def cmd_volume(service, args: argparse.Namespace) -> None:
    extra = [args.value] if args.value is not None else []
    _echo(service.query("volume", *extra, *_format_args(args)))


def cmd_position(service, args: argparse.Namespace) -> None:
    extra = [args.value] if args.value is not None else []
    _echo(service.query("position", *extra, *_format_args(args)))


def cmd_status(service, args: argparse.Namespace) -> None:
    _echo(service.query("status", *_format_args(args)))


def cmd_metadata(service, args: argparse.Namespace) -> None:
    extra = [args.key] if args.key is not None else []
    _echo(service.query("metadata", *extra, *_format_args(args)))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=APP_NAME,
        description=(
            "Simplifies audio player control across multiple players via playerctl, "
            "allowing you to switch focus."
        ),
    )
    parser.add_argument(
        "--playerctl",
        default=None,
        metavar="PATH",
        help="playerctl executable to use (default: found on PATH)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Trace playerctl calls on stderr")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("list", help="List all available players").set_defaults(func=cmd_list)
    sub.add_parser("player", help="Print the current player").set_defaults(func=cmd_player)

    parser_switch = sub.add_parser("switch", help="Switch the current player to the next available one")
    parser_switch.add_argument("-p", "--player", default=None, help="The player to switch to")
    direction = parser_switch.add_mutually_exclusive_group()
    direction.add_argument(
        "-n", "--next", action="store_true", help="Switch to the next player (default behaviour)"
    )
    direction.add_argument("-b", "--back", action="store_true", help="Switch to the previous player")
    parser_switch.set_defaults(func=cmd_switch)

    forwarded = {
        Action.PLAY: "Play the current player",
        Action.PAUSE: "Pause the current player",
        Action.TOGGLE: "Toggle play/pause for the current player",
        Action.NEXT: "Play the next track on the current player",
        Action.PREVIOUS: "Play the previous track on the current player",
    }
    for action, text in forwarded.items():
        sub.add_parser(action.value, help=text).set_defaults(func=cmd_forward)

    parser_volume = sub.add_parser("volume", help="Print or set the volume of the current player")
    parser_volume.add_argument("value", nargs="?", default=None, help="Volume to set (e.g. 0.5, 0.1+)")
    parser_volume.add_argument("-f", "--format", default=None, help="Format used when printing the volume")
    parser_volume.set_defaults(func=cmd_volume)

    parser_position = sub.add_parser("position", help="Print or set the position of the current player")
    parser_position.add_argument("value", nargs="?", default=None, help="Position to set, in seconds (e.g. 30, 10-)")
    parser_position.add_argument("-f", "--format", default=None, help="Format used when printing the position")
    parser_position.set_defaults(func=cmd_position)

    parser_status = sub.add_parser("status", help="Print the status of the current player")
    parser_status.add_argument("-f", "--format", default=None, help="Format used when printing the status")
    parser_status.set_defaults(func=cmd_status)

    parser_metadata = sub.add_parser("metadata", help="Print the metadata of the current player")
    parser_metadata.add_argument("key", nargs="?", default=None, help="Only print the value for this key")
    parser_metadata.add_argument("-f", "--format", default=None, help="Format used when printing the metadata")
    parser_metadata.set_defaults(func=cmd_metadata)

    return parser


def main(argv: Optional[List[str]] = None, service=None) -> int:
    global _VERBOSE

    parser = build_parser()
    args = parser.parse_args(argv)
    _VERBOSE = args.verbose

    try:
        if service is None:
            service = build_player_service(args.playerctl)
        _log(f"Using {getattr(service, 'executable', service)}")
        args.func(service, args)
    except (ExternalServiceError, UnknownPlayerError) as exc:
        print(f"{APP_NAME}: {exc}", file=sys.stderr)
        return 1
    return 0
