# ruff: noqa: T201

import argparse
import curses
import sys
from pathlib import Path

from pyresults import Err, Ok

from tasuku.core.controller import ModeController
from tasuku.core.keys import parse_key_names
from tasuku.core.store import TaskStore
from tasuku.interfaces.render import render_text
from tasuku.interfaces.tui import endpoint as tui
from tasuku.storage import get_store
from tasuku.util.dirs import load_env
from tasuku.util.logger import setup_logger, setup_mode
from tasuku.util.parse import parse_int, parse_log_level

logger = setup_logger("tasuku", is_stream=False, is_file=True)


def cmd_tui(args: argparse.Namespace, store: TaskStore) -> int:
    try:
        return tui.run(store, args)
    except curses.error as e:
        _msg = f"Failed to run TUI: {e!s}"
        logger.exception(_msg)
        print(f"Error: {_msg}", file=sys.stderr)
        return 1


def cmd_show(args: argparse.Namespace, store: TaskStore) -> int:  # noqa: ARG001
    controller = ModeController(store)
    print(render_text(controller.snapshot()), end="")
    return 0


def _read_key_file(path: str) -> list[str]:
    names: list[str] = []
    with Path(path).open(encoding="utf-8") as f:
        for line in f:
            # 行頭・行末の空白は落とすが、" " 単体は space キーとして残す
            name = line.rstrip("\n")
            if name.strip() == "" and name != " ":
                continue
            if name.lstrip().startswith("#"):
                continue
            names.append(name if name == " " else name.strip())
    return names


def cmd_replay(args: argparse.Namespace, store: TaskStore) -> int:
    names: list[str] = list(args.keys or [])
    if args.file:
        try:
            names.extend(_read_key_file(args.file))
        except (OSError, UnicodeDecodeError) as e:
            _msg = f"Failed to read key file: {e!s}"
            logger.exception(_msg)
            print(f"Error: {_msg}", file=sys.stderr)
            return 1

    match parse_key_names(names):
        case Ok(events):
            pass
        case Err(e):
            print(f"Error: {e}", file=sys.stderr)
            return 1

    controller = ModeController(store)
    for event in events:
        if not controller.handle(event):
            break
    print(render_text(controller.snapshot()), end="")
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="tasuku", description="pending / completed task manager")
    p.add_argument("--debug", action="store_true", help="debug logging")
    p.add_argument("--tick-ms", type=int, help="spinner interval in milliseconds")
    seed = p.add_mutually_exclusive_group()
    seed.add_argument("--seed", metavar="PATH", help="YAML seed file with the initial tasks")
    seed.add_argument("--no-seed", action="store_true", help="start with empty lists")
    p.set_defaults(func=cmd_tui)

    sub = p.add_subparsers(dest="cmd")

    # tui
    sp = sub.add_parser("tui", help="run TUI (default)")
    sp.set_defaults(func=cmd_tui)

    # show
    sp = sub.add_parser("show", help="print the initial screen as text")
    sp.set_defaults(func=cmd_show)

    # replay
    sp = sub.add_parser("replay", help="feed key names headlessly and print the final screen")
    sp.add_argument("keys", nargs="*", help='key names, e.g. a s i x enter ("space" for " ")')
    sp.add_argument("--file", help="file with one key name per line")
    sp.set_defaults(func=cmd_replay)

    return p


def main(argv: list[str] | None = None) -> int:
    argv = argv if argv is not None else sys.argv[1:]
    parser = build_parser()
    args = parser.parse_args(argv)

    env = load_env()
    if args.seed:
        env["SEED_PATH"] = args.seed
    if args.no_seed:
        env["SEED_PATH"] = ""
        env["SEED"] = "off"

    match parse_log_level(env["LOG_LEVEL"]):
        case Ok(level):
            setup_mode(is_debug=args.debug, level=level)
        case Err(e):
            print(f"Error: {e}", file=sys.stderr)
            return 1

    if args.tick_ms is None:
        match parse_int(env["TICK_MS"], name="TICK_MS", minimum=1):
            case Ok(tick_ms):
                args.tick_ms = tick_ms
            case Err(e):
                print(f"Error: {e}", file=sys.stderr)
                return 1
    elif args.tick_ms < 1:
        print(f"Error: Invalid --tick-ms: {args.tick_ms} (must be >= 1)", file=sys.stderr)
        return 1

    match get_store(env):
        case Ok(store):
            pass
        case Err(e):
            logger.error(e)
            print(f"Error: {e}", file=sys.stderr)
            return 1

    return args.func(args, store)  # type: ignore[no-any-return]


if __name__ == "__main__":
    sys.exit(main())
