import argparse
import curses
import os

from tasuku.core.keys import TICK
from tasuku.core.store import TaskStore
from tasuku.interfaces.tui.app import App
from tasuku.util.logger import setup_logger

logger = setup_logger("tasuku", is_stream=False, is_file=True)

DEFAULT_TICK_MS = 100


def main(
    stdscr: curses.window,
    store: TaskStore,
    args: argparse.Namespace | None = None,
) -> int:
    app = App(stdscr, store)
    tick_ms = getattr(args, "tick_ms", None) or DEFAULT_TICK_MS
    # 入力待ちのタイムアウトを spinner の tick として同じループで処理する
    stdscr.timeout(tick_ms)
    logger.info("TUI started (tick=%dms)", tick_ms)
    while True:
        app.view.draw()
        try:
            key_raw = stdscr.get_wch()
        except curses.error:
            # timeout: キー入力なし
            app.handle_event(TICK)
            continue
        except KeyboardInterrupt:
            key_raw = "\x03"
        key = ord(key_raw) if isinstance(key_raw, str) else key_raw
        ch = key_raw if isinstance(key_raw, str) else None
        cont = app.handle_key(key, ch)
        if not cont:
            break
    logger.info("TUI quit")
    return 0


def run(store: TaskStore, args: argparse.Namespace | None = None) -> int:
    # Esc を単独キーとしてすぐ受け取れるようにする
    os.environ.setdefault("ESCDELAY", "25")
    return curses.wrapper(main, store, args)

