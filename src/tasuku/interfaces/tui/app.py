import curses

from tasuku.core.controller import ModeController, Snapshot
from tasuku.core.keys import RESIZE, TICK, KeyEvent
from tasuku.core.store import TaskStore
from tasuku.interfaces.tui.data import AppState
from tasuku.interfaces.tui.style import (
    COMPLETED_COLOR,
    MAIN_THEME_COLOR,
    PROMPT_COLOR,
    SELECTED_ROW_COLOR,
    SPINNER_COLOR,
    SURPRESSED_COLOR,
)
from tasuku.interfaces.tui.view import AppView
from tasuku.util.logger import setup_logger

logger = setup_logger("tasuku", is_stream=False, is_file=True)

# get_wch() が返す文字 -> キー名
CHAR_KEY_MAP = {
    "\n": "enter",
    "\r": "enter",
    "\x1b": "esc",
    "\x7f": "backspace",
    "\x08": "backspace",
    "\t": "tab",
    "\x01": "ctrl+a",
    "\x03": "ctrl+c",
    "\x05": "ctrl+e",
    "\x0b": "ctrl+k",
    "\x15": "ctrl+u",
    "\x17": "ctrl+w",
}
# get_wch() が返す特殊キーコード -> キー名
CURSES_KEY_MAP = {
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
    curses.KEY_HOME: "home",
    curses.KEY_END: "end",
    curses.KEY_DC: "delete",
    curses.KEY_BACKSPACE: "backspace",
    curses.KEY_ENTER: "enter",
}


def to_key_event(key: int, ch: str | None = None) -> KeyEvent | None:
    """Translate a curses key (int code or get_wch() str) into a KeyEvent.

    Returns None for keys that have no meaning in this app.
    """
    if ch is not None:
        if ch in CHAR_KEY_MAP:
            return KeyEvent(CHAR_KEY_MAP[ch])
        if ch < " ":
            return None
        return KeyEvent.rune(ch)
    if key == curses.KEY_RESIZE:
        return RESIZE
    if key in CURSES_KEY_MAP:
        return KeyEvent(CURSES_KEY_MAP[key])
    # 従来互換: int だけ渡ってきた場合はASCII文字として扱う
    if 0 <= key < 256:
        return to_key_event(key, chr(key))
    return None


def describe_change(before: Snapshot, after: Snapshot) -> str | None:
    """Footer message for what the last key did, derived from two snapshots."""
    before_ids = {t.id: t for t in (*before.pending, *before.completed)}
    after_ids = {t.id: t for t in (*after.pending, *after.completed)}
    completed_ids = {t.id for t in after.completed} - {t.id for t in before.completed}
    if completed_ids and len(after.pending) < len(before.pending):
        return f"Completed: #{min(completed_ids)}"
    removed = sorted(set(before_ids) - set(after_ids))
    if removed:
        return f"Deleted: #{removed[0]}"
    added = sorted(set(after_ids) - set(before_ids))
    if added:
        return f"Added: #{added[0]}"
    for tid, t in after_ids.items():
        if tid in before_ids and before_ids[tid].title != t.title:
            return f"Updated: #{tid}"
    return None


class App:
    def __init__(
        self,
        stdscr: curses.window,
        store: TaskStore,
    ) -> None:
        self.stdscr = stdscr
        self.controller = ModeController(store)
        self.state = AppState(snapshot=self.controller.snapshot())
        self.view = AppView(stdscr, self.state)
        self._init_curses()

    def _init_curses(self) -> None:
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Cursor control is not supported by this terminal")
        self.stdscr.keypad(True)  # noqa: FBT003

        if curses.has_colors():
            curses.start_color()
            curses.use_default_colors()
            # color pair indexes (idx, foreground, background) with ANSI color codes
            curses.init_pair(MAIN_THEME_COLOR, 166, -1)  # header
            curses.init_pair(SPINNER_COLOR, 205, -1)  # spinner
            curses.init_pair(SELECTED_ROW_COLOR, 205, 236)  # selected-row
            curses.init_pair(SURPRESSED_COLOR, 8, -1)  # empty list
            curses.init_pair(COMPLETED_COLOR, 10, -1)  # completed list
            curses.init_pair(PROMPT_COLOR, 245, -1)  # input prompt

    def tick(self) -> None:
        """Advance the spinner. Never touches the task store."""
        self.state.tick += 1

    def handle_event(self, event: KeyEvent) -> bool:
        if event == TICK:
            self.tick()
            return True

        before = self.state.snapshot
        cont = self.controller.handle(event)
        after = self.controller.snapshot()
        # 描画用の状態は毎回新しい snapshot から作り直す
        self.state.snapshot = after
        if event.is_key:
            self.state.msg_footer = describe_change(before, after)
        return cont

    def handle_key(self, key: int, ch: str | None = None) -> bool:
        # True を返したら継続、False ならループ終了
        event = to_key_event(key, ch)
        if event is None:
            logger.debug("Ignored key: key=%r ch=%r", key, ch)
            return True
        return self.handle_event(event)
