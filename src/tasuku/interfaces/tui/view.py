import curses
from dataclasses import dataclass

from tasuku.core.models import Browsing
from tasuku.interfaces.render import (
    ADD_PROMPT,
    EDIT_PROMPT,
    EMPTY_LIST_TEXT,
    SELECTED_MARK,
    UNSELECTED_MARK,
    format_task,
    header_line,
)
from tasuku.interfaces.tui.data import AppState
from tasuku.interfaces.tui.helper import clip_to_width, string_width, tail_to_width
from tasuku.interfaces.tui.style import (
    COMPLETED_COLOR,
    MAIN_THEME_COLOR,
    PROMPT_COLOR,
    SELECTED_ROW_COLOR,
    SPINNER_COLOR,
    SURPRESSED_COLOR,
    HeaderLines,
    spinner_frame,
)
from tasuku.util.logger import setup_logger

logger = setup_logger("tasuku", is_stream=False, is_file=True)


@dataclass
class AppView:
    """AppView class to draw overall app screen.

    Attributes:
        stdscr: curses.window
        state: AppState
    """

    stdscr: curses.window
    state: AppState

    def draw(self) -> None:
        """Draw overall app screen."""
        self.stdscr.erase()
        max_y, max_x = self.stdscr.getmaxyx()
        if max_y < 2 or max_x < 2:
            # give up drawing if terminal size is too small
            self.stdscr.refresh()
            return

        header_height = HeaderLines.height() + 1  # +1 は "<mode> Mode" 行
        footer_height = 1
        content_height = max_y - header_height - footer_height
        if content_height <= 0:
            self.stdscr.refresh()
            return

        self._draw_header(0, max_x)
        self._draw_footer(max_y - 1, max_x)

        if isinstance(self.state.snapshot.mode, Browsing):
            self._cursor_off()
            self._draw_list(header_height, content_height, max_x)
        else:
            self._draw_prompt(header_height, max_x)

        self.stdscr.refresh()

    def _safe_addnstr(self, y: int, x: int, s: str, n: int, attr: int = 0) -> None:
        """Add a string to the screen safely."""
        max_y, max_x = self.stdscr.getmaxyx()
        # 画面外なら描かない
        if y < 0 or y >= max_y or x < 0 or x >= max_x:
            return
        # 右端を超えないようにクリップ
        limit = min(n, max_x - x)
        # 最終行では右端1マスを開ける
        if y == max_y - 1:
            limit = min(limit, max_x - x - 1)
        if limit <= 0:
            return

        s = clip_to_width(s.replace("\t", " "), limit)
        if not s:
            return
        try:
            self.stdscr.addstr(y, x, s, attr)
        except curses.error:
            logger.debug("addstr failed at (%d, %d)", y, x)

    def _color(self, pair: int) -> int:
        return curses.color_pair(pair) if curses.has_colors() else 0

    # header/footer
    def _draw_header(self, y: int, width: int) -> None:
        snapshot = self.state.snapshot
        spinner = spinner_frame(self.state.tick)
        theme = self._color(MAIN_THEME_COLOR)
        self._safe_addnstr(y, 0, spinner, width, self._color(SPINNER_COLOR))
        self._safe_addnstr(y, 2, HeaderLines.title().ljust(width), width - 2, theme)
        self._safe_addnstr(y + 1, 0, HeaderLines.help(snapshot.mode).ljust(width), width, theme)
        self._safe_addnstr(y + 3, 0, header_line(snapshot), width, curses.A_BOLD)

    def _draw_footer(self, y: int, width: int) -> None:
        snapshot = self.state.snapshot
        msg = self.state.msg_footer or f"pending: {len(snapshot.pending)} / completed: {len(snapshot.completed)}"
        self._safe_addnstr(y, 0, msg.ljust(width), width)

    # list view
    def _draw_list(self, y: int, height: int, width: int) -> None:
        snapshot = self.state.snapshot
        tasks, cursor = snapshot.visible()
        if not tasks:
            self.state.list_offset = 0
            self._safe_addnstr(y, 0, EMPTY_LIST_TEXT, width, self._color(SURPRESSED_COLOR))
            return

        # 選択行が見えるように list_offset を調整
        if cursor < self.state.list_offset:
            self.state.list_offset = cursor
        elif cursor >= self.state.list_offset + height:
            self.state.list_offset = cursor - height + 1
        self.state.list_offset = max(0, min(self.state.list_offset, max(0, len(tasks) - height)))

        start = self.state.list_offset
        end = min(start + height, len(tasks))
        is_completed = isinstance(snapshot.mode, Browsing) and snapshot.mode.kind == "completed"
        for i, idx in enumerate(range(start, end)):
            attrs = 0
            if is_completed:
                attrs |= self._color(COMPLETED_COLOR)
            if idx == cursor:
                attrs |= self._color(SELECTED_ROW_COLOR) | curses.A_REVERSE
            mark = SELECTED_MARK if idx == cursor else UNSELECTED_MARK
            line = mark + format_task(tasks[idx]).replace("\n", "")
            self._safe_addnstr(y + i, 0, line.ljust(width), width, attrs)

    # prompt (Adding / Editing)
    def _draw_prompt(self, y: int, width: int) -> None:
        snapshot = self.state.snapshot
        label = EDIT_PROMPT if snapshot.mode.label == "editing" else ADD_PROMPT
        self._safe_addnstr(y, 0, label, width, self._color(PROMPT_COLOR))

        input_x = string_width(label)
        input_width = max(1, width - input_x - 1)
        before = snapshot.buffer_text[: snapshot.buffer_cursor]
        after = snapshot.buffer_text[snapshot.buffer_cursor :]
        # カーソルより前が入りきらない場合は末尾側を表示する
        shown_before = tail_to_width(before, input_width)
        shown = clip_to_width(shown_before + after, input_width)
        self._safe_addnstr(y, input_x, shown, input_width)

        # ---- draw text cursor ---------------------------------------------
        cursor_col = input_x + string_width(shown_before)
        max_y, max_x = self.stdscr.getmaxyx()
        try:
            curses.curs_set(1)
            if 0 <= y < max_y and 0 <= cursor_col < max_x:
                self.stdscr.move(y, cursor_col)
            else:
                _msg = f"Cursor position out of screen: row={y}, col={cursor_col}"
                logger.warning(_msg)
        except curses.error:
            # cursor control may be failed depending on the terminal environment
            logger.debug("Cursor control is not supported by this terminal")

    def _cursor_off(self) -> None:
        """Turn off cursor."""
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Cursor control is not supported by this terminal")
