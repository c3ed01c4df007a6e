from dataclasses import dataclass, replace

from tasuku.core.buffer import LineBuffer
from tasuku.core.keys import (
    ADD_KEYS,
    CONFIRM_KEYS,
    DELETE_KEYS,
    DOWN_KEYS,
    EDIT_KEYS,
    QUIT_KEYS,
    TOGGLE_VIEW_KEYS,
    UP_KEYS,
    KeyEvent,
)
from tasuku.core.models import Adding, Browsing, Editing, ListKind, Mode, Task, other_kind
from tasuku.core.store import TaskStore
from tasuku.util.logger import setup_logger

logger = setup_logger("tasuku", is_stream=False, is_file=True)


@dataclass(frozen=True)
class Snapshot:
    """Read-only view of (mode, store) handed to renderers."""

    mode: Mode
    pending: tuple[Task, ...]
    completed: tuple[Task, ...]
    pending_cursor: int
    completed_cursor: int
    buffer_text: str = ""
    buffer_cursor: int = 0
    quitting: bool = False

    def visible(self) -> tuple[tuple[Task, ...], int]:
        """Tasks and cursor of the list shown in Browsing mode."""
        if isinstance(self.mode, Browsing) and self.mode.kind == "completed":
            return self.completed, self.completed_cursor
        return self.pending, self.pending_cursor


class ModeController:
    """Finite-state machine that maps key events onto TaskStore operations.

    States: Browsing(pending) / Browsing(completed) / Adding / Editing(id).
    Initial state is Browsing(pending). Once a quit key is handled the
    controller is terminal and ignores further events.
    """

    def __init__(self, store: TaskStore | None = None) -> None:
        self.store = store if store is not None else TaskStore()
        self.mode: Mode = Browsing("pending")
        self.quitting = False

    def handle(self, event: KeyEvent) -> bool:
        """Process one event. Returns False when the app should terminate."""
        if self.quitting:
            return False
        # tick / resize は状態を変えない
        if not event.is_key:
            return True

        before = self.mode
        match self.mode:
            case Browsing(kind=kind):
                self._handle_browsing(kind, event)
            case Adding(buffer=buffer):
                self._handle_adding(buffer, event)
            case Editing(target_id=target_id, buffer=buffer):
                self._handle_editing(target_id, buffer, event)

        if self.mode != before:
            logger.debug("Mode %s -> %s (key=%s)", before.label, self.mode.label, event.name)
        return not self.quitting

    def snapshot(self) -> Snapshot:
        mode = self.mode
        buffer = None
        if isinstance(mode, Adding | Editing):
            buffer = mode.buffer
            # snapshot 側から scratch buffer を書き換えられないように複製する
            mode = replace(mode, buffer=LineBuffer(buffer.text, buffer.cursor))
        return Snapshot(
            mode=mode,
            pending=tuple(Task(t.id, t.title) for t in self.store.pending.items),
            completed=tuple(Task(t.id, t.title) for t in self.store.completed.items),
            pending_cursor=self.store.pending.cursor,
            completed_cursor=self.store.completed.cursor,
            buffer_text=buffer.text if buffer is not None else "",
            buffer_cursor=buffer.cursor if buffer is not None else 0,
            quitting=self.quitting,
        )

    # ---- per-mode handlers ------------------------------------------------------

    def _quit(self) -> None:
        logger.debug("Quit requested in %s mode", self.mode.label)
        self.quitting = True

    def _handle_browsing(self, kind: ListKind, event: KeyEvent) -> None:  # noqa: C901
        if event.matches(QUIT_KEYS):
            self._quit()
        elif event.matches(TOGGLE_VIEW_KEYS):
            self.mode = Browsing(other_kind(kind))
        elif event.matches(UP_KEYS):
            self.store.move_cursor(kind, -1)
        elif event.matches(DOWN_KEYS):
            self.store.move_cursor(kind, +1)
        elif event.matches(CONFIRM_KEYS):
            # completed 一覧での Enter は何もしない
            if kind == "pending":
                self.store.complete()
        elif event.matches(DELETE_KEYS):
            self.store.remove_at_cursor(kind)
        elif event.matches(ADD_KEYS):
            self.mode = Adding(LineBuffer())
        elif event.matches(EDIT_KEYS):
            # 編集は pending 一覧でのみ可能
            if kind != "pending":
                return
            task = self.store.selected("pending")
            if task is None:
                return
            self.mode = Editing(task.id, LineBuffer.with_text(task.title))

    def _handle_adding(self, buffer: LineBuffer, event: KeyEvent) -> None:
        if event.matches(CONFIRM_KEYS):
            if not buffer.is_blank():
                self.store.insert("pending", buffer.text)
            self.mode = Browsing("pending")
            return
        self._edit_buffer(buffer, event)

    def _handle_editing(self, target_id: int, buffer: LineBuffer, event: KeyEvent) -> None:
        if event.matches(CONFIRM_KEYS):
            selected = self.store.selected("pending")
            if selected is None or selected.id != target_id:
                logger.warning("Edit target #%d is no longer selected: canceled", target_id)
            elif buffer.is_blank():
                self.store.remove_at_cursor("pending")
            else:
                self.store.rename_at_cursor("pending", buffer.text)
            self.mode = Browsing("pending")
            return
        self._edit_buffer(buffer, event)

    def _edit_buffer(self, buffer: LineBuffer, event: KeyEvent) -> None:  # noqa: C901
        # 印字可能文字は quit キー ("q") であってもテキストとして扱う
        if event.is_printable:
            buffer.insert(event.char or "")
            return
        if event.matches(QUIT_KEYS):
            self._quit()
            return

        match event.name:
            case "backspace":
                buffer.backspace()
            case "delete":
                buffer.delete()
            case "left":
                buffer.left()
            case "right":
                buffer.right()
            case "home" | "ctrl+a":
                buffer.home()
            case "end" | "ctrl+e":
                buffer.end()
            case "ctrl+u":
                buffer.kill_to_start()
            case "ctrl+k":
                buffer.kill_to_end()
            case "ctrl+w":
                buffer.delete_word_backward()
            case _:
                # up/down/tab などは入力欄では無視する
                pass
