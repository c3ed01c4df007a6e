from collections.abc import Iterable
from dataclasses import dataclass, field

from tasuku.core.models import ListKind, Task
from tasuku.util.logger import setup_logger

logger = setup_logger("tasuku", is_stream=False, is_file=True)


@dataclass
class TaskList:
    """Ordered tasks with a selection cursor.

    Invariant: 0 <= cursor < len(items) when items is non-empty, cursor == 0 otherwise.
    """

    items: list[Task] = field(default_factory=list)
    cursor: int = 0

    def __post_init__(self) -> None:
        self.clamp_cursor()

    def __len__(self) -> int:
        return len(self.items)

    def clamp_cursor(self) -> None:
        self.cursor = max(0, min(self.cursor, len(self.items) - 1))

    def selected(self) -> Task | None:
        if not self.items:
            return None
        return self.items[self.cursor]

    def append(self, task: Task) -> None:
        self.items.append(task)

    def remove_at_cursor(self) -> Task | None:
        if not self.items:
            return None
        task = self.items.pop(self.cursor)
        self.clamp_cursor()
        return task

    def move_cursor(self, delta: int) -> None:
        if not self.items:
            return
        self.cursor += delta
        self.clamp_cursor()


class TaskStore:
    """In-memory pending/completed task lists sharing one id counter.

    Public API:
        - insert(): 末尾にタスクを追加する
        - remove_at_cursor(): カーソル位置のタスクを取り除く
        - rename_at_cursor(): カーソル位置のタスク名を変更する (空なら削除)
        - move_cursor(): カーソルを移動する
        - complete(): pending のカーソル位置のタスクを completed の末尾へ移す

    どの操作も例外を投げない。範囲外や空リストに対する操作は何もしない。
    """

    def __init__(
        self,
        pending: Iterable[Task] = (),
        completed: Iterable[Task] = (),
        *,
        pending_cursor: int = 0,
        completed_cursor: int = 0,
        next_id: int | None = None,
    ) -> None:
        self.pending = TaskList(list(pending), pending_cursor)
        self.completed = TaskList(list(completed), completed_cursor)
        # ids are never reissued, so the counter starts above every seeded id
        highest = max((t.id for t in [*self.pending.items, *self.completed.items]), default=-1)
        self._next_id = max(highest + 1, next_id or 0)

    @property
    def next_id(self) -> int:
        return self._next_id

    def get_list(self, kind: ListKind) -> TaskList:
        return self.pending if kind == "pending" else self.completed

    def selected(self, kind: ListKind) -> Task | None:
        return self.get_list(kind).selected()

    # ---- mutation ---------------------------------------------------------------

    def insert(self, kind: ListKind, title: str) -> Task | None:
        # 入力されたタイトルはそのまま保存する (空白判定にだけ strip を使う)
        if not title.strip():
            logger.debug("Insert skipped: blank title")
            return None
        task = Task(id=self._next_id, title=title)
        self._next_id += 1
        self.get_list(kind).append(task)
        logger.debug("Inserted #%d into %s", task.id, kind)
        return task

    def remove_at_cursor(self, kind: ListKind) -> Task | None:
        task = self.get_list(kind).remove_at_cursor()
        if task is not None:
            logger.debug("Removed #%d from %s", task.id, kind)
        return task

    def rename_at_cursor(self, kind: ListKind, new_title: str) -> Task | None:
        # 空のタイトルへの変更は削除要求として扱う
        if not new_title.strip():
            return self.remove_at_cursor(kind)
        task = self.get_list(kind).selected()
        if task is None:
            return None
        task.title = new_title
        logger.debug("Renamed #%d in %s", task.id, kind)
        return task

    def move_cursor(self, kind: ListKind, delta: int) -> None:
        self.get_list(kind).move_cursor(delta)

    def complete(self) -> bool:
        # 空タイトルのタスクは番兵扱いで、どちらのリストも変更しない
        task = self.pending.selected()
        if task is None or not task.title:
            return False
        self.pending.remove_at_cursor()
        self.completed.append(task)
        logger.debug("Completed #%d", task.id)
        return True
