from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]
from pyresults import Err, Ok, Result

from tasuku.core.models import LIST_KINDS, ListKind, Task
from tasuku.core.store import TaskStore
from tasuku.util.logger import setup_logger

logger = setup_logger("tasuku", is_stream=False, is_file=True)

DEFAULT_PENDING = [(2, "two"), (3, "three"), (4, "four"), (5, "five")]
DEFAULT_COMPLETED = [(0, "completed-zero"), (1, "completed-one")]


def default_store() -> TaskStore:
    """Store preloaded with the built-in sample tasks."""
    pending = [Task(id=tid, title=title) for tid, title in DEFAULT_PENDING]
    completed = [Task(id=tid, title=title) for tid, title in DEFAULT_COMPLETED]
    return TaskStore(
        pending,
        completed,
        pending_cursor=1,
        completed_cursor=1,
        next_id=len(pending) + len(completed),
    )


def empty_store() -> TaskStore:
    return TaskStore()


def _parse_tasks(kind: ListKind, raw: Any) -> Result[list[dict[str, Any]], str]:  # noqa: ANN401
    if raw is None:
        return Ok[list[dict[str, Any]], str]([])
    if not isinstance(raw, list):
        return Err[list[dict[str, Any]], str](f"'{kind}' must be a list")
    entries: list[dict[str, Any]] = []
    for idx, item in enumerate(raw):
        if not isinstance(item, dict):
            return Err[list[dict[str, Any]], str](f"{kind}[{idx}] must be a mapping")
        title = item.get("title")
        if title is None or str(title).strip() == "":
            return Err[list[dict[str, Any]], str](f"{kind}[{idx}] has no title")
        tid = item.get("id")
        if tid is not None and (isinstance(tid, bool) or not isinstance(tid, int) or tid < 0):
            return Err[list[dict[str, Any]], str](f"{kind}[{idx}] has invalid id: {tid!r}")
        entries.append({"id": tid, "title": str(title)})
    return Ok[list[dict[str, Any]], str](entries)


def _parse_int_field(raw: dict[str, Any], key: str, default: int) -> Result[int, str]:
    value = raw.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return Err[int, str](f"'{key}' must be a non-negative integer: {value!r}")
    return Ok[int, str](value)


def store_from_dict(raw: Any) -> Result[TaskStore, str]:  # noqa: ANN401, C901
    """Build a TaskStore from seed data.

    Args:
        raw: {"pending": [...], "completed": [...], "cursor": {...}, "next_id": int}

    Returns:
        Ok(TaskStore): 成功時
        Err(str): 失敗時 (例: id の重複、タイトルの欠落)
    """
    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        return Err[TaskStore, str]("Seed data must be a mapping")

    parsed: dict[ListKind, list[dict[str, Any]]] = {}
    for kind in LIST_KINDS:
        match _parse_tasks(kind, raw.get(kind)):
            case Ok(entries):
                parsed[kind] = entries
            case Err(e):
                return Err[TaskStore, str](e)

    # id の重複チェック
    seen: set[int] = set()
    for kind in LIST_KINDS:
        for entry in parsed[kind]:
            tid = entry["id"]
            if tid is None:
                continue
            if tid in seen:
                return Err[TaskStore, str](f"Duplicate task id: {tid}")
            seen.add(tid)

    # id のないタスクには既存の最大 id の次から採番する
    next_free = max(seen, default=-1) + 1
    tasks: dict[ListKind, list[Task]] = {}
    for kind in LIST_KINDS:
        tasks[kind] = []
        for entry in parsed[kind]:
            tid = entry["id"]
            if tid is None:
                tid = next_free
                next_free += 1
            tasks[kind].append(Task(id=tid, title=entry["title"]))

    cursor = raw.get("cursor") or {}
    if not isinstance(cursor, dict):
        return Err[TaskStore, str]("'cursor' must be a mapping")
    cursors: dict[ListKind, int] = {}
    for kind in LIST_KINDS:
        match _parse_int_field(cursor, kind, 0):
            case Ok(value):
                cursors[kind] = value
            case Err(e):
                return Err[TaskStore, str](f"cursor: {e}")

    match _parse_int_field(raw, "next_id", next_free):
        case Ok(next_id):
            if next_id < next_free:
                return Err[TaskStore, str](f"'next_id' must be greater than every seeded id: {next_id}")
        case Err(e):
            return Err[TaskStore, str](e)

    return Ok[TaskStore, str](
        TaskStore(
            tasks["pending"],
            tasks["completed"],
            pending_cursor=cursors["pending"],
            completed_cursor=cursors["completed"],
            next_id=next_id,
        ),
    )


def load_seed(path: str) -> Result[TaskStore, str]:
    """Read a YAML seed file. The file is only read, never written."""
    _path = Path(path)
    if not _path.exists():
        return Err[TaskStore, str](f"Seed file not found: {path}")
    try:
        with _path.open(encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except (OSError, UnicodeDecodeError) as e:
        # ディレクトリ指定や UTF-8 でないファイルなど
        _msg = f"Failed to read seed file {path}: {e}"
        logger.exception(_msg)
        return Err[TaskStore, str](_msg)
    except yaml.YAMLError as e:
        _msg = f"Failed to load YAML file: {e}"
        logger.exception(_msg)
        return Err[TaskStore, str](_msg)
    match store_from_dict(raw):
        case Ok(store):
            logger.info(
                "Seed loaded from %s: pending=%d completed=%d",
                path,
                len(store.pending),
                len(store.completed),
            )
            return Ok[TaskStore, str](store)
        case Err(e):
            return Err[TaskStore, str](f"Invalid seed file {path}: {e}")
