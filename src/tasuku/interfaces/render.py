from tasuku.core.controller import Snapshot
from tasuku.core.models import Adding, Browsing, Editing, Task

SELECTED_MARK = "> "
UNSELECTED_MARK = "  "
EMPTY_LIST_TEXT = "(no tasks)"
ADD_PROMPT = "Name the task: "
EDIT_PROMPT = "Edit the task: "


def format_task(t: Task) -> str:
    return f"#{t.id} {t.title}"


def header_line(snapshot: Snapshot) -> str:
    return f"{snapshot.mode.label} Mode"


def prompt_line(snapshot: Snapshot) -> str | None:
    """Prompt + scratch buffer for Adding/Editing, None while browsing."""
    match snapshot.mode:
        case Adding():
            return f"{ADD_PROMPT}{snapshot.buffer_text}"
        case Editing():
            return f"{EDIT_PROMPT}{snapshot.buffer_text}"
        case _:
            return None


def body_lines(snapshot: Snapshot) -> list[str]:
    if not isinstance(snapshot.mode, Browsing):
        prompt = prompt_line(snapshot)
        return [prompt] if prompt is not None else []
    tasks, cursor = snapshot.visible()
    if not tasks:
        return [EMPTY_LIST_TEXT]
    return [
        (SELECTED_MARK if idx == cursor else UNSELECTED_MARK) + format_task(t)
        for idx, t in enumerate(tasks)
    ]


def render_text(snapshot: Snapshot, spinner: str = "") -> str:
    """Render the whole screen as plain text. Reads the snapshot only."""
    lines = ["", spinner]
    if snapshot.quitting:
        return "\n".join(lines) + "\n"
    lines.append(header_line(snapshot))
    lines.append("")
    lines.extend(body_lines(snapshot))
    return "\n".join(lines) + "\n"
