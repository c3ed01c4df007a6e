from dataclasses import dataclass, field
from typing import Literal, TypeAlias

from tasuku.core.buffer import LineBuffer

ListKind = Literal["pending", "completed"]
LIST_KINDS: tuple[ListKind, ...] = ("pending", "completed")


def other_kind(kind: ListKind) -> ListKind:
    return "completed" if kind == "pending" else "pending"


@dataclass
class Task:
    id: int
    title: str


# ---- modes ------------------------------------------------------------------
# Browsing / Adding / Editing の3状態のみ。payloadが必要な状態だけがpayloadを持つ。


@dataclass(frozen=True)
class Browsing:
    kind: ListKind = "pending"

    @property
    def label(self) -> str:
        return self.kind


@dataclass(frozen=True)
class Adding:
    """Typing the title of a new pending task into the scratch buffer."""

    buffer: LineBuffer = field(default_factory=LineBuffer, compare=False)

    @property
    def label(self) -> str:
        return "adding"


@dataclass(frozen=True)
class Editing:
    """Renaming the pending task `target_id` through the scratch buffer."""

    target_id: int
    buffer: LineBuffer = field(default_factory=LineBuffer, compare=False)

    @property
    def label(self) -> str:
        return "editing"


Mode: TypeAlias = Browsing | Adding | Editing
