from dataclasses import dataclass

from tasuku.core.controller import Snapshot


@dataclass
class AppState:
    """Presentation-side state. Rebuilt from a fresh Snapshot after each event."""

    snapshot: Snapshot
    tick: int = 0  # spinner のフレーム番号

    # UI用
    msg_footer: str | None = None  # フッターメッセージ表示

    # scroll用
    list_offset: int = 0  # list viewのstart rowのオフセット
