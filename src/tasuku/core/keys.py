from dataclasses import dataclass

from pyresults import Err, Ok, Result

# 名前付きキー。1文字の印字可能文字は "rune" として扱う
NAMED_KEYS = (
    "up",
    "down",
    "left",
    "right",
    "enter",
    "backspace",
    "delete",
    "home",
    "end",
    "tab",
    "esc",
    "space",
    "ctrl+a",
    "ctrl+c",
    "ctrl+e",
    "ctrl+k",
    "ctrl+u",
    "ctrl+w",
)
# key 以外のイベント (spinner の tick, 端末リサイズ)
NON_KEY_EVENTS = ("tick", "resize")

QUIT_KEYS = ("q", "esc", "ctrl+c")
TOGGLE_VIEW_KEYS = ("s",)
UP_KEYS = ("up", "left")
DOWN_KEYS = ("down", "right")
CONFIRM_KEYS = ("enter",)
DELETE_KEYS = ("d",)
ADD_KEYS = ("a",)
EDIT_KEYS = ("e",)


@dataclass(frozen=True)
class KeyEvent:
    """A single input event.

    Attributes:
        name: "up", "ctrl+u", "tick" などのキー名。印字可能文字はその文字自身
        char: 印字可能文字の場合のみ、入力される文字
    """

    name: str
    char: str | None = None

    @classmethod
    def rune(cls, ch: str) -> "KeyEvent":
        return cls(name=ch, char=ch)

    @property
    def is_key(self) -> bool:
        return self.name not in NON_KEY_EVENTS

    @property
    def is_printable(self) -> bool:
        return self.char is not None

    def matches(self, keys: tuple[str, ...]) -> bool:
        return self.name in keys


TICK = KeyEvent("tick")
RESIZE = KeyEvent("resize")


def parse_key_name(name: str) -> Result[KeyEvent, str]:
    """Parse a key name such as "enter", "ctrl+u" or "x" into a KeyEvent."""
    if len(name) == 1:
        if name < " " or name == "\x7f":
            return Err[KeyEvent, str](f"Unknown key: {name!r} (control character)")
        return Ok[KeyEvent, str](KeyEvent.rune(name))
    key = name.strip().lower()
    if key == "space":
        return Ok[KeyEvent, str](KeyEvent.rune(" "))
    if key in NAMED_KEYS or key in NON_KEY_EVENTS:
        return Ok[KeyEvent, str](KeyEvent(key))
    return Err[KeyEvent, str](f"Unknown key: {name!r}")


def parse_key_names(names: list[str]) -> Result[list[KeyEvent], str]:
    events: list[KeyEvent] = []
    for name in names:
        match parse_key_name(name):
            case Ok(event):
                events.append(event)
            case Err(e):
                return Err[list[KeyEvent], str](e)
    return Ok[list[KeyEvent], str](events)
