from dataclasses import dataclass

WORD_SEPARATORS = " \t"


@dataclass
class LineBuffer:
    """Single-line text buffer with a cursor, edited like a shell prompt.

    Attributes:
        text: 編集中テキスト
        cursor: カーソル位置 (0 <= cursor <= len(text))
    """

    text: str = ""
    cursor: int = 0

    def __post_init__(self) -> None:
        self.cursor = max(0, min(self.cursor, len(self.text)))

    @classmethod
    def with_text(cls, text: str) -> "LineBuffer":
        """Buffer preloaded with `text`, cursor placed at the end."""
        return cls(text=text, cursor=len(text))

    def is_blank(self) -> bool:
        return self.text.strip() == ""

    # ---- 文字入力 -----------------------------------------------------------

    def insert(self, s: str) -> None:
        # 制御文字は入力しない
        s = "".join(ch for ch in s if ch >= " " and ch != "\x7f")
        if not s:
            return
        self.text = self.text[: self.cursor] + s + self.text[self.cursor :]
        self.cursor += len(s)

    def backspace(self) -> None:
        if self.cursor > 0:
            self.text = self.text[: self.cursor - 1] + self.text[self.cursor :]
            self.cursor -= 1

    def delete(self) -> None:
        if self.cursor < len(self.text):
            self.text = self.text[: self.cursor] + self.text[self.cursor + 1 :]

    def kill_to_start(self) -> None:
        self.text = self.text[self.cursor :]
        self.cursor = 0

    def kill_to_end(self) -> None:
        self.text = self.text[: self.cursor]

    def delete_word_backward(self) -> None:
        start = self.cursor
        # 直前の空白を飛ばしてから単語を消す
        while start > 0 and self.text[start - 1] in WORD_SEPARATORS:
            start -= 1
        while start > 0 and self.text[start - 1] not in WORD_SEPARATORS:
            start -= 1
        self.text = self.text[:start] + self.text[self.cursor :]
        self.cursor = start

    # ---- カーソル移動 -------------------------------------------------------

    def left(self) -> None:
        if self.cursor > 0:
            self.cursor -= 1

    def right(self) -> None:
        if self.cursor < len(self.text):
            self.cursor += 1

    def home(self) -> None:
        self.cursor = 0

    def end(self) -> None:
        self.cursor = len(self.text)
