import unicodedata


def char_width(ch: str) -> int:
    """Terminal cell width of one character."""
    if not ch or ch < " ":
        return 0
    # 結合文字 (濁点など) は幅を取らない
    if unicodedata.combining(ch):
        return 0
    # F: full-width, W: wide, A: ambiguous は2セル
    if unicodedata.east_asian_width(ch) in ("F", "W", "A"):
        return 2
    return 1


def string_width(s: str) -> int:
    return sum(map(char_width, s))


def clip_to_width(s: str, width: int) -> str:
    """Longest prefix of `s` that fits in `width` terminal cells."""
    used = 0
    for idx, ch in enumerate(s):
        w = char_width(ch)
        if used + w > width:
            return s[:idx]
        used += w
    return s


def tail_to_width(s: str, width: int) -> str:
    """Longest suffix of `s` that fits in `width` cells (for long input lines)."""
    used = 0
    for idx in range(len(s) - 1, -1, -1):
        w = char_width(s[idx])
        if used + w > width:
            return s[idx + 1 :]
        used += w
    return s
