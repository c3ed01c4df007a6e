from tasuku.core.models import Adding, Browsing, Editing, Mode

MAIN_THEME_COLOR = 1
SPINNER_COLOR = 2
SELECTED_ROW_COLOR = 3
SURPRESSED_COLOR = 4
COMPLETED_COLOR = 5
PROMPT_COLOR = 6

# bubbles の Dot spinner と同じフレーム
SPINNER_FRAMES = ("⣾", "⣽", "⣻", "⢿", "⡿", "⣟", "⣯", "⣷")


def spinner_frame(tick: int) -> str:
    return SPINNER_FRAMES[tick % len(SPINNER_FRAMES)]


class HeaderLines:
    """Header lines for the TUI."""

    @classmethod
    def height(cls) -> int:
        return 3

    @classmethod
    def title(cls) -> str:
        return "--- tasuku (TUI) > pending / completed task manager ---"

    @classmethod
    def help(cls, mode: Mode) -> str:
        match mode:
            case Browsing(kind="pending"):
                return cls._browsing_help(can_complete=True)
            case Browsing():
                return cls._browsing_help(can_complete=False)
            case Adding() | Editing():
                return cls._input_help()
        return ""

    @classmethod
    def _browsing_help(cls, *, can_complete: bool) -> str:
        help_line = "List: [↑/↓ Move] [(s)witch list] "
        help_line += "[(a)dd] "
        if can_complete:
            help_line += "[(e)dit] [Enter: done] "
        help_line += "[(d)elete] [(q)uit]"
        return help_line

    @classmethod
    def _input_help(cls) -> str:
        return "Input: [Enter: Apply] [←/→ Move] [Ctrl+U/K Kill] [Ctrl+W Word] [Esc/Ctrl+C: Quit]"
