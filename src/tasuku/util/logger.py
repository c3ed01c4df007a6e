import logging
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path

from tasuku.util.dirs import default_home, ensure_dirs

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_mode(*, is_debug: bool, level: str = "INFO") -> None:
    logger = logging.getLogger("tasuku")
    if is_debug:
        logger.setLevel(logging.DEBUG)
    else:
        logger.setLevel(level.upper())


def setup_logger(
    name: str,
    *,
    is_stream: bool = True,
    is_file: bool = True,
) -> logging.Logger:
    logger = logging.getLogger(name)
    # 同じロガーへのハンドラ重複登録を避ける
    if logger.handlers:
        return logger
    logger.setLevel(logging.DEBUG)
    # curses が端末を握っている間に root の StreamHandler へ流れないようにする
    logger.propagate = False

    if is_stream or not is_file:
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(logging.DEBUG)
        formatter = logging.Formatter(LOG_FORMAT)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

    if is_file:
        ensure_dirs()
        time_rotate_file_handler = TimedRotatingFileHandler(
            (Path(default_home()) / f"{name.lower()}.log").as_posix(),
            when="MIDNIGHT",
            interval=1,
            backupCount=7,
            encoding="utf-8",
        )
        time_rotate_file_handler.setLevel(logging.DEBUG)
        formatter = logging.Formatter(LOG_FORMAT)
        time_rotate_file_handler.setFormatter(formatter)
        logger.addHandler(time_rotate_file_handler)

    return logger
