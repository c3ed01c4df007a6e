import os
import re
from pathlib import Path

ENV_PREFIX = "TASUKU_"
CONFIG_KEYS = ("SEED", "SEED_PATH", "TICK_MS", "LOG_LEVEL")
DEFAULTS = {
    "SEED": "on",
    "SEED_PATH": "",
    "TICK_MS": "100",
    "LOG_LEVEL": "INFO",
}


def default_home() -> str:
    return os.environ.get(f"{ENV_PREFIX}HOME_DIR", (Path.home() / ".tasuku").as_posix())


def default_env_path() -> str:
    return (Path(default_home()) / "config.env").as_posix()


def ensure_dirs() -> None:
    _path = Path(default_home())
    _path.mkdir(parents=True, exist_ok=True)


def read_env_file(path: str) -> dict[str, str]:
    """Read KEY=VALUE lines from a dotenv-like file. Missing file yields {}."""
    env: dict[str, str] = {}
    _path = Path(path)
    if not _path.exists():
        return env
    with _path.open(encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            m = re.match(r"([^=]+)=(.*)", line)
            if m:
                key = m.group(1).strip()
                val = m.group(2).strip()
                # 'KEY="value"' も許容する
                if len(val) >= 2 and val[0] == val[-1] and val[0] in ("'", '"'):
                    val = val[1:-1]
                env[key] = val
    return env


def load_env(path: str | None = None) -> dict[str, str]:
    """Load config: defaults < config.env < TASUKU_* environment variables."""
    env = dict(DEFAULTS)
    env.update(read_env_file(path or default_env_path()))

    # OS環境変数を上書き優先
    for key in CONFIG_KEYS:
        match os.environ.get(f"{ENV_PREFIX}{key}"):
            case None:
                pass
            case value:
                env[key] = value
    return env
