from pyresults import Err, Ok, Result

from tasuku.core.store import TaskStore
from tasuku.storage.seed import default_store, empty_store, load_seed
from tasuku.util.parse import parse_bool

__all__ = [
    "default_store",
    "empty_store",
    "get_store",
    "load_seed",
]


def get_store(env: dict[str, str]) -> Result[TaskStore, str]:
    """Build the startup store from config: seed file > built-in seed > empty."""
    seed_path = env.get("SEED_PATH", "")
    if seed_path:
        return load_seed(seed_path)
    use_seed = parse_bool(env.get("SEED", "on"), name="SEED")
    if use_seed.is_err():
        return Err[TaskStore, str](use_seed.unwrap_err())
    if use_seed.unwrap():
        return Ok[TaskStore, str](default_store())
    return Ok[TaskStore, str](empty_store())
