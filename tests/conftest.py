import os
import tempfile

# ログファイルや config.env をユーザのホームに作らないよう、import 前に隔離する
os.environ["TASUKU_HOME_DIR"] = tempfile.mkdtemp(prefix="tasuku-test-")
for _key in ("SEED", "SEED_PATH", "TICK_MS", "LOG_LEVEL"):
    os.environ.pop(f"TASUKU_{_key}", None)
