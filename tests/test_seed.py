import tempfile
import unittest
from pathlib import Path

from tasuku.core.models import Task
from tasuku.storage import default_store, get_store, load_seed
from tasuku.storage.seed import store_from_dict


class TestDefaultStore(unittest.TestCase):
    def test_sample_tasks(self) -> None:
        store = default_store()
        assert [t.id for t in store.pending.items] == [2, 3, 4, 5]
        assert [t.title for t in store.completed.items] == ["completed-zero", "completed-one"]
        assert store.pending.cursor == 1
        assert store.completed.cursor == 1
        assert store.next_id == 6


class TestStoreFromDict(unittest.TestCase):
    def test_full(self) -> None:
        r = store_from_dict(
            {
                "pending": [{"id": 2, "title": "two"}, {"id": 3, "title": "three"}],
                "completed": [{"id": 0, "title": "zero"}],
                "cursor": {"pending": 1},
                "next_id": 6,
            },
        )
        assert r.is_ok()
        store = r.unwrap()
        assert store.pending.items == [Task(2, "two"), Task(3, "three")]
        assert store.completed.items == [Task(0, "zero")]
        assert store.pending.cursor == 1
        assert store.completed.cursor == 0
        assert store.next_id == 6

    def test_empty_document(self) -> None:
        r = store_from_dict(None)
        assert r.is_ok()
        assert len(r.unwrap().pending) == 0
        assert r.unwrap().next_id == 0

    def test_missing_ids_are_assigned(self) -> None:
        r = store_from_dict({"pending": [{"id": 4, "title": "four"}, {"title": "new"}]})
        store = r.unwrap()
        assert store.pending.items == [Task(4, "four"), Task(5, "new")]
        assert store.next_id == 6

    def test_cursor_is_clamped(self) -> None:
        r = store_from_dict({"pending": [{"title": "a"}], "cursor": {"pending": 9}})
        assert r.unwrap().pending.cursor == 0

    def test_duplicate_id(self) -> None:
        r = store_from_dict(
            {
                "pending": [{"id": 1, "title": "a"}],
                "completed": [{"id": 1, "title": "b"}],
            },
        )
        assert r.is_err()
        assert "Duplicate task id: 1" in r.unwrap_err()

    def test_missing_title(self) -> None:
        r = store_from_dict({"pending": [{"id": 1}]})
        assert r.is_err()
        assert "pending[0] has no title" in r.unwrap_err()

    def test_invalid_shapes(self) -> None:
        assert store_from_dict(["a"]).is_err()
        assert store_from_dict({"pending": "a"}).is_err()
        assert store_from_dict({"pending": ["a"]}).is_err()
        assert store_from_dict({"pending": [{"id": "x", "title": "a"}]}).is_err()
        assert store_from_dict({"cursor": [1]}).is_err()
        assert store_from_dict({"cursor": {"pending": -1}}).is_err()

    def test_next_id_must_exceed_seeded_ids(self) -> None:
        r = store_from_dict({"pending": [{"id": 5, "title": "five"}], "next_id": 5})
        assert r.is_err()
        assert "next_id" in r.unwrap_err()


class TestLoadSeed(unittest.TestCase):
    def setUp(self) -> None:
        self.temp_file = tempfile.NamedTemporaryFile(delete=False, suffix=".yaml", mode="w", encoding="utf-8")  # noqa: SIM115

    def tearDown(self) -> None:
        Path(self.temp_file.name).unlink(missing_ok=True)

    def _write(self, text: str) -> str:
        self.temp_file.write(text)
        self.temp_file.close()
        return self.temp_file.name

    def test_load_yaml(self) -> None:
        path = self._write(
            "pending:\n"
            "  - {id: 2, title: two}\n"
            "  - {id: 3, title: 三}\n"
            "completed:\n"
            "  - {id: 0, title: completed-zero}\n"
            "next_id: 6\n",
        )
        r = load_seed(path)
        assert r.is_ok()
        store = r.unwrap()
        assert store.pending.items == [Task(2, "two"), Task(3, "三")]
        assert store.next_id == 6

    def test_file_is_not_modified(self) -> None:
        text = "pending:\n  - {title: a}\n"
        path = self._write(text)
        load_seed(path).unwrap().insert("pending", "b")
        assert Path(path).read_text(encoding="utf-8") == text

    def test_broken_yaml(self) -> None:
        path = self._write("pending: [\n")
        r = load_seed(path)
        assert r.is_err()
        assert "Failed to load YAML" in r.unwrap_err()

    def test_invalid_content(self) -> None:
        path = self._write("pending:\n  - {id: 1}\n")
        r = load_seed(path)
        assert r.is_err()
        assert "Invalid seed file" in r.unwrap_err()

    def test_missing_file(self) -> None:
        self.temp_file.close()
        Path(self.temp_file.name).unlink()
        r = load_seed(self.temp_file.name)
        assert r.is_err()
        assert "not found" in r.unwrap_err()

    def test_directory_instead_of_file(self) -> None:
        self.temp_file.close()
        with tempfile.TemporaryDirectory() as d:
            r = load_seed(d)
        assert r.is_err()
        assert "Failed to read seed file" in r.unwrap_err()

    def test_not_utf8(self) -> None:
        self.temp_file.close()
        Path(self.temp_file.name).write_bytes(b"pending:\n  - {title: \xff\xfe}\n")
        r = load_seed(self.temp_file.name)
        assert r.is_err()
        assert "Failed to read seed file" in r.unwrap_err()

    def test_title_is_kept_as_written(self) -> None:
        path = self._write("pending:\n  - {id: 1, title: ' spaced '}\n")
        assert load_seed(path).unwrap().pending.items == [Task(1, " spaced ")]


class TestGetStore(unittest.TestCase):
    def test_default_seed(self) -> None:
        store = get_store({"SEED": "on", "SEED_PATH": ""}).unwrap()
        assert len(store.pending) == 4

    def test_seed_off(self) -> None:
        store = get_store({"SEED": "off", "SEED_PATH": ""}).unwrap()
        assert len(store.pending) == 0
        assert len(store.completed) == 0

    def test_invalid_seed_flag(self) -> None:
        r = get_store({"SEED": "maybe"})
        assert r.is_err()
        assert "SEED" in r.unwrap_err()

    def test_seed_path_wins(self) -> None:
        r = get_store({"SEED": "on", "SEED_PATH": "/nonexistent/seed.yaml"})
        assert r.is_err()


if __name__ == "__main__":
    unittest.main()
