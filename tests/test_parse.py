import unittest

from tasuku.util.parse import parse_bool, parse_int, parse_log_level


class TestParseInt(unittest.TestCase):
    def test_ok(self) -> None:
        assert parse_int(" 42 ").unwrap() == 42

    def test_not_integer(self) -> None:
        r = parse_int("fast", name="TICK_MS")
        assert r.is_err()
        assert "TICK_MS" in r.unwrap_err()

    def test_minimum(self) -> None:
        assert parse_int("0", minimum=1).is_err()
        assert parse_int("1", minimum=1).unwrap() == 1


class TestParseBool(unittest.TestCase):
    def test_words(self) -> None:
        for word in ("on", "TRUE", "yes", "1"):
            assert parse_bool(word).unwrap() is True
        for word in ("off", "False", "no", "0", ""):
            assert parse_bool(word).unwrap() is False

    def test_invalid(self) -> None:
        assert parse_bool("maybe").is_err()


class TestParseLogLevel(unittest.TestCase):
    def test_ok(self) -> None:
        assert parse_log_level("debug").unwrap() == "DEBUG"
        assert parse_log_level(" Warning ").unwrap() == "WARNING"

    def test_invalid(self) -> None:
        r = parse_log_level("chatty")
        assert r.is_err()
        assert "Invalid log level" in r.unwrap_err()


if __name__ == "__main__":
    unittest.main()
