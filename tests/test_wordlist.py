import pytest

from wuerfelware.config import DEFAULT_WORD_LIST_PATH
from wuerfelware.errors import WordListIndexError, WordListNotFoundError
from wuerfelware.wordlist import WordList, WordListCache, is_integer_token, load_word_list, parse


def test_scenario_drops_numbers_and_keeps_duplicates():
    wl = parse("alpha beta 123 gamma\nalpha")
    assert list(wl) == ["alpha", "beta", "gamma", "alpha"]
    assert wl.entry_count == 4
    assert wl.max_valid_index == 3


@pytest.mark.parametrize("token", ["123", "0", "-7", "+5", "11111", "99999999999999999999"])
def test_integer_tokens_are_dropped(token):
    assert is_integer_token(token)
    assert list(parse(f"word {token} other")) == ["word", "other"]


@pytest.mark.parametrize("token", ["ab12cd", "12a", "a12", "1.5", "1,000", "-", "+"])
def test_mixed_tokens_are_kept(token):
    assert not is_integer_token(token)
    assert list(parse(token)) == [token]


def test_delimiter_runs_collapse():
    wl = parse("  one\r\n\r\ntwo   three\rfour\n\n")
    assert list(wl) == ["one", "two", "three", "four"]
    assert "" not in wl.entries


def test_tab_is_not_a_delimiter():
    assert list(parse("one\ttwo three")) == ["one\ttwo", "three"]


def test_empty_and_numeric_only_text():
    assert parse("").entry_count == 0
    assert parse(" \r\n ").entry_count == 0
    assert parse("1 2 3\n4").entry_count == 0


def test_get_bounds():
    wl = parse("a b c")
    for i in range(wl.entry_count):
        assert wl.get(i) == "abc"[i]
    with pytest.raises(WordListIndexError):
        wl.get(3)
    # no Python-style wrap-around
    with pytest.raises(WordListIndexError):
        wl.get(-1)


def test_index_error_is_an_index_error():
    with pytest.raises(IndexError):
        WordList([]).get(0)


def test_word_list_is_immutable():
    wl = parse("a b")
    with pytest.raises(AttributeError):
        wl.entries.append("c")


def test_load_word_list(word_file):
    wl = load_word_list(word_file)
    assert list(wl) == ["alpha", "beta", "gamma", "delta"]
    assert wl.source == str(word_file)


def test_load_missing_file(tmp_path):
    missing = tmp_path / "nope.txt"
    with pytest.raises(WordListNotFoundError) as excinfo:
        load_word_list(missing)
    assert str(missing) in str(excinfo.value)
    assert isinstance(excinfo.value, FileNotFoundError)


def test_load_directory_is_not_found(tmp_path):
    with pytest.raises(WordListNotFoundError):
        load_word_list(tmp_path)


def test_bundled_word_list():
    wl = load_word_list(DEFAULT_WORD_LIST_PATH)
    assert wl.entry_count > 256
    assert not any(is_integer_token(w) for w in wl)
    for i in range(wl.entry_count):
        wl.get(i)


class TestWordListCache:
    def test_loads_once_per_path(self, tmp_path):
        calls = []

        def loader(path):
            calls.append(path)
            return parse("x y", source=path)

        cache = WordListCache(loader)
        first = cache.get(tmp_path / "a.txt")
        assert cache.get(tmp_path / "a.txt") is first
        assert len(calls) == 1

    def test_path_change_replaces_entry(self, tmp_path):
        a = tmp_path / "a.txt"; a.write_text("one two", encoding="utf-8")
        b = tmp_path / "b.txt"; b.write_text("three", encoding="utf-8")
        cache = WordListCache()
        old = cache.get(a)
        new = cache.get(b)
        assert list(new) == ["three"]
        assert cache.path == str(b)
        # the previously handed out list is untouched
        assert list(old) == ["one", "two"]

    def test_reload_picks_up_file_changes(self, word_file):
        cache = WordListCache()
        assert cache.get(word_file).entry_count == 4
        word_file.write_text("solo", encoding="utf-8")
        assert cache.get(word_file).entry_count == 4
        assert list(cache.reload()) == ["solo"]

    def test_reload_without_entry(self):
        with pytest.raises(RuntimeError):
            WordListCache().reload()

    def test_invalidate(self, word_file):
        cache = WordListCache()
        cache.get(word_file)
        cache.invalidate()
        assert cache.current is None
        assert cache.path is None

    def test_missing_path_propagates(self, tmp_path):
        with pytest.raises(WordListNotFoundError):
            WordListCache().get(tmp_path / "missing.txt")


def test_byte_order_mark_is_stripped(tmp_path):
    path = tmp_path / "bom.txt"
    path.write_text("\ufeff11111 alpha\n11112 beta\n", encoding="utf-8")
    assert list(load_word_list(path)) == ["alpha", "beta"]


def test_undecodable_bytes_are_skipped(tmp_path):
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"11111 s\xfc\xdf\n11112 beta\n")
    assert list(load_word_list(path)) == ["s", "beta"]
