"""Tests for saved-state storage."""

import json

import pytest

from quickfilter_core.storage import (
    FileStateStore,
    MemoryStateStore,
    StorageConfig,
    decode_state,
    encode_state,
)


class TestCodec:
    def test_encode_is_json(self):
        state = {"Color": {"red": True}, "Search": "Café"}
        assert json.loads(encode_state(state)) == state

    def test_encode_keeps_non_ascii(self):
        assert "Café" in encode_state({"Search": "Café"})

    def test_indent_sorts_keys(self):
        text = encode_state({"b": "", "a": ""}, indent=2)
        assert text.index('"a"') < text.index('"b"')

    @pytest.mark.parametrize("text", [None, "", "{", "[]", "42", "\"x\""])
    def test_decode_tolerates_malformed(self, text):
        assert decode_state(text) == {}

    def test_decode_tolerates_deep_nesting(self):
        depth = 100000
        assert decode_state("[" * depth + "]" * depth) == {}
        assert decode_state('{"a": ' + "[" * depth + "]" * depth + "}") == {}

    def test_decode(self):
        assert decode_state('{"Search": "red"}') == {"Search": "red"}


class TestMemoryStateStore:
    def test_load_save_clear(self):
        store = MemoryStateStore("{}")
        assert store.load() == "{}"
        store.save('{"a": 1}')
        assert store.load() == '{"a": 1}'
        store.clear()
        assert store.load() is None


class TestFileStateStore:
    def test_requires_path(self):
        with pytest.raises(ValueError):
            FileStateStore(StorageConfig())

    def test_missing_file_loads_none(self, tmp_path):
        store = FileStateStore(StorageConfig(path=str(tmp_path / "state.json")))
        assert store.load() is None

    def test_save_creates_directory(self, tmp_path):
        path = tmp_path / "nested" / "state.json"
        store = FileStateStore(StorageConfig(path=str(path)))
        store.save('{"Search": "ñ"}')
        assert path.read_text(encoding="utf-8") == '{"Search": "ñ"}'
        assert store.load() == '{"Search": "ñ"}'

    def test_clear_removes_file(self, tmp_path):
        path = tmp_path / "state.json"
        store = FileStateStore(StorageConfig(path=str(path)))
        store.save("{}")
        store.clear()
        assert not path.exists()
        store.clear()

    def test_undecodable_file_loads_none(self, tmp_path):
        path = tmp_path / "state.json"
        path.write_bytes(b"\xff\xfe\x00bad")
        store = FileStateStore(StorageConfig(path=str(path)))
        assert store.load() is None

    def test_unwritable_path_is_logged(self, tmp_path, caplog):
        store = FileStateStore(StorageConfig(path=str(tmp_path)))
        store.save("{}")
        assert "Failed to save filter state" in caplog.text
