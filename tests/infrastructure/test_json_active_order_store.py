"""Tests for the JSON-file active order store."""

import json

import pytest

from storefront.domain.exceptions import ParseError
from storefront.infrastructure.persistence.json_active_order_store import (
    JsonActiveOrderStore,
)


class TestJsonActiveOrderStore:

    def test_creates_file(self, tmp_path):
        path = tmp_path / "state" / "active_order.json"
        JsonActiveOrderStore(path)
        assert json.loads(path.read_text()) == {}

    def test_empty_store(self, tmp_path):
        assert JsonActiveOrderStore(tmp_path / "a.json").get() is None

    def test_set_then_get(self, tmp_path):
        store = JsonActiveOrderStore(tmp_path / "a.json")
        store.set("ord_1")
        assert store.get() == "ord_1"

    def test_survives_new_instance(self, tmp_path):
        path = tmp_path / "a.json"
        JsonActiveOrderStore(path).set("ord_1")
        assert JsonActiveOrderStore(path).get() == "ord_1"
        assert json.loads(path.read_text()) == {"orderId": "ord_1"}

    def test_last_writer_wins(self, tmp_path):
        path = tmp_path / "a.json"
        first, second = JsonActiveOrderStore(path), JsonActiveOrderStore(path)
        first.set("ord_1")
        second.set("ord_2")
        assert first.get() == "ord_2"

    def test_corrupt_file_raises_parse_error(self, tmp_path):
        path = tmp_path / "a.json"
        path.write_text("{not json", encoding="utf-8")
        store = JsonActiveOrderStore(path)
        with pytest.raises(ParseError, match="not valid JSON"):
            store.get()
