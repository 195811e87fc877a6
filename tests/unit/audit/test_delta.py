"""Tests for the snapshot delta computation."""

import pytest

from scribe.audit.delta import delta
from scribe.audit.models import ABSENT, FieldChange
from tests.factories import AuditEntryFactory


def _triples(changes: list[FieldChange]) -> list[tuple]:
    return [(c.field, c.previous_value, c.current_value) for c in changes]


class TestDelta:
    """Tests for delta."""

    @pytest.mark.parametrize(
        "payload",
        [
            {},
            {"a": "1"},
            {"a": None, "b": "2"},
            {"owner": {"id": "1", "display": "Ann"}, "tags": ["x", "y"]},
        ],
    )
    def test_identical_snapshots_have_no_changes(self, payload) -> None:
        assert delta(payload, dict(payload)) == []

    def test_first_entry_reports_every_field_added(self) -> None:
        changes = delta(None, {"a": "1", "b": "2"})
        assert _triples(changes) == [("a", ABSENT, "1"), ("b", ABSENT, "2")]
        assert all(c.is_addition for c in changes)

    def test_single_changed_field(self) -> None:
        changes = delta({"a": "1", "b": "2"}, {"a": "1", "b": "3"})
        assert _triples(changes) == [("b", "2", "3")]

    def test_disjoint_keys(self) -> None:
        """Current keys come first, then keys only in previous."""
        changes = delta({"a": "1"}, {"b": "2"})
        assert _triples(changes) == [("b", ABSENT, "2"), ("a", "1", ABSENT)]

    def test_field_order_follows_current(self) -> None:
        previous = {"c": "0", "b": "0", "a": "0"}
        current = {"a": "1", "b": "1", "c": "1"}
        assert [c.field for c in delta(previous, current)] == ["a", "b", "c"]

    def test_none_differs_from_absent(self) -> None:
        """A stored None is a value; a missing key is not."""
        assert _triples(delta({}, {"a": None})) == [("a", ABSENT, None)]
        assert _triples(delta({"a": None}, {})) == [("a", None, ABSENT)]

    def test_value_to_none(self) -> None:
        assert _triples(delta({"a": "1"}, {"a": None})) == [("a", "1", None)]

    def test_composite_values_compare_structurally(self) -> None:
        previous = {"owner": {"id": "1", "display": "Ann"}}
        assert delta(previous, {"owner": {"id": "1", "display": "Ann"}}) == []
        changes = delta(previous, {"owner": {"id": "2", "display": "Bob"}})
        assert _triples(changes) == [
            ("owner", {"id": "1", "display": "Ann"}, {"id": "2", "display": "Bob"})
        ]

    def test_strings_compare_whole(self) -> None:
        changes = delta({"note": "hello world"}, {"note": "hello world!"})
        assert _triples(changes) == [("note", "hello world", "hello world!")]

    def test_accepts_entries(self) -> None:
        previous = AuditEntryFactory.create(payload={"status": "draft"})
        current = AuditEntryFactory.create(payload={"status": "sent"})
        assert _triples(delta(previous, current)) == [("status", "draft", "sent")]

    def test_does_not_mutate_inputs(self) -> None:
        previous = {"a": "1"}
        current = {"b": "2"}
        delta(previous, current)
        assert previous == {"a": "1"}
        assert current == {"b": "2"}

    @pytest.mark.parametrize("bad", ["a=1", ["a"], 3])
    def test_non_mapping_previous_raises(self, bad) -> None:
        with pytest.raises(TypeError):
            delta(bad, {"a": "1"})

    @pytest.mark.parametrize("bad", [None, "a=1", [("a", "1")]])
    def test_non_mapping_current_raises(self, bad) -> None:
        with pytest.raises(TypeError):
            delta({"a": "1"}, bad)
