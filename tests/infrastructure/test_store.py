"""Tests for TodoStore: uniqueness, snapshots, and notification rules."""

from __future__ import annotations

import pytest

from tests.conftest import CallCounter
from todoctl.domain.entry import Entry
from todoctl.infrastructure.notifier import Notifier
from todoctl.infrastructure.store import TodoStore


@pytest.fixture
def watched(store: TodoStore, counter: CallCounter) -> tuple[TodoStore, CallCounter]:
    store.subscribe(counter)
    return store, counter


class TestAdd:
    def test_add_new_entry(self, watched: tuple[TodoStore, CallCounter]) -> None:
        store, counter = watched
        assert store.add(Entry.create("Buy milk")) is True
        assert store.items == [Entry.create("Buy milk")]
        assert counter.calls == 1

    def test_duplicate_rejected_silently(self, watched: tuple[TodoStore, CallCounter]) -> None:
        store, counter = watched
        assert store.add(Entry.create("Buy milk")) is True
        assert store.add(Entry.create("Buy milk")) is False
        assert len(store.items) == 1
        assert counter.calls == 1

    def test_same_instance_twice(self, watched: tuple[TodoStore, CallCounter]) -> None:
        store, counter = watched
        entry = Entry.create("x")
        store.add(entry)
        assert store.add(entry) is False
        assert counter.calls == 1

    def test_none_is_contract_violation(self, store: TodoStore) -> None:
        with pytest.raises(TypeError):
            store.add(None)  # type: ignore[arg-type]

    def test_raw_string_is_contract_violation(self, store: TodoStore) -> None:
        with pytest.raises(TypeError):
            store.add("Buy milk")  # type: ignore[arg-type]


class TestRemoveByText:
    def test_remove_present(self, watched: tuple[TodoStore, CallCounter]) -> None:
        store, counter = watched
        store.add(Entry.create("a"))
        assert store.remove_by_text("a") is True
        assert store.items == []
        assert counter.calls == 2

    def test_remove_missing_is_silent(self, watched: tuple[TodoStore, CallCounter]) -> None:
        store, counter = watched
        assert store.remove_by_text("missing") is False
        assert counter.calls == 0

    def test_remove_twice(self, watched: tuple[TodoStore, CallCounter]) -> None:
        store, counter = watched
        store.add(Entry.create("a"))
        store.remove_by_text("a")
        assert store.remove_by_text("a") is False
        assert counter.calls == 2

    def test_none_is_contract_violation(self, store: TodoStore) -> None:
        with pytest.raises(TypeError):
            store.remove_by_text(None)  # type: ignore[arg-type]


class TestLookups:
    def test_find_by_text(self, watched: tuple[TodoStore, CallCounter]) -> None:
        store, counter = watched
        store.add(Entry.create("a"))
        assert store.find_by_text("a") == Entry.create("a")
        assert store.find_by_text("b") is None
        assert counter.calls == 1

    def test_exists_by_value(self, store: TodoStore) -> None:
        store.add(Entry.create("a"))
        assert store.exists(Entry.create("a"))
        assert not store.exists(Entry.create("b"))

    def test_dunder_helpers(self, store: TodoStore) -> None:
        store.add(Entry.create("a"))
        store.add(Entry.create("b"))
        assert len(store) == 2
        assert Entry.create("a") in store
        assert "a" not in store
        assert [e.text for e in store] == ["a", "b"]


class TestSnapshot:
    def test_items_is_a_copy(self, store: TodoStore) -> None:
        store.add(Entry.create("a"))
        snapshot = store.items
        snapshot.append(Entry.create("intruder"))
        snapshot.clear()
        assert store.items == [Entry.create("a")]

    def test_snapshot_unaffected_by_later_mutation(self, store: TodoStore) -> None:
        store.add(Entry.create("a"))
        snapshot = store.items
        store.add(Entry.create("b"))
        assert snapshot == [Entry.create("a")]

    def test_insertion_order(self, store: TodoStore) -> None:
        for text in ("c", "a", "b"):
            store.add(Entry.create(text))
        assert [e.text for e in store.items] == ["c", "a", "b"]


class TestReplaceAll:
    def test_collapses_duplicates_and_notifies_once(
        self, watched: tuple[TodoStore, CallCounter]
    ) -> None:
        store, counter = watched
        store.replace_all([{"text": "a"}, {"text": "a"}, {"text": "b"}])
        assert [e.text for e in store.items] == ["a", "b"]
        assert counter.calls == 1

    def test_first_occurrence_wins(self, store: TodoStore) -> None:
        store.replace_all([{"text": "a"}, {"text": "b"}, {"text": "a"}])
        assert [e.text for e in store.items] == ["a", "b"]

    def test_clears_previous_contents(self, store: TodoStore) -> None:
        store.add(Entry.create("old"))
        store.replace_all([Entry.create("new")])
        assert store.items == [Entry.create("new")]

    def test_empty_input_still_notifies(self, watched: tuple[TodoStore, CallCounter]) -> None:
        store, counter = watched
        store.add(Entry.create("a"))
        store.replace_all([])
        assert store.items == []
        assert counter.calls == 2

    def test_entries_are_rebuilt(self, store: TodoStore) -> None:
        original = Entry.create("a")
        store.replace_all([original])
        stored = store.find_by_text("a")
        assert stored == original
        assert stored is not original

    def test_extraneous_fields_dropped(self, store: TodoStore) -> None:
        store.replace_all([{"text": "a", "completed": True}])
        assert store.items[0].model_dump() == {"text": "a"}

    def test_accepts_generators(self, store: TodoStore) -> None:
        store.replace_all({"text": t} for t in "xyz")
        assert len(store) == 3

    def test_bad_item_is_contract_violation(self, store: TodoStore) -> None:
        with pytest.raises(TypeError):
            store.replace_all(["a"])  # type: ignore[list-item]


class TestNotifierOwnership:
    def test_private_notifier_by_default(self) -> None:
        assert isinstance(TodoStore().notifier, Notifier)
        assert TodoStore().notifier is not TodoStore().notifier

    def test_injected_notifier(self, counter: CallCounter) -> None:
        notifier = Notifier()
        notifier.register(counter)
        store = TodoStore(notifier)
        store.add(Entry.create("a"))
        assert counter.calls == 1

    def test_unsubscribe(self, watched: tuple[TodoStore, CallCounter]) -> None:
        store, counter = watched
        store.unsubscribe(counter)
        store.add(Entry.create("a"))
        assert counter.calls == 0

    def test_failing_subscriber_does_not_undo_mutation(self, store: TodoStore) -> None:
        def broken() -> None:
            raise ValueError

        store.subscribe(broken)
        assert store.add(Entry.create("a")) is True
        assert store.items == [Entry.create("a")]

    def test_subscriber_sees_new_state(self, store: TodoStore) -> None:
        seen: list[list[str]] = []
        store.subscribe(lambda: seen.append([e.text for e in store.items]))
        store.add(Entry.create("a"))
        store.remove_by_text("a")
        assert seen == [["a"], []]
