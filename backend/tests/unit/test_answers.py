"""Unit tests for answer storage and lenient answer readers."""

import pytest

from ohshub.core.answers import AnswerStore, freeze_answers, get_choice, get_choices, has_answer


class TestLenientReaders:
    """Tests for get_choice / get_choices / has_answer."""

    def test_get_choice_returns_declared_value(self):
        assert get_choice({"q": "long"}, "q", ("short", "long")) == "long"

    def test_get_choice_treats_undeclared_value_as_absent(self):
        assert get_choice({"q": "forever"}, "q", ("short", "long")) is None

    def test_get_choice_treats_list_as_absent(self):
        """A list where a single value is expected is malformed."""
        assert get_choice({"q": ["long"]}, "q") is None

    def test_get_choice_missing_and_empty(self):
        assert get_choice({}, "q") is None
        assert get_choice({"q": ""}, "q") is None

    def test_get_choices_treats_scalar_as_no_selection(self):
        """A scalar where a list is expected reads as nothing selected."""
        assert get_choices({"q": "hav"}, "q", ("hav", "wbv")) == ()

    def test_get_choices_filters_undeclared_duplicates_and_non_strings(self):
        answers = {"q": ["wbv", "bogus", 3, "wbv", "hav"]}
        assert get_choices(answers, "q", ("hav", "wbv")) == ("wbv", "hav")

    def test_has_answer(self):
        assert has_answer({"q": "x"}, "q")
        assert has_answer({"q": ["x"]}, "q")
        assert not has_answer({"q": []}, "q")
        assert not has_answer({"q": ""}, "q")
        assert not has_answer({"q": None}, "q")
        assert not has_answer({}, "q")


class TestAnswerStore:
    """Tests for the mutable answer store."""

    def test_toggle_adds_once_and_removes(self):
        store = AnswerStore()
        store.toggle_option("kinds", "dust", True)
        store.toggle_option("kinds", "noise", True)
        store.toggle_option("kinds", "dust", True)
        assert store["kinds"] == ["dust", "noise"]

        store.toggle_option("kinds", "dust", False)
        assert store["kinds"] == ["noise"]

    def test_toggle_keeps_order_of_checked_options(self):
        """Re-checking an already checked option does not move it."""
        store = AnswerStore({"kinds": ["a", "b", "c"]})
        store.toggle_option("kinds", "a", True)
        assert store["kinds"] == ["a", "b", "c"]

    def test_toggle_replaces_scalar_value(self):
        store = AnswerStore({"kinds": "dust"})
        store.toggle_option("kinds", "noise", True)
        assert store["kinds"] == ["noise"]

    def test_store_copies_initial_lists(self):
        initial = {"kinds": ["dust"]}
        store = AnswerStore(initial)
        store.toggle_option("kinds", "noise", True)
        assert initial == {"kinds": ["dust"]}

    def test_clear_answer_is_idempotent(self):
        store = AnswerStore({"q": "x"})
        store.clear_answer("q")
        store.clear_answer("q")
        assert "q" not in store

    def test_snapshot_is_read_only(self):
        store = AnswerStore({"q": "x", "kinds": ["dust"]})
        snapshot = store.snapshot()
        with pytest.raises(TypeError):
            snapshot["q"] = "y"  # type: ignore[index]
        assert snapshot["kinds"] == ("dust",)

    def test_snapshot_does_not_follow_later_mutations(self):
        store = AnswerStore({"q": "x"})
        snapshot = store.snapshot()
        store.set_answer("q", "y")
        assert snapshot["q"] == "x"

    def test_to_dict_returns_plain_lists(self):
        store = AnswerStore({"kinds": ("dust", "noise")})
        assert store.to_dict() == {"kinds": ["dust", "noise"]}

    def test_freeze_answers_converts_lists(self):
        frozen = freeze_answers({"kinds": ["dust"], "q": "x"})
        assert frozen == {"kinds": ("dust",), "q": "x"}
