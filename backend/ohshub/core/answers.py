"""Answer set storage and lenient answer readers.

An answer set maps question ids to a single string (single-choice and
free-text questions) or a list of strings (multi-choice questions). Engines
read answers through ``get_choice`` / ``get_choices`` so that a value of the
wrong shape, or a value that is not one of the declared options, counts as
absent instead of raising.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, MutableMapping
from types import MappingProxyType
from typing import Any

AnswerValue = str | list[str] | tuple[str, ...]
AnswerSet = Mapping[str, Any]


def _is_multi(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def get_choice(
    answers: AnswerSet,
    question_id: str,
    allowed: Iterable[str] | None = None,
) -> str | None:
    """Read a single-choice answer.

    Args:
        answers: Answer set to read from
        question_id: Question to read
        allowed: Optional declared option values

    Returns:
        The answer, or None when it is missing, empty, not a string or not
        one of the allowed values
    """
    value = answers.get(question_id)
    if not isinstance(value, str) or not value:
        return None
    if allowed is not None and value not in allowed:
        return None
    return value


def get_choices(
    answers: AnswerSet,
    question_id: str,
    allowed: Iterable[str] | None = None,
) -> tuple[str, ...]:
    """Read a multi-choice answer.

    A scalar where a list is expected is malformed and reads as no selection.
    Non-string items, undeclared values and duplicates are dropped.

    Args:
        answers: Answer set to read from
        question_id: Question to read
        allowed: Optional declared option values

    Returns:
        Selected values in answer order
    """
    value = answers.get(question_id)
    if not _is_multi(value):
        return ()

    allowed_values = None if allowed is None else set(allowed)
    picked: list[str] = []
    for item in value:
        if not isinstance(item, str) or item in picked:
            continue
        if allowed_values is not None and item not in allowed_values:
            continue
        picked.append(item)
    return tuple(picked)


def has_answer(answers: AnswerSet, question_id: str) -> bool:
    """Check whether a question holds a non-empty answer of either shape."""
    value = answers.get(question_id)
    if isinstance(value, str):
        return len(value) > 0
    if _is_multi(value):
        return len(value) > 0
    return False


def freeze_answers(answers: AnswerSet) -> Mapping[str, Any]:
    """Return a read-only copy of an answer set.

    Lists are copied into tuples so the copy cannot be changed through the
    values either.
    """
    frozen = {
        question_id: tuple(value) if _is_multi(value) else value
        for question_id, value in answers.items()
    }
    return MappingProxyType(frozen)


class AnswerStore(MutableMapping[str, Any]):
    """Mutable answer set owned by one wizard session."""

    def __init__(self, initial: AnswerSet | None = None):
        self._data: dict[str, Any] = {}
        for question_id, value in (initial or {}).items():
            self[question_id] = value

    def __getitem__(self, question_id: str) -> Any:
        return self._data[question_id]

    def __setitem__(self, question_id: str, value: Any) -> None:
        self._data[question_id] = list(value) if _is_multi(value) else value

    def __delitem__(self, question_id: str) -> None:
        del self._data[question_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def __repr__(self) -> str:
        return f"<AnswerStore({self._data!r})>"

    def set_answer(self, question_id: str, value: AnswerValue) -> None:
        """Store (or replace) the answer to a question."""
        self[question_id] = value

    def toggle_option(self, question_id: str, value: str, checked: bool) -> None:
        """Check or uncheck one option of a multi-choice question."""
        current = self._data.get(question_id)
        selected = list(current) if _is_multi(current) else []
        if checked:
            if value not in selected:
                selected.append(value)
        else:
            selected = [v for v in selected if v != value]
        self._data[question_id] = selected

    def clear_answer(self, question_id: str) -> None:
        """Remove the answer to a question, if any."""
        self._data.pop(question_id, None)

    def snapshot(self) -> Mapping[str, Any]:
        """Read-only view of the current answers for rule evaluation."""
        return freeze_answers(self._data)

    def to_dict(self) -> dict[str, Any]:
        """Plain copy suitable for JSON serialization."""
        return {
            question_id: list(value) if _is_multi(value) else value
            for question_id, value in self._data.items()
        }
