"""Factories for common requirements.

Every requirement is a PyHamcrest matcher, so the factories here compose
freely with ``hamcrest.all_of``, ``hamcrest.not_`` and the rest of the
``hamcrest`` matchers. A ``None`` argument never meets a requirement built
by :func:`create_requirement`, and its predicate is never applied to it.
"""

from __future__ import annotations

from array import array
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any, TypeVar

from hamcrest import all_of, equal_to, not_
from hamcrest.core.base_matcher import BaseMatcher

from argreq.const import (
    ARRAY_WITHOUT_NULL_DESCRIPTION,
    COLLECTION_WITHOUT_NULL_DESCRIPTION,
    INT_ARRAY_DESCRIPTION,
    INT_TYPECODES,
    LONG_ARRAY_DESCRIPTION,
    MAP_WITHOUT_NULL_KEY_DESCRIPTION,
    MAP_WITHOUT_NULL_VALUES_DESCRIPTION,
    STRIPPED_DESCRIPTION,
)

if TYPE_CHECKING:
    from collections.abc import Collection, Container, Mapping

    from hamcrest.core.description import Description
    from hamcrest.core.matcher import Matcher

T = TypeVar("T")


class PredicateRequirement(BaseMatcher[T]):
    """Requirement met by non-None values accepted by a predicate."""

    def __init__(self, description: str, predicate: Callable[[T], Any]):
        self.description = description
        self.predicate = predicate

    def _matches(self, item: T | None) -> bool:
        if item is None:
            return False
        return bool(self.predicate(item))

    def describe_to(self, description: Description) -> None:
        description.append_text(self.description)


def create_requirement(
    description: str, predicate: Callable[[T], Any]
) -> Matcher[T]:
    """Create a requirement from a description and a predicate."""
    return PredicateRequirement(description, predicate)


def _lacks_none(container: Container[Any]) -> bool:
    # Containers that refuse a None probe cannot hold None.
    try:
        return None not in container
    except (TypeError, ValueError):
        return True


def stripped_string() -> Matcher[str]:
    return create_requirement(
        STRIPPED_DESCRIPTION, lambda string: string.strip() == string
    )


def non_empty_stripped_string() -> Matcher[str]:
    return all_of(stripped_string(), not_(equal_to("")))


def _is_array(value: object) -> bool:
    return isinstance(value, (Sequence, array)) and not isinstance(
        value, (str, bytes, bytearray)
    )


def _is_int_array(value: object, size: int) -> bool:
    if not _is_array(value) or len(value) != size:
        return False
    if isinstance(value, array):
        return value.typecode in INT_TYPECODES
    return all(
        isinstance(element, int) and not isinstance(element, bool) for element in value
    )


def array_of_ints_with_size(size: int) -> Matcher[Sequence[int]]:
    return create_requirement(
        INT_ARRAY_DESCRIPTION.format(size=size),
        lambda value: _is_int_array(value, size),
    )


def array_of_longs_with_size(size: int) -> Matcher[Sequence[int]]:
    """Same check as array_of_ints_with_size; Python has one integer type."""
    return create_requirement(
        LONG_ARRAY_DESCRIPTION.format(size=size),
        lambda value: _is_int_array(value, size),
    )


def not_has_null_in_array() -> Matcher[Sequence[Any]]:
    return create_requirement(
        ARRAY_WITHOUT_NULL_DESCRIPTION,
        lambda value: _is_array(value)
        and all(element is not None for element in value),
    )


def not_has_null() -> Matcher[Collection[Any]]:
    """Require a collection without None elements.

    A collection whose membership test raises TypeError or ValueError for a
    None probe is taken to hold no None.
    """
    return create_requirement(COLLECTION_WITHOUT_NULL_DESCRIPTION, _lacks_none)


def not_has_null_key() -> Matcher[Mapping[Any, Any]]:
    return create_requirement(MAP_WITHOUT_NULL_KEY_DESCRIPTION, _lacks_none)


def not_has_null_values() -> Matcher[Mapping[Any, Any]]:
    return create_requirement(
        MAP_WITHOUT_NULL_VALUES_DESCRIPTION,
        lambda mapping: _lacks_none(mapping.values()),
    )


def not_has_null_key_or_values() -> Matcher[Mapping[Any, Any]]:
    return all_of(not_has_null_key(), not_has_null_values())
