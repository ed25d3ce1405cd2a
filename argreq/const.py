"""Constants used by argreq."""

from __future__ import annotations

from typing import Final

FAILURE_MESSAGE_PREFIX: Final = "Expected "
FAILURE_MESSAGE_PARAMETER: Final = " for parameter '{name}', but found "

STRIPPED_DESCRIPTION: Final = "a string stripped of leading and trailing whitespace"
INT_TYPECODES: Final = frozenset("bBhHiIlLqQ")
INT_ARRAY_DESCRIPTION: Final = "an int array with size {size}"
LONG_ARRAY_DESCRIPTION: Final = "a long array with size {size}"
ARRAY_WITHOUT_NULL_DESCRIPTION: Final = "an array without any null elements"
COLLECTION_WITHOUT_NULL_DESCRIPTION: Final = "a collection without any null elements"
MAP_WITHOUT_NULL_KEY_DESCRIPTION: Final = "a map without a null key"
MAP_WITHOUT_NULL_VALUES_DESCRIPTION: Final = "a map without any null values"
