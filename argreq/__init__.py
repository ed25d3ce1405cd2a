"""Assert that function and constructor arguments meet specified requirements.

Use :func:`require_that` (or :func:`require_that_index`) to validate
parameters. :mod:`argreq.requirements` holds factories for common
requirements; custom ones come from :func:`create_requirement` or from
composing PyHamcrest matchers.
"""

from __future__ import annotations

from argreq.exceptions import (
    IndexOutOfRangeError,
    InvalidArgumentError,
    RequirementError,
)
from argreq.require import describe, require_that, require_that_index
from argreq.requirements import (
    array_of_ints_with_size,
    array_of_longs_with_size,
    create_requirement,
    non_empty_stripped_string,
    not_has_null,
    not_has_null_in_array,
    not_has_null_key,
    not_has_null_key_or_values,
    not_has_null_values,
    stripped_string,
)

__all__ = [
    "IndexOutOfRangeError",
    "InvalidArgumentError",
    "RequirementError",
    "array_of_ints_with_size",
    "array_of_longs_with_size",
    "create_requirement",
    "describe",
    "non_empty_stripped_string",
    "not_has_null",
    "not_has_null_in_array",
    "not_has_null_key",
    "not_has_null_key_or_values",
    "not_has_null_values",
    "require_that",
    "require_that_index",
    "stripped_string",
]
