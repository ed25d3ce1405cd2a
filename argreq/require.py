"""Assert that function and constructor arguments meet their requirements.

Requirements are PyHamcrest matchers. Build them with the factories in
:mod:`argreq.requirements` or compose them with ``hamcrest`` itself.
"""

from __future__ import annotations

from collections.abc import Callable
import logging
from typing import TYPE_CHECKING, TypeVar

from hamcrest.core.string_description import StringDescription, tostring

from argreq.const import FAILURE_MESSAGE_PARAMETER, FAILURE_MESSAGE_PREFIX
from argreq.exceptions import IndexOutOfRangeError, InvalidArgumentError

if TYPE_CHECKING:
    from hamcrest.core.matcher import Matcher

T = TypeVar("T")

ErrorFactory = Callable[[str], BaseException]

LOGGER = logging.getLogger(__name__)


def describe(requirement: Matcher[T]) -> str:
    """Render the description of a requirement as text."""
    return tostring(requirement)


def failure_message(
    parameter_name: str, argument: object, requirement: Matcher[T]
) -> str:
    """Build the message reported when argument fails requirement."""
    description = (
        StringDescription()
        .append_text(FAILURE_MESSAGE_PREFIX)
        .append_description_of(requirement)
        .append_text(FAILURE_MESSAGE_PARAMETER.format(name=parameter_name))
        .append_text(repr(argument))
    )
    return str(description)


def require_that(
    parameter_name: str,
    argument: T,
    requirement: Matcher[T],
    error_factory: ErrorFactory = InvalidArgumentError,
) -> T:
    """Check argument meets requirement. Returns argument for chaining.

    On mismatch the failure message is passed to ``error_factory`` and the
    exception it returns is raised. Errors raised by the requirement itself
    propagate unchanged.
    """
    if requirement.matches(argument):
        return argument

    message = failure_message(parameter_name, argument, requirement)
    LOGGER.debug("Validation failed: %s", message)
    raise error_factory(message)


def require_that_index(parameter_name: str, index: T, requirement: Matcher[T]) -> T:
    """Check index meets requirement. Raises IndexOutOfRangeError."""
    return require_that(parameter_name, index, requirement, IndexOutOfRangeError)
