"""Error taxonomy for botspec assertions (core domain).

Two kinds of errors exist: caller mistakes (a missing pattern) and assertion
failures (a pattern that did not match). Assertion failures are grouped in
families so test code can tell a message failure from a card failure.
"""

from __future__ import annotations

from typing import Callable, Optional, Type, TypeVar


class InvalidArgumentError(ValueError):
    """A required argument was None."""

    def __init__(self, argument_name: str) -> None:
        super().__init__(f"Argument '{argument_name}' must not be None")
        self.argument_name = argument_name


class AssertionFailedError(AssertionError):
    """Base failure raised when a property does not match a pattern."""

    def __init__(self, property_name: str, pattern: str, message: Optional[str] = None) -> None:
        if message is None:
            message = describe_failure(property_name, pattern)
        super().__init__(message)
        self.property_name = property_name
        self.pattern = pattern


class MessageAssertionFailedError(AssertionFailedError):
    """Failure on a message or a set of messages."""


class CardAssertionFailedError(AssertionFailedError):
    """Failure on a rich card or a set of rich cards."""


class CardComponentAssertionFailedError(AssertionFailedError):
    """Failure on a card component (button, image, fact, receipt item)."""


class HeroCardAssertionFailedError(CardAssertionFailedError):
    pass


class ThumbnailCardAssertionFailedError(CardAssertionFailedError):
    pass


class SigninCardAssertionFailedError(CardAssertionFailedError):
    pass


class ReceiptCardAssertionFailedError(CardAssertionFailedError):
    pass


class CardActionAssertionFailedError(CardComponentAssertionFailedError):
    pass


class CardImageAssertionFailedError(CardComponentAssertionFailedError):
    pass


class FactAssertionFailedError(CardComponentAssertionFailedError):
    pass


class ReceiptItemAssertionFailedError(CardComponentAssertionFailedError):
    pass


FailureT = TypeVar("FailureT", bound=AssertionFailedError)


def describe_failure(property_name: str, pattern: str) -> str:
    """Return the human-readable failure message."""

    return f"Expected property `{property_name}` to match `{pattern}` but did not."


def failure_factory(
    error_type: Type[FailureT], property_name: str, pattern: str
) -> Callable[[], FailureT]:
    """Return a thunk that builds the failure only when it is needed.

    Nothing is formatted until the thunk is called, so passing assertions
    never pay for building a message.
    """

    def build() -> FailureT:
        return error_type(property_name, pattern)

    return build


def require(argument_name: str, value: Optional[str]) -> str:
    """Return ``value`` or raise InvalidArgumentError when it is None."""

    if value is None:
        raise InvalidArgumentError(argument_name)
    return value
