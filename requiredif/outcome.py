"""Validation outcomes.

A field check ends in either Success or Failure. Outcomes are plain data:
they are returned, never raised, so a caller can collect the results of
every field before reporting.
"""


class Outcome:
    """Base class for the result of checking one field."""

    __slots__ = ()

    @property
    def is_success(self) -> bool:
        return isinstance(self, Success)

    def __bool__(self) -> bool:
        return self.is_success


class Success(Outcome):
    """The field satisfies its requirement (or is currently optional).

    Use the SUCCESS singleton rather than instantiating this class.
    """

    __slots__ = ()

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Success)

    def __hash__(self) -> int:
        return hash(Success)

    def __repr__(self) -> str:
        return "SUCCESS"


# Singleton instance representing a passed check
SUCCESS = Success()


class Failure(Outcome):
    """The field is required but its value is missing or blank.

    Attributes:
        reason: Human-readable description of why the check failed.
    """

    __slots__ = ("_reason",)

    def __init__(self, reason: str) -> None:
        if not isinstance(reason, str):
            raise TypeError(f"reason must be str, got {type(reason).__name__}")
        self._reason = reason

    @property
    def reason(self) -> str:
        """The failure message."""
        return self._reason

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Failure) and other._reason == self._reason

    def __hash__(self) -> int:
        return hash((Failure, self._reason))

    def __repr__(self) -> str:
        return f"Failure({self._reason!r})"
