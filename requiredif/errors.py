"""Exceptions raised for misconfigured conditional requirements.

Configuration errors describe declarations that can never work: a
predicate that does not exist, or one that does not return a boolean.
They are raised the first time an affected field is validated and are
never turned into an "optional field" result.

Ordinary validation failures (a required value that is missing or blank)
are not exceptions; see requiredif.outcome.
"""

from typing import Any

from .utils import type_name


class RequiredIfConfigurationError(Exception):
    """Base class for errors in a RequiredIf declaration."""


class MethodNotFoundError(RequiredIfConfigurationError, AttributeError):
    """No predicate with a compatible signature exists on the scope.

    Attributes:
        method_name: The predicate name that was looked up.
        scope: The type the lookup was performed against.
        extra_arity: Number of extra parameters the declaration supplies.
    """

    def __init__(self, method_name: str, scope: type, extra_arity: int = 0) -> None:
        self.method_name = method_name
        self.scope = scope
        self.extra_arity = extra_arity
        super().__init__(
            f"Method '{method_name}' not found in type '{type_name(scope)}' "
            f"with a compatible signature (expected no parameters or "
            f"{1 + extra_arity} positional parameters)."
        )


class InvalidReturnTypeError(RequiredIfConfigurationError, TypeError):
    """A predicate was found but it does not return a boolean.

    Attributes:
        method_name: The predicate name.
        return_type: The declared return annotation, or the type of the
            value actually returned by an unannotated predicate.
    """

    def __init__(self, method_name: str, return_type: Any) -> None:
        self.method_name = method_name
        self.return_type = return_type
        super().__init__(
            f"Method '{method_name}' must return a boolean value, "
            f"got {type_name(return_type)}."
        )


class ArgumentBindingError(RequiredIfConfigurationError, TypeError):
    """The validation instance could not be passed to the predicate.

    Only raised when strict binding is enabled; the default binding passes
    an unconvertible instance through unchanged.
    """

    def __init__(self, method_name: str, expected: Any, actual: type) -> None:
        self.method_name = method_name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Cannot pass an instance of '{type_name(actual)}' to method "
            f"'{method_name}', which expects '{type_name(expected)}'."
        )
