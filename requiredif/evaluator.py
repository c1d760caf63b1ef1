"""Invocation of a bound predicate."""

from collections.abc import Sequence
import logging
from typing import Any

from .errors import InvalidReturnTypeError
from .resolution import MethodCandidate

logger = logging.getLogger(__name__)


def evaluate(
    candidate: MethodCandidate, instance: Any, arguments: Sequence[Any]
) -> bool:
    """Run the predicate and return its verdict.

    A predicate annotated with any return type other than ``bool`` is
    rejected before it is called. An unannotated predicate is called and
    its result must be a ``bool``.

    Args:
        candidate: The selected predicate.
        instance: The object under validation, used as ``self`` for
            instance methods.
        arguments: Positional arguments from the binder.

    Returns:
        The predicate's result.

    Raises:
        InvalidReturnTypeError: If the predicate does not return a bool.
        Exception: Anything the predicate itself raises, unwrapped.
    """
    if candidate.has_return_annotation and candidate.return_type is not bool:
        raise InvalidReturnTypeError(candidate.name, candidate.return_type)

    result = candidate.invoke(instance, arguments)

    if not isinstance(result, bool):
        raise InvalidReturnTypeError(candidate.name, type(result))

    logger.debug("%s returned %s", candidate.name, result)
    return result
