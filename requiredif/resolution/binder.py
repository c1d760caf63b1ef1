"""Argument construction for a selected predicate.

The first predicate parameter receives the object under validation; the
remaining ones receive the declaration's extra parameters in order. A
parameterless predicate receives nothing, whatever the declaration
supplies.

When the first parameter's type does not accept the instance, a
conversion is attempted with pydantic (``from_attributes=True``, so a
model can be re-read as a compatible model). If that fails too, the
instance is passed through unchanged and any mismatch surfaces when the
predicate runs. ``strict=True`` raises ArgumentBindingError instead.
"""

from collections.abc import Sequence
import logging
from typing import Any

from pydantic import TypeAdapter
from pydantic.errors import PydanticUserError

from ..errors import ArgumentBindingError
from ..utils import accepts_instance, is_universal_type
from .candidates import MethodCandidate

logger = logging.getLogger(__name__)


def _convert(target: Any, instance: Any) -> Any:
    """Convert ``instance`` to ``target`` using pydantic validation.

    Raises:
        PydanticUserError: If pydantic cannot build a schema for ``target``.
        NameError: If ``target`` is an unresolved forward reference.
        ValueError: If validation fails (pydantic.ValidationError).
        TypeError: If ``target`` is not a usable type at all.
    """
    return TypeAdapter(target).validate_python(instance, from_attributes=True)


def bind_instance(
    candidate: MethodCandidate, instance: Any, *, strict: bool = False
) -> Any:
    """Produce the value for the candidate's first parameter.

    Raises:
        ArgumentBindingError: If ``strict`` is set and the instance can be
            neither passed directly nor converted.
    """
    target = candidate.first_parameter_type
    if is_universal_type(target) or accepts_instance(target, instance):
        return instance

    try:
        converted = _convert(target, instance)
    except (PydanticUserError, NameError, TypeError, ValueError) as e:
        if strict:
            raise ArgumentBindingError(candidate.name, target, type(instance)) from e
        logger.debug(
            "Could not convert %s to %r for %s, passing it unchanged: %s",
            type(instance).__name__,
            target,
            candidate.name,
            e,
        )
        return instance

    logger.debug(
        "Converted %s to %r for %s", type(instance).__name__, target, candidate.name
    )
    return converted


def bind(
    candidate: MethodCandidate,
    instance: Any,
    parameters: Sequence[Any],
    *,
    strict: bool = False,
) -> list[Any]:
    """Build the positional arguments for invoking ``candidate``.

    Args:
        candidate: The selected predicate.
        instance: The object under validation.
        parameters: The declaration's extra parameters.
        strict: Fail instead of passing an unconvertible instance through.

    Returns:
        ``[]`` for a parameterless candidate, otherwise the instance
        followed by as many extra parameters as the candidate has slots
        for. Slots with no parameter available are left out, so the call
        fails when the predicate is invoked.
    """
    if candidate.arity == 0:
        return []

    arguments = [bind_instance(candidate, instance, strict=strict)]
    arguments.extend(parameters[: candidate.arity - 1])
    return arguments
