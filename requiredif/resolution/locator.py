"""Selection of the predicate to call for a declaration.

Given the candidates named by a declaration, exactly one is chosen by an
ordered list of rules. The first rule that any candidate satisfies wins;
within a rule, candidates are considered in lookup order (most derived
class first, overloads in declaration order).

Priority:
    1. No predicate parameters at all (extra parameters are ignored).
    2. First parameter typed exactly as the scope.
    3. First parameter typed as a base class of the scope.
    4. First parameter accepting the validation instance.
    5. First parameter accepting any object (``object``, ``Any`` or
       unannotated).
    6. Any candidate with the right arity.

Rules 2-6 require ``1 + extra_arity`` positional parameters. Rules 3 and 4
skip universal types so that a typed signature always beats an untyped
one.

Instance methods are only considered when the validated object is an
instance of the class defining them, since it becomes their ``self``. An
instance method on an unrelated rules class is never called.
"""

from collections.abc import Callable, Sequence
import logging
from typing import Any

from ..errors import MethodNotFoundError
from ..utils import accepts_instance, is_supertype_of, is_universal_type
from .candidates import MethodCandidate, enumerate_candidates

logger = logging.getLogger(__name__)

SelectionRule = Callable[[MethodCandidate, type, Any, int], bool]


def _parameterless(
    candidate: MethodCandidate, scope: type, instance: Any, extra_arity: int
) -> bool:
    return candidate.arity == 0


def _exact_scope(
    candidate: MethodCandidate, scope: type, instance: Any, extra_arity: int
) -> bool:
    return (
        candidate.arity == 1 + extra_arity
        and candidate.first_parameter_type is scope
    )


def _scope_hierarchy(
    candidate: MethodCandidate, scope: type, instance: Any, extra_arity: int
) -> bool:
    first = candidate.first_parameter_type
    return (
        candidate.arity == 1 + extra_arity
        and not is_universal_type(first)
        and is_supertype_of(first, scope)
    )


def _instance_hierarchy(
    candidate: MethodCandidate, scope: type, instance: Any, extra_arity: int
) -> bool:
    first = candidate.first_parameter_type
    return (
        candidate.arity == 1 + extra_arity
        and not is_universal_type(first)
        and accepts_instance(first, instance)
    )


def _universal(
    candidate: MethodCandidate, scope: type, instance: Any, extra_arity: int
) -> bool:
    return candidate.arity == 1 + extra_arity and is_universal_type(
        candidate.first_parameter_type
    )


def _matching_arity(
    candidate: MethodCandidate, scope: type, instance: Any, extra_arity: int
) -> bool:
    return candidate.arity == 1 + extra_arity


def _has_receiver(candidate: MethodCandidate, instance: Any) -> bool:
    return candidate.kind != "instance" or isinstance(instance, candidate.owner)


SELECTION_RULES: tuple[tuple[str, SelectionRule], ...] = (
    ("parameterless", _parameterless),
    ("exact scope type", _exact_scope),
    ("scope hierarchy", _scope_hierarchy),
    ("instance hierarchy", _instance_hierarchy),
    ("any object", _universal),
    ("matching arity", _matching_arity),
)


def select_candidate(
    candidates: Sequence[MethodCandidate],
    scope: type,
    instance: Any,
    extra_arity: int,
) -> MethodCandidate | None:
    """Pick the best candidate, or None if none has a usable signature.

    This is a pure function of its arguments; it performs no lookup.

    Args:
        candidates: Candidates in lookup order.
        scope: The class the lookup was performed against.
        instance: The object under validation (may be None when the scope
            was declared explicitly).
        extra_arity: Number of extra parameters in the declaration.

    Returns:
        The selected candidate, or None.
    """
    usable = [c for c in candidates if _has_receiver(c, instance)]
    for priority, (label, rule) in enumerate(SELECTION_RULES, start=1):
        for candidate in usable:
            if rule(candidate, scope, instance, extra_arity):
                logger.debug(
                    "Selected %r by priority %d (%s)", candidate, priority, label
                )
                return candidate
    return None


def locate(
    scope: type, method_name: str, instance: Any, extra_arity: int
) -> MethodCandidate:
    """Find the predicate a declaration refers to.

    Args:
        scope: The declared external type, or the runtime type of the
            instance under validation.
        method_name: Name of the predicate.
        instance: The object under validation.
        extra_arity: Number of extra parameters in the declaration.

    Returns:
        The selected MethodCandidate.

    Raises:
        MethodNotFoundError: If no member with that name exists on the scope
            or its base classes, or none has a compatible signature.
    """
    if extra_arity < 0:
        raise ValueError(f"extra_arity must be non-negative, got {extra_arity}")

    candidates = enumerate_candidates(scope, method_name)
    if not candidates:
        raise MethodNotFoundError(method_name, scope, extra_arity)

    selected = select_candidate(candidates, scope, instance, extra_arity)
    if selected is None:
        raise MethodNotFoundError(method_name, scope, extra_arity)
    return selected
