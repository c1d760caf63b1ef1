"""Introspection of predicate candidates.

This module turns the members found on a class into MethodCandidate
descriptors. It is the only place that touches inspect and typing: the
locator, binder and evaluator work with MethodCandidate objects alone.

A candidate describes the *predicate* view of a callable, meaning the
parameters a caller has to supply. The implicit ``self`` of an instance
method and ``cls`` of a classmethod are not part of it:

    class Person:
        def is_adult(self) -> bool: ...                 # arity 0
        @staticmethod
        def has_name(person: "Person") -> bool: ...     # arity 1
        def in_mode(self, person, mode: int) -> bool:   # arity 2
            ...
"""

from collections.abc import Callable, Sequence
import inspect
import logging
from types import SimpleNamespace
import typing
from typing import Any, Literal

from ..overloads import PredicateOverloads

logger = logging.getLogger(__name__)

MethodKind = Literal["instance", "static", "class"]

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


class MethodCandidate:
    """A callable that may serve as the predicate for a declaration.

    Attributes:
        name: Attribute name the candidate was found under.
        owner: Class whose ``__dict__`` defines the candidate.
        scope: Class the lookup was performed against; classmethods are
            bound to it.
        function: The underlying plain function (or callable object).
        kind: "instance", "static" or "class".
        parameter_types: Types of the predicate parameters, in order.
            Unannotated parameters are ``object``.
        return_type: Return annotation, or ``inspect.Signature.empty``.
    """

    def __init__(
        self,
        name: str,
        owner: type,
        scope: type,
        function: Callable[..., Any],
        kind: MethodKind,
        parameter_types: Sequence[Any],
        return_type: Any,
    ) -> None:
        self._name = name
        self._owner = owner
        self._scope = scope
        self._function = function
        self._kind = kind
        self._parameter_types = tuple(parameter_types)
        self._return_type = return_type

    @property
    def name(self) -> str:
        return self._name

    @property
    def owner(self) -> type:
        return self._owner

    @property
    def scope(self) -> type:
        return self._scope

    @property
    def function(self) -> Callable[..., Any]:
        return self._function

    @property
    def kind(self) -> MethodKind:
        return self._kind

    @property
    def is_static(self) -> bool:
        """Whether the candidate is invoked without the validation instance
        as its receiver."""
        return self._kind != "instance"

    @property
    def parameter_types(self) -> tuple[Any, ...]:
        return self._parameter_types

    @property
    def arity(self) -> int:
        """Number of positional predicate parameters."""
        return len(self._parameter_types)

    @property
    def first_parameter_type(self) -> Any:
        """Type of the instance slot, or None for a parameterless candidate."""
        if not self._parameter_types:
            return None
        return self._parameter_types[0]

    @property
    def return_type(self) -> Any:
        return self._return_type

    @property
    def has_return_annotation(self) -> bool:
        return self._return_type is not inspect.Signature.empty

    def invoke(self, instance: Any, arguments: Sequence[Any]) -> Any:
        """Call the candidate with the given positional arguments.

        Instance methods receive ``instance`` as ``self``; classmethods are
        bound to the lookup scope; static methods are called as-is.
        Exceptions raised by the callable propagate unchanged.
        """
        if self._kind == "instance":
            return self._function(instance, *arguments)
        if self._kind == "class":
            return self._function(self._scope, *arguments)
        return self._function(*arguments)

    def __repr__(self) -> str:
        params = ", ".join(_annotation_repr(t) for t in self._parameter_types)
        return (
            f"MethodCandidate({self._owner.__qualname__}.{self._name}({params}), "
            f"kind={self._kind!r})"
        )


def _annotation_repr(annotation: Any) -> str:
    if isinstance(annotation, type):
        return annotation.__qualname__
    return repr(annotation)


def _resolve_hints(
    function: Callable[..., Any], owner: type, scope: type
) -> dict[str, Any]:
    """Resolve string annotations of ``function``.

    The owner and scope classes are added to the local namespace so that a
    method annotated with its own (possibly locally defined) class resolves.
    If some annotations cannot be resolved (for example names imported only
    under ``TYPE_CHECKING``), the others are still resolved one by one and
    the unresolved ones are left out; callers use the raw annotation for
    those.
    """
    localns = {owner.__name__: owner, scope.__name__: scope}
    try:
        return typing.get_type_hints(function, localns=localns)
    except (NameError, TypeError, AttributeError, SyntaxError) as e:
        logger.debug(
            "Could not resolve all annotations of %s: %s",
            getattr(function, "__qualname__", function),
            e,
        )

    annotations = getattr(function, "__annotations__", None)
    if not isinstance(annotations, dict):
        return {}

    globalns = getattr(function, "__globals__", None)
    hints: dict[str, Any] = {}
    for name, annotation in annotations.items():
        holder = SimpleNamespace(__annotations__={name: annotation})
        try:
            hints.update(
                typing.get_type_hints(holder, globalns=globalns, localns=localns)
            )
        except (NameError, TypeError, AttributeError, SyntaxError) as e:
            logger.debug(
                "Leaving annotation %r of %s unresolved: %s",
                name,
                getattr(function, "__qualname__", function),
                e,
            )
    return hints


def describe_member(
    member: Any, *, name: str, owner: type, scope: type
) -> list[MethodCandidate]:
    """Build the candidates contributed by one class attribute.

    Args:
        member: The raw attribute from ``owner.__dict__``.
        name: The attribute name.
        owner: The class that defines the attribute.
        scope: The class the lookup is performed against.

    Returns:
        Zero or more candidates. Overload groups contribute one candidate
        per implementation; non-callable attributes contribute none.
    """
    if isinstance(member, PredicateOverloads):
        candidates: list[MethodCandidate] = []
        for implementation in member.implementations:
            candidates.extend(
                describe_member(implementation, name=name, owner=owner, scope=scope)
            )
        return candidates

    kind: MethodKind
    if isinstance(member, staticmethod):
        function, kind = member.__func__, "static"
    elif isinstance(member, classmethod):
        function, kind = member.__func__, "class"
    elif inspect.isfunction(member):
        function, kind = member, "instance"
    elif callable(member) and not isinstance(member, type):
        # Callable objects are not bound to instances when accessed
        function, kind = member, "static"
    else:
        return []

    try:
        signature = inspect.signature(function)
    except (ValueError, TypeError):
        logger.debug("Skipping %s.%s: no signature available", owner.__name__, name)
        return []

    hints = _resolve_hints(function, owner, scope)
    parameters = [
        p for p in signature.parameters.values() if p.kind in _POSITIONAL_KINDS
    ]
    if kind != "static":
        parameters = parameters[1:]

    parameter_types = []
    for parameter in parameters:
        if parameter.name in hints:
            parameter_types.append(hints[parameter.name])
        elif parameter.annotation is inspect.Parameter.empty:
            parameter_types.append(object)
        else:
            parameter_types.append(parameter.annotation)

    return [
        MethodCandidate(
            name=name,
            owner=owner,
            scope=scope,
            function=function,
            kind=kind,
            parameter_types=parameter_types,
            return_type=hints.get("return", signature.return_annotation),
        )
    ]


def enumerate_candidates(scope: type, method_name: str) -> list[MethodCandidate]:
    """Find every candidate named ``method_name`` visible from ``scope``.

    Walks ``scope.__mro__`` from the most derived class, so an override is
    listed before the definition it shadows. ``object`` itself is skipped.

    Raises:
        TypeError: If ``scope`` is not a class.
    """
    if not isinstance(scope, type):
        raise TypeError(f"scope must be a type, got {type(scope).__name__}")

    candidates: list[MethodCandidate] = []
    for cls in scope.__mro__:
        if cls is object:
            continue
        member = vars(cls).get(method_name)
        if member is None:
            continue
        candidates.extend(
            describe_member(member, name=method_name, owner=cls, scope=scope)
        )

    logger.debug(
        "Found %d candidate(s) for %s.%s: %s",
        len(candidates),
        scope.__name__,
        method_name,
        candidates,
    )
    return candidates
