"""Several predicate signatures under one attribute name.

A Python class holds a single attribute per name, so a predicate that
should accept different argument shapes is declared as an overload group:

    class Person(ValidatedModel):
        surname: str | None = None

        @predicate
        def is_surname_empty(self) -> bool:
            return not self.surname

        @is_surname_empty.overload
        @staticmethod
        def is_surname_empty(person: "Person", mode: int) -> bool:
            return mode == 1

The locator treats each implementation as its own candidate and picks one
by the usual priority rules. Calling the attribute directly dispatches on
the number of positional arguments.

Note:
    Pydantic rejects unknown class attributes on models. ValidatedModel
    already lists PredicateOverloads in ``ignored_types``; plain
    ``BaseModel`` subclasses must do the same.
"""

from collections.abc import Callable
from typing import Any, Self


def _unwrap(func: Any) -> Any:
    if isinstance(func, (staticmethod, classmethod)):
        return func.__func__
    return func


class PredicateOverloads:
    """Descriptor holding the implementations of one overloaded predicate.

    Attributes:
        implementations: Functions, staticmethods and classmethods in the
            order they were declared.
    """

    def __init__(self, func: Callable[..., Any] | staticmethod | classmethod) -> None:
        self._implementations: list[Any] = []
        self._owner: type | None = None
        self._add(func)
        unwrapped = _unwrap(func)
        self.__name__: str = getattr(unwrapped, "__name__", "<predicate>")
        self.__doc__ = getattr(unwrapped, "__doc__", None)

    def _add(self, func: Any) -> None:
        if isinstance(func, PredicateOverloads):
            self._implementations.extend(func._implementations)
            return
        if not callable(_unwrap(func)):
            raise TypeError(
                f"predicate implementation must be callable, got {type(func).__name__}"
            )
        self._implementations.append(func)

    @property
    def implementations(self) -> tuple[Any, ...]:
        return tuple(self._implementations)

    def overload(self, func: Callable[..., Any] | staticmethod | classmethod) -> Self:
        """Register another implementation under the same name.

        Returns the group itself so that the decorated name keeps referring
        to it.
        """
        self._add(func)
        return self

    def __set_name__(self, owner: type, name: str) -> None:
        self._owner = owner
        self.__name__ = name

    def __get__(self, obj: Any, objtype: type | None = None) -> "BoundPredicate":
        if objtype is None:
            objtype = type(obj)
        return BoundPredicate(self, obj, objtype)

    def __repr__(self) -> str:
        count = len(self._implementations)
        return f"PredicateOverloads({self.__name__!r}, implementations={count})"


class BoundPredicate:
    """An overload group accessed through a class or an instance.

    Calling it picks the first implementation whose positional arity
    matches the number of arguments. When accessed through the class,
    instance-method implementations take ``self`` explicitly, as plain
    functions do.
    """

    def __init__(self, group: PredicateOverloads, instance: Any, owner: type) -> None:
        self._group = group
        self._instance = instance
        self._owner = owner

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        from .resolution.candidates import describe_member

        for implementation in self._group.implementations:
            for candidate in describe_member(
                implementation,
                name=self._group.__name__,
                owner=self._group._owner or self._owner,
                scope=self._owner,
            ):
                if candidate.kind == "instance" and self._instance is None:
                    if candidate.arity + 1 == len(args):
                        return candidate.function(*args, **kwargs)
                elif candidate.arity == len(args):
                    if candidate.kind == "instance":
                        return candidate.function(self._instance, *args, **kwargs)
                    if candidate.kind == "class":
                        return candidate.function(self._owner, *args, **kwargs)
                    return candidate.function(*args, **kwargs)

        raise TypeError(
            f"No implementation of '{self._group.__name__}' accepts "
            f"{len(args)} positional argument(s)"
        )

    def __repr__(self) -> str:
        return f"<bound predicate {self._owner.__name__}.{self._group.__name__}>"


def predicate(
    func: Callable[..., Any] | staticmethod | classmethod,
) -> PredicateOverloads:
    """Start an overload group for a predicate.

    Examples:
        >>> class Rules:
        ...     @predicate
        ...     @staticmethod
        ...     def is_set(value: object) -> bool:
        ...         return value is not None
        ...
        ...     @is_set.overload
        ...     @staticmethod
        ...     def is_set(value: object, strict: bool) -> bool:
        ...         return bool(value) if strict else value is not None
        >>> Rules.is_set(None)
        False
        >>> Rules.is_set("", True)
        False
    """
    return PredicateOverloads(func)
