"""Utility functions for requiredif.

This module provides helpers for working with type annotations during
predicate resolution, particularly union flattening and the subtype and
instance relations used to rank candidates.
"""

from types import UnionType
from typing import Any, Union, get_args, get_origin


def is_blank(value: str) -> bool:
    """Check whether a string is empty or made only of whitespace.

    Uses str.isspace(), which is Unicode-aware, so non-breaking spaces,
    ideographic spaces and similar characters count as whitespace.

    Examples:
        >>> is_blank("")
        True
        >>> is_blank(" \\t\\u3000")
        True
        >>> is_blank(" x ")
        False
    """
    return len(value) == 0 or value.isspace()


def annotation_members(annotation: Any) -> tuple[Any, ...]:
    """Flatten a type annotation into its union members.

    Both typing.Union / Optional and PEP 604 unions (``X | Y``) are
    flattened. Any other annotation is returned as a one-element tuple.

    Examples:
        >>> annotation_members(int | None)
        (<class 'int'>, <class 'NoneType'>)
        >>> annotation_members(str)
        (<class 'str'>,)
    """
    if get_origin(annotation) is Union or isinstance(annotation, UnionType):
        return get_args(annotation)
    return (annotation,)


def is_universal_type(annotation: Any) -> bool:
    """Check whether an annotation accepts any object at all.

    ``object`` and ``typing.Any`` are universal; so is a union containing
    either of them.
    """
    return any(
        member is object or member is Any for member in annotation_members(annotation)
    )


def is_supertype_of(annotation: Any, cls: type) -> bool:
    """Check whether ``cls`` is assignable to ``annotation``.

    Non-class members (generics, unresolved string annotations) never match.

    Examples:
        >>> class Person: ...
        >>> class Student(Person): ...
        >>> is_supertype_of(Person, Student)
        True
        >>> is_supertype_of(Person | None, Student)
        True
        >>> is_supertype_of(Student, Person)
        False
    """
    return any(
        isinstance(member, type) and issubclass(cls, member)
        for member in annotation_members(annotation)
    )


def accepts_instance(annotation: Any, value: Any) -> bool:
    """Check whether ``value`` is an instance of ``annotation``.

    Like is_supertype_of(), but against a value rather than a class, so
    ``None`` is accepted by ``Optional[...]`` annotations.
    """
    return any(
        isinstance(member, type) and isinstance(value, member)
        for member in annotation_members(annotation)
    )


def type_name(annotation: Any) -> str:
    """Return a readable name for a type annotation, used in error messages."""
    if isinstance(annotation, type):
        return f"{annotation.__module__}.{annotation.__qualname__}"
    return repr(annotation)
