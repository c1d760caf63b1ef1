"""Predicate resolution: finding, ranking and binding condition methods.

- candidates: introspection of class members into MethodCandidate objects
- locator: priority-ordered selection of a single candidate
- binder: construction of the argument list for the selected candidate
"""

from .binder import bind, bind_instance
from .candidates import MethodCandidate, describe_member, enumerate_candidates
from .locator import SELECTION_RULES, locate, select_candidate

__all__ = [
    # Introspection
    "MethodCandidate",
    "describe_member",
    "enumerate_candidates",
    # Selection
    "SELECTION_RULES",
    "locate",
    "select_candidate",
    # Binding
    "bind",
    "bind_instance",
]
