"""requiredif: conditionally required fields.

requiredif makes a field required only while a predicate holds. The
predicate is an ordinary boolean method found by name, on the validated
object's own class or on an external rules class, and may take the
object and extra declared parameters as arguments.

Core Components:
---------------
- RequiredIf: Declaration attached to a field (or used directly)
- ConditionSpec: Immutable configuration behind a declaration
- is_required: Check one field value against a declaration
- ValidatedModel / validate_object: Check every field of a pydantic model
- predicate: Declare several predicate signatures under one name

Predicate Resolution:
--------------------
Among the methods named by a declaration, the first match wins:
1. A predicate without parameters
2. First parameter typed exactly as the looked-up class
3. First parameter typed as one of its base classes
4. First parameter accepting the validated object
5. First parameter accepting any object
6. Any predicate taking the object plus the declared extra parameters

Quick Start:
-----------
    >>> from typing import Annotated
    >>> import requiredif as ri
    >>>
    >>> class Person(ri.ValidatedModel):
    ...     name: Annotated[str | None, ri.RequiredIf("is_surname_empty")] = None
    ...     surname: str | None = None
    ...
    ...     def is_surname_empty(self) -> bool:
    ...         return self.surname is not None and self.surname.strip() == ""
    >>>
    >>> person = Person(surname="")
    >>> person.validate_all_fields()
    [FieldError(field_name='name', display_name='name', message='name is required')]
    >>>
    >>> # Predicate on an external class, with an extra parameter
    >>> class Rules:
    ...     @staticmethod
    ...     def in_mode(person: Person, mode: int) -> bool:
    ...         return mode == 1
    >>>
    >>> ri.is_required(person, None, "Name", ri.ConditionSpec(
    ...     method_name="in_mode", declaring_type=Rules, parameters=(1,)
    ... ))
    Failure('Name is required')
"""

from .checker import check
from .declaration import ConditionSpec
from .errors import (
    ArgumentBindingError,
    InvalidReturnTypeError,
    MethodNotFoundError,
    RequiredIfConfigurationError,
)
from .evaluator import evaluate
from .model import FieldError, ValidatedModel, validate_field, validate_object
from .outcome import SUCCESS, Failure, Outcome, Success
from .overloads import PredicateOverloads, predicate
from .required_if import RequiredIf, evaluate_condition, is_required, resolve_scope
from .resolution import MethodCandidate, bind, locate, select_candidate

__version__ = "0.1.0"

__all__ = [
    # Declarations
    "RequiredIf",
    "ConditionSpec",
    "predicate",
    "PredicateOverloads",
    # Single-field check
    "is_required",
    "evaluate_condition",
    "resolve_scope",
    # Pipeline stages
    "MethodCandidate",
    "locate",
    "select_candidate",
    "bind",
    "evaluate",
    "check",
    # Outcomes
    "Outcome",
    "Success",
    "Failure",
    "SUCCESS",
    # Model validation
    "ValidatedModel",
    "FieldError",
    "validate_object",
    "validate_field",
    # Errors
    "RequiredIfConfigurationError",
    "MethodNotFoundError",
    "InvalidReturnTypeError",
    "ArgumentBindingError",
    # Version
    "__version__",
]
