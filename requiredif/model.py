"""Validation of whole pydantic models.

RequiredIf declarations are attached to model fields as ``Annotated``
metadata. validate_object() finds every declaration on a model class
(including the ones inherited from base models), checks each field
against the instance's current values and collects the failures, so
one missing field never hides another.

Examples:
    >>> from typing import Annotated
    >>> from requiredif import RequiredIf, ValidatedModel
    >>>
    >>> class Person(ValidatedModel):
    ...     name: Annotated[str | None, RequiredIf("is_surname_empty")] = None
    ...     surname: str | None = None
    ...
    ...     def is_surname_empty(self) -> bool:
    ...         return self.surname is not None and self.surname.strip() == ""
    >>>
    >>> person = Person(surname="")
    >>> [error.message for error in person.validate_all_fields()]
    ['name is required']
    >>> Person(surname="Doe").validate_all_fields()
    []
"""

from collections.abc import Iterator
import logging

from pydantic import BaseModel, ConfigDict, PrivateAttr
from pydantic.fields import FieldInfo

from .overloads import PredicateOverloads
from .required_if import RequiredIf

logger = logging.getLogger(__name__)


class FieldError(BaseModel, frozen=True):
    """A failed conditional requirement on one field.

    Attributes:
        field_name: Attribute name of the field.
        display_name: Name used in the message (the field title if set).
        message: The failure reason.
    """

    field_name: str
    display_name: str
    message: str

    def __str__(self) -> str:
        return self.message


def display_name_for(field_name: str, field_info: FieldInfo) -> str:
    """Return the name shown in messages: the field's title, else its name."""
    return field_info.title or field_name


def iter_declarations(
    model_class: type[BaseModel],
) -> Iterator[tuple[str, FieldInfo, RequiredIf]]:
    """Yield ``(field_name, field_info, declaration)`` for a model class.

    Fields are visited in model order; a field may carry several
    declarations, which are yielded in annotation order.
    """
    if not (isinstance(model_class, type) and issubclass(model_class, BaseModel)):
        raise TypeError(f"Expected a pydantic model class, got {model_class!r}")

    for field_name, field_info in model_class.model_fields.items():
        for item in field_info.metadata:
            if isinstance(item, RequiredIf):
                yield field_name, field_info, item


def validate_field(instance: BaseModel, field_name: str) -> list[FieldError]:
    """Check the conditional requirements of a single field.

    Raises:
        ValueError: If the model has no such field.
    """
    model_class = type(instance)
    if field_name not in model_class.model_fields:
        raise ValueError(f"Unknown field '{field_name}' in {model_class.__name__}")

    errors: list[FieldError] = []
    for name, field_info, declaration in iter_declarations(model_class):
        if name != field_name:
            continue
        errors.extend(_check_declaration(instance, name, field_info, declaration))
    return errors


def validate_object(instance: BaseModel) -> list[FieldError]:
    """Check every conditional requirement declared on a model instance.

    Failures are accumulated across fields. Configuration errors
    (MethodNotFoundError, InvalidReturnTypeError, ...) and exceptions raised
    by predicates propagate immediately.

    Args:
        instance: The pydantic model instance to validate. Never modified.

    Returns:
        The failures, in field order. Empty when the instance is valid.
    """
    if not isinstance(instance, BaseModel):
        raise TypeError(
            f"Expected a pydantic model instance, got {type(instance).__name__}"
        )

    errors: list[FieldError] = []
    for field_name, field_info, declaration in iter_declarations(type(instance)):
        errors.extend(
            _check_declaration(instance, field_name, field_info, declaration)
        )

    logger.debug("Validated %s: %d error(s)", type(instance).__name__, len(errors))
    return errors


def _check_declaration(
    instance: BaseModel,
    field_name: str,
    field_info: FieldInfo,
    declaration: RequiredIf,
) -> list[FieldError]:
    display_name = display_name_for(field_name, field_info)
    outcome = declaration.is_required(
        instance, getattr(instance, field_name), display_name
    )
    if outcome:
        return []
    return [
        FieldError(
            field_name=field_name, display_name=display_name, message=outcome.reason
        )
    ]


class ValidatedModel(BaseModel):
    """Pydantic base model that tracks its conditional-requirement errors.

    Instances can be built in any state; requirements are checked on
    demand with validate_all_fields() or validate_field(), and the latest
    results are available through has_errors and get_errors().
    """

    model_config = ConfigDict(
        validate_assignment=True, ignored_types=(PredicateOverloads,)
    )

    _errors: list[FieldError] = PrivateAttr(default_factory=list)

    def validate_all_fields(self) -> list[FieldError]:
        """Check every field and replace the stored errors with the result."""
        self._errors = validate_object(self)
        return list(self._errors)

    def validate_field(self, field_name: str) -> list[FieldError]:
        """Check one field and replace only that field's stored errors."""
        field_errors = validate_field(self, field_name)
        self._errors = [
            error for error in self._errors if error.field_name != field_name
        ] + field_errors
        return field_errors

    @property
    def has_errors(self) -> bool:
        """Whether the last validation left any errors."""
        return bool(self._errors)

    def get_errors(self, field_name: str | None = None) -> list[FieldError]:
        """Return stored errors, optionally only those of one field."""
        if field_name is None:
            return list(self._errors)
        return [error for error in self._errors if error.field_name == field_name]

    def clear_errors(self, field_name: str | None = None) -> None:
        """Forget stored errors, optionally only those of one field."""
        if field_name is None:
            self._errors = []
        else:
            self._errors = [
                error for error in self._errors if error.field_name != field_name
            ]
