"""Conditional requirement declarations.

RequiredIf marks a field as required whenever a predicate returns True.
The predicate is found by name, either on the class of the object being
validated or on an external class:

    class Person(ValidatedModel):
        name: Annotated[str | None, RequiredIf("is_surname_empty")] = None
        surname: str | None = None

        def is_surname_empty(self) -> bool:
            return not (self.surname or "").strip()

    class Student(Person):
        student_id: Annotated[
            str | None, RequiredIf[EnrollmentRules]("is_enrolled", "2024")
        ] = None

Each validation resolves the predicate again (locator), builds its
arguments (binder), runs it (evaluator) and checks the field value
(checker). Nothing is cached between validations.
"""

from collections.abc import Callable, Iterable
import logging
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema

from .checker import check
from .declaration import ConditionSpec
from .evaluator import evaluate
from .outcome import Outcome
from .resolution import MethodCandidate, bind, locate

logger = logging.getLogger(__name__)


def resolve_scope(spec: ConditionSpec, instance: Any) -> type:
    """Return the class the predicate is looked up on.

    Raises:
        ValueError: If the declaration names no class and there is no
            instance to take the runtime type from.
    """
    if spec.declaring_type is not None:
        return spec.declaring_type
    if instance is None:
        raise ValueError(
            f"Cannot resolve '{spec.method_name}': no declaring type and no instance"
        )
    return type(instance)


def resolve_candidate(spec: ConditionSpec, instance: Any) -> MethodCandidate:
    """Locate the predicate a declaration refers to for ``instance``."""
    scope = resolve_scope(spec, instance)
    return locate(scope, spec.method_name, instance, spec.extra_arity)


def evaluate_condition(spec: ConditionSpec, instance: Any) -> bool:
    """Resolve, bind and run the declaration's predicate against ``instance``."""
    candidate = resolve_candidate(spec, instance)
    arguments = bind(
        candidate, instance, spec.parameters, strict=spec.strict_binding
    )
    return evaluate(candidate, instance, arguments)


def is_required(
    instance: Any, field_value: Any, field_display_name: str, spec: ConditionSpec
) -> Outcome:
    """Check one field of ``instance`` against a conditional requirement.

    Args:
        instance: The object being validated. Never modified.
        field_value: Current value of the field under test.
        field_display_name: Name used in failure messages.
        spec: The field's declaration.

    Returns:
        SUCCESS, or a Failure when the predicate holds and the value is
        missing or blank.

    Raises:
        MethodNotFoundError: If the predicate cannot be found.
        InvalidReturnTypeError: If the predicate does not return a bool.
        ArgumentBindingError: If strict binding is enabled and the instance
            does not fit the predicate.
        Exception: Anything raised by the predicate itself.
    """
    condition_met = evaluate_condition(spec, instance)
    outcome = check(
        condition_met,
        field_value,
        spec.allow_blank,
        field_display_name,
        spec.error_message,
    )
    logger.debug(
        "%s: condition %s=%s -> %r",
        field_display_name,
        spec.method_name,
        condition_met,
        outcome,
    )
    return outcome


class RequiredIf:
    """Marks a field as required when a predicate returns True.

    Usable as ``typing.Annotated`` metadata on pydantic model fields (see
    requiredif.model) or on its own through is_required().

    Args:
        method_name: Name of the predicate.
        *parameters: Extra positional arguments for the predicate.
        parameters: Alternative to ``*parameters`` as a single sequence.
        declaring_type: External class declaring the predicate. Also
            available as ``RequiredIf[DeclaringType](...)``.
        allow_blank: Accept empty and whitespace-only strings.
        error_message: Template replacing the built-in failure messages.
        strict_binding: Fail instead of passing an incompatible instance.

    Examples:
        >>> RequiredIf("is_surname_empty")
        RequiredIf('is_surname_empty')
        >>> RequiredIf("in_mode", 1, allow_blank=True).spec.parameters
        (1,)
        >>> RequiredIf("in_mode", parameters=[1]) == RequiredIf("in_mode", 1)
        True
    """

    def __init__(
        self,
        method_name: str,
        *args: Any,
        parameters: Iterable[Any] | None = None,
        declaring_type: type | None = None,
        allow_blank: bool = False,
        error_message: str | None = None,
        strict_binding: bool = False,
    ) -> None:
        if args and parameters is not None:
            raise TypeError(
                "Pass extra parameters positionally or as 'parameters', not both"
            )
        self._spec = ConditionSpec(
            method_name=method_name,
            declaring_type=declaring_type,
            parameters=tuple(parameters) if parameters is not None else args,
            allow_blank=allow_blank,
            error_message=error_message,
            strict_binding=strict_binding,
        )

    @classmethod
    def from_spec(cls, spec: ConditionSpec) -> "RequiredIf":
        """Wrap an existing ConditionSpec."""
        if not isinstance(spec, ConditionSpec):
            raise TypeError(f"spec must be a ConditionSpec, got {type(spec).__name__}")
        instance = cls.__new__(cls)
        instance._spec = spec
        return instance

    def __class_getitem__(cls, declaring_type: type) -> Callable[..., "RequiredIf"]:
        """Pin the declaring type: ``RequiredIf[Rules]("method")``."""
        if not isinstance(declaring_type, type):
            raise TypeError(
                f"declaring type must be a class, got {type(declaring_type).__name__}"
            )

        def factory(method_name: str, *args: Any, **kwargs: Any) -> "RequiredIf":
            if "declaring_type" in kwargs:
                raise TypeError(
                    f"declaring_type is already set to {declaring_type.__name__}"
                )
            return cls(method_name, *args, declaring_type=declaring_type, **kwargs)

        factory.__name__ = f"RequiredIf[{declaring_type.__name__}]"
        return factory

    @property
    def spec(self) -> ConditionSpec:
        """The immutable declaration."""
        return self._spec

    @property
    def method_name(self) -> str:
        return self._spec.method_name

    @property
    def declaring_type(self) -> type | None:
        return self._spec.declaring_type

    @property
    def parameters(self) -> tuple[Any, ...]:
        return self._spec.parameters

    @property
    def allow_blank(self) -> bool:
        return self._spec.allow_blank

    def is_required(self, instance: Any, value: Any, display_name: str) -> Outcome:
        """Check ``value`` of a field of ``instance``. See is_required()."""
        return is_required(instance, value, display_name, self._spec)

    def __get_pydantic_core_schema__(
        self, source_type: Any, handler: GetCoreSchemaHandler
    ) -> CoreSchema:
        """Leave the field's schema untouched when used as Annotated metadata."""
        return handler(source_type)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RequiredIf):
            return NotImplemented
        return self._spec == other._spec

    def __hash__(self) -> int:
        return hash(self._spec)

    def __repr__(self) -> str:
        parts = [repr(self._spec.method_name)]
        parts.extend(repr(p) for p in self._spec.parameters)
        if self._spec.declaring_type is not None:
            parts.append(f"declaring_type={self._spec.declaring_type.__name__}")
        if self._spec.allow_blank:
            parts.append("allow_blank=True")
        if self._spec.error_message is not None:
            parts.append(f"error_message={self._spec.error_message!r}")
        if self._spec.strict_binding:
            parts.append("strict_binding=True")
        return f"RequiredIf({', '.join(parts)})"
