"""Immutable declaration of a conditional requirement.

A ConditionSpec is built once per annotated field and shared by every
validation of that field. It is a frozen pydantic model, so declarations
are validated on construction and cannot be modified afterwards.
"""

from typing import Any

from pydantic import BaseModel, field_validator


class ConditionSpec(BaseModel, frozen=True, arbitrary_types_allowed=True):
    """Static configuration of one RequiredIf declaration.

    Attributes:
        method_name: Name of the predicate deciding whether the field is
            required.
        declaring_type: Class that declares the predicate. None means the
            runtime type of the instance under validation.
        parameters: Extra positional arguments passed to the predicate
            after the instance.
        allow_blank: Whether an empty or whitespace-only string counts as
            present.
        error_message: Optional message template replacing the built-in
            failure messages; ``{display_name}`` is substituted.
        strict_binding: Raise ArgumentBindingError instead of passing an
            instance the predicate's first parameter does not accept.

    Examples:
        >>> spec = ConditionSpec(method_name="is_surname_empty")
        >>> spec.parameters
        ()
        >>> ConditionSpec(method_name="in_mode", parameters=[1]).parameters
        (1,)
    """

    method_name: str
    declaring_type: type | None = None
    parameters: tuple[Any, ...] = ()
    allow_blank: bool = False
    error_message: str | None = None
    strict_binding: bool = False

    @field_validator("method_name")
    @classmethod
    def check_method_name(cls, value: str) -> str:
        value = value.strip()
        if value == "":
            raise ValueError("method_name cannot be empty")
        if not value.isidentifier():
            raise ValueError(f"method_name must be an identifier, got {value!r}")
        return value

    @field_validator("parameters", mode="before")
    @classmethod
    def coerce_parameters(cls, value: Any) -> Any:
        if isinstance(value, list):
            return tuple(value)
        return value

    @property
    def extra_arity(self) -> int:
        """Number of extra parameters the predicate must accept."""
        return len(self.parameters)
