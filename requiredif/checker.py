"""The required / non-blank check applied once a condition is known."""

from typing import Any

from .outcome import SUCCESS, Failure, Outcome
from .utils import is_blank

REQUIRED_MESSAGE = "{display_name} is required"
BLANK_MESSAGE = "{display_name} cannot be empty or whitespace"


def _render(template: str, display_name: str) -> str:
    # Other braces in user templates are kept literally
    return template.replace("{display_name}", display_name)


def check(
    condition_met: bool,
    value: Any,
    allow_blank: bool,
    field_display_name: str,
    error_message: str | None = None,
) -> Outcome:
    """Decide whether a field value satisfies a conditional requirement.

    Only ``None`` counts as absent. A present but blank string is a
    separate failure with its own message, unless ``allow_blank`` is set.
    Non-string values are never considered blank.

    Args:
        condition_met: Result of the declaration's predicate.
        value: Current value of the field.
        allow_blank: Whether empty or whitespace-only strings are accepted.
        field_display_name: Name used in failure messages.
        error_message: Optional template replacing both built-in messages;
            ``{display_name}`` is substituted and other braces are kept.

    Returns:
        SUCCESS, or a Failure describing the problem.

    Examples:
        >>> check(True, None, False, "Name")
        Failure('Name is required')
        >>> check(True, "   ", False, "Name")
        Failure('Name cannot be empty or whitespace')
        >>> check(True, "   ", True, "Name")
        SUCCESS
        >>> check(False, None, False, "Name")
        SUCCESS
    """
    if not condition_met:
        return SUCCESS

    if value is None:
        template = error_message or REQUIRED_MESSAGE
        return Failure(_render(template, field_display_name))

    if not allow_blank and isinstance(value, str) and is_blank(value):
        template = error_message or BLANK_MESSAGE
        return Failure(_render(template, field_display_name))

    return SUCCESS
