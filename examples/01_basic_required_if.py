"""Example 01: Basic Conditional Requirements

This example demonstrates how to make a field required only while a
predicate on the same model holds.

Topics Covered:
--------------
- Declaring RequiredIf with Annotated metadata
- Predicates as ordinary boolean methods
- Missing vs blank values
- allow_blank and custom error messages
- Display names from field titles
"""

from typing import Annotated

from pydantic import Field

import requiredif as ri

# =============================================================================
# Model Definition
# =============================================================================


class Person(ri.ValidatedModel):
    """A person whose first name is required when no surname is given."""

    # Required while the surname is missing or blank
    name: Annotated[
        str | None, ri.RequiredIf("is_surname_empty"), Field(title="Name")
    ] = None

    # Same condition, but an empty string is accepted
    nickname: Annotated[
        str | None, ri.RequiredIf("is_surname_empty", allow_blank=True)
    ] = None

    # Same condition with a custom message
    alias: Annotated[
        str | None,
        ri.RequiredIf(
            "is_surname_empty",
            error_message="Please give {display_name} when there is no surname",
        ),
    ] = None

    surname: str | None = None

    def is_surname_empty(self) -> bool:
        return not (self.surname or "").strip()


# =============================================================================
# Demonstrations
# =============================================================================


def show(label: str, person: Person) -> None:
    errors = person.validate_all_fields()
    print(f"\n{label}")
    print(f"  {person!r}")
    if not errors:
        print("  ✓ valid")
    for error in errors:
        print(f"  ✗ {error.field_name}: {error}")


def main():
    print("=" * 80)
    print("Example 01: Basic Conditional Requirements")
    print("=" * 80)

    # -------------------------------------------------------------------------
    # 1. Condition met
    # -------------------------------------------------------------------------
    print("\n1. Surname missing (condition met):")
    print("-" * 80)

    show("Nothing set", Person())
    show("Everything set", Person(name="John", nickname="JJ", alias="J"))

    # -------------------------------------------------------------------------
    # 2. Condition not met
    # -------------------------------------------------------------------------
    print("\n2. Surname given (condition not met):")
    print("-" * 80)

    show("Only surname", Person(surname="Doe"))

    # -------------------------------------------------------------------------
    # 3. Blank values
    # -------------------------------------------------------------------------
    print("\n3. Blank Values:")
    print("-" * 80)

    show(
        "Whitespace everywhere",
        Person(name="   ", nickname="", alias="J", surname="   "),
    )

    # -------------------------------------------------------------------------
    # 4. Single field
    # -------------------------------------------------------------------------
    print("\n4. Checking a Single Field:")
    print("-" * 80)

    person = Person(surname="")
    print(f"  name errors: {[str(e) for e in person.validate_field('name')]}")
    person.name = "John"
    print(f"  after setting name: {person.validate_field('name')}")


if __name__ == "__main__":
    main()
