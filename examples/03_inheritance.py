"""Example 03: Inheritance and Predicate Overloads

This example demonstrates how declarations on a base model apply to its
subclasses, how a subclass changes a condition by overriding the
predicate, and how several predicate signatures share one name.

Topics Covered:
--------------
- Inherited RequiredIf declarations
- Overriding the predicate in a subclass
- @predicate / .overload groups
- Parameterless predicates winning over typed ones
- Strict binding
"""

from typing import Annotated

import requiredif as ri

# =============================================================================
# Base Model
# =============================================================================


class Person(ri.ValidatedModel):
    """Name required without a surname."""

    name: Annotated[str | None, ri.RequiredIf("is_surname_empty")] = None
    surname: str | None = None

    def is_surname_empty(self) -> bool:
        return not (self.surname or "").strip()


# =============================================================================
# Subclasses
# =============================================================================


class Employee(Person):
    """Inherits the name requirement unchanged."""

    employee_number: int | None = None


class Guest(Person):
    """Never needs a name: the predicate is overridden."""

    def is_surname_empty(self) -> bool:
        return False


class ValidationRules:
    @staticmethod
    def is_student(value: object) -> bool:
        return isinstance(value, Student)


class Student(Person):
    """Adds a requirement declared on an external class."""

    student_id: Annotated[
        str | None, ri.RequiredIf[ValidationRules]("is_student")
    ] = None

    # A mode parameter is declared, but the parameterless signature wins
    guardian: Annotated[str | None, ri.RequiredIf("is_minor", 18)] = None
    age: int = 20

    @ri.predicate
    def is_minor(self) -> bool:
        return self.age < 18

    @is_minor.overload
    @staticmethod
    def is_minor(student: "Student", limit: int) -> bool:
        return student.age < limit


# =============================================================================
# Demonstrations
# =============================================================================


def main():
    print("=" * 80)
    print("Example 03: Inheritance and Predicate Overloads")
    print("=" * 80)

    # -------------------------------------------------------------------------
    # 1. Inherited declarations
    # -------------------------------------------------------------------------
    print("\n1. Inherited Declarations:")
    print("-" * 80)

    for model in [Person(surname=""), Employee(surname=""), Guest(surname="")]:
        errors = [str(e) for e in model.validate_all_fields()]
        print(f"  {type(model).__name__:<10} {errors}")

    # -------------------------------------------------------------------------
    # 2. External rules on a subclass
    # -------------------------------------------------------------------------
    print("\n2. Student:")
    print("-" * 80)

    student = Student(name="Ana", surname="Diaz", age=16)
    student.validate_all_fields()
    for error in student.get_errors():
        print(f"  ✗ {error.field_name}: {error}")

    student.student_id = "HD723IKK"
    student.validate_field("student_id")
    print(f"  after setting student_id: {[str(e) for e in student.get_errors()]}")

    # -------------------------------------------------------------------------
    # 3. Overload groups
    # -------------------------------------------------------------------------
    print("\n3. Overloads:")
    print("-" * 80)

    print(f"  group: {Student.__dict__['is_minor']!r}")
    print(f"  student.is_minor(): {student.is_minor()}")
    print(f"  student.is_minor(student, 16): {student.is_minor(student, 16)}")
    print(f"  selected: {ri.locate(Student, 'is_minor', student, 1)!r}")

    # -------------------------------------------------------------------------
    # 4. Strict binding
    # -------------------------------------------------------------------------
    print("\n4. Strict Binding:")
    print("-" * 80)

    class NumberRules:
        @staticmethod
        def is_positive(number: int) -> bool:
            return number > 0

    lenient = ri.ConditionSpec(method_name="is_positive", declaring_type=NumberRules)
    strict = lenient.model_copy(update={"strict_binding": True})

    try:
        ri.is_required(student, None, "Field", lenient)
    except TypeError as e:
        print(f"  lenient: predicate failed on the unconverted instance: {e}")

    try:
        ri.is_required(student, None, "Field", strict)
    except ri.ArgumentBindingError as e:
        print(f"  strict: {e}")


if __name__ == "__main__":
    main()
