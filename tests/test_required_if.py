"""Tests for RequiredIf and the is_required pipeline."""

from pydantic import ValidationError
import pytest

from requiredif import (
    SUCCESS,
    ArgumentBindingError,
    ConditionSpec,
    Failure,
    InvalidReturnTypeError,
    MethodNotFoundError,
    RequiredIf,
    evaluate_condition,
    is_required,
    resolve_scope,
)


class Person:
    def __init__(self, name: str | None = None, surname: str | None = None) -> None:
        self.name = name
        self.surname = surname

    def is_surname_empty(self) -> bool:
        return self.surname is not None and self.surname.strip() == ""

    @staticmethod
    def in_mode(person: "Person", mode: int) -> bool:
        return mode == 1


class Student(Person):
    pass


class Rules:
    @staticmethod
    def has_no_name(person: Person) -> bool:
        return person.name is None

    @staticmethod
    def always() -> bool:
        return True

    @staticmethod
    def count(person: Person) -> int:
        return 0

    @staticmethod
    def mode_only(mode: int) -> bool:
        return mode == 1


class TestIsRequired:
    """Test the end-to-end single-field check."""

    def test_required_and_missing(self):
        """Test a blank surname making a missing name fail."""
        person = Person(surname="")
        spec = ConditionSpec(method_name="is_surname_empty")

        assert is_required(person, person.name, "Name", spec) == Failure(
            "Name is required"
        )

    def test_not_required(self):
        """Test that a filled surname makes the name optional."""
        person = Person(surname="Doe")
        spec = ConditionSpec(method_name="is_surname_empty")

        assert is_required(person, person.name, "Name", spec) == SUCCESS

    def test_required_and_blank(self):
        """Test a whitespace value once required."""
        person = Person(name="   ", surname="")
        spec = ConditionSpec(method_name="is_surname_empty")

        assert is_required(person, person.name, "Name", spec) == Failure(
            "Name cannot be empty or whitespace"
        )

    def test_required_and_blank_allowed(self):
        """Test allow_blank end to end."""
        person = Person(name="   ", surname="")
        spec = ConditionSpec(method_name="is_surname_empty", allow_blank=True)

        assert is_required(person, person.name, "Name", spec) == SUCCESS

    def test_extra_parameters(self):
        """Test a predicate taking the instance and a mode."""
        person = Person(surname="Doe")

        required = ConditionSpec(method_name="in_mode", parameters=(1,))
        optional = ConditionSpec(method_name="in_mode", parameters=(2,))

        assert is_required(person, None, "Name", required) == Failure(
            "Name is required"
        )
        assert is_required(person, None, "Name", optional) == SUCCESS

    def test_external_declaring_type(self):
        """Test a predicate on an unrelated rules class."""
        spec = ConditionSpec(method_name="has_no_name", declaring_type=Rules)

        assert is_required(Person(), None, "Id", spec) == Failure("Id is required")
        assert is_required(Person(name="John"), None, "Id", spec) == SUCCESS

    def test_custom_error_message(self):
        """Test that the declared message template is used."""
        spec = ConditionSpec(
            method_name="is_surname_empty",
            error_message="{display_name} is needed without a surname",
        )

        outcome = is_required(Person(surname=""), None, "Name", spec)

        assert outcome == Failure("Name is needed without a surname")

    def test_instance_not_modified(self):
        """Test that validation has no side effects on the instance."""
        person = Person(name=None, surname="")
        before = dict(vars(person))

        is_required(person, None, "Name", ConditionSpec(method_name="is_surname_empty"))

        assert vars(person) == before

    def test_subclass_uses_runtime_type(self):
        """Test that an inherited predicate is found from the subclass."""
        spec = ConditionSpec(method_name="is_surname_empty")

        assert is_required(Student(surname=""), None, "Name", spec) == Failure(
            "Name is required"
        )


class TestIsRequiredErrors:
    """Test configuration errors surfacing through is_required."""

    def test_missing_method(self):
        """Test an unknown predicate name."""
        spec = ConditionSpec(method_name="is_name_empty")

        with pytest.raises(MethodNotFoundError, match="is_name_empty"):
            is_required(Person(), None, "Name", spec)

    def test_non_bool_predicate(self):
        """Test a predicate annotated with a non-bool return type."""
        spec = ConditionSpec(method_name="count", declaring_type=Rules)

        with pytest.raises(InvalidReturnTypeError):
            is_required(Person(), None, "Name", spec)

    def test_strict_binding(self):
        """Test failing fast on an incompatible instance."""
        spec = ConditionSpec(
            method_name="mode_only", declaring_type=Rules, strict_binding=True
        )

        with pytest.raises(ArgumentBindingError):
            is_required(Person(), None, "Name", spec)

    def test_permissive_binding_passes_instance_through(self):
        """Test that the unconverted instance reaches the predicate."""
        spec = ConditionSpec(method_name="mode_only", declaring_type=Rules)

        assert is_required(Person(), None, "Name", spec) == SUCCESS

    def test_too_few_parameters(self):
        """Test a predicate needing more extra parameters than declared."""

        class Picky:
            @staticmethod
            def check(person: Person, mode: int, level: int) -> bool:
                return True

        spec = ConditionSpec(method_name="check", declaring_type=Picky, parameters=(1,))

        with pytest.raises(MethodNotFoundError):
            is_required(Person(), None, "Name", spec)


class TestResolveScope:
    """Test scope resolution."""

    def test_declared_type_wins(self):
        """Test that an explicit declaring type overrides the instance type."""
        spec = ConditionSpec(method_name="check", declaring_type=Rules)

        assert resolve_scope(spec, Person()) is Rules

    def test_runtime_type(self):
        """Test falling back to the instance's class."""
        spec = ConditionSpec(method_name="check")

        assert resolve_scope(spec, Student()) is Student

    def test_nothing_to_resolve(self):
        """Test that no declaring type and no instance is an error."""
        spec = ConditionSpec(method_name="check")

        with pytest.raises(ValueError, match="no declaring type and no instance"):
            resolve_scope(spec, None)

    def test_none_instance_with_declared_static_predicate(self):
        """Test validating without an instance when the rule needs none."""
        spec = ConditionSpec(method_name="always", declaring_type=Rules)

        assert evaluate_condition(spec, None) is True


class TestParameterlessPredicate:
    """Test that extra parameters never reach a parameterless predicate."""

    def test_extras_ignored(self):
        """Test a zero-arity predicate with declared extra parameters."""
        received = []

        class Recorder:
            @staticmethod
            def check(*args) -> bool:
                received.append(args)
                return True

        spec = ConditionSpec(
            method_name="check", declaring_type=Recorder, parameters=(1, 2)
        )

        assert evaluate_condition(spec, Person()) is True
        assert received == [()]


class TestNoCaching:
    """Test that every call resolves the predicate again."""

    def test_method_added_later_is_found(self):
        """Test that a predicate attached after a failed lookup is used."""

        class Dynamic:
            pass

        spec = ConditionSpec(method_name="check", declaring_type=Dynamic)

        with pytest.raises(MethodNotFoundError):
            evaluate_condition(spec, Person())

        Dynamic.check = staticmethod(lambda: True)

        assert evaluate_condition(spec, Person()) is True

    def test_replaced_method_is_used(self):
        """Test that a redefined predicate takes effect immediately."""

        class Dynamic:
            @staticmethod
            def check() -> bool:
                return True

        spec = ConditionSpec(method_name="check", declaring_type=Dynamic)
        assert evaluate_condition(spec, None) is True

        Dynamic.check = staticmethod(lambda: False)

        assert evaluate_condition(spec, None) is False


class TestRequiredIf:
    """Test the RequiredIf declaration object."""

    def test_positional_parameters(self):
        """Test extra parameters given positionally."""
        declaration = RequiredIf("in_mode", 1, "x")

        assert declaration.method_name == "in_mode"
        assert declaration.parameters == (1, "x")
        assert declaration.spec.extra_arity == 2

    def test_keyword_parameters(self):
        """Test the parameters= sequence form."""
        assert RequiredIf("in_mode", parameters=[1]) == RequiredIf("in_mode", 1)

    def test_list_positional_parameter_not_unpacked(self):
        """Test that a positional list is one parameter."""
        assert RequiredIf("in_mode", [1, 2]).parameters == ([1, 2],)

    def test_both_parameter_forms_rejected(self):
        """Test that positional and keyword parameters cannot be mixed."""
        with pytest.raises(TypeError, match="not both"):
            RequiredIf("in_mode", 1, parameters=[2])

    def test_invalid_method_name(self):
        """Test that declaration errors surface at construction."""
        with pytest.raises(ValidationError):
            RequiredIf("  ")

    def test_is_required(self):
        """Test the method form of the check."""
        declaration = RequiredIf("is_surname_empty")

        assert declaration.is_required(Person(surname=""), None, "Name") == Failure(
            "Name is required"
        )
        assert declaration.is_required(Person(surname="x"), None, "Name") == SUCCESS

    def test_from_spec(self):
        """Test wrapping an existing declaration."""
        spec = ConditionSpec(method_name="check", allow_blank=True)

        declaration = RequiredIf.from_spec(spec)

        assert declaration.spec is spec
        assert declaration.allow_blank is True

    def test_from_spec_requires_spec(self):
        """Test argument validation."""
        with pytest.raises(TypeError, match="ConditionSpec"):
            RequiredIf.from_spec("check")

    def test_repr(self):
        """Test the representation."""
        assert repr(RequiredIf("check")) == "RequiredIf('check')"
        assert (
            repr(RequiredIf("check", 1, declaring_type=Rules, allow_blank=True))
            == "RequiredIf('check', 1, declaring_type=Rules, allow_blank=True)"
        )

    def test_hashable(self):
        """Test use in sets."""
        assert len({RequiredIf("check"), RequiredIf("check")}) == 1

    def test_not_equal_to_other_types(self):
        """Test comparison with unrelated objects."""
        assert RequiredIf("check") != "check"


class TestRequiredIfSubscript:
    """Test the RequiredIf[DeclaringType] form."""

    def test_equivalent_to_keyword(self):
        """Test that subscripting pins declaring_type."""
        assert RequiredIf[Rules]("has_no_name") == RequiredIf(
            "has_no_name", declaring_type=Rules
        )

    def test_parameters_and_options_forwarded(self):
        """Test that the factory accepts the usual arguments."""
        declaration = RequiredIf[Rules]("in_mode", 1, allow_blank=True)

        assert declaration.declaring_type is Rules
        assert declaration.parameters == (1,)
        assert declaration.allow_blank is True

    def test_factory_name(self):
        """Test the factory's readable name."""
        assert RequiredIf[Rules].__name__ == "RequiredIf[Rules]"

    def test_non_type_rejected(self):
        """Test that only classes can be subscripted in."""
        with pytest.raises(TypeError, match="must be a class"):
            RequiredIf["Rules"]

    def test_duplicate_declaring_type_rejected(self):
        """Test that the declaring type cannot be given twice."""
        with pytest.raises(TypeError, match="already set"):
            RequiredIf[Rules]("has_no_name", declaring_type=Person)
