"""Example 02: Predicates on External Classes

This example demonstrates how to keep conditions in a separate rules
class, pass extra parameters to them, and how the predicate is chosen
when several signatures could apply.

Topics Covered:
--------------
- RequiredIf[Rules](...) and declaring_type=
- Extra declaration parameters
- Predicates typed for the validated model, a base class, or object
- Using is_required() without a model
"""

from typing import Annotated

import requiredif as ri

# =============================================================================
# Models and Rules
# =============================================================================


class Account(ri.ValidatedModel):
    """A customer account."""

    country: str = "NL"
    balance: float = 0.0


class AccountRules:
    """Conditions shared by several models."""

    @staticmethod
    def is_from(account: Account, country: str) -> bool:
        return account.country == country

    @staticmethod
    def is_above(account: Account, limit: float) -> bool:
        return account.balance > limit

    @staticmethod
    def always(value: object) -> bool:
        return True


class BusinessAccount(Account):
    """An account with requirements pinned to AccountRules."""

    # Extra parameters follow the instance
    vat_number: Annotated[
        str | None, ri.RequiredIf[AccountRules]("is_from", "NL")
    ] = None

    # declaring_type= instead of subscripting
    audit_contact: Annotated[
        str | None,
        ri.RequiredIf("is_above", 10_000.0, declaring_type=AccountRules),
    ] = None


# =============================================================================
# Demonstrations
# =============================================================================


def main():
    print("=" * 80)
    print("Example 02: Predicates on External Classes")
    print("=" * 80)

    # -------------------------------------------------------------------------
    # 1. Pinned declaring type
    # -------------------------------------------------------------------------
    print("\n1. RequiredIf[AccountRules]:")
    print("-" * 80)

    for account in [
        BusinessAccount(country="NL", balance=500.0),
        BusinessAccount(country="DE", balance=50_000.0),
        BusinessAccount(country="DE", balance=50_000.0, audit_contact="ops"),
    ]:
        errors = account.validate_all_fields()
        messages = [str(e) for e in errors]
        print(f"  {account.country} {account.balance:>9.2f}: {messages}")

    # -------------------------------------------------------------------------
    # 2. Without a model
    # -------------------------------------------------------------------------
    print("\n2. is_required() on any object:")
    print("-" * 80)

    spec = ri.ConditionSpec(
        method_name="always",
        declaring_type=AccountRules,
        error_message="{display_name}!",
    )
    print(f"  missing: {ri.is_required(object(), None, 'Reference', spec)!r}")
    print(f"  present: {ri.is_required(object(), 'R-1', 'Reference', spec)!r}")

    # -------------------------------------------------------------------------
    # 3. Which predicate is used
    # -------------------------------------------------------------------------
    print("\n3. Resolution:")
    print("-" * 80)

    account = BusinessAccount()
    for name, extra in [("is_from", 1), ("always", 0)]:
        candidate = ri.locate(AccountRules, name, account, extra)
        print(f"  {name}: {candidate!r}")

    try:
        ri.locate(AccountRules, "is_from", account, 0)
    except ri.MethodNotFoundError as e:
        print(f"  ✗ {e}")


if __name__ == "__main__":
    main()
