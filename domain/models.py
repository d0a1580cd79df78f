from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass
class User:
    """
    Domain representation of a bank customer.

    The balance is deliberately mutable: deposits are applied in place on
    whichever instance a provider hands out.
    """

    id: int
    name: str
    email: str
    balance: Decimal


@dataclass
class UserBankAccount:
    """
    A user together with an optional credit balance.

    The user's fields are copied at construction time (see `from_user`), so
    later changes to the source `User` are not reflected here. An absent
    credit balance (`None`) is a meaningful state and is not the same as zero.
    """

    user: User
    credit_balance: Optional[Decimal] = None

    @classmethod
    def from_user(
        cls,
        user: User,
        credit_balance: Optional[Decimal] = None,
    ) -> "UserBankAccount":
        snapshot = User(
            id=user.id,
            name=user.name,
            email=user.email,
            balance=user.balance,
        )
        return cls(user=snapshot, credit_balance=credit_balance)

    @property
    def id(self) -> int:
        return self.user.id

    @property
    def name(self) -> str:
        return self.user.name

    @property
    def email(self) -> str:
        return self.user.email

    @property
    def balance(self) -> Decimal:
        return self.user.balance


def generate_user() -> User:
    """Build the fixed fallback user handed out when no provider has one."""

    return User(
        id=1,
        name="John",
        email="m@gmail.com",
        balance=Decimal(10),
    )
