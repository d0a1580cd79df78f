from __future__ import annotations

from typing import Optional, Protocol

from .models import User, UserBankAccount


class UserProvider(Protocol):
    """
    Single-method source of a user.

    `None` means no user is available right now. Implementations are not
    required to be idempotent: two calls may return different results.
    """

    def get_user(self) -> Optional[User]:
        ...


class UserBankAccountProvider(Protocol):
    """Single-method source of a bank account, `None` when there is none."""

    def get_user_bank_account(self) -> Optional[UserBankAccount]:
        ...


class UserService(Protocol):
    """
    Consumer of a user looked up by the application layer.

    Only `process_user` has to be implemented. Subclasses that do not
    override `process_with_no_user` get the console message below.
    """

    def process_user(self, user: User) -> None:
        ...

    def process_with_no_user(self) -> None:
        print("No user found")
