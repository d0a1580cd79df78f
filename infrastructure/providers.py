from __future__ import annotations

from typing import Callable, Iterable, List, Optional

from domain.models import User, UserBankAccount
from domain.providers import UserBankAccountProvider, UserProvider, UserService


class StaticUserProvider(UserProvider):
    """
    In-memory `UserProvider` that always hands out the same (optional) user.

    The number of lookups is recorded in `calls` so callers can check how
    often a provider was consulted.
    """

    def __init__(self, user: Optional[User] = None) -> None:
        self._user = user
        self.calls = 0

    def get_user(self) -> Optional[User]:
        self.calls += 1
        return self._user


class SequenceUserProvider(UserProvider):
    """
    Provider that returns the given results one after another.

    Once the sequence is exhausted every further call returns None. Useful
    for modelling a provider whose answer changes between calls.
    """

    def __init__(self, results: Iterable[Optional[User]]) -> None:
        self._results: List[Optional[User]] = list(results)
        self.calls = 0

    def get_user(self) -> Optional[User]:
        self.calls += 1
        if not self._results:
            return None
        return self._results.pop(0)


class CallableUserProvider(UserProvider):
    """Adapts a zero-argument function to the `UserProvider` protocol."""

    def __init__(self, fn: Callable[[], Optional[User]]) -> None:
        self._fn = fn

    def get_user(self) -> Optional[User]:
        return self._fn()


class StaticUserBankAccountProvider(UserBankAccountProvider):
    def __init__(self, account: Optional[UserBankAccount] = None) -> None:
        self._account = account
        self.calls = 0

    def get_user_bank_account(self) -> Optional[UserBankAccount]:
        self.calls += 1
        return self._account


class PrintingUserService(UserService):
    """Writes processed users to stdout; keeps the default no-user message."""

    def process_user(self, user: User) -> None:
        print(f"Processing user {user.name}")
