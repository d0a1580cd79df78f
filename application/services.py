from __future__ import annotations

import math
from decimal import Decimal
from typing import Iterable, Optional, TypeVar

import structlog

from domain.errors import NoSuchElement, NoUserProvided, ValueRequiredButAbsent
from domain.models import User, UserBankAccount, generate_user
from domain.providers import UserBankAccountProvider, UserProvider, UserService

logger = structlog.get_logger(__name__)

T = TypeVar("T")

GMAIL_SUFFIX = "@gmail.com"


def require_present(value: Optional[T], message: str = "No value present") -> T:
    """Unwrap an optional value, failing loudly when it is absent."""

    if value is None:
        raise ValueRequiredButAbsent(message)
    return value


def optional_of_string(text: Optional[str]) -> Optional[str]:
    return text


def optional_of_user(user: Optional[User]) -> Optional[User]:
    return user


def deposit(user_provider: UserProvider, amount: Decimal) -> None:
    """
    Add `amount` to the balance of the provided user, in place.

    Nothing happens when the provider has no user. The sign of `amount`
    is not checked.
    """

    user = user_provider.get_user()
    if user is None:
        return

    user.balance += amount
    logger.debug("deposit_applied", user_id=user.id, amount=str(amount))


def get_user(user_provider: UserProvider, default_user: User) -> User:
    """Return the provided user, or `default_user` when there is none."""

    user = user_provider.get_user()
    return user if user is not None else default_user


def process_user(user_provider: UserProvider, user_service: UserService) -> None:
    """
    Hand the provided user to `user_service`.

    When no user is provided the service's no-user hook runs instead.
    Services that only implement `process_user` get the default console
    message from `UserService`.
    """

    user = user_provider.get_user()
    if user is not None:
        logger.debug("user_dispatched", user_id=user.id)
        user_service.process_user(user)
    else:
        logger.debug("no_user_dispatched")
        fallback = getattr(user_service, "process_with_no_user", None)
        if fallback is None:
            UserService.process_with_no_user(user_service)
        else:
            fallback()


def get_or_generate_user(user_provider: UserProvider) -> User:
    """
    Return the provided user or a freshly generated default one.

    The provider is asked exactly once, and no user is generated when the
    provider returned one.
    """

    user = user_provider.get_user()
    if user is not None:
        return user

    logger.debug("default_user_generated")
    return generate_user()


def retrieve_balance(user_provider: UserProvider) -> Optional[Decimal]:
    user = user_provider.get_user()
    return user.balance if user is not None else None


def retrieve_credit_balance(
    user_bank_account_provider: UserBankAccountProvider,
) -> Optional[Decimal]:
    """
    Return the credit balance of the provided bank account.

    A missing credit balance is returned as `None`, but a missing account is
    an error (`ValueRequiredButAbsent`), not an empty result.
    """

    account = require_present(user_bank_account_provider.get_user_bank_account())
    return account.credit_balance


def retrieve_user_gmail(user_provider: UserProvider) -> Optional[User]:
    """Return the provided user only when their email is a Gmail address."""

    user = user_provider.get_user()
    if user is not None and user.email.endswith(GMAIL_SUFFIX):
        return user
    return None


def get_user_with_fallback(
    user_provider: UserProvider,
    fallback_provider: UserProvider,
) -> User:
    """
    Return the user from `user_provider`, falling back to `fallback_provider`.

    The fallback is only consulted when the primary provider is empty.
    Raises `NoSuchElement` when neither provider has a user.
    """

    user = user_provider.get_user()
    if user is not None:
        return user

    logger.debug("fallback_provider_consulted")
    fallback_user = fallback_provider.get_user()
    if fallback_user is not None:
        return fallback_user

    raise NoSuchElement("No User provided by both providers!")


def get_user_or_throw(user_provider: UserProvider) -> User:
    """Return the provided user or raise `NoUserProvided`."""

    user = user_provider.get_user()
    if user is None:
        raise NoUserProvided("No User provided!")
    return user


def get_user_with_max_balance(users: Iterable[User]) -> User:
    """
    Return the user with the highest balance.

    On ties the first user encountered wins. Raises `NoSuchElement` for an
    empty input.
    """

    richest = max(users, key=lambda u: u.balance, default=None)
    if richest is None:
        raise NoSuchElement("Input list is empty!")
    return richest


def find_min_balance_value(users: Iterable[User]) -> Optional[float]:
    """
    Return the lowest balance as a float, or None for an empty input.

    Balances are narrowed from Decimal to float before comparing, so very
    precise values may lose digits.
    """

    return min((float(u.balance) for u in users), default=None)


def calculate_total_credit_balance(bank_accounts: Iterable[UserBankAccount]) -> float:
    """
    Sum the credit balances of all accounts as a float.

    Every account must carry a credit balance: an absent one raises
    `ValueRequiredButAbsent` instead of counting as zero.
    """

    return math.fsum(
        float(require_present(account.credit_balance)) for account in bank_accounts
    )
