"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class PhoneType(Enum):
    PERSONAL = 0
    BUSINESS = 1
    OTHER = 2


@dataclass
class FixtureName:
    given_name: str | None = None
    middle_name: str | None = None
    surname: str | None = None


@dataclass
class FixturePhone:
    number: str | None = None
    type: PhoneType = PhoneType.PERSONAL
    is_mobile: bool = False
    is_primary: bool = False


@dataclass
class FixtureSocialAccount:
    provider: str | None = None
    account: str | None = None
    enabled: bool = False


@dataclass
class FixtureUser:
    name: FixtureName | None = None
    mail: str | None = None
    other_mail: list[str] | None = None
    lucky_numbers: tuple[int, ...] | None = None
    password_expiration_date: datetime | None = None
    social_accounts: dict[str, FixtureSocialAccount] | None = None
    phones: list[FixturePhone] = field(default_factory=list)
    tags: dict[str, str] | None = None


@pytest.fixture
def phone_type_cls():
    return PhoneType


@pytest.fixture
def phone_cls():
    return FixturePhone


@pytest.fixture
def social_account_cls():
    return FixtureSocialAccount


@pytest.fixture
def user_cls():
    return FixtureUser


@pytest.fixture
def user():
    """A user graph with nested objects, lists, a tuple and dictionaries."""
    accounts = {
        provider: FixtureSocialAccount(
            provider=provider, account="jack.johnson@email.com", enabled=True
        )
        for provider in ("Facebook", "Microsoft", "Google")
    }
    return FixtureUser(
        name=FixtureName(given_name="John", middle_name="Jack", surname="Johnson"),
        mail="john.johnson@email.com",
        other_mail=["jack.johnson@email.com", "jjohnson@email.com", "jj@email.com"],
        lucky_numbers=(13, 57, 95, 38),
        password_expiration_date=datetime(2012, 12, 31, 23, 59, 59, 999000),
        social_accounts=accounts,
        phones=[
            FixturePhone("+13334445566", PhoneType.PERSONAL, is_mobile=True, is_primary=True),
            FixturePhone("+13334445577", PhoneType.PERSONAL),
            FixturePhone("+13334445588", PhoneType.BUSINESS),
            FixturePhone("+13334445599", PhoneType.OTHER),
            FixturePhone("+13334445500", PhoneType.OTHER, is_mobile=True),
        ],
        tags={"greeting": "hello", "color": "red", "shape": "oval"},
    )
