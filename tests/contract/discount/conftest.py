"""Fixtures for Discount contract tests."""

import pytest

from solid_principles.domain.discounts import DISCOUNT_TIERS, Discount

RATES = {"regular": 0.05, "silver": 0.1, "gold": 0.15, "premium": 0.2}


@pytest.fixture(params=list(RATES))
def tier_key(request: pytest.FixtureRequest) -> str:
    """Key of the customer tier under test."""
    return request.param


@pytest.fixture
def discount_cls(tier_key: str) -> type[Discount]:
    """The Discount subclass for the tier under test."""
    return DISCOUNT_TIERS[tier_key]


@pytest.fixture
def rate(tier_key: str) -> float:
    """Documented rate of the tier under test."""
    return RATES[tier_key]
