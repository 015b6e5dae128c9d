"""
Unit Tests for Loan Policy, Age Policy and Credit Modifiers
"""

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from loan_decision.core.constants import CountryCode
from loan_decision.domain.business_rules import (
    CountryLifeExpectancy,
    CreditSegment,
    PolicyConstants,
    check_age,
    credit_score,
    default_policy,
    get_credit_modifier,
    is_approvable,
    max_eligible_age,
    resolve_country,
)
from loan_decision.domain.decision import DecisionErrorKind
from loan_decision.domain.validators import parse_personal_code

from .codes import (
    EIGHTEEN_TODAY_CODE,
    SENIOR_ESTONIA_CODE,
    SENIOR_LITHUANIA_CODE,
    TODAY,
    UNDERAGE_CODE,
)


class TestPolicyConstants:
    """Test suite for policy construction and validation"""

    def test_defaults(self):
        """Test default policy values"""
        policy = default_policy()

        assert policy.minimum_loan_amount == 2000
        assert policy.maximum_loan_amount == 10000
        assert policy.loan_amount_step == 100
        assert policy.minimum_loan_period == 12
        assert policy.maximum_loan_period == 60
        assert policy.minimum_age == 18
        assert policy.minimum_credit_score == Decimal("0.1")
        assert policy.maximum_loan_period_years == 5
        assert [band.modifier for band in policy.credit_segments] == [0, 100, 300, 1000]
        assert [band.country_code for band in policy.life_expectancies] == [
            CountryCode.ESTONIA, CountryCode.LATVIA, CountryCode.LITHUANIA
        ]

    def test_policy_is_frozen(self):
        """Test policy cannot be mutated"""
        policy = default_policy()

        with pytest.raises(ValidationError):
            policy.maximum_loan_amount = 50000

    def test_min_amount_above_max(self):
        """Test amount range validation"""
        with pytest.raises(ValidationError, match="minimum_loan_amount"):
            PolicyConstants(minimum_loan_amount=20000)

    def test_min_period_above_max(self):
        """Test period range validation"""
        with pytest.raises(ValidationError, match="minimum_loan_period"):
            PolicyConstants(minimum_loan_period=72)

    def test_bands_must_start_at_zero(self):
        """Test that segment tables cover segment 0"""
        with pytest.raises(ValidationError, match="start at segment 0"):
            PolicyConstants(credit_segments=(CreditSegment(lower_bound=100, modifier=300),))

    def test_bands_must_ascend(self):
        """Test that segment tables are strictly ascending"""
        with pytest.raises(ValidationError, match="strictly ascending"):
            PolicyConstants(life_expectancies=(
                CountryLifeExpectancy(
                    lower_bound=0, country_code="EE", country_name="Estonia", life_expectancy=79
                ),
                CountryLifeExpectancy(
                    lower_bound=0, country_code="LV", country_name="Latvia", life_expectancy=75
                ),
            ))

    def test_no_credit_band_must_be_first(self):
        """Test the no-credit modifier is only allowed on the lowest band"""
        with pytest.raises(ValidationError, match="no-credit"):
            PolicyConstants(credit_segments=(
                CreditSegment(lower_bound=0, modifier=100),
                CreditSegment(lower_bound=5000, modifier=0),
            ))

    def test_policy_without_debt_band(self):
        """Test a policy where every segment has credit"""
        policy = PolicyConstants(credit_segments=(CreditSegment(lower_bound=0, modifier=900),))

        assert get_credit_modifier(0, policy) == 900
        assert get_credit_modifier(9999, policy) == 900


class TestCreditModifier:
    """Test suite for credit modifier resolution"""

    def setup_method(self):
        """Setup test fixtures"""
        self.policy = default_policy()

    @pytest.mark.parametrize(
        ("segment", "expected"),
        [
            (0, 0),
            (1200, 0),
            (2499, 0),
            (2500, 100),
            (4999, 100),
            (5000, 300),
            (7499, 300),
            (7500, 1000),
            (9999, 1000),
        ],
    )
    def test_segment_bands(self, segment, expected):
        """Test band boundaries"""
        assert get_credit_modifier(segment, self.policy) == expected


class TestCreditScore:
    """Test suite for the credit score formula"""

    def setup_method(self):
        """Setup test fixtures"""
        self.policy = default_policy()

    def test_score_value(self):
        """Test (modifier / amount) * period / 10"""
        assert credit_score(900, 4000, 12) == Decimal("0.27")
        assert credit_score(100, 2000, 12) == Decimal("0.06")

    def test_exact_threshold_is_approvable(self):
        """Test a score of exactly 0.1 is approvable"""
        assert credit_score(300, 3600, 12) == Decimal("0.1")
        assert is_approvable(300, 3600, 12, self.policy)
        assert not is_approvable(300, 3700, 12, self.policy)

    def test_monotonic_in_period(self):
        """Test that an approvable pair stays approvable with a longer period"""
        for modifier in (100, 300, 1000):
            for amount in range(2000, 10001, 100):
                for period in range(12, 60):
                    if is_approvable(modifier, amount, period, self.policy):
                        assert is_approvable(modifier, amount, period + 1, self.policy)


class TestAgePolicy:
    """Test suite for age eligibility"""

    def setup_method(self):
        """Setup test fixtures"""
        self.policy = default_policy()

    @pytest.mark.parametrize(
        ("segment", "country_code"),
        [
            (0, CountryCode.ESTONIA),
            (3332, CountryCode.ESTONIA),
            (3333, CountryCode.LATVIA),
            (6665, CountryCode.LATVIA),
            (6666, CountryCode.LITHUANIA),
            (9999, CountryCode.LITHUANIA),
        ],
    )
    def test_resolve_country(self, segment, country_code):
        """Test country band boundaries"""
        assert resolve_country(segment, self.policy).country_code == country_code

    def test_max_eligible_age(self):
        """Test life expectancy minus the longest loan term in years"""
        ages = {
            band.country_code: max_eligible_age(band, self.policy)
            for band in self.policy.life_expectancies
        }

        assert ages == {
            CountryCode.ESTONIA: 74,
            CountryCode.LATVIA: 70,
            CountryCode.LITHUANIA: 71,
        }

    def test_eligible_age(self):
        """Test an adult within limits"""
        code = parse_personal_code(SENIOR_ESTONIA_CODE)
        assert check_age(code, self.policy, TODAY) is None

    def test_under_minimum_age(self):
        """Test applicant below the minimum age"""
        error = check_age(parse_personal_code(UNDERAGE_CODE), self.policy, TODAY)

        assert error.kind == DecisionErrorKind.INVALID_AGE
        assert error.message == "Applicant is under the minimum age."

    def test_minimum_age_boundary(self):
        """Test 17 years 364 days vs 18 years 0 days"""
        code = parse_personal_code(EIGHTEEN_TODAY_CODE)

        assert check_age(code, self.policy, date(2025, 6, 14)).kind == DecisionErrorKind.INVALID_AGE
        assert check_age(code, self.policy, date(2025, 6, 15)) is None

    def test_exceeds_maximum_age(self):
        """Test applicant above the country's maximum eligible age"""
        error = check_age(parse_personal_code(SENIOR_LITHUANIA_CODE), self.policy, TODAY)

        assert error.kind == DecisionErrorKind.INVALID_AGE
        assert error.message == "Applicant exceeds maximum eligible age."

    def test_maximum_age_boundary(self):
        """Test age equal to the maximum is still eligible"""
        code = parse_personal_code(SENIOR_LITHUANIA_CODE)

        assert check_age(code, self.policy, date(2024, 12, 31)) is None
        assert check_age(code, self.policy, date(2025, 1, 1)) is not None
