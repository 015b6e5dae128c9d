"""Decision Engine Service.

Computes the best loan offer for a personal code, requested amount and
requested period.

Check order (first failure wins):
1. Personal code format and checksum
2. Applicant age
3. Loan amount range
4. Loan period range
5. Credit modifier (applicants with debt get no loan)
6. Approval search
"""

import time
from collections.abc import Callable
from datetime import date
from functools import lru_cache

from ..core.constants import ErrorMessages
from ..core.logging import get_logger
from ..core.metrics import (
    approved_amount_total,
    approved_period_total,
    loan_decision_duration_seconds,
    loan_decisions_total,
)
from ..domain.business_rules import (
    PolicyConstants,
    check_age,
    default_policy,
    get_credit_modifier,
    is_approvable,
)
from ..domain.decision import Decision, DecisionError, DecisionErrorKind
from ..domain.validators import PersonalCode, parse_personal_code

logger = get_logger(__name__)


class DecisionEngine:
    """Loan decision engine.

    Stateless apart from the immutable policy and the clock, so a single
    instance can serve any number of concurrent requests.
    """

    def __init__(
        self,
        policy: PolicyConstants | None = None,
        today: Callable[[], date] | None = None
    ):
        """Initialize the decision engine.

        Args:
            policy: Loan policy (default policy if not provided)
            today: Zero-argument callable returning the decision date
                   (``date.today`` if not provided)
        """
        self.policy = policy or default_policy()
        self.today = today or date.today

    def calculate_approved_loan(
        self,
        personal_code: str,
        loan_amount: int,
        loan_period: int
    ) -> Decision:
        """Calculate the best loan offer for the applicant.

        Args:
            personal_code: Estonian personal identification code
            loan_amount: Requested loan amount
            loan_period: Requested loan period in months

        Returns:
            Approved Decision, or a rejected Decision carrying the first
            failing check
        """
        start_time = time.time()

        decision = self._decide(personal_code, loan_amount, loan_period)

        duration = time.time() - start_time
        loan_decision_duration_seconds.observe(duration)

        if decision.is_approved:
            loan_decisions_total.labels(outcome="approved").inc()
            approved_amount_total.observe(decision.loan_amount)
            approved_period_total.observe(decision.loan_period)
            logger.info(
                "Loan approved",
                extra={
                    'personal_code': personal_code,
                    'requested_amount': loan_amount,
                    'requested_period': loan_period,
                    'approved_amount': decision.loan_amount,
                    'approved_period': decision.loan_period,
                    'duration': duration
                }
            )
        else:
            loan_decisions_total.labels(outcome=decision.error.kind.value.lower()).inc()
            logger.info(
                "Loan rejected",
                extra={
                    'personal_code': personal_code,
                    'requested_amount': loan_amount,
                    'requested_period': loan_period,
                    'error_kind': decision.error.kind.value,
                    'duration': duration
                }
            )

        return decision

    def _decide(self, personal_code: str, loan_amount: int, loan_period: int) -> Decision:
        error, parsed_code = self.verify_inputs(personal_code, loan_amount, loan_period)
        if error:
            return Decision(error=error)

        credit_modifier = get_credit_modifier(parsed_code.segment, self.policy)

        if credit_modifier == self.policy.no_credit_modifier:
            return Decision.rejected(DecisionErrorKind.NO_VALID_LOAN, ErrorMessages.NO_VALID_LOAN)

        offer = self.find_best_offer(credit_modifier, loan_period)
        if offer is None:
            return Decision.rejected(DecisionErrorKind.NO_VALID_LOAN, ErrorMessages.NO_VALID_LOAN)

        return Decision.approved(*offer)

    def verify_inputs(
        self,
        personal_code: str,
        loan_amount: int,
        loan_period: int
    ) -> tuple[DecisionError | None, PersonalCode | None]:
        """Validate the request in order: personal code, age, amount, period.

        Returns:
            (error, parsed personal code); error is None when all checks pass
        """
        try:
            parsed_code = parse_personal_code(personal_code)
        except ValueError as e:
            logger.debug(
                "Personal code rejected",
                extra={'personal_code': personal_code, 'reason': str(e)}
            )
            return DecisionError(
                kind=DecisionErrorKind.INVALID_PERSONAL_CODE,
                message=ErrorMessages.INVALID_PERSONAL_CODE
            ), None

        age_error = check_age(parsed_code, self.policy, self.today())
        if age_error:
            return age_error, parsed_code

        if not (self.policy.minimum_loan_amount <= loan_amount <= self.policy.maximum_loan_amount):
            return DecisionError(
                kind=DecisionErrorKind.INVALID_LOAN_AMOUNT,
                message=ErrorMessages.INVALID_LOAN_AMOUNT
            ), parsed_code

        if not (self.policy.minimum_loan_period <= loan_period <= self.policy.maximum_loan_period):
            return DecisionError(
                kind=DecisionErrorKind.INVALID_LOAN_PERIOD,
                message=ErrorMessages.INVALID_LOAN_PERIOD
            ), parsed_code

        return None, parsed_code

    def find_best_offer(self, credit_modifier: int, loan_period: int) -> tuple[int, int] | None:
        """Search for the best approvable (amount, period) pair.

        Periods are tried from the requested one upwards; within a period,
        amounts are scanned from the maximum down. The first approvable pair
        is returned, so the shortest acceptable period wins and, for that
        period, the largest acceptable amount.

        Returns:
            (amount, period) or None when no pair qualifies
        """
        policy = self.policy

        for period in range(loan_period, policy.maximum_loan_period + 1, policy.loan_period_step):
            for amount in range(
                policy.maximum_loan_amount,
                policy.minimum_loan_amount - 1,
                -policy.loan_amount_step
            ):
                if is_approvable(credit_modifier, amount, period, policy):
                    return amount, period

        return None


@lru_cache
def get_decision_engine() -> DecisionEngine:
    """FastAPI dependency returning the process-wide decision engine."""
    return DecisionEngine()
