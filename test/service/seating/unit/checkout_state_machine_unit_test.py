import pytest

from src.platform.exception.exceptions import InvalidTransitionError
from src.service.seating.domain.checkout_state_machine import (
    CheckoutContext,
    CheckoutState,
    Close,
    EditBuyer,
    Open,
    Prefill,
    Retry,
    SubmissionFailed,
    SubmissionSucceeded,
    Submit,
    transition,
)
from src.service.seating.domain.enum.checkout_status import CheckoutStatus
from src.service.seating.domain.enum.ui_message import UiMessage
from src.service.seating.domain.value_object.buyer_identity import BuyerForm


READY = CheckoutContext(cart_size=2, event_loaded=True)


def _collecting(**form) -> CheckoutState:
    return CheckoutState(status=CheckoutStatus.COLLECTING, form=BuyerForm(**form))


def _filled() -> CheckoutState:
    return _collecting(email='jan@example.com', first_name='Jan', last_name='Novak')


def _submitting(key: str = 'key-1') -> CheckoutState:
    return transition(_filled(), Submit(idempotency_key=key), READY)


# ============================================================================
# Test Open
# ============================================================================


@pytest.mark.unit
class TestOpen:
    def test_open_moves_idle_to_collecting(self):
        state = transition(CheckoutState(), Open(), READY)

        assert state.status == CheckoutStatus.COLLECTING
        assert state.is_open

    def test_open_requires_non_empty_cart(self):
        with pytest.raises(InvalidTransitionError) as exc_info:
            transition(CheckoutState(), Open(), CheckoutContext(cart_size=0, event_loaded=True))

        assert exc_info.value.status_code == 409

    def test_open_requires_loaded_event(self):
        with pytest.raises(InvalidTransitionError):
            transition(CheckoutState(), Open(), CheckoutContext(cart_size=1, event_loaded=False))

    def test_open_prefills_from_logged_in_user(self, buyer):
        context = CheckoutContext(cart_size=1, event_loaded=True, user=buyer)

        state = transition(CheckoutState(), Open(), context)

        assert state.form == BuyerForm.from_identity(buyer)

    def test_reopen_keeps_typed_fields(self):
        # Given: Fields typed, then dialog closed
        closed = transition(_collecting(email='a@b.cz'), Close(), READY)

        # When
        reopened = transition(closed, Open(), READY)

        # Then
        assert closed.status == CheckoutStatus.IDLE
        assert reopened.form.email == 'a@b.cz'


# ============================================================================
# Test Submit validation
# ============================================================================


@pytest.mark.unit
class TestSubmitValidation:
    def test_empty_email_stays_collecting_with_validation_error(self):
        # Given: Collecting with empty email
        state = _collecting(email='', first_name='Jan', last_name='Novak')

        # When
        result = transition(state, Submit(idempotency_key='k'), READY)

        # Then
        assert result.status == CheckoutStatus.COLLECTING
        assert result.validation_error == UiMessage.FILL_ALL_FIELDS
        assert result.submission_id == 0
        assert result.idempotency_key is None

    def test_whitespace_only_field_is_blank(self):
        state = _collecting(email='a@b.cz', first_name='   ', last_name='Novak')

        result = transition(state, Submit(idempotency_key='k'), READY)

        assert result.status == CheckoutStatus.COLLECTING
        assert result.validation_error == UiMessage.FILL_ALL_FIELDS

    def test_empty_cart_blocks_submit(self):
        result = transition(
            _filled(), Submit(idempotency_key='k'), CheckoutContext(cart_size=0, event_loaded=True)
        )

        assert result.status == CheckoutStatus.COLLECTING
        assert result.validation_error == UiMessage.EMPTY_CART

    def test_valid_form_moves_to_submitting_with_trimmed_identity(self):
        state = _collecting(email=' jan@example.com ', first_name='Jan', last_name='Novak ')

        result = transition(state, Submit(idempotency_key='key-1'), READY)

        assert result.status == CheckoutStatus.SUBMITTING
        assert result.submission_id == 1
        assert result.idempotency_key == 'key-1'
        assert result.submitted_identity.email == 'jan@example.com'
        assert result.submitted_identity.last_name == 'Novak'

    def test_editing_clears_validation_error(self):
        invalid = transition(_collecting(), Submit(idempotency_key='k'), READY)

        edited = transition(invalid, EditBuyer(email='a@b.cz'), READY)

        assert edited.validation_error is None
        assert edited.form.email == 'a@b.cz'


# ============================================================================
# Test Submitting results
# ============================================================================


@pytest.mark.unit
class TestSubmissionResults:
    def test_success_result(self, order_response):
        state = _submitting()

        result = transition(
            state, SubmissionSucceeded(submission_id=state.submission_id, order=order_response), READY
        )

        assert result.status == CheckoutStatus.SUCCESS
        assert result.order == order_response
        assert result.idempotency_key is None

    def test_failure_keeps_form(self):
        state = _submitting()

        result = transition(
            state, SubmissionFailed(submission_id=state.submission_id, detail='Seat taken'), READY
        )

        assert result.status == CheckoutStatus.ERROR
        assert result.error_detail == 'Seat taken'
        assert result.form == state.form

    def test_close_while_submitting_is_ignored(self):
        state = _submitting()

        assert transition(state, Close(), READY) is state

    def test_stale_result_is_ignored(self, order_response):
        state = _submitting()

        stale = transition(
            state, SubmissionSucceeded(submission_id=state.submission_id - 1, order=order_response), READY
        )

        assert stale is state

    def test_result_after_leaving_submitting_is_ignored(self):
        state = _submitting()
        failed = transition(state, SubmissionFailed(submission_id=1, detail='x'), READY)

        again = transition(failed, SubmissionFailed(submission_id=1, detail='late'), READY)

        assert again is failed

    @pytest.mark.parametrize('event', [Open(), EditBuyer(email='x'), Retry(), Submit(idempotency_key='k')])
    def test_submitting_rejects_other_events(self, event):
        with pytest.raises(InvalidTransitionError):
            transition(_submitting(), event, READY)


# ============================================================================
# Test Error recovery
# ============================================================================


@pytest.mark.unit
class TestErrorRecovery:
    def _error(self, *, outcome_unknown: bool = False) -> CheckoutState:
        return transition(
            _submitting('key-1'),
            SubmissionFailed(submission_id=1, detail='boom', outcome_unknown=outcome_unknown),
            READY,
        )

    def test_retry_returns_to_collecting(self):
        result = transition(self._error(), Retry(), READY)

        assert result.status == CheckoutStatus.COLLECTING
        assert result.error_detail is None
        assert result.form.email == 'jan@example.com'

    def test_edit_returns_to_collecting(self):
        result = transition(self._error(), EditBuyer(first_name='Petr'), READY)

        assert result.status == CheckoutStatus.COLLECTING
        assert result.form.first_name == 'Petr'
        assert result.form.last_name == 'Novak'

    def test_close_returns_to_idle(self):
        result = transition(self._error(), Close(), READY)

        assert result.status == CheckoutStatus.IDLE
        assert result.form.email == 'jan@example.com'

    def test_submit_from_error_requires_retry_first(self):
        with pytest.raises(InvalidTransitionError):
            transition(self._error(), Submit(idempotency_key='k'), READY)

    def test_unknown_outcome_reuses_idempotency_key(self):
        collecting = transition(self._error(outcome_unknown=True), Retry(), READY)

        resubmitted = transition(collecting, Submit(idempotency_key='key-2'), READY)

        assert resubmitted.idempotency_key == 'key-1'
        assert resubmitted.submission_id == 2

    def test_known_failure_gets_fresh_key(self):
        collecting = transition(self._error(outcome_unknown=False), Retry(), READY)

        resubmitted = transition(collecting, Submit(idempotency_key='key-2'), READY)

        assert resubmitted.idempotency_key == 'key-2'

    def test_forgetting_pending_submission_drops_key(self):
        error = self._error(outcome_unknown=True)

        forgotten = error.forget_pending_submission()

        assert forgotten.idempotency_key is None
        assert forgotten.outcome_unknown is False
        assert CheckoutState().forget_pending_submission() == CheckoutState()


# ============================================================================
# Test Success and Idle
# ============================================================================


@pytest.mark.unit
class TestTerminalStates:
    def test_success_closes_to_idle(self, order_response):
        success = transition(
            _submitting(), SubmissionSucceeded(submission_id=1, order=order_response), READY
        )

        result = transition(success, Close(), READY)

        assert result.status == CheckoutStatus.IDLE
        assert result.order is None

    def test_success_rejects_submit(self, order_response):
        success = transition(
            _submitting(), SubmissionSucceeded(submission_id=1, order=order_response), READY
        )

        with pytest.raises(InvalidTransitionError):
            transition(success, Submit(idempotency_key='k'), READY)

    @pytest.mark.parametrize('event', [EditBuyer(email='x'), Retry(), Submit(idempotency_key='k')])
    def test_idle_accepts_only_open(self, event):
        with pytest.raises(InvalidTransitionError):
            transition(CheckoutState(), event, READY)

    def test_prefill_replaces_form_while_collecting(self, buyer):
        result = transition(_collecting(email='old@x.cz'), Prefill(identity=buyer), READY)

        assert result.status == CheckoutStatus.COLLECTING
        assert result.form == BuyerForm.from_identity(buyer)
