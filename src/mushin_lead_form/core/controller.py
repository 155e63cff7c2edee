"""Form state controller - owns lead data, validation, persistence and submission."""

import logging
import threading
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Callable, Mapping, Optional

from ..exceptions import LeadApiError, ReadOnlyFieldError, UnknownFieldError
from ..storage.snapshot import SnapshotStore
from ..tracking.analytics import AnalyticsTracker
from .formatting import normalize_phone_number
from .models import (
    FormErrors,
    FormState,
    FormStep,
    StepTransition,
    SubmissionResponse,
    SubmissionType,
)
from .validation import validate_email, validate_phone

logger = logging.getLogger(__name__)

# Called with the current state once the user is past the first step;
# may return a cleanup callable that runs before the next invocation.
PartialCaptureHook = Callable[[FormState], Optional[Callable[[], None]]]

REQUIRED_FIELDS = ("address", "phone", "consent")

STEP_REQUIREMENTS = {
    FormStep.PROPERTY_DETAILS: {"property_condition": "Please select property condition"},
    FormStep.TIMELINE: {"timeframe": "Please select your preferred timeframe"},
    FormStep.CONTACT: {
        "first_name": "First name is required",
        "last_name": "Last name is required",
        "email": "Email is required",
    },
}

# Managed by the controller; callers may not set these through update_form_data.
_SYSTEM_FIELDS = ("is_submitting", "lead_id")


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def validate_field(field: str, value: Any) -> Optional[str]:
    """Change-time validation for a single field; None means it passes."""
    if field == "phone":
        return "Please enter a valid phone number" if value and not validate_phone(value) else None
    if field == "email":
        return "Please enter a valid email address" if value and not validate_email(value) else None
    if field == "address":
        return "Property address is required" if not (value or "").strip() else None
    if field == "consent":
        return "You must consent to be contacted" if not value else None
    return None


class FormController:
    """Single source of truth for one lead as it moves through the wizard.

    Construct one per composition root and hand it to whatever needs it.
    Snapshot storage, the API client and analytics are injected.
    """

    def __init__(
        self,
        store: SnapshotStore,
        api_client,
        tracker: Optional[AnalyticsTracker] = None,
        partial_capture: Optional[PartialCaptureHook] = None
    ):
        self.store = store
        self.api_client = api_client
        self.tracker = tracker or AnalyticsTracker()
        self.partial_capture = partial_capture

        self._lock = threading.RLock()
        self._submit_lock = threading.Lock()
        self._state = self._hydrate()
        self._errors: FormErrors = {}
        self._current_step = FormStep.INITIAL
        self._partial_attempted = False
        self._capture_cleanup: Optional[Callable[[], None]] = None

    def _hydrate(self) -> FormState:
        try:
            saved = self.store.load()
        except Exception as e:
            logger.error(f"Error loading saved form: {e}")
            saved = None
        if not saved:
            return FormState()
        state = FormState.from_dict(saved)
        state.is_submitting = False
        if state.phone:
            state.phone = normalize_phone_number(state.phone)
        return state

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def form_state(self) -> FormState:
        """A copy of the current state."""
        with self._lock:
            return replace(self._state)

    @property
    def errors(self) -> FormErrors:
        with self._lock:
            return dict(self._errors)

    @property
    def current_step(self) -> FormStep:
        return self._current_step

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def update_form_data(self, data: Mapping[str, Any]):
        """Merge fields into the state and re-validate the ones that changed.

        Unknown field names raise UnknownFieldError and controller-managed
        ones (lead_id, is_submitting) raise ReadOnlyFieldError, both before
        anything is applied.
        """
        known = FormState.field_names()
        for key in data:
            if key not in known:
                raise UnknownFieldError(key)
            if key in _SYSTEM_FIELDS:
                raise ReadOnlyFieldError(key)

        values = dict(data)
        if "phone" in values:
            values["phone"] = normalize_phone_number(values["phone"] or "")
        if "submission_type" in values and isinstance(values["submission_type"], str):
            values["submission_type"] = SubmissionType(values["submission_type"])
        self._apply(values)

    def _apply(self, values: Mapping[str, Any]):
        with self._lock:
            self._state = replace(self._state, **values)
            for key in values:
                error = validate_field(key, getattr(self._state, key))
                if error:
                    self._errors[key] = error
                else:
                    self._errors.pop(key, None)
            self._persist()

    def set_field_error(self, field: str, error: Optional[str]):
        with self._lock:
            if error:
                self._errors[field] = error
            else:
                self._errors.pop(field, None)

    def clear_field_error(self, field: str):
        with self._lock:
            self._errors.pop(field, None)

    def clear_form_data(self):
        """Reset to defaults and erase the saved snapshot."""
        with self._lock:
            self._state = FormState()
            self._errors = {}
            self._partial_attempted = False
            self._run_capture_cleanup()
            try:
                self.store.clear()
            except Exception as e:
                logger.error(f"Error clearing saved form: {e}")
        logger.info("Form data cleared")

    def _set_flags(self, **flags):
        with self._lock:
            self._state = replace(self._state, **flags)
            self._persist()

    def _persist(self):
        if self._state.is_submitting:
            return
        try:
            self.store.save(self._state.to_dict())
        except Exception as e:
            logger.error(f"Error saving form snapshot: {e}")

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def is_step_completed(self, step: FormStep) -> bool:
        """Whether the current data is enough to move past a step."""
        with self._lock:
            state = self._state
        if step == FormStep.INITIAL:
            return bool(state.address and state.phone)
        if step == FormStep.PROPERTY_DETAILS:
            return bool(state.property_condition)
        if step == FormStep.TIMELINE:
            return bool(state.timeframe)
        if step == FormStep.CONTACT:
            return bool(state.first_name and state.last_name and state.email)
        if step == FormStep.THANK_YOU:
            return True
        return False

    def set_current_step(self, step: FormStep):
        """Move the wizard to a step; the UI decides the order."""
        self._current_step = step
        self._run_capture_cleanup()
        state = self.form_state
        if self.partial_capture and step != FormStep.INITIAL and state.address and state.phone:
            try:
                self._capture_cleanup = self.partial_capture(state)
            except Exception as e:
                logger.error(f"Partial lead capture hook failed: {e}")

    def _run_capture_cleanup(self):
        cleanup, self._capture_cleanup = self._capture_cleanup, None
        if cleanup:
            try:
                cleanup()
            except Exception as e:
                logger.error(f"Partial lead capture cleanup failed: {e}")

    def advance_step(self) -> StepTransition:
        """Move past the current step if it is complete.

        Leaving the initial step submits the partial lead. Until a lead id
        comes back, every later transition that has address, phone and
        consent tries again. A failed partial submission is reported in the
        result but does not stop the wizard from advancing.
        """
        step = self._current_step
        if not self.is_step_completed(step):
            missing = self._missing_for_step(step)
            return StepTransition(from_step=step, to_step=step, advanced=False, missing=missing)

        next_step = step.next()
        partial_result = None
        if next_step != FormStep.THANK_YOU and (step == FormStep.INITIAL or self._partial_ready()):
            partial_result = self._submit_partial_once()

        self.set_current_step(next_step)
        return StepTransition(
            from_step=step,
            to_step=next_step,
            advanced=next_step != step,
            partial_result=partial_result
        )

    def _missing_for_step(self, step: FormStep):
        with self._lock:
            state = self._state
        if step == FormStep.INITIAL:
            return [name for name in ("address", "phone") if not getattr(state, name)]
        return [name for name in STEP_REQUIREMENTS.get(step, {}) if not getattr(state, name)]

    def _partial_ready(self) -> bool:
        with self._lock:
            state = self._state
        return bool(state.address and state.phone and state.consent)

    def _submit_partial_once(self) -> Optional[SubmissionResponse]:
        with self._lock:
            if self._partial_attempted or self._state.lead_id:
                return None
            self._partial_attempted = True

        result = self.submit_partial_lead()
        if not result.success:
            # Not a lead yet; allow the next transition to try again.
            with self._lock:
                self._partial_attempted = False
        return result

    # ------------------------------------------------------------------
    # Submission
    # ------------------------------------------------------------------

    def submit_partial_lead(self) -> SubmissionResponse:
        """Save address, phone and consent early so abandoned forms still count."""
        state = self.form_state
        if not state.address or not state.phone or not state.consent:
            return SubmissionResponse(success=False, error="Address, phone, and consent are required")

        payload = {
            "address": state.address,
            "streetAddress": state.street_address,
            "city": state.city,
            "state": state.state,
            "postalCode": state.postal_code,
            "phone": state.phone,
            "consent": state.consent,
            "timestamp": _now_iso(),
        }

        try:
            result = self.api_client.submit_partial(payload)
        except LeadApiError as e:
            logger.error(f"Error submitting partial lead: {e.message}")
            return SubmissionResponse(success=False, error=e.message)
        except Exception as e:
            logger.exception("Unexpected error submitting partial lead")
            return SubmissionResponse(success=False, error=str(e) or "Unknown error")

        self._apply({
            "lead_id": result.lead_id,
            "submission_type": SubmissionType.PARTIAL,
            "timestamp": payload["timestamp"],
        })
        logger.info(f"Partial lead captured: {result.lead_id}")
        self.tracker.track_lead_generated(result.lead_id)
        return SubmissionResponse(success=True, lead_id=result.lead_id)

    def validate_form(self) -> bool:
        """Submit-time validation; replaces the error map with its findings."""
        with self._lock:
            state = self._state
        new_errors: FormErrors = {}

        for name in REQUIRED_FIELDS:
            error = validate_field(name, getattr(state, name))
            if name == "phone" and not error and not state.phone:
                error = "Phone number is required"
            if error:
                new_errors[name] = error

        for name, message in STEP_REQUIREMENTS.get(self._current_step, {}).items():
            if not getattr(state, name):
                new_errors[name] = message
        if self._current_step == FormStep.CONTACT and state.email and "email" not in new_errors:
            error = validate_field("email", state.email)
            if error:
                new_errors["email"] = error

        with self._lock:
            self._errors = new_errors
        return not new_errors

    def submit_form(self) -> SubmissionResponse:
        """Submit the complete lead. Only one submission may be in flight."""
        if not self._submit_lock.acquire(blocking=False):
            return SubmissionResponse(success=False, error="A submission is already in progress")

        try:
            if not self.validate_form():
                return SubmissionResponse(success=False, error="Please correct the errors before submitting")

            self._set_flags(is_submitting=True, error="")
            payload = self.form_state.lead_data()
            payload["lastUpdated"] = _now_iso()
            payload["submissionType"] = SubmissionType.COMPLETE.value

            try:
                result = self.api_client.submit_form(payload)
            except LeadApiError as e:
                logger.error(f"Error submitting form: {e.message}")
                return self._fail_submission(e.message or "An error occurred")
            except Exception as e:
                logger.exception("Unexpected error submitting form")
                return self._fail_submission(str(e) or "An error occurred")

            if not result.success:
                return self._fail_submission(result.error or result.message or "Failed to submit form")

            lead_id = result.lead_id or self.form_state.lead_id or None
            self.clear_form_data()
            logger.info(f"Lead submitted: {lead_id}")
            self.tracker.track_submission_success(lead_id)
            return SubmissionResponse(success=True, lead_id=lead_id, message=result.message)
        finally:
            self._submit_lock.release()

    def _fail_submission(self, message: str) -> SubmissionResponse:
        self._set_flags(is_submitting=False, error=message)
        return SubmissionResponse(success=False, error=message)

    @property
    def is_submission_in_flight(self) -> bool:
        return self._submit_lock.locked()
