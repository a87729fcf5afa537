"""Form state and the submit cycle shared by the login, password and profile forms."""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, ClassVar, Protocol

from pydantic import BaseModel

from ..client import ApiResult, PortalClient
from ..config.logging import get_logger
from ..exceptions import GENERIC_TRANSPORT_ERROR, FormValidationError, TransportError
from ..validation import FieldErrors

logger = get_logger(__name__)


class FormState(str, Enum):
    """Where a form is in its submit cycle."""

    IDLE = "idle"
    SUBMITTING = "submitting"
    INVALID = "invalid"
    AWAITING_RESPONSE = "awaiting_response"
    SUCCESS = "success"
    FAILURE = "failure"


class Notifier(Protocol):
    """Toast-style status reporting around an API call."""

    def loading(self, message: str) -> None: ...

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class LogNotifier:
    """Notifier that writes status changes to the structured log."""

    def __init__(self, form_name: str):
        self.logger = logger.bind(form=form_name)

    def loading(self, message: str) -> None:
        self.logger.info("form_loading", message=message)

    def success(self, message: str) -> None:
        self.logger.info("form_succeeded", message=message)

    def error(self, message: str) -> None:
        self.logger.info("form_failed", message=message)


class BaseForm(ABC):
    """
    A form bound to one API endpoint.

    Submitting runs the shared validation rules first. Invalid input never
    reaches the network; its errors are kept per field. While a request is in
    flight further submits are ignored. A form built without a client can be
    rendered but not submitted.

    State machine:
        IDLE -> SUBMITTING -> INVALID
                           -> AWAITING_RESPONSE -> SUCCESS (fields reset)
                                                -> FAILURE (fields kept)
    """

    name: ClassVar[str] = "form"
    fields: ClassVar[tuple[str, ...]] = ()
    schema: ClassVar[type[BaseModel]]
    loading_message: ClassVar[str] = "Submitting..."

    def __init__(
        self,
        client: PortalClient | None = None,
        notifier: Notifier | None = None,
        **values: str,
    ):
        self.client = client
        self.notifier = notifier or LogNotifier(self.name)
        self.errors: FieldErrors = {}
        self.message: str | None = None
        self.state = FormState.IDLE
        self.values: dict[str, str] = {name: "" for name in self.fields}
        for name, value in values.items():
            self.set_field(name, value)

    @property
    def busy(self) -> bool:
        return self.state in (FormState.SUBMITTING, FormState.AWAITING_RESPONSE)

    @property
    def succeeded(self) -> bool:
        return self.state == FormState.SUCCESS

    def set_field(self, name: str, value: Any) -> None:
        """Update a field value; editing a field clears its error."""
        if name not in self.fields:
            raise KeyError(f"Unknown field for {self.name} form: {name}")
        self.values[name] = "" if value is None else str(value)
        self.errors.pop(name, None)

    def reset(self) -> None:
        self.values = {name: "" for name in self.fields}
        self.errors = {}

    @abstractmethod
    def validate(self, payload: BaseModel) -> FieldErrors:
        """Run the shared rules for this form."""
        pass

    @abstractmethod
    async def send(self, payload: BaseModel) -> ApiResult:
        """Send a validated payload to the API."""
        pass

    def clean(self) -> BaseModel:
        """
        Build the request payload from the current values.

        Returns:
            Validated request schema

        Raises:
            FormValidationError: if any rule fails
        """
        payload = self.schema.model_validate(self.values)
        errors = self.validate(payload)
        if errors:
            raise FormValidationError(errors)
        return payload

    async def submit(self) -> FormState:
        """
        Validate and, when valid, send the form.

        Returns:
            The state the form ended in
        """
        if self.busy:
            logger.warning("duplicate_submission_ignored", form=self.name, state=self.state.value)
            return self.state

        if self.client is None:
            raise RuntimeError(f"{self.name} form has no API client")

        self.state = FormState.SUBMITTING
        self.message = None

        try:
            payload = self.clean()
        except FormValidationError as e:
            self.errors = e.errors
            self.state = FormState.INVALID
            logger.debug("form_invalid", form=self.name, fields=sorted(e.errors))
            return self.state

        self.errors = {}
        self.state = FormState.AWAITING_RESPONSE
        self.notifier.loading(self.loading_message)

        try:
            result = await self.send(payload)
        except TransportError as e:
            logger.warning("form_transport_error", form=self.name, error=str(e))
            return self._fail(GENERIC_TRANSPORT_ERROR)

        if not result.ok:
            self.errors = dict(result.errors)
            return self._fail(result.message)

        self.message = result.message
        self.reset()
        self.state = FormState.SUCCESS
        self.notifier.success(result.message)
        return self.state

    def _fail(self, message: str) -> FormState:
        self.message = message
        self.state = FormState.FAILURE
        self.notifier.error(message)
        return self.state
