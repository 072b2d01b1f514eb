"""Base classes shared by all Zoho Books schemas."""

from __future__ import annotations

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

CUSTOM_FIELD_PREFIX = "cf_"


class ZohoModel(BaseModel):
    """A snapshot of a remote entity.

    Zoho adds keys freely (custom fields are flattened into the payload as
    ``cf_<name>``), so unknown keys are kept rather than rejected. They are
    reachable through ``extensions`` while the declared fields stay typed.
    A blank string in a field that cannot hold one is read as unset.
    """

    model_config = ConfigDict(extra="allow")

    @field_validator("*", mode="wrap")
    @classmethod
    def blank_as_unset(cls, value: Any, handler: Any) -> Any:
        # Zoho sends "" for unset numbers, booleans and enums
        try:
            return handler(value)
        except ValidationError:
            if value == "":
                return None
            raise

    @property
    def extensions(self) -> Dict[str, Any]:
        """All keys the schema does not declare."""
        return dict(self.model_extra or {})

    @property
    def custom_field_values(self) -> Dict[str, Any]:
        """Only the ``cf_`` prefixed extension keys."""
        return {
            k: v for k, v in self.extensions.items() if k.startswith(CUSTOM_FIELD_PREFIX)
        }


class ZohoRequest(BaseModel):
    """A payload sent to Zoho. Unset optional fields are not sent."""

    model_config = ConfigDict(extra="forbid")

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(mode="json", exclude_none=True)
