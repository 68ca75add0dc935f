"""Value objects passed between the user factory and the API clients."""
from __future__ import annotations

from typing import Any, Dict, Literal, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, field_validator

from ..utils.validators import is_valid_email, is_valid_ip, is_valid_md5


class BaseSchema(BaseModel):
    """Immutable schema; unknown attributes are dropped."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class UserRecord(BaseSchema):
    ip: Optional[str] = None
    email: Optional[str] = None
    emailhash: Optional[str] = None
    username: Optional[str] = None

    @field_validator("username", mode="before")
    @classmethod
    def _coerce_username(cls, value: Any) -> Any:
        # usernames are free text; only the type is normalised
        return value if value is None else str(value)

    @field_validator("email")
    @classmethod
    def _check_email(cls, value: Optional[str]) -> Optional[str]:
        if value and not is_valid_email(value):
            raise ValueError("invalid email address")
        return value

    @field_validator("ip")
    @classmethod
    def _check_ip(cls, value: Optional[str]) -> Optional[str]:
        if value and not is_valid_ip(value):
            raise ValueError("invalid IP address")
        return value

    @field_validator("emailhash")
    @classmethod
    def _check_emailhash(cls, value: Optional[str]) -> Optional[str]:
        if value and not is_valid_md5(value):
            raise ValueError("invalid MD5 hash")
        return value

    def get(self, name: str, default: Any = None) -> Any:
        return getattr(self, name, default) if name in type(self).model_fields else default



# Lookups accept any mapping as well as a validated record.
RecordLike = Union[UserRecord, Mapping[str, Any]]

# ``False`` when nothing matched, otherwise the full decoded response body.
LookupVerdict = Union[Literal[False], Dict[str, Any]]
