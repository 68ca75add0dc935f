"""Build validated user records before any request is made."""
from __future__ import annotations

from typing import Any, Mapping

from pydantic import ValidationError as SchemaValidationError

from ..errors import ValidationError
from ..models.schemas import UserRecord
from ..utils.registry import ParameterRegistry, parameter_registry


def build_user(attributes: Mapping[str, Any], registry: ParameterRegistry = parameter_registry) -> UserRecord:
    present = {name: attributes[name] for name in registry.names() if attributes.get(name)}
    try:
        return UserRecord(**present)
    except SchemaValidationError as exc:
        location = exc.errors()[0].get("loc") or ("record",)
        field = str(location[0])
        raise ValidationError(field, present.get(field)) from exc
