"""Identity attributes understood by the StopForumSpam endpoints."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Tuple


@dataclass(frozen=True)
class IdentityAttribute:
    local_name: str
    submit_name: Optional[str] = None

    @property
    def submittable(self) -> bool:
        # lookup-only attributes have no field on the /add endpoint
        return self.submit_name is not None


class ParameterRegistry:
    def __init__(self, attributes: Iterable[IdentityAttribute]) -> None:
        self._attributes: Tuple[IdentityAttribute, ...] = tuple(attributes)
        names = [attribute.local_name for attribute in self._attributes]
        if len(set(names)) != len(names):
            raise ValueError("Identity attribute names must be unique")

    def all(self) -> Tuple[IdentityAttribute, ...]:
        return self._attributes

    def submittable(self) -> Tuple[IdentityAttribute, ...]:
        return tuple(attribute for attribute in self._attributes if attribute.submittable)

    def names(self) -> Tuple[str, ...]:
        return tuple(attribute.local_name for attribute in self._attributes)


SEARCH_PARAMETERS = (
    IdentityAttribute("ip", "ip_addr"),
    IdentityAttribute("email", "email"),
    IdentityAttribute("username", "username"),
    IdentityAttribute("emailhash"),
)

parameter_registry = ParameterRegistry(SEARCH_PARAMETERS)
