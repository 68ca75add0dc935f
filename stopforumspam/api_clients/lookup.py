"""Read path: ask StopForumSpam whether identity attributes were reported."""
from __future__ import annotations

from typing import Any, Iterable, List

import httpx

from ..logging_config import logger
from ..models.schemas import LookupVerdict, RecordLike
from ..utils.encoding import encode_component
from ..utils.registry import ParameterRegistry, parameter_registry
from .base import ForumSpamClient


def interpret_lookup(queried: Iterable[str], body: Any) -> LookupVerdict:
    """Return the whole body if any queried attribute has a truthy entry in it.

    Matching never narrows the payload to the matched attribute, and an
    attribute without an entry does not undo an earlier match.
    """
    if not isinstance(body, dict):
        return False
    verdict: LookupVerdict = False
    for name in queried:
        if body.get(name):
            verdict = body
    return verdict


class LookupClient(ForumSpamClient):
    name = "lookup"
    base_url = "https://api.stopforumspam.org/api"

    def __init__(
        self,
        registry: ParameterRegistry = parameter_registry,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(transport=transport)
        self._registry = registry

    def queried_fields(self, record: RecordLike) -> List[str]:
        return [parameter.local_name for parameter in self._registry.all() if record.get(parameter.local_name)]

    def build_form(self, record: RecordLike) -> dict[str, str]:
        form = {"json": "true", "nobadusername": "true"}
        for name in self.queried_fields(record):
            form[name] = encode_component(str(record.get(name)))
        return form

    async def check_user(self, record: RecordLike) -> LookupVerdict:
        queried = self.queried_fields(record)
        form = self.build_form(record)
        logger.debug("sfs.lookup.sent", fields=queried)
        response = await self._post(form)
        verdict = interpret_lookup(queried, self._parse_json(response))
        if verdict is False:
            logger.info("sfs.lookup.clean", fields=queried)
        else:
            logger.info("sfs.lookup.matched", fields=[name for name in queried if verdict.get(name)])
        return verdict

    def _headers(self) -> dict[str, str]:
        return {"Accept": "application/json"}
