"""Write path: report a spammer to StopForumSpam under an API key."""
from __future__ import annotations

from typing import Optional

import httpx

from ..errors import IncompleteRecordError, MissingApiKeyError
from ..logging_config import logger
from ..models.schemas import RecordLike
from ..utils.encoding import encode_component
from ..utils.key_store import KeyStore
from ..utils.registry import ParameterRegistry, parameter_registry
from .base import ForumSpamClient


class SubmissionClient(ForumSpamClient):
    """Submits complete records (ip, email and username) to ``/add``.

    Both preconditions, a configured key and a complete record, are checked
    before anything is sent.
    """

    name = "submission"
    base_url = "https://www.stopforumspam.com/add"

    def __init__(
        self,
        key_store: KeyStore,
        registry: ParameterRegistry = parameter_registry,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(transport=transport)
        self._key_store = key_store
        self._registry = registry

    def build_form(self, record: RecordLike, evidence: Optional[str] = None) -> dict[str, str]:
        api_key = self._key_store.get_key()
        if not api_key:
            logger.warning("sfs.submit.rejected", reason="missing_api_key")
            raise MissingApiKeyError()

        form = {"api_key": api_key}
        missing = []
        for parameter in self._registry.submittable():
            value = record.get(parameter.local_name)
            if not value:
                missing.append(parameter.local_name)
                continue
            form[parameter.submit_name] = encode_component(str(value))
        if missing:
            logger.warning("sfs.submit.rejected", reason="incomplete_record", missing=missing)
            raise IncompleteRecordError(missing)

        if evidence:
            form["evidence"] = encode_component(evidence)
        return form

    async def submit_user(self, record: RecordLike, evidence: Optional[str] = None) -> bool:
        form = self.build_form(record, evidence)
        await self._post(form)
        logger.info("sfs.submit.accepted", with_evidence="evidence" in form)
        return True
