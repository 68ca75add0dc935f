"""High level entry point bundling record building, lookups and submissions."""
from __future__ import annotations

from typing import Any, Mapping, Optional

import httpx

from .api_clients.lookup import LookupClient
from .api_clients.submit import SubmissionClient
from .config import Settings, get_settings
from .models.schemas import LookupVerdict, RecordLike, UserRecord
from .services.user_factory import build_user
from .utils.key_store import UNSET, KeyStore
from .utils.registry import ParameterRegistry, parameter_registry


class StopForumSpam:
    """StopForumSpam client owning its own API key.

    Usage::

        sfs = StopForumSpam(api_key="some-api-key")
        user = sfs.user(ip="123.45.67.89", email="test@test.com", username="Spammer!")
        verdict = await sfs.is_spammer(user)
        await sfs.submit(user, "Caught You!")
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        registry: ParameterRegistry = parameter_registry,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.registry = registry
        self.key_store = KeyStore(api_key)
        self.lookup = LookupClient(registry, transport=transport)
        self.submission = SubmissionClient(self.key_store, registry, transport=transport)

    @classmethod
    def from_settings(cls, settings: Settings | None = None, **kwargs: Any) -> "StopForumSpam":
        settings = settings or get_settings()
        return cls(settings.api_key, **kwargs)

    def user(self, attributes: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> UserRecord:
        return build_user({**(attributes or {}), **kwargs}, self.registry)

    def key(self, value: Any = UNSET) -> str:
        return self.key_store.key(value)

    async def is_spammer(self, record: RecordLike) -> LookupVerdict:
        return await self.lookup.check_user(record)

    async def submit(self, record: RecordLike, evidence: Optional[str] = None) -> bool:
        return await self.submission.submit_user(record, evidence)
