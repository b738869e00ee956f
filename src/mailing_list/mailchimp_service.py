import hashlib
import logging
from typing import Protocol

import httpx

from src.mailing_list.base import MailingListServiceBase

logger = logging.getLogger(__name__)


class MailchimpConfig(Protocol):
    mailchimp_api_key: str
    mailchimp_list_id: str

    def get_mailchimp_server_prefix(self) -> str: ...


def subscriber_hash(email: str) -> str:
    """Mailchimp identifies list members by the md5 of the lowercased email."""
    return hashlib.md5(email.strip().lower().encode("utf-8")).hexdigest()


class MailchimpMailingListService(MailingListServiceBase):
    """Subscribes participants to a Mailchimp audience and tags them per event."""

    def __init__(
        self,
        config: MailchimpConfig,
        http_client_class: type[httpx.AsyncClient] = httpx.AsyncClient,
    ):
        self._config = config
        self._http_client_class = http_client_class

    @property
    def base_url(self) -> str:
        return f"https://{self._config.get_mailchimp_server_prefix()}.api.mailchimp.com/3.0"

    def _member_url(self, email: str) -> str:
        return f"{self.base_url}/lists/{self._config.mailchimp_list_id}/members/{subscriber_hash(email)}"

    async def subscribe(self, email: str, name: str, tag: str | None) -> None:
        auth = ("anystring", self._config.mailchimp_api_key)
        member_url = self._member_url(email)

        async with self._http_client_class() as client:
            # Upsert keeps re-registrations from failing on "Member Exists"
            member_response = await client.put(
                member_url,
                auth=auth,
                json={
                    "email_address": email,
                    "status_if_new": "subscribed",
                    "merge_fields": {"FNAME": name},
                },
            )
            member_response.raise_for_status()

            if not tag:
                logger.info("Subscribed %s without tag", email)
                return

            tags_response = await client.post(
                f"{member_url}/tags",
                auth=auth,
                json={"tags": [{"name": tag, "status": "active"}]},
            )
            tags_response.raise_for_status()

        logger.info("Subscribed %s with tag %s", email, tag)
