from src.config.settings import settings
from src.mailing_list.base import MailingListServiceBase
from src.mailing_list.mailchimp_service import MailchimpMailingListService


def get_mailing_list_service() -> MailingListServiceBase | None:
    """Mailchimp when an api key is configured, otherwise None (no subscription)."""
    if settings.mailchimp_api_key:
        return MailchimpMailingListService(config=settings)
    return None


__all__ = [
    "MailingListServiceBase",
    "MailchimpMailingListService",
    "get_mailing_list_service",
]
