from abc import ABC, abstractmethod


class MailingListServiceBase(ABC):
    @abstractmethod
    async def subscribe(self, email: str, name: str, tag: str | None) -> None:
        """Add ``email`` to the audience and attach ``tag`` to the member."""
        pass
