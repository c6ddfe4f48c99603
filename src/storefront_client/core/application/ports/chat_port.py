from abc import ABC, abstractmethod

from storefront_client.core.domain.chat import AssistantReply


class ChatPort(ABC):
    @abstractmethod
    async def send_message(self, message: str) -> AssistantReply:
        """Post one user turn to the assistant. Raises ChatError or AuthError."""
