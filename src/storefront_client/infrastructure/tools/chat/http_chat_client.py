import structlog

from storefront_client.core.application.exceptions import ChatError, ProviderError
from storefront_client.core.application.ports import ChatPort
from storefront_client.core.domain.chat import AssistantReply
from storefront_client.infrastructure.tools.chat.dtos.chat_reply_dto import ChatReplyDTO
from storefront_client.infrastructure.tools.common.mappers.product_mapper import to_product
from storefront_client.infrastructure.tools.common.storefront_http_client import (
    StorefrontHttpClient,
)

logger = structlog.get_logger()


class HttpChatClient(ChatPort):
    """Assistant endpoint. The reply contract is opaque beyond ``{response, products, intent}``."""

    def __init__(self, http: StorefrontHttpClient) -> None:
        self._http = http

    async def send_message(self, message: str) -> AssistantReply:
        try:
            payload = await self._http.post("chat/message", {"message": message})
        except ProviderError as exc:
            raise ChatError(
                message=f"Chat turn failed: {exc.message}",
                retryable=exc.retryable,
                status_code=exc.status_code,
            ) from exc

        try:
            dto = ChatReplyDTO.model_validate(payload or {})
            products = tuple(to_product(item) for item in dto.products)
        except ValueError as exc:
            logger.error(
                "Chat reply could not be mapped",
                processing_status="ERROR",
                source_system="storefront-api",
                error_type=type(exc).__name__,
                error_details=str(exc)[:300],
            )
            raise ChatError(message="Chat reply is malformed") from exc
        return AssistantReply(text=dto.response, products=products, intent=dto.intent)
