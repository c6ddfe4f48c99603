from collections.abc import Iterator

from storefront_client.core.domain.chat import ChatMessage


class ChatTranscript:
    """Append-only conversation log, opened with the assistant greeting."""

    def __init__(self, greeting: str | None = None) -> None:
        self._messages: list[ChatMessage] = []
        if greeting:
            self._messages.append(ChatMessage.assistant(greeting))

    def append(self, message: ChatMessage) -> ChatMessage:
        self._messages.append(message)
        return message

    @property
    def messages(self) -> tuple[ChatMessage, ...]:
        return tuple(self._messages)

    @property
    def last(self) -> ChatMessage | None:
        return self._messages[-1] if self._messages else None

    def discard(self) -> None:
        """Drop the whole conversation. Only session teardown calls this."""
        self._messages.clear()

    def __iter__(self) -> Iterator[ChatMessage]:
        return iter(tuple(self._messages))

    def __len__(self) -> int:
        return len(self._messages)
