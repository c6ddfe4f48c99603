from storefront_client.core.application.chat.chat_intent_bridge import ChatIntentBridge
from storefront_client.core.application.chat.chat_transcript import ChatTranscript

__all__ = ["ChatIntentBridge", "ChatTranscript"]
