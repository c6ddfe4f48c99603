"""Unit tests — log schema processor, renderer selection and redaction."""

import httpx
import structlog

from storefront_client.infrastructure.observability import redact_dict, redact_text
from storefront_client.infrastructure.observability.logger_factory_service import select_renderer
from storefront_client.infrastructure.observability.logging import (
    StorefrontSchemaProcessor,
    storefront_schema_processor,
)


class TestRedaction:
    def test_bearer_token_is_redacted(self) -> None:
        text = "GET /cart failed with Authorization: Bearer abc.def-123"

        assert "abc.def-123" not in redact_text(text)
        assert "Bearer [REDACTED]" in redact_text(text)

    def test_sensitive_keys_are_redacted_recursively(self) -> None:
        payload = {"headers": {"Authorization": "Bearer x"}, "items": [{"note": "token=abc"}]}

        redacted = redact_dict(payload)

        assert redacted["headers"]["Authorization"] == "[REDACTED]"
        assert redacted["items"][0]["note"] == "token=[REDACTED]"

    def test_httpx_headers_can_be_redacted_directly(self) -> None:
        headers = httpx.Headers({"Authorization": "Bearer t0k3n", "Accept": "application/json"})

        redacted = redact_dict(headers)

        assert redacted["authorization"] == "[REDACTED]"
        assert redacted["accept"] == "application/json"

    def test_payment_fields_in_error_bodies_are_masked(self) -> None:
        body = '{"cardNumber": "4111111111111111", "cvv": "123", "city": "Springfield"}'

        redacted = redact_text(body)

        assert "4111111111111111" not in redacted
        assert '"cvv": "[REDACTED]"' in redacted
        assert "Springfield" in redacted


class TestSchemaProcessor:
    def test_nests_known_blocks(self) -> None:
        event = {
            "event": "Storefront API returned an error",
            "level": "error",
            "processing_status": "ERROR",
            "error_type": "HttpStatusError",
            "error_code": 503,
            "error_retryable": True,
            "context_method": "GET",
            "context_endpoint": "cart",
            "source_system": "storefront-api",
        }

        result = storefront_schema_processor(None, "error", event)

        assert result["message"] == "Storefront API returned an error"
        assert result["processing"]["status"] == "ERROR"
        assert result["error"] == {
            "type": "HttpStatusError",
            "code": 503,
            "details": None,
            "retryable": True,
        }
        assert result["context"] == {"endpoint": "cart", "method": "GET"}
        assert result["metadata"]["source_system"] == "storefront-api"
        assert "cart" not in result
        assert "extra" not in result

    def test_cart_fields_are_grouped(self) -> None:
        result = storefront_schema_processor(
            None,
            "info",
            {"event": "Rejecting mutation", "operation": "remove_item", "line_key": "line:a"},
        )

        assert result["cart"] == {"operation": "remove_item", "line_key": "line:a"}

    def test_unknown_fields_go_to_redacted_extra(self) -> None:
        result = storefront_schema_processor(
            None, "info", {"event": "wired", "api_token": "secret", "products": 2}
        )

        assert result["extra"] == {"api_token": "[REDACTED]", "products": 2}
        assert "error" not in result

    def test_service_identity_comes_from_the_instance(self) -> None:
        processor = StorefrontSchemaProcessor(service="shop-kiosk", environment="staging")

        result = processor(None, "info", {"event": "hello"})

        assert (result["service"], result["environment"]) == ("shop-kiosk", "staging")


class TestRendererSelection:
    def test_explicit_json_format_wins(self) -> None:
        assert isinstance(select_renderer("json", "local"), structlog.processors.JSONRenderer)

    def test_deployed_environments_default_to_json(self) -> None:
        assert isinstance(select_renderer("", "production"), structlog.processors.JSONRenderer)

    def test_local_defaults_to_console(self) -> None:
        assert isinstance(select_renderer("", "local"), structlog.dev.ConsoleRenderer)
