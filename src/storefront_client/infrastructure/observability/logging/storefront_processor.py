"""Storefront log schema processor for structlog.

Reshapes the flat event_dict into nested blocks:
    processing  processing_status / processing_duration_ms / processing_retries
    error       error_type / error_code / error_details / error_retryable
    context     context_endpoint / context_method (one storefront API call)
    cart        operation / line_key / line_count / fetch_seq / pending_operation
    metadata    source_system / tags
Anything left over lands in a redacted ``extra`` block.
"""

from __future__ import annotations

from typing import Any

from opentelemetry import trace

from storefront_client.infrastructure.observability.redaction_service import redact_value

_CART_FIELDS = ("operation", "line_key", "line_count", "fetch_seq", "pending_operation")


def _build_processing(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    status = event_dict.pop("processing_status", None)
    if status is None:
        return None
    return {
        "status": status,
        "duration_ms": event_dict.pop("processing_duration_ms", None),
        "retries": event_dict.pop("processing_retries", None),
    }


def _build_error(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    """Extract error block. Returns None if no error_type present."""
    error_type = event_dict.pop("error_type", None)
    if error_type is None:
        return None
    return {
        "type": error_type,
        "code": event_dict.pop("error_code", None),
        "details": event_dict.pop("error_details", None),
        "retryable": event_dict.pop("error_retryable", False),
    }


def _build_context(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    endpoint = event_dict.pop("context_endpoint", None)
    method = event_dict.pop("context_method", None)
    if endpoint is None and method is None:
        return None
    return {"endpoint": endpoint, "method": method}


def _build_cart(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    block = {name: event_dict.pop(name) for name in _CART_FIELDS if name in event_dict}
    return block or None


def _build_metadata(event_dict: dict[str, Any]) -> dict[str, Any] | None:
    source = event_dict.pop("source_system", None)
    tags = event_dict.pop("tags", None)
    if source is None and tags is None:
        return None
    return {"source_system": source, "tags": tags}


def _current_span_ids() -> tuple[str | None, str | None]:
    span = trace.get_current_span()
    if not span.is_recording():
        return None, None
    ctx = span.get_span_context()
    return format(ctx.trace_id, "032x"), format(ctx.span_id, "016x")


class StorefrontSchemaProcessor:
    """Structlog processor stamping every event with the client's service identity."""

    def __init__(self, service: str = "storefront-client", environment: str = "local") -> None:
        self.service = service
        self.environment = environment

    def __call__(
        self,
        logger: Any,  # noqa: ARG002
        method_name: str,  # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        trace_id, span_id = _current_span_ids()
        result: dict[str, Any] = {
            "timestamp": event_dict.pop("timestamp", None),
            "level": event_dict.pop("level", "info"),
            "service": self.service,
            "environment": self.environment,
            "trace_id": trace_id or event_dict.pop("trace_id", None),
            "span_id": span_id or event_dict.pop("span_id", None),
            "message": event_dict.pop("event", ""),
        }
        event_dict.pop("trace_id", None)
        event_dict.pop("span_id", None)

        for name, build in (
            ("processing", _build_processing),
            ("error", _build_error),
            ("context", _build_context),
            ("cart", _build_cart),
            ("metadata", _build_metadata),
        ):
            block = build(event_dict)
            if block is not None:
                result[name] = block

        if event_dict:
            result["extra"] = redact_value(dict(event_dict))
        return result


storefront_schema_processor = StorefrontSchemaProcessor()
