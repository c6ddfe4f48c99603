from .logger_factory_service import configure_logging
from .redaction_service import redact_dict, redact_text
from .tracing_setup import configure_tracing

__all__ = [
    "configure_logging",
    "configure_tracing",
    "redact_dict",
    "redact_text",
]
