# Core module exports
from core.logging import (
    configure_logging,
    get_logger,
    bind_context,
    clear_context,
    unbind_context,
    generate_correlation_id,
    api_logger,
    locale_logger,
)
