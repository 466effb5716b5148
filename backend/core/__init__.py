# Core module exports. Settings are imported from core.config directly.
from core.logging import (
    api_logger,
    bind_context,
    clear_context,
    config_logger,
    configure_logging,
    engine_logger,
    generate_correlation_id,
    get_logger,
)
