from .setup import LoggingConfig, configure_from_settings, get_logger, is_configured, setup_logging
