"""Privacy-safe logging configuration for Switchinator.

By default, sensitive data (bot tokens, Discord user/channel IDs) is redacted.
Set LOG_SENSITIVE=true to enable full logging for debugging.

Message content is NEVER logged regardless of settings.
"""

import logging
import os
import re

import colorlog


def anonymize_id(snowflake) -> str:
    """Anonymize a Discord snowflake ID to its first 4 digits.

    Args:
        snowflake: Discord ID (int or str)

    Returns:
        First 4 characters followed by "..." (e.g., "1234...")
    """
    if not snowflake:
        return "none"
    return f"{str(snowflake)[:4]}..."


def redact_token(token: str) -> str:
    """Redact a bot token, keeping only its last 4 characters."""
    if not token:
        return "none"
    if len(token) <= 8:
        return "***"
    return f"***{token[-4:]}"


class PrivacyFilter(logging.Filter):
    """Logging filter that redacts sensitive data unless LOG_SENSITIVE=true.

    Redacts:
    - Discord bot tokens (three dot-separated base64 segments)
    - Discord snowflake IDs (17-20 digit integers)

    Never redacts (always visible):
    - Log levels, timestamps, module names
    - Endpoint names and URLs
    """

    TOKEN_PATTERN = re.compile(r'[A-Za-z0-9_-]{23,28}\.[A-Za-z0-9_-]{6,7}\.[A-Za-z0-9_-]{27,40}')
    SNOWFLAKE_PATTERN = re.compile(r'(?<![\d.])\d{17,20}(?![\d.])')

    def __init__(self, sensitive_logging: bool = False):
        super().__init__()
        self.sensitive_logging = sensitive_logging

    def filter(self, record: logging.LogRecord) -> bool:
        """Filter log record, redacting sensitive data if needed."""
        if self.sensitive_logging:
            return True

        if hasattr(record, 'msg') and isinstance(record.msg, str):
            msg = record.msg
            msg = self.TOKEN_PATTERN.sub(lambda m: redact_token(m.group(0)), msg)
            msg = self.SNOWFLAKE_PATTERN.sub(lambda m: anonymize_id(m.group(0)), msg)
            record.msg = msg

        return True


def setup_logging(
    level: str = None,
    sensitive: bool = None,
    suppress_noisy: bool = True
) -> None:
    """Configure logging with colorlog and privacy filters.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR). Default from LOG_LEVEL env or INFO.
        sensitive: Enable sensitive data logging. Default from LOG_SENSITIVE env or False.
        suppress_noisy: Suppress noisy library logs (urllib3, discord, etc). Default True.
    """
    if level is None:
        level = os.getenv('LOG_LEVEL', 'INFO').upper()
    if sensitive is None:
        sensitive = os.getenv('LOG_SENSITIVE', 'false').lower() in ('true', '1', 'yes')

    handler = colorlog.StreamHandler()
    handler.setFormatter(colorlog.ColoredFormatter(
        '%(log_color)s%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        log_colors={
            'DEBUG': 'cyan',
            'INFO': 'green',
            'WARNING': 'yellow',
            'ERROR': 'red',
            'CRITICAL': 'red,bg_white',
        }
    ))

    handler.addFilter(PrivacyFilter(sensitive_logging=sensitive))

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level, logging.INFO))

    if suppress_noisy:
        logging.getLogger('urllib3').setLevel(logging.WARNING)
        logging.getLogger('requests').setLevel(logging.WARNING)
        logging.getLogger('discord').setLevel(logging.WARNING)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured: level={level}, sensitive={sensitive}")


def get_logger(name: str) -> logging.Logger:
    """Get a logger with the given name.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
