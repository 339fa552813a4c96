"""SDK-level errors."""
from aem_headless.core.errors import HeadlessError


class ConfigError(HeadlessError):
    """Configuration resolution error."""
