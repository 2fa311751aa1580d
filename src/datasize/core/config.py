from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

from datasize.core.locales import LocaleLike
from datasize.core.logging import get_logger
from datasize.core.types import NaturalPolicy, ParsePolicy

log = get_logger(__name__)

DEFAULT_PRECISION = 2


@dataclass
class FormatConfig:
    """
    Configuration for formatting data sizes.

    Attributes:
        locale: Locale for the number part. None uses the process default,
            looked up again on every format call.
        precision: Maximum number of fraction digits. None or a negative
            value disables rounding and shows every digit.
        natural: If set, sizes are converted to their natural unit with this
            policy before being formatted.
    """

    locale: Optional[LocaleLike] = None
    precision: Optional[int] = DEFAULT_PRECISION
    natural: Optional[NaturalPolicy] = None

    @classmethod
    def create_default(cls) -> "FormatConfig":
        """Create a configuration with default values."""
        return cls()

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "FormatConfig":
        """
        Create a configuration from a dictionary.

        Unknown keys are ignored. The natural policy may be given by name.

        Args:
            config_dict: Dictionary with configuration values

        Returns:
            A new FormatConfig instance
        """
        config = cls.create_default()
        _apply(config, config_dict)

        if isinstance(config.natural, str):
            config.natural = NaturalPolicy.from_string(config.natural)

        return config

    @property
    def unlimited_precision(self) -> bool:
        """Whether rounding is disabled."""
        return self.precision is None or self.precision < 0


@dataclass
class ParseConfig:
    """
    Configuration for parsing data sizes.

    Attributes:
        locale: Locale for the number part. None uses the process default,
            looked up again on every parse call.
        policy: Lenient (case insensitive, any whitespace) or strict parsing
    """

    locale: Optional[LocaleLike] = None
    policy: ParsePolicy = ParsePolicy.LENIENT

    @classmethod
    def create_default(cls) -> "ParseConfig":
        """Create a configuration with default values."""
        return cls()

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> "ParseConfig":
        """
        Create a configuration from a dictionary.

        Unknown keys are ignored. The policy may be given by name.

        Args:
            config_dict: Dictionary with configuration values

        Returns:
            A new ParseConfig instance
        """
        config = cls.create_default()
        _apply(config, config_dict)

        if isinstance(config.policy, str):
            config.policy = ParsePolicy.from_string(config.policy)

        return config


def _apply(config, config_dict: Dict[str, Any]):
    known = {f.name for f in fields(config)}
    for key, value in config_dict.items():
        if key in known:
            setattr(config, key, value)
        else:
            log.debug(f"Ignoring unknown {type(config).__name__} key: {key}")


class FormatConfigBuilder:
    """
    Builder for FormatConfig objects.

    Provides a fluent interface for constructing a FormatConfig with a chain
    of method calls.
    """

    def __init__(self):
        """Initialize a new FormatConfigBuilder with default values."""
        self._config = FormatConfig.create_default()

    def locale(self, locale: Optional[LocaleLike]) -> "FormatConfigBuilder":
        """Set the locale."""
        self._config.locale = locale
        return self

    def precision(self, precision: Optional[int]) -> "FormatConfigBuilder":
        """Set the maximum number of fraction digits."""
        self._config.precision = precision
        return self

    def unlimited_precision(self) -> "FormatConfigBuilder":
        """Disable rounding."""
        self._config.precision = None
        return self

    def natural(self, policy: Optional[NaturalPolicy]) -> "FormatConfigBuilder":
        """Set the natural unit policy applied before formatting."""
        self._config.natural = policy
        return self

    def build(self) -> FormatConfig:
        """Build and return a FormatConfig object."""
        return self._config


class ParseConfigBuilder:
    """Builder for ParseConfig objects."""

    def __init__(self):
        self._config = ParseConfig.create_default()

    def locale(self, locale: Optional[LocaleLike]) -> "ParseConfigBuilder":
        """Set the locale."""
        self._config.locale = locale
        return self

    def policy(self, policy: ParsePolicy) -> "ParseConfigBuilder":
        """Set the parse policy."""
        self._config.policy = policy
        return self

    def lenient(self) -> "ParseConfigBuilder":
        """Use lenient parsing."""
        return self.policy(ParsePolicy.LENIENT)

    def strict(self) -> "ParseConfigBuilder":
        """Use strict parsing."""
        return self.policy(ParsePolicy.STRICT)

    def build(self) -> ParseConfig:
        """Build and return a ParseConfig object."""
        return self._config
