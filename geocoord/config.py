"""
Configuration for coordinate conversion and batch processing.

Settings can be loaded from a YAML file with a top-level ``geocoord`` section:

    geocoord:
      decimal_precision: 9
      dms_precision: 2
      batch_yield_interval: 10
      pair_split: midpoint
      max_workers: 4
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional
import yaml
import logging

from geocoord.pair_resolver import PairSplitStrategy

logger = logging.getLogger(__name__)

DEFAULT_DECIMAL_PRECISION = 9
DEFAULT_DMS_PRECISION = 2
DEFAULT_BATCH_YIELD_INTERVAL = 10

CONFIG_SECTION = 'geocoord'


@dataclass(frozen=True)
class EngineConfig:
    """Configuration for the conversion engine.

    Attributes:
        decimal_precision: Fixed-point digits for decimal-degree output
        dms_precision: Fractional digits kept for the seconds field of DMS output
        batch_yield_interval: Number of batch items processed between
            cooperative yields to the event loop
        pair_split: How DMS pair text is split into latitude and longitude
        max_workers: Thread count for threaded batches (None lets the
            executor decide)
    """
    decimal_precision: int = DEFAULT_DECIMAL_PRECISION
    dms_precision: int = DEFAULT_DMS_PRECISION
    batch_yield_interval: int = DEFAULT_BATCH_YIELD_INTERVAL
    pair_split: PairSplitStrategy = PairSplitStrategy.MIDPOINT
    max_workers: Optional[int] = None

    @classmethod
    def from_yaml(cls, path: str) -> 'EngineConfig':
        """Load configuration from YAML file.

        Args:
            path: Path to YAML configuration file

        Returns:
            EngineConfig instance loaded from file

        Raises:
            FileNotFoundError: If configuration file does not exist
            ValueError: If configuration file is malformed or contains invalid values
        """
        config_path = Path(path)

        if not config_path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {path}\n"
                f"Please create a configuration file or use get_default_config()"
            )

        try:
            with open(config_path, 'r') as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML configuration file: {e}") from e

        if not data:
            raise ValueError(
                f"Configuration file is empty: {path}\n"
                f"Expected a '{CONFIG_SECTION}' section"
            )

        if CONFIG_SECTION not in data:
            raise ValueError(
                f"Configuration file missing '{CONFIG_SECTION}' section: {path}\n"
                f"Expected structure: {CONFIG_SECTION}:\n  decimal_precision: ...\n  ..."
            )

        logger.debug(f"Loaded configuration from {config_path}")
        return cls.from_dict(data[CONFIG_SECTION])

    @staticmethod
    def _parse_pair_split(value: str) -> PairSplitStrategy:
        try:
            return PairSplitStrategy(value)
        except ValueError:
            valid = [s.value for s in PairSplitStrategy]
            raise ValueError(
                f"Invalid pair_split '{value}'. "
                f"Must be one of: {', '.join(valid)}"
            ) from None

    @staticmethod
    def _parse_int(config: Dict[str, Any], key: str, default: int, minimum: int) -> int:
        value = config.get(key, default)
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"'{key}' must be an integer, got {type(value).__name__}")
        if value < minimum:
            raise ValueError(f"'{key}' must be >= {minimum}, got {value}")
        return value

    @classmethod
    def from_dict(cls, config: dict) -> 'EngineConfig':
        """Create configuration from dictionary.

        Missing keys take their defaults.

        Raises:
            ValueError: If a value has the wrong type or is out of range

        Example:
            >>> config = EngineConfig.from_dict({'dms_precision': 4, 'pair_split': 'direction'})
            >>> config.pair_split
            <PairSplitStrategy.DIRECTION: 'direction'>
        """
        if not isinstance(config, dict):
            raise ValueError(f"Configuration must be a dictionary, got {type(config)}")

        known = {'decimal_precision', 'dms_precision', 'batch_yield_interval',
                 'pair_split', 'max_workers'}
        unknown = sorted(set(config) - known)
        if unknown:
            logger.warning(f"Ignoring unknown configuration keys: {', '.join(unknown)}")

        pair_split = PairSplitStrategy.MIDPOINT
        if 'pair_split' in config:
            pair_split = cls._parse_pair_split(config['pair_split'])

        max_workers = config.get('max_workers')
        if max_workers is not None:
            max_workers = cls._parse_int(config, 'max_workers', 1, 1)

        return cls(
            decimal_precision=cls._parse_int(
                config, 'decimal_precision', DEFAULT_DECIMAL_PRECISION, 0),
            dms_precision=cls._parse_int(
                config, 'dms_precision', DEFAULT_DMS_PRECISION, 0),
            batch_yield_interval=cls._parse_int(
                config, 'batch_yield_interval', DEFAULT_BATCH_YIELD_INTERVAL, 1),
            pair_split=pair_split,
            max_workers=max_workers,
        )

    def to_dict(self) -> dict:
        """Convert configuration to a dictionary suitable for YAML serialization."""
        result = {
            'decimal_precision': self.decimal_precision,
            'dms_precision': self.dms_precision,
            'batch_yield_interval': self.batch_yield_interval,
            'pair_split': self.pair_split.value,
        }
        if self.max_workers is not None:
            result['max_workers'] = self.max_workers
        return result

    def save_to_yaml(self, path: str) -> None:
        """Save configuration to YAML file, wrapped in the ``geocoord`` section.

        Raises:
            IOError: If file cannot be written
        """
        config_path = Path(path)
        config_path.parent.mkdir(parents=True, exist_ok=True)

        output = {CONFIG_SECTION: self.to_dict()}

        try:
            with open(config_path, 'w') as f:
                yaml.safe_dump(output, f, default_flow_style=False, sort_keys=False)
        except IOError as e:
            raise IOError(f"Failed to write configuration file: {e}") from e


def get_default_config() -> EngineConfig:
    """Return the default configuration (decimal precision 9, DMS precision 2,
    yield every 10 batch items, midpoint pair split)."""
    return EngineConfig()
