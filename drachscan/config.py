"""
Configuration for drachscan runs.

Values come from a YAML file, command-line options, or both; options given on
the command line take precedence.
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from .core.masking import DEFAULT_MARGIN, DEFAULT_MAX_ATTEMPTS
from .core.neighbors import DEFAULT_FLANK_LENGTH
from .exceptions import ConfigError


CONFIG_TEMPLATE = '''# drachscan configuration template
# Edit this file and run:
#   drachscan scan --config <this file> --src <fasta> --out-dir <dir>
# The input file and output directory are always given on the command line.

# Annotate each flank block with the motif and its position
verbose: false

# Bases reported on each side of a motif
flank_length: 15

# Bases around a neighbouring motif considered when masking it
mask_margin: 5

# Redraws allowed before masking a motif gives up
max_mask_attempts: 10000

# Also write motif_summary.tsv with every occurrence
write_summary: true

# Seed for the masking random generator (omit for a different fill each run)
# seed: 42
'''


@dataclass
class ScanConfig:
    """Full scan configuration."""
    input_path: Optional[Path] = None
    output_dir: Optional[Path] = None
    verbose: bool = False

    # Flank extraction
    flank_length: int = DEFAULT_FLANK_LENGTH
    mask_margin: int = DEFAULT_MARGIN
    max_mask_attempts: int = DEFAULT_MAX_ATTEMPTS

    # Output options
    write_summary: bool = True

    # Masking randomness
    seed: Optional[int] = None

    def __post_init__(self):
        if self.input_path is not None:
            self.input_path = Path(self.input_path)
        if self.output_dir is not None:
            self.output_dir = Path(self.output_dir)

    def validate(self) -> 'ScanConfig':
        """Check values and return self.

        Raises:
            ConfigError: If a required path is missing or a value is out of range
        """
        if self.input_path is None:
            raise ConfigError("Missing input path")
        if self.output_dir is None:
            raise ConfigError("Missing output directory")
        for name in ('flank_length', 'mask_margin', 'max_mask_attempts'):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ConfigError(f"{name} must be an integer, got {value!r}")
        if self.flank_length < 0:
            raise ConfigError(f"flank_length must be >= 0, got {self.flank_length}")
        if self.mask_margin < 0:
            raise ConfigError(f"mask_margin must be >= 0, got {self.mask_margin}")
        if self.max_mask_attempts <= 0:
            raise ConfigError(f"max_mask_attempts must be > 0, got {self.max_mask_attempts}")
        return self

    def merge(self, **overrides: Any) -> 'ScanConfig':
        """Return a copy with every non-None override applied."""
        values = {f.name: getattr(self, f.name) for f in fields(self)}
        values.update({k: v for k, v in overrides.items() if v is not None})
        return ScanConfig(**values)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ScanConfig':
        """Create from dictionary, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration key(s): {', '.join(unknown)}")
        return cls(**data)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> 'ScanConfig':
        """Load configuration from YAML file."""
        path = Path(path)
        try:
            with open(path) as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must hold a mapping")
        return cls.from_dict(data)


def write_config_template(path: Union[str, Path]) -> Path:
    """Write the commented configuration template."""
    path = Path(path)
    with open(path, 'w') as f:
        f.write(CONFIG_TEMPLATE)
    return path
