"""
Configuration handling for the DNA matcher command line.

Settings can be stored in a JSON file and loaded with MatcherConfig.load();
command-line flags override whatever the file sets.
"""

import json
import logging
from dataclasses import asdict, dataclass, fields as dataclass_fields
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

# Defaults
DEFAULT_INPUT_FORMAT = "auto"
DEFAULT_CSV_SEPARATOR = None  # tab for .tsv, comma otherwise
INPUT_FORMATS = ("auto", "text", "fasta")


@dataclass
class MatcherConfig:
    """Options for a dna-match run."""

    # Input
    input_format: str = DEFAULT_INPUT_FORMAT
    ignore_case: bool = False

    # Search
    show_progress: bool = False
    verify: bool = False

    # Output
    output: Optional[str] = None
    csv_output: Optional[str] = None
    csv_separator: Optional[str] = DEFAULT_CSV_SEPARATOR

    def __post_init__(self):
        if self.input_format not in INPUT_FORMATS:
            raise ValueError(
                f"Unknown input format '{self.input_format}'. "
                f"Choose one of: {', '.join(INPUT_FORMATS)}"
            )

    @classmethod
    def load(cls, path: Optional[Union[str, Path]] = None) -> 'MatcherConfig':
        """
        Load configuration from a JSON file.

        Keys that are not MatcherConfig fields are ignored. With no path the
        defaults are returned.
        """
        if path is None:
            return cls()

        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, 'r') as f:
            data = json.load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Expected JSON object in {path}, got {type(data).__name__}")

        valid_fields = {f.name for f in dataclass_fields(cls)}
        unknown = sorted(set(data) - valid_fields)
        if unknown:
            logger.warning("Ignoring unknown config keys in %s: %s", path, ", ".join(unknown))

        return cls(**{k: v for k, v in data.items() if k in valid_fields})

    def save(self, path: Union[str, Path]) -> None:
        """Save configuration to a JSON file."""
        with open(path, 'w') as f:
            json.dump(asdict(self), f, indent=2)

    def override(self, **kwargs) -> 'MatcherConfig':
        """Return a copy with every non-None keyword applied."""
        data = asdict(self)
        data.update({k: v for k, v in kwargs.items() if v is not None})
        return MatcherConfig(**data)
