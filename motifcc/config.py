"""
Configuration schemas for YAML-driven motif clustering runs.

Provides type-safe, validated configuration classes using dataclasses.
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from typing import Optional, Dict, Any
from pathlib import Path
import yaml

from .networks.motifs import MOTIF_SIZES, isoclass_count


@dataclass
class GraphConfig:
    """Input graph configuration."""
    path: str

    def __post_init__(self):
        """Validate graph configuration."""
        if not self.path:
            raise ValueError("Graph path is required")


@dataclass
class MotifConfig:
    """Motif selection by size and isomorphism class id."""
    size: int = 3
    isoclass: int = 3

    def __post_init__(self):
        """Validate motif configuration."""
        if self.size not in MOTIF_SIZES:
            raise ValueError(f"size must be one of {MOTIF_SIZES}, got {self.size}")
        if self.isoclass < 0:
            raise ValueError(f"isoclass must be >= 0, got {self.isoclass}")

    def validate_for(self, directed: bool) -> None:
        """Check the class id against the host graph's directedness."""
        n_classes = isoclass_count(self.size, directed)
        if self.isoclass >= n_classes:
            raise ValueError(
                f"isoclass must be < {n_classes} for "
                f"{'directed' if directed else 'undirected'} size-{self.size} motifs, "
                f"got {self.isoclass}"
            )


@dataclass
class SamplingConfig:
    """Null-model sampling configuration."""
    n_samples: int = 100
    max_trials: int = 200
    seed: Optional[int] = None
    n_jobs: int = 1
    progress: bool = False

    def __post_init__(self):
        """Validate sampling configuration."""
        if self.n_samples < 0:
            raise ValueError(f"n_samples must be >= 0, got {self.n_samples}")
        if self.max_trials < 1:
            raise ValueError(f"max_trials must be >= 1, got {self.max_trials}")
        if self.n_jobs == 0 or self.n_jobs < -1:
            raise ValueError(f"n_jobs must be -1 or >= 1, got {self.n_jobs}")


@dataclass
class OutputConfig:
    """Output configuration."""
    prefix: Optional[str] = None

    @property
    def samples_path(self) -> Optional[Path]:
        return Path(f"{self.prefix}_samples.txt") if self.prefix else None

    @property
    def stats_path(self) -> Optional[Path]:
        return Path(f"{self.prefix}_stats.txt") if self.prefix else None


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"

    def __post_init__(self):
        """Validate logging configuration."""
        valid_level = {"DEBUG", "INFO", "WARNING", "ERROR"}
        self.level = str(self.level).upper()
        if self.level not in valid_level:
            raise ValueError(f"level must be one of {valid_level}, got {self.level}")


@dataclass
class RunConfig:
    """Complete run configuration."""
    graph: GraphConfig
    motif: MotifConfig
    sampling: SamplingConfig = field(default_factory=SamplingConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> RunConfig:
        """Create RunConfig from dictionary (e.g., from YAML)."""
        return cls(
            graph=GraphConfig(**data['graph']),
            motif=MotifConfig(**data['motif']),
            sampling=SamplingConfig(**(data.get('sampling') or {})),
            output=OutputConfig(**(data.get('output') or {})),
            logging=LoggingConfig(**(data.get('logging') or {})),
        )

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> RunConfig:
        """Load configuration from YAML file."""
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Config file not found: {yaml_path}")

        with open(yaml_path, 'r') as f:
            data = yaml.safe_load(f) or {}

        # Validate required sections
        required = ['graph', 'motif']
        for section in required:
            if section not in data:
                raise ValueError(f"Missing required section: {section}")

        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary."""
        return asdict(self)
