"""
Configuration handling for sortlab
"""

import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any

import yaml

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def normalize_log_level(level: str) -> str:
    """Upper-case a level name, rejecting anything logging does not define"""
    name = str(level).upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got '{level}'")
    return name


@dataclass
class DemoConfig:
    """Configuration for the before/after demonstration"""

    algorithm: str = "bubble"

    # Random input: `size` integers drawn from [low, high]
    size: int = 10
    low: int = 1
    high: int = 100

    random_seed: int | None = None

    def __post_init__(self):
        if self.size < 0:
            raise ValueError(f"demo.size must be non-negative, got {self.size}")
        if self.low > self.high:
            raise ValueError(f"demo.low ({self.low}) must not exceed demo.high ({self.high})")


@dataclass
class VerifyConfig:
    """Configuration for property verification of sorters"""

    algorithms: list[str] = field(default_factory=lambda: ["bubble", "insertion"])

    # Random trials
    num_trials: int = 50
    max_size: int = 64
    min_value: int = -1000
    max_value: int = 1000

    # Stability check: number of distinct ranks, small enough to force duplicates
    duplicate_ranks: int = 5

    check_stability: bool = True
    check_idempotence: bool = True
    stop_on_failure: bool = True

    random_seed: int | None = None

    def __post_init__(self):
        if self.num_trials < 0:
            raise ValueError(f"verify.num_trials must be non-negative, got {self.num_trials}")
        if self.max_size < 0:
            raise ValueError(f"verify.max_size must be non-negative, got {self.max_size}")
        if self.min_value > self.max_value:
            raise ValueError(
                f"verify.min_value ({self.min_value}) must not exceed "
                f"verify.max_value ({self.max_value})"
            )
        if self.duplicate_ranks < 1:
            raise ValueError(
                f"verify.duplicate_ranks must be at least 1, got {self.duplicate_ranks}"
            )


@dataclass
class BenchmarkConfig:
    """Configuration for the complexity benchmark"""

    algorithms: list[str] = field(default_factory=lambda: ["bubble", "insertion"])
    sizes: list[int] = field(default_factory=lambda: [16, 32, 64, 128, 256])
    repeats: int = 3  # Timed runs per size on random input
    random_seed: int | None = None

    def __post_init__(self):
        if not self.sizes:
            raise ValueError("benchmark.sizes must list at least one size")
        if any(size < 2 for size in self.sizes):
            raise ValueError(f"benchmark.sizes must all be at least 2, got {self.sizes}")
        if self.repeats < 1:
            raise ValueError(f"benchmark.repeats must be at least 1, got {self.repeats}")


@dataclass
class Config:
    """Master configuration for sortlab"""

    # General settings
    log_level: str = "INFO"
    random_seed: int | None = 42

    # Component configurations
    demo: DemoConfig = field(default_factory=DemoConfig)
    verify: VerifyConfig = field(default_factory=VerifyConfig)
    benchmark: BenchmarkConfig = field(default_factory=BenchmarkConfig)

    def __post_init__(self):
        self.log_level = normalize_log_level(self.log_level)
        self.inherit_seed()

    def inherit_seed(self) -> None:
        """Give nested configs the top-level seed unless they set their own"""
        if self.random_seed is None:
            return
        for section in (self.demo, self.verify, self.benchmark):
            if section.random_seed is None:
                section.random_seed = self.random_seed

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Config":
        """Load configuration from a YAML file"""
        with open(path) as f:
            config_dict = yaml.safe_load(f)
        return cls.from_dict(config_dict or {})

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "Config":
        """Create configuration from a dictionary"""
        config = Config()

        nested_keys = ["demo", "verify", "benchmark"]

        # Update top-level fields
        for key, value in config_dict.items():
            if key not in nested_keys and hasattr(config, key):
                setattr(config, key, value)
        config.log_level = normalize_log_level(config.log_level)

        # Nested configs are rebuilt so their validation runs; a bare `demo:` key arrives as None
        if "demo" in config_dict:
            config.demo = DemoConfig(**(config_dict["demo"] or {}))
        if "verify" in config_dict:
            config.verify = VerifyConfig(**(config_dict["verify"] or {}))
        if "benchmark" in config_dict:
            config.benchmark = BenchmarkConfig(**(config_dict["benchmark"] or {}))

        # Defaults created above already inherited 42; reset those that were not set explicitly
        for key in nested_keys:
            section_dict = config_dict.get(key) or {}
            if "random_seed" not in section_dict:
                getattr(config, key).random_seed = None
        config.inherit_seed()

        return config

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    def to_yaml(self, path: str | Path) -> None:
        """Save configuration to a YAML file"""
        with open(path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False)


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file or use defaults"""
    if config_path and os.path.exists(config_path):
        config = Config.from_yaml(config_path)
    else:
        config = Config()

    # Environment overrides the file
    log_level = os.environ.get("SORTLAB_LOG_LEVEL")
    if log_level:
        config.log_level = normalize_log_level(log_level)

    return config
