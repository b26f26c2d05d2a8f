from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
import json
from typing import Any, Dict

import yaml


@dataclass
class LoggingConfig:
    level: str = "INFO"
    log_dir: str = "logs"
    filename: str = "examcore.log"
    structured: bool = False

    def file_path(self) -> Path:
        return Path(self.log_dir) / self.filename


@dataclass
class ReviewConfig:
    segment_size: int = 50      # questions per exam segment
    pass_percentage: int = 70   # score at or above this is shown as a pass

    def __post_init__(self) -> None:
        if self.segment_size <= 0:
            raise ValueError(f"segment_size must be positive, got {self.segment_size}")
        if not 0 <= self.pass_percentage <= 100:
            raise ValueError(f"pass_percentage must be in 0-100, got {self.pass_percentage}")


@dataclass
class AppConfig:
    logging: LoggingConfig = None  # type: ignore[assignment]
    review: ReviewConfig = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.logging is None:
            self.logging = LoggingConfig()
        if self.review is None:
            self.review = ReviewConfig()

    @staticmethod
    def from_dict(payload: Dict[str, Any]) -> "AppConfig":
        return AppConfig(
            logging=LoggingConfig(**(payload.get("logging") or {})),
            review=ReviewConfig(**(payload.get("review") or {})),
        )

    @staticmethod
    def from_json(path: str | Path) -> "AppConfig":
        with open(path, "r", encoding="utf-8") as f:
            payload = json.load(f)
        return AppConfig.from_dict(payload)

    @staticmethod
    def from_yaml(path: str | Path) -> "AppConfig":
        with open(path, "r", encoding="utf-8") as f:
            payload = yaml.safe_load(f) or {}
        return AppConfig.from_dict(payload)

    @staticmethod
    def load(path: str | Path) -> "AppConfig":
        if Path(path).suffix.lower() in {".yaml", ".yml"}:
            return AppConfig.from_yaml(path)
        return AppConfig.from_json(path)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "logging": asdict(self.logging),
            "review": asdict(self.review),
        }

    def to_json(self, path: str | Path) -> None:
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        with open(p, "w", encoding="utf-8") as f:
            json.dump(self.to_dict(), f, indent=2, ensure_ascii=False)

    def to_yaml(self, path: str | Path) -> None:
        p = Path(path)
        p.parent.mkdir(parents=True, exist_ok=True)
        with open(p, "w", encoding="utf-8") as f:
            yaml.safe_dump(self.to_dict(), f, sort_keys=False)


# Provide safe defaults via a factory function for top-level config
def default_app_config() -> AppConfig:
    return AppConfig(
        logging=LoggingConfig(),
        review=ReviewConfig(),
    )
