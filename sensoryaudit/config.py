"""Configuration and logging setup."""

import json
import logging
import os
import sys
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from dotenv import load_dotenv

load_dotenv()

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
MAX_MANUSCRIPT_CHARS = 1_000_000


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class AuditConfig:
    """Central configuration for the application."""
    log_level: str = field(default_factory=lambda: os.getenv('SENSORY_AUDIT_LOG_LEVEL', 'INFO'))
    log_file: Optional[str] = field(default_factory=lambda: os.getenv('SENSORY_AUDIT_LOG_FILE') or None)
    output_dir: str = field(default_factory=lambda: os.getenv('SENSORY_AUDIT_OUTPUT_DIR', 'audit_output'))
    strict_resolution: bool = field(default_factory=lambda: _env_flag('SENSORY_AUDIT_STRICT'))
    default_threshold: float = field(
        default_factory=lambda: float(os.getenv('SENSORY_AUDIT_THRESHOLD', '7.5'))
    )
    max_manuscript_chars: int = MAX_MANUSCRIPT_CHARS

    @classmethod
    def from_file(cls, config_file: Union[str, Path]) -> "AuditConfig":
        """Environment defaults overlaid with values from a YAML or JSON file."""
        path = Path(config_file)
        with path.open('r', encoding='utf-8') as f:
            if path.suffix.lower() == '.json':
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
        return cls.from_dict(data or {})

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AuditConfig":
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown configuration keys: {sorted(unknown)}")
        return cls(**data)


def setup_logging(level: str = 'INFO', log_file: Optional[str] = None) -> None:
    """Configure root logging for the CLI."""
    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
    )
