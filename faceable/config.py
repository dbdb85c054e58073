"""
Configuration management for face gesture drawing control.
"""
import logging
import yaml
from pathlib import Path
from typing import Optional, Dict, Any
from dataclasses import dataclass, field


logger = logging.getLogger(__name__)

# Default config file in project root
DEFAULT_CONFIG_PATH = Path(__file__).parent.parent / "config.default.yaml"


class ConfigError(ValueError):
    """Raised when a configuration value is outside its valid range."""


@dataclass
class CameraConfig:
    """Camera configuration settings."""
    index: int = 0
    width: int = 640
    height: int = 480
    fps: int = 30


@dataclass
class FaceLandmarkerConfig:
    """MediaPipe FaceLandmarker configuration settings."""
    model_path: str = "models/face_landmarker.task"
    num_faces: int = 1
    min_detection_confidence: float = 0.5
    min_tracking_confidence: float = 0.5
    nose_tip_index: int = 1


@dataclass
class GesturesConfig:
    """Expression thresholds and debounce window."""
    smile_threshold: float = 0.8
    eyebrow_raise_threshold: float = 0.75
    mouth_open_threshold: float = 0.3
    debounce_ms: float = 500.0


@dataclass
class CursorConfig:
    """Cursor mapping, smoothing and head stability settings."""
    movement_multiplier: float = 1.5
    smoothing_factor: float = 0.4  # weight of the previous position
    head_movement_threshold: float = 0.05  # normalized distance per frame
    stability_delay_ms: float = 200.0


@dataclass
class DisplayConfig:
    """Display configuration settings."""
    show_landmarks: bool = False
    show_cursor: bool = True
    window_name: str = "Faceable"


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "INFO"


@dataclass
class Cfg:
    """Main configuration class."""
    camera: CameraConfig = field(default_factory=CameraConfig)
    face_landmarker: FaceLandmarkerConfig = field(default_factory=FaceLandmarkerConfig)
    gestures: GesturesConfig = field(default_factory=GesturesConfig)
    cursor: CursorConfig = field(default_factory=CursorConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: Optional[str] = None) -> Cfg:
    """
    Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses config.default.yaml, or the
            built-in defaults when that file is not installed

    Returns:
        Configuration object with all settings

    Raises:
        FileNotFoundError: If the config file does not exist
        ConfigError: If a value is outside its valid range
    """
    if path is None:
        if not DEFAULT_CONFIG_PATH.exists():
            logger.info(f"No config file at {DEFAULT_CONFIG_PATH}, using built-in defaults")
            return Cfg()
        path = DEFAULT_CONFIG_PATH

    config_path = Path(path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        data = yaml.safe_load(f) or {}

    cfg = _dict_to_config(data)
    validate_config(cfg)
    return cfg


def _section(data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"Config section '{name}' must be a mapping")
    return section


def _dict_to_config(data: Dict[str, Any]) -> Cfg:
    """Convert dictionary to configuration object, keeping defaults for missing keys."""
    try:
        return Cfg(
            camera=CameraConfig(**_section(data, 'camera')),
            face_landmarker=FaceLandmarkerConfig(**_section(data, 'face_landmarker')),
            gestures=GesturesConfig(**_section(data, 'gestures')),
            cursor=CursorConfig(**_section(data, 'cursor')),
            display=DisplayConfig(**_section(data, 'display')),
            logging=LoggingConfig(**_section(data, 'logging')),
        )
    except TypeError as e:
        # Unknown key in one of the sections
        raise ConfigError(f"Invalid config: {e}") from e


def _require_number(section: str, name: str, value: Any) -> None:
    # bool is an int subclass but never a valid number here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigError(f"{section}.{name} must be a number, got {value!r}")


def validate_config(cfg: Cfg) -> None:
    """Check value types and ranges the gesture engine relies on."""
    g = cfg.gestures
    for name in ('smile_threshold', 'eyebrow_raise_threshold', 'mouth_open_threshold', 'debounce_ms'):
        _require_number('gestures', name, getattr(g, name))
    for name in ('smile_threshold', 'eyebrow_raise_threshold', 'mouth_open_threshold'):
        value = getattr(g, name)
        if not 0.0 <= value <= 1.0:
            raise ConfigError(f"gestures.{name} must be in [0, 1], got {value}")
    if g.debounce_ms < 0:
        raise ConfigError(f"gestures.debounce_ms must be >= 0, got {g.debounce_ms}")

    c = cfg.cursor
    for name in ('movement_multiplier', 'smoothing_factor', 'head_movement_threshold', 'stability_delay_ms'):
        _require_number('cursor', name, getattr(c, name))
    if c.movement_multiplier < 0:
        raise ConfigError(f"cursor.movement_multiplier must be >= 0, got {c.movement_multiplier}")
    if not 0.0 <= c.smoothing_factor < 1.0:
        raise ConfigError(f"cursor.smoothing_factor must be in [0, 1), got {c.smoothing_factor}")
    if c.head_movement_threshold < 0:
        raise ConfigError(f"cursor.head_movement_threshold must be >= 0, got {c.head_movement_threshold}")
    if c.stability_delay_ms < 0:
        raise ConfigError(f"cursor.stability_delay_ms must be >= 0, got {c.stability_delay_ms}")

    if not isinstance(cfg.logging.level, str):
        raise ConfigError(f"logging.level must be a level name, got {cfg.logging.level!r}")
