"""Configuration helpers for the cycling outfit advisor."""

from dataclasses import dataclass
from pathlib import Path
import logging
import os
from typing import Optional

from logic.validation import MAX_WORKOUT_DURATION, MIN_WORKOUT_DURATION
from models.taxonomy import WorkoutIntensity

DEFAULT_SERVICE_NAME = "cycling-outfit-advisor"
DEFAULT_WORKOUT_DURATION = 60
DEFAULT_LOG_LEVEL = "INFO"

LOGGER = logging.getLogger(__name__)


@dataclass
class RideAppConfig:
    """Configuration values for the advisor app.

    Defaults here fill in workout fields a caller leaves out of a request. They
    never change the decision thresholds, which are fixed in ``logic``.
    """

    service_name: str = DEFAULT_SERVICE_NAME
    environment: Optional[str] = None
    log_level: str = DEFAULT_LOG_LEVEL
    default_workout_intensity: WorkoutIntensity = WorkoutIntensity.RECREATIONAL
    default_workout_duration: int = DEFAULT_WORKOUT_DURATION

    @classmethod
    def from_env(cls) -> "RideAppConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default and environment variables take precedence over it.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("RIDE_CONFIG_DIR", "config/environments"))
        yaml_config: dict = {}

        if config_path:
            path = Path(config_path)
        elif env_name:
            path = config_dir / f"{env_name}.yaml"
        else:
            path = None

        if path and path.exists():
            yaml_config = cls._load_yaml_config(path)

        def get_value(key: str, default: Optional[str] = None) -> Optional[str]:
            env_key = key.upper()
            return os.getenv(env_key, yaml_config.get(key, default))

        service_name = get_value("service_name", DEFAULT_SERVICE_NAME)
        log_level = cls._parse_log_level(get_value("log_level"))
        intensity = cls._parse_intensity(get_value("default_workout_intensity"))
        duration = cls._parse_duration(get_value("default_workout_duration"))

        return cls(
            service_name=str(service_name or DEFAULT_SERVICE_NAME),
            environment=env_name,
            log_level=log_level,
            default_workout_intensity=intensity,
            default_workout_duration=duration,
        )

    @staticmethod
    def _parse_intensity(raw: Optional[str]) -> WorkoutIntensity:
        if not raw:
            return WorkoutIntensity.RECREATIONAL
        try:
            return WorkoutIntensity.parse(raw)
        except ValueError:
            LOGGER.warning("Ignoring invalid default workout intensity", extra={"value": raw})
            return WorkoutIntensity.RECREATIONAL

    @staticmethod
    def _parse_log_level(raw: Optional[str]) -> str:
        if not raw:
            return DEFAULT_LOG_LEVEL
        level = raw.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            LOGGER.warning("Ignoring invalid log level", extra={"value": raw})
            return DEFAULT_LOG_LEVEL
        return level

    @staticmethod
    def _parse_duration(raw: Optional[str]) -> int:
        if not raw:
            return DEFAULT_WORKOUT_DURATION
        try:
            duration = int(raw)
        except ValueError:
            LOGGER.warning("Ignoring invalid default workout duration", extra={"value": raw})
            return DEFAULT_WORKOUT_DURATION
        if not MIN_WORKOUT_DURATION <= duration <= MAX_WORKOUT_DURATION:
            LOGGER.warning(
                "Ignoring out of range default workout duration",
                extra={"value": duration, "minimum": MIN_WORKOUT_DURATION, "maximum": MAX_WORKOUT_DURATION},
            )
            return DEFAULT_WORKOUT_DURATION
        return duration

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Read flat ``key: value`` lines; comments, blanks and nested keys are skipped."""

        entries: dict[str, str] = {}
        for raw_line in path.read_text(encoding="utf-8").splitlines():
            line = raw_line.split("#", 1)[0].strip()
            key, sep, value = line.partition(":")
            if not sep or not key.strip() or raw_line[:1].isspace():
                continue
            entries[key.strip()] = value.strip().strip("\"'")
        return entries
