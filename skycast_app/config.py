"""Configuration helpers for the Skycast weather engine."""

from dataclasses import dataclass
from pathlib import Path
import os
from typing import Optional

DEFAULT_GEMINI_MODEL = "gemini-2.0-flash"
DEFAULT_FAVORITES_PATH = "data/favorites.json"


@dataclass
class SkycastConfig:
    """Configuration values for the Skycast app.

    Only collaborators read this object. The engine functions in ``logic`` take
    every setting they need (unit preference, day count, random source) as an
    explicit argument.
    """

    openweather_api_key: Optional[str] = None
    gemini_api_key: Optional[str] = None
    gemini_model: str = DEFAULT_GEMINI_MODEL
    metric: bool = True
    forecast_days: int = 5
    request_timeout_seconds: float = 10.0
    favorites_path: str = DEFAULT_FAVORITES_PATH
    random_seed: Optional[int] = None
    environment: str | None = None

    @classmethod
    def from_env(cls) -> "SkycastConfig":
        """Build a config from environment variables or an environment YAML file.

        Environment specific YAML lives in ``config/environments/<env>.yaml`` by
        default and is merged with environment variables so that API keys can be
        injected by the runtime environment.
        """

        env_name = os.getenv("APP_ENV")
        config_path = os.getenv("APP_CONFIG_PATH")
        config_dir = Path(os.getenv("SKYCAST_CONFIG_DIR", "config/environments"))
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

        units = str(get_value("units", "metric") or "metric").lower()
        seed = get_value("random_seed")

        return cls(
            openweather_api_key=get_value("openweather_api_key"),
            gemini_api_key=get_value("gemini_api_key"),
            gemini_model=str(get_value("gemini_model", DEFAULT_GEMINI_MODEL) or DEFAULT_GEMINI_MODEL),
            metric=units != "imperial",
            forecast_days=int(get_value("forecast_days", "5") or 5),
            request_timeout_seconds=float(get_value("request_timeout_seconds", "10") or 10),
            favorites_path=str(get_value("favorites_path", DEFAULT_FAVORITES_PATH) or DEFAULT_FAVORITES_PATH),
            random_seed=int(seed) if seed not in (None, "") else None,
            environment=env_name,
        )

    @staticmethod
    def _load_yaml_config(path: Path) -> dict:
        """Parse a flat ``key: value`` config file."""

        config: dict[str, str] = {}
        for line in path.read_text().splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            if ":" not in stripped:
                continue
            key, raw_value = stripped.split(":", 1)
            value = raw_value.strip()
            if (value.startswith("\"") and value.endswith("\"")) or (
                value.startswith("'") and value.endswith("'")
            ):
                value = value[1:-1]
            config[key.strip()] = value
        return config
