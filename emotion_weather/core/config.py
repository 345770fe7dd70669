from dataclasses import dataclass, field
from pathlib import Path
import os


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


def _env_list(name: str, default: str) -> list[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


@dataclass(frozen=True)
class Settings:
    app_name: str = "Emotion Weather"
    api_prefix: str = "/api"
    data_dir: Path = Path(
        os.getenv("EMOTION_WEATHER_DATA_DIR", str(Path(__file__).resolve().parents[2] / "data"))
    )
    log_level: str = os.getenv("EMOTION_WEATHER_LOG_LEVEL", "INFO")
    seed_sample_data: bool = _env_flag("EMOTION_WEATHER_SEED", "true")
    cors_origins: list[str] = field(
        default_factory=lambda: _env_list("EMOTION_WEATHER_CORS_ORIGINS", "*")
    )

    @property
    def activity_log_path(self) -> Path:
        return self.data_dir / "activity.jsonl"


settings = Settings()
