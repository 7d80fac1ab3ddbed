from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    storage_dir: Path = Path("./storage")
    sample_rate: int = 44100
    activation_threshold: float = 0.07  # librosa peak-picking delta
    hop_length: int = 512
    amplitude_window_ms: float = 50.0
    amplitude_upper_bound: int = 50

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "NOTEBUILDER_"}

    @property
    def charts_dir(self) -> Path:
        return self.storage_dir / "charts"


settings = Settings()
