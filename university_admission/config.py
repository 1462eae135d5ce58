# university_admission/config.py
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_PROJECT_ROOT = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=_PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        populate_by_name=True,
        extra="ignore",
    )

    # environment
    env: str = Field("dev", alias="ENV")

    # input and output locations, relative to the working directory
    applicants_file: Path = Field(Path("applicants.txt"), alias="APPLICANTS_FILE")
    output_dir: Path = Field(Path("."), alias="OUTPUT_DIR")

    # one wave per preference rank
    wave_count: int = Field(3, alias="WAVE_COUNT", ge=1)

    # optional PDF summary; no report is written when unset
    report_path: Optional[Path] = Field(None, alias="REPORT_PATH")

    @field_validator("applicants_file", "output_dir", "report_path")
    @classmethod
    def _resolve_path(cls, value: Optional[Path]) -> Optional[Path]:
        return value.expanduser().resolve() if value is not None else value


settings = Settings()
