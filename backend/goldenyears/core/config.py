from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_env: str = Field(default="dev", alias="APP_ENV")
    app_name: str = Field(default="Golden Years Portfolio", alias="APP_NAME")
    api_prefix: str = Field(default="/api", alias="API_PREFIX")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    cors_origins: str = Field(
        default="http://localhost:3000,http://127.0.0.1:3000",
        alias="CORS_ORIGINS",
    )
    cors_allow_origin_regex: str = Field(
        default=r"^https?://(localhost|127\.0\.0\.1)(:\d+)?$",
        alias="CORS_ALLOW_ORIGIN_REGEX",
    )

    chart_width: int = Field(default=800, ge=100, le=4000, alias="CHART_WIDTH")
    chart_height: int = Field(default=450, ge=100, le=3000, alias="CHART_HEIGHT")
    chart_dpi: int = Field(default=100, ge=50, le=300, alias="CHART_DPI")
    chart_price_padding: float = Field(default=0.10, ge=0.0, le=1.0, alias="CHART_PRICE_PADDING")
    chart_volume_headroom: float = Field(default=1.5, ge=1.0, le=5.0, alias="CHART_VOLUME_HEADROOM")
    chart_tick_target: int = Field(default=10, ge=1, le=50, alias="CHART_TICK_TARGET")
    chart_body_ratio: float = Field(default=0.7, gt=0.0, le=1.0, alias="CHART_BODY_RATIO")
    chart_marker_radius: float = Field(default=8.0, gt=0.0, alias="CHART_MARKER_RADIUS")
    chart_locale: Literal["en", "ko"] = Field(default="en", alias="CHART_LOCALE")

    # Theme colors for the PNG renderer and the JSON payload.
    chart_bullish_color: str = Field(default="#26a69a", alias="CHART_BULLISH_COLOR")
    chart_bearish_color: str = Field(default="#ef5350", alias="CHART_BEARISH_COLOR")
    chart_neutral_color: str = Field(default="#f5b700", alias="CHART_NEUTRAL_COLOR")
    chart_wick_color: str = Field(default="#37474f", alias="CHART_WICK_COLOR")
    chart_volume_color: str = Field(default="#7e57c2", alias="CHART_VOLUME_COLOR")

    @property
    def cors_origins_list(self) -> list[str]:
        raw = self.cors_origins.strip()
        if raw == "*":
            return ["*"]
        return [origin.strip() for origin in raw.split(",") if origin.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
