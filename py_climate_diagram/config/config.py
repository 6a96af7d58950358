from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings pulled from environment variables."""

    # API Configuration
    api_host: str = Field(default="0.0.0.0", description="API host")
    api_port: int = Field(default=8000, description="API port")
    debug: bool = Field(default=False, description="Enable debug mode")

    # Logging Configuration
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(default="json", description="Logging format (plain or json)")

    # Diagram Configuration
    draw_width: float = Field(default=400.0, gt=0, description="Default width of the chart area")
    draw_height: float = Field(default=600.0, gt=0, description="Default height of the chart area")
    draw_full: bool = Field(default=True, description="Draw areas of months without a curve crossing")
    draw_partial: bool = Field(default=True, description="Draw areas of months where the curves cross")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"


# Instantiate singleton settings object
settings = Settings()
