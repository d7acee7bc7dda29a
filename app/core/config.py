from loguru import logger
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings
from enum import Enum

class BaseConfig(BaseSettings):
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name":True
    }

class LogLevel(str, Enum):
    DEBUG = "debug"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"

class CompressionType(str, Enum):
    GZIP = "gz"
    BZIP2 = "bz2"
    ZIP = "zip"

class AppSettings(BaseSettings):
    app_name: str = Field(
        default="Factorial Service",
        min_length=1,
        max_length=100,
        alias="APP_NAME"
    )
    app_port: int = Field(
        default=8989,
        ge=1,
        le=65535,
        alias="APP_PORT"
    )

    app_host: str = Field(default="0.0.0.0", alias="APP_HOST")
    app_reload: bool = Field(default=False, alias="APP_RELOAD")
    app_log_level: LogLevel = Field(default=LogLevel.INFO, alias="APP_LOG_LEVEL")
    log_format: str = Field(default="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}")
    log_file: str = Field(default="logs/app.log")
    log_rotation: str = Field(default="1 day")
    log_compression: CompressionType = Field(default=CompressionType.GZIP)

    # 1000! has 2568 digits, well under the interpreter's int-to-str limit
    max_operand: int = Field(default=1000, ge=0, le=1500, alias="MAX_OPERAND")

    model_config = BaseConfig.model_config


def get_app_settings() -> AppSettings:
    try:
        return AppSettings()
    except ValidationError as e:
        logger.error(f"Error loading settings: {e}")
        logger.error("Using default settings")
        return AppSettings.model_construct()
