from pydantic_settings import BaseSettings
import os


class ParserSettings(BaseSettings):
    # BeautifulSoup tree builder used when parsing raw markup
    FEATURES: str = os.getenv("LINKEXTRACTOR_PARSER", "html.parser")


class LoggingSettings(BaseSettings):
    LEVEL: str = os.getenv("LINKEXTRACTOR_LOG_LEVEL", "INFO")
    JSON: bool = os.getenv("LINKEXTRACTOR_LOG_JSON", "false").lower() in ("1", "true", "yes")


class AppSettings(BaseSettings):
    PARSER: ParserSettings = ParserSettings()
    LOGGING: LoggingSettings = LoggingSettings()

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"


settings = AppSettings()
