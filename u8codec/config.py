"""Settings for the u8codec command line.

The codec functions themselves take no configuration; these values only set
the defaults of ``python -m u8codec``.
"""

from pathlib import Path
from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    if Path('.env').exists():
        model_config = SettingsConfigDict(
            env_prefix='U8CODEC_', env_file='.env', env_file_encoding='utf-8', extra='ignore'
        )
    else:
        model_config = SettingsConfigDict(env_prefix='U8CODEC_')

    # Default decode mode (--strict / --lenient override it)
    strict: bool = True

    # Separator between hex bytes in encode output
    hex_separator: str = ' '

    # Logging level
    logging_level: Literal['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'] = 'WARNING'

    @field_validator('logging_level', mode='before')
    def normalize_level(cls, level: str | None) -> str:
        if not level:
            return 'WARNING'
        return str(level).upper()


CONFIG = Config()
