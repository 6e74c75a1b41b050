"""admin_table - 统一配置读取与校验.

目标:
- 将环境变量读取、默认值、校验集中到单一入口,避免散落在各模块中重复解析.
- 列表编排层只消费 Settings,不直接读取环境变量.

说明:
- Settings 使用 `pydantic-settings` 的 `BaseSettings` 从环境变量与本地 `.env`(可选)读取配置.
- 分页上下限为开区间,默认 (1, 1000),即请求值 2..999 才会被采用.
"""

from __future__ import annotations

from pathlib import Path

from dotenv import load_dotenv
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from admin_table.constants.table_constants import SortDirection, TableDefaults

PROJECT_ROOT = Path(__file__).resolve().parent.parent
DOTENV_PATH = PROJECT_ROOT / ".env"

DEFAULT_ENVIRONMENT = "development"
APP_NAME = "admin-table"
APP_VERSION = "1.0.0"

DEFAULT_LOG_LEVEL = "INFO"


class Settings(BaseSettings):
    """列表组件运行时设置集合."""

    model_config = SettingsConfigDict(
        env_ignore_empty=True,
        extra="ignore",
        frozen=True,
        str_strip_whitespace=True,
    )

    environment: str = Field(default=DEFAULT_ENVIRONMENT, validation_alias="FLASK_ENV")
    app_name: str = Field(default=APP_NAME, validation_alias="APP_NAME")
    app_version: str = APP_VERSION

    table_default_alias: str = Field(default=TableDefaults.ALIAS, validation_alias="TABLE_DEFAULT_ALIAS")
    table_default_direction: str = Field(
        default=TableDefaults.DIRECTION,
        validation_alias="TABLE_DEFAULT_DIRECTION",
    )
    table_default_page: int = Field(default=TableDefaults.PAGE, validation_alias="TABLE_DEFAULT_PAGE")
    table_default_per_page: int = Field(default=TableDefaults.PER_PAGE, validation_alias="TABLE_DEFAULT_PER_PAGE")
    table_per_page_min: int = Field(default=TableDefaults.PER_PAGE_MIN, validation_alias="TABLE_PER_PAGE_MIN")
    table_per_page_max: int = Field(default=TableDefaults.PER_PAGE_MAX, validation_alias="TABLE_PER_PAGE_MAX")

    log_level: str = Field(default=DEFAULT_LOG_LEVEL, validation_alias="LOG_LEVEL")
    enable_debug_log: bool = Field(default=False, validation_alias="ENABLE_DEBUG_LOG")

    @field_validator("table_default_direction")
    @classmethod
    def _normalize_direction(cls, value: str) -> str:
        return value.lower()

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        return value.upper()

    @property
    def per_page_bounds(self) -> tuple[int, int]:
        """每页数量开区间上下限."""
        return (self.table_per_page_min, self.table_per_page_max)

    @classmethod
    def load(cls) -> Settings:
        """从环境变量加载 Settings 并执行必要校验."""
        load_dotenv(dotenv_path=DOTENV_PATH if DOTENV_PATH.exists() else None, override=False)
        return cls()

    @model_validator(mode="after")
    def _validate(self) -> Settings:
        if not self.table_default_alias:
            raise ValueError("TABLE_DEFAULT_ALIAS 不能为空")
        if self.table_default_direction not in SortDirection.ALL:
            raise ValueError("TABLE_DEFAULT_DIRECTION 必须为 asc 或 desc")
        if self.table_default_page < 1:
            raise ValueError("TABLE_DEFAULT_PAGE 必须 >= 1")
        if self.table_per_page_min >= self.table_per_page_max:
            raise ValueError("TABLE_PER_PAGE_MIN 必须小于 TABLE_PER_PAGE_MAX")
        if not self.table_per_page_min < self.table_default_per_page < self.table_per_page_max:
            raise ValueError("TABLE_DEFAULT_PER_PAGE 必须位于 (TABLE_PER_PAGE_MIN, TABLE_PER_PAGE_MAX) 区间内")
        return self
