from pathlib import Path
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class DatabaseSettings(BaseSettings):
    database_url: str = Field("sqlite:///./category_tree.db")
    pool_size: int = Field(10)
    max_overflow: int = Field(20)
    pool_timeout: int = Field(30)  # seconds
    pool_recycle: int = Field(1800)  # seconds
    pool_pre_ping: bool = Field(True)
    echo: bool = Field(False)

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


class AppSettings(BaseSettings):
    debug: bool = Field(False)
    project_name: str = Field("Category Tree Service")
    api_prefix: str = Field("")
    allowed_hosts: str = Field("http://localhost:3000,http://localhost:8000")
    log_level: str = Field("INFO")
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)

    @classmethod
    def _split_allowed_hosts(cls, v: str) -> List[str]:
        if not v or not v.strip():
            return []
        hosts = []
        for host in v.split(","):
            host = host.strip()
            if host.startswith(("http://", "https://")):
                hosts.append(host.rstrip("/"))
        return hosts

    @property
    def allowed_hosts_list(self) -> List[str]:
        """Convert allowed_hosts string to list."""
        return self._split_allowed_hosts(self.allowed_hosts)

    model_config = SettingsConfigDict(
        env_prefix="APP_",
        case_sensitive=False,
        env_nested_delimiter="__",
        env_file=str(Path(__file__).parent.parent.parent / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings: AppSettings = AppSettings()

if __name__ == "__main__":
    print(settings.model_dump())
