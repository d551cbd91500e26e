from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMConfig(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
    google_api_key: str | None = None
    gemini_base_url: str = "https://generativelanguage.googleapis.com/v1beta/openai/"
    model_name: str = "gemini-2.0-flash"
    generation_timeout: float = 90.0  # seconds


class ContextConfig(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
    context_budget: int = 15_000  # chars total for LLM context
    max_listed_files: int = 100
    max_key_files: int = 10
    max_file_bytes: int = 50 * 1024
    scan_limit: int = 10_000  # files counted before giving up on an exact total


class CloneConfig(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
    depth: int = 1
    stall_timeout: int = 60  # seconds below low_speed_limit before git aborts
    low_speed_limit: int = 1000  # bytes/s


class ServerConfig(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
    host: str = "127.0.0.1"
    port: int = 8000


class Config(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
    llm: LLMConfig = Field(default_factory=LLMConfig)
    context: ContextConfig = Field(default_factory=ContextConfig)
    clone: CloneConfig = Field(default_factory=CloneConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)


@lru_cache
def get_config() -> Config:
    return Config()


SKIP_DIRS = {
    ".git",
    ".hg",
    ".svn",
    "node_modules",
    "bower_components",
    "vendor",
    "__pycache__",
    ".venv",
    "venv",
    ".tox",
    ".mypy_cache",
    ".pytest_cache",
}

# Priority order matters: earlier names win the context budget.
KEY_FILES = (
    "package.json",
    "composer.json",
    "requirements.txt",
    "Pipfile",
    "Gemfile",
    "pom.xml",
    "build.gradle",
    "Makefile",
    "Dockerfile",
    "docker-compose.yml",
    "README",
    "README.md",
    "README.rst",
)
