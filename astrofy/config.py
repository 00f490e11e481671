import os
from pathlib import Path
from urllib.parse import urlparse

import pydantic
import tomli
from loguru import logger

from astrofy.utils.version import get_version_commit

ROOT_DIR = Path().parent.resolve()

_CONFIG_FILE = os.getenv("ASTROFY_CONFIG_FILE", "site.toml")

VERSION_COMMIT = get_version_commit()

VERSION = f"0.1.0+{VERSION_COMMIT}"

DEFAULT_SITE = "https://astrofy-template.netlify.app"
DEFAULT_INTEGRATIONS = ["mdx", "sitemap", "lottie", "tailwind"]


class Config(pydantic.BaseModel):
    site: str = DEFAULT_SITE
    integrations: list[str] = DEFAULT_INTEGRATIONS
    blog_path: str = "/blog"
    debug: bool = False

    @pydantic.field_validator("site")
    @classmethod
    def _check_site(cls, value: str) -> str:
        parsed = urlparse(value)
        if parsed.scheme not in ["http", "https"] or not parsed.hostname:
            raise ValueError(f"{value} is not an absolute http(s) URL")
        return value.rstrip("/")

    @pydantic.field_validator("blog_path")
    @classmethod
    def _check_section_path(cls, value: str) -> str:
        if not value.startswith("/"):
            raise ValueError(f"{value} must start with /")
        return value.rstrip("/")


def load_config(path: Path | None = None) -> Config:
    config_path = path or ROOT_DIR / "data" / _CONFIG_FILE
    try:
        raw_config = tomli.loads(config_path.read_text())
    except FileNotFoundError:
        logger.warning(f"{config_path} is missing, using the default config")
        return Config()

    logger.debug(f"Loading config from {config_path}")
    return Config.model_validate(raw_config)


CONFIG = load_config()
BASE_URL = CONFIG.site
DEBUG = CONFIG.debug
INTEGRATIONS = CONFIG.integrations
BLOG_PATH = CONFIG.blog_path


def has_integration(name: str) -> bool:
    return name in INTEGRATIONS
