from loguru import logger

from astrofy.config import BASE_URL
from astrofy.config import BLOG_PATH
from astrofy.utils.text import slugify


class InvalidSlugError(ValueError):
    pass


def page_path(section_path: str, title: str) -> str:
    slug = slugify(title)
    if not slug:
        raise InvalidSlugError(f'"{title}" does not contain any slug character')

    logger.debug(f"{title=} -> {slug=}")
    return f"{section_path}/{slug}"


def blog_post_path(title: str) -> str:
    return page_path(BLOG_PATH, title)


def page_url(path: str) -> str:
    if not path.startswith("/"):
        path = "/" + path
    return BASE_URL + path
