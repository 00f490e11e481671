from unittest import mock

import pytest

from astrofy.utils.url import InvalidSlugError
from astrofy.utils.url import blog_post_path
from astrofy.utils.url import page_path
from astrofy.utils.url import page_url


def test_page_path() -> None:
    assert page_path("/blog", "Hello World") == "/blog/hello-world"
    assert page_path("", "  Hello   World!  ") == "/hello-world"


@pytest.mark.parametrize("title", ["", "   ", "?!", "日本語"])
def test_page_path__empty_slug(title: str) -> None:
    with pytest.raises(InvalidSlugError):
        page_path("/blog", title)


def test_blog_post_path() -> None:
    with mock.patch("astrofy.utils.url.BLOG_PATH", "/posts"):
        assert blog_post_path("My First Post") == "/posts/my-first-post"


@pytest.mark.parametrize(
    "path,expected",
    [
        ("/blog/hello-world", "https://example.com/blog/hello-world"),
        ("blog/hello-world", "https://example.com/blog/hello-world"),
        ("/", "https://example.com/"),
    ],
)
def test_page_url(path: str, expected: str) -> None:
    with mock.patch("astrofy.utils.url.BASE_URL", "https://example.com"):
        assert page_url(path) == expected
