from pathlib import Path
from typing import Any

import jinja2
from loguru import logger

from astrofy.config import BASE_URL
from astrofy.config import DEBUG
from astrofy.config import INTEGRATIONS
from astrofy.config import ROOT_DIR
from astrofy.config import VERSION
from astrofy.log import configure_logging
from astrofy.utils.text import slugify
from astrofy.utils.url import blog_post_path
from astrofy.utils.url import page_url

configure_logging(DEBUG)

_templates = jinja2.Environment(
    loader=jinja2.ChoiceLoader(
        [
            # Templates in data/ override the packaged ones
            jinja2.FileSystemLoader(ROOT_DIR / "data" / "templates"),
            jinja2.FileSystemLoader(Path(__file__).parent / "templates"),
        ]
    ),
    autoescape=jinja2.select_autoescape(["html", "xml"]),
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_template(template_name: str, context: dict[str, Any]) -> str:
    logger.debug(f"Rendering {template_name}")
    return _templates.get_template(template_name).render(context)


def render_string(source: str, **context: Any) -> str:
    return _templates.from_string(source).render(context)


_templates.globals["BASE_URL"] = BASE_URL
_templates.globals["VERSION"] = VERSION
_templates.globals["INTEGRATIONS"] = INTEGRATIONS

_templates.filters["slugify"] = slugify
_templates.filters["blog_post_path"] = blog_post_path
_templates.filters["page_url"] = page_url
