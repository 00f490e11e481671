from typing import Optional

from invoke import Context  # type: ignore
from invoke import run  # type: ignore
from invoke import task  # type: ignore


@task
def autoformat(ctx):
    # type: (Context) -> None
    run("black .", echo=True)
    run("isort -sl .", echo=True)


@task
def lint(ctx):
    # type: (Context) -> None
    run("black --check .", echo=True)
    run("isort -sl --check-only .", echo=True)
    run("flake8 .", echo=True)
    run("mypy .", echo=True)


@task
def tests(ctx, k=None):
    # type: (Context, Optional[str]) -> None
    pytest_args = " -vvv"
    if k:
        pytest_args += f" -k {k}"
    run(
        f"ASTROFY_CONFIG_FILE=tests.toml pytest tests{pytest_args}",
        pty=True,
        echo=True,
    )


@task
def slugify(ctx, title):
    # type: (Context, str) -> None
    from loguru import logger

    from astrofy.utils.text import slugify as _slugify

    logger.disable("astrofy")

    slug = _slugify(title)
    if not slug:
        print(f'ERROR: "{title}" does not contain any slug character')
        return

    print(slug)


@task
def check_config(ctx):
    # type: (Context) -> None
    import sys
    import traceback

    from loguru import logger

    logger.disable("astrofy")

    try:
        from astrofy import config
    except Exception as exc:
        print("Config error, please fix data/site.toml:\n")
        print("".join(traceback.format_exception(exc)))
        sys.exit(1)
    else:
        print(f"Config is OK, site={config.BASE_URL}")
