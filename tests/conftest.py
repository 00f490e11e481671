from pathlib import Path
from typing import Callable

import pytest


@pytest.fixture
def write_config(tmp_path: Path) -> Callable[[str], Path]:
    def _write_config(content: str) -> Path:
        config_path = tmp_path / "site.toml"
        config_path.write_text(content)
        return config_path

    return _write_config
