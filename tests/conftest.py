from pathlib import Path

import pytest

from blogsite.config import SiteConfig
from blogsite.templates import TemplateStore


@pytest.fixture
def config(tmp_path: Path) -> SiteConfig:
    return SiteConfig.from_mapping(
        {
            "base_url": "https://example.com/",
            "site_name": "Example Blog",
            "default_author": "Site Owner",
            "display_locale": "en_US",
            "read_more_label": "Read more",
        },
        tmp_path,
    )


@pytest.fixture
def templates(config: SiteConfig) -> TemplateStore:
    return TemplateStore(config.templates_dir)


@pytest.fixture
def write_article(config: SiteConfig):
    def write(name: str, text: str) -> Path:
        config.articles_dir.mkdir(parents=True, exist_ok=True)
        path = config.articles_dir / name
        path.write_text(text, encoding="utf-8")
        return path

    return write
