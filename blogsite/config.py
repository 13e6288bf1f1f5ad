from __future__ import annotations

import json
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

from .utils import join_url, parse_int

try:
    import tomllib as toml
except ImportError:
    import tomli as toml

CONFIG_NAMES = ("site.toml", "site.yaml", "site.yml", "site.json")


def load_config(path: Path) -> dict:
    if not path.exists():
        return {}
    suffix = path.suffix.lower()
    text = path.read_text(encoding="utf-8")
    if suffix == ".toml":
        try:
            data = toml.loads(text)
        except toml.TOMLDecodeError as exc:
            print(f"Invalid TOML in config file {path}: {exc}", file=sys.stderr)
            sys.exit(1)
        return data
    if suffix in {".yml", ".yaml"}:
        try:
            data = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            print(f"Invalid YAML in config file {path}: {exc}", file=sys.stderr)
            sys.exit(1)
        if data is None:
            return {}
        if not isinstance(data, dict):
            print(f"YAML config must be a mapping: {path}", file=sys.stderr)
            sys.exit(1)
        return data
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        print(f"Invalid JSON in config file {path}: {exc}", file=sys.stderr)
        sys.exit(1)
    if not isinstance(data, dict):
        print(f"JSON config must be an object: {path}", file=sys.stderr)
        sys.exit(1)
    return data


def find_config_file(root: Path) -> Optional[Path]:
    for name in CONFIG_NAMES:
        candidate = root / name
        if candidate.exists():
            return candidate
    return None


@dataclass(frozen=True)
class SiteConfig:
    root: Path
    articles_dir: Path
    output_dir: Path
    templates_dir: Path
    index_path: Path
    sitemap_path: Path
    photo_dir: Path
    base_url: str = "https://zxinnattapat3.github.io"
    site_name: str = "Nattapat Phungphugdee"
    default_author: str = "Nattapat Phungphugdee"
    default_og_image: str = "Photo/DSCF2374.jpg"
    articles_url_path: str = "articles"
    index_url_path: str = "blog.html"
    display_locale: str = "th_TH"
    read_more_label: str = "อ่านต่อ →"
    optimized_dirname: str = "optimized"
    image_quality: int = 80
    image_max_width: int = 1920
    image_max_height: int = 1920

    @classmethod
    def from_mapping(cls, data: dict, root: Path) -> "SiteConfig":
        def cfg_str(key: str, default: str) -> str:
            value = data.get(key)
            return default if value is None else str(value)

        def cfg_path(key: str, default: str) -> Path:
            path = Path(cfg_str(key, default))
            return path if path.is_absolute() else root / path

        defaults = cls.__dataclass_fields__
        return cls(
            root=root,
            articles_dir=cfg_path("articles_dir", "articles"),
            output_dir=cfg_path("output_dir", "articles"),
            templates_dir=cfg_path("templates_dir", "templates"),
            index_path=cfg_path("index_file", "blog.html"),
            sitemap_path=cfg_path("sitemap_file", "sitemap.xml"),
            photo_dir=cfg_path("photo_dir", "Photo"),
            base_url=cfg_str("base_url", defaults["base_url"].default).rstrip("/"),
            site_name=cfg_str("site_name", defaults["site_name"].default),
            default_author=cfg_str("default_author", defaults["default_author"].default),
            default_og_image=cfg_str("default_og_image", defaults["default_og_image"].default),
            articles_url_path=cfg_str("articles_url_path", defaults["articles_url_path"].default).strip("/"),
            index_url_path=cfg_str("index_url_path", defaults["index_url_path"].default).strip("/"),
            display_locale=cfg_str("display_locale", defaults["display_locale"].default),
            read_more_label=cfg_str("read_more_label", defaults["read_more_label"].default),
            optimized_dirname=cfg_str("optimized_dirname", defaults["optimized_dirname"].default),
            image_quality=parse_int(data.get("image_quality"), defaults["image_quality"].default),
            image_max_width=parse_int(data.get("image_max_width"), defaults["image_max_width"].default),
            image_max_height=parse_int(data.get("image_max_height"), defaults["image_max_height"].default),
        )

    @property
    def optimized_dir(self) -> Path:
        return self.photo_dir / self.optimized_dirname

    def article_href(self, slug: str) -> str:
        return f"{self.articles_url_path}/{slug}.html" if self.articles_url_path else f"{slug}.html"

    def article_url(self, slug: str) -> str:
        return join_url(self.base_url, self.article_href(slug))


def load_site_config(root: Path) -> SiteConfig:
    config_path = find_config_file(root)
    data = load_config(config_path) if config_path else {}
    return SiteConfig.from_mapping(data, root)
