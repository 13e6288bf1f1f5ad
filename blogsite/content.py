from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from frontmatter.default_handlers import YAMLHandler
import markdown
import yaml

from .utils import parse_list

MARKDOWN_EXTENSIONS = ["fenced_code", "tables"]


class BuildError(Exception):
    """The build cannot continue."""


class ContentError(BuildError):
    """A Markdown source file is malformed."""


@dataclass(frozen=True)
class ArticleMetadata:
    slug: str
    title: str
    description: str
    date: dt.date
    author: str
    tags: tuple[str, ...] = ()
    image: str = ""
    source: Optional[Path] = None

    @property
    def raw_date(self) -> str:
        return self.date.isoformat()


def parse_date(value: object, source: Path, default: dt.date) -> dt.date:
    if value is None or value == "":
        return default
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    text = str(value).strip()
    try:
        return dt.date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return dt.datetime.fromisoformat(text).date()
    except ValueError:
        raise ContentError(f"Invalid date {text!r} in {source}") from None


def parse_front_matter(text: str, source: Path) -> tuple[dict, str]:
    text = text.lstrip("\ufeff")
    handler = YAMLHandler()
    if not handler.detect(text):
        return {}, text
    try:
        header, body = handler.split(text)
    except ValueError:
        return {}, text
    try:
        meta = handler.load(header)
    except yaml.YAMLError as exc:
        raise ContentError(f"Invalid front matter in {source}: {exc}") from exc
    if meta is None:
        meta = {}
    if not isinstance(meta, dict):
        raise ContentError(f"Front matter in {source} must be a mapping, got {type(meta).__name__}")
    return meta, body.strip()


def _text(meta: dict, key: str, default: str) -> str:
    value = meta.get(key)
    if value is None:
        return default
    text = str(value).strip()
    return text or default


def _slug(meta: dict, source: Path) -> str:
    slug = _text(meta, "slug", source.stem)
    if "/" in slug or "\\" in slug or slug in (".", ".."):
        raise ContentError(f"Invalid slug {slug!r} in {source}: slugs name a single file")
    return slug


def build_metadata(meta: dict, source: Path, default_author: str, build_date: dt.date) -> ArticleMetadata:
    return ArticleMetadata(
        slug=_slug(meta, source),
        title=_text(meta, "title", "Untitled"),
        description=_text(meta, "description", ""),
        date=parse_date(meta.get("date"), source, build_date),
        author=_text(meta, "author", default_author),
        tags=tuple(parse_list(meta.get("tags"))),
        image=_text(meta, "image", ""),
        source=source,
    )


def render_markdown(body: str) -> str:
    md = markdown.Markdown(extensions=MARKDOWN_EXTENSIONS)
    return md.convert(body)


def read_article(
    md_file: Path, default_author: str, build_date: dt.date
) -> tuple[ArticleMetadata, str]:
    raw_text = md_file.read_text(encoding="utf-8")
    meta, body = parse_front_matter(raw_text, md_file)
    return build_metadata(meta, md_file, default_author, build_date), body
