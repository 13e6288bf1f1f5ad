from __future__ import annotations

import datetime as dt
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional
from xml.sax.saxutils import escape as xml_escape

from .config import SiteConfig
from .content import ArticleMetadata, BuildError, read_article, render_markdown
from .templates import DEFAULT_ARTICLE_TEMPLATE, DEFAULT_INDEX_TEMPLATE, TemplateStore, render_template
from .utils import display_date, escape_html, join_url

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"


@dataclass(frozen=True)
class UrlEntry:
    loc: str
    lastmod: str
    changefreq: str
    priority: str


def write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def build_tag_badges(tags: Iterable[str]) -> str:
    return "".join(f'<span class="tag">{escape_html(tag)}</span>' for tag in tags)


def build_article(
    md_file: Path,
    config: SiteConfig,
    templates: TemplateStore,
    build_date: dt.date,
    taken_slugs: Optional[dict[str, Path]] = None,
) -> ArticleMetadata:
    """Render one Markdown file to ``<output_dir>/<slug>.html``.

    ``taken_slugs`` maps slugs already written in this run to their source
    files; a clash raises :class:`BuildError` before anything is written.
    """
    article, body = read_article(md_file, config.default_author, build_date)
    if taken_slugs is not None:
        if article.slug in taken_slugs:
            raise BuildError(
                f"Duplicate slug {article.slug!r}: {taken_slugs[article.slug].name} and {md_file.name}"
            )
        taken_slugs[article.slug] = md_file
    content_html = render_markdown(body)
    template = templates.get_or_default("article", DEFAULT_ARTICLE_TEMPLATE)

    title = escape_html(article.title)
    if article.image:
        image_html = f'<img src="../{escape_html(article.image)}" alt="{title}" class="article-image">'
        og_image = join_url(config.base_url, article.image)
    else:
        image_html = ""
        og_image = join_url(config.base_url, config.default_og_image)

    html_doc = render_template(
        template,
        title=title,
        description=escape_html(article.description),
        date=escape_html(display_date(article.date, config.display_locale)),
        author=escape_html(article.author),
        tags=build_tag_badges(article.tags),
        image=image_html,
        ogImage=escape_html(og_image),
        slug=escape_html(article.slug),
        canonical=escape_html(config.article_url(article.slug)),
        siteName=escape_html(config.site_name),
        content=content_html,
    )
    write_text(config.output_dir / f"{article.slug}.html", html_doc)
    return article


def build_preview(article: ArticleMetadata, config: SiteConfig) -> str:
    title = escape_html(article.title)
    url = escape_html(config.article_href(article.slug))
    image_html = ""
    if article.image:
        image_html = f'<img src="{escape_html(article.image)}" alt="{title}" class="preview-image">'
    return (
        '<article class="article-preview">'
        f'<h2><a href="{url}">{title}</a></h2>'
        '<div class="article-meta">'
        f'<span class="date">{escape_html(display_date(article.date, config.display_locale))}</span>'
        f'<span class="author">{escape_html(article.author)}</span>'
        "</div>"
        f"{image_html}"
        f'<p class="description">{escape_html(article.description)}</p>'
        f'<div class="tags">{build_tag_badges(article.tags)}</div>'
        f'<a href="{url}" class="read-more">{escape_html(config.read_more_label)}</a>'
        "</article>"
    )


def build_blog_index(articles: list[ArticleMetadata], config: SiteConfig, templates: TemplateStore) -> None:
    """Render the listing page, newest first.

    ``articles`` is sorted in place; equal dates keep their input order.
    """
    articles.sort(key=lambda article: article.date, reverse=True)
    template = templates.get_or_default("blog-index", DEFAULT_INDEX_TEMPLATE)
    listing = "\n".join(build_preview(article, config) for article in articles)
    html_doc = render_template(template, siteName=escape_html(config.site_name), articles=listing)
    write_text(config.index_path, html_doc)


def sitemap_entries(articles: Iterable[ArticleMetadata], config: SiteConfig, build_date: dt.date) -> list[UrlEntry]:
    today = build_date.isoformat()
    entries = [
        UrlEntry(loc=f"{config.base_url}/", lastmod=today, changefreq="monthly", priority="1.0"),
        UrlEntry(
            loc=join_url(config.base_url, config.index_url_path),
            lastmod=today,
            changefreq="weekly",
            priority="0.8",
        ),
    ]
    for article in articles:
        entries.append(
            UrlEntry(
                loc=config.article_url(article.slug),
                lastmod=article.raw_date,
                changefreq="monthly",
                priority="0.7",
            )
        )
    return entries


def render_sitemap(entries: Iterable[UrlEntry]) -> str:
    items = []
    for entry in entries:
        items.append(
            "\n".join(
                [
                    "  <url>",
                    f"    <loc>{xml_escape(entry.loc)}</loc>",
                    f"    <lastmod>{entry.lastmod}</lastmod>",
                    f"    <changefreq>{entry.changefreq}</changefreq>",
                    f"    <priority>{entry.priority}</priority>",
                    "  </url>",
                ]
            )
        )
    return "\n".join(
        [
            '<?xml version="1.0" encoding="UTF-8"?>',
            f'<urlset xmlns="{SITEMAP_NS}">',
            "\n".join(items),
            "</urlset>",
            "",
        ]
    )


def build_sitemap(articles: Iterable[ArticleMetadata], config: SiteConfig, build_date: dt.date) -> None:
    write_text(config.sitemap_path, render_sitemap(sitemap_entries(articles, config, build_date)))
