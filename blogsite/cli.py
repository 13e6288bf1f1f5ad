from __future__ import annotations

import argparse
import datetime as dt
import sys
import time
from pathlib import Path
from typing import Optional

from .config import SiteConfig, load_site_config
from .content import ArticleMetadata, BuildError
from .images import ImageOptimizer, create_image_optimizer, optimize_directory
from .pages import build_article, build_blog_index, build_sitemap
from .templates import TemplateStore
from .watch import watch_directory


def find_markdown_files(articles_dir: Path) -> list[Path]:
    return sorted(
        (path for path in articles_dir.iterdir() if path.is_file() and path.name.endswith(".md")),
        key=lambda p: p.name,
    )


def build_site(
    config: SiteConfig, templates: TemplateStore, build_date: Optional[dt.date] = None
) -> list[ArticleMetadata]:
    """Build every article, then the blog index and the sitemap.

    Any failing article aborts the run before the index and sitemap are
    written. Returns the articles in index order.
    """
    start = time.perf_counter()
    build_date = build_date or dt.date.today()
    print("Starting build...")

    if not config.articles_dir.exists():
        config.articles_dir.mkdir(parents=True, exist_ok=True)
        print(f"Created articles directory: {config.articles_dir}")
    config.output_dir.mkdir(parents=True, exist_ok=True)

    md_files = find_markdown_files(config.articles_dir)
    if not md_files:
        print(f"Warning: no Markdown files found in {config.articles_dir}", file=sys.stderr)
        return []

    print(f"Found {len(md_files)} articles")
    articles: list[ArticleMetadata] = []
    taken_slugs: dict[str, Path] = {}
    for md_file in md_files:
        print(f"  - Building: {md_file.name}")
        articles.append(build_article(md_file, config, templates, build_date, taken_slugs))

    build_blog_index(articles, config, templates)
    build_sitemap(articles, config, build_date)

    elapsed = time.perf_counter() - start
    print("Build complete.")
    print(f"Generated {len(articles)} article pages")
    print(f"Updated {config.index_path.name} and {config.sitemap_path.name}")
    print(f"Build completed in {elapsed:.2f}s.")
    return articles


def optimize_images(config: SiteConfig, optimizer: ImageOptimizer) -> None:
    if not optimizer.available:
        print("Warning: Pillow is not installed; skipping image optimization.", file=sys.stderr)
        return
    if not config.photo_dir.exists():
        print(f"Warning: photo directory not found: {config.photo_dir}", file=sys.stderr)
        return
    start = time.perf_counter()
    print(f"Optimizing images in {config.photo_dir} -> {config.optimized_dir}")
    summary = optimize_directory(
        optimizer,
        config.photo_dir,
        config.optimized_dir,
        quality=config.image_quality,
        max_width=config.image_max_width,
        max_height=config.image_max_height,
    )
    elapsed = time.perf_counter() - start
    print(f"Optimized {summary.processed} images ({summary.failed} failed) in {elapsed:.2f}s.")
    print(
        f"Total: {summary.original_bytes // 1024}KB -> {summary.optimized_bytes // 1024}KB "
        f"(saved {summary.saved_bytes // 1024}KB, {summary.savings_percent:.1f}%)"
    )


def watch_site(config: SiteConfig, templates: TemplateStore) -> None:
    print("Watch mode enabled.")
    build_site(config, templates)

    def rebuild() -> None:
        templates.clear()
        build_site(config, templates)

    watch_directory(config.articles_dir, rebuild)


def main(argv: Optional[list[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Markdown blog builder.")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--watch", action="store_true", help="Rebuild whenever an article changes.")
    mode.add_argument(
        "--optimize-images",
        action="store_true",
        help="Only resize and recompress photos into the optimized directory.",
    )
    args = parser.parse_args(argv)

    config = load_site_config(Path.cwd())
    try:
        if args.optimize_images:
            optimize_images(config, create_image_optimizer())
            return
        templates = TemplateStore(config.templates_dir)
        if args.watch:
            watch_site(config, templates)
        else:
            build_site(config, templates)
    except (BuildError, OSError) as exc:
        print(f"Build failed: {exc}", file=sys.stderr)
        sys.exit(1)
