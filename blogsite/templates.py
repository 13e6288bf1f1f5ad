from __future__ import annotations

import re
from pathlib import Path
from typing import Optional

TOKEN_RE = re.compile(r"\{\{(\w+)\}\}")

DEFAULT_ARTICLE_TEMPLATE = """<!DOCTYPE html>
<html lang="th">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>{{title}} | {{siteName}}</title>
  <meta name="description" content="{{description}}">
  <meta name="author" content="{{author}}">
  <meta property="og:type" content="article">
  <meta property="og:title" content="{{title}}">
  <meta property="og:description" content="{{description}}">
  <meta property="og:image" content="{{ogImage}}">
  <meta property="og:url" content="{{canonical}}">
  <link rel="canonical" href="{{canonical}}">
  <link rel="stylesheet" href="../stylesheets/index.css">
  <style>
    .article-container { max-width: 800px; margin: 0 auto; padding: 2rem; }
    .article-header { margin-bottom: 2rem; }
    .article-meta { color: #666; font-size: 0.9rem; margin: 1rem 0; }
    .article-image { width: 100%; border-radius: 8px; margin: 2rem 0; }
    .article-content { line-height: 1.8; }
    .tags { margin: 1rem 0; }
    .tag { display: inline-block; background: #f0f0f0; padding: 0.3rem 0.8rem; border-radius: 20px; margin-right: 0.5rem; font-size: 0.85rem; }
    .back-link { display: inline-block; margin-top: 2rem; color: #0066cc; text-decoration: none; }
  </style>
</head>
<body>
  <div class="article-container" data-slug="{{slug}}">
    <a href="../blog.html" class="back-link">← กลับไปหน้าบทความ</a>
    <article class="article-content">
      <header class="article-header">
        <h1>{{title}}</h1>
        <div class="article-meta">
          <span>วันที่: {{date}}</span> |
          <span>ผู้เขียน: {{author}}</span>
        </div>
        {{image}}
        <div class="tags">{{tags}}</div>
      </header>
      <div class="article-content">
        {{content}}
      </div>
    </article>
  </div>
</body>
</html>
"""

DEFAULT_INDEX_TEMPLATE = """<!DOCTYPE html>
<html lang="th">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>บทความ | {{siteName}}</title>
  <meta name="description" content="บทความเกี่ยวกับการพัฒนาเว็บ, เทคโนโลยี, และประสบการณ์การทำงาน">
  <link rel="stylesheet" href="stylesheets/index.css">
  <style>
    .blog-container { max-width: 1000px; margin: 0 auto; padding: 2rem; }
    .blog-header { text-align: center; margin-bottom: 3rem; }
    .articles-list { display: grid; gap: 2rem; }
    .article-preview { border: 1px solid #e0e0e0; border-radius: 8px; padding: 1.5rem; }
    .article-preview h2 { margin-top: 0; }
    .article-preview h2 a { color: #333; text-decoration: none; }
    .article-preview h2 a:hover { color: #0066cc; }
    .article-meta { color: #666; font-size: 0.9rem; margin: 1rem 0; }
    .preview-image { width: 100%; border-radius: 8px; margin: 1rem 0; }
    .description { color: #555; line-height: 1.6; }
    .tags { margin: 1rem 0; }
    .tag { display: inline-block; background: #f0f0f0; padding: 0.3rem 0.8rem; border-radius: 20px; margin-right: 0.5rem; font-size: 0.85rem; }
    .read-more { display: inline-block; margin-top: 1rem; color: #0066cc; text-decoration: none; font-weight: bold; }
  </style>
</head>
<body>
  <div class="blog-container">
    <header class="blog-header">
      <h1>บทความ</h1>
      <p>บทความเกี่ยวกับการพัฒนาเว็บ, เทคโนโลยี, และประสบการณ์การทำงาน</p>
    </header>
    <div class="articles-list">
      {{articles}}
    </div>
  </div>
</body>
</html>
"""


def render_template(template: str, **context: str) -> str:
    """Replace every ``{{name}}`` in one pass; inserted values are never rescanned."""
    return TOKEN_RE.sub(lambda match: context.get(match.group(1), match.group(0)), template)


class TemplateStore:
    """Loads ``<name>.html`` from one directory and keeps it for the store's lifetime.

    Lookups that miss are not remembered, so a template created later is
    still found. Nothing is reloaded once cached unless :meth:`clear` is
    called.
    """

    def __init__(self, templates_dir: Path) -> None:
        self.templates_dir = templates_dir
        self._cache: dict[str, str] = {}

    def get(self, name: str) -> Optional[str]:
        if name in self._cache:
            return self._cache[name]
        path = self.templates_dir / f"{name}.html"
        if not path.exists():
            return None
        text = path.read_text(encoding="utf-8")
        self._cache[name] = text
        return text

    def get_or_default(self, name: str, default: str) -> str:
        template = self.get(name)
        return default if template is None else template

    def clear(self) -> None:
        self._cache.clear()
