import dataclasses
import datetime as dt
import re

from blogsite.content import ArticleMetadata
from blogsite.pages import (
    build_article,
    build_blog_index,
    build_sitemap,
    render_sitemap,
    sitemap_entries,
)

BUILD_DATE = dt.date(2024, 6, 15)
TOKEN_RE = re.compile(r"\{\{\w+\}\}")


def _article(slug: str, date: dt.date, title: str = "T", **kwargs) -> ArticleMetadata:
    return ArticleMetadata(
        slug=slug,
        title=title,
        description=kwargs.pop("description", ""),
        date=date,
        author=kwargs.pop("author", "Jane"),
        **kwargs,
    )


class TestBuildArticle:
    def test_all_tokens_substituted(self, config, templates, write_article):
        path = write_article(
            "first.md",
            "---\ntitle: First\ndescription: Desc\ndate: 2024-01-01\ntags: [a, b]\n"
            "image: Photo/cover.jpg\n---\n# Body\n\nSome *text*.\n",
        )

        article = build_article(path, config, templates, BUILD_DATE)

        html = (config.output_dir / "first.html").read_text(encoding="utf-8")
        assert article.slug == "first"
        assert TOKEN_RE.search(html) is None
        assert "<title>First | Example Blog</title>" in html
        assert "January 1, 2024" in html
        assert '<span class="tag">a</span><span class="tag">b</span>' in html
        assert '<img src="../Photo/cover.jpg" alt="First" class="article-image">' in html
        assert 'content="https://example.com/Photo/cover.jpg"' in html
        assert 'href="https://example.com/articles/first.html"' in html
        assert "<em>text</em>" in html

    def test_custom_template_every_token(self, config, templates, write_article):
        config.templates_dir.mkdir(parents=True)
        tokens = [
            "title", "description", "date", "author", "tags", "image",
            "ogImage", "content", "slug", "canonical", "siteName",
        ]
        template = "\n".join(f"{name}={{{{{name}}}}} again={{{{{name}}}}}" for name in tokens)
        (config.templates_dir / "article.html").write_text(template, encoding="utf-8")
        path = write_article("bare.md", "plain body\n")

        build_article(path, config, templates, BUILD_DATE)

        html = (config.output_dir / "bare.html").read_text(encoding="utf-8")
        assert TOKEN_RE.search(html) is None
        assert "title=Untitled again=Untitled" in html
        assert "author=Site Owner again=Site Owner" in html
        assert "image= again=" in html
        assert "ogImage=https://example.com/Photo/DSCF2374.jpg" in html
        assert "slug=bare" in html

    def test_title_is_escaped(self, config, templates, write_article):
        path = write_article("xss.md", '---\ntitle: "<script>alert(1)</script>"\n---\nbody\n')

        build_article(path, config, templates, BUILD_DATE)

        html = (config.output_dir / "xss.html").read_text(encoding="utf-8")
        assert "&lt;script&gt;alert(1)&lt;/script&gt;" in html
        assert "<script>" not in html

    def test_overwrites_existing_output(self, config, templates, write_article):
        config.output_dir.mkdir(parents=True, exist_ok=True)
        (config.output_dir / "post.html").write_text("stale", encoding="utf-8")
        path = write_article("post.md", "---\ntitle: Fresh\n---\nbody\n")

        build_article(path, config, templates, BUILD_DATE)

        assert "Fresh" in (config.output_dir / "post.html").read_text(encoding="utf-8")

    def test_token_text_in_front_matter_is_kept(self, config, templates, write_article):
        path = write_article(
            "tokens.md",
            '---\ntitle: "{{siteName}} notes"\ndescription: "Using {{slug}} and {{canonical}}"\n---\nbody\n',
        )

        build_article(path, config, templates, BUILD_DATE)

        html = (config.output_dir / "tokens.html").read_text(encoding="utf-8")
        assert 'content="Using {{slug}} and {{canonical}}"' in html
        assert "<h1>{{siteName}} notes</h1>" in html
        assert 'data-slug="tokens"' in html

    def test_thai_locale_uses_buddhist_era(self, config, templates, write_article):
        config = dataclasses.replace(config, display_locale="th_TH")
        path = write_article("thai.md", "---\ndate: 2024-01-01\n---\nbody\n")

        build_article(path, config, templates, BUILD_DATE)

        html = (config.output_dir / "thai.html").read_text(encoding="utf-8")
        assert "1 มกราคม 2567" in html
        assert "ค.ศ." not in html


class TestBlogIndex:
    def test_newest_first(self, config, templates):
        articles = [
            _article("jan", dt.date(2024, 1, 1), title="January"),
            _article("mar", dt.date(2024, 3, 1), title="March"),
            _article("feb", dt.date(2024, 2, 1), title="February"),
        ]

        build_blog_index(articles, config, templates)

        html = config.index_path.read_text(encoding="utf-8")
        assert html.index("March") < html.index("February") < html.index("January")
        assert [a.slug for a in articles] == ["mar", "feb", "jan"]

    def test_equal_dates_keep_input_order(self, config, templates):
        day = dt.date(2024, 1, 1)
        articles = [_article("b", day), _article("a", day), _article("c", day)]
        build_blog_index(articles, config, templates)
        assert [a.slug for a in articles] == ["b", "a", "c"]

    def test_preview_block(self, config, templates):
        article = _article(
            "post",
            dt.date(2024, 1, 1),
            title="<script>x</script>",
            description='Say "hi" & <b>bye</b>',
            tags=("py",),
            image="Photo/p.jpg",
        )

        build_blog_index([article], config, templates)

        html = config.index_path.read_text(encoding="utf-8")
        assert "&lt;script&gt;x&lt;/script&gt;" in html
        assert "<script>" not in html
        assert "Say &quot;hi&quot; &amp; &lt;b&gt;bye&lt;/b&gt;" in html
        assert '<a href="articles/post.html" class="read-more">Read more</a>' in html
        assert '<img src="Photo/p.jpg"' in html
        assert '<span class="tag">py</span>' in html
        assert TOKEN_RE.search(html) is None

    def test_custom_index_template(self, config, templates):
        config.templates_dir.mkdir(parents=True)
        (config.templates_dir / "blog-index.html").write_text("<main>{{articles}}</main>", encoding="utf-8")

        build_blog_index([_article("one", dt.date(2024, 1, 1))], config, templates)

        html = config.index_path.read_text(encoding="utf-8")
        assert html.startswith('<main><article class="article-preview">')


class TestSitemap:
    def test_entry_count_and_priorities(self, config):
        articles = [_article(f"p{i}", dt.date(2024, 1, i + 1)) for i in range(3)]

        entries = sitemap_entries(articles, config, BUILD_DATE)

        assert len(entries) == 2 + len(articles)
        assert entries[0].loc == "https://example.com/"
        assert (entries[0].priority, entries[0].changefreq) == ("1.0", "monthly")
        assert entries[1].loc == "https://example.com/blog.html"
        assert (entries[1].priority, entries[1].changefreq) == ("0.8", "weekly")
        assert all(entry.priority == "0.7" for entry in entries[2:])
        assert entries[2].loc == "https://example.com/articles/p0.html"
        assert entries[2].lastmod == "2024-01-01"
        assert entries[0].lastmod == "2024-06-15"

    def test_written_document(self, config):
        build_sitemap([_article("a", dt.date(2024, 1, 1))], config, BUILD_DATE)

        xml = config.sitemap_path.read_text(encoding="utf-8")
        assert xml.startswith('<?xml version="1.0" encoding="UTF-8"?>')
        assert '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">' in xml
        assert xml.count("<url>") == 3
        assert "<loc>https://example.com/articles/a.html</loc>" in xml

    def test_loc_is_xml_escaped(self, config):
        xml = render_sitemap(sitemap_entries([_article("a&b", dt.date(2024, 1, 1))], config, BUILD_DATE))
        assert "a&amp;b.html" in xml
