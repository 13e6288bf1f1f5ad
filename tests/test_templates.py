from pathlib import Path

import pytest

from blogsite.templates import DEFAULT_ARTICLE_TEMPLATE, TemplateStore, render_template


class TestRenderTemplate:
    def test_replaces_every_occurrence(self):
        output = render_template("{{title}} - {{title}} - {{title}}", title="Hi")
        assert output == "Hi - Hi - Hi"

    def test_values_are_inserted_literally(self):
        output = render_template("<p>{{title}}</p>", title=r"$1 \1 \g<0> .*")
        assert output == r"<p>$1 \1 \g<0> .*</p>"

    def test_content_is_not_reexpanded(self):
        output = render_template("{{title}}|{{content}}", title="T", content="<code>{{title}}</code>")
        assert output == "T|<code>{{title}}</code>"

    def test_tokens_inside_earlier_values_survive(self):
        output = render_template(
            "{{description}}|{{slug}}|{{canonical}}",
            description="Using {{slug}} and {{canonical}}",
            slug="post",
            canonical="https://example.com/post.html",
        )
        assert output == "Using {{slug}} and {{canonical}}|post|https://example.com/post.html"

    def test_unknown_tokens_are_left_alone(self):
        assert render_template("{{other}}", title="x") == "{{other}}"


class TestTemplateStore:
    def test_missing_template_returns_none(self, tmp_path: Path):
        store = TemplateStore(tmp_path / "templates")
        assert store.get("article") is None
        assert store.get_or_default("article", DEFAULT_ARTICLE_TEMPLATE) == DEFAULT_ARTICLE_TEMPLATE

    def test_loaded_template_is_cached(self, tmp_path: Path):
        templates_dir = tmp_path / "templates"
        templates_dir.mkdir()
        path = templates_dir / "article.html"
        path.write_text("first {{title}}", encoding="utf-8")

        store = TemplateStore(templates_dir)
        assert store.get("article") == "first {{title}}"

        path.write_text("second {{title}}", encoding="utf-8")
        assert store.get("article") == "first {{title}}"

        path.unlink()
        assert store.get("article") == "first {{title}}"

    def test_clear_reloads_from_disk(self, tmp_path: Path):
        templates_dir = tmp_path / "templates"
        templates_dir.mkdir()
        path = templates_dir / "blog-index.html"
        path.write_text("old", encoding="utf-8")
        store = TemplateStore(templates_dir)
        assert store.get("blog-index") == "old"

        path.write_text("new", encoding="utf-8")
        store.clear()
        assert store.get("blog-index") == "new"

    def test_template_created_after_a_miss_is_found(self, tmp_path: Path):
        templates_dir = tmp_path / "templates"
        store = TemplateStore(templates_dir)
        assert store.get("article") is None

        templates_dir.mkdir()
        (templates_dir / "article.html").write_text("late", encoding="utf-8")
        assert store.get("article") == "late"

    def test_unreadable_template_raises(self, tmp_path: Path):
        templates_dir = tmp_path / "templates"
        (templates_dir / "article.html").mkdir(parents=True)
        store = TemplateStore(templates_dir)
        with pytest.raises(OSError):
            store.get("article")
