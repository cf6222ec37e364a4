"""Tests for redirect table building and writing."""

import logging

import pytest
import yaml

from site_redirects.core.redirects import (
    RedirectWriteError,
    build_redirect_table,
    build_table,
    category_rule,
    collect_categories,
    post_rule,
    write_manifest,
    write_redirect_file,
)
from site_redirects.models import Category, Post, RedirectKind

from conftest import make_post


EXPECTED_LINES = [
    "/alpha /posts/20240101_alpha",
    "/beta /posts/20240102_beta",
    "/category/sql /#category=SQL",
    "/category/data-viz /#category=Data%20Viz",
]


class TestRules:
    def test_post_rule(self):
        rule = post_rule(Post(folder_name="20240216_my-slug"))
        assert rule.to_line() == "/my-slug /posts/20240216_my-slug"
        assert rule.kind == RedirectKind.post

    def test_post_rule_prefix(self):
        rule = post_rule(Post(folder_name="1_a"), posts_prefix="/blog/")
        assert rule.destination == "/blog/1_a"

    def test_category_rule(self):
        rule = category_rule(Category(display_name="Data Science"))
        assert rule.to_line() == "/category/data-science /#category=Data%20Science"
        assert rule.kind == RedirectKind.category


class TestCollectCategories:
    def test_first_seen_order_and_counts(self):
        posts = [
            Post(folder_name="1_a", categories=["SQL", "Python"]),
            Post(folder_name="2_b", categories=["Python", "R", "Python"]),
            Post(folder_name="3_c"),
        ]
        categories = collect_categories(posts)
        assert [c.display_name for c in categories] == ["SQL", "Python", "R"]
        assert [c.post_count for c in categories] == [1, 2, 1]


class TestBuildRedirectTable:
    def test_end_to_end(self, content_root):
        assert build_redirect_table(content_root) == EXPECTED_LINES

    def test_one_post_rule_per_folder(self, content_root):
        make_post(content_root, "20240103_gamma", "title: Gamma\n")
        lines = build_redirect_table(content_root)
        assert lines[:3] == [
            "/alpha /posts/20240101_alpha",
            "/beta /posts/20240102_beta",
            "/gamma /posts/20240103_gamma",
        ]

    def test_categories_deduplicated(self, tmp_path):
        make_post(tmp_path, "1_a", "categories: [sql]\n")
        make_post(tmp_path, "2_b", "categories: [sql, python]\n")
        lines = build_redirect_table(tmp_path)
        assert [line for line in lines if line.startswith("/category/sql ")] == [
            "/category/sql /#category=sql"
        ]
        assert lines[-1] == "/category/python /#category=python"

    def test_idempotent(self, content_root):
        assert build_redirect_table(content_root) == build_redirect_table(content_root)

    def test_missing_root(self, tmp_path):
        assert build_redirect_table(tmp_path / "missing") == []

    def test_unreadable_root(self, content_root, deny_listing):
        assert build_redirect_table(content_root) == []

    def test_unreadable_metadata(self, content_root, deny_metadata):
        assert build_redirect_table(content_root) == [
            "/alpha /posts/20240101_alpha",
            "/beta /posts/20240102_beta",
        ]

    def test_duplicate_slug_kept_and_logged(self, tmp_path, caplog):
        make_post(tmp_path, "2023_intro")
        make_post(tmp_path, "2024_intro")
        with caplog.at_level(logging.WARNING, logger="site_redirects"):
            lines = build_redirect_table(tmp_path)
        assert lines == ["/intro /posts/2023_intro", "/intro /posts/2024_intro"]
        assert "Slug /intro is shared by" in caplog.text

    def test_colliding_category_keys(self, tmp_path, caplog):
        make_post(tmp_path, "1_a", "categories: [Data Science, data-science]\n")
        with caplog.at_level(logging.WARNING, logger="site_redirects"):
            table = build_table(tmp_path)
        assert [r.to_line() for r in table.category_rules] == [
            "/category/data-science /#category=Data%20Science",
            "/category/data-science /#category=data-science",
        ]
        assert "/category/data-science" in caplog.text


class TestWriteRedirectFile:
    def test_writes_lines(self, tmp_path):
        path = write_redirect_file(EXPECTED_LINES, tmp_path / "_redirects")
        assert path.read_text(encoding="utf-8") == "\n".join(EXPECTED_LINES) + "\n"

    def test_overwrites(self, tmp_path):
        path = tmp_path / "_redirects"
        path.write_text("/old /stale\n/older /staler\n", encoding="utf-8")
        write_redirect_file(["/new /fresh"], path)
        assert path.read_text(encoding="utf-8") == "/new /fresh\n"

    def test_empty_table(self, tmp_path):
        path = write_redirect_file([], tmp_path / "_redirects")
        assert path.read_text(encoding="utf-8") == ""

    def test_missing_parent_is_fatal(self, tmp_path):
        with pytest.raises(RedirectWriteError, match="Cannot write"):
            write_redirect_file(EXPECTED_LINES, tmp_path / "missing" / "_redirects")


class TestWriteManifest:
    def test_manifest(self, content_root, tmp_path):
        table = build_table(content_root)
        path = write_manifest(table, tmp_path / "redirects.yaml")
        data = yaml.safe_load(path.read_text(encoding="utf-8"))

        assert data["posts"][0] == {
            "folder": "20240101_alpha",
            "slug": "alpha",
            "categories": ["SQL", "Data Viz"],
        }
        assert data["categories"][1]["key"] == "data-viz"
        assert data["categories"][1]["encoded"] == "Data%20Viz"
        assert data["redirects"] == EXPECTED_LINES
