"""Tests for the command line interface."""

import json
import os
import tempfile
import unittest
from unittest.mock import patch

from typer.testing import CliRunner

from republik.api import DocumentFilter
from republik.cli.main import app
from republik.exceptions import QueryResourceError, RemoteQueryError
from republik.models import ArticleResponse, SearchResponse
from republik.rendering.renderer import ArticleRenderer

FIXTURES = os.path.join(os.path.dirname(__file__), "fixtures")


def _load(name):
    with open(os.path.join(FIXTURES, name), "r", encoding="utf-8") as f:
        return json.load(f)


class CliTest(unittest.TestCase):
    def setUp(self):
        self.runner = CliRunner()
        patcher = patch("republik.cli.utils.client.RepublikClient")
        self.client_cls = patcher.start()
        self.addCleanup(patcher.stop)
        self.client = self.client_cls.return_value
        self.client.renderer = ArticleRenderer()

    def test_list(self):
        self.client.fetch.return_value = SearchResponse.model_validate(
            _load("search_fixture.json")
        ).entities()

        result = self.runner.invoke(
            app, ["--sid", "abc", "list", "--feed", "--limit", "3"]
        )

        self.assertEqual(result.exit_code, 0, result.output)
        self.client_cls.assert_called_once_with("abc")
        self.client.fetch.assert_called_once_with(DocumentFilter(feed=True), limit=3)
        self.assertIn("Der erste Beitrag", result.output)
        self.assertIn("2024-01-05", result.output)

    def test_list_sid_from_env(self):
        self.client.fetch.return_value = []
        result = self.runner.invoke(app, ["list"], env={"REPUBLIK_SID": "from-env"})
        self.assertEqual(result.exit_code, 0, result.output)
        self.client_cls.assert_called_once_with("from-env")
        self.assertIn("No documents found", result.output)

    def test_list_error(self):
        self.client.fetch.side_effect = RemoteQueryError("HTTP 500")
        result = self.runner.invoke(app, ["list"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("HTTP 500", result.output)

    def test_article_stdout(self):
        self.client.fetch_article.return_value = ArticleResponse.model_validate(
            _load("article_fixture.json")
        )
        result = self.runner.invoke(app, ["article", "/2024/01/05/x"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.client.fetch_article.assert_called_once_with("/2024/01/05/x")
        self.assertIn('<div class="article"> ', result.output)

    def test_article_page_to_file(self):
        self.client.fetch_article.return_value = ArticleResponse.model_validate(
            _load("article_fixture.json")
        )
        with tempfile.TemporaryDirectory() as tmp:
            out = os.path.join(tmp, "article.html")
            result = self.runner.invoke(
                app, ["article", "/2024/01/05/x", "--page", "--output", out]
            )
            self.assertEqual(result.exit_code, 0, result.output)
            with open(out, encoding="utf-8") as f:
                html = f.read()
        self.assertTrue(html.startswith("<!doctype html>"))
        self.assertIn("<title>Die Zukunft des Journalismus</title>", html)

    def test_article_output_without_page(self):
        self.client.fetch_article.return_value = ArticleResponse.model_validate(
            _load("article_fixture.json")
        )
        with tempfile.TemporaryDirectory() as tmp:
            out = os.path.join(tmp, "fragment.html")
            result = self.runner.invoke(app, ["article", "/2024/01/05/x", "-o", out])
            self.assertEqual(result.exit_code, 0, result.output)
            with open(out, encoding="utf-8") as f:
                html = f.read()
        self.client.fetch_article.assert_called_once_with("/2024/01/05/x")
        self.assertTrue(html.startswith('<div class="article"> '))
        self.assertNotIn("<!doctype html>", html)

    def test_article_options_before_path(self):
        self.client.fetch_article.return_value = ArticleResponse.model_validate(
            _load("article_fixture.json")
        )
        result = self.runner.invoke(app, ["article", "--page", "/2024/01/05/x"])
        self.assertEqual(result.exit_code, 0, result.output)
        self.assertIn("<!doctype html>", result.output)

    def test_article_error(self):
        self.client.fetch_article.side_effect = RemoteQueryError("No article at /x")
        result = self.runner.invoke(app, ["article", "/x"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("No article at /x", result.output)

    def test_missing_query_resource(self):
        self.client_cls.side_effect = QueryResourceError("Cannot read GraphQL query")
        result = self.runner.invoke(app, ["article", "/x"])
        self.assertEqual(result.exit_code, 1)
        self.assertIn("Cannot read GraphQL query", result.output)


if __name__ == "__main__":
    unittest.main()
