"""Tests for the wire models."""

import json
import os
import unittest
from datetime import datetime, timezone
from unittest import mock

from republik.models import (
    ArticleResponse,
    Document,
    Identifier,
    MdAstNode,
    NodeKind,
    SearchResponse,
)
from republik.models._base import _env_extra_mode

FIXTURES = os.path.join(os.path.dirname(__file__), "fixtures")


def _load(name):
    with open(os.path.join(FIXTURES, name), "r", encoding="utf-8") as f:
        return json.load(f)


class TestMdAstNode(unittest.TestCase):
    def test_defaults(self):
        node = MdAstNode()
        self.assertEqual(node.type, "")
        self.assertEqual(node.children, [])
        self.assertIsNone(node.depth)
        self.assertFalse(node.ordered)

    def test_kind_and_override(self):
        node = MdAstNode.model_validate(
            {"type": "listItem", "identifier": "CENTER", "children": []}
        )
        self.assertIs(node.kind, NodeKind.LIST_ITEM)
        self.assertIs(node.override, Identifier.CENTER)

    def test_unknown_kind_and_identifier(self):
        node = MdAstNode.model_validate({"type": "footnote", "identifier": "INFOBOX"})
        self.assertIsNone(node.kind)
        self.assertIsNone(node.override)

    def test_extra_fields_ignored(self):
        node = MdAstNode.model_validate(
            {"type": "list", "start": 3, "loose": True, "data": {"x": 1}}
        )
        self.assertIs(node.kind, NodeKind.LIST)

    def test_nested_null_children(self):
        node = MdAstNode.model_validate(
            {"type": "root", "children": [{"type": "text", "value": "a", "children": None}]}
        )
        self.assertEqual(node.children[0].children, [])

    def test_nodes_are_immutable(self):
        node = MdAstNode(type="text", value="a")
        with self.assertRaises(Exception):
            node.value = "b"


class TestArticleResponse(unittest.TestCase):
    def test_fixture(self):
        resp = ArticleResponse.model_validate(_load("article_fixture.json"))
        article = resp.article
        self.assertEqual(article.repo_id, "republik/article-zukunft-des-journalismus")
        self.assertEqual(article.type, "Document")
        self.assertEqual(article.title, "Die Zukunft des Journalismus")
        self.assertIs(article.content.kind, NodeKind.ROOT)
        self.assertEqual(len(article.content.children), 2)
        self.assertEqual(article.meta.audio_source.duration_ms, 840000)
        self.assertEqual(article.meta.format.meta.title, "Essay")

    def test_null_article(self):
        self.assertIsNone(ArticleResponse.model_validate({"article": None}).article)


class TestDocument(unittest.TestCase):
    def test_search_fixture(self):
        docs = SearchResponse.model_validate(_load("search_fixture.json")).entities()
        self.assertEqual(len(docs), 2)
        first = docs[0]
        self.assertEqual(first.meta.title, "Der erste Beitrag")
        self.assertEqual(first.meta.estimated_reading_minutes, 12)
        self.assertEqual(first.meta.audio_cover_crop.y, 10)
        self.assertEqual(first.meta.audio_source.kind, "readAloud")
        self.assertEqual(first.meta.format.meta.path, "/format/briefing")

    def test_pub_date(self):
        doc = Document.model_validate(
            {"id": "a", "meta": {"publishDate": "2024-01-05T04:00:00.000Z"}}
        )
        self.assertEqual(doc.pub_date, datetime(2024, 1, 5, 4, 0, tzinfo=timezone.utc))

    def test_pub_date_missing_or_invalid(self):
        self.assertIsNone(Document(id="a").pub_date)
        doc = Document.model_validate({"id": "a", "meta": {"publishDate": "gestern"}})
        self.assertIsNone(doc.pub_date)

    def test_populate_by_name(self):
        doc = Document.model_validate(
            {"id": "a", "meta": {"estimated_reading_minutes": 3}}
        )
        self.assertEqual(doc.meta.estimated_reading_minutes, 3)


class TestExtraMode(unittest.TestCase):
    def test_env_values(self):
        cases = {
            "allow": "allow",
            "FORBID": "forbid",
            "strict": "forbid",
            "off": "allow",
            "bogus": "ignore",
        }
        for raw, expected in cases.items():
            with self.subTest(raw=raw):
                with mock.patch.dict(os.environ, {"REPUBLIK_EXTRA": raw}):
                    self.assertEqual(_env_extra_mode(), expected)

    def test_default(self):
        with mock.patch.dict(os.environ, {}, clear=True):
            self.assertEqual(_env_extra_mode(), "ignore")


if __name__ == "__main__":
    unittest.main()
