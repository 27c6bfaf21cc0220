"""Tests for the search session lifecycle around the keyword index."""

from prefix_index import PrefixIndex
from session import SearchSession
from conftest import ANALYSIS, FakeClient


def _session(client=None, index=None):
    return SearchSession(client or FakeClient(), index=index, show_progress=False)


class TestSearch:
    def test_articles_sorted_and_keywords_indexed(self):
        sess = _session()
        assert sess.search("AI") is True
        assert [a["relevanceScore"] for a in sess.articles] == [95, 70, 40]
        assert sess.suggest("a") == ["ai act", "algorithm", "alignment", "artificial intelligence", "agents"]
        assert sess.error is None
        assert sess.is_loading is False

    def test_empty_topic_ignored(self):
        client = FakeClient()
        sess = _session(client)
        assert sess.search("   ") is False
        assert client.calls == []

    def test_search_in_flight_ignored(self):
        client = FakeClient()
        sess = _session(client)
        sess.is_loading = True
        assert sess.search("AI") is False
        assert client.calls == []

    def test_failed_search_clears_previous_keywords(self):
        index = PrefixIndex()
        sess = _session(FakeClient(), index=index)
        sess.search("AI")
        assert index.find_suggestions("openai") == ["openai"]

        sess.client = FakeClient(fail_search=True)
        sess.search("Economy")
        assert sess.error == "Failed to fetch news."
        assert index.find_suggestions("") == []
        assert sess.articles == []
        assert sess.graph == {"nodes": [], "links": []}
        assert sess.is_loading is False

    def test_no_articles_message(self):
        sess = _session(FakeClient(raw=[]))
        sess.search("nothing")
        assert sess.error == "No articles found for this topic."

    def test_index_cleared_before_collaborator_runs(self):
        index = PrefixIndex()
        index.insert("stale")
        seen = {}

        class Watching(FakeClient):
            def search_news(self, topic):
                seen["during"] = index.find_suggestions("")
                return super().search_news(topic)

        _session(Watching(), index=index).search("AI")
        assert seen["during"] == []
        assert "stale" not in index

    def test_new_search_replaces_keywords(self):
        sess = _session()
        sess.search("AI")
        sess.client = FakeClient(analysis={
            "articles": [{"id": "e", "title": "Economy grows", "relevanceScore": 50}],
            "keywords": ["Economy", "Inflation"],
        })
        sess.search("Economy")
        assert sess.suggest("") == []
        assert sess.index.find_suggestions("") == ["economy", "inflation"]
        assert sess.suggest("a") == []


class TestImages:
    def test_images_attached(self):
        client = FakeClient(images={"EU finalizes AI Act rules": "https://img/eu.jpg"})
        sess = _session(client)
        sess.search("AI")
        eu = sess.article("eu-act")
        assert eu["imageUrl"] == "https://img/eu.jpg"
        assert "imageUrl" not in sess.article("chips")

    def test_image_failure_leaves_article(self):
        client = FakeClient(images={"EU finalizes AI Act rules": RuntimeError("quota")})
        sess = _session(client)
        sess.search("AI")
        assert sess.error is None
        assert "imageUrl" not in sess.article("eu-act")

    def test_client_without_image_backend_is_not_asked(self):
        client = FakeClient(images={"EU finalizes AI Act rules": "https://img/eu.jpg"}, supports_images=False)
        sess = _session(client)
        sess.search("AI")
        assert [c for c in client.calls if c[0] == "generate_image"] == []
        assert "imageUrl" not in sess.article("eu-act")


class TestMalformedAnalysis:
    def test_graph_not_a_dict_keeps_search_alive(self):
        sess = _session(FakeClient(analysis=dict(ANALYSIS, graphData=["AI"])))
        sess.search("AI")
        assert sess.error is None
        assert sess.graph == {"nodes": [{"id": "AI", "group": "topic"}], "links": []}
        assert len(sess.articles) == 3

    def test_keywords_as_string_not_split_into_characters(self):
        sess = _session(FakeClient(analysis=dict(ANALYSIS, keywords="OpenAI, chips")))
        sess.search("AI")
        stored = sess.index.find_suggestions("")
        assert stored
        assert all(len(k) > 1 for k in stored)
        assert "o" not in stored


class TestSelection:
    def test_toggle(self):
        sess = _session()
        sess.search("AI")
        assert sess.select_article("chips") == "chips"
        assert sess.select_article("eu-act") == "eu-act"
        assert sess.select_article("eu-act") is None

    def test_limit_override(self):
        sess = _session()
        sess.search("AI")
        assert sess.suggest("a", limit=1) == ["ai act"]
