from typing import List, Dict, Any, Optional

from tqdm import tqdm

from agent import fetch_news, rank_and_analyze, sort_by_relevance
from agent_client import AgentClient
from errors import NewsError
from log_util import log, debug
from prefix_index import PrefixIndex
from suggestions import suggest


class SearchSession:
    """
    Owns the keyword index for one dashboard. Every search clears the index
    first and repopulates it only once the analysis has come back.
    """

    def __init__(self, client: AgentClient, index: Optional[PrefixIndex] = None,
                 show_progress: bool = True):
        self.client = client
        self.index = index if index is not None else PrefixIndex()
        self.show_progress = show_progress
        self.topic = ""
        self.articles: List[Dict[str, Any]] = []
        self.keywords: List[str] = []
        self.graph: Dict[str, list] = {"nodes": [], "links": []}
        self.active_article_id: Optional[str] = None
        self.error: Optional[str] = None
        self.is_loading = False

    def _reset(self) -> None:
        self.error = None
        self.articles = []
        self.keywords = []
        self.graph = {"nodes": [], "links": []}
        self.active_article_id = None
        self.index.clear()

    def search(self, topic: str) -> bool:
        """Run one search; False when ignored (empty topic or search in flight)."""
        topic = (topic or "").strip()
        if not topic or self.is_loading:
            return False

        self.is_loading = True
        self.topic = topic
        self._reset()
        try:
            raw = fetch_news(self.client, topic)
            data = rank_and_analyze(self.client, topic, raw)

            self.articles = sort_by_relevance(data["articles"])
            self.graph = data["graphData"]
            self.keywords = data["keywords"]
            for keyword in self.keywords:
                self.index.insert(keyword)
            debug(f"[session] indexed {len(self.index)} keywords")

            self._add_images()
        except NewsError as e:
            self.error = str(e) or "An unexpected error occurred."
            log(f"[session] {self.error}")
        finally:
            self.is_loading = False
        return True

    def _add_images(self) -> None:
        if not self.client.supports_images:
            return
        for article in tqdm(self.articles, desc="Images", disable=not self.show_progress):
            try:
                image_url = self.client.generate_image(article["title"])
            except Exception as e:
                log(f'[session] Failed to generate image for article: "{article["title"]}": {e}')
                continue
            if image_url:
                article["imageUrl"] = image_url

    def suggest(self, text: str, limit: Optional[int] = None) -> List[str]:
        if limit is None:
            return suggest(self.index, text)
        return suggest(self.index, text, limit=limit)

    def select_article(self, article_id: str) -> Optional[str]:
        """Toggle the expanded article; returns the new active id."""
        self.active_article_id = None if self.active_article_id == article_id else article_id
        return self.active_article_id

    def article(self, article_id: str) -> Optional[Dict[str, Any]]:
        for a in self.articles:
            if a["id"] == article_id:
                return a
        return None
