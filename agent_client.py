from abc import ABC, abstractmethod
from typing import List, Dict, Any

from config import ARTIFACTS_DIR, MAX_FEED_ITEMS


class AgentClient(ABC):
    # clients with an image backend set this and override generate_image
    supports_images = False

    @abstractmethod
    def search_news(self, topic: str) -> List[Dict[str, str]]:
        """Return recent articles as [{'title': str, 'uri': str}, ...]."""
        ...

    @abstractmethod
    def analyze(self, topic: str, articles: List[Dict[str, str]]) -> Dict[str, Any]:
        """Return {'articles': [...], 'keywords': [...], 'graphData': {...}} or {} when unavailable."""
        ...

    def generate_image(self, title: str) -> str:
        """Return an image URL for an article title, or "" when none could be made."""
        return ""


def extract_json(text: str) -> dict:
    """Brace/fence tolerant JSON extractor."""
    import re, json as _json
    if not text:
        return {}
    text = text.strip()
    # Remove fences if present
    if text.startswith("```"):
        text = re.sub(r"^```(?:json)?\s*|\s*```$", "", text, flags=re.I).strip()
    # Try fenced json
    m = re.search(r"```json\s*(\{[\s\S]*?\})\s*```", text, re.I)
    if m:
        try:
            return _json.loads(m.group(1).strip())
        except ValueError:
            pass
    # Try outermost braces
    start, end = text.find("{"), text.rfind("}")
    if start != -1 and end != -1 and end > start:
        candidate = text[start:end+1].strip()
        depth = 0
        for ch in candidate:
            if ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth < 0:
                    return {}
        if depth == 0:
            try:
                data = _json.loads(candidate)
            except ValueError:
                return {}
            return data if isinstance(data, dict) else {}
    return {}


class AnthropicAgentClient(AgentClient):
    def __init__(self, model: str, api_key: str, max_tokens_search: int = 1024,
                 max_tokens_analyze: int = 2048, max_search_uses: int = 3):
        # Import anthropic lazily to avoid hard dependency at module import time
        from anthropic import Anthropic
        self.client = Anthropic(api_key=api_key)
        self.model = model
        self.max_tokens_search = max_tokens_search
        self.max_tokens_analyze = max_tokens_analyze
        self.max_search_uses = max_search_uses

    def search_news(self, topic: str) -> List[Dict[str, str]]:
        msg = self.client.messages.create(
            model=self.model,
            max_tokens=self.max_tokens_search,
            messages=[{
                "role": "user",
                "content": f'Find the top 5-7 most important and recent news articles about "{topic}".',
            }],
            tools=[{
                "type": "web_search_20250305",
                "name": "web_search",
                "max_uses": self.max_search_uses,
            }],
        )
        seen = set()
        out: List[Dict[str, str]] = []
        for block in getattr(msg, "content", []) or []:
            if getattr(block, "type", "") != "web_search_tool_result":
                continue
            results = getattr(block, "content", None)
            # an error result carries an error object instead of a list
            if not isinstance(results, list):
                continue
            for r in results:
                url = getattr(r, "url", "") or ""
                title = (getattr(r, "title", "") or "").strip()
                if not url or not title or url in seen:
                    continue
                seen.add(url)
                out.append({"title": title, "uri": url})
        return out[:MAX_FEED_ITEMS]

    def _analysis_prompt(self, topic: str, articles: List[Dict[str, str]]) -> str:
        def _san(s: str) -> str:
            return (s or "").replace("\n", " ")[:180]
        context = "\n".join(f'Article {i+1}: "{_san(a.get("title", ""))}"' for i, a in enumerate(articles))
        return (
            f'Analyze the following news articles related to the topic "{topic}".\n\n'
            f"Articles:\n{context}\n\n"
            "Based on all articles provided, perform these tasks:\n"
            "1. For each article, write a 2-3 sentence summary and assign a relevance score (1-100) "
            "based on its importance and directness to the topic. Create a unique slug-like ID for each from its title.\n"
            "2. Extract a combined list of the 10-15 most significant keywords from all articles.\n"
            f'3. Create a knowledge graph. The main topic "{topic}" should be the central node. '
            "Identify key people, organizations, and concepts as other nodes and link them with their relationships. "
            "Keep the graph to about 5-8 nodes and 5-10 links.\n\n"
            "Return ONLY minified JSON, no prose. Schema:\n"
            '{"articles":[{"id":STRING,"title":STRING,"summary":STRING,"relevanceScore":INT}],'
            '"keywords":[STRING],'
            '"graphData":{"nodes":[{"id":STRING,"group":"topic"|"person"|"organization"|"concept"}],'
            '"links":[{"source":STRING,"target":STRING,"label":STRING}]}}'
        )

    def analyze(self, topic: str, articles: List[Dict[str, str]]) -> Dict[str, Any]:
        from pathlib import Path
        msg = self.client.messages.create(
            model=self.model,
            max_tokens=self.max_tokens_analyze,
            temperature=0.2,
            system="Return JSON only. No commentary.",
            messages=[{"role": "user", "content": self._analysis_prompt(topic, articles)}],
        )
        raw = "".join([c.text for c in (getattr(msg, "content", []) or []) if getattr(c, "type", "") == "text"])
        # Save preview for debugging
        Path(ARTIFACTS_DIR).mkdir(parents=True, exist_ok=True)
        (Path(ARTIFACTS_DIR) / "last_agent_raw.txt").write_text(raw or "", encoding="utf-8")
        return extract_json(raw)


class FeedAgentClient(AgentClient):
    """No model available: articles come from the Google News feed and analysis is left to heuristics."""

    def search_news(self, topic: str) -> List[Dict[str, str]]:
        from collectors import fetch_feed, google_news_url
        return fetch_feed(google_news_url(topic))

    def analyze(self, topic: str, articles: List[Dict[str, str]]) -> Dict[str, Any]:
        return {}


def make_client() -> AgentClient:
    from config import (ANTHROPIC_API_KEY, ANTHROPIC_MODEL, MAX_AGENT_TOKENS_SEARCH,
                        MAX_AGENT_TOKENS_ANALYZE, MAX_SEARCH_USES)
    if not ANTHROPIC_API_KEY:
        print("[agent] ANTHROPIC_API_KEY not set; using Google News feed and heuristics")
        return FeedAgentClient()
    return AnthropicAgentClient(
        model=ANTHROPIC_MODEL,
        api_key=ANTHROPIC_API_KEY,
        max_tokens_search=MAX_AGENT_TOKENS_SEARCH,
        max_tokens_analyze=MAX_AGENT_TOKENS_ANALYZE,
        max_search_uses=MAX_SEARCH_USES,
    )
