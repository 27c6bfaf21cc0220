import re
from collections import Counter
from typing import List, Dict, Any

from agent_client import AgentClient
from collectors import host_of, slugify
from config import MAX_KEYWORDS, MAX_GRAPH_NODES, STOPWORDS
from errors import NewsError
from log_util import log, debug


def _tokens(s: str) -> set:
    s = re.sub(r"[^a-z0-9 ]+", " ", (s or "").lower())
    return {w for w in s.split() if len(w) > 2}

def _jaccard(a: str, b: str) -> float:
    A, B = _tokens(a), _tokens(b)
    if not A or not B:
        return 0.0
    return len(A & B) / len(A | B)

_SITE_TAIL = re.compile(r"\s+[-–—|]\s+[^-–—|]+$")

def _strip_site(s: str) -> str:
    """Drop the trailing ' - Publisher' that feed titles carry."""
    return _SITE_TAIL.sub("", (s or "").strip())

def _clamp_score(x) -> int:
    try:
        v = int(round(float(x)))
    except (TypeError, ValueError):
        return 1
    return max(1, min(100, v))



def fetch_news(client: AgentClient, topic: str) -> List[Dict[str, str]]:
    try:
        raw = client.search_news(topic)
    except Exception as e:
        log(f"[agent] Error fetching news: {e}")
        raise NewsError("Failed to fetch news.") from e
    if not raw:
        raise NewsError("No articles found for this topic.")
    debug(f"[agent] fetched {len(raw)} articles for {topic!r}")
    return raw


def _match_raw(title: str, raw_articles: List[Dict[str, str]]):
    t = (title or "").lower()
    for raw in raw_articles:
        r = (raw.get("title") or "").lower()
        if r and (r in t or t in r):
            return raw
    return None


def _merge_articles(processed: List[Dict[str, Any]], raw_articles: List[Dict[str, str]]) -> List[Dict[str, Any]]:
    out = []
    seen_ids = set()
    for p in processed:
        if not isinstance(p, dict) or not p.get("title"):
            continue
        title = str(p["title"]).strip()
        original = _match_raw(title, raw_articles)
        art_id = str(p.get("id") or slugify(title))
        # ids key comments and feedback, so they must be unique
        base, n = art_id, 2
        while art_id in seen_ids:
            art_id = f"{base}-{n}"
            n += 1
        seen_ids.add(art_id)
        out.append({
            "id": art_id,
            "title": title,
            "summary": str(p.get("summary") or "").strip(),
            "relevanceScore": _clamp_score(p.get("relevanceScore")),
            "url": original.get("uri", "#") if original else "#",
            "source": (host_of(original.get("uri", "")) or "Unknown") if original else "Unknown",
        })
    return out


def _clean_graph(topic: str, graph: Any) -> Dict[str, Any]:
    if not isinstance(graph, dict):
        graph = {}
    raw_nodes = graph.get("nodes")
    raw_links = graph.get("links")

    nodes, ids = [], set()
    for n in raw_nodes if isinstance(raw_nodes, list) else []:
        if not isinstance(n, dict) or not isinstance(n.get("id"), str) or not n["id"] or n["id"] in ids:
            continue
        ids.add(n["id"])
        nodes.append({"id": n["id"], "group": str(n.get("group") or "concept")})
    if topic not in ids:
        nodes.insert(0, {"id": topic, "group": "topic"})
        ids.add(topic)

    links = []
    for l in raw_links if isinstance(raw_links, list) else []:
        if not isinstance(l, dict):
            continue
        src, dst = l.get("source"), l.get("target")
        if isinstance(src, str) and isinstance(dst, str) and src in ids and dst in ids:
            links.append({"source": src, "target": dst, "label": str(l.get("label") or ""), "value": 1})
    return {"nodes": nodes, "links": links}


def heuristic_analysis(topic: str, raw_articles: List[Dict[str, str]]) -> Dict[str, Any]:
    articles = []
    for raw in raw_articles:
        title = _strip_site(raw.get("title", "")) or "(untitled)"
        snippet = raw.get("summary", "")
        score = 1 + round(99 * _jaccard(topic, f"{title} {snippet}"))
        articles.append({
            "id": slugify(title),
            "title": title,
            "summary": snippet or f"{title}. Coverage is emerging; details remain unconfirmed.",
            "relevanceScore": score,
        })

    topic_toks = _tokens(topic)
    counts = Counter()
    for raw in raw_articles:
        for w in _tokens(_strip_site(raw.get("title", ""))):
            if w not in STOPWORDS and not w.isdigit():
                counts[w] += 1
    keywords = [w for w, _ in counts.most_common(MAX_KEYWORDS)]

    concepts = [w for w in keywords if w not in topic_toks][:MAX_GRAPH_NODES - 1]
    graph = {
        "nodes": [{"id": topic, "group": "topic"}] + [{"id": w, "group": "concept"} for w in concepts],
        "links": [{"source": topic, "target": w, "label": "mentions"} for w in concepts],
    }
    return {"articles": articles, "keywords": keywords, "graphData": graph}


def rank_and_analyze(client: AgentClient, topic: str, raw_articles: List[Dict[str, str]]) -> Dict[str, Any]:
    """
    Ask the model to summarize, score and relate the articles; build the final
    objects locally. Falls back to heuristics when the reply is unusable.
    """
    try:
        data = client.analyze(topic, raw_articles)
    except Exception as e:
        log(f"[agent] Error analyzing articles: {e}")
        raise NewsError("Failed to analyze articles.") from e

    try:
        if not isinstance(data, dict) or not isinstance(data.get("articles"), list) or not data["articles"]:
            log("[agent] analysis unavailable or unparseable → heuristic fallback")
            data = heuristic_analysis(topic, raw_articles)
        else:
            debug(f"[agent] used model analysis for topic={topic!r}")

        articles = _merge_articles(data["articles"], raw_articles)
        keywords = data.get("keywords")
        if not isinstance(keywords, list):
            log("[agent] keywords missing or not a list → heuristic keywords")
            keywords = heuristic_analysis(topic, raw_articles)["keywords"]
        keywords = [str(k).strip() for k in keywords if isinstance(k, str) and k.strip()]
        graph = _clean_graph(topic, data.get("graphData"))
    except (AttributeError, KeyError, TypeError, ValueError) as e:
        log(f"[agent] unexpected analysis shape: {e}")
        raise NewsError("Failed to analyze articles.") from e
    return {"articles": articles, "keywords": keywords, "graphData": graph}


def sort_by_relevance(articles: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
    return sorted(articles, key=lambda a: a.get("relevanceScore", 0), reverse=True)
