import json
from typing import Dict, List, Optional

_VOTE_MARK = {"up": "👍", "down": "👎"}

def to_markdown(topic: str, articles: List[Dict], keywords: List[str], graph: Dict,
                t: Dict[str, str], date: Optional[str] = None,
                feedback: Optional[Dict[str, Optional[str]]] = None,
                comment_counts: Optional[Dict[str, int]] = None,
                error: Optional[str] = None) -> str:
    feedback = feedback or {}
    comment_counts = comment_counts or {}
    header = f"# {t['title']}: {topic} ({date})\n" if date else f"# {t['title']}: {topic}\n"
    lines = [header]

    lines.append(f"## {t['rankedArticles']}")
    if error:
        lines.append(f"**{error}**")
    elif not articles:
        lines.append(t["noArticles"])
    for n, a in enumerate(articles, 1):
        mark = _VOTE_MARK.get(feedback.get(a["id"]) or "", "")
        lines.append(f"{n}. **{a['title']}**  *(relevance {a.get('relevanceScore', 0)}, {a.get('source', 'Unknown')})* {mark}".rstrip())
        if a.get("summary"):
            lines.append(f"   {a['summary']}")
        if a.get("imageUrl"):
            lines.append(f"   ![]({a['imageUrl']})")
        count = comment_counts.get(a["id"], 0)
        extra = f"  ·  {t['comments']}: {count}" if count else ""
        lines.append(f"   [{t['readFullArticle']}]({a.get('url', '#')})  `{a['id']}`{extra}")
    lines.append("")

    if keywords:
        lines.append("Keywords: " + ", ".join(keywords))
        lines.append("")

    lines.append(f"## {t['topicGraph']}")
    links = graph.get("links") or []
    if not links:
        lines.append(t["graphPlaceholder"])
    for l in links:
        label = f" ({l['label']})" if l.get("label") else ""
        lines.append(f"- {l['source']} → {l['target']}{label}")
    lines.append("")

    return "\n".join(lines)

def graph_to_json(graph: Dict) -> str:
    return json.dumps(graph, ensure_ascii=False, indent=2)

def stats_line(t: Dict[str, str], streak: int, rank: str) -> str:
    return f"{t['yourStats']}: {t['dailyStreak']} {streak} · {t['readerRank']} {rank}"
