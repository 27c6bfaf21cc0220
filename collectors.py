import feedparser, re, html
from typing import List, Dict
from urllib.parse import quote_plus, urlparse

from config import GOOGLE_NEWS_RSS, MAX_FEED_ITEMS

_tag_re = re.compile(r"<[^>]+>")
_ws_re = re.compile(r"\s+")
_slug_re = re.compile(r"[^a-z0-9]+")

def _strip_html(s: str) -> str:
    if not s:
        return ""
    s = html.unescape(s)              # turn &nbsp; &amp; etc. into real chars
    s = _tag_re.sub(" ", s)           # drop tags
    s = _ws_re.sub(" ", s).strip()    # collapse whitespace
    return s

def google_news_url(topic: str) -> str:
    return GOOGLE_NEWS_RSS.format(query=quote_plus(topic.strip()))

def fetch_feed(url: str, cap: int = MAX_FEED_ITEMS) -> List[Dict]:
    d = feedparser.parse(url)
    items = []
    for e in d.entries:
        title = getattr(e, "title", "") or ""
        link = getattr(e, "link", "") or ""
        if not title or not link:
            continue
        items.append({
            "title": title.strip(),
            "uri": link.strip(),
            "summary": _strip_html(getattr(e, "summary", "") or ""),
            "published": getattr(e, "published", ""),
        })
        if len(items) >= cap:
            break
    return items

def host_of(url: str) -> str:
    try:
        return (urlparse(url or "").hostname or "").lower()
    except ValueError:
        return ""

def slugify(title: str) -> str:
    return _slug_re.sub("-", (title or "").lower()).strip("-")[:80]
