import os

from dotenv import load_dotenv
load_dotenv()

ANTHROPIC_API_KEY = os.getenv("ANTHROPIC_API_KEY")
ANTHROPIC_MODEL = os.getenv("ANTHROPIC_MODEL", "claude-3-5-haiku-latest")
MAX_AGENT_TOKENS_SEARCH = int(os.getenv("MAX_AGENT_TOKENS_SEARCH", "1024"))
MAX_AGENT_TOKENS_ANALYZE = int(os.getenv("MAX_AGENT_TOKENS_ANALYZE", "2048"))
MAX_SEARCH_USES = int(os.getenv("MAX_SEARCH_USES", "3"))

DEFAULT_TOPIC = os.getenv("DEFAULT_TOPIC", "Artificial Intelligence Breakthroughs")
NEWS_LANG = os.getenv("NEWS_LANG", "en")
STORE_PATH = os.getenv("STORE_PATH", "artifacts/store.json")
ARTIFACTS_DIR = os.getenv("ARTIFACTS_DIR", "artifacts")

# --- Suggestion dropdown ---
MAX_SUGGESTIONS = int(os.getenv("MAX_SUGGESTIONS", "5"))
# "insertion" keeps traversal order, "alpha" sorts matches before truncating
SUGGESTION_ORDER = os.getenv("SUGGESTION_ORDER", "insertion").lower()

# --- Feed fallback (no API key) ---
GOOGLE_NEWS_RSS = "https://news.google.com/rss/search?q={query}&hl=en-US&gl=US&ceid=US:en"
MAX_FEED_ITEMS = int(os.getenv("MAX_FEED_ITEMS", "7"))

# --- Heuristic analysis ---
MAX_KEYWORDS = 15
MAX_GRAPH_NODES = 8
STOPWORDS = {
    "the", "and", "for", "with", "that", "this", "from", "are", "was", "were",
    "has", "have", "had", "its", "his", "her", "their", "they", "into", "over",
    "after", "before", "about", "than", "more", "most", "new", "news", "says",
    "said", "will", "can", "could", "would", "should", "how", "why", "what",
    "who", "when", "where", "amid", "out", "off", "not", "but", "all", "you",
    "your", "our", "just", "now", "first", "year", "years", "week", "today",
}

# --- Reader rank thresholds (articles read -> translation key) ---
READER_RANKS = [
    (50, "topReader"),
    (25, "newsHound"),
    (10, "informedCitizen"),
    (0, "gettingStarted"),
]
