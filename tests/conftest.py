import pytest

from agent_client import AgentClient


RAW = [
    {"title": "OpenAI unveils new reasoning model - Reuters", "uri": "https://www.reuters.com/tech/openai-model"},
    {"title": "Chip makers race to meet AI demand", "uri": "https://www.ft.com/content/chips"},
    {"title": "EU finalizes AI Act rules", "uri": "https://apnews.com/article/eu-ai-act"},
]

ANALYSIS = {
    "articles": [
        {"id": "chips", "title": "Chip makers race to meet AI demand", "summary": "Demand is high.", "relevanceScore": 40},
        {"id": "openai-model", "title": "OpenAI unveils new reasoning model", "summary": "A new model.", "relevanceScore": 95},
        {"id": "eu-act", "title": "EU finalizes AI Act rules", "summary": "Rules are set.", "relevanceScore": 70},
    ],
    "keywords": ["OpenAI", "AI Act", "Algorithm", "chips", "Artificial Intelligence", "Alignment", "Agents", "Automation"],
    "graphData": {
        "nodes": [
            {"id": "AI", "group": "topic"},
            {"id": "OpenAI", "group": "organization"},
            {"id": "EU", "group": "organization"},
        ],
        "links": [
            {"source": "AI", "target": "OpenAI", "label": "develops"},
            {"source": "EU", "target": "AI", "label": "regulates"},
            {"source": "EU", "target": "Nobody", "label": "dangling"},
        ],
    },
}


class FakeClient(AgentClient):
    def __init__(self, raw=None, analysis=None, images=None, fail_search=False, fail_analyze=False,
                 supports_images=True):
        self.raw = RAW if raw is None else raw
        self.analysis = ANALYSIS if analysis is None else analysis
        self.images = images or {}
        self.fail_search = fail_search
        self.fail_analyze = fail_analyze
        self.supports_images = supports_images
        self.calls = []

    def search_news(self, topic):
        self.calls.append(("search_news", topic))
        if self.fail_search:
            raise RuntimeError("network down")
        return list(self.raw)

    def analyze(self, topic, articles):
        self.calls.append(("analyze", topic))
        if self.fail_analyze:
            raise RuntimeError("model overloaded")
        return self.analysis

    def generate_image(self, title):
        self.calls.append(("generate_image", title))
        img = self.images.get(title, "")
        if isinstance(img, Exception):
            raise img
        return img


@pytest.fixture
def client():
    return FakeClient()
