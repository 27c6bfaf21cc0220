"""Accounts, comments, feedback and reading stats, persisted in a KeyValueStore."""

import datetime
import hashlib
import time
from typing import Dict, List, Optional

from config import READER_RANKS
from errors import AuthError
from store import KeyValueStore
from translations import get_translations


def _hash(password: str) -> str:
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def reader_rank(articles_read: int) -> str:
    """Translation key of the rank earned by `articles_read`."""
    for threshold, key in READER_RANKS:
        if articles_read > threshold:
            return key
    return "weakWarrior"


class Profile:
    def __init__(self, store: KeyValueStore, lang: Optional[str] = None):
        self.store = store
        self.lang = lang or store.get("language", "en")
        self.current_user: Optional[Dict[str, str]] = None
        email = store.get("currentUserEmail")
        if email:
            user = store.get("users", {}).get(email)
            if user:
                self.current_user = {"name": user["name"], "email": email}

    @property
    def t(self) -> Dict[str, str]:
        return get_translations(self.lang)

    def set_language(self, lang: str) -> None:
        self.lang = lang
        self.store.set("language", lang)

    # ---- accounts ----

    def sign_up(self, name: str, email: str, password: str) -> Dict[str, str]:
        users = self.store.get("users", {})
        if email in users:
            raise AuthError(self.t["userExists"])
        users[email] = {"name": name, "password": _hash(password)}
        self.store.set("users", users)
        return self.log_in(email, password)

    def log_in(self, email: str, password: str) -> Dict[str, str]:
        user = self.store.get("users", {}).get(email)
        if not user or user.get("password") != _hash(password):
            raise AuthError(self.t["invalidCredentials"])
        self.current_user = {"name": user["name"], "email": email}
        self.store.set("currentUserEmail", email)
        return self.current_user

    def log_out(self) -> None:
        self.current_user = None
        self.store.remove("currentUserEmail")

    # ---- comments & feedback ----

    def comments(self, article_id: str) -> List[Dict[str, str]]:
        return self.store.get("comments", {}).get(article_id, [])

    def add_comment(self, article_id: str, text: str) -> Optional[Dict[str, str]]:
        """Append a comment by the logged-in user; None when nobody is logged in."""
        if not self.current_user or not text.strip():
            return None
        comment = {
            "id": str(int(time.time() * 1000)),
            "author": self.current_user["name"],
            "text": text.strip(),
            "timestamp": datetime.datetime.now(datetime.timezone.utc).isoformat(),
        }
        all_comments = self.store.get("comments", {})
        all_comments.setdefault(article_id, []).append(comment)
        self.store.set("comments", all_comments)
        return comment

    def feedback(self, article_id: str) -> Optional[str]:
        return self.store.get("articleFeedback", {}).get(article_id)

    def toggle_feedback(self, article_id: str, vote: str) -> Optional[str]:
        """Record 'up' or 'down'; repeating the current vote clears it."""
        if vote not in ("up", "down"):
            raise ValueError(f"feedback must be 'up' or 'down', got {vote!r}")
        fb = self.store.get("articleFeedback", {})
        fb[article_id] = None if fb.get(article_id) == vote else vote
        self.store.set("articleFeedback", fb)
        return fb[article_id]

    # ---- gamification ----

    @property
    def articles_read(self) -> int:
        return int(self.store.get("articlesRead", 0))

    @property
    def daily_streak(self) -> int:
        return int(self.store.get("dailyStreak", 0))

    def mark_read(self, article_id: str) -> int:
        read_ids = self.store.get("readArticleIds", [])
        if article_id not in read_ids:
            read_ids.append(article_id)
            self.store.set("readArticleIds", read_ids)
            self.store.set("articlesRead", self.articles_read + 1)
        return self.articles_read

    def update_streak(self, today: Optional[datetime.date] = None) -> int:
        today = today or datetime.date.today()
        last = self.store.get("lastVisit")
        if last == today.isoformat():
            return self.daily_streak
        yesterday = (today - datetime.timedelta(days=1)).isoformat()
        streak = self.daily_streak + 1 if last == yesterday else 1
        self.store.set("dailyStreak", streak)
        self.store.set("lastVisit", today.isoformat())
        return streak

    def rank(self) -> str:
        return self.t[reader_rank(self.articles_read)]
