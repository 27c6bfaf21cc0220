import argparse
import pathlib
import datetime
import getpass

from dotenv import load_dotenv

import log_util
from log_util import log
from agent_client import make_client
from config import ARTIFACTS_DIR, DEFAULT_TOPIC, NEWS_LANG, STORE_PATH
from errors import AuthError
from formatter import to_markdown, graph_to_json, stats_line
from reader_profile import Profile
from session import SearchSession
from store import KeyValueStore
from suggestions import SuggestionBox
from translations import LANGUAGES


HELP = """Commands:
  <text>                 -- show topic suggestions for <text>
  /search [TOPIC]        -- search TOPIC (or the current input)
  /pick N                -- use suggestion N as the input
  /show                  -- print the dashboard
  /read ID               -- open/close an article (counts toward your rank)
  /up ID  /down ID       -- rate an article
  /comment ID TEXT       -- comment on an article
  /signup  /login  /logout
  /lang en|ta|ml         -- switch UI language
  /stats                 -- streak and reader rank
  /quit
"""


def render(sess: SearchSession, prof: Profile, date: str = None) -> str:
    return to_markdown(
        sess.topic, sess.articles, sess.keywords, sess.graph, prof.t, date=date,
        feedback={a["id"]: prof.feedback(a["id"]) for a in sess.articles},
        comment_counts={a["id"]: len(prof.comments(a["id"])) for a in sess.articles},
        error=sess.error,
    )


def _show_article(sess: SearchSession, prof: Profile, article_id: str) -> None:
    if sess.article(article_id) is None:
        print(f"  unknown article: {article_id}")
        return
    active = sess.select_article(article_id)
    if active is None:
        print("  (closed)")
        return
    prof.mark_read(active)
    a = sess.article(active)
    print(f"\n  {a['title']}\n  {a['summary']}\n  {a['url']}")
    comments = prof.comments(active)
    if comments:
        print(f"  {prof.t['comments']}:")
        for c in comments:
            print(f"    {c['author']}: {c['text']}")


def interactive(sess: SearchSession, prof: Profile) -> None:
    """Prompt loop: free text drives the suggestion dropdown, /commands act."""
    box = SuggestionBox(sess.index, text=sess.topic)
    print(HELP)

    while True:
        try:
            inp = input(f"  {prof.t['searchTopic']}> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not inp.startswith("/"):
            found = box.type(inp)
            for i, s in enumerate(found, 1):
                print(f"   {i}. {s}")
            continue

        cmd, _, rest = inp.partition(" ")
        rest = rest.strip()
        cmd = cmd.lower()

        if cmd == "/quit":
            break
        elif cmd == "/search":
            topic = rest or box.submit()
            print(f"  {prof.t['fetchingNews']}")
            sess.search(topic)
            print(render(sess, prof))
        elif cmd == "/pick":
            try:
                picked = box.pick(int(rest))
            except ValueError:
                picked = None
            print(f"  input: {picked}" if picked else "  no such suggestion")
        elif cmd == "/show":
            print(render(sess, prof))
        elif cmd == "/read":
            _show_article(sess, prof, rest)
        elif cmd in ("/up", "/down"):
            if sess.article(rest) is None:
                print(f"  unknown article: {rest}")
                continue
            vote = prof.toggle_feedback(rest, cmd[1:])
            print(f"  feedback: {vote or 'cleared'}")
        elif cmd == "/comment":
            article_id, _, text = rest.partition(" ")
            if prof.add_comment(article_id, text) is None:
                print(f"  {prof.t['loginToComment']}")
        elif cmd in ("/signup", "/login"):
            try:
                if cmd == "/signup":
                    name = input(f"  {prof.t['yourName']}: ").strip()
                email = input(f"  {prof.t['email']}: ").strip()
                password = getpass.getpass(f"  {prof.t['password']}: ")
                if cmd == "/signup":
                    prof.sign_up(name, email, password)
                    print(f"  {prof.t['signupSuccess']}")
                else:
                    prof.log_in(email, password)
                    print(f"  {prof.t['loginSuccess']}")
            except AuthError as e:
                print(f"  {e}")
            except (EOFError, KeyboardInterrupt):
                print()
        elif cmd == "/logout":
            prof.log_out()
            print(f"  {prof.t['logoutSuccess']}")
        elif cmd == "/lang":
            if rest in LANGUAGES:
                prof.set_language(rest)
            else:
                print(f"  languages: {', '.join(LANGUAGES)}")
        elif cmd == "/stats":
            print("  " + stats_line(prof.t, prof.daily_streak, prof.rank()))
        else:
            print(HELP)


def main():
    load_dotenv()

    ap = argparse.ArgumentParser()
    ap.add_argument("--topic", default=DEFAULT_TOPIC, help="topic to search first")
    ap.add_argument("--date", default="today", help="today or YYYY-MM-DD (names the artifacts)")
    ap.add_argument("--lang", default=None, choices=LANGUAGES, help="UI language")
    ap.add_argument("--store", default=STORE_PATH, help="file holding accounts, comments and stats")
    ap.add_argument("--interactive", action="store_true", help="keep a prompt open for suggestions and commands")
    ap.add_argument("--dry-run", action="store_true", help="run everything but do not write files")
    ap.add_argument("--verbose", action="store_true", help="extra logs")
    ap.add_argument("--log-file", default=None, help="optional: write a run log to this file")
    args = ap.parse_args()

    log_util.setup(args.log_file, verbose=args.verbose)

    date = datetime.date.today().isoformat() if args.date == "today" else args.date

    prof = Profile(KeyValueStore(args.store))
    if args.lang:
        prof.set_language(args.lang)
    elif "language" not in prof.store:
        prof.lang = NEWS_LANG
    prof.update_streak()

    sess = SearchSession(make_client())
    sess.search(args.topic)

    if args.interactive:
        interactive(sess, prof)
        return

    md = render(sess, prof, date=date)

    if not args.dry_run:
        outdir = pathlib.Path(ARTIFACTS_DIR)
        outdir.mkdir(parents=True, exist_ok=True)
        outfile = outdir / f"{date}.md"
        graphfile = outdir / f"{date}.graph.json"
        outfile.write_text(md, encoding="utf-8")
        graphfile.write_text(graph_to_json(sess.graph), encoding="utf-8")
        log(f"[write] {outfile}")
        log(f"[write] {graphfile}")
    else:
        log("(dry-run: not writing files)")

    print(md)
    print(stats_line(prof.t, prof.daily_streak, prof.rank()))

    if sess.error:
        raise SystemExit(2)


if __name__ == "__main__":
    main()
