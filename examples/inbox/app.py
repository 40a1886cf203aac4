"""Inbox — a small fragment-routed mail client.

Demonstrates literal and ``:name`` routes, cumulative pattern matches,
query parameters, raw regex routes, redirects from handlers, and the
automatic first-visit redirect home.

Run:
    python app.py
    hashrouter routes app:router
    hashrouter match app:router "/mail/42?view=raw"
"""

import logging
import re

from hashrouter import MemoryLocation, NavigationContext, Router, RouterConfig

location = MemoryLocation("")
router = Router(location, RouterConfig(debug=True))

# What the "screen" shows, newest last
views: list[str] = []


@router.route("/", title="Inbox")
def inbox(ctx: NavigationContext) -> None:
    page = ctx.query.get_int("page", 1)
    views.append(f"inbox page {page}")


@router.route("/mail/:id", title="Message")
def show_mail(ctx: NavigationContext) -> None:
    view = ctx.query.get("view", "html")
    views.append(f"mail {ctx.params['id']} as {view}")


@router.route("/mail/:id")
def mark_read(ctx: NavigationContext) -> None:
    views.append(f"marked {ctx.params['id']} read")


@router.route("/compose")
def compose(ctx: NavigationContext) -> None:
    views.append(f"compose to {ctx.query.get('to', '')}".rstrip())


def legacy_thread(ctx: NavigationContext) -> None:
    (thread_id,) = ctx.params
    ctx.redirect(f"mail/{thread_id}")


router.add(re.compile(r"/thread-(\d+)"), legacy_thread)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="[%(asctime)s] %(message)s", datefmt="%H:%M:%S")
    router.start()
    location.assign("/mail/42?view=raw")
    location.assign("/thread-7")
    location.assign("/compose?to=ada%40example.com")
    for line in views:
        print(line)
