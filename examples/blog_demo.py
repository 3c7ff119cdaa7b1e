#!/usr/bin/env python
"""
Blog demo - entities declared in code.

Shows nested, computed, aliased and conditional exposures over plain
objects and pydantic models.

Usage:
    python examples/blog_demo.py
    python examples/blog_demo.py --admin
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass, field

from pydantic import BaseModel

from exposure_engine import Entity
from exposure_engine.output import to_json


class Author(BaseModel):
    name: str
    email: str


@dataclass
class Comment:
    body: str
    author: Author
    flagged: bool = False


@dataclass
class Post:
    title: str
    body: str
    author: Author
    comments: list[Comment] = field(default_factory=list)


class AuthorEntity(Entity):
    pass


AuthorEntity.expose("name")
AuthorEntity.expose("email", if_={"admin": True})


class CommentEntity(Entity):
    pass


CommentEntity.expose("body")
CommentEntity.expose("author", using=AuthorEntity)
CommentEntity.expose("flagged", if_=lambda comment, opts: comment.flagged)


class PostEntity(Entity):
    pass


PostEntity.expose("title", as_="headline")
PostEntity.expose("body")
PostEntity.expose("author", using=AuthorEntity)
PostEntity.expose("comments", using=CommentEntity)
PostEntity.expose("comment_count", compute=lambda post, opts: len(post.comments))


def main():
    parser = argparse.ArgumentParser(description="Render a blog post")
    parser.add_argument("--admin", action="store_true", help="Render with admin options")
    args = parser.parse_args()

    ann = Author(name="Ann", email="ann@example.com")
    bob = Author(name="Bob", email="bob@example.com")
    post = Post(
        title="Exposures",
        body="Declare once, render anywhere.",
        author=ann,
        comments=[
            Comment(body="Nice!", author=bob),
            Comment(body="Spam", author=bob, flagged=True),
        ],
    )

    print(to_json(PostEntity.represent(post, {"admin": args.admin})))


if __name__ == "__main__":
    main()
