#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/zxcv/content.py
"""Content model for zxcv.

Every URL is reduced to one piece of :data:`Content`, which decides the
program used to view it:

- :class:`Audio` and :class:`Video` keep only the URL, the player streams it
- :class:`Image` and :class:`Pdf` hold the downloaded bytes
- :class:`Text` holds one of the text shapes (:class:`Article`,
  :class:`Post`, :class:`PostThread`, :class:`Raw`)
- :class:`Collection` is a list of links with optional descriptions

Text and collections are written as UTF-8 to a file for the pager.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import BinaryIO, ClassVar, Optional, Union

from zxcv.constants import LINE_LENGTH
from zxcv.utils.text import fill

ITEM_DESCRIPTION_INDENT = "    "


@dataclass(frozen=True)
class Article:
    """A page with a title and a rendered body."""

    title: str
    body: str

    def write(self, file: BinaryIO) -> None:
        file.write(f"{self.title}\n\n{self.body}".encode())


@dataclass(frozen=True)
class Post:
    """A message by a single author, such as a toot or a forum reply.

    Parameters
    ----------
    author : str
        Display name of the author
    body : str
        Text of the post
    urls : list of str, optional
        Attachments or links listed after the body

    """

    author: str
    body: str
    urls: list[str] = field(default_factory=list)

    def __str__(self) -> str:
        text = fill(f"<{self.author}> {self.body}", LINE_LENGTH)
        if self.urls:
            text += "\n\n" + "\n".join(self.urls)
        return text

    def write(self, file: BinaryIO) -> None:
        file.write(str(self).encode())


@dataclass(frozen=True)
class PostThread:
    """A post together with the posts it replies to and the replies to it."""

    main: Post
    before: list[Post] = field(default_factory=list)
    after: list[Post] = field(default_factory=list)

    def posts(self) -> list[Post]:
        """Return every post of the thread in reading order."""
        return [*self.before, self.main, *self.after]

    def write(self, file: BinaryIO) -> None:
        file.write("\n\n".join(str(post) for post in self.posts()).encode())


@dataclass(frozen=True)
class Raw:
    """Bytes shown exactly as received."""

    data: bytes

    def write(self, file: BinaryIO) -> None:
        file.write(self.data)


TextType = Union[Article, Post, PostThread, Raw]


@dataclass(frozen=True)
class Item:
    """One entry of a :class:`Collection`."""

    url: str
    title: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class Collection:
    """A list of links, such as the files of a repository or a user's posts.

    Parameters
    ----------
    items : list of Item
        Entries in display order
    title : str, optional
        Heading written above the entries
    description : str, optional
        Paragraph written between the heading and the entries

    Examples
    --------
        >>> import io
        >>> buffer = io.BytesIO()
        >>> Collection([Item("https://example.com/", title="Example")], title="Links").write(buffer)
        >>> print(buffer.getvalue().decode())
        Links
        <BLANKLINE>
        Example: https://example.com/
        <BLANKLINE>

    """

    kind: ClassVar[str] = "text"

    items: list[Item] = field(default_factory=list)
    title: Optional[str] = None
    description: Optional[str] = None

    def write(self, file: BinaryIO) -> None:
        parts: list[str] = []
        if self.title is not None:
            parts.append(f"{self.title}\n\n")
        if self.description is not None:
            parts.append(f"{fill(self.description, LINE_LENGTH)}\n\n")
        for item in self.items:
            if item.title is not None:
                parts.append(f"{item.title}: ")
            parts.append(f"{item.url}\n")
            if item.description is not None:
                description = fill(
                    item.description,
                    LINE_LENGTH,
                    initial_indent=ITEM_DESCRIPTION_INDENT,
                    subsequent_indent=ITEM_DESCRIPTION_INDENT,
                )
                parts.append(f"{description}\n")
        file.write("".join(parts).encode())


@dataclass(frozen=True)
class Audio:
    """Audio streamed by the player from ``url``."""

    kind: ClassVar[str] = "audio"

    url: str


@dataclass(frozen=True)
class Video:
    """Video streamed by the player from ``url``."""

    kind: ClassVar[str] = "video"

    url: str


@dataclass(frozen=True)
class Image:
    """A downloaded image."""

    kind: ClassVar[str] = "image"

    data: bytes


@dataclass(frozen=True)
class Pdf:
    """A downloaded PDF document."""

    kind: ClassVar[str] = "pdf"

    data: bytes


@dataclass(frozen=True)
class Text:
    """Text shown in the pager."""

    kind: ClassVar[str] = "text"

    text: TextType

    def write(self, file: BinaryIO) -> None:
        self.text.write(file)


Content = Union[Audio, Collection, Image, Pdf, Text, Video]

__all__ = [
    "Article",
    "Audio",
    "Collection",
    "Content",
    "Image",
    "Item",
    "Pdf",
    "Post",
    "PostThread",
    "Raw",
    "Text",
    "TextType",
    "Video",
]
