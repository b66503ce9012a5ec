"""Object id encoding and decoding.

Object id format: "<node type token>" or "<node type token>/<item id>"
(e.g., "alid3", "alid3/17", "abbg/English/Japanese").

Only the first "/" separates the token from the item id, so item ids may
contain "/" (genre names do). An empty item id ("alid3/") addresses the root.

Compound item ids pack several keys behind a tag:
    "<tag>:<key>;<key>..."      e.g. "fal:3;17", "fg:3;Jazz", "al:17"

Rules:
- Integer keys are canonical decimal ("0", "17", "-5"; never "007" or "+1").
- Only the last key of a shape may be free text. Text keys are taken
  verbatim, so ";" and ":" inside a genre name need no escaping.
- An item id without a tag is a plain integer. Which entity it names is
  decided by the node type that owns the id.
- Anything encode() cannot produce is rejected with MalformedIdentifierError.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from mediabrowse.helpers.dto.browse_dto import NodeType
from mediabrowse.helpers.exceptions import MalformedIdentifierError, UnknownNodeTypeError

SEPARATOR = "/"
TAG_DELIMITER = ":"
KEY_DELIMITER = ";"

_CANONICAL_INT = re.compile(r"0|-?[1-9][0-9]*")
_TAG = re.compile(r"[a-z]+")


def resolve_node_type(token: str) -> NodeType:
    """Resolve a node type token.

    Raises:
        UnknownNodeTypeError: If no node type owns the token
    """
    try:
        return NodeType(token)
    except ValueError:
        raise UnknownNodeTypeError(token) from None


def encode_address(node_type: NodeType, item_id: str | None = None) -> str:
    """Build an object id from a node type and an optional item id."""
    if item_id is None:
        return node_type.value
    if item_id == "":
        msg = f"Empty item id for node type {node_type.value!r}"
        raise MalformedIdentifierError(msg)
    return f"{node_type.value}{SEPARATOR}{item_id}"


def decode_address(object_id: str) -> tuple[NodeType, str | None]:
    """Split an object id into its node type and item id.

    Returns:
        (node_type, item_id) where item_id is None for the node type root

    Raises:
        MalformedIdentifierError: If object_id is empty
        UnknownNodeTypeError: If the token is not a known node type
    """
    if not object_id:
        msg = "Object id is empty"
        raise MalformedIdentifierError(msg)
    token, _, item_id = object_id.partition(SEPARATOR)
    return resolve_node_type(token), (item_id or None)


def encode_plain_id(key: int) -> str:
    """Encode an untagged integer item id."""
    if isinstance(key, bool) or not isinstance(key, int):
        msg = f"Plain item id must be an int, got {key!r}"
        raise MalformedIdentifierError(msg)
    return str(key)


def decode_plain_id(text: str) -> int:
    """Decode an untagged integer item id."""
    if not _CANONICAL_INT.fullmatch(text):
        msg = f"Not a plain integer id: {text!r}"
        raise MalformedIdentifierError(msg)
    return int(text)


def is_plain_id(text: str) -> bool:
    return _CANONICAL_INT.fullmatch(text) is not None


@dataclass(frozen=True)
class CompoundShape:
    """One tagged item id layout: a tag and the types of its keys."""

    tag: str
    kinds: tuple[type, ...]
    name: str

    def __post_init__(self) -> None:
        if not _TAG.fullmatch(self.tag):
            msg = f"Invalid compound tag: {self.tag!r}"
            raise ValueError(msg)
        if not self.kinds or any(kind not in (int, str) for kind in self.kinds):
            msg = f"Compound shape {self.tag!r} needs int/str keys"
            raise ValueError(msg)
        if str in self.kinds[:-1]:
            msg = f"Compound shape {self.tag!r}: only the last key may be text"
            raise ValueError(msg)

    @property
    def prefix(self) -> str:
        return self.tag + TAG_DELIMITER

    def matches(self, text: str) -> bool:
        return text.startswith(self.prefix)

    def encode(self, *keys: int | str) -> str:
        if len(keys) != len(self.kinds):
            msg = f"{self.name} id takes {len(self.kinds)} keys, got {len(keys)}"
            raise MalformedIdentifierError(msg)
        parts = []
        for kind, key in zip(self.kinds, keys, strict=True):
            if kind is int:
                parts.append(encode_plain_id(key))  # type: ignore[arg-type]
            elif isinstance(key, str):
                parts.append(key)
            else:
                msg = f"{self.name} id expects a text key, got {key!r}"
                raise MalformedIdentifierError(msg)
        return self.prefix + KEY_DELIMITER.join(parts)

    def decode(self, text: str) -> tuple[int | str, ...]:
        if not self.matches(text):
            msg = f"Not a {self.name} id: {text!r}"
            raise MalformedIdentifierError(msg)
        parts = text[len(self.prefix) :].split(KEY_DELIMITER, len(self.kinds) - 1)
        if len(parts) != len(self.kinds):
            msg = f"Truncated {self.name} id: {text!r}"
            raise MalformedIdentifierError(msg)
        keys: list[int | str] = []
        for kind, part in zip(self.kinds, parts, strict=True):
            if kind is int:
                if not _CANONICAL_INT.fullmatch(part):
                    msg = f"Bad integer key {part!r} in {self.name} id {text!r}"
                    raise MalformedIdentifierError(msg)
                keys.append(int(part))
            else:
                keys.append(part)
        return tuple(keys)


FOLDER = CompoundShape("mf", (int,), "folder")
ARTIST = CompoundShape("ar", (int,), "artist")
ALBUM = CompoundShape("al", (int,), "album")
EPISODE = CompoundShape("ep", (int,), "podcast episode")
GENRE = CompoundShape("g", (str,), "genre")
FOLDER_GENRE = CompoundShape("fg", (int, str), "folder genre")
FOLDER_ARTIST = CompoundShape("far", (int, int), "folder artist")
FOLDER_ALBUM = CompoundShape("fal", (int, int), "folder album")
GENRE_ALBUM = CompoundShape("ga", (int, str), "genre album")
FOLDER_GENRE_ALBUM = CompoundShape("fga", (int, int, str), "folder genre album")

ALL_SHAPES: tuple[CompoundShape, ...] = (
    FOLDER,
    ARTIST,
    ALBUM,
    EPISODE,
    GENRE,
    FOLDER_GENRE,
    FOLDER_ARTIST,
    FOLDER_ALBUM,
    GENRE_ALBUM,
    FOLDER_GENRE_ALBUM,
)


@dataclass(frozen=True)
class DecodedId:
    """Result of decode_item_id: the shape, its keys, and whether it was tagged."""

    shape: CompoundShape
    keys: tuple[int | str, ...]
    tagged: bool = True

    def encode(self) -> str:
        if self.tagged:
            return self.shape.encode(*self.keys)
        return encode_plain_id(self.keys[0])  # type: ignore[arg-type]

    @property
    def int_key(self) -> int:
        key = self.keys[0]
        if not isinstance(key, int):
            msg = f"{self.shape.name} id has no integer key"
            raise MalformedIdentifierError(msg)
        return key


def decode_item_id(
    item_id: str,
    shapes: tuple[CompoundShape, ...],
    untagged: CompoundShape | None = None,
) -> DecodedId:
    """Decode a compound item id against the shapes a node type accepts.

    Args:
        item_id: Item id part of an object id
        shapes: Tagged shapes accepted by the caller
        untagged: Single-int shape a bare integer stands for, or None if
            the caller accepts no untagged ids

    Raises:
        MalformedIdentifierError: If the id matches none of the shapes
    """
    for shape in shapes:
        if shape.matches(item_id):
            return DecodedId(shape, shape.decode(item_id))
    if untagged is not None and untagged.kinds == (int,) and is_plain_id(item_id):
        return DecodedId(untagged, (int(item_id),), tagged=False)
    accepted = ", ".join(s.prefix for s in shapes) or "none"
    msg = f"Malformed item id {item_id!r} (accepted tags: {accepted})"
    raise MalformedIdentifierError(msg)


__all__ = [
    "ALBUM",
    "ALL_SHAPES",
    "ARTIST",
    "EPISODE",
    "FOLDER",
    "FOLDER_ALBUM",
    "FOLDER_ARTIST",
    "FOLDER_GENRE",
    "FOLDER_GENRE_ALBUM",
    "GENRE",
    "GENRE_ALBUM",
    "SEPARATOR",
    "CompoundShape",
    "DecodedId",
    "decode_address",
    "decode_item_id",
    "decode_plain_id",
    "encode_address",
    "encode_plain_id",
    "is_plain_id",
    "resolve_node_type",
]
