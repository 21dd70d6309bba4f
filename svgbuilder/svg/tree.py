"""Element tree model — the structure every cleaning pass reads and mutates.

Children are Element, Text or Comment nodes. Parent links are weak references
used for traversal only; the child list owns the subtree.
"""

from __future__ import annotations

import re
import weakref
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Union

from svgbuilder.errors import MalformedDocument, NotFound

SVG_NS = "http://www.w3.org/2000/svg"

# Fallback canvas when a root carries no viewBox
_DEFAULT_VIEWBOX = (0.0, 0.0, 800.0, 600.0)
_VIEWBOX_SPLIT_RE = re.compile(r"[\s,]+")
_UNIT_RE = re.compile(r"(px|pt)$")


@dataclass(eq=False)
class Text:
    """Character data leaf."""

    value: str

    @property
    def is_blank(self) -> bool:
        return not self.value.strip()

    def normalized(self) -> str:
        return " ".join(self.value.split())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Text):
            return NotImplemented
        return self.normalized() == other.normalized()

    __hash__ = None  # type: ignore[assignment]


@dataclass
class Comment:
    """Comment leaf."""

    value: str


Node = Union["Element", Text, Comment]


class Element:
    """A tagged node with attributes, ordered children and an optional identifier."""

    def __init__(
        self,
        tag: str,
        attributes: dict[str, str] | None = None,
        children: Iterable[Node] | None = None,
        id: str | None = None,
    ) -> None:
        self.tag = tag
        self.attributes: dict[str, str] = {}
        self.children: list[Node] = []
        self.id = id
        self._parent: weakref.ref[Element] | None = None
        for name, value in (attributes or {}).items():
            self.set(name, value)
        for child in children or ():
            self.append_child(child)

    def __repr__(self) -> str:
        ident = f" id={self.id!r}" if self.id else ""
        return f"<Element {self.tag}{ident} attrs={len(self.attributes)} children={len(self.children)}>"

    # --- Parent / traversal ---

    @property
    def parent(self) -> Element | None:
        return self._parent() if self._parent is not None else None

    @property
    def element_children(self) -> list[Element]:
        return [c for c in self.children if isinstance(c, Element)]

    @property
    def text(self) -> str:
        return "".join(c.value for c in self.children if isinstance(c, Text))

    def has_content(self) -> bool:
        """True if any child is an element or a non-blank text leaf."""
        for child in self.children:
            if isinstance(child, Element):
                return True
            if isinstance(child, Text) and not child.is_blank:
                return True
        return False

    def iter(self) -> Iterator[Element]:
        """Pre-order walk over this element and every descendant element."""
        stack: list[Element] = [self]
        while stack:
            el = stack.pop()
            yield el
            stack.extend(reversed(el.element_children))

    def ancestors(self) -> Iterator[Element]:
        node = self.parent
        while node is not None:
            yield node
            node = node.parent

    def contains(self, other: Element) -> bool:
        """True if ``other`` is this element or one of its descendants."""
        if other is self:
            return True
        return any(a is self for a in other.ancestors())

    # --- Attributes ---

    def get(self, name: str, default: str | None = None) -> str | None:
        if name == "id":
            return self.id if self.id is not None else default
        return self.attributes.get(name, default)

    def set(self, name: str, value: str) -> None:
        if name == "id":
            self.id = str(value)
            return
        self.attributes[name] = str(value)

    def has(self, name: str) -> bool:
        if name == "id":
            return self.id is not None
        return name in self.attributes

    def remove_attribute(self, name: str) -> None:
        if name == "id":
            self.id = None
            return
        self.attributes.pop(name, None)

    # --- Children ---

    def append_child(self, child: Node) -> Node:
        return self.insert_child(len(self.children), child)

    def insert_child(self, index: int, child: Node) -> Node:
        if isinstance(child, Element):
            if child.contains(self):
                raise ValueError(f"Inserting <{child.tag}> under <{self.tag}> would create a cycle")
            old_parent = child.parent
            if old_parent is not None:
                old_parent.remove_child(child)
            child._parent = weakref.ref(self)
        self.children.insert(index, child)
        return child

    def remove_child(self, child: Node) -> Node:
        for i, existing in enumerate(self.children):
            if existing is child:
                del self.children[i]
                if isinstance(child, Element):
                    child._parent = None
                return child
        raise ValueError(f"{child!r} is not a child of <{self.tag}>")

    def replace_child(self, old: Node, new: Node) -> Node:
        index = self.index_of(old)
        self.remove_child(old)
        self.insert_child(index, new)
        return old

    def index_of(self, child: Node) -> int:
        for i, existing in enumerate(self.children):
            if existing is child:
                return i
        raise ValueError(f"{child!r} is not a child of <{self.tag}>")

    def detach(self) -> None:
        parent = self.parent
        if parent is not None:
            parent.remove_child(self)

    # --- Lookup / copy ---

    def find_by_id(self, element_id: str) -> Element:
        for el in self.iter():
            if el.id == element_id:
                return el
        raise NotFound(element_id)

    def clone(self) -> Element:
        """Deep copy. Identifiers are copied verbatim, never re-assigned."""
        copy = self._shallow_copy()
        for child in self.children:
            if isinstance(child, Element):
                copy.append_child(child.clone())
            elif isinstance(child, Text):
                copy.append_child(Text(child.value))
            else:
                copy.append_child(Comment(child.value))
        return copy

    def _shallow_copy(self) -> Element:
        return Element(self.tag, dict(self.attributes), id=self.id)

    # --- Structural equality ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Element):
            return NotImplemented
        if self.tag != other.tag or self.id != other.id or self.attributes != other.attributes:
            return False
        mine = _significant_children(self)
        theirs = _significant_children(other)
        if len(mine) != len(theirs):
            return False
        return all(type(a) is type(b) and a == b for a, b in zip(mine, theirs))

    __hash__ = None  # type: ignore[assignment]


class RootElement(Element):
    """Document root: carries namespace bindings and the nominal canvas."""

    def __init__(
        self,
        tag: str = "svg",
        attributes: dict[str, str] | None = None,
        children: Iterable[Node] | None = None,
        id: str | None = None,
        namespaces: dict[str, str] | None = None,
    ) -> None:
        super().__init__(tag, attributes, children, id)
        # prefix -> URI; "" is the default namespace
        self.namespaces: dict[str, str] = dict(namespaces) if namespaces is not None else {"": SVG_NS}

    @classmethod
    def create(
        cls,
        width: float,
        height: float,
        view_box: tuple[float, float, float, float] | None = None,
    ) -> RootElement:
        """Fresh drawing canvas."""
        vb = view_box or (0.0, 0.0, width, height)
        return cls(
            "svg",
            {
                "width": _fmt(width),
                "height": _fmt(height),
                "viewBox": " ".join(_fmt(v) for v in vb),
            },
        )

    @property
    def view_box(self) -> tuple[float, float, float, float]:
        return parse_view_box(self.attributes.get("viewBox"))

    @property
    def width(self) -> float:
        return _parse_dimension(self.attributes.get("width"), self.view_box[2])

    @property
    def height(self) -> float:
        return _parse_dimension(self.attributes.get("height"), self.view_box[3])

    def _shallow_copy(self) -> RootElement:
        return RootElement(self.tag, dict(self.attributes), id=self.id, namespaces=self.namespaces)

    def __eq__(self, other: object) -> bool:
        result = super().__eq__(other)
        if result is not True or not isinstance(other, RootElement):
            return result
        return self.namespaces == other.namespaces

    __hash__ = None  # type: ignore[assignment]


def check_invariants(root: Element) -> None:
    """Raise MalformedDocument unless ids are unique and parent/child links are consistent."""
    if root.parent is not None:
        raise MalformedDocument(f"Root <{root.tag}> has a parent")

    seen_nodes: set[int] = set()
    seen_ids: set[str] = set()
    stack: list[tuple[Element, Element | None]] = [(root, None)]
    while stack:
        el, expected_parent = stack.pop()
        if id(el) in seen_nodes:
            raise MalformedDocument(f"<{el.tag}> appears more than once in the tree")
        seen_nodes.add(id(el))
        if expected_parent is not None and el.parent is not expected_parent:
            raise MalformedDocument(f"<{el.tag}> parent link does not match its position")
        if el.id:
            if el.id in seen_ids:
                raise MalformedDocument(f"Duplicate id {el.id!r}")
            seen_ids.add(el.id)
        for child in el.children:
            if isinstance(child, Element):
                stack.append((child, el))
            elif not isinstance(child, (Text, Comment)):
                raise MalformedDocument(f"Unexpected child {child!r} in <{el.tag}>")


def parse_view_box(value: str | None) -> tuple[float, float, float, float]:
    """Parse a viewBox string; malformed or missing values fall back to 0 0 800 600."""
    if not value:
        return _DEFAULT_VIEWBOX
    parts = [p for p in _VIEWBOX_SPLIT_RE.split(value.strip()) if p]
    if len(parts) < 4:
        return _DEFAULT_VIEWBOX
    try:
        x, y, w, h = (float(p) for p in parts[:4])
    except ValueError:
        return _DEFAULT_VIEWBOX
    return (x, y, w, h)


def _parse_dimension(value: str | None, fallback: float) -> float:
    if not value:
        return fallback
    try:
        return float(_UNIT_RE.sub("", value.strip()))
    except ValueError:
        return fallback


def _fmt(value: float) -> str:
    """Format a number without a spurious trailing .0."""
    return str(int(value)) if float(value).is_integer() else repr(float(value))


def _significant_children(el: Element) -> list[Node]:
    """Children with adjacent text leaves merged and blank text dropped."""
    merged: list[Node] = []
    for child in el.children:
        if isinstance(child, Text) and merged and isinstance(merged[-1], Text):
            merged[-1] = Text(merged[-1].value + child.value)
        else:
            merged.append(child)
    return [c for c in merged if not (isinstance(c, Text) and c.is_blank)]
