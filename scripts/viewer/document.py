"""In-memory document the engine renders into.

The document has three named slots (navigation, page content, error
message) and a set of page template fragments. Page builders clone a
fragment into the page-content slot, fill its text fields and bind charts
to its containers. The HTML renderer later walks the resulting tree.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Iterator, Mapping
from typing import Any

from constants import Slot


class ContainerNotFound(LookupError):
    """A page template has no element with the requested id."""

    pass


class Element:
    """A node of the document tree.

    Args:
        element_id: Unique id within the page (None for anonymous nodes)
        tag: HTML tag used when rendering
        css_class: Space-separated class names
        text: Text content
        attrs: Extra HTML attributes (href, data-target, ...)
    """

    def __init__(
        self,
        element_id: str | None = None,
        tag: str = "div",
        css_class: str = "",
        text: str = "",
        attrs: dict[str, str] | None = None,
        children: list[Element] | None = None,
    ):
        self.element_id = element_id
        self.tag = tag
        self.css_class = css_class
        self.text = text
        self.attrs = dict(attrs or {})
        self.parent: Element | None = None
        self.children: list[Element] = []
        self.chart: Any = None
        for child in children or []:
            self.append(child)

    def append(self, child: Element) -> Element:
        child.parent = self
        self.children.append(child)
        return child

    def remove(self) -> None:
        """Detach this element (and its subtree) from its parent."""
        if self.parent is not None:
            self.parent.children.remove(self)
            self.parent = None

    def clear(self) -> None:
        """Drop text, children and any bound chart."""
        for child in self.children:
            child.parent = None
        self.children = []
        self.text = ""
        self.chart = None

    def find(self, element_id: str) -> Element | None:
        for element in self.walk():
            if element.element_id == element_id:
                return element
        return None

    def query(self, element_id: str) -> Element:
        """Like ``find`` but raises ContainerNotFound when absent."""
        element = self.find(element_id)
        if element is None:
            raise ContainerNotFound(f"No element with id '{element_id}'")
        return element

    def walk(self) -> Iterator[Element]:
        """Depth-first, pre-order traversal including this element."""
        yield self
        for child in self.children:
            yield from child.walk()

    def clone(self) -> Element:
        """Deep copy of the subtree, detached and without bound charts."""
        twin = Element(
            self.element_id,
            tag=self.tag,
            css_class=self.css_class,
            text=self.text,
            attrs=copy.deepcopy(self.attrs),
        )
        for child in self.children:
            twin.append(child.clone())
        return twin

    def has_class(self, name: str) -> bool:
        return name in self.css_class.split()

    def __repr__(self) -> str:
        return f"<Element({self.tag}#{self.element_id}, children={len(self.children)})>"


TemplateFactory = Callable[[], Element]


class Document:
    """Named slots plus page template fragments.

    Args:
        templates: Template name -> factory building a fresh fragment
    """

    def __init__(self, templates: Mapping[str, TemplateFactory]):
        self.templates = dict(templates)
        self.slots = {
            Slot.NAVIGATION: Element(Slot.NAVIGATION, tag="nav"),
            Slot.PAGE_CONTENT: Element(Slot.PAGE_CONTENT, tag="main"),
            Slot.ERROR_MESSAGE: Element(Slot.ERROR_MESSAGE, css_class="error"),
        }

    @property
    def navigation(self) -> Element:
        return self.slots[Slot.NAVIGATION]

    @property
    def page_content(self) -> Element:
        return self.slots[Slot.PAGE_CONTENT]

    @property
    def error_message(self) -> Element:
        return self.slots[Slot.ERROR_MESSAGE]

    def clone_template(self, name: str) -> Element:
        """Fresh copy of the named page fragment.

        Raises:
            ContainerNotFound: If no template has that name
        """
        if name not in self.templates:
            raise ContainerNotFound(f"No page template named '{name}'")
        return self.templates[name]()

    def show_page(self, fragment: Element) -> Element:
        """Replace the page-content slot's children with ``fragment``."""
        self.page_content.clear()
        return self.page_content.append(fragment)
