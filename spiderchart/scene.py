"""
Host layer and element lookup for svgwrite scene trees.

Charts are built from svgwrite elements (see chart_builder). The chart mutates
their attributes in place on every drag step and the view re-serialises the
drawing with tostring(), so only the elements the chart touched ever change.

A Document holds named hosts, the nodes charts are mounted into. Selectors
are minimal: "#id", ".class" or a bare element name.
"""

from typing import Dict, Iterator, List, Optional

from svgwrite.base import BaseElement
from svgwrite.path import Path


def iter_elements(element: BaseElement) -> Iterator[BaseElement]:
    """Depth-first iteration over an element and its descendants."""
    yield element
    for child in element.elements:
        if isinstance(child, BaseElement):
            yield from iter_elements(child)


def matches(element: BaseElement, selector: str) -> bool:
    if selector.startswith('#'):
        return element.attribs.get('id') == selector[1:]
    if selector.startswith('.'):
        return selector[1:] in str(element.attribs.get('class', '')).split()
    return element.elementname == selector


def select_all(root: BaseElement, selector: str) -> List[BaseElement]:
    """All descendants of root (not root itself) matching the selector, in document order."""
    return [el for el in iter_elements(root) if el is not root and matches(el, selector)]


def select(root: BaseElement, selector: str) -> Optional[BaseElement]:
    found = select_all(root, selector)
    return found[0] if found else None


def raise_to_top(parent: BaseElement, element: BaseElement) -> None:
    """Move element to the end of parent so it paints over its siblings."""
    parent.elements.remove(element)
    parent.elements.append(element)


def path_data(path: Path) -> str:
    return ' '.join(str(command) for command in path.commands)


def set_path_data(path: Path, d: str) -> None:
    path.commands = [d]


class Host:
    """A node charts are mounted into, the way a div hosts an inline svg."""

    def __init__(self, host_id: str):
        self.id = host_id
        self.children: List[BaseElement] = []

    def __repr__(self):
        return f"Host({self.id!r}, children={len(self.children)})"

    def mount(self, element: BaseElement) -> BaseElement:
        self.children.append(element)
        return element

    def unmount_all(self, elementname: str) -> List[BaseElement]:
        """Remove every mounted element of the given name and return them."""
        removed = [c for c in self.children if c.elementname == elementname]
        self.children = [c for c in self.children if c.elementname != elementname]
        return removed


class Document:
    """Host registry that charts are rendered into."""

    def __init__(self):
        self.hosts: Dict[str, Host] = {}

    def create_host(self, host_id: str) -> Host:
        return self.hosts.setdefault(host_id, Host(host_id))

    def host(self, selector: str) -> Optional[Host]:
        """The host named by an "#id" selector, or None."""
        if not selector.startswith('#'):
            return None
        return self.hosts.get(selector[1:])

    def select_all(self, selector: str) -> List[BaseElement]:
        """Matching elements across every mounted tree, roots included."""
        found = []
        for host in self.hosts.values():
            for root in host.children:
                found.extend(el for el in iter_elements(root) if matches(el, selector))
        return found

    def select(self, selector: str) -> Optional[BaseElement]:
        found = self.select_all(selector)
        return found[0] if found else None
