"""Table of contents builder for nesting sections by heading level."""

from typing import Iterator, List

from .data_classes import Section, TocNode


class TocBuilder:
    """Folds a flat section list into a nested outline."""

    def build_table_of_contents(self, sections: List[Section]) -> List[TocNode]:
        """
        Build hierarchical table of contents.

        Each section is attached to the nearest preceding section with a
        strictly smaller level; skipped levels are nested, not renumbered.

        Args:
            sections: Sections in document order

        Returns:
            Top-level TOC nodes (children of the virtual root)
        """
        root = TocNode(id="", heading="", level=0)
        parent_stack = [root]  # Stack of open ancestors, root at the bottom

        for section in sections:
            node = TocNode(id=section.id, heading=section.heading, level=section.level)

            # Pop parents that are at same or deeper level
            while len(parent_stack) > 1 and parent_stack[-1].level >= section.level:
                parent_stack.pop()

            parent_stack[-1].children.append(node)
            parent_stack.append(node)

        return root.children

    def flatten(self, toc: List[TocNode]) -> Iterator[TocNode]:
        """Yield every node depth-first, in document order."""
        for node in toc:
            yield node
            yield from self.flatten(node.children)

    def count_nodes(self, toc: List[TocNode]) -> int:
        return sum(1 for _ in self.flatten(toc))
