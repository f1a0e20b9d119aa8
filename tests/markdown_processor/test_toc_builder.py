"""Tests for the table of contents builder."""

from src.markdown_processor.section_extractor import SectionExtractor
from src.markdown_processor.toc_builder import TocBuilder


def _toc(content):
    sections = SectionExtractor().extract_sections(content)
    return sections, TocBuilder().build_table_of_contents(sections)


class TestTocBuilder:
    """Test the TocBuilder component."""

    def test_nested_outline(self):
        """Test building hierarchical structure."""
        _, toc = _toc("# Main\n## One\n### One.One\n### One.Two\n## Two\n### Two.One")

        assert len(toc) == 1
        main = toc[0]
        assert main.heading == "Main"
        assert [c.heading for c in main.children] == ["One", "Two"]
        assert [c.heading for c in main.children[0].children] == ["One.One", "One.Two"]
        assert [c.heading for c in main.children[1].children] == ["Two.One"]

    def test_skipped_level_nests_under_nearest_ancestor(self):
        """Test #A, ###B, ##C: B and C are both children of A."""
        _, toc = _toc("# A\n\n### B\n\n## C")

        assert [n.heading for n in toc] == ["A"]
        a = toc[0]
        assert [(c.heading, c.level) for c in a.children] == [("B", 3), ("C", 2)]
        assert a.children[0].children == []

    def test_multiple_roots(self):
        _, toc = _toc("# A\n## A1\n# B")

        assert [n.heading for n in toc] == ["A", "B"]
        assert [c.heading for c in toc[0].children] == ["A1"]

    def test_deeper_first_heading(self):
        """Test that a shallower heading after a deeper one becomes a sibling root."""
        _, toc = _toc("## X\n# Y\n## Z")

        assert [n.heading for n in toc] == ["X", "Y"]
        assert [c.heading for c in toc[1].children] == ["Z"]

    def test_node_count_matches_sections(self):
        sections, toc = _toc("# A\n### B\n## C\n#### D\n# E\n###### F")

        builder = TocBuilder()
        assert builder.count_nodes(toc) == len(sections) == 6
        assert [n.heading for n in builder.flatten(toc)] == ["A", "B", "C", "D", "E", "F"]

    def test_empty(self):
        assert TocBuilder().build_table_of_contents([]) == []

    def test_to_dict(self):
        _, toc = _toc("# Intro Text\n## Next Step")

        assert toc[0].to_dict() == {
            "id": "intro-text",
            "heading": "Intro Text",
            "level": 1,
            "children": [
                {"id": "next-step", "heading": "Next Step", "level": 2, "children": []},
            ],
        }
