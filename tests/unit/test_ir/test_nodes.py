"""
Unit tests for term nodes.

This module tests the term classes and helpers defined in formula.ir.nodes.
"""

import pytest
from formula.ir import (
    Term, AtomTerm, CompoundTerm, compound, render, format_tree, depth
)


class TestAtomTerm:
    """Tests for AtomTerm nodes."""

    def test_basic_name(self):
        node = AtomTerm(name="Foo")
        assert node.name == "Foo"
        assert isinstance(node, Term)

    def test_variant_checks(self):
        node = AtomTerm("Foo")
        assert node.is_atom()
        assert not node.is_compound()

    def test_arity_is_zero(self):
        assert AtomTerm("Foo").arity == 0

    def test_has_no_arguments_slot(self):
        assert not hasattr(AtomTerm("Foo"), "args")

    def test_immutability(self):
        node = AtomTerm("Foo")
        with pytest.raises(AttributeError):
            node.name = "Bar"

    def test_base_class_is_abstract(self):
        """Test that only the two concrete variants can be created."""
        with pytest.raises(TypeError):
            Term()


class TestCompoundTerm:
    """Tests for CompoundTerm nodes."""

    def test_basic(self):
        node = CompoundTerm("Foo", (AtomTerm("A"), AtomTerm("B")))
        assert node.operator == "Foo"
        assert node.arguments == (AtomTerm("A"), AtomTerm("B"))
        assert node.arity == 2

    def test_variant_checks(self):
        node = CompoundTerm("Foo")
        assert node.is_compound()
        assert not node.is_atom()

    def test_zero_arguments(self):
        node = CompoundTerm("Foo")
        assert node.arguments == ()
        assert node.arity == 0

    def test_list_arguments_become_tuple(self):
        node = CompoundTerm("Foo", [AtomTerm("A")])
        assert node.args == (AtomTerm("A"),)

    def test_immutability(self):
        node = CompoundTerm("Foo")
        with pytest.raises(AttributeError):
            node.op = "Bar"

    def test_equality_and_hashing(self):
        a = compound("Foo", "A", compound("Bar"))
        b = CompoundTerm("Foo", (AtomTerm("A"), CompoundTerm("Bar", ())))
        assert a == b
        assert len({a, b}) == 1

    def test_not_equal_to_atom(self):
        assert CompoundTerm("Foo") != AtomTerm("Foo")

    def test_compound_helper_mixes_terms_and_strings(self):
        node = compound("Foo", "A", AtomTerm("B"))
        assert node.arguments == (AtomTerm("A"), AtomTerm("B"))


class TestRender:
    """Tests for rendering terms to text."""

    def test_atom(self):
        assert render(AtomTerm("Foo")) == "Foo"

    def test_empty_compound(self):
        assert render(CompoundTerm("Foo")) == "Foo()"

    def test_compound(self):
        assert render(compound("Foo", "A", "B")) == "Foo(A,B)"

    def test_nested(self):
        term = compound("Ola", "Bom", compound("Dia", "DD", compound("MM"), "AAAA"))
        assert render(term) == "Ola(Bom,Dia(DD,MM(),AAAA))"

    def test_str_matches_render(self):
        term = compound("Foo", compound("Bar", "A"))
        assert str(term) == render(term) == "Foo(Bar(A))"

    def test_none_renders_as_none(self):
        assert render(None) is None

    def test_custom_settings(self, bracket_settings):
        term = compound("Foo", "A", compound("Bar"))
        assert render(term, bracket_settings) == "Foo[A;Bar[]]"

    def test_non_term_rejected(self):
        with pytest.raises(TypeError):
            render(compound("Foo", object()))


class TestFormatTree:
    """Tests for the indented tree view."""

    def test_atom(self):
        assert format_tree(AtomTerm("A")) == "A"

    def test_nested(self):
        term = compound("Foo", "A", compound("Bar", "B"), compound("Baz"))
        assert format_tree(term) == "\n".join([
            "Foo/3",
            "  A",
            "  Bar/1",
            "    B",
            "  Baz/0",
        ])

    def test_custom_indent(self):
        assert format_tree(compound("Foo", "A"), indent="\t") == "Foo/1\n\tA"


class TestDepth:
    """Tests for term depth."""

    def test_atom(self):
        assert depth(AtomTerm("A")) == 1

    def test_empty_compound(self):
        assert depth(CompoundTerm("Foo")) == 1

    def test_nested(self):
        assert depth(compound("Foo", "A", compound("Bar", compound("Baz", "B")))) == 4
