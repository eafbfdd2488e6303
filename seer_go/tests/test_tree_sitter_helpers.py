from conftest import first_function

from seer.tree_sitter_helpers import (
    NIL,
    comment_text,
    leading_comments,
    node_point,
    render,
    render_field_list,
)


def test_render_none_is_nil_sentinel():
    assert render(b"package p", None) == NIL == "<nil>"


def test_render_slices_source(indexer):
    source, fn = first_function(indexer, """
        package p

        func Add(a, b int) int { return a + b }
    """)
    assert render(source, fn.child_by_field_name("name")) == "Add"
    assert node_point(fn) == (2, 0)


def test_render_field_list_strips_parentheses(indexer):
    source, fn = first_function(indexer, """
        package p

        func (t *T) Foo(a, b int, opts ...string) {}
    """)
    assert render_field_list(source, fn.child_by_field_name("receiver")) == "t *T"
    assert render_field_list(source, fn.child_by_field_name("parameters")) == "a, b int, opts ...string"


def test_render_field_list_empty_and_missing(indexer):
    source, fn = first_function(indexer, """
        package p

        func Foo() {}
    """)
    assert render_field_list(source, fn.child_by_field_name("parameters")) == ""
    assert render_field_list(source, None) == ""


def test_comment_text_strips_markers_and_directives(indexer):
    source, fn = first_function(indexer, """
        package p

        // Add sums two ints.
        //
        //
        // It never fails.
        //go:generate stringer
        func Add(a, b int) int { return a + b }
    """)
    comments = leading_comments(fn)
    assert len(comments) == 5
    assert comment_text(source, comments) == "Add sums two ints.\n\nIt never fails.\n"


def test_block_comment_doc(indexer):
    source, fn = first_function(indexer, """
        package p

        /*
        Sub subtracts.
        */
        func Sub(a, b int) int { return a - b }
    """)
    assert comment_text(source, leading_comments(fn)) == "Sub subtracts.\n"


def test_detached_comment_is_not_doc(indexer):
    source, fn = first_function(indexer, """
        package p

        // detached

        func Sub(a, b int) int { return a - b }
    """)
    assert leading_comments(fn) == []
    assert comment_text(source, []) == ""
