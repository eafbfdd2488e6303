from conftest import body_statements

from seer.models.ast_models import Signature
from seer.statements import describe_signature, describe_statement

SNIPPET = """
    package p

    func f(xs []int) int {
        a, b := 1, 2
        total = a + b
        var z int
        fmt.Println(a)
        if err := check(); err != nil {
            return 0
        }
        for i := 0; i < 10; i++ {
        }
        for z < 5 {
        }
        for {
        }
        for _, v := range xs {
        }
        return z
    }
"""


def describe_all(indexer):
    source, statements = body_statements(indexer, SNIPPET)
    return [describe_statement(source, s) for s in statements]


def test_describe_each_statement_kind(indexer):
    assert describe_all(indexer) == [
        "Assignment: a b = 1 2",
        "Assignment: total = a + b",
        "Declaration: var z int",
        "Expression: fmt.Println(a)",
        "If Condition: err != nil",
        "For Loop: Init: i := 0; Cond: i < 10; Post: i++",
        "For Loop: Init: <nil>; Cond: z < 5; Post: <nil>",
        "For Loop: Init: <nil>; Cond: <nil>; Post: <nil>",
        "for _, v := range xs {\n    }",
        "return z",
    ]


def test_describe_none():
    assert describe_statement(b"", None) == "<nil>"


def test_describe_signature():
    sig = Signature(parameters=("a, b int",), results=("int",))
    assert describe_signature(sig) == "Parameters: a, b int | Returns: int"


def test_describe_signature_without_results_or_params():
    assert describe_signature(Signature()) == "Parameters: "


def test_describe_generic_signature():
    sig = Signature(type_parameters=("T any",), parameters=("xs []T",), results=("[]T",))
    assert describe_signature(sig) == "Type Parameters: T any | Parameters: xs []T | Returns: []T"
