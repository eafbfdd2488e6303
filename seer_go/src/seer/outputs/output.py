import json

from seer.indexer import GoIndexer
from seer.statements import describe_signature, describe_statement
from seer.tree_sitter_helpers import code_children


# --- Pretty printing & JSON export ------------------------------------------

def print_summary(indexer: GoIndexer, show_body: bool = False):
    """
    Human-friendly printout of what we found, one block per function.
    """
    print("\n========== Analysis Results ==========")
    for key, fn in sorted(indexer.functions.items()):
        print(f"\nFunction: {key}")
        print(f"Documentation: {fn.doc}")
        if fn.recv:
            print(f"Receiver: {fn.recv}")
        print(f"Signature: {describe_signature(fn.signature)}")

        print("Variables:")
        for v in fn.variables:
            print(f"  - Name: {v.name}, Type: {v.type}")

        if show_body and fn.body is not None:
            print("Body:")
            for stmt in code_children(fn.body):
                # newer grammars wrap block contents in a statement_list
                stmts = code_children(stmt) if stmt.type == "statement_list" else [stmt]
                for s in stmts:
                    print(f"  {describe_statement(fn.source, s)}")
        print("----------------------------------------")


def to_json(indexer: GoIndexer) -> str:
    """
    Serializes the function table to JSON, sorted by key.
    """
    out = {
        "packages": sorted(indexer.packages),
        "functions": [
            {
                "key": key,
                "name": fn.name,
                "package": fn.package,
                "path": fn.path,
                "line": fn.line,
                "col": fn.col,
                "doc": fn.doc,
                "receiver": fn.recv,
                "receiverType": fn.recv_type,
                "signature": {
                    "typeParameters": list(fn.signature.type_parameters),
                    "parameters": list(fn.signature.parameters),
                    "results": list(fn.signature.results),
                },
                "variables": [
                    {
                        "name": v.name,
                        "type": v.type,
                        "line": v.line,
                        "col": v.col,
                    } for v in fn.variables
                ],
            }
            for key, fn in sorted(indexer.functions.items())
        ],
    }
    return json.dumps(out, indent=2)
