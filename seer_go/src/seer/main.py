#!/usr/bin/env python3
"""
Tree-sitter Go Indexer
----------------------
Walks a directory of Go code and collects, for every function and method:
- its package and file (the key is "package.Name (path)")
- its doc comment and receiver
- its signature (type parameters, parameters, results)
- the variables assigned in its body, with the text they were assigned

USAGE EXAMPLES
--------------
# Analyze the current directory:
seer

# Analyze a project and print JSON instead of the text report:
seer /path/to/go/project --json

# Keep same-named methods on different receivers apart, and show bodies:
seer /path/to/go/project --key-by-receiver --show-body

DEPENDENCIES
------------
    pip install tree-sitter tree-sitter-go
"""

import argparse
import logging
import sys

from seer.indexer import GoIndexer
from seer.inputs.directory_scanning import index_directory
from seer.outputs.output import print_summary, to_json

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="seer", description="Index the functions of a Go source tree")
    parser.add_argument("dir", nargs="?", default=".", help="Directory path to analyze (default: .)")
    parser.add_argument("--json", action="store_true", help="Print the index as JSON")
    parser.add_argument("--show-body", action="store_true", help="Describe each statement of function bodies")
    parser.add_argument("--key-by-receiver", action="store_true",
                        help="Keep same-named methods on different receiver types apart")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every file analyzed")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    indexer = GoIndexer(key_by_receiver=args.key_by_receiver)
    try:
        count = index_directory(indexer, args.dir)
    except OSError as e:
        logger.error("Cannot walk %s: %s", args.dir, e)
        return 1
    logger.info("Indexed %d file(s), %d function(s)", count, len(indexer.functions))

    if args.json:
        print(to_json(indexer))
    else:
        print_summary(indexer, show_body=args.show_body)
    return 0


if __name__ == "__main__":
    sys.exit(main())
