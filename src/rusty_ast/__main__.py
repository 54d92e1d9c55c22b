"""Run the rusty-ast command line: ``python -m rusty_ast``."""

import sys

from rusty_ast.cli import main

sys.exit(main())
