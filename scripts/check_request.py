#!/usr/bin/env python3
"""Check raw request input against a spec set.

Usage:
    python scripts/check_request.py scripts/book_search_specs.json --query "term=ruby&format=ebook"
    echo '{"format": "pdf"}' | python scripts/check_request.py scripts/book_search_specs.json
    python scripts/check_request.py scripts/book_search_specs.json --json '{"term": ""}' --log-level DEBUG

Note: the installed `explicit-check` command is equivalent.
"""

import sys
from pathlib import Path

# Add src to path
project_root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(project_root / "src"))

from explicit.cli.check import main


if __name__ == "__main__":
    sys.exit(main())
