#!/usr/bin/env python3
"""
ontowalk
Breadth-first crawler for graphs of linked RDF documents
"""

import sys

from ontowalk.cli import main

if __name__ == "__main__":
    sys.exit(main())
