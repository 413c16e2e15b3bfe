# -*- coding: utf-8 -*-

"""
Main entry point for running docx-markdown from a source checkout.
"""

import sys

from docx_markdown.cli import main

if __name__ == '__main__':
    sys.exit(main())
