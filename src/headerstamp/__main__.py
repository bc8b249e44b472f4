# topmark:header:start
#
#   project      : HeaderStamp
#   file         : __main__.py
#   file_relpath : src/headerstamp/__main__.py
#   license      : MIT
#   copyright    : (c) 2026 HeaderStamp contributors
#
# topmark:header:end

"""Module entry point for running HeaderStamp via ``python -m headerstamp``.

It delegates directly to :func:`headerstamp.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how HeaderStamp is launched.

Examples:
    Prepend ``LICENSE`` to every PHP file below ``src``::

        python -m headerstamp apply-tagged -f LICENSE --dir src -i '*.php'
"""

from __future__ import annotations

from headerstamp.cli.main import cli

if __name__ == "__main__":
    cli()
