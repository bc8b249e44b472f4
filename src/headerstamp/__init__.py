# topmark:header:start
#
#   project      : HeaderStamp
#   file         : __init__.py
#   file_relpath : src/headerstamp/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 HeaderStamp contributors
#
# topmark:header:end

"""HeaderStamp package.

HeaderStamp prepends a fixed header resource (e.g. a license block) to a batch
of text files, with EOL normalization, header transcoding, optional
modification-time preservation, and a variant that moves a leading
language-open marker (such as ``<?php``) above the header.
"""

from __future__ import annotations
