# topmark:header:start
#
#   project      : HeaderStamp
#   file         : __init__.py
#   file_relpath : src/headerstamp/utils/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 HeaderStamp contributors
#
# topmark:header:end

"""Utility helpers for HeaderStamp."""
