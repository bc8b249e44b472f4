# topmark:header:start
#
#   project      : HeaderStamp
#   file         : __init__.py
#   file_relpath : src/headerstamp/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2026 HeaderStamp contributors
#
# topmark:header:end

"""Click subcommands of the HeaderStamp CLI."""
