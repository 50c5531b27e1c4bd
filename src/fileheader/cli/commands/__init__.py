# topmark:header:start
#
#   project      : FileHeader
#   file         : __init__.py
#   file_relpath : src/fileheader/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Subcommands of the FileHeader CLI."""
