"""
Main entry point for the ai-comments CLI when run as a module.

This allows the CLI to be executed using:
    python -m ai_comments.cli

or the equivalent ``ai-comments`` console script.
"""

from . import main

if __name__ == '__main__':
    main()
