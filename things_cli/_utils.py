"""
Shared pure-utility functions for things-cli.

These helpers have no business logic and no side effects.
They are used across models.py, builders.py, and launcher.py.
"""


def _camel_case(snake):
    """Convert ``checklist_items`` to ``checklistItems``."""
    head, *rest = snake.split("_")
    return head + "".join(part.capitalize() for part in rest)


def _mask_token(token):
    """Show only first 6 chars of a token for safe logging."""
    return token[:6] + "..." if len(token) > 6 else token


def _join_lines(values):
    """Join multi-entry content (titles, checklist items, to-dos) with newlines."""
    if not values:
        return ""
    return "\n".join(values)


def _join_commas(values):
    """Join tag-like values with commas."""
    if not values:
        return ""
    return ",".join(values)
