"""Message utilities for Switchinator."""

from typing import List

# Discord rejects messages longer than 2000 characters
DISCORD_MAX_MESSAGE_LENGTH = 2000


def split_long_message(text: str, max_length: int = DISCORD_MAX_MESSAGE_LENGTH) -> List[str]:
    """Split a long message into parts that fit within Discord's limit.

    Text at or under the limit is returned unchanged as a single part.
    Longer text is cut just after the last newline, then the last space,
    inside each window; a hard cut is the last resort. Nothing is added or
    removed, so "".join(parts) == text.

    Args:
        text: The message text to split
        max_length: Maximum length per message (default: 2000 for Discord)

    Returns:
        List of message parts, each at most max_length characters
    """
    if len(text) <= max_length:
        return [text]

    parts = []
    remaining = text

    while len(remaining) > max_length:
        chunk = remaining[:max_length]
        split_pos = chunk.rfind('\n') + 1

        if split_pos < max_length // 2:
            split_pos = chunk.rfind(' ') + 1

        if split_pos < max_length // 2:
            split_pos = max_length

        parts.append(remaining[:split_pos])
        remaining = remaining[split_pos:]

    if remaining:
        parts.append(remaining)

    return parts
