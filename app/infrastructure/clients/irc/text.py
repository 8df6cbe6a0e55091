"""Message splitting for PRIVMSG delivery."""

# RFC 1459 line limit without the trailing CRLF
MAX_LINE_BYTES = 510

# Room for the ":nick!user@host " prefix the server adds when relaying
RELAY_PREFIX_RESERVE = 100

# Smallest chunk that still fits any UTF-8 character
MIN_PAYLOAD_BYTES = 4


def payload_limit(target: str) -> int:
    """Bytes of message text that fit in one PRIVMSG to `target`."""
    overhead = len(f"PRIVMSG {target} :".encode("utf-8"))
    return MAX_LINE_BYTES - RELAY_PREFIX_RESERVE - overhead


def target_fits(target: str) -> bool:
    """True when a PRIVMSG to `target` leaves room for message text."""
    return payload_limit(target) >= MIN_PAYLOAD_BYTES


def split_message(message: str, max_bytes: int) -> list[str]:
    """Split a message into protocol-safe chunks.

    The message is split on line breaks, empty lines are dropped, and each
    remaining line is cut into chunks of at most `max_bytes` UTF-8 bytes
    without breaking a character.
    """
    if max_bytes < MIN_PAYLOAD_BYTES:
        raise ValueError(f"max_bytes must be at least {MIN_PAYLOAD_BYTES}")

    chunks: list[str] = []
    for line in message.splitlines():
        if not line:
            continue
        current: list[str] = []
        size = 0
        for char in line:
            width = len(char.encode("utf-8"))
            if size + width > max_bytes:
                chunks.append("".join(current))
                current = []
                size = 0
            current.append(char)
            size += width
        if current:
            chunks.append("".join(current))
    return chunks
