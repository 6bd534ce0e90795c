"""Outbound share links for messaging and social networks."""

from __future__ import annotations

from urllib.parse import quote


def _encode(value: str) -> str:
    # Same reserved set as JavaScript's encodeURIComponent.
    return quote(value, safe="-_.!~*'()")


def whatsapp_link(text: str, url: str) -> str:
    """Build a WhatsApp share link with the text followed by the url."""
    return f"https://wa.me/?text={_encode(text)}%20{_encode(url)}"


def facebook_link(url: str) -> str:
    """Build a Facebook sharer link for a url."""
    return f"https://www.facebook.com/sharer/sharer.php?u={_encode(url)}"


def instagram_link(url: str) -> str:
    """Build an Instagram link for a url."""
    return f"https://www.instagram.com/?url={_encode(url)}"
