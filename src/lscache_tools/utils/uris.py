"""Uri helpers"""
from urllib import parse

__all__ = ["join", "host_of"]


def join(*parts: str) -> str:
    """Join uri parts, keeping any path already on the base."""
    if not parts:
        return ""

    base = parts[0] if parts[0].endswith("/") else parts[0] + "/"
    return parse.urljoin(
        base,
        "/".join(part.strip("/") for part in parts[1:]),
    )


def host_of(url: str) -> str | None:
    """Lowercased host of an absolute http(s) url, or None."""
    try:
        split = parse.urlsplit(url.strip())
    except ValueError:
        return None
    if split.scheme not in ("http", "https") or not split.hostname:
        return None
    return split.hostname.lower()
