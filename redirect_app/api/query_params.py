"""
Query-string forwarding for redirects.
"""

from typing import Iterable, Tuple
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit


def merge_query_params(url: str, incoming: Iterable[Tuple[str, str]]) -> str:
    """
    Merge incoming query parameters into a destination URL.
    
    Parameters already on the destination are kept unless the incoming
    request supplies the same key, in which case the incoming values win.
    Order: surviving destination params first, then incoming ones.
    """
    incoming = list(incoming)
    if not incoming:
        return url

    parts = urlsplit(url)
    overridden = {key for key, _ in incoming}
    kept = [
        (key, value)
        for key, value in parse_qsl(parts.query, keep_blank_values=True)
        if key not in overridden
    ]
    return urlunsplit(parts._replace(query=urlencode(kept + incoming)))
