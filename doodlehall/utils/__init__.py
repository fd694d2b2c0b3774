"""Utility functions for the Doodlehall server."""


def normalize_url_path(value: str) -> str:
    """
    Normalize a configured URL prefix to '' or '/segment[/segment...]'.

    'game', '/game/' and ' /game ' all become '/game'; '', '/' and '//' become ''.
    """
    segments = [segment for segment in value.strip().split("/") if segment]
    if not segments:
        return ""
    return "/" + "/".join(segments)


def join_url_path(*parts: str) -> str:
    """Join URL path pieces with single slashes, always starting with '/'."""
    segments = []
    for part in parts:
        segments.extend(segment for segment in part.split("/") if segment)
    return "/" + "/".join(segments)
