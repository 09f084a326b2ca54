from typing import List, Optional
from urllib.parse import urlparse

from fastapi import Header, HTTPException, status

from catalog.core.config import get_settings

_LOCAL_HOSTS = ("localhost", "127.0.0.1")


def is_origin_allowed(origin: Optional[str], allowed_domains: List[str]) -> bool:
    """Localhost, an allowed domain, or a subdomain of one."""
    if not origin:
        return False
    try:
        hostname = urlparse(origin).hostname
    except ValueError:
        # e.g. unterminated IPv6 literal "http://[::1"
        return False
    if not hostname:
        return False
    if hostname in _LOCAL_HOSTS:
        return True
    return any(hostname == d or hostname.endswith(f".{d}") for d in allowed_domains)


async def check_origin(origin: Optional[str] = Header(None)) -> None:
    """Allow server-side calls (no Origin header) and browsers from allowed domains."""
    if origin is None:
        return
    if not is_origin_allowed(origin, get_settings().allowed_domain_list):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden. Domain not allowed.")
