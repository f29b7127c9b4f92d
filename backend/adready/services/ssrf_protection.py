"""
SSRF Protection - Refuse URLs that point at private or internal hosts.
"""
import ipaddress
import socket
from urllib.parse import urlparse

from adready.logger import logger


class SSRFProtection:
    """Validates URLs to prevent server-side request forgery."""

    # Private/internal IP ranges to block
    BLOCKED_RANGES = [
        ipaddress.ip_network("10.0.0.0/8"),
        ipaddress.ip_network("172.16.0.0/12"),
        ipaddress.ip_network("192.168.0.0/16"),
        ipaddress.ip_network("127.0.0.0/8"),
        ipaddress.ip_network("169.254.0.0/16"),
        ipaddress.ip_network("0.0.0.0/8"),
        ipaddress.ip_network("::1/128"),
        ipaddress.ip_network("fc00::/7"),
        ipaddress.ip_network("fe80::/10"),
    ]

    # Blocked hostnames
    BLOCKED_HOSTS = {
        "localhost",
        "metadata.google.internal",
        "169.254.169.254",  # cloud metadata
    }

    @classmethod
    def _is_blocked_ip(cls, value: str) -> bool:
        ip = ipaddress.ip_address(value)
        return any(ip in blocked_range for blocked_range in cls.BLOCKED_RANGES)

    @classmethod
    def validate_url(cls, url: str) -> tuple[bool, str]:
        """
        Validate a URL before any request is issued to it.

        Returns:
            tuple: (is_valid, error_message)
        """
        parsed = urlparse(url)

        if parsed.scheme not in ("http", "https"):
            return False, f"Invalid scheme: {parsed.scheme}"

        hostname = parsed.hostname
        if not hostname:
            return False, "Could not parse hostname"

        if hostname.lower() in cls.BLOCKED_HOSTS:
            return False, f"Blocked hostname: {hostname}"

        # Literal IPs need no DNS lookup
        try:
            if cls._is_blocked_ip(hostname):
                return False, f"IP {hostname} is in a blocked range"
            return True, ""
        except ValueError:
            pass

        try:
            ip_str = socket.gethostbyname(hostname)
        except (socket.gaierror, UnicodeError):
            # The actual request will fail if the host doesn't exist
            logger.warning(f"DNS resolution failed for {hostname}")
            return True, ""

        if cls._is_blocked_ip(ip_str):
            return False, f"IP {ip_str} is in a blocked range"

        return True, ""
