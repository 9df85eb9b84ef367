"""
Link normalization for seed URLs entered by the user
"""
import posixpath
import re
import logging
from urllib.parse import urlsplit, urlunsplit

logger = logging.getLogger(__name__)

DEFAULT_SCHEME = 'http'
DEFAULT_PORTS = {'http': 80, 'https': 443}

_SCHEME_RE = re.compile(r'^[a-zA-Z][a-zA-Z0-9+.-]*://')


class LinkNormalizer:
    """
    Brings URLs into a canonical form so equal links compare equal
    """

    def __init__(self, default_scheme: str = DEFAULT_SCHEME):
        self.default_scheme = default_scheme

    def normalize_url(self, url):
        """
        Add a scheme if missing and canonicalize the URL

        Args:
            url (str): URL as entered

        Returns:
            str: Normalized URL, or an empty string for empty input
        """
        if url is None:
            return ''
        url = url.strip()
        if not url:
            return ''

        if not _SCHEME_RE.match(url):
            url = f"{self.default_scheme}://{url}"

        try:
            parts = urlsplit(url)
            port = parts.port
        except ValueError as e:
            # Leave it to the validity check to reject
            logger.debug(f"Could not parse URL {url}: {str(e)}")
            return url

        scheme = parts.scheme.lower()
        host = (parts.hostname or '').lower()
        netloc = f"[{host}]" if ':' in host else host
        if parts.username:
            userinfo = parts.username
            if parts.password:
                userinfo += f":{parts.password}"
            netloc = f"{userinfo}@{netloc}"
        if port is not None and DEFAULT_PORTS.get(scheme) != port:
            netloc = f"{netloc}:{port}"

        return urlunsplit((scheme, netloc, self._normalize_path(parts.path), parts.query, ''))

    @staticmethod
    def _normalize_path(path):
        """Collapse duplicate slashes and resolve dot segments"""
        if not path or path == '/':
            return ''
        trailing = path.endswith('/')
        path = posixpath.normpath(re.sub(r'/{2,}', '/', path))
        if path in ('.', '/'):
            return ''
        # normpath keeps a leading '//'
        path = '/' + path.lstrip('/')
        if path == '/':
            return ''
        if trailing:
            path += '/'
        return path
