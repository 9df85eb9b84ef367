"""
Validation and resolution of user-supplied crawl parameters
"""
import re
import ipaddress
import logging
from typing import List, Optional
from urllib.parse import urlsplit

from .models import SearchInput

logger = logging.getLogger(__name__)

ALLOWED_SCHEMES = ('http', 'https')

_LABEL_RE = re.compile(r'^(?!-)[a-z0-9-]{1,63}(?<!-)$', re.IGNORECASE)
_TLD_RE = re.compile(r'^[a-z]{2,63}$', re.IGNORECASE)


class ParametersResolver:
    """
    Checks raw input values and turns them into a SearchInput
    """

    def is_invalid_url(self, url: Optional[str]) -> bool:
        """
        Check whether a (normalized) URL can be used as a crawl seed

        Args:
            url (str): URL to check

        Returns:
            bool: True if the URL is unusable
        """
        if self.is_null_or_empty_string(url) or any(ch.isspace() for ch in url):
            return True
        try:
            parts = urlsplit(url)
            # Raises ValueError for ports that are not 0-65535
            port = parts.port
        except ValueError:
            return True
        if parts.scheme.lower() not in ALLOWED_SCHEMES:
            return True
        if port == 0:
            return True
        return not self._is_valid_host(parts.hostname)

    @staticmethod
    def _is_valid_host(host: Optional[str]) -> bool:
        if not host:
            return False
        if host == 'localhost':
            return True
        try:
            ipaddress.IPv4Address(host)
            return True
        except ValueError:
            pass
        if len(host) > 253:
            return False
        labels = host.rstrip('.').split('.')
        if len(labels) < 2:
            return False
        if not all(_LABEL_RE.match(label) for label in labels):
            return False
        return bool(_TLD_RE.match(labels[-1]))

    @staticmethod
    def is_null_or_empty_string(value: Optional[str]) -> bool:
        """Return True for None or a blank string"""
        return value is None or not value.strip()

    @staticmethod
    def split_search_terms(search_terms_line: Optional[str]) -> List[str]:
        """
        Split a comma-separated line into distinct search terms

        Args:
            search_terms_line (str): Line as entered by the user

        Returns:
            list: Stripped, non-empty terms in entry order
        """
        if not search_terms_line:
            return []
        terms = []
        for term in search_terms_line.split(','):
            term = term.strip()
            if term and term not in terms:
                terms.append(term)
        return terms

    def resolve_params(self, seed: Optional[str], search_terms_line: Optional[str],
                       link_depth: Optional[int], max_pages_limit: Optional[int]) -> Optional[SearchInput]:
        """
        Build a SearchInput from raw values

        Depth and page limit are taken as entered; no positivity check.

        Returns:
            SearchInput or None if any value is missing or unusable
        """
        if self.is_invalid_url(seed):
            logger.debug(f"Cannot resolve parameters, invalid seed: {seed}")
            return None
        terms = self.split_search_terms(search_terms_line)
        if not terms:
            logger.debug("Cannot resolve parameters, no search terms given")
            return None
        if link_depth is None or max_pages_limit is None:
            logger.debug("Cannot resolve parameters, link depth or max pages limit missing")
            return None
        return SearchInput(
            seed=seed,
            search_terms=terms,
            link_depth=link_depth,
            max_pages_limit=max_pages_limit
        )
