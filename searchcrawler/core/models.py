"""
Domain models for the search crawler console
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Any, Tuple


@dataclass(frozen=True)
class SearchInput:
    """
    Represents a single crawl request collected from the user
    """
    seed: str
    search_terms: Tuple[str, ...]
    link_depth: int
    max_pages_limit: int

    def __post_init__(self):
        """Store search terms as a tuple so the request stays immutable"""
        object.__setattr__(self, 'search_terms', tuple(self.search_terms))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation"""
        return {
            'seed': self.seed,
            'search_terms': list(self.search_terms),
            'link_depth': self.link_depth,
            'max_pages_limit': self.max_pages_limit
        }


@dataclass
class SearchResult:
    """
    Represents the hits found for the search terms on one crawled page
    """
    url: str
    hits_by_word: Dict[str, int] = field(default_factory=dict)

    @property
    def total_hits(self) -> int:
        """Sum of the hits over all search terms"""
        return sum(self.hits_by_word.values())

    def to_csv_row(self, terms: Optional[List[str]] = None) -> List[Any]:
        """
        Build the CSV cells for this result

        Args:
            terms: Column order for the per-term counts. Defaults to the
                result's own terms.

        Returns:
            list: url, one count per term, total hits
        """
        if terms is None:
            terms = list(self.hits_by_word)
        return [self.url] + [self.hits_by_word.get(term, 0) for term in terms] + [self.total_hits]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation"""
        return {
            'url': self.url,
            'hits_by_word': dict(self.hits_by_word),
            'total_hits': self.total_hits
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SearchResult':
        """Build a result from its dictionary representation"""
        hits = data.get('hits_by_word') or {}
        return cls(url=data['url'], hits_by_word={str(k): int(v) for k, v in hits.items()})


@dataclass
class InputOutcome:
    """
    Outcome of an interactive input session
    """
    requests: List[SearchInput] = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class WriteOutcome:
    """
    Outcome of writing results to a CSV file
    """
    path: str
    rows_written: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None
