"""
Input handlers that collect crawl parameters from the user
"""
import sys
import logging
from abc import ABC, abstractmethod
from typing import List, Optional, TextIO

from .models import SearchInput, InputOutcome
from .link_normalizer import LinkNormalizer
from .parameters_resolver import ParametersResolver

logger = logging.getLogger(__name__)

SEED_PROMPT = "Please provide a starting URL (seed) for web crawling."
SEARCH_TERMS_PROMPT = "Please provide search terms separated by commas."
LINK_DEPTH_PROMPT = "Please provide a link depth as a positive integer."
MAX_PAGES_PROMPT = "Please provide a max pages limit as a positive integer."


class InputHandler(ABC):
    """
    Source of crawl requests
    """

    @abstractmethod
    def get_crawling_parameters(self) -> List[SearchInput]:
        """Return the crawl requests supplied by the user"""


class ConsoleInputHandler(InputHandler):
    """
    Handler for user input from a console. Accepts a single search query.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None,
                 normalizer: Optional[LinkNormalizer] = None,
                 resolver: Optional[ParametersResolver] = None):
        """
        Initialize the console input handler

        Args:
            stdin: Stream answers are read from (defaults to sys.stdin)
            stdout: Stream prompts are written to (defaults to sys.stdout)
            normalizer: Normalizer applied to the seed URL
            resolver: Resolver that validates and builds the request
        """
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.normalizer = normalizer or LinkNormalizer()
        self.resolver = resolver or ParametersResolver()
        # Tokens left over from a line holding more than one number
        self._tokens = []

    def get_crawling_parameters(self) -> List[SearchInput]:
        """
        Request user input and process it into SearchInput objects

        Returns:
            list: At most one SearchInput; empty if no usable input was given
        """
        return self.collect().requests

    def collect(self) -> InputOutcome:
        """
        Run the interactive session

        Returns:
            InputOutcome: The resolved requests and the error that aborted
            the session, if any
        """
        seed = None
        search_terms_line = None
        link_depth = None
        max_pages_limit = None
        error = None
        self._tokens = []

        try:
            seed = self._request_seed()
            search_terms_line = self._request_search_terms()
            link_depth = self._request_int(LINK_DEPTH_PROMPT, 'link depth')
            max_pages_limit = self._request_int(MAX_PAGES_PROMPT, 'maxPagesLimit')
        except EOFError as e:
            error = f"Expected input element wasn't found or input was closed: {str(e)}"
            logger.warning(error)
        except UnicodeDecodeError as e:
            error = f"Console input could not be decoded: {str(e)}"
            logger.warning(error)
        except ValueError as e:
            error = f"Invalid number entered: {str(e)}"
            logger.warning(error)
        except OSError as e:
            error = f"Error reading console input: {str(e)}"
            logger.warning(error)

        search_input = self.resolver.resolve_params(seed, search_terms_line, link_depth, max_pages_limit)
        requests = [search_input] if search_input is not None else []
        return InputOutcome(requests=requests, error=error)

    def _prompt(self, message: str) -> str:
        print(message, file=self.stdout, flush=True)
        return self._read_line()

    def _read_line(self) -> str:
        if getattr(self.stdin, 'closed', False):
            raise EOFError("input stream is closed")
        try:
            line = self.stdin.readline()
        except UnicodeDecodeError:
            raise
        except ValueError as e:
            # Closed underneath us
            raise EOFError(str(e)) from e
        if not line:
            raise EOFError("end of input reached")
        return line.rstrip('\r\n')

    def _request_seed(self) -> str:
        # Ask again until the normalized seed passes the validity check
        while True:
            seed = self._prompt(SEED_PROMPT)
            logger.debug(f"User entered seed: {seed}")
            seed = self.normalizer.normalize_url(seed)
            logger.debug(f"Normalized seed: {seed}")
            if not self.resolver.is_invalid_url(seed):
                return seed

    def _request_search_terms(self) -> str:
        while True:
            search_terms_line = self._prompt(SEARCH_TERMS_PROMPT)
            logger.debug(f"User entered search terms: {search_terms_line}")
            if not self.resolver.is_null_or_empty_string(search_terms_line):
                return search_terms_line

    def _request_int(self, message: str, name: str) -> int:
        # Numbers are read as whitespace-separated tokens; blank lines are skipped
        print(message, file=self.stdout, flush=True)
        while not self._tokens:
            self._tokens = self._read_line().split()
        value = int(self._tokens.pop(0))
        logger.debug(f"User entered {name}: {value}")
        return value
