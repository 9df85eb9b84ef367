"""
Output handler that writes search results to CSV files
"""
import os
import logging
from typing import Iterable, List, Optional

import pandas as pd

from .models import SearchResult, WriteOutcome
from ..infrastructure.config import config

logger = logging.getLogger(__name__)


class OutputHandler:
    """
    Writes all results, and the results with the most hits, to CSV files
    """

    def __init__(self, all_data_path: Optional[str] = None, top_data_path: Optional[str] = None,
                 top_entries: Optional[int] = None):
        """
        Initialize the output handler

        Args:
            all_data_path (str): File receiving every result
            top_data_path (str): File receiving the top results
            top_entries (int): Number of top results to write

        Unset arguments fall back to the application configuration.
        """
        self.all_data_path = all_data_path or config.output.all_data_path
        self.top_data_path = top_data_path or config.output.top_data_path
        self.top_entries = config.output.top_entries if top_entries is None else top_entries

    def print_all_data(self, search_data: Iterable[SearchResult]) -> WriteOutcome:
        """
        Write every result, one row per result, in the given order

        Returns:
            WriteOutcome: Where the data went and whether it got there
        """
        outcome = self._write_csv(self.all_data_path, list(search_data))
        if outcome.ok:
            logger.info(f"Data entered: {outcome.rows_written} rows written to {outcome.path}")
        return outcome

    def print_top_data_to_file(self, search_data: Iterable[SearchResult]) -> WriteOutcome:
        """
        Write the results with the highest total hits, best first

        Returns:
            WriteOutcome: Where the data went and whether it got there
        """
        outcome = self._write_csv(self.top_data_path, self.top_results(search_data))
        if outcome.ok:
            logger.info(f"Data of top hits entered: {outcome.rows_written} rows written to {outcome.path}")
        return outcome

    def write_results(self, search_data: Iterable[SearchResult]) -> List[WriteOutcome]:
        """Write both the full and the top results files"""
        search_data = list(search_data)
        return [self.print_all_data(search_data), self.print_top_data_to_file(search_data)]

    def top_results(self, search_data: Iterable[SearchResult]) -> List[SearchResult]:
        """Results sorted by total hits descending, cut to the configured count"""
        ranked = sorted(search_data, key=lambda result: result.total_hits, reverse=True)
        return ranked[:max(self.top_entries, 0)]

    @staticmethod
    def build_frame(search_data: List[SearchResult]) -> pd.DataFrame:
        """
        Tabulate results as url, one column per search term, total hits

        Terms are the union of all results' terms, in first-seen order.
        A term clashing with another column is written as ``term:<term>``.
        """
        terms = []
        for result in search_data:
            for term in result.hits_by_word:
                if term not in terms:
                    terms.append(term)
        taken = {'url', 'total_hits'} | set(terms)
        term_columns = []
        for term in terms:
            column = term
            if column in ('url', 'total_hits'):
                column = f"term:{term}"
                while column in taken:
                    column = f"term:{column}"
                taken.add(column)
            term_columns.append(column)
        columns = ['url'] + term_columns + ['total_hits']
        return pd.DataFrame([result.to_csv_row(terms) for result in search_data], columns=columns)

    def _write_csv(self, path: str, search_data: List[SearchResult]) -> WriteOutcome:
        frame = self.build_frame(search_data)
        try:
            directory = os.path.dirname(path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(path, 'w', newline='', encoding='utf-8') as handle:
                frame.to_csv(handle, index=False)
                handle.flush()
        except OSError as e:
            logger.error(f"Error writing results to {path}: {str(e)}")
            return WriteOutcome(path=path, error=str(e))
        for row in frame.itertuples(index=False):
            logger.debug(f"Written row: {list(row)}")
        return WriteOutcome(path=path, rows_written=len(frame))
