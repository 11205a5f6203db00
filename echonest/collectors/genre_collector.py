"""Genre data collection module."""

from typing import Iterable, List, Optional

import pandas as pd

from echonest.core.exceptions import RemoteApiError
from echonest.core.genre_client import GenreClient
from echonest.core.params import Bucket
from echonest.utils.logger import setup_logger

class GenreCollector:
    """Collects genre records into DataFrames."""
    
    def __init__(self, genre_client: GenreClient = None, logger=None):
        self.logger = logger or setup_logger()
        self.genre = genre_client or GenreClient(logger=self.logger)
    
    def collect_list(self) -> pd.DataFrame:
        """Collect every genre name."""
        return pd.DataFrame(self.genre.get_list())
    
    def collect_profiles(self, names: Iterable[str],
                         bucket: Bucket = None) -> pd.DataFrame:
        """Collect profiles for several genres, skipping names the API does not know."""
        rows: List[dict] = []
        for name in names:
            try:
                rows.extend(self.genre.set_name(name).get_profile(bucket))
            except RemoteApiError as e:
                if e.code != RemoteApiError.UNKNOWN_IDENTIFIER:
                    raise
                self.logger.warning("Skipping genre %r: %s", name, str(e)[:200])
        return pd.DataFrame(rows)
    
    def collect_similar(self, name: str, results: int = 15, start: int = 0,
                        bucket: Bucket = None) -> pd.DataFrame:
        """Collect genres similar to ``name``."""
        records = self.genre.set_name(name).get_similar(results, start, bucket)
        df = pd.DataFrame(records)
        if not df.empty:
            df.insert(0, "source", name)
        return df
    
    def collect_artists(self, name: str) -> pd.DataFrame:
        """Collect the top artists of ``name``."""
        df = pd.DataFrame(self.genre.set_name(name).get_artists())
        if not df.empty:
            df.insert(0, "genre", name)
        return df
    
    def collect_search(self, options: Optional[dict] = None) -> pd.DataFrame:
        """Collect genre search results."""
        return pd.DataFrame(self.genre.search(options))
