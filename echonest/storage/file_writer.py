"""File storage module for collected data."""

import os
import pandas as pd
from typing import Optional
from echonest.utils.logger import setup_logger

class FileWriter:
    """Handles writing data to files."""
    
    def __init__(self, output_dir: str, logger=None):
        self.output_dir = output_dir
        self.logger = logger or setup_logger()
    
    def write_frame(self, stem: str, df: pd.DataFrame) -> Optional[str]:
        """Write a DataFrame to CSV."""
        if df is None or df.empty:
            return None
        
        filepath = os.path.join(self.output_dir, f"{stem}.csv")
        df.to_csv(filepath, index=False)
        self.logger.info("  ✓ %s → %s (%d rows)", stem, filepath, len(df))
        return filepath
    
    def write_json(self, stem: str, df: pd.DataFrame) -> str:
        """Write a DataFrame to JSON as a list of records."""
        filepath = os.path.join(self.output_dir, f"{stem}.json")
        df.to_json(filepath, orient="records", indent=2, force_ascii=False)
        self.logger.info("  ✓ %s → %s", stem, filepath)
        return filepath
