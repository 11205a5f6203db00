"""File and directory management utilities."""

import os
from datetime import datetime

import pandas as pd

from echonest.config.settings import Config

def make_run_dirs(base_dir=Config.RUNS_DIR):
    """
    Create a unique run folder: runs/YYYYmmdd_HHMMSS/
    with a nested logs/ folder.
    Returns (run_dir, log_path).
    """
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    run_dir = os.path.join(base_dir, ts)
    log_dir = os.path.join(run_dir, "logs")
    os.makedirs(log_dir, exist_ok=True)
    
    log_path = os.path.join(log_dir, "echonest.log")
    return run_dir, log_path

def read_genre_names(source: str) -> list:
    """Read genre names from a CSV file (``name`` column) or a comma list."""
    if source.endswith(".csv"):
        df = pd.read_csv(source)
        column = df["name"] if "name" in df.columns else df.iloc[:, 0]
        return [str(n).strip() for n in column.dropna().tolist() if str(n).strip()]
    return [n.strip() for n in source.split(",") if n.strip()]
