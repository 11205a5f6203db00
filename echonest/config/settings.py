"""Configuration settings for the EchoNest API client."""

import os

from dotenv import load_dotenv

load_dotenv()

class Config:
    """Centralized configuration."""
    
    # API Endpoints
    API_BASE = "http://developer.echonest.com/api/v4/"
    API_KEY = os.getenv("ECHONEST_API_KEY")
    FORMAT = "json"
    
    # Request Settings
    TIMEOUT = 30  # seconds per HTTP call
    
    # Defaults
    DEFAULT_SIMILAR_RESULTS = 15  # remote accepts 0 < results < 100
    DEFAULT_SIMILAR_START = 0
    
    # Logging / output
    LOGGER_NAME = "echonest"
    RUNS_DIR = "runs"
