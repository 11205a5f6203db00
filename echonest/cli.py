"""Command line interface for EchoNest genre lookups."""

import argparse
import logging
import sys
from typing import List, Optional

import pandas as pd

from echonest.config.settings import Config
from echonest.core.api_client import BaseAPIClient
from echonest.core.exceptions import EchoNestError, TransportError
from echonest.core.genre_client import GenreClient
from echonest.core.params import SearchOptions
from echonest.collectors.genre_collector import GenreCollector
from echonest.storage.file_writer import FileWriter
from echonest.utils.logger import setup_logger, add_file_handler
from echonest.utils.file_utils import make_run_dirs, read_genre_names

class EchoNestCLI:
    """Main CLI application."""
    
    def __init__(self, api_key: Optional[str] = None, logger=None):
        self.logger = logger or setup_logger()
        
        # Initialize API client
        self.api = BaseAPIClient(api_key=api_key, logger=self.logger)
        self.genre = GenreClient(self.api)
        
        # Initialize collector
        self.collector = GenreCollector(self.genre, self.logger)
    
    def collect(self, args) -> pd.DataFrame:
        """Dispatch a parsed subcommand to the collector."""
        if args.command == "list":
            return self.collector.collect_list()
        if args.command == "profile":
            return self.collector.collect_profiles(read_genre_names(args.names),
                                                   args.bucket)
        if args.command == "similar":
            return self.collector.collect_similar(args.name, args.results,
                                                  args.start, args.bucket)
        if args.command == "artists":
            return self.collector.collect_artists(args.name)
        if args.command == "search":
            options = SearchOptions(name=args.name, bucket=args.bucket,
                                    limit=args.limit or None,
                                    results=args.results)
            return self.collector.collect_search(options)
        raise ValueError(f"Unknown command: {args.command}")
    
    def run(self, args) -> int:
        """Main execution method."""
        writer = None
        if args.out:
            run_dir, log_path = make_run_dirs(args.out)
            add_file_handler(self.logger, log_path)
            writer = FileWriter(run_dir, self.logger)
            self.logger.info("batch dir : %s", run_dir)
        
        try:
            df = self.collect(args)
        except (EchoNestError, TransportError) as e:
            self.logger.error("❌ %s failed: %s", args.command, str(e)[:500])
            return 1
        
        self.logger.info("%s: %d rows", args.command, len(df))
        if writer:
            stem = f"genre-{args.command}"
            writer.write_frame(stem, df)
            writer.write_json(stem, df)
        else:
            print(df.to_string(index=False) if not df.empty else "No results.")
        return 0

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="EchoNest genre lookups")
    parser.add_argument("--api-key", default=None,
                        help="API key (default: $ECHONEST_API_KEY)")
    parser.add_argument("--out", default=None,
                        help="Write CSV/JSON into a timestamped run dir here")
    parser.add_argument("--debug", action="store_true")
    
    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("list", help="List all genres")
    
    profile = sub.add_parser("profile", help="Profile one or more genres")
    profile.add_argument("names", help="Comma-separated names or a CSV file")
    profile.add_argument("--bucket", action="append",
                         choices=["description", "urls"])
    
    similar = sub.add_parser("similar", help="Genres similar to NAME")
    similar.add_argument("name")
    similar.add_argument("--results", type=int, default=Config.DEFAULT_SIMILAR_RESULTS)
    similar.add_argument("--start", type=int, default=Config.DEFAULT_SIMILAR_START)
    similar.add_argument("--bucket", action="append",
                         choices=["description", "urls"])
    
    artists = sub.add_parser("artists", help="Top artists of NAME")
    artists.add_argument("name")
    
    search = sub.add_parser("search", help="Search genres")
    search.add_argument("--name", default=None)
    search.add_argument("--bucket", action="append",
                        choices=["description", "urls"])
    search.add_argument("--limit", action="store_true")
    search.add_argument("--results", type=int, default=None)
    return parser

def main(argv: Optional[List[str]] = None) -> int:
    """Entry point."""
    args = build_parser().parse_args(argv)
    
    # Configure logging level
    logger = setup_logger(level=logging.DEBUG if args.debug else logging.INFO)
    
    cli = EchoNestCLI(api_key=args.api_key, logger=logger)
    return cli.run(args)

if __name__ == "__main__":
    sys.exit(main())
