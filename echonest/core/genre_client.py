"""Genre API client: top artists, profiles and similar genres."""

from typing import Any, Dict, List, Optional, Union

from echonest.config.settings import Config
from echonest.core.api_client import BaseAPIClient
from echonest.core.exceptions import MissingRequiredOptionError
from echonest.core.params import Bucket, SearchOptions, merge_parameters

class GenreClient:
    """
    Client for the genre/* endpoints.

    Several endpoints need a genre name. Set it once with ``set_name`` or
    pass ``name`` explicitly; an explicit name always wins.
    See http://developer.echonest.com/docs/v4/genre.html
    """
    
    def __init__(self, api: Optional[BaseAPIClient] = None, logger=None):
        self.api = api or BaseAPIClient(logger=logger)
    
    def set_option(self, key: str, value: Any) -> "GenreClient":
        self.api.set_option(key, value)
        return self
    
    def get_option(self, key: str, default: Any = None) -> Any:
        return self.api.get_option(key, default)
    
    def set_name(self, name: str) -> "GenreClient":
        """Set the genre name used by artists, profile and similar."""
        return self.set_option("name", name)
    
    def get_artists(self) -> List[Dict]:
        """Top artists for the configured genre."""
        response = self._get_for_genre("genre/artists")
        return self.api.return_response(response, "artists")
    
    def get_list(self) -> List[Dict]:
        """List every genre known to the API."""
        response = self.api.get("genre/list")
        return self.api.return_response(response, "genres")
    
    def get_profile(self, bucket: Bucket = None) -> List[Dict]:
        """
        Basic information about the configured genre.
        
        Args:
            bucket: extra facets per genre, a single value or a list
                ("description", "urls")
        """
        response = self._get_for_genre("genre/profile", {"bucket": bucket})
        return self.api.return_response(response, "genres")
    
    def search(self, options: Union[SearchOptions, Dict[str, Any], None] = None) -> List[Dict]:
        """
        Search genres.
        
        Recognized options include bucket, limit (restrict to the given
        id-space or catalog) and name. A name is not required here.
        """
        if isinstance(options, SearchOptions):
            options = options.to_parameters()
        response = self.api.get("genre/search", options or {})
        return self.api.return_response(response, "genres")
    
    def get_similar(self, results: int = Config.DEFAULT_SIMILAR_RESULTS,
                    start: int = Config.DEFAULT_SIMILAR_START,
                    bucket: Bucket = None) -> List[Dict]:
        """
        Genres similar to the configured one.
        
        ``results`` is documented as 0 < results < 100 but is passed
        through as given; ``start`` is a zero-based offset.
        """
        response = self._get_for_genre("genre/similar", {
            "results": results,
            "start": start,
            "bucket": bucket,
        })
        return self.api.return_response(response, "genres")
    
    def _get_for_genre(self, path: str, parameters: Optional[Dict[str, Any]] = None,
                       options: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Send a GET request for endpoints that require a genre name."""
        parameters = parameters or {}
        if parameters.get("name") is None:
            name = self.get_option("name")
            if not name:
                raise MissingRequiredOptionError(
                    "name",
                    "This operation requires a genre name; call set_name() "
                    "first or pass `name` explicitly",
                )
            parameters = merge_parameters(parameters, {"name": name})
        
        return self.api.get(path, parameters, options)
