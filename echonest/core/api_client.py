"""Base API client with common HTTP functionality."""

import threading
from typing import Any, Dict, Optional

import requests

from echonest.config.settings import Config
from echonest.core.exceptions import MalformedResponseError, RemoteApiError
from echonest.core.params import clean_parameters
from echonest.utils.logger import setup_logger

class BaseAPIClient:
    """
    Executor shared by the resource clients.

    Owns the API key, the option mapping and the HTTP session. Option
    updates are lock-guarded, but the underlying requests.Session is not
    thread-safe, so give each thread its own client.
    """
    
    def __init__(self, api_key: Optional[str] = None,
                 base_url: str = Config.API_BASE,
                 logger=None, session: Optional[requests.Session] = None):
        self.api_key = api_key if api_key is not None else Config.API_KEY
        self.base_url = base_url
        self.logger = logger or setup_logger()
        self.session = session or requests.Session()
        self._options: Dict[str, Any] = {}
        self._lock = threading.Lock()
    
    def set_option(self, key: str, value: Any) -> "BaseAPIClient":
        """Store an option value; any key is accepted."""
        with self._lock:
            self._options[key] = value
        return self
    
    def get_option(self, key: str, default: Any = None) -> Any:
        """Look up an option, returning ``default`` when unset."""
        with self._lock:
            return self._options.get(key, default)
    
    @property
    def options(self) -> Dict[str, Any]:
        with self._lock:
            return dict(self._options)
    
    def build_parameters(self, parameters: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Full query parameters: api key and format plus the call's own."""
        params = clean_parameters(parameters)
        if self.api_key:
            params["api_key"] = self.api_key
        params["format"] = Config.FORMAT
        return params
    
    def get(self, path: str, parameters: Optional[Dict[str, Any]] = None,
            options: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Execute GET request and return the checked response envelope."""
        options = options or {}
        url = f"{self.base_url}{path}"
        params = self.build_parameters(parameters)
        self.logger.debug("GET %s params=%s", url, {k: v for k, v in params.items()
                                                     if k != "api_key"})
        
        r = self.session.get(url, params=params,
                             timeout=options.get("timeout", Config.TIMEOUT))
        try:
            r.raise_for_status()
        except requests.HTTPError:
            # Error statuses still carry an envelope when the API rejected the call
            envelope = self._decode(r, strict=False)
            if envelope is not None and self._status_of(envelope) is not None:
                self.check_status(envelope)
            raise
        
        envelope = self._decode(r)
        self.check_status(envelope)
        return envelope
    
    def check_status(self, envelope: Dict[str, Any]) -> None:
        """Raise when the envelope's status block reports a failure."""
        status = self._status_of(envelope)
        if status is None:
            raise MalformedResponseError("Response envelope has no status block")
        
        code = status.get("code")
        if code != 0:
            raise RemoteApiError(code, status.get("message", ""))
    
    def return_response(self, envelope: Dict[str, Any], field_name: str) -> Any:
        """Extract ``envelope["response"][field_name]``."""
        try:
            return envelope["response"][field_name]
        except (KeyError, TypeError):
            raise MalformedResponseError(
                f"Response is missing the '{field_name}' field", field=field_name
            ) from None
    
    @staticmethod
    def _status_of(envelope: Any) -> Optional[Dict[str, Any]]:
        if not isinstance(envelope, dict):
            return None
        response = envelope.get("response")
        if not isinstance(response, dict):
            return None
        status = response.get("status")
        return status if isinstance(status, dict) else None
    
    @staticmethod
    def _decode(r: requests.Response, strict: bool = True) -> Optional[Dict[str, Any]]:
        try:
            return r.json()
        except ValueError as e:
            if not strict:
                return None
            raise MalformedResponseError(f"Response body is not JSON: {e}") from e
