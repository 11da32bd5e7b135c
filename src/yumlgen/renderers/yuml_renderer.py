"""
yUML renderer - Resolves class diagram fragments to image URLs via the yUML service.

The fragment is posted as the ``dsl_text`` form field to
``{base_uri}{style}/class/``. The service answers with a file name such as
``a1b2c3.png``; the diagram URL is the host followed by the part before the
first dot.
"""

from typing import Optional
import requests
import logging

from yumlgen.cache import ExpiringCache, UriCache
from yumlgen.config import DEFAULT_BASE_URI, DEFAULT_CACHE_TTL, DEFAULT_IMAGE_HOST
from yumlgen.diagram_model import DiagramStyle

log = logging.getLogger(__name__)


class YumlServerError(Exception):
    """Raised when yUML server request fails."""

    pass


class YumlClient:
    """HTTP client for yUML server communication."""

    def __init__(self, base_uri: str = DEFAULT_BASE_URI, image_host: str = DEFAULT_IMAGE_HOST, timeout: int = 30):
        """
        Initialize yUML client.

        :param base_uri: Base URL of the diagram endpoint (e.g., https://yuml.me/diagram/)
        :param image_host: Prefix of returned diagram URLs (e.g., https://yuml.me/)
        :param timeout: Request timeout in seconds
        """
        self.base_uri = base_uri.rstrip("/") + "/"
        self.image_host = image_host.rstrip("/") + "/"
        self.timeout = timeout

    def post_class_diagram(self, fragment: str, style: DiagramStyle) -> str:
        """
        Send a class diagram fragment to the server and get the diagram URL back.

        :param fragment: yUML class diagram DSL
        :param style: diagram style
        :return: diagram URL
        :raises YumlServerError: If server request fails or the response is malformed
        """
        url = f"{self.base_uri}{style.settings_fragment()}/class/"
        try:
            response = requests.post(url, data={"dsl_text": fragment}, timeout=self.timeout)
        except requests.exceptions.Timeout as e:
            raise YumlServerError(f"yUML server request timed out after {self.timeout} seconds") from e
        except requests.exceptions.ConnectionError as e:
            raise YumlServerError(f"Failed to connect to yUML server at {self.base_uri}: {e}") from e
        except requests.exceptions.RequestException as e:
            raise YumlServerError(f"yUML server request failed: {e}") from e

        if response.status_code != 200:
            raise YumlServerError(f"yUML server returned HTTP {response.status_code}: {response.text}")

        result = response.text
        log.debug(f"yUML server returned '{result}'")
        if "." not in result:
            raise YumlServerError(f"Unexpected yUML server response: {result!r}")
        return self.image_host + result[: result.index(".")]


class DiagramUriResolver:
    """Resolves fragments to diagram URLs, consulting a cache first."""

    def __init__(
        self,
        client: Optional[YumlClient] = None,
        cache: Optional[UriCache] = None,
        ttl: float = DEFAULT_CACHE_TTL,
    ):
        """
        Initialize the resolver.

        :param client: yUML client
        :param cache: cache keyed by fragment, a fresh in-memory cache by default
        :param ttl: lifetime of cache entries in seconds
        """
        self.client = client if client is not None else YumlClient()
        self.cache = cache if cache is not None else ExpiringCache()
        self.ttl = ttl

    def resolve(self, fragment: str, style: Optional[DiagramStyle] = None) -> str:
        """
        Resolve a fragment to a diagram URL.

        The cache key is the fragment alone, so a cached URL is returned even if
        it was rendered with a different style.

        :param fragment: yUML class diagram DSL
        :param style: diagram style
        :return: diagram URL
        :raises YumlServerError: If the fragment is not cached and the server request fails
        """
        cached = self.cache.get(fragment)
        if cached is not None:
            log.debug(f"Using cached yUML uri for '{fragment}': '{cached}'")
            return cached

        try:
            uri = self.client.post_class_diagram(fragment, style if style is not None else DiagramStyle())
        except YumlServerError as e:
            log.error(f"yUML server error: {e}")
            log.error(f"yUML fragment ({len(fragment)} chars)")
            raise

        self.cache.set(fragment, uri, self.ttl)
        return uri
