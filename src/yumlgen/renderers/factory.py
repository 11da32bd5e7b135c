"""
Resolver factory - Returns a URI resolver set up from configuration.
"""

from typing import Optional
from yumlgen.cache import UriCache
from yumlgen.config import Configuration
from yumlgen.renderers.yuml_renderer import DiagramUriResolver, YumlClient
import logging

log = logging.getLogger(__name__)


def get_resolver(config: Configuration, cache: Optional[UriCache] = None) -> DiagramUriResolver:
    """
    Get a diagram URI resolver based on configuration.

    :param config: Configuration object
    :param cache: cache shared between resolvers, a new one if not given
    :return: DiagramUriResolver instance
    """
    log.debug(f"Using yUML server at {config.base_uri}")
    client = YumlClient(base_uri=config.base_uri, image_host=config.image_host, timeout=config.timeout)
    return DiagramUriResolver(client=client, cache=cache, ttl=config.cache_ttl)
