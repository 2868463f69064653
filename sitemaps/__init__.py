'''
Read and write files in the Sitemaps XML format
(https://www.sitemaps.org/protocol.html).

    >>> import sitemaps
    >>> with open('sitemap.xml', 'rb') as f:
    ...     document = sitemaps.read(f)
    >>> document.locs()
    ['http://www.example.com/']
'''
from .document import read, sniff_root
from .errors import SitemapError
from .protocol import (
    MAX_ENTRIES,
    MAX_URL_LENGTH,
    NAMESPACE,
    SCHEMA_INSTANCE,
)
from .sitemap import ChangeFreq, Priority, Sitemap, UrlEntry
from .sitemap_index import SitemapIndex, SitemapIndexEntry
from .version import __version__
from .w3c_datetime import W3CDateTime


VERSION = __version__
