'''
The model of a sitemap index: a ``<sitemapindex>`` document that lists other
sitemap documents.
'''
from dataclasses import dataclass, field
from typing import List, Optional

from .entry import SitemapsDocument, format_optional, validate_loc
from .w3c_datetime import W3CDateTime


@dataclass(frozen=True)
class SitemapIndexEntry:
    ''' A ``<sitemap>`` element. '''
    loc: str
    last_mod: Optional[W3CDateTime] = None

    def __post_init__(self):
        validate_loc(self.loc)

    def to_dict(self):
        ''' Convert to a dictionary of formatted strings. '''
        return {
            'loc': self.loc,
            'lastmod': format_optional(self.last_mod, None),
        }


@dataclass
class SitemapIndex(SitemapsDocument):
    ''' A sitemap index, which has ``<sitemapindex>`` as its root element. '''
    entries: List[SitemapIndexEntry] = field(default_factory=list)
    namespace: str = ''
    schema_instance: Optional[str] = None
    schema_location: Optional[str] = None

    ROOT_TAG = 'sitemapindex'
    ENTRY_TAG = 'sitemap'

    @classmethod
    def read_from(cls, source):
        '''
        Read a sitemap index from ``source``.

        :param source: Bytes, a string, or a binary file-like object.
        :rtype: SitemapIndex
        :raises SitemapError: If the document is not a valid sitemap index.
        '''
        # The reader imports this module.
        from .reader import SITEMAPINDEX, read
        return read(SITEMAPINDEX, source)
