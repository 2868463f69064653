'''
Behavior shared by sitemaps (``<urlset>``) and sitemap indexes
(``<sitemapindex>``).

Both document kinds hold a list of entries. Every entry has a required
``<loc>`` element, a URL, and an optional ``<lastmod>`` element.
'''
from yarl import URL

from .errors import UrlParseError, UrlValueTooLong
from .protocol import MAX_URL_LENGTH
from . import writer


def validate_loc(loc):
    '''
    Check that ``loc`` is an acceptable ``<loc>`` value.

    :param str loc:
    :returns: ``loc``, unchanged.
    :rtype: str
    :raises UrlValueTooLong: If ``loc`` has more than 2048 characters.
    :raises UrlParseError: If ``loc`` is not an absolute URL.
    '''
    if not loc:
        raise UrlParseError('Missing or empty <loc>')

    if len(loc) > MAX_URL_LENGTH:
        raise UrlValueTooLong(
            f'<loc> has {len(loc)} characters (max {MAX_URL_LENGTH})')

    try:
        url = URL(loc)
    except (TypeError, ValueError) as exc:
        raise UrlParseError(f'Invalid URL in <loc>: {loc!r} ({exc})') from exc

    if not url.scheme or not url.host:
        raise UrlParseError(f'<loc> is not an absolute URL: {loc!r}')

    return loc


def format_optional(value, default=''):
    ''' Format an optional entry field, using ``default`` for None. '''
    return default if value is None else str(value)


class SitemapsDocument:
    '''
    Mixin for the two document classes.

    Subclasses are dataclasses with ``entries``, ``namespace``,
    ``schema_instance`` and ``schema_location`` fields, and set ``ROOT_TAG``
    and ``ENTRY_TAG``.
    '''
    ROOT_TAG = None
    ENTRY_TAG = None

    def locs(self):
        '''
        Collect the ``<loc>`` values of all entries.

        :rtype: list[str]
        '''
        return [entry.loc for entry in self.entries]

    def lastmods(self):
        '''
        Collect the formatted ``<lastmod>`` values of all entries, with an
        empty string for entries that have none.

        :rtype: list[str]
        '''
        return [format_optional(entry.last_mod) for entry in self.entries]

    def to_dict(self):
        ''' Convert to a dictionary of JSON-compatible values. '''
        return {
            'kind': self.ROOT_TAG,
            'namespace': self.namespace,
            'schema_instance': self.schema_instance,
            'schema_location': self.schema_location,
            'entries': [entry.to_dict() for entry in self.entries],
        }

    def write_to(self, sink, indent=None):
        '''
        Serialize this document as XML.

        :param sink: A binary or text file-like object.
        :param str indent: If given, pretty print with this indentation.
        :returns: ``sink``
        '''
        writer.write(self, sink, indent=indent)
        return sink

    def to_bytes(self, indent=None):
        ''' Serialize this document as UTF-8 encoded XML. '''
        return writer.to_bytes(self, indent=indent)
