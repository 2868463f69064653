'''
Read a sitemaps document without knowing in advance whether it is a sitemap
or a sitemap index.

The input is buffered, the root element's name is found with a quick scan
that stops at the first start tag, and then the whole buffer is handed to the
reader for that kind of document.
'''
import logging

from lxml import etree

from .errors import NotASitemap, UnexpectedEof, XmlSyntaxError
from .reader import (
    CHUNK_SIZE,
    PROLOG_SIZE,
    SITEMAPINDEX,
    URLSET,
    check_encoding,
    iter_chunks,
    local_name,
    make_parser,
)
from . import reader


logger = logging.getLogger(__name__)
_KINDS = {kind.root_tag: kind for kind in (URLSET, SITEMAPINDEX)}


def read(source):
    '''
    Read a sitemap or a sitemap index.

    :param source: Bytes, a string, or a binary file-like object.
    :returns: A ``Sitemap`` for a ``<urlset>`` document or a ``SitemapIndex``
        for a ``<sitemapindex>`` document.
    :raises SitemapError: If the document cannot be read or is invalid.
    '''
    data = b''.join(iter_chunks(source))
    root = sniff_root(data)
    try:
        kind = _KINDS[root]
    except KeyError:
        raise NotASitemap(root) from None
    logger.debug('Root element is <%s>', root)
    return reader.read(kind, data)


def sniff_root(data):
    '''
    Find the local name of a document's root element.

    Only as much of the document as is needed to reach the root start tag is
    parsed.

    :param bytes data: A complete document.
    :rtype: str
    :raises EncodingError: If the document is not UTF-8.
    :raises UnexpectedEof: If the document has no root element.
    :raises XmlSyntaxError: If the XML before the root element is malformed.
    '''
    check_encoding(data[:PROLOG_SIZE])
    parser = make_parser()

    for offset in range(0, len(data), CHUNK_SIZE):
        try:
            parser.feed(data[offset:offset + CHUNK_SIZE])
        except etree.XMLSyntaxError as exc:
            raise XmlSyntaxError(f'Invalid XML: {exc}') from exc
        for event, element in parser.read_events():
            if event == 'start':
                return local_name(element)

    # The parser may hold back the end of the input until it is closed.
    error = None
    try:
        parser.close()
    except etree.XMLSyntaxError as exc:
        error = exc
    for event, element in parser.read_events():
        if event == 'start':
            return local_name(element)

    raise UnexpectedEof('Document has no root element') from error
