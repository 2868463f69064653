'''
A streaming reader for sitemaps documents.

The same routine reads both document kinds. An :class:`EntryKind` describes
what differs between them: the root and entry element names, which child
elements of an entry are recognized, and which classes are built. The input
is fed to an lxml pull parser in chunks, and each entry is released from the
parse tree as soon as it has been converted, so memory use stays bounded by
the model being built.
'''
from dataclasses import dataclass
import enum
import io
import logging
import re

from lxml import etree
import w3lib.encoding

from .errors import (
    EncodingError,
    IoError,
    NotASitemap,
    TooManyUrls,
    UnexpectedEof,
    XmlSyntaxError,
)
from .protocol import MAX_ENTRIES
from .sitemap import ChangeFreq, Priority, Sitemap, UrlEntry
from .sitemap_index import SitemapIndex, SitemapIndexEntry
from .w3c_datetime import W3CDateTime


logger = logging.getLogger(__name__)
CHUNK_SIZE = 64 * 1024
# The XML declaration must be at the very start of a document, so this much
# input is enough to find it.
PROLOG_SIZE = 1024
_XML_DECL_RE = re.compile(br'<\?xml\s(?P<attrs>.*?)\?>', re.DOTALL)
_ENCODING_RE = re.compile(br'''encoding\s*=\s*(["'])(?P<encoding>.*?)\1''')
# How "<" or "<?" starts a document without a byte order mark in encodings
# that are not ASCII compatible.
_WIDE_SIGNATURES = (
    (b'\x00\x00\x00<', 'UTF-32BE'),
    (b'<\x00\x00\x00', 'UTF-32LE'),
    (b'\x00<\x00?', 'UTF-16BE'),
    (b'<\x00?\x00', 'UTF-16LE'),
)


class ElementKind(enum.Enum):
    ''' A child element of an entry that the reader knows how to convert. '''
    LOC = 'loc'
    LASTMOD = 'lastmod'
    CHANGEFREQ = 'changefreq'
    PRIORITY = 'priority'

    @classmethod
    def from_tag(cls, name):
        '''
        Look up the element kind for a local element name.

        :param str name:
        :returns: An element kind, or None if the element is not recognized.
        '''
        try:
            return cls(name)
        except ValueError:
            return None

    @property
    def field_name(self):
        ''' The entry attribute that this element populates. '''
        return _FIELD_NAMES[self]

    def convert(self, text):
        '''
        Convert the text of an element to the value stored in an entry.

        ``<loc>`` text is validated when the entry is built, because the
        whole value is not known until the entry ends.
        '''
        if self is ElementKind.LOC:
            return text
        if self is ElementKind.LASTMOD:
            return W3CDateTime.parse(text)
        if self is ElementKind.CHANGEFREQ:
            return ChangeFreq.parse(text)
        return Priority.parse(text)


_FIELD_NAMES = {
    ElementKind.LOC: 'loc',
    ElementKind.LASTMOD: 'last_mod',
    ElementKind.CHANGEFREQ: 'change_freq',
    ElementKind.PRIORITY: 'priority',
}


@dataclass(frozen=True)
class EntryKind:
    ''' Describes how to read one kind of sitemaps document. '''
    document_cls: type
    entry_cls: type
    elements: frozenset

    @property
    def root_tag(self):
        return self.document_cls.ROOT_TAG

    @property
    def entry_tag(self):
        return self.document_cls.ENTRY_TAG


URLSET = EntryKind(Sitemap, UrlEntry, frozenset(ElementKind))
# The protocol does not define <changefreq> or <priority> for <sitemap>.
SITEMAPINDEX = EntryKind(SitemapIndex, SitemapIndexEntry,
    frozenset((ElementKind.LOC, ElementKind.LASTMOD)))


def read(kind, source):
    '''
    Read a document of the given kind.

    :param EntryKind kind: ``URLSET`` or ``SITEMAPINDEX``.
    :param source: Bytes, a string, or a binary file-like object.
    :returns: A ``Sitemap`` or ``SitemapIndex``, depending on ``kind``.
    :raises SitemapError: If the document cannot be read or is invalid.
    '''
    reader = _StreamReader(kind)
    for chunk in iter_chunks(source):
        reader.feed(chunk)
    return reader.close()


def read_sitemap(source):
    ''' Read a ``<urlset>`` document. '''
    return read(URLSET, source)


def read_sitemap_index(source):
    ''' Read a ``<sitemapindex>`` document. '''
    return read(SITEMAPINDEX, source)


def iter_chunks(source, chunk_size=CHUNK_SIZE):
    '''
    Yield the bytes of ``source`` in chunks.

    :param source: Bytes, a string (which is encoded as UTF-8), or a binary
        file-like object.
    :raises IoError: If reading from a file-like object fails.
    '''
    if isinstance(source, str):
        source = source.encode('utf8')
    if isinstance(source, (bytes, bytearray, memoryview)):
        source = io.BytesIO(source)

    while True:
        try:
            chunk = source.read(chunk_size)
        except OSError as exc:
            raise IoError(f'Cannot read sitemap: {exc}') from exc
        if not chunk:
            break
        if isinstance(chunk, str):
            raise IoError('Sitemap source must be opened in binary mode')
        yield chunk


def check_encoding(prolog):
    '''
    Verify that a document is encoded as UTF-8.

    A byte order mark for any other encoding is rejected, and so is a
    document whose first bytes are a UTF-16 or UTF-32 encoded ``<``. If the
    document has an XML declaration, then it must declare UTF-8 explicitly.
    A document without a declaration is UTF-8 by default.

    :param bytes prolog: The first bytes of the document.
    :raises EncodingError:
    '''
    bom_encoding, bom = w3lib.encoding.read_bom(prolog)
    if bom_encoding is not None:
        if bom_encoding != 'utf-8':
            raise EncodingError(f'Document is encoded as {bom_encoding}, '
                'not UTF-8')
        prolog = prolog[len(bom):]

    for signature, wide_encoding in _WIDE_SIGNATURES:
        if prolog.startswith(signature):
            raise EncodingError(f'Document is encoded as {wide_encoding}, '
                'not UTF-8')
    if b'\x00' in prolog[:4]:
        raise EncodingError('Document is not encoded as UTF-8')

    decl = _XML_DECL_RE.match(prolog)
    if decl is None:
        return

    encoding = _ENCODING_RE.search(decl.group('attrs'))
    if encoding is None:
        raise EncodingError('XML declaration does not declare an encoding')

    declared = encoding.group('encoding').decode('ascii', 'replace')
    if declared.lower() != 'utf-8':
        raise EncodingError(f'Document is encoded as {declared}, not UTF-8')


def make_parser():
    ''' Create a pull parser that never resolves entities or fetches DTDs. '''
    return etree.XMLPullParser(
        events=('start', 'end'),
        resolve_entities=False,
        no_network=True,
        remove_comments=True,
        remove_pis=True,
        collect_ids=False,
    )


def local_name(element):
    ''' Return an element's tag without its namespace. '''
    return etree.QName(element).localname


class _StreamReader:
    '''
    Incrementally parse one document.

    Depth 1 is the root element, depth 2 its entries, and depth 3 the fields
    of an entry. Elements nested any deeper are only seen through the text of
    their depth 3 ancestor.
    '''
    def __init__(self, kind):
        self._kind = kind
        self._parser = make_parser()
        self._prolog = b''
        self._checked_encoding = False
        self._depth = 0
        self._namespace_uri = None
        self._document = None
        self._root_closed = False
        self._fields = None
        self._entry_count = 0

    def feed(self, data):
        '''
        Parse a chunk of the document.

        Nothing is passed to the parser until the prolog has been checked.
        '''
        if not self._checked_encoding:
            self._prolog += data
            if len(self._prolog) < PROLOG_SIZE and b'?>' not in self._prolog:
                return
            data = self._start()

        try:
            self._parser.feed(data)
        except etree.XMLSyntaxError as exc:
            raise XmlSyntaxError(f'Invalid XML: {exc}') from exc
        self._handle_events()

    def close(self):
        '''
        Finish parsing and return the document.

        :raises UnexpectedEof: If the document is incomplete.
        '''
        if not self._checked_encoding:
            prolog = self._start()
            if prolog:
                self.feed(prolog)

        try:
            self._parser.close()
        except etree.XMLSyntaxError as exc:
            raise UnexpectedEof(f'Incomplete document: {exc}') from exc
        self._handle_events()

        if self._document is None:
            raise UnexpectedEof('Document has no root element')
        if not self._root_closed:
            raise UnexpectedEof(
                f'Document ended inside <{self._kind.root_tag}>')

        logger.debug('Read <%s> with %d entries', self._kind.root_tag,
            self._entry_count)
        return self._document

    def _start(self):
        ''' Check the prolog and return it for parsing. '''
        check_encoding(self._prolog)
        self._checked_encoding = True
        prolog, self._prolog = self._prolog, b''
        return prolog

    def _handle_events(self):
        for event, element in self._parser.read_events():
            if event == 'start':
                self._depth += 1
                self._handle_start(element)
            else:
                self._handle_end(element)
                self._depth -= 1

    def _handle_start(self, element):
        if self._depth == 1:
            self._read_root(element)
        elif self._depth == 2 and self._is_entry(element):
            self._fields = dict()

    def _handle_end(self, element):
        depth = self._depth
        if depth == 3 and self._fields is not None:
            self._read_field(element)
        elif depth == 2:
            if self._fields is not None:
                self._add_entry()
                self._fields = None
            _release(element)
        elif depth == 1:
            self._root_closed = True

    def _read_root(self, element):
        ''' Check the root element and capture its attributes. '''
        name = local_name(element)
        if name != self._kind.root_tag:
            raise NotASitemap(name)

        self._namespace_uri = etree.QName(element).namespace
        nsmap = element.nsmap
        schema_instance = nsmap.get('xsi')
        schema_location = None
        if schema_instance is not None:
            schema_location = element.get(
                '{%s}schemaLocation' % schema_instance)

        self._document = self._kind.document_cls(
            namespace=nsmap.get(None, ''),
            schema_instance=schema_instance,
            schema_location=schema_location,
        )

    def _in_document_namespace(self, element):
        return etree.QName(element).namespace == self._namespace_uri

    def _is_entry(self, element):
        return local_name(element) == self._kind.entry_tag and \
            self._in_document_namespace(element)

    def _read_field(self, element):
        ''' Convert a child element of an entry. '''
        if not self._in_document_namespace(element):
            return
        element_kind = ElementKind.from_tag(local_name(element))
        if element_kind is None or element_kind not in self._kind.elements:
            return

        text = ''.join(element.itertext()).strip()
        if element_kind is ElementKind.LOC:
            self._fields['loc'] = self._fields.get('loc', '') + text
        else:
            self._fields[element_kind.field_name] = element_kind.convert(text)

    def _add_entry(self):
        self._entry_count += 1
        if self._entry_count > MAX_ENTRIES:
            raise TooManyUrls(
                f'Document has more than {MAX_ENTRIES} entries')

        fields = self._fields
        loc = fields.pop('loc', '')
        entry = self._kind.entry_cls(loc, **fields)
        self._document.entries.append(entry)


def _release(element):
    ''' Free an element, and any siblings before it, from the parse tree. '''
    element.clear()
    parent = element.getparent()
    if parent is None:
        return
    while element.getprevious() is not None:
        del parent[0]
