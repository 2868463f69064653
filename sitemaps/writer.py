'''
Serialize sitemaps documents as XML.

The output always starts with an XML declaration for UTF-8. The root element
carries the same namespace and schema attributes that the reader captures,
in the order used by the examples at sitemaps.org, so a document that was
read can be written back out unchanged apart from whitespace.
'''
import io
import logging
from xml.sax.saxutils import XMLGenerator

from .errors import IoError
from .protocol import NAMESPACE


logger = logging.getLogger(__name__)


def write(document, sink, indent=None):
    '''
    Write ``document`` as XML to ``sink``.

    :param document: A ``Sitemap`` or ``SitemapIndex``.
    :param sink: A binary or text file-like object.
    :param str indent: If given, each nested element is placed on its own
        line and indented by this string per level.
    :raises IoError: If writing to the sink fails.
    '''
    try:
        _XmlWriter(sink, indent).write_document(document)
    except OSError as exc:
        raise IoError(f'Cannot write sitemap: {exc}') from exc


def to_bytes(document, indent=None):
    '''
    Serialize ``document`` as UTF-8 encoded XML.

    :rtype: bytes
    '''
    buf = io.BytesIO()
    write(document, buf, indent=indent)
    return buf.getvalue()


class _XmlWriter:
    ''' Emits the elements of one document through an ``XMLGenerator``. '''
    def __init__(self, sink, indent):
        self._gen = XMLGenerator(sink, encoding='UTF-8',
            short_empty_elements=False)
        self._indent = indent
        self._depth = 0

    def write_document(self, document):
        ''' Write the declaration, root element, and all entries. '''
        gen = self._gen
        # startDocument() writes the declaration followed by a newline.
        gen.startDocument()
        gen.startElement(document.ROOT_TAG, _root_attributes(document))
        self._depth += 1

        for entry in document.entries:
            self._start(document.ENTRY_TAG)
            self._text_element('loc', entry.loc)
            self._optional_element('lastmod', entry.last_mod)
            self._optional_element('changefreq',
                getattr(entry, 'change_freq', None))
            self._optional_element('priority', getattr(entry, 'priority', None))
            self._end(document.ENTRY_TAG)

        self._depth -= 1
        if document.entries:
            self._newline()
        gen.endElement(document.ROOT_TAG)
        gen.endDocument()
        logger.debug('Wrote <%s> with %d entries', document.ROOT_TAG,
            len(document.entries))

    def _newline(self):
        if self._indent is not None:
            self._gen.ignorableWhitespace('\n' + self._indent * self._depth)

    def _start(self, name):
        self._newline()
        self._gen.startElement(name, {})
        self._depth += 1

    def _end(self, name):
        self._depth -= 1
        self._newline()
        self._gen.endElement(name)

    def _text_element(self, name, text):
        self._newline()
        self._gen.startElement(name, {})
        self._gen.characters(text)
        self._gen.endElement(name)

    def _optional_element(self, name, value):
        if value is not None:
            self._text_element(name, str(value))


def _root_attributes(document):
    '''
    Build the root element's attributes. Optional attributes are omitted
    entirely when they were not present in the model.

    :rtype: dict
    '''
    attrs = dict()
    if document.schema_instance is not None:
        attrs['xmlns:xsi'] = document.schema_instance
    if document.schema_location is not None:
        attrs['xsi:schemaLocation'] = document.schema_location
    attrs['xmlns'] = document.namespace or NAMESPACE
    return attrs
