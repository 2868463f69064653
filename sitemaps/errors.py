'''
Exceptions raised while reading, writing, or fetching sitemaps documents.

Every error derives from :class:`SitemapError`, so a caller that processes
many documents can catch that one class and move on to the next document.
'''


class SitemapError(Exception):
    ''' Base class for all errors raised by this package. '''


class EncodingError(SitemapError):
    ''' The document is not encoded as UTF-8. '''


class NotASitemap(SitemapError):
    ''' The root element is not ``urlset`` or ``sitemapindex``. '''
    def __init__(self, root):
        super().__init__(f'Not a sitemaps document: root element is <{root}>')
        self.root = root


class UnexpectedEof(SitemapError):
    ''' The input ended before a complete document was read. '''


class TooManyUrls(SitemapError):
    ''' The document contains more entries than the protocol allows. '''


class UrlValueTooLong(SitemapError):
    ''' A ``<loc>`` value is longer than the protocol allows. '''


class UrlParseError(SitemapError):
    ''' A ``<loc>`` value is not a valid absolute URL. '''


class PriorityError(SitemapError):
    ''' A priority value is outside of the range 0.0 to 1.0. '''


class PriorityTooLow(PriorityError):
    ''' A priority value is less than 0.0. '''


class PriorityTooHigh(PriorityError):
    ''' A priority value is greater than 1.0. '''


class PriorityParseError(SitemapError):
    ''' A ``<priority>`` value is not a number. '''


class ChangeFreqParseError(SitemapError):
    ''' A ``<changefreq>`` value is not one of the recognized tokens. '''


class DateTimeParseError(SitemapError):
    ''' A ``<lastmod>`` value is neither a W3C date nor a W3C date-time. '''


class XmlSyntaxError(SitemapError):
    ''' The document is not well-formed XML. '''


class IoError(SitemapError):
    ''' Reading from a byte source or writing to a sink failed. '''


class FetchError(IoError):
    ''' A document could not be acquired from its source. '''
