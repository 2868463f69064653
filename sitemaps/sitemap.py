'''
The model of a sitemap: a ``<urlset>`` document listing page URLs along with
optional metadata about each page.
'''
from dataclasses import dataclass, field
import enum
import math
from typing import List, Optional

from .entry import SitemapsDocument, format_optional, validate_loc
from .errors import (
    ChangeFreqParseError,
    PriorityParseError,
    PriorityTooHigh,
    PriorityTooLow,
)
from .w3c_datetime import W3CDateTime


@dataclass(frozen=True, order=True)
class Priority:
    '''
    The priority of a URL relative to other URLs on the same site.

    The value is a double precision float and the range check is exact, so a
    value such as ``1.00000001`` is too high even though it would round to
    1.0 at single precision.
    '''
    value: float

    def __post_init__(self):
        ''' Validate range. '''
        value = float(self.value)
        if math.isnan(value):
            raise PriorityParseError('Priority cannot be NaN')
        if value < 0.0:
            raise PriorityTooLow(f'Priority {value} is less than 0.0')
        if value > 1.0:
            raise PriorityTooHigh(f'Priority {value} is greater than 1.0')
        object.__setattr__(self, 'value', value)

    @classmethod
    def parse(cls, text):
        '''
        Parse the text of a ``<priority>`` element.

        :param str text:
        :rtype: Priority
        '''
        try:
            value = float(text.strip())
        except ValueError as exc:
            raise PriorityParseError(f'Invalid priority: {text!r}') from exc
        return cls(value)

    def __float__(self):
        return self.value

    def __str__(self):
        return '{:.1f}'.format(self.value)


class ChangeFreq(enum.Enum):
    ''' How frequently the page at a URL is likely to change. '''
    ALWAYS = 'always'
    HOURLY = 'hourly'
    DAILY = 'daily'
    WEEKLY = 'weekly'
    MONTHLY = 'monthly'
    YEARLY = 'yearly'
    NEVER = 'never'

    @classmethod
    def parse(cls, token):
        '''
        Look up a change frequency by its token, ignoring case.

        :param str token:
        :rtype: ChangeFreq
        :raises ChangeFreqParseError: If the token is not recognized.
        '''
        try:
            return cls(token.lower())
        except ValueError:
            raise ChangeFreqParseError(
                f'Unrecognized change frequency: {token!r}') from None

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class UrlEntry:
    ''' A ``<url>`` element. '''
    loc: str
    last_mod: Optional[W3CDateTime] = None
    change_freq: Optional[ChangeFreq] = None
    priority: Optional[Priority] = None

    def __post_init__(self):
        validate_loc(self.loc)

    def to_dict(self):
        ''' Convert to a dictionary of formatted strings. '''
        return {
            'loc': self.loc,
            'lastmod': format_optional(self.last_mod, None),
            'changefreq': format_optional(self.change_freq, None),
            'priority': format_optional(self.priority, None),
        }


@dataclass
class Sitemap(SitemapsDocument):
    ''' A sitemap document, which has ``<urlset>`` as its root element. '''
    entries: List[UrlEntry] = field(default_factory=list)
    namespace: str = ''
    schema_instance: Optional[str] = None
    schema_location: Optional[str] = None

    ROOT_TAG = 'urlset'
    ENTRY_TAG = 'url'

    @classmethod
    def read_from(cls, source):
        '''
        Read a sitemap from ``source``.

        :param source: Bytes, a string, or a binary file-like object.
        :rtype: Sitemap
        :raises SitemapError: If the document is not a valid sitemap.
        '''
        # The reader imports this module.
        from .reader import URLSET, read
        return read(URLSET, source)
