'''
Parse and format the date representations permitted in ``<lastmod>``.

The Sitemaps protocol refers to the W3C profile of ISO 8601
(https://www.w3.org/TR/NOTE-datetime). Two forms are accepted here: a
complete date (``2005-01-01``) and a complete date plus time with seconds
and a time zone designator (``2004-10-01T18:23:17+00:00``). The parsed value
remembers the textual details that a ``datetime`` cannot, so that formatting
reproduces the original text.

Fractional seconds are written with exactly three digits (milliseconds), so
only a fraction of three digits is reproduced as written: ``17.5Z`` becomes
``17.500Z`` and ``17.123456Z`` becomes ``17.123Z``.
'''
from dataclasses import dataclass
from datetime import date, datetime, timedelta
import re
from typing import Union

import dateutil.parser

from .errors import DateTimeParseError


_DATE_RE = re.compile(r'\d{4}-\d{2}-\d{2}\Z')
_DATETIME_RE = re.compile(
    r'\d{4}-\d{2}-\d{2}[Tt ](?:[01]\d|2[0-3]):\d{2}:\d{2}(?P<fraction>\.\d+)?'
    r'(?P<zone>[Zz]|[+-]\d{2}:\d{2})\Z'
)


@dataclass(frozen=True)
class W3CDateTime:
    '''
    A ``<lastmod>`` value.

    ``value`` is a :class:`datetime.date` for the date-only form or an
    offset-aware :class:`datetime.datetime` for the date-time form.
    ``fractional`` and ``zulu`` record whether the source text had
    fractional seconds and a ``Z`` designator.
    '''
    value: Union[date, datetime]
    fractional: bool = False
    zulu: bool = False

    @classmethod
    def parse(cls, text):
        '''
        Parse a W3C date or date-time.

        :param str text:
        :rtype: W3CDateTime
        :raises DateTimeParseError: If ``text`` matches neither form.
        '''
        text = text.strip()

        if len(text) == 10:
            if not _DATE_RE.match(text):
                raise DateTimeParseError(f'Invalid W3C date: {text!r}')
            try:
                return cls(dateutil.parser.isoparse(text).date())
            except ValueError as exc:
                raise DateTimeParseError(
                    f'Invalid W3C date: {text!r} ({exc})') from exc

        match = _DATETIME_RE.match(text)
        if match is None:
            raise DateTimeParseError(f'Invalid W3C date-time: {text!r}')

        # isoparse() only understands the "T" separator.
        normalized = text[:10] + 'T' + text[11:]
        try:
            value = dateutil.parser.isoparse(normalized)
        except ValueError as exc:
            raise DateTimeParseError(
                f'Invalid W3C date-time: {text!r} ({exc})') from exc

        return cls(
            value,
            fractional=match.group('fraction') is not None,
            zulu=match.group('zone') in ('Z', 'z'),
        )

    @property
    def is_date(self):
        ''' True for the date-only form. '''
        return not isinstance(self.value, datetime)

    def __str__(self):
        if self.is_date:
            return self.value.isoformat()

        text = self.value.replace(tzinfo=None, microsecond=0).isoformat()
        if self.fractional:
            text += '.{:03d}'.format(self.value.microsecond // 1000)
        if self.zulu:
            return text + 'Z'
        return text + _format_offset(self.value.utcoffset())


def _format_offset(offset):
    ''' Format a UTC offset as ``+hh:mm``. '''
    if offset is None:
        offset = timedelta(0)
    sign = '-' if offset < timedelta(0) else '+'
    minutes = abs(int(offset.total_seconds())) // 60
    return '{}{:02d}:{:02d}'.format(sign, minutes // 60, minutes % 60)
