from datetime import date, datetime, timedelta, timezone

import pytest

from sitemaps.errors import DateTimeParseError
from sitemaps.w3c_datetime import W3CDateTime


def test_date_only():
    ''' A 10 character value is a date. '''
    result = W3CDateTime.parse('2024-02-27')
    assert result.is_date
    assert result.value == date(2024, 2, 27)
    assert result == W3CDateTime(date(2024, 2, 27))
    assert str(result) == '2024-02-27'


def test_midnight_utc():
    result = W3CDateTime.parse('2024-02-27T00:00:00Z')
    assert not result.is_date
    assert result.zulu
    assert not result.fractional
    assert result.value == datetime(2024, 2, 27, tzinfo=timezone.utc)
    assert str(result) == '2024-02-27T00:00:00Z'


@pytest.mark.parametrize('text', [
    '2005-01-01',
    '1999-12-31',
    '2004-10-01T18:23:17+00:00',
    '2004-10-01T18:23:17Z',
    '2004-10-01T18:23:17.123Z',
    '2004-10-01T18:23:17.500+05:30',
    '2004-10-01T18:23:17-08:00',
])
def test_round_trip(text):
    ''' Formatting reproduces the text that was parsed. '''
    assert str(W3CDateTime.parse(text)) == text


def test_offset_is_preserved():
    result = W3CDateTime.parse('2004-10-01T18:23:17-08:00')
    assert result.value.utcoffset() == timedelta(hours=-8)
    assert not result.zulu


def test_zero_offset_is_not_zulu():
    ''' A +00:00 offset is written back as +00:00, not Z. '''
    result = W3CDateTime.parse('2004-10-01T18:23:17+00:00')
    assert not result.zulu
    assert str(result).endswith('+00:00')


def test_lower_case_z():
    result = W3CDateTime.parse('2004-10-01T18:23:17z')
    assert result.zulu
    assert str(result) == '2004-10-01T18:23:17Z'


def test_fraction_is_written_as_milliseconds():
    result = W3CDateTime.parse('2004-10-01T18:23:17.123456Z')
    assert result.fractional
    assert result.value.microsecond == 123456
    assert str(result) == '2004-10-01T18:23:17.123Z'


def test_short_fraction_is_padded():
    result = W3CDateTime.parse('2004-10-01T18:23:17.5Z')
    assert result.value.microsecond == 500000
    assert str(result) == '2004-10-01T18:23:17.500Z'


def test_surrounding_whitespace_is_ignored():
    assert str(W3CDateTime.parse('\n  2005-01-01  \n')) == '2005-01-01'


def test_equal_instants_with_different_notation():
    ''' The notation flags take part in equality. '''
    zulu = W3CDateTime.parse('2004-10-01T18:23:17Z')
    offset = W3CDateTime.parse('2004-10-01T18:23:17+00:00')
    assert zulu.value == offset.value
    assert zulu != offset


@pytest.mark.parametrize('text', [
    '',
    'yesterday',
    '2005/01/01',
    '2005-13-01',
    '2005-02-30',
    '2005-W01-1',
    '2005-01',
    '2004-10-01T18:23:17',
    '2004-10-01T18:23Z',
    '2004-10-01T25:23:17Z',
    '2004-10-01T18:23:17+0000',
    '2004-10-01T24:00:00Z',
])
def test_invalid(text):
    with pytest.raises(DateTimeParseError):
        W3CDateTime.parse(text)
