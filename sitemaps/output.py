'''
Render the entries of a sitemaps document for display.

Each entry becomes a row and each requested field a column. Field values are
the formatted strings of the model, e.g. ``2005-01-01`` for a ``<lastmod>``
or ``0.8`` for a ``<priority>``.
'''
import csv
import io
import json
import logging

from rich.console import Console
from rich.table import Table
from rich.text import Text

from .entry import format_optional


logger = logging.getLogger(__name__)
COLUMNS = ('loc', 'lastmod', 'changefreq', 'priority')
FORMATS = ('plain', 'pretty', 'csv', 'json')
_FIELDS = {
    'loc': 'loc',
    'lastmod': 'last_mod',
    'changefreq': 'change_freq',
    'priority': 'priority',
}


def render(document, columns=COLUMNS, fmt='plain', header=False):
    '''
    Render a document as text.

    :param document: A ``Sitemap`` or ``SitemapIndex``.
    :param columns: The names of the columns to include, in order. A column
        other than ``loc`` is left out if no entry has a value for it.
    :param str fmt: One of ``FORMATS``. The ``json`` format always contains
        every field.
    :param bool header: Include a header row in ``plain`` and ``pretty``
        output. CSV output always has a header row.
    :rtype: str
    '''
    if fmt == 'json':
        return json.dumps(document.to_dict())

    headers, rows = build_rows(document, columns)
    if fmt == 'csv':
        return _csv(headers, rows)
    if fmt == 'pretty':
        return _pretty(headers, rows, header)
    if fmt == 'plain':
        return _plain(headers, rows, header)
    raise ValueError(f'Unknown output format: {fmt}')


def build_rows(document, columns=COLUMNS):
    '''
    Extract the requested columns from a document's entries.

    :returns: A tuple of (headers, rows).
    :rtype: tuple[list[str], list[list[str]]]
    '''
    headers = list()
    values = list()
    for column in columns:
        try:
            field = _FIELDS[column]
        except KeyError:
            raise ValueError(f'Unknown column: {column}') from None
        # Sitemap index entries have no changefreq or priority.
        column_values = [getattr(entry, field, None)
            for entry in document.entries]
        if column != 'loc' and all(v is None for v in column_values):
            logger.debug('Skipping empty column %s', column)
            continue
        headers.append(column)
        values.append([format_optional(v) for v in column_values])
    rows = [list(row) for row in zip(*values)]
    return headers, rows


def _plain(headers, rows, show_header):
    ''' Render rows as lines of space-aligned columns. '''
    lines = list(rows)
    if show_header:
        lines.insert(0, headers)
    if not lines:
        return ''

    widths = [max(len(line[i]) for line in lines) for i in range(len(headers))]
    return '\n'.join(
        '  '.join(cell.ljust(width) for cell, width in zip(line, widths))
            .rstrip()
        for line in lines
    )


def _pretty(headers, rows, show_header):
    ''' Render rows as a table with borders. '''
    table = Table(show_header=show_header)
    for name in headers:
        table.add_column(name, no_wrap=True)
    for row in rows:
        table.add_row(*(Text(cell) for cell in row))

    widths = [max([len(name)] + [len(row[i]) for row in rows])
        for i, name in enumerate(headers)]
    width = max(80, sum(widths) + 3 * len(widths) + 1)
    console = Console(file=io.StringIO(), width=width, color_system=None)
    console.print(table)
    return console.file.getvalue().rstrip('\n')


def _csv(headers, rows):
    ''' Render rows as CSV with a header row. '''
    out = io.StringIO()
    writer = csv.writer(out, lineterminator='\n')
    writer.writerow(headers)
    writer.writerows(rows)
    return out.getvalue().rstrip('\n')
