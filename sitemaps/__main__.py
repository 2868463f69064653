import argparse
import logging
import sys

from .config import get_config
from .document import read
from .errors import SitemapError
from .fetch import fetch
from .output import COLUMNS, render
from .version import __version__


logger = logging.getLogger('sitemaps')
LOG_LEVELS = ['debug', 'info', 'warning', 'error', 'critical']


def configure_logging(log_level, error_log):
    ''' Set default format and output stream for logging. '''
    log_format = '%(asctime)s [%(name)s] %(levelname)s: %(message)s'
    log_date_format = '%Y-%m-%d %H:%M:%S'
    log_formatter = logging.Formatter(log_format, log_date_format)
    log_level = getattr(logging, log_level.upper())
    log_handler = logging.StreamHandler(sys.stderr)
    log_handler.setFormatter(log_formatter)
    log_handler.setLevel(log_level)
    logger = logging.getLogger()
    logger.addHandler(log_handler)
    logger.setLevel(log_level)
    logging.getLogger('asyncio').setLevel(logging.WARNING)

    if error_log is not None:
        exc_handler = logging.FileHandler(error_log)
        exc_handler.setFormatter(log_formatter)
        exc_handler.setLevel(logging.ERROR)
        logger.addHandler(exc_handler)


def get_args(config, argv=None):
    ''' Parse command line arguments. '''
    arg_parser = argparse.ArgumentParser(prog='sitemaps',
        description='Read data from sitemap.xml files')
    arg_parser.add_argument(
        'path',
        nargs='?',
        default='-',
        help='A file path or HTTP(S) URL, or - for standard input (default: -)'
    )
    arg_parser.add_argument(
        '-l', '--loc',
        action='store_true',
        help='Show the <loc> column'
    )
    arg_parser.add_argument(
        '-m', '--lastmod',
        action='store_true',
        help='Show the <lastmod> column'
    )
    arg_parser.add_argument(
        '-c', '--changefreq',
        action='store_true',
        help='Show the <changefreq> column'
    )
    arg_parser.add_argument(
        '-p', '--priority',
        action='store_true',
        help='Show the <priority> column'
    )
    output_group = arg_parser.add_mutually_exclusive_group()
    output_group.add_argument(
        '-r', '--pretty',
        dest='format',
        action='store_const',
        const='pretty',
        help='Draw a table'
    )
    output_group.add_argument(
        '--csv',
        dest='format',
        action='store_const',
        const='csv',
        help='Output CSV'
    )
    output_group.add_argument(
        '--json',
        dest='format',
        action='store_const',
        const='json',
        help='Output JSON'
    )
    arg_parser.add_argument(
        '-H', '--header',
        action='store_true',
        help='Show column names'
    )
    arg_parser.add_argument(
        '--timeout',
        type=float,
        default=config.getfloat('fetch', 'timeout'),
        help='HTTP timeout in seconds (default: %(default)s)'
    )
    arg_parser.add_argument(
        '--log-level',
        default=config.get('logging', 'level'),
        metavar='LEVEL',
        choices=LOG_LEVELS,
        help='Set logging verbosity (default: %(default)s)'
    )
    arg_parser.add_argument(
        '--error-log',
        help='Copy error logs to the specified file.'
    )
    arg_parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )
    arg_parser.set_defaults(format='plain')
    return arg_parser.parse_args(argv)


def selected_columns(args):
    ''' The columns chosen on the command line, or all of them. '''
    columns = [column for column in COLUMNS if getattr(args, column)]
    return columns or list(COLUMNS)


def main(argv=None):
    ''' Read a sitemap and print its entries. '''
    config = get_config()
    args = get_args(config, argv)
    configure_logging(args.log_level, args.error_log)

    try:
        data = fetch(
            args.path,
            timeout=args.timeout,
            user_agent=config.get('fetch', 'user_agent'),
            max_bytes=config.getint('fetch', 'max_bytes'),
        )
        document = read(data)
    except SitemapError as exc:
        logger.debug('Cannot read %s', args.path, exc_info=True)
        print(f'error: {exc}', file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130

    output = render(document, selected_columns(args), args.format,
        args.header)
    if output:
        print(output)
    return 0


if __name__ == '__main__':
    sys.exit(main())
