'''
Acquire the raw bytes of a sitemaps document.

A document can come from standard input, a local file, or an HTTP(S) URL.
Documents compressed with gzip (e.g. ``sitemap.xml.gz``) are decompressed.
The size of the result is bounded, because the reader holds the model of the
entire document in memory.
'''
import asyncio
import gzip
import io
import logging
import sys

import aiohttp
from yarl import URL

from .errors import FetchError, IoError
from .protocol import MAX_DOCUMENT_BYTES


logger = logging.getLogger(__name__)
_CHUNK_SIZE = 64 * 1024
_GZIP_MAGIC = b'\x1f\x8b'
_HTTP_SCHEMES = ('http', 'https')


def fetch(source=None, timeout=20, user_agent=None,
        max_bytes=MAX_DOCUMENT_BYTES):
    '''
    Get the bytes of a document.

    :param str source: A URL, a file path, or ``-`` (or None) for standard
        input.
    :param float timeout: Total time allowed for an HTTP request.
    :param str user_agent: The User-Agent header for HTTP requests.
    :param int max_bytes: The maximum size of the (decompressed) document.
    :rtype: bytes
    :raises IoError: If the document cannot be read.
    :raises FetchError: If an HTTP request fails or the document is too large.
    '''
    if source is None or source == '-':
        name = '<stdin>'
        data = _read_stream(sys.stdin.buffer, name, max_bytes)
    elif is_url(source):
        name = source
        data = asyncio.run(_fetch_url(source, timeout, user_agent, max_bytes))
    else:
        name = source
        try:
            with open(source, 'rb') as f:
                data = _read_stream(f, name, max_bytes)
        except OSError as exc:
            raise IoError(f'Cannot read {name}: {exc}') from exc

    if data.startswith(_GZIP_MAGIC):
        logger.debug('Decompressing %s', name)
        data = _decompress(data, name, max_bytes)

    logger.info('Fetched %s (%d bytes)', name, len(data))
    return data


def is_url(source):
    ''' Return True if ``source`` is an absolute HTTP or HTTPS URL. '''
    try:
        url = URL(source)
    except ValueError:
        return False
    return url.scheme in _HTTP_SCHEMES and bool(url.host)


def _check_size(data, name, max_bytes):
    if len(data) > max_bytes:
        raise FetchError(f'{name} is larger than {max_bytes} bytes')


def _read_stream(stream, name, max_bytes):
    ''' Read a binary stream, failing if it exceeds ``max_bytes``. '''
    try:
        data = stream.read(max_bytes + 1)
    except OSError as exc:
        raise IoError(f'Cannot read {name}: {exc}') from exc
    _check_size(data, name, max_bytes)
    return data


def _decompress(data, name, max_bytes):
    ''' Decompress gzip data without inflating more than ``max_bytes``. '''
    try:
        with gzip.GzipFile(fileobj=io.BytesIO(data)) as gz:
            result = gz.read(max_bytes + 1)
    except (OSError, EOFError) as exc:
        raise FetchError(f'Cannot decompress {name}: {exc}') from exc
    _check_size(result, name, max_bytes)
    return result


async def _fetch_url(url, timeout, user_agent, max_bytes):
    '''
    Download a document over HTTP.

    :rtype: bytes
    '''
    session_args = {
        'timeout': aiohttp.ClientTimeout(total=timeout),
    }
    if user_agent:
        session_args['headers'] = {'User-Agent': user_agent}

    try:
        async with aiohttp.ClientSession(**session_args) as session:
            async with session.get(url) as response:
                if not 200 <= response.status < 300:
                    logger.warning('Failed fetching %s: HTTP %d', url,
                        response.status)
                    raise FetchError(
                        f'HTTP {response.status} fetching {url}')
                body = bytearray()
                async for chunk in response.content.iter_chunked(_CHUNK_SIZE):
                    body.extend(chunk)
                    _check_size(body, url, max_bytes)
    except asyncio.TimeoutError as exc:
        raise FetchError(f'Timed out fetching {url}') from exc
    except aiohttp.ClientError as exc:
        # Don't need a full stack trace for these common exceptions.
        msg = '{}: {}'.format(exc.__class__.__name__, exc)
        logger.warning('Failed fetching %s: %s', url, msg)
        raise FetchError(f'Cannot fetch {url}: {msg}') from exc

    return bytes(body)
