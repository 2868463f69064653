import configparser
import pathlib

from .protocol import MAX_DOCUMENT_BYTES
from .version import __version__


_root = pathlib.Path(__file__).resolve().parent.parent
_DEFAULTS = {
    'fetch': {
        'timeout': '20',
        'user_agent': f'sitemaps/{__version__}',
        'max_bytes': str(MAX_DOCUMENT_BYTES),
    },
    'logging': {
        'level': 'warning',
    },
}


def get_path(relpath):
    ''' Get absolute path to a project-relative path. '''
    return _root / relpath


def get_config():
    '''
    Read the application configuration from the built-in defaults and the
    standard configuration files. Files that do not exist are skipped.

    :rtype: ConfigParser
    '''
    config_dir = get_path("conf")
    config_files = [
        config_dir / "system.ini",
        config_dir / "local.ini",
    ]
    config = configparser.ConfigParser()
    config.optionxform = str
    config.read_dict(_DEFAULTS)
    config.read(config_files)
    return config
