import sitemaps.config


LOCAL_INI = '''[fetch]
user_agent = example-bot/1.0

[logging]
level = debug'''


SYSTEM_INI = '''[fetch]
timeout = 30
user_agent = sitemaps/0.1.0'''


def test_get_config(tmp_path, monkeypatch):
    # Point the module's private _root variable at our temp directory.
    monkeypatch.setattr(sitemaps.config, '_root', tmp_path)

    # Create temp configuration files.
    config_dir = tmp_path / 'conf'
    config_dir.mkdir()

    with (config_dir / 'local.ini').open('w') as f:
        f.write(LOCAL_INI)

    with (config_dir / 'system.ini').open('w') as f:
        f.write(SYSTEM_INI)

    # Read configuration.
    config = sitemaps.config.get_config()
    fetch = config['fetch']

    assert fetch['user_agent'] == 'example-bot/1.0'
    assert fetch.getfloat('timeout') == 30
    assert fetch.getint('max_bytes') == 50 * 1024 * 1024
    assert config['logging']['level'] == 'debug'


def test_missing_files_use_defaults(tmp_path, monkeypatch):
    monkeypatch.setattr(sitemaps.config, '_root', tmp_path)
    config = sitemaps.config.get_config()
    assert config.getfloat('fetch', 'timeout') == 20
    assert config.get('fetch', 'user_agent').startswith('sitemaps/')
    assert config.get('logging', 'level') == 'warning'
