"""
Tests for the .env generator script
"""

import stat
from dotenv import dotenv_values
from generate_env import EnvGenerator, main


def test_dev_env_file(tmp_path):
    env_file = tmp_path / '.env'

    assert EnvGenerator(dev_mode=True, env_file=env_file).generate(force=True) is True

    values = dotenv_values(env_file)
    assert values['DB_HOST'] == 'localhost'
    assert values['DB_PORT'] == '3307'
    assert values['DB_USERNAME'] == 'root'
    assert values['DB_PASSWORD'] == 'order-dev-password'
    assert values['DB_NAME'] == 'order_db'
    assert values['PORT'] == '5003'
    assert values['ORDER_PRODUCT_LOOKUP'] == 'product'
    assert values['FLASK_DEBUG'] == 'True'
    assert values['RATELIMIT_DEFAULT'] == '200 per minute'
    assert stat.S_IMODE(env_file.stat().st_mode) == 0o600


def test_production_password_is_random(tmp_path):
    generator = EnvGenerator(env_file=tmp_path / '.env')

    first = generator.generate_password()
    second = generator.generate_password()

    assert first != second
    assert len(first) == 20
    assert first.isalnum()
    assert any(c.isdigit() for c in first)


def test_sqlite_mode_omits_mysql_settings(tmp_path):
    env_file = tmp_path / '.env'

    EnvGenerator(use_sqlite=True, env_file=env_file).generate(force=True)

    values = dotenv_values(env_file)
    assert 'DB_HOST' not in values
    assert values['FLASK_DEBUG'] == 'False'


def test_existing_file_kept_when_declined(tmp_path, monkeypatch):
    env_file = tmp_path / '.env'
    env_file.write_text('PORT=1\n')
    monkeypatch.setattr('builtins.input', lambda prompt: 'no')

    assert EnvGenerator(env_file=env_file).generate() is False
    assert env_file.read_text() == 'PORT=1\n'


def test_existing_file_backed_up_when_confirmed(tmp_path, monkeypatch):
    env_file = tmp_path / '.env'
    env_file.write_text('PORT=1\n')
    monkeypatch.setattr('builtins.input', lambda prompt: 'yes')

    assert EnvGenerator(dev_mode=True, env_file=env_file).generate() is True

    backups = list(tmp_path.glob('.env.backup.*'))
    assert len(backups) == 1
    assert backups[0].read_text() == 'PORT=1\n'
    assert dotenv_values(env_file)['PORT'] == '5003'


def test_main_writes_output(tmp_path):
    env_file = tmp_path / 'custom.env'

    assert main(['--dev', '--force', '--output', str(env_file)]) == 0
    assert env_file.exists()
