import os

import pytest

from env_loader import load_dotenv_like, parse_env_line


@pytest.mark.parametrize('raw, expected', [
    ('KEY=value', ('KEY', 'value')),
    ('export SECRET_KEY="abc"', ('SECRET_KEY', 'abc')),
    ("  LOG_LEVEL = 'DEBUG' ", ('LOG_LEVEL', 'DEBUG')),
    ('URL=sqlite:///a=b.db', ('URL', 'sqlite:///a=b.db')),
    ('# comment', None),
    ('', None),
    ('novalue', None),
    ('=x', None),
])
def test_parse_env_line(raw, expected):
    assert parse_env_line(raw) == expected


def test_load_dotenv_like_does_not_override(tmp_path, monkeypatch):
    env_file = tmp_path / 'custom.env'
    env_file.write_text('TRACKR_T1=from_file\nTRACKR_T2=from_file\n', encoding='utf-8')
    monkeypatch.setenv('TRACKR_T1', 'already_set')
    monkeypatch.delenv('TRACKR_T2', raising=False)

    assert load_dotenv_like(str(env_file)) == str(env_file)
    assert os.environ['TRACKR_T1'] == 'already_set'
    assert os.environ['TRACKR_T2'] == 'from_file'
    monkeypatch.delenv('TRACKR_T2')


def test_load_dotenv_like_from_env_var(tmp_path, monkeypatch):
    env_file = tmp_path / 'other.env'
    env_file.write_text('TRACKR_T3=1\n', encoding='utf-8')
    monkeypatch.setenv('TRACKR_ENV_FILE', str(env_file))
    monkeypatch.delenv('TRACKR_T3', raising=False)

    assert load_dotenv_like(str(tmp_path / 'missing.env')) == str(env_file)
    assert os.environ['TRACKR_T3'] == '1'
    monkeypatch.delenv('TRACKR_T3')
