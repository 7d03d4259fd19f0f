import importlib
import logging
from pathlib import Path

import config.main_config as main_config


def test_settings_defaults():
    assert main_config.RANKING_CACHE_TTL_MS == 30000
    assert main_config.POINTS_PER_CORRECT_ANSWER == 100
    assert main_config.DEFAULT_TIME_LIMIT == 30


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv('RANKING_CACHE_TTL_MS', '5000')
    monkeypatch.setenv('REDIS_PORT', '6380')

    reloaded = importlib.reload(main_config)

    assert reloaded.RANKING_CACHE_TTL_MS == 5000
    assert reloaded.REDIS_PORT == 6380

    monkeypatch.undo()
    importlib.reload(main_config)


def test_logging_config_tags_records_with_user(monkeypatch, tmp_path):
    log_file = tmp_path / 'quiz.log'
    monkeypatch.setenv('LOG_FILE', str(log_file))
    importlib.reload(main_config)
    import config.logging_config as logging_config
    importlib.reload(logging_config)

    logger = logging.getLogger('use_cases')
    logger.info('answer recorded', extra={'user': 'u1'})
    logger.info('cache reset')
    for handler in logger.handlers:
        handler.flush()

    content = log_file.read_text()
    assert ' - use_cases - INFO - u1 - answer recorded' in content
    assert ' - use_cases - INFO - SYSTEM - cache reset' in content

    monkeypatch.undo()
    importlib.reload(main_config)


def test_every_named_logger_has_a_user():
    import config.logging_config as logging_config
    root = Path(__file__).resolve().parents[2]
    sources = '\n'.join(p.read_text() for d in ('app', 'infrastructure', 'presentation')
                        for p in (root / d).rglob('*.py'))

    for name in logging_config.logging_config['loggers']:
        if name:
            assert f"getLogger('{name}')" in sources, name
