import logging
import logging.config
from config.main_config import LOG_FILE


class UserFilter(logging.Filter):
    def filter(self, record):
        if not hasattr(record, 'user'):
            record.user = 'SYSTEM'  # Requests without an authenticated caller
        return True


_HANDLERS = ['file', 'console']

logging_config = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': '%(asctime)s - %(name)s - %(levelname)s - %(user)s - %(message)s'
        },
    },
    'filters': {
        'user_filter': {
            '()': UserFilter,
        },
    },
    'handlers': {
        'file': {
            'level': 'INFO',
            'class': 'logging.FileHandler',
            'filename': LOG_FILE,
            'formatter': 'standard',
            'filters': ['user_filter']
        },
        'console': {
            'level': 'INFO',
            'class': 'logging.StreamHandler',
            'formatter': 'standard',
            'filters': ['user_filter']
        },
    },
    'loggers': {
        'use_cases': {
            'handlers': _HANDLERS,
            'level': 'INFO',
            'propagate': False,
        },
        'repositories': {
            'handlers': _HANDLERS,
            'level': 'INFO',
            'propagate': False,
        },
        'handlers': {
            'handlers': _HANDLERS,
            'level': 'INFO',
            'propagate': False,
        },
        'external_apis': {
            'handlers': _HANDLERS,
            'level': 'INFO',
            'propagate': False,
        },
        '': {
            'handlers': _HANDLERS,
            'level': 'INFO',
            'propagate': True,
        }
    }
}

logging.config.dictConfig(logging_config)
