# jalaali_datepicker/config.py

import os
import copy
import logging
import logging.config
from typing import Optional

# --- Logging Configuration ---
# مسیر لاگ‌ها را می‌توان با متغیر محیطی تغییر داد
LOGS_DIR = os.environ.get(
    "JALAALI_DATEPICKER_LOG_DIR",
    os.path.join(os.path.expanduser("~"), ".jalaali-datepicker", "logs"),
)
LOG_FILE_NAME = "datepicker.log"
LOG_FILE_PATH = os.path.join(LOGS_DIR, LOG_FILE_NAME)

# سطح لاگ را می‌توان با متغیر محیطی تغییر داد
LOG_LEVEL = getattr(logging, os.environ.get("JALAALI_DATEPICKER_LOG_LEVEL", "INFO").upper(), logging.INFO)
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(filename)s.%(funcName)s:%(lineno)d - %(message)s'

LOGGING_CONFIG = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': LOG_FORMAT,
            'datefmt': '%Y-%m-%d %H:%M:%S',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'standard',
            'level': logging.DEBUG,
        },
        'file': {
            'class': 'logging.handlers.RotatingFileHandler',
            'formatter': 'standard',
            'filename': LOG_FILE_PATH,
            'maxBytes': 1024*1024*5,  # 5 MB
            'backupCount': 5,
            'level': logging.INFO,
            'encoding': 'utf-8',
        },
    },
    'loggers': {
        'jalaali_datepicker': {
            'handlers': ['console', 'file'],
            'level': LOG_LEVEL,
            'propagate': False,
        },
    },
}

# --- Date Picker Defaults ---
DEFAULT_SELECTOR_STARTING_YEAR = 1300
DEFAULT_SELECTOR_ENDING_YEAR = 1450


def setup_logging(with_file: bool = True, log_dir: Optional[str] = None) -> None:
    """
    Applies LOGGING_CONFIG. The rotating file goes to log_dir (LOGS_DIR when not given);
    the file handler is dropped when with_file is False.
    """
    config = copy.deepcopy(LOGGING_CONFIG)
    if with_file:
        log_dir = os.fspath(log_dir) if log_dir is not None else LOGS_DIR
        # Create logs directory if it doesn't exist
        if not os.path.exists(log_dir):
            os.makedirs(log_dir)
        config['handlers']['file']['filename'] = os.path.join(log_dir, LOG_FILE_NAME)
    else:
        del config['handlers']['file']
        config['loggers']['jalaali_datepicker']['handlers'] = ['console']
    logging.config.dictConfig(config)
