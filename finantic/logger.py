import os, sys, logging
from typing import Optional
from functools import partial

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

class Logger:
    def __init__(self, name: str, logging_enabled: bool = False, log_file: Optional[str] = None):
        self._logger = logging.getLogger(name)
        # Loggers are shared per name; only the first wrapper configures one.
        if not self._logger.handlers:
            if logging_enabled:
                self._logger.setLevel(logging.DEBUG)
                if log_file == '-':
                    handler = logging.StreamHandler(sys.stdout)
                else:
                    if not log_file:
                        project_root = os.path.dirname(os.path.dirname(__file__))
                        log_file = os.path.join(project_root, 'logs', 'finantic_debug.log')
                    os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
                    handler = logging.FileHandler(log_file)
                handler.setFormatter(logging.Formatter(LOG_FORMAT))
                self._logger.addHandler(handler)
            else:
                self._logger.addHandler(logging.NullHandler())

        # Dynamically create logging methods
        for level in ['debug', 'info', 'warning', 'error']:
            setattr(self, level, partial(self._log, level))

    def _log(self, level: str, msg: str, exc_info: Optional[bool] = None) -> None:
        getattr(self._logger, level)(msg, exc_info=exc_info)
