import logging
import os

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(message)s'


def configure_logging(service_name: str, log_path: str | None = None, level: str | None = None):
    """Configure root logging for a service process.

    Logs are appended to ``<log_path>/<service_name>.log``; when no path is
    given (argument or ``LOG_PATH``) they go to stderr instead.
    """
    log_path = log_path or os.getenv('LOG_PATH')
    level = (level or os.getenv('LOG_LEVEL', 'INFO')).upper()
    if log_path:
        os.makedirs(log_path, exist_ok=True)
        logging.basicConfig(
            filename=os.path.join(log_path, f'{service_name}.log'),
            level=level,
            filemode='a',
            format=LOG_FORMAT,
        )
    else:
        logging.basicConfig(level=level, format=LOG_FORMAT)
    return logging.getLogger(service_name)
