# DEPENDENCIES
import sys
import time
import json
import logging
import traceback
from typing import Any
from typing import Dict
from pathlib import Path
from typing import Optional
from functools import wraps
from datetime import datetime

from config.settings import settings



class LegalAnalyzerLogger:
    """
    Structured logging for the legal risk analyzer

    Three loggers share one application name:
    - `<app>`             : JSON structured info/debug/warning records
    - `<app>.error`       : errors with traceback and context
    - `<app>.performance` : operation timings
    File handlers are optional (LOG_TO_FILE), warnings and above always reach stdout
    """
    _loggers  : Dict[str, logging.Logger] = dict()
    _log_dir  : Optional[Path]            = None
    _app_name : str                       = settings.APP_LOG_NAME

    DEBUG                                 = logging.DEBUG
    INFO                                  = logging.INFO
    WARNING                               = logging.WARNING
    ERROR                                 = logging.ERROR


    @classmethod
    def setup(cls, log_dir: Optional[str] = None, app_name: Optional[str] = None, to_file: Optional[bool] = None, level: Optional[int] = None):
        """
        Setup logging system

        Arguments:
        ----------
            log_dir  { str }  : Directory for log files (defaults to settings.LOG_DIR)

            app_name { str }  : Application name for loggers and log files

            to_file  { bool } : Write log files in addition to the console

            level    { int }  : Main logger level (defaults to settings.LOG_LEVEL)
        """
        cls._app_name = app_name or settings.APP_LOG_NAME
        to_file       = settings.LOG_TO_FILE if to_file is None else to_file
        cls._log_dir  = Path(log_dir or settings.LOG_DIR) if to_file else None

        if cls._log_dir:
            cls._log_dir.mkdir(parents = True, exist_ok = True)

        if level is None:
            level     = getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO)

        cls._create_logger(name     = cls._app_name,
                           log_file = cls._log_file(cls._app_name),
                           level    = level,
                          )

        cls._create_logger(name     = f"{cls._app_name}.error",
                           log_file = cls._log_file(f"{cls._app_name}_error"),
                           level    = logging.ERROR,
                          )

        cls._create_logger(name     = f"{cls._app_name}.performance",
                           log_file = cls._log_file(f"{cls._app_name}_performance"),
                           level    = logging.INFO,
                          )


    @classmethod
    def _log_file(cls, stem: str) -> Optional[Path]:
        if cls._log_dir is None:
            return None

        return cls._log_dir / f"{stem}.log"


    @classmethod
    def _create_logger(cls, name: str, log_file: Optional[Path], level: int) -> logging.Logger:
        """
        Create and configure a logger
        """
        logger             = logging.getLogger(name)
        logger.setLevel(level)
        logger.propagate   = False

        logger.handlers.clear()

        formatter          = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s', datefmt = '%Y-%m-%d %H:%M:%S')

        if log_file:
            file_handler   = logging.FileHandler(log_file, encoding = "utf-8")
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        console_handler    = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

        cls._loggers[name] = logger

        return logger


    @classmethod
    def get_logger(cls, name: Optional[str] = None) -> logging.Logger:
        """
        Get logger by name, initializing the logging system on first use
        """
        if not cls._loggers:
            cls.setup()

        name = name or cls._app_name

        return cls._loggers.get(name, logging.getLogger(name))


    @classmethod
    def log_structured(cls, level: int, message: str, **kwargs):
        """
        Log structured data as JSON

        Arguments:
        ----------
            level   { int } : Log level

            message { str } : Log message

            **kwargs        : Additional structured data
        """
        logger   = cls.get_logger()

        log_data = {"timestamp" : datetime.now().isoformat(),
                    "message"   : message,
                    **kwargs
                   }

        logger.log(level, json.dumps(log_data, default = str))


    @classmethod
    def log_error(cls, error: Exception, context: Dict[str, Any] = None):
        """
        Log error with full traceback and context

        Arguments:
        ----------
            error   { Exception } : Exception object

            context { dict }      : Additional context dictionary
        """
        error_logger = cls.get_logger(f"{cls._app_name}.error")

        error_data   = {"timestamp"     : datetime.now().isoformat(),
                        "error_type"    : type(error).__name__,
                        "error_message" : str(error),
                        "traceback"     : "".join(traceback.format_exception(type(error), error, error.__traceback__)),
                        "context"       : context or {},
                       }

        error_logger.error(json.dumps(error_data, indent = 2, default = str))


    @classmethod
    def log_performance(cls, operation: str, duration: float, **metrics):
        """
        Log performance metrics

        Arguments:
        ----------
            operation { str }   : Operation name

            duration  { float } : Duration in seconds

            **metrics           : Additional metrics
        """
        perf_logger = cls.get_logger(f"{cls._app_name}.performance")

        perf_data   = {"timestamp"        : datetime.now().isoformat(),
                       "operation"        : operation,
                       "duration_seconds" : round(duration, 6),
                       **metrics
                      }

        perf_logger.info(json.dumps(perf_data, default = str))


    @staticmethod
    def log_execution_time(operation_name: str = None):
        """
        Decorator to log execution time of functions
        """
        def decorator(func):
            @wraps(func)
            def wrapper(*args, **kwargs):
                op_name    = operation_name or func.__name__
                start_time = time.perf_counter()

                try:
                    result   = func(*args, **kwargs)
                    duration = time.perf_counter() - start_time

                    LegalAnalyzerLogger.log_performance(operation = op_name,
                                                        duration  = duration,
                                                        status    = "success",
                                                       )

                    return result

                except Exception as e:
                    duration = time.perf_counter() - start_time

                    LegalAnalyzerLogger.log_performance(operation = op_name,
                                                        duration  = duration,
                                                        status    = "error",
                                                        error     = str(e),
                                                       )

                    LegalAnalyzerLogger.log_error(e, context = {"operation" : op_name})
                    raise

            return wrapper

        return decorator



# Convenience functions
def log_info(message: str, **kwargs):
    """
    Log info message
    """
    LegalAnalyzerLogger.log_structured(logging.INFO, message, **kwargs)


def log_warning(message: str, **kwargs):
    """
    Log warning message
    """
    LegalAnalyzerLogger.log_structured(logging.WARNING, message, **kwargs)


def log_error(error: Exception, context: Dict[str, Any] = None):
    """
    Log error with context
    """
    LegalAnalyzerLogger.log_error(error, context)


def log_debug(message: str, **kwargs):
    """
    Log debug message
    """
    LegalAnalyzerLogger.log_structured(logging.DEBUG, message, **kwargs)
