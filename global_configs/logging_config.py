from __future__ import annotations

"""Central logging configuration for global_configs.

Import and call :func:`setup_logging` at application start-up, before the
configuration manager is bootstrapped.
"""

import importlib.resources as pkg_resources
import logging
import logging.config
import os
from typing import Any, Dict, Optional

import yaml

__all__ = ["setup_logging"]

_MANAGER_LOGGERS = (
    "global_configs.config.manager",
    "global_configs.core.path_store",
)


def _load_packaged_config() -> Optional[Dict[str, Any]]:
    text = pkg_resources.files("global_configs.config").joinpath("logging.yml").read_text(encoding="utf-8")
    return yaml.safe_load(text)


def setup_logging() -> None:
    """Configure logging for the application from the packaged ``logging.yml``."""
    log_dir = os.environ.get("GLOBAL_CONFIGS_LOG_DIR", "logs")
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, "app.log")

    try:
        logging_config = _load_packaged_config()

        if logging_config and isinstance(logging_config, dict) and logging_config.get("version"):
            # Update the filename dynamically
            if "handlers" in logging_config and "file" in logging_config["handlers"]:
                logging_config["handlers"]["file"]["filename"] = log_file

            logging.config.dictConfig(logging_config)
            logging.getLogger("global_configs").info("===== Logging initialised from logging.yml =====")
        else:
            _setup_minimal_logging()
    except (OSError, ValueError, yaml.YAMLError) as exc:
        print(f"Error loading logging config: {exc}")
        _setup_minimal_logging()

    _apply_debug_overrides()


def _setup_minimal_logging() -> None:
    """Set up console-only logging when ``logging.yml`` is unusable."""
    minimal_config = {
        'version': 1,
        'disable_existing_loggers': False,
        'formatters': {
            'simple': {
                'format': '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            },
        },
        'handlers': {
            'console': {
                'class': 'logging.StreamHandler',
                'formatter': 'simple',
                'level': 'INFO',
            },
        },
        'root': {
            'level': 'INFO',
            'handlers': ['console'],
        },
    }

    logging.config.dictConfig(minimal_config)
    logging.error("===== Logging initialised with minimal fallback (config error) =====")


def _apply_debug_overrides() -> None:
    """Apply environment-driven module-specific debug overrides.

    Supports:
    - GLOBAL_CONFIGS_DEBUG=true -> DEBUG for the manager and path store
    - GLOBAL_CONFIGS_DEBUG_MODULES=comma,separated,logger,names -> DEBUG for listed loggers
    """
    debug_manager = os.environ.get('GLOBAL_CONFIGS_DEBUG', '').strip().lower() in {'1', 'true', 'yes', 'on'}
    extra_modules = os.environ.get('GLOBAL_CONFIGS_DEBUG_MODULES', '').strip()
    targets = []
    if debug_manager:
        targets.extend(_MANAGER_LOGGERS)
    if extra_modules:
        targets.extend([m.strip() for m in extra_modules.split(',') if m.strip()])

    for name in targets:
        logger = logging.getLogger(name)
        logger.setLevel(logging.DEBUG)
        # Ensure at least one handler emits DEBUG for this logger
        has_debug_handler = any(h.level <= logging.DEBUG for h in logger.handlers)
        if not has_debug_handler:
            h = logging.StreamHandler()
            h.setLevel(logging.DEBUG)
            h.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
            logger.addHandler(h)
        logger.info("Debug override active for logger '%s'", name)
