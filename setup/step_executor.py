# setup/step_executor.py
# -*- coding: utf-8 -*-
"""
Provides functionality to execute individual setup steps.

A step is a function taking the application settings and a logger. The
executor logs a banner, runs the step and turns its outcome into a boolean
so that the caller can stop the run at the first failure.
"""

import logging
from typing import Any, Callable, Optional

from common.command_utils import log_provisioner
from setup.config_models import AppSettings

module_logger = logging.getLogger(__name__)

StepFunction = Callable[[AppSettings, Optional[logging.Logger]], Any]


def execute_step(
    step_tag: str,
    step_description: str,
    step_function: StepFunction,
    app_settings: AppSettings,
    current_logger_instance: Optional[logging.Logger],
) -> bool:
    """
    Execute a single setup step.

    Args:
        step_tag: A unique string identifier for the step.
        step_description: A human-readable description of the step.
        step_function: The function to call to execute the step.
                       Expected signature: (app_settings: AppSettings, current_logger: Optional[logging.Logger]) -> Any
                       Should return False to indicate failure. Any other return value (including None) is
                       considered success. An exception is always treated as a failure.
        app_settings: The application settings object.
        current_logger_instance: The logger instance to use.

    Returns:
        True if the step succeeded, False if it failed.
    """
    logger_to_use = (
        current_logger_instance if current_logger_instance else module_logger
    )
    symbols = app_settings.symbols

    log_provisioner(
        f"--- {symbols.get('step', '➡️')} Executing: {step_description} ({step_tag}) ---",
        "info",
        logger_to_use,
        app_settings,
    )
    try:
        step_result = step_function(app_settings, logger_to_use)
    except Exception as e:
        log_provisioner(
            f"{symbols.get('error', '❌')} FAILED: {step_description} ({step_tag})",
            "error",
            logger_to_use,
            app_settings,
        )
        log_provisioner(
            f"   Error details: {str(e)}",
            "error",
            logger_to_use,
            app_settings,
            exc_info=True,
        )
        return False

    if step_result is False:
        log_provisioner(
            f"{symbols.get('error', '❌')} Step function returned False: {step_description} ({step_tag})",
            "error",
            logger_to_use,
            app_settings,
        )
        return False

    log_provisioner(
        f"--- {symbols.get('success', '✅')} Successfully completed: {step_description} ({step_tag}) ---",
        "success",
        logger_to_use,
        app_settings,
    )
    return True
