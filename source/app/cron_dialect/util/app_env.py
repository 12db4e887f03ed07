# Copyright Amazon.com, Inc. or its affiliates. All Rights Reserved.
# SPDX-License-Identifier: Apache-2.0
from dataclasses import dataclass
from os import environ
from typing import Final, Optional

from cron_dialect.model.presets import CronType
from cron_dialect.util.app_env_utils import AppEnvError, env_to_bool

DEFAULT_CRON_TYPE: Final = CronType.QUARTZ
DEFAULT_LOG_SERVICE_NAME: Final = "cron-dialect"


@dataclass(frozen=True)
class AppEnv:
    default_cron_type: CronType
    enable_debug_logging: bool
    log_service_name: str

    @property
    def log_level(self) -> str:
        return "DEBUG" if self.enable_debug_logging else "INFO"


# cache the application environment for the lifetime of the process
_app_env: Optional[AppEnv] = None


def get_app_env() -> AppEnv:
    """
    Retrieve the current application environment. Only the outermost layer (the command
    line entry point) should call this and pass the needed values on; the parser itself
    never reads the environment.
    """
    global _app_env
    if not _app_env:
        _app_env = _from_environment()
    return _app_env


def _from_environment() -> AppEnv:
    cron_type_name: Final = environ.get("CRON_DIALECT", DEFAULT_CRON_TYPE.value)
    try:
        cron_type: Final = CronType(cron_type_name.strip().lower())
    except ValueError as err:
        raise AppEnvError(
            f"Invalid cron dialect: {cron_type_name}, expected one of {[t.value for t in CronType]}"
        ) from err
    return AppEnv(
        default_cron_type=cron_type,
        enable_debug_logging=env_to_bool(environ.get("TRACE", "false")),
        log_service_name=environ.get("LOG_SERVICE_NAME", DEFAULT_LOG_SERVICE_NAME),
    )
