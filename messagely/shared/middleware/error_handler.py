# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask

from messagely.shared.config import AppConfig, load_config
from messagely.shared.errors import register_error_handler


def configure_error_handling(app: Flask, config: AppConfig | None = None) -> None:
    config = config or load_config()
    register_error_handler(app, debug_mode=config.debug_logging)
