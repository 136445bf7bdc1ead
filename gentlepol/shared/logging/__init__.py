# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .logger import (
    bind_user,
    clear_correlation_id,
    correlation_scope,
    get_correlation_id,
    logger,
    new_correlation_id,
    set_correlation_id,
    setup_logging,
)
from .sensitive_filter import sanitize_message, sanitize_record

__all__ = [
    "bind_user",
    "clear_correlation_id",
    "correlation_scope",
    "get_correlation_id",
    "logger",
    "new_correlation_id",
    "sanitize_message",
    "sanitize_record",
    "set_correlation_id",
    "setup_logging",
]
