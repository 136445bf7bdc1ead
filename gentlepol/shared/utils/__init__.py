# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .clock import Clock, as_utc, utcnow

__all__ = ["Clock", "as_utc", "utcnow"]
