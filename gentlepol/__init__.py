# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Personal web-feed definitions behind username/password sessions."""

__version__ = "0.1.0"
