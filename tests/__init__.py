# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Habitable test suite.

Unit tests are organized by package under `tests/unit/`; shared fixtures
live in `tests/conftest.py`.
"""
