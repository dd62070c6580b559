# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .gate import AuthGate, current_identity, extract_bearer_token

__all__ = ["AuthGate", "current_identity", "extract_bearer_token"]
