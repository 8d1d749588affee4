# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import User
from .exceptions import InvalidCredentialsError
from .repositories import UserRepository

__all__ = ["InvalidCredentialsError", "User", "UserRepository"]
