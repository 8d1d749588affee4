# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .auth_controller import AuthController
from .home_controller import HomeController
from .invoices_controller import InvoicesController
from .misc_controller import MiscController

__all__ = ["AuthController", "HomeController", "InvoicesController", "MiscController"]
