# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .ports import SessionPort
from .use_cases.invoices import (
    GetInvoiceUseCase,
    GetMaxInvoiceIdUseCase,
    ListMyInvoicesUseCase,
)
from .use_cases.users import GetCurrentUserUseCase, LoginUserUseCase, LogoutUserUseCase

__all__ = [
    "SessionPort",
    "GetCurrentUserUseCase",
    "GetInvoiceUseCase",
    "GetMaxInvoiceIdUseCase",
    "ListMyInvoicesUseCase",
    "LoginUserUseCase",
    "LogoutUserUseCase",
]
