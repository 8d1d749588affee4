# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .memory import InMemoryInvoiceRepository, InMemoryUserRepository

__all__ = ["InMemoryInvoiceRepository", "InMemoryUserRepository"]
