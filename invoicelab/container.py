"""Application dependency container."""

from __future__ import annotations

from functools import cached_property

from invoicelab.application.use_cases.invoices.get_invoice import GetInvoiceUseCase
from invoicelab.application.use_cases.invoices.get_max_invoice_id import GetMaxInvoiceIdUseCase
from invoicelab.application.use_cases.invoices.list_my_invoices import ListMyInvoicesUseCase
from invoicelab.application.use_cases.users.get_current_user import GetCurrentUserUseCase
from invoicelab.application.use_cases.users.login_user import LoginUserUseCase
from invoicelab.application.use_cases.users.logout_user import LogoutUserUseCase
from invoicelab.infrastructure.repositories import (
    InMemoryInvoiceRepository,
    InMemoryUserRepository,
)
from invoicelab.infrastructure.seed import SEED_INVOICES, SEED_USERS
from invoicelab.infrastructure.sessions import InMemorySessionStore, SessionManager
from invoicelab.interfaces.http.controllers import (
    AuthController,
    HomeController,
    InvoicesController,
    MiscController,
)
from invoicelab.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self._config = config

    @cached_property
    def user_repository(self) -> InMemoryUserRepository:
        return InMemoryUserRepository(SEED_USERS)

    @cached_property
    def invoice_repository(self) -> InMemoryInvoiceRepository:
        return InMemoryInvoiceRepository(SEED_INVOICES)

    @cached_property
    def session_store(self) -> InMemorySessionStore:
        return InMemorySessionStore()

    @cached_property
    def session_manager(self) -> SessionManager:
        return SessionManager(store=self.session_store, secret=self._config.session_secret)

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(users=self.user_repository, sessions=self.session_manager)

    @cached_property
    def logout_user_use_case(self) -> LogoutUserUseCase:
        return LogoutUserUseCase(sessions=self.session_manager)

    @cached_property
    def get_current_user_use_case(self) -> GetCurrentUserUseCase:
        return GetCurrentUserUseCase(users=self.user_repository)

    @cached_property
    def list_my_invoices_use_case(self) -> ListMyInvoicesUseCase:
        return ListMyInvoicesUseCase(invoices=self.invoice_repository)

    @cached_property
    def get_invoice_use_case(self) -> GetInvoiceUseCase:
        return GetInvoiceUseCase(invoices=self.invoice_repository, users=self.user_repository)

    @cached_property
    def get_max_invoice_id_use_case(self) -> GetMaxInvoiceIdUseCase:
        return GetMaxInvoiceIdUseCase(invoices=self.invoice_repository)

    # Controllers

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            login_use_case=self.login_user_use_case,
            logout_use_case=self.logout_user_use_case,
        )

    @cached_property
    def home_controller(self) -> HomeController:
        return HomeController(current_user_use_case=self.get_current_user_use_case)

    @cached_property
    def invoices_controller(self) -> InvoicesController:
        return InvoicesController(
            list_use_case=self.list_my_invoices_use_case,
            get_use_case=self.get_invoice_use_case,
            max_id_use_case=self.get_max_invoice_id_use_case,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(users=self.user_repository, invoices=self.invoice_repository)
