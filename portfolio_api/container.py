"""Application dependency container."""

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from portfolio_api.application.services.password_hashing import BcryptPasswordHasher
from portfolio_api.application.services.token_signing import JwtTokenService
from portfolio_api.application.use_cases.accounts.login_account import LoginAccountUseCase
from portfolio_api.application.use_cases.accounts.register_account import (
    RegisterAccountUseCase,
)
from portfolio_api.application.use_cases.accounts.verify_token import VerifyTokenUseCase
from portfolio_api.domain.content.collections import LIST_COLLECTIONS, SINGLETON_COLLECTIONS
from portfolio_api.infrastructure.db.session import Database
from portfolio_api.infrastructure.repositories.sqlalchemy_account_repository import (
    SqlAlchemyAccountRepository,
)
from portfolio_api.infrastructure.repositories.sqlalchemy_document_store import (
    SqlAlchemyDocumentStore,
)
from portfolio_api.interfaces.http.auth import AuthGuard
from portfolio_api.interfaces.http.controllers.auth_controller import AuthController
from portfolio_api.interfaces.http.controllers.contact_controller import ContactController
from portfolio_api.interfaces.http.controllers.content_controller import ContentController
from portfolio_api.interfaces.http.controllers.misc_controller import MiscController
from portfolio_api.interfaces.http.controllers.singleton_controller import (
    SingletonController,
)
from portfolio_api.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config

    @cached_property
    def database(self) -> Database:
        return Database(self.config)

    @cached_property
    def password_hasher(self) -> BcryptPasswordHasher:
        return BcryptPasswordHasher(rounds=self.config.bcrypt_rounds)

    @cached_property
    def token_service(self) -> JwtTokenService:
        return JwtTokenService(
            self.config.secret_key,
            ttl=timedelta(seconds=self.config.token_ttl_seconds),
        )

    @cached_property
    def account_repository(self) -> SqlAlchemyAccountRepository:
        return SqlAlchemyAccountRepository(self.database)

    @cached_property
    def document_store(self) -> SqlAlchemyDocumentStore:
        return SqlAlchemyDocumentStore(self.database)

    @cached_property
    def register_account_use_case(self) -> RegisterAccountUseCase:
        return RegisterAccountUseCase(
            accounts=self.account_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_account_use_case(self) -> LoginAccountUseCase:
        return LoginAccountUseCase(
            accounts=self.account_repository,
            password_hasher=self.password_hasher,
            tokens=self.token_service,
        )

    @cached_property
    def verify_token_use_case(self) -> VerifyTokenUseCase:
        return VerifyTokenUseCase(tokens=self.token_service)

    @cached_property
    def auth_guard(self) -> AuthGuard:
        return AuthGuard(self.verify_token_use_case)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_account_use_case,
            login_use_case=self.login_account_use_case,
        )

    @cached_property
    def content_controllers(self) -> list[ContentController]:
        return [
            ContentController(collection, store=self.document_store, guard=self.auth_guard)
            for collection in LIST_COLLECTIONS
        ]

    @cached_property
    def singleton_controllers(self) -> list[SingletonController]:
        return [
            SingletonController(collection, store=self.document_store, guard=self.auth_guard)
            for collection in SINGLETON_COLLECTIONS
        ]

    @cached_property
    def contact_controller(self) -> ContactController:
        return ContactController(store=self.document_store, guard=self.auth_guard)

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(database=self.database)
