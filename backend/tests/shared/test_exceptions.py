"""Tests for shared/exceptions.py."""

from shared.exceptions import (
    AuthorizationError,
    ConflictError,
    ExternalServiceError,
    NotFoundError,
    PriceBiteError,
)
from modules.auth.exceptions import (
    DuplicateUserError,
    ExpiredTokenError,
    InvalidTokenError,
    MissingTokenError,
)
from modules.catalog.exceptions import CatalogLoadError, EmptyProductNameError


class TestPriceBiteError:
    def test_defaults(self):
        error = PriceBiteError("Something broke")
        assert str(error) == "Something broke"
        assert error.code == "PriceBiteError"
        assert error.details == {}

    def test_explicit_code_and_details(self):
        error = NotFoundError("Missing", code="MISSING", details={"id": "x"})
        assert error.message == "Missing"
        assert error.code == "MISSING"
        assert error.details == {"id": "x"}

    def test_external_service_error_records_service(self):
        error = ExternalServiceError("Down", service="supabase")
        assert error.service == "supabase"
        assert error.details == {"service": "supabase"}


class TestModuleExceptions:
    def test_auth_hierarchy(self):
        assert issubclass(ExpiredTokenError, InvalidTokenError)
        assert issubclass(InvalidTokenError, AuthorizationError)
        assert issubclass(DuplicateUserError, ConflictError)
        assert not issubclass(MissingTokenError, AuthorizationError)

    def test_messages(self):
        assert MissingTokenError().message == "Access token required"
        assert ExpiredTokenError().code == "TOKEN_EXPIRED"
        assert DuplicateUserError("a@b.c").message == "User already exists with this email"
        assert EmptyProductNameError().message == "Please provide a product name."

    def test_catalog_load_error_source(self):
        error = CatalogLoadError("bad", source="catalog.yaml")
        assert error.details == {"source": "catalog.yaml"}
        assert isinstance(error, PriceBiteError)
