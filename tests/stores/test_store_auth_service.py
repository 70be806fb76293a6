import pytest

from kiosk_attendance.core.exceptions import AuthenticationError, ConflictError, ValidationError
from kiosk_attendance.stores.service import StoreAuthService, derive_login, pad_password


def test_derive_login_normalizes_name():
    assert derive_login("Bodega  Norte") == "bodega_norte@bodega.local"


@pytest.mark.parametrize(
    "raw, padded",
    [("abcd", "ABCDAB"), ("abcde", "ABCDEA"), ("secret1", "SECRET1")],
)
def test_pad_password(raw, padded):
    assert pad_password(raw) == padded


def test_register_then_login_is_case_insensitive(stores_repo):
    svc = StoreAuthService(stores_repo)

    created = svc.register("Bodega Norte", "abcd")
    logged = svc.authenticate("BODEGA NORTE", "ABCD")

    assert created.name == "BODEGA NORTE"
    assert logged.store_id == created.store_id


def test_wrong_password_raises(stores_repo):
    svc = StoreAuthService(stores_repo)
    svc.register("Bodega Norte", "abcd")

    with pytest.raises(AuthenticationError):
        svc.authenticate("Bodega Norte", "zzzz")


def test_unknown_store_raises(stores_repo):
    with pytest.raises(AuthenticationError):
        StoreAuthService(stores_repo).authenticate("Nadie", "abcd")


def test_duplicate_store_is_conflict(stores_repo):
    svc = StoreAuthService(stores_repo)
    svc.register("Bodega Norte", "abcd")

    with pytest.raises(ConflictError):
        svc.register("bodega norte", "efgh")


@pytest.mark.parametrize("name, password", [("", "abcd"), ("Bodega", ""), ("Bodega", "abc")])
def test_invalid_input_never_reaches_repository(name, password):
    class ExplodingStores:
        def __getattr__(self, item):
            raise AssertionError("repository must not be called")

    with pytest.raises(ValidationError):
        StoreAuthService(ExplodingStores()).register(name, password)
