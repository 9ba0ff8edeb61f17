import pytest

from auralib.keyring.credential import Credential
from auralib.keyring.passwordstrength import get_password_strength


@pytest.fixture
def credential():
    return Credential("YT", "https://youtube.com", "theawesomeguy", "password", id=7)


def test_fields_round_trip(credential):
    assert credential.name == "YT"
    assert credential.uri == "https://youtube.com"
    assert credential.username == "theawesomeguy"
    assert credential.password == "password"
    assert credential.id == 7


def test_str_format(credential):
    text = str(credential)
    lines = text.split("\n")
    assert lines[0] == "[CRED: YT] "
    assert lines[1] == "Uri: https://youtube.com"
    assert lines[2] == "Username: theawesomeguy"
    assert lines[3] == "Password: password"
    assert lines[4] == f"Strength: {int(get_password_strength('password'))}"
    assert text.endswith("\n")


def test_equality_uses_id_only():
    first = Credential("A", "", "one", "password", id=5)
    second = Credential("B", "https://example.com", "two", "secret", id=5)
    assert first == second


def test_different_ids_are_not_equal():
    first = Credential("A", "", "one", "password", id=5)
    second = Credential("A", "", "one", "password", id=6)
    assert not first == second


def test_ordering_by_id():
    low = Credential("Z", "", "", "password", id=1)
    high = Credential("A", "", "", "password", id=2)
    assert low < high
    assert high > low
    assert sorted([high, low]) == [low, high]


def test_generated_ids_fit_in_32_bits():
    ids = {Credential("n", "", "", "password").id for _ in range(50)}
    assert all(-(2**31) <= value < 2**31 for value in ids)
    assert len(ids) > 1


def test_fields_are_mutable(credential):
    credential.name = "Google"
    credential.password = "secret"
    assert credential.name == "Google"
    assert "Password: secret" in str(credential)


def test_repr_hides_password(credential):
    assert "password=" not in repr(credential)
    assert "theawesomeguy" in repr(credential)