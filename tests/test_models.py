"""
Unit tests for credentials and request descriptions.
"""

import pytest

from pritunl_client import ConfigurationError, Credentials, InvalidRequestError, RequestSpec


class TestCredentials:
    """Test credential validation and loading."""

    def test_init(self):
        credentials = Credentials("vpn.example.com/", "token", "secret")

        assert credentials.host == "vpn.example.com"
        assert credentials.token == "token"
        assert credentials.secret == "secret"

    def test_repr_hides_secret(self):
        credentials = Credentials("vpn.example.com", "token", "very-secret")

        assert "very-secret" not in repr(credentials)

    @pytest.mark.parametrize("host,token,secret", [
        ("", "token", "secret"),
        ("vpn.example.com", "", "secret"),
        ("vpn.example.com", "token", ""),
        ("vpn.example.com", None, "secret"),
    ])
    def test_init_invalid(self, host, token, secret):
        with pytest.raises(ConfigurationError):
            Credentials(host, token, secret)

    def test_immutable(self):
        credentials = Credentials("vpn.example.com", "token", "secret")

        with pytest.raises(AttributeError):
            credentials.token = "other"

    def test_from_env(self):
        environ = {
            "PRITUNL_HOST": "vpn.example.com:9700",
            "PRITUNL_TOKEN": "token",
            "PRITUNL_SECRET": "secret",
        }
        credentials = Credentials.from_env(environ)

        assert credentials == Credentials("vpn.example.com:9700", "token", "secret")

    def test_from_env_missing(self):
        with pytest.raises(ConfigurationError) as excinfo:
            Credentials.from_env({"PRITUNL_HOST": "vpn.example.com", "PRITUNL_TOKEN": ""})

        message = str(excinfo.value)
        assert "PRITUNL_TOKEN" in message
        assert "PRITUNL_SECRET" in message
        assert "PRITUNL_HOST" not in message

    def test_from_env_os_environ(self, monkeypatch):
        monkeypatch.setenv("PRITUNL_HOST", "vpn.example.com")
        monkeypatch.setenv("PRITUNL_TOKEN", "token")
        monkeypatch.setenv("PRITUNL_SECRET", "secret")

        assert Credentials.from_env().host == "vpn.example.com"


class TestRequestSpec:
    """Test request description validation."""

    def test_defaults(self):
        spec = RequestSpec("get", "/organization")

        assert spec.method == "GET"
        assert spec.query is None
        assert spec.payload is None
        assert spec.has_body is False

    def test_payload_marks_body(self):
        assert RequestSpec("POST", "/organization", payload={}).has_body is True
        assert RequestSpec("POST", "/organization", payload=[]).has_body is True

    @pytest.mark.parametrize("method", ["", "   ", None])
    def test_invalid_method(self, method):
        with pytest.raises(InvalidRequestError):
            RequestSpec(method, "/organization")

    @pytest.mark.parametrize("path", ["", "organization", "https://vpn.example.com/x", None])
    def test_invalid_path(self, path):
        with pytest.raises(InvalidRequestError):
            RequestSpec("GET", path)
