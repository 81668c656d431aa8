"""
Integration tests for header merging and requests authentication

These tests prepare requests with the requests library and check the
signed headers attached to them. No network calls are made.
"""

import io

import pytest
import requests
from unittest.mock import patch

from api_headers_sdk import (
    HeadersAuth,
    HeadersSigner,
    InvalidMethodError,
    SIGNED_HEADER_NAMES,
    SigningConfig,
    SigningError,
    SigningErrorCodes,
    create_auth,
    generate_headers,
)

ACCESS_KEY = "testAccessKey"
SECRET_KEY = "testSecretKey"
BASE_URL = "https://sandboxapi.example.com"
SIGNER_MODULE = "api_headers_sdk.signing.signer"


@pytest.fixture
def signer():
    """Signer with test credentials."""
    return HeadersSigner(ACCESS_KEY, SECRET_KEY)


@pytest.fixture
def fixed_clock():
    """Pin generated salt and clock reads."""
    with patch(f"{SIGNER_MODULE}.generate_salt", return_value="someSalt1234"), \
         patch(f"{SIGNER_MODULE}.generate_timestamp", return_value=1234567890):
        yield


class TestGenerateHeaders:
    """Test merging of signed and additional headers"""

    @pytest.mark.parametrize("http_method,path", [
        ("POST", "/v1/data/items"),
        ("GET", "/v1/data/countries"),
    ])
    def test_additional_headers_merged(self, signer, http_method, path):
        """Additional headers come first, signed headers follow"""
        headers = generate_headers(
            signer, http_method, path,
            additional_headers={"X-Custom-Header": "CustomValue"}
        )

        assert list(headers.keys()) == ["X-Custom-Header"] + list(SIGNED_HEADER_NAMES)
        assert headers["X-Custom-Header"] == "CustomValue"
        assert headers["access_key"] == ACCESS_KEY

    def test_signed_headers_win_on_collision(self, signer):
        """Signed values replace additional headers of the same name"""
        headers = generate_headers(
            signer, "GET", "/v1/data/countries",
            additional_headers={"salt": "spoofed", "access_key": "spoofed"},
            salt="getSalt"
        )

        assert headers["salt"] == "getSalt"
        assert headers["access_key"] == ACCESS_KEY

    @pytest.mark.parametrize("http_method,path,salt,timestamp", [
        ("PUT", "/v1/data/items/123", "customSalt", 1234567890),
        ("DELETE", "/v1/data/items/123", "anotherSalt", 9876543210),
        ("HEAD", "/v1/data/headers", "headSalt", 1122334455),
        ("OPTIONS", "/v1/data/options", "optionsSalt", 5566778899),
        ("POST", "/v1/data/items", "postSalt", 3344556677),
        ("GET", "/v1/data/countries", "getSalt", 9988776655),
    ])
    def test_custom_salt_and_timestamp_pass_through(self, signer, http_method, path, salt, timestamp):
        """Custom salt and timestamp reach the signed headers"""
        headers = generate_headers(signer, http_method, path, salt=salt, timestamp=timestamp)

        assert headers["salt"] == salt
        assert headers["timestamp"] == str(timestamp)
        assert headers["signature"] == signer.sign(
            http_method, path, salt=salt, timestamp=timestamp
        )["signature"]

    def test_caller_headers_not_mutated(self, signer):
        """The caller's mapping is left untouched"""
        additional = {"X-Request-Id": "abc"}
        generate_headers(signer, "GET", "/v1/test", additional_headers=additional)
        assert additional == {"X-Request-Id": "abc"}


class TestHeadersAuth:
    """Test the requests authentication hook"""

    def test_signs_prepared_request(self, signer, fixed_clock):
        """Prepared request receives signed headers for its path and body"""
        body = '{"amount":100,"currency":"USD"}'
        request = requests.Request("POST", f"{BASE_URL}/v1/payments", data=body).prepare()

        HeadersAuth(signer)(request)

        expected = signer.sign("POST", "/v1/payments", body, salt="someSalt1234", timestamp=1234567890)
        for name in SIGNED_HEADER_NAMES:
            assert request.headers[name] == expected[name]
        assert request.headers["idempotency"] == "1234567890someSalt1234"

    def test_query_string_is_signed(self, signer, fixed_clock):
        """Path includes the query string"""
        request = requests.Request(
            "GET", f"{BASE_URL}/v1/data/countries", params={"country": "US"}
        ).prepare()

        HeadersAuth(signer)(request)

        expected = signer.sign("GET", "/v1/data/countries?country=US", salt="someSalt1234", timestamp=1234567890)
        assert request.headers["signature"] == expected["signature"]

    def test_json_body_signed_as_sent(self, signer, fixed_clock):
        """Bytes bodies produced by requests are signed verbatim"""
        request = requests.Request("POST", f"{BASE_URL}/v1/items", json={"b": 1, "a": 2}).prepare()

        HeadersAuth(signer)(request)

        sent_body = request.body.decode("utf-8")
        expected = signer.sign("POST", "/v1/items", sent_body, salt="someSalt1234", timestamp=1234567890)
        assert request.headers["signature"] == expected["signature"]

    def test_additional_headers(self, signer):
        """Additional headers are attached alongside signed headers"""
        request = requests.Request("GET", f"{BASE_URL}/v1/test").prepare()

        HeadersAuth(signer, {"Content-Type": "application/json"})(request)

        assert request.headers["Content-Type"] == "application/json"
        assert request.headers["access_key"] == ACCESS_KEY

    def test_session_auth(self, signer):
        """Session-level auth signs every prepared request"""
        session = requests.Session()
        session.auth = HeadersAuth(signer)

        prepared = session.prepare_request(requests.Request("DELETE", f"{BASE_URL}/v1/items/1"))

        for name in SIGNED_HEADER_NAMES:
            assert name in prepared.headers

    def test_unsupported_method_raises(self, signer):
        """Signing errors are not swallowed"""
        request = requests.Request("PATCH", f"{BASE_URL}/v1/items/1", data="{}").prepare()

        with pytest.raises(InvalidMethodError):
            HeadersAuth(signer)(request)

    def test_binary_multipart_body_rejected(self, signer):
        """Multipart bodies holding non-UTF-8 bytes raise SigningError"""
        request = requests.Request(
            "POST", f"{BASE_URL}/v1/files", files={"f": ("f.bin", b"\xff\xfe\x00")}
        ).prepare()

        with pytest.raises(SigningError) as exc_info:
            HeadersAuth(signer)(request)

        assert exc_info.value.code == SigningErrorCodes.UNSIGNABLE_BODY
        assert "signature" not in request.headers

    def test_streamed_body_rejected(self, signer):
        """File-like bodies cannot be signed and raise SigningError"""
        request = requests.Request("POST", f"{BASE_URL}/v1/files", data=io.BytesIO(b"abc")).prepare()

        with pytest.raises(SigningError) as exc_info:
            HeadersAuth(signer)(request)

        assert exc_info.value.code == SigningErrorCodes.UNSIGNABLE_BODY
        assert exc_info.value.details["body_type"] == "BytesIO"

    def test_utf8_bytes_body_signed_as_text(self, signer, fixed_clock):
        """Prepared UTF-8 bytes are signed as their decoded text"""
        request = requests.Request("PUT", f"{BASE_URL}/v1/items/1", data="naïve".encode("utf-8")).prepare()

        HeadersAuth(signer)(request)

        expected = signer.sign("PUT", "/v1/items/1", "naïve", salt="someSalt1234", timestamp=1234567890)
        assert request.headers["signature"] == expected["signature"]

    def test_create_auth(self):
        """Auth hook can be built from config"""
        auth = create_auth(SigningConfig(access_key=ACCESS_KEY, secret_key=SECRET_KEY), {"X-A": "1"})

        assert isinstance(auth, HeadersAuth)
        assert auth.signer.access_key == ACCESS_KEY
        assert auth == HeadersAuth(HeadersSigner(ACCESS_KEY, SECRET_KEY), {"X-A": "1"})
