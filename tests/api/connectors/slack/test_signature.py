"""Testes de validação de assinatura Slack (v0) e janela anti-replay."""

from __future__ import annotations

from api.connectors.slack.signature import (
    SIGNATURE_HEADER,
    TIMESTAMP_HEADER,
    SignedRequest,
    build_slack_signature,
    verify_slack_request,
)

SECRET = "8f742231b10e8888abcd99yyyzzz85a5"
NOW = 1_700_000_000.0
BODY = b"token=xyz&team_id=T1&command=%2Ftask&text=fix+login"


def _signed(body: bytes = BODY, timestamp: str = str(int(NOW)), signature: str | None = None) -> SignedRequest:
    if signature is None:
        signature = build_slack_signature(SECRET, timestamp, body)
    return SignedRequest(raw_body=body, signature_header=signature, timestamp_header=timestamp)


class TestBuildSlackSignature:
    """Testes para o cálculo do HMAC."""

    def test_signature_has_version_prefix_and_hex_digest(self) -> None:
        signature = build_slack_signature(SECRET, "1531420618", BODY)
        prefix, digest = signature.split("=", 1)
        assert prefix == "v0"
        assert len(digest) == 64
        int(digest, 16)

    def test_signature_depends_on_timestamp(self) -> None:
        assert build_slack_signature(SECRET, "1", BODY) != build_slack_signature(SECRET, "2", BODY)


class TestVerifySlackRequest:
    """Testes da verificação completa (headers, janela, HMAC)."""

    def test_valid_signature_inside_window(self) -> None:
        result = verify_slack_request(_signed(), SECRET, now=NOW + 299)
        assert result.valid is True
        assert result.error is None

    def test_missing_signature_is_unauthorized(self) -> None:
        result = verify_slack_request(_signed(signature=""), SECRET, now=NOW)
        assert result.valid is False
        assert result.error == "unauthorized"

    def test_missing_secret_is_unauthorized(self) -> None:
        result = verify_slack_request(_signed(), None, now=NOW)
        assert result.error == "unauthorized"

    def test_non_numeric_timestamp(self) -> None:
        request = _signed(timestamp="abc", signature="v0=deadbeef")
        result = verify_slack_request(request, SECRET, now=NOW)
        assert result.error == "invalid timestamp"

    def test_non_finite_timestamp(self) -> None:
        request = _signed(timestamp="inf", signature="v0=deadbeef")
        result = verify_slack_request(request, SECRET, now=NOW)
        assert result.error == "invalid timestamp"

    def test_stale_request_times_out(self) -> None:
        """Assinatura correta, mas 301 s fora da janela."""
        result = verify_slack_request(_signed(), SECRET, now=NOW + 301)
        assert result.error == "request timeout"

    def test_future_request_times_out(self) -> None:
        result = verify_slack_request(_signed(), SECRET, now=NOW - 301)
        assert result.error == "request timeout"

    def test_custom_tolerance(self) -> None:
        result = verify_slack_request(_signed(), SECRET, now=NOW + 61, tolerance_seconds=60)
        assert result.error == "request timeout"

    def test_tampered_body_is_invalid(self) -> None:
        signature = build_slack_signature(SECRET, str(int(NOW)), BODY)
        request = _signed(body=BODY + b"&x=1", signature=signature)
        result = verify_slack_request(request, SECRET, now=NOW)
        assert result.error == "invalid signature"

    def test_wrong_secret_is_invalid(self) -> None:
        result = verify_slack_request(_signed(), "other-secret", now=NOW)
        assert result.error == "invalid signature"

    def test_missing_version_prefix_is_invalid(self) -> None:
        signature = build_slack_signature(SECRET, str(int(NOW)), BODY).replace("v0=", "v1=")
        result = verify_slack_request(_signed(signature=signature), SECRET, now=NOW)
        assert result.error == "invalid signature"

    def test_length_mismatch_is_invalid(self) -> None:
        result = verify_slack_request(_signed(signature="v0=abc"), SECRET, now=NOW)
        assert result.error == "invalid signature"


class TestSignedRequest:
    """Testes de leitura dos headers."""

    def test_from_headers(self) -> None:
        request = SignedRequest.from_headers(
            BODY,
            {SIGNATURE_HEADER: "v0=abc", TIMESTAMP_HEADER: "123"},
        )
        assert request.signature_header == "v0=abc"
        assert request.timestamp_header == "123"
        assert request.raw_body == BODY

    def test_from_headers_missing_values(self) -> None:
        request = SignedRequest.from_headers(BODY, {})
        assert request.signature_header == ""
        assert request.timestamp_header == ""
