"""Tests for environment-driven settings."""
from bundlbe.config import Settings


def test_defaults():
    s = Settings(_env_file=None)
    assert s.verification_ttl_hours == 24
    assert s.last_verified_key == "BundlBe_LastVerified"
    assert s.paywall_suppress_key == "BundlBe_PaywallSuppress"
    assert s.api_base_url_normalized.endswith("/functions/v1")


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("BUNDLBE_API_BASE_URL", "https://staging.test/v1/")
    monkeypatch.setenv("BUNDLBE_VERIFICATION_TTL_HOURS", "6")

    s = Settings(_env_file=None)

    assert s.api_base_url_normalized == "https://staging.test/v1"
    assert s.verification_ttl_hours == 6
