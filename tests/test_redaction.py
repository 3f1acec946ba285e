"""Tests for Authorization redaction."""

from __future__ import annotations

from curl_logger.redaction import find_env_key, redact_authorization


class TestFindEnvKey:
    """Tests for find_env_key."""

    def test_finds_matching_value(self):
        """Test the key holding the secret is returned."""
        env = {"HOME": "/root", "OPENAI_KEY": "sk-abc123"}
        assert find_env_key("sk-abc123", env) == "OPENAI_KEY"

    def test_no_match(self):
        """Test None when no value matches."""
        assert find_env_key("sk-other", {"OPENAI_KEY": "sk-abc123"}) is None

    def test_empty_secret_never_matches(self):
        """Test empty values are not treated as secrets."""
        assert find_env_key("", {"EMPTY": ""}) is None

    def test_skips_names_the_shell_cannot_expand(self):
        """Test variable names that are not identifiers are skipped."""
        assert find_env_key("s", {"not-valid": "s", "GOOD_NAME": "s"}) == "GOOD_NAME"

    def test_empty_environment(self):
        """Test an empty environment is a normal miss."""
        assert find_env_key("sk-abc123", {}) is None

    def test_defaults_to_process_environment(self, monkeypatch):
        """Test os.environ is searched when no mapping is given."""
        monkeypatch.setenv("CURL_LOGGER_TEST_SECRET", "sk-process-env-7f3a")
        assert find_env_key("sk-process-env-7f3a") == "CURL_LOGGER_TEST_SECRET"


class TestRedactAuthorization:
    """Tests for redact_authorization."""

    def test_bearer_token(self):
        """Test a bearer token becomes Bearer $VAR in double quotes."""
        fragment = "-H 'Authorization: Bearer sk-abc123'"
        assert redact_authorization(fragment, {"OPENAI_KEY": "sk-abc123"}) == (
            '-H "Authorization: Bearer $OPENAI_KEY"'
        )

    def test_non_bearer_value(self):
        """Test a bare credential becomes $VAR without the scheme."""
        fragment = "-H 'Authorization: token-xyz'"
        assert redact_authorization(fragment, {"API_TOKEN": "token-xyz"}) == (
            '-H "Authorization: $API_TOKEN"'
        )

    def test_header_name_is_case_insensitive(self):
        """Test lower-case header names are redacted."""
        fragment = "-H 'authorization: Bearer sk-abc123'"
        assert redact_authorization(fragment, {"OPENAI_KEY": "sk-abc123"}) == (
            '-H "Authorization: Bearer $OPENAI_KEY"'
        )

    def test_unmatched_secret_is_unchanged(self):
        """Test unmatched values are left in clear text."""
        fragment = "-H 'Authorization: Bearer sk-unmatched'"
        assert redact_authorization(fragment, {"OPENAI_KEY": "sk-abc123"}) == fragment

    def test_other_headers_are_unchanged(self):
        """Test only Authorization is redacted."""
        fragment = "-H 'X-Api-Key: sk-abc123'"
        assert redact_authorization(fragment, {"OPENAI_KEY": "sk-abc123"}) == fragment

    def test_non_header_fragments_are_unchanged(self):
        """Test data and invocation fragments pass through."""
        env = {"OPENAI_KEY": "sk-abc123"}
        assert redact_authorization("-d 'Authorization: sk-abc123'", env) == (
            "-d 'Authorization: sk-abc123'"
        )
        assert redact_authorization("curl -X GET 'https://x'", env) == "curl -X GET 'https://x'"
