"""Tests for the tracetool exception hierarchy."""

from tracetool.exceptions import (
    ConfigurationError,
    GenerationError,
    InvalidConfigError,
    MissingOptionError,
    TracetoolError,
    UnknownBackendError,
    UnsupportedOutputError,
)


class TestHierarchy:
    """Every error can be caught as TracetoolError."""

    def test_configuration_errors(self):
        """Config and missing-option errors share ConfigurationError."""
        assert issubclass(InvalidConfigError, ConfigurationError)
        assert issubclass(MissingOptionError, ConfigurationError)
        assert issubclass(ConfigurationError, TracetoolError)

    def test_generation_errors(self):
        """Backend selection errors share GenerationError."""
        assert issubclass(UnsupportedOutputError, GenerationError)
        assert issubclass(UnknownBackendError, GenerationError)
        assert issubclass(GenerationError, TracetoolError)


class TestMessages:
    """Test error messages and details."""

    def test_details_in_str(self):
        """Keyword details are appended in the order given."""
        err = TracetoolError("boom", line=3, file="trace-events")
        assert str(err) == "boom (line=3, file=trace-events)"
        assert err.details == {"line": "3", "file": "trace-events"}

    def test_plain_message(self):
        """Without details the message is returned unchanged."""
        assert str(TracetoolError("boom")) == "boom"

    def test_unsupported_output(self):
        """Message names the generator and the backend."""
        err = UnsupportedOutputError("DTrace probe generator", "simple")
        assert str(err) == "DTrace probe generator not applicable to simple backend"
        assert err.backend == "simple"

    def test_missing_option(self):
        """Message names the missing option."""
        err = MissingOptionError("--binary", "SystemTAP tapset generator")
        assert str(err) == "--binary is required for SystemTAP tapset generator"

    def test_invalid_config(self):
        """The reason is kept as a detail."""
        err = InvalidConfigError("backend", "ftrace", "unknown backend")
        assert err.details["reason"] == "unknown backend"

    def test_unknown_backend_lists_choices(self):
        """Known backends are reported with the unknown name."""
        err = UnknownBackendError("ftrace", "nop simple")
        assert str(err) == "Unknown backend: 'ftrace' (known=nop simple)"
