"""Tests for environment validation functionality."""

from unittest.mock import patch

import pytest

from omega_benchmarks.config.validate import check_environment, get_dependency_versions


class TestEnvironmentChecking:
    """Test suite for environment validation functions."""

    def test_check_environment_success(self):
        """Test successful environment validation."""
        check_environment()
        check_environment(min_numpy="1.17")

    def test_check_environment_numpy_too_old(self):
        """Test NumPy version validation failure."""
        with pytest.raises(RuntimeError, match="NumPy 999.0\\+ required"):
            check_environment(min_numpy="999.0")

    def test_error_message_lists_install_hint(self):
        """Test that the error message tells how to install dependencies."""
        with patch('numpy.__version__', '1.0.0'):
            with pytest.raises(RuntimeError) as excinfo:
                check_environment()
        assert "pip install" in str(excinfo.value)


class TestDependencyVersions:
    """Test suite for dependency version reporting."""

    def test_versions_reported(self):
        """Test that all relevant packages are listed."""
        versions = get_dependency_versions()
        assert 'python' in versions
        assert 'numpy' in versions
        assert versions['numpy'] != 'not installed'
        assert 'packaging' in versions
        assert 'tomli_w' in versions
        assert 'tomllib' in versions or 'tomli' in versions
