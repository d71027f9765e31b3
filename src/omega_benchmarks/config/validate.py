"""Environment validation for Omega Benchmarks dependencies."""

import sys
from packaging import version


def check_environment(min_numpy: str = "1.22") -> None:
    """Check that environment meets minimum dependency requirements.

    NumPy 1.17 introduced ``numpy.random.Generator``; 1.22 is the oldest
    release still tested against current Python versions.

    Parameters
    ----------
    min_numpy : str, default="1.22"
        Minimum required NumPy version

    Raises
    ------
    RuntimeError
        If any dependency requirements are not met
    """
    errors = []

    if sys.version_info < (3, 9):
        errors.append(f"Python 3.9+ required, found {sys.version_info.major}.{sys.version_info.minor}")

    try:
        import numpy as np
        if version.parse(np.__version__) < version.parse(min_numpy):
            errors.append(f"NumPy {min_numpy}+ required, found {np.__version__}")
    except ImportError:
        errors.append("NumPy not installed - required for random generation")

    if sys.version_info < (3, 11):
        try:
            import tomli  # noqa: F401
        except ImportError:
            errors.append("tomli not installed - required to read TOML settings on Python < 3.11")

    if errors:
        error_msg = "Environment validation failed:\n" + "\n".join(f"  - {err}" for err in errors)
        error_msg += "\n\nTo install required dependencies:\n  pip install numpy packaging tomli tomli-w"
        raise RuntimeError(error_msg)


def get_dependency_versions() -> dict:
    """Get versions of all relevant dependencies.

    Returns
    -------
    dict
        Dictionary mapping package names to version strings
    """
    versions = {
        'python': f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"
    }

    try:
        import numpy as np
        versions['numpy'] = np.__version__
    except ImportError:
        versions['numpy'] = 'not installed'

    try:
        import packaging
        versions['packaging'] = packaging.__version__
    except ImportError:
        versions['packaging'] = 'not installed'

    try:
        import tomllib  # noqa: F401
        versions['tomllib'] = 'built-in (3.11+)'
    except ImportError:
        try:
            import tomli
            versions['tomli'] = getattr(tomli, '__version__', 'installed')
        except ImportError:
            versions['tomli'] = 'not installed'

    try:
        import tomli_w
        versions['tomli_w'] = getattr(tomli_w, '__version__', 'installed')
    except ImportError:
        versions['tomli_w'] = 'not installed'

    return versions
