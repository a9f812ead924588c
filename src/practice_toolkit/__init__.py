"""Top-level package for the practice toolkit.

Provides subpackages:
- practice_toolkit.sequence – Fibonacci sequence generation
- practice_toolkit.grading – percentage to letter grade classification
- practice_toolkit.palindrome – text normalisation and palindrome checking
- practice_toolkit.interest – simple and compound interest
- practice_toolkit.programs – console programs wrapping the above
"""

from importlib.metadata import PackageNotFoundError, version as _pkg_version

try:
    __version__ = _pkg_version("practice-toolkit")
except PackageNotFoundError:
    # Running from a source checkout without an install
    __version__ = "0.0.0"

__all__: list[str] = ["__version__"]
