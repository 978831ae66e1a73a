"""Answer scoring and band aggregation engine for IELTS-style exams.

Provides subpackages:
- ielts_scoring.core – models, errors and payload schemas
- ielts_scoring.scoring – normalization, matching and objective scoring
- ielts_scoring.bands – band mapping, subjective reduction and aggregation
- ielts_scoring.common – lexicon, band tables and descriptors
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        for line in pyproject.read_text(encoding="utf-8").splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.3.1"
                return line.split("=")[1].strip().strip('"').strip("'")

    from importlib.metadata import PackageNotFoundError, version as pkg_version

    try:
        return pkg_version("ielts-scoring")
    except PackageNotFoundError:
        return "0.0.0"


__version__ = _get_version()

from .api import (  # noqa: E402
    aggregate_overall_band,
    build_band_report,
    is_session_complete,
    map_raw_score_to_band,
    reduce_subjective_criteria,
    score_objective_answers,
    score_section,
    subjective_section_band,
)

__all__: list[str] = [
    "__version__",
    "aggregate_overall_band",
    "build_band_report",
    "is_session_complete",
    "map_raw_score_to_band",
    "reduce_subjective_criteria",
    "score_objective_answers",
    "score_section",
    "subjective_section_band",
]
