from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from cv_ats.core.config import settings  # noqa: E402
from cv_ats.services import analyze, optimize  # noqa: E402


def _read_text(path: Path) -> str:
    # Binary uploads are decoded loosely; the normalizer strips what is left.
    return path.read_bytes().decode("utf-8", errors="replace")


def main() -> None:
    parser = argparse.ArgumentParser(description="Score a CV text file for ATS compatibility.")
    parser.add_argument("path", help="Path to the CV file (plain text works best)")
    parser.add_argument("--job-target", default=None, help="Target role, e.g. 'Senior Data Analyst'")
    parser.add_argument(
        "--job-description",
        default=None,
        help="Path to a job description text file used to derive keywords",
    )
    parser.add_argument(
        "--keyword",
        action="append",
        dest="keywords",
        default=None,
        help="Custom keyword to check (repeatable)",
    )
    parser.add_argument(
        "--optimize",
        action="store_true",
        help="Also build an optimization plan from the report.",
    )
    parser.add_argument(
        "--emphasize",
        action="append",
        dest="emphasize_sections",
        default=None,
        help="Section to emphasize in the optimization plan (repeatable)",
    )
    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s %(message)s")

    job_description = _read_text(Path(args.job_description)) if args.job_description else None
    outcome = analyze(
        _read_text(Path(args.path)),
        job_target=args.job_target,
        job_description=job_description,
        custom_keywords=args.keywords,
    )

    payload = {
        "stats": outcome.stats.model_dump(mode="json", by_alias=True),
        "analysis": outcome.report.model_dump(mode="json", by_alias=True),
    }
    if args.optimize:
        result = optimize(
            outcome.stats,
            outcome.report,
            emphasize_sections=args.emphasize_sections,
            custom_keywords=args.keywords,
        )
        payload["optimization"] = result.model_dump(mode="json", by_alias=True)

    print(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
