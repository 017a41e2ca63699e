from __future__ import annotations

import argparse
import asyncio
import json
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from app.schemas.resume import ResumeRecord  # noqa: E402
from app.services.ats_service import InputError, analyze  # noqa: E402


def main() -> None:
    parser = argparse.ArgumentParser(description="Score a resume JSON file against a job description.")
    parser.add_argument("--resume", required=True, help="Path to the resume JSON file")
    parser.add_argument("--job", required=True, help="Path to a plain-text job description")
    parser.add_argument("--out", default="", help="Write the result JSON here instead of stdout")
    parser.add_argument("--no-ai", action="store_true", help="Skip the text-generation service.")
    args = parser.parse_args()

    resume = ResumeRecord.model_validate_json(Path(args.resume).read_text(encoding="utf-8"))
    job_text = Path(args.job).read_text(encoding="utf-8")

    try:
        result = asyncio.run(analyze(job_text, resume, use_ai=not args.no_ai))
    except InputError as exc:
        parser.exit(2, f"error ({exc.code}): {exc}\n")

    output = json.dumps(result.model_dump(mode="json", by_alias=True), indent=2)
    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(output + "\n", encoding="utf-8")
        print(f"Wrote {out_path} (score {result.overall_score})")
    else:
        print(output)


if __name__ == "__main__":
    main()
