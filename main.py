#!/usr/bin/env python3
"""CLI for ranking résumés against a job description."""

import argparse
import json
import sys

from dotenv import load_dotenv

from ranking.models import RunInput
from resume_matcher import Settings, evaluate_candidate, run, run_heuristic
from resume_matcher.audit import setup_app_logging
from resume_matcher.errors import (
    ListResumesError,
    MatcherError,
    MissingAPIKeyError,
    MissingJDError,
    MissingResumeError,
    MissingResumesError,
    NoResumesError,
    ReadJDError,
    ReadResumeError,
)

EXIT_OK = 0
EXIT_JD = 2
EXIT_RESUMES_DIR = 3
EXIT_NO_RESUMES = 4
EXIT_FAILURE = 5
EXIT_NO_API_KEY = 6

EXIT_CODES = [
    ((MissingJDError, ReadJDError), EXIT_JD),
    ((MissingResumesError, ListResumesError, MissingResumeError, ReadResumeError), EXIT_RESUMES_DIR),
    ((NoResumesError,), EXIT_NO_RESUMES),
    ((MissingAPIKeyError,), EXIT_NO_API_KEY),
]


def exit_code_for(err: MatcherError) -> int:
    for types, code in EXIT_CODES:
        if isinstance(err, types):
            return code
    return EXIT_FAILURE


def cmd_rank(args: argparse.Namespace, settings: Settings) -> None:
    run_input = RunInput(
        jd_path=args.jd,
        resumes_dir=args.resumes,
        top_n=args.topn,
        out_path=args.out or "",
    )
    output = run_heuristic(run_input, settings) if args.heuristic else run(run_input, settings)

    if args.json:
        print(json.dumps(output.to_dict(), indent=2))
        return
    print(f"=== Ranking ({output.pipeline}) ===")
    for r in output.results:
        print(f"{r.rank:>3}. {r.candidate}  {r.score:.2f}")
        print(f"     Strengths: {r.strengths}")
        print(f"     Weaknesses: {r.weaknesses}")
    for s in output.skipped:
        print(f"Skipped {s.path}: {s.reason}", file=sys.stderr)
    print(f"\nScored {output.total} resumes. Results: {output.out_path}")


def cmd_evaluate(args: argparse.Namespace, settings: Settings) -> None:
    analysis = evaluate_candidate(args.jd, args.resume, settings)
    if args.json:
        print(json.dumps(analysis.to_dict(), indent=2))
        return
    print("=== Evaluation ===")
    print(analysis.summary)
    for key in ("strengths", "weaknesses", "skills"):
        items = getattr(analysis, key)
        if items:
            print(f"\n{key.title()}:")
            for item in items:
                print(f"  • {item}")
    print(f"\nYears of experience: {analysis.years_experience:g}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Rank résumés against a job description")
    sub = parser.add_subparsers(dest="command", required=True)

    # rank
    p_rank = sub.add_parser("rank", help="Score and rank every résumé in a folder")
    p_rank.add_argument("--jd", required=True, help="Path to job description file")
    p_rank.add_argument("--resumes", required=True, help="Folder searched recursively for résumés")
    p_rank.add_argument("--topn", type=int, default=0, help="Keep only the top N results (0 = all)")
    p_rank.add_argument("--out", help="Results CSV path (default: outputs/results.csv)")
    p_rank.add_argument("--heuristic", action="store_true", help="Skip the AI pipeline")
    p_rank.add_argument("--json", action="store_true", help="Output JSON")
    p_rank.set_defaults(func=cmd_rank)

    # evaluate
    p_eval = sub.add_parser("evaluate", help="AI evaluation of a single résumé")
    p_eval.add_argument("--jd", required=True, help="Path to job description file")
    p_eval.add_argument("--resume", required=True, help="Path to résumé file")
    p_eval.add_argument("--json", action="store_true", help="Output JSON")
    p_eval.set_defaults(func=cmd_evaluate)

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    load_dotenv()
    setup_app_logging()
    settings = Settings.from_env()
    try:
        args.func(args, settings)
    except MatcherError as e:
        print(f"Error: {e}", file=sys.stderr)
        return exit_code_for(e)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
