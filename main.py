"""CLI entry point for the mentor matching engine."""

import argparse
import logging
import sys

import yaml

from mentormatch.core.config import Settings
from mentormatch.core.directory import load_mentors
from mentormatch.pipeline.orchestrator import MatchRun, export_results_json, run_match
from mentormatch.pipeline.scorer import match_quality
from mentormatch.profile.schema import StudentProfile

SUBCOMMANDS = ("match", "save-profile")


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        msg = f"must be at least 1, got {number}"
        raise argparse.ArgumentTypeError(msg)
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Mentor matching engine - rank alumni mentors for a student",
    )
    subparsers = parser.add_subparsers(dest="command")

    # --- match subcommand (default) ---
    match_parser = subparsers.add_parser("match", help="Rank mentors for a student")
    match_parser.add_argument(
        "--config",
        default="config/settings.yaml",
        help="Path to settings YAML file (default: config/settings.yaml)",
    )
    match_parser.add_argument(
        "--mentors",
        help="Path to mentor directory YAML (default: directory.path from settings)",
    )
    match_parser.add_argument(
        "--profile",
        help="Path to student profile YAML; inline flags override its fields",
    )
    match_parser.add_argument("--skills", help="Comma-separated skills, e.g. 'Java, SQL'")
    match_parser.add_argument("--role", help="Target role, e.g. 'Software Engineer'")
    match_parser.add_argument("--companies", help="Comma-separated target companies")
    match_parser.add_argument(
        "--policy",
        choices=["fixed", "banded"],
        help="Display percentage policy (default: scoring.display_policy from settings)",
    )
    match_parser.add_argument(
        "--limit",
        type=_positive_int,
        help="Show at most this many mentors",
    )
    match_parser.add_argument(
        "--export",
        choices=["json"],
        help="Export results to format (json)",
    )
    match_parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )

    # --- save-profile subcommand ---
    save_parser = subparsers.add_parser(
        "save-profile",
        help="Write a student profile YAML from inline flags",
    )
    save_parser.add_argument("--name", default="", help="Student name")
    save_parser.add_argument("--skills", default="", help="Comma-separated skills")
    save_parser.add_argument("--role", default="", help="Target role")
    save_parser.add_argument("--companies", default="", help="Comma-separated target companies")
    save_parser.add_argument(
        "--output",
        default="config/profile.yaml",
        help="Output path for profile YAML (default: config/profile.yaml)",
    )
    save_parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose (DEBUG) logging",
    )

    argv = list(sys.argv[1:] if argv is None else argv)
    # Default to match when no subcommand given
    if not argv or argv[0] not in (*SUBCOMMANDS, "-h", "--help"):
        argv = ["match", *argv]

    return parser.parse_args(argv)


def setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def build_profile(args: argparse.Namespace) -> StudentProfile:
    """Profile from --profile, with inline flags taking precedence."""
    profile = StudentProfile.from_yaml(args.profile) if args.profile else StudentProfile()
    overrides = {}
    if args.skills is not None:
        overrides["skills"] = args.skills
    if args.role is not None:
        overrides["target_role"] = args.role
    if args.companies is not None:
        overrides["target_companies"] = args.companies
    if not overrides:
        return profile
    return StudentProfile.model_validate({**profile.model_dump(), **overrides})


def print_results(run: MatchRun, settings: Settings) -> None:
    who = f" for {run.student_name}" if run.student_name else ""
    print(f"\nRanked {len(run.results)} mentors{who} "
          f"({run.candidate_count} loaded, {run.excluded_count} unavailable).")

    if not run.results:
        print("No mentors are available yet.")
        return

    for r in run.results:
        c = r.candidate
        quality = match_quality(r.display_percentage, settings.scoring.quality)
        label = c.name or str(c.id)
        where = f" at {c.company}" if c.company else ""
        print(f"  {r.rank:>2}. {label} - {c.position or 'Mentor'}{where}: "
              f"{r.display_percentage}% ({quality}, raw {r.raw_score})")
        print(f"      {r.explanation}")
        if r.skill_matches:
            print(f"      Skills: {', '.join(r.skill_matches)}")


def cmd_match(args: argparse.Namespace) -> None:
    """Handle match subcommand."""
    settings = Settings.from_yaml(args.config)
    if args.policy:
        scoring = settings.scoring.model_copy(update={"display_policy": args.policy})
        settings = settings.model_copy(update={"scoring": scoring})

    profile = build_profile(args)
    mentors = load_mentors(args.mentors or settings.directory.path)
    run = run_match(settings, profile, mentors, limit=args.limit)

    if args.export == "json":
        print(export_results_json(run, settings))
    else:
        print_results(run, settings)


def cmd_save_profile(args: argparse.Namespace) -> None:
    """Handle save-profile subcommand."""
    profile = StudentProfile(
        name=args.name,
        skills=args.skills,
        target_role=args.role,
        target_companies=args.companies,
    )
    profile.to_yaml(args.output)
    print(f"Profile written to {args.output}")
    print(f"  Skills: {profile.skills}")
    print(f"  Target role: {profile.target_role or '-'}")
    print(f"  Target companies: {profile.target_companies}")
    print("Review the profile and then run: python main.py match --profile " + args.output)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    setup_logging(args.verbose)

    if args.command == "save-profile":
        try:
            cmd_save_profile(args)
        except (OSError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    else:
        try:
            cmd_match(args)
        except (OSError, ValueError, yaml.YAMLError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)


if __name__ == "__main__":
    main()
