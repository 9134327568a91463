"""
Diagnostics Runner — Orchestrates all test suites and produces a report.

Usage:
    python -m coincheck_client.diagnostics.runner              # Run all suites
    python -m coincheck_client.diagnostics.runner rest auth    # Run specific suites
    python -m coincheck_client.diagnostics.runner --list       # List available suites
    python -m coincheck_client.diagnostics.runner --json       # Machine-readable report
    python -m coincheck_client.diagnostics.runner --verbose    # Include request log lines
"""

import importlib
import sys
import time

import orjson as json

from coincheck_client.config import (
    API_KEY,
    API_SECRET,
    REST_BASE,
    SIGNATURE_ENCODING,
    logger,
    validate_credentials,
    print_config,
)
from coincheck_client.diagnostics.report import (
    print_banner, print_section, print_result, print_verdict, format_json_report,
)

# ── Available Suites ─────────────────────────────────────────────────────────

SUITE_MAP = {
    "rest": ("REST API", "coincheck_client.diagnostics.suites.test_rest"),
    "auth": ("Authentication", "coincheck_client.diagnostics.suites.test_auth"),
    "account": ("Account", "coincheck_client.diagnostics.suites.test_account"),
}

# Default run order
DEFAULT_ORDER = ["rest", "auth", "account"]


def build_config() -> dict:
    """Build the config dict passed to each suite."""
    return {
        "rest_base": REST_BASE,
        "api_key": API_KEY,
        "api_secret": API_SECRET,
        "signature_encoding": SIGNATURE_ENCODING,
        "pair": "btc_jpy",
    }


def run_suite(suite_key: str, config: dict, quiet: bool = False) -> list[dict]:
    """Dynamically import and run a test suite."""
    if suite_key not in SUITE_MAP:
        return [{"name": f"Unknown suite: {suite_key}", "passed": False, "detail": "Not found"}]

    label, module_path = SUITE_MAP[suite_key]
    if not quiet:
        print_section(label)

    try:
        module = importlib.import_module(module_path)
        results = module.run(config)
    except Exception as e:
        results = [{"name": f"{label}: Import/Run Error", "passed": False, "detail": str(e)}]

    if not quiet:
        for r in results:
            print_result(r)

    return results


def _notice(msg: str, as_json: bool):
    """Side notes go to stderr in --json mode so stdout stays one JSON document."""
    print(f"  {msg}", file=sys.stderr if as_json else sys.stdout)


def main():
    args = sys.argv[1:]

    # --list flag
    if "--list" in args:
        print("\nAvailable diagnostic suites:")
        for key, (label, _) in SUITE_MAP.items():
            print(f"  {key:<12} {label}")
        print()
        return

    as_json = "--json" in args

    # Request logs only with --verbose, and never inside a JSON report
    logger.enabled = "--verbose" in args and not as_json
    args = [a for a in args if not a.startswith("--")]

    if not as_json:
        print_banner()
    has_creds = validate_credentials(quiet=as_json)
    if not as_json:
        print_config()

    # Determine which suites to run
    if args:
        suites_to_run = [s for s in args if s in SUITE_MAP]
        unknown = [s for s in args if s not in SUITE_MAP]
        if unknown:
            _notice(f"⚠ Unknown suites: {', '.join(unknown)}", as_json)
    else:
        suites_to_run = DEFAULT_ORDER

    # Skip auth-required suites if no credentials
    if not has_creds:
        skipped = [s for s in suites_to_run if s == "account"]
        if skipped:
            _notice(f"⚠ Skipping auth-required suites (no credentials): {', '.join(skipped)}", as_json)
        suites_to_run = [s for s in suites_to_run if s != "account"]

    # Run
    config = build_config()
    all_results = []
    start = time.time()

    for suite_key in suites_to_run:
        all_results.extend(run_suite(suite_key, config, quiet=as_json))
        logger.flush()

    elapsed = time.time() - start

    # Verdict
    if as_json:
        report = format_json_report(all_results, elapsed)
        print(json.dumps(report, option=json.OPT_INDENT_2).decode("utf-8"))
        all_passed = report["all_passed"]
    else:
        all_passed = print_verdict(all_results, elapsed)
    sys.exit(0 if all_passed else 1)


if __name__ == "__main__":
    main()
