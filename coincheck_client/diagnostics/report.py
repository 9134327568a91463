"""
Diagnostics Report — Formats and displays suite results.

A result is a dict: {"name": "<Suite>: <check>", "passed": bool, "detail": str}.
The text before the first ":" groups results per suite in the verdict.
"""

from datetime import datetime


def print_banner():
    print()
    print("  ╔═══════════════════════════════════════════════╗")
    print("  ║     C O I N C H E C K   C L I E N T           ║")
    print("  ║        Diagnostics Runner                      ║")
    print("  ╚═══════════════════════════════════════════════╝")
    print()


def print_section(title: str):
    padding = max(0, 48 - len(title))
    print(f"\n  ── {title} {'─' * padding}")


def print_result(result: dict):
    icon = "✅" if result["passed"] else "❌"
    print(f"    {icon} {result['name']}")
    if result.get("detail"):
        print(f"        → {result['detail']}")


def group_by_suite(all_results: list[dict]) -> dict[str, list[dict]]:
    suites: dict[str, list[dict]] = {}
    for r in all_results:
        suites.setdefault(r["name"].split(":")[0].strip(), []).append(r)
    return suites


def print_verdict(all_results: list[dict], elapsed: float) -> bool:
    """Print per-suite tallies and the overall verdict. True when nothing failed."""
    total = len(all_results)
    failed = [r for r in all_results if not r["passed"]]

    print()
    print("  ══ Verdict ════════════════════════════════════════")
    print()

    for suite_name, results in group_by_suite(all_results).items():
        ok = sum(1 for r in results if r["passed"])
        icon = "✅" if ok == len(results) else "❌"
        print(f"    {icon} {suite_name}: {ok}/{len(results)}")

    print()
    print(f"    Total: {total - len(failed)}/{total} passed ({len(failed)} failed)")
    print(f"    Time:  {elapsed:.1f}s")
    print(f"    Run:   {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    print()

    if not failed:
        print("  🟢 ALL DIAGNOSTICS PASSED")
    elif any(r["name"].startswith("Auth") for r in failed):
        print("  🔴 AUTH FAILED — check key, secret and signature encoding")
    else:
        print("  🟡 PARTIAL — see failed checks above")

    print()
    return not failed


def format_json_report(all_results: list[dict], elapsed: float) -> dict:
    """Return results as a structured dict (for programmatic use)."""
    total = len(all_results)
    passed = sum(1 for r in all_results if r["passed"])

    return {
        "timestamp": datetime.now().isoformat(),
        "elapsed_seconds": round(elapsed, 2),
        "total": total,
        "passed": passed,
        "failed": total - passed,
        "all_passed": passed == total,
        "suites": {
            name: sum(1 for r in results if r["passed"])
            for name, results in group_by_suite(all_results).items()
        },
        "results": all_results,
    }
