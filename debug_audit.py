
import asyncio
import sys

from adready.services.audit_runner import AuditRunner
from adready.services.errors import AnalysisError

async def main():
    url = sys.argv[1] if len(sys.argv) > 1 else "https://example.com/"
    print(f"Running analysis for {url}...")

    runner = AuditRunner()
    try:
        report = await runner.run(url)
    except AnalysisError as e:
        print(f"Analysis stopped ({e.status_code}): {e.message}")
        if e.details:
            print(f"Details: {e.details}")
        return

    print(f"Final URL: {report.final_url}")
    print(f"Score: {report.score.final_score} ({report.score.raw_score}/{report.score.total_possible_weight})")
    for penalty in report.score.penalties:
        print(f"Penalty: {penalty}")

    print(f"Checks count: {len(report.checks)}")
    for check in report.checks:
        print(f"  [{check.status.value:>6}] {check.name} ({check.weight}): {check.message}")

    print(report.score.interpretation)

if __name__ == "__main__":
    asyncio.run(main())
