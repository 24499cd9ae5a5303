"""Run the two-agent walkthrough against a fresh in-memory dispatcher.

Usage:
    python -m support_desk.tools.demo
    python -m support_desk.tools.demo --quiet   # only print the final history
"""

from __future__ import annotations

import argparse
import asyncio
import logging

from support_desk.adapters.persistence.memory import (
    InMemoryAgentRepository,
    InMemoryIssueRepository,
)
from support_desk.application.use_cases.dispatch_issue import IssueDispatchService
from support_desk.domain.value_objects.enums import IssueType
from support_desk.logging_setup import configure_logging

logger = logging.getLogger(__name__)


def build_dispatcher() -> IssueDispatchService:
    return IssueDispatchService(
        agent_repo=InMemoryAgentRepository(),
        issue_repo=InMemoryIssueRepository(),
    )


async def run_demo(dispatcher: IssueDispatchService) -> dict[str, list[int]]:
    """Two agents, three issues, one drain. Returns the final work history."""
    await dispatcher.add_agent(
        "agent1@test.com", "Agent 1", [IssueType.PAYMENT_RELATED, IssueType.GOLD_RELATED]
    )
    await dispatcher.add_agent("agent2@test.com", "Agent 2", [IssueType.MUTUAL_FUND_RELATED])

    i1 = await dispatcher.create_issue(
        "T1", "Payment Related", "Payment Failed",
        "My payment failed but money is debited", "testUser1@test.com",
    )
    i2 = await dispatcher.create_issue(
        "T2", "Mutual Fund Related", "Purchase Failed",
        "Unable to purchase Mutual Fund", "testUser2@test.com",
    )
    i3 = await dispatcher.create_issue(
        "T3", "Payment Related", "Payment Failed",
        "My payment failed but money is debited", "testUser2@test.com",
    )

    for issue in (i1, i2, i3):
        agent = await dispatcher.assign_issue(issue.id)
        if agent:
            logger.info("Issue %s assigned to %s", issue.id, agent.display_name)
        else:
            logger.info("Issue %s is waiting", issue.id)

    await dispatcher.resolve_issue(i1.id, "Payment reversed for T1.")
    await dispatcher.resolve_issue(i2.id, "Mutual fund purchase successful on retry.")
    await dispatcher.resolve_issue(i3.id, "Payment reversed for T3.")

    return await dispatcher.view_agents_work_history()


def main():
    parser = argparse.ArgumentParser(description="Run the support desk dispatch walkthrough")
    parser.add_argument(
        "--quiet", action="store_true",
        help="Suppress dispatcher logging, print only the final history",
    )
    args = parser.parse_args()

    configure_logging()
    if args.quiet:
        logging.getLogger("support_desk").setLevel(logging.WARNING)

    history = asyncio.run(run_demo(build_dispatcher()))

    print(f"\n{'='*50}")
    print("AGENT WORK HISTORY")
    print(f"{'='*50}")
    for agent, issue_ids in history.items():
        print(f"{agent} -> {issue_ids}")
    print(f"{'='*50}\n")


if __name__ == "__main__":
    main()
