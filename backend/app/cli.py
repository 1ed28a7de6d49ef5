"""Management CLI for inspecting the seeded schedule.

Usage:
    python -m app.cli teams        # Show the team roster
    python -m app.cli templates    # Show templates and their current version
    python -m app.cli summary      # Weekly status summary per team
    python -m app.cli calendar     # This week's calendar, team by day
"""

import sys

from app.services.seed import build_seed_data
from app.services.store import InMemoryStore


def list_teams(store: InMemoryStore):
    teams = store.list_teams()
    for team in teams:
        print(f"  {team.id:<14} {team.name:<16} {team.coverage}")
    print(f"\n{len(teams)} team(s)")


def list_templates(store: InMemoryStore):
    for template in store.list_templates():
        current = template.current_version
        print(
            f"  {template.name:<24} v{current.version} "
            f"({len(current.sub_tasks)} sub-tasks, {current.expected_duration_minutes} min)"
        )


def show_summary(store: InMemoryStore):
    for summary in store.get_status_summary():
        print(
            f"  {summary.team_id:<14} {summary.completion_rate:>3}% done  "
            f"{summary.in_progress} in progress  {summary.blockers} blocked  "
            f"{summary.scheduled} scheduled"
        )


def show_calendar(store: InMemoryStore):
    view = store.get_calendar()
    print(view.label)
    for cell in view.cells:
        if cell.tasks:
            names = ", ".join(f"{t.id} @ {t.location}" for t in cell.tasks)
            print(f"  {cell.date:%a} {cell.team_id:<14} {names}")


COMMANDS = {
    "teams": list_teams,
    "templates": list_templates,
    "summary": show_summary,
    "calendar": show_calendar,
}


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    cmd = argv[0] if argv else ""
    if cmd in COMMANDS:
        COMMANDS[cmd](InMemoryStore(build_seed_data()))
    else:
        print("Usage: python -m app.cli [teams|templates|summary|calendar]")


if __name__ == "__main__":
    main()
