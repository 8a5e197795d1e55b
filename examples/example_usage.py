"""Example: drive the roster controller without Flask.

Controllers are a thin layer; the attendance rules live in the store.
"""

from attendance_tracker.roster import report
from attendance_tracker.roster.service import RosterController
from attendance_tracker.storage import InMemoryStorage


def main():
    controller = RosterController(InMemoryStorage())
    controller.load()

    controller.mark_present(2)
    controller.mark_absent(4)
    controller.submit_add("  Eve  ")
    controller.remove(3)

    print(report.format_table(controller.roster))
    print(controller.counts)


if __name__ == "__main__":
    main()
