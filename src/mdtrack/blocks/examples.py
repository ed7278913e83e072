"""Documented example blocks shown alongside configuration errors."""

EXAMPLES: dict[str, str] = {
    "table": """\
type: counter
source: current-file
tableTag: weekly
keyColumn: Activity
key: Exercise
valueColumn: Done
value: "✓"
label: Exercise this week""",
    "numeric": """\
type: progress_bar
source: current-file
keyColumn: Activity
valueColumn: Minutes
value: numeric
aggregate: sum
goal: 150
label: Minutes trained""",
    "dynamic-goal": """\
type: percentage
source: file:Trackers/habits.md
keyColumn: Habit
valueColumn: Done
value: any
goalColumn: Target
label: Habits completed""",
    "pattern": """\
type: streak
source: folder:Daily Notes
pattern: "- [x] Meditation"
label: Meditation streak""",
    "regex": """\
type: line_plot
source: folder:Journal
pattern: "\\bpushups?\\b"
useRegex: true
period: monthly
label: Push-up mentions""",
    "dashboard": """\
layout: grid
gridColumns: 2
source: current-file
tableTag: weekly

type: counter
keyColumn: Activity
valueColumn: Done
value: "✓"
label: Done
---
type: progress_bar
keyColumn: Activity
valueColumn: Done
value: "✓"
goal: 5
label: Weekly goal""",
}


def example_for(mode: str) -> str:
    """Return the example snippet most relevant to an error.

    Args:
        mode: "table", "pattern" or any other example name.

    Returns:
        Example block text, the table example when the name is unknown.
    """
    return EXAMPLES.get(mode, EXAMPLES["table"])
