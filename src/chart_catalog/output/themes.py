"""Outcome color maps."""

from chart_catalog.models import RefreshOutcome

OUTCOME_COLORS: dict[RefreshOutcome, str] = {
    RefreshOutcome.SUCCESS: "green",
    RefreshOutcome.FAILED: "red bold",
}


def styled_outcome(outcome: RefreshOutcome) -> str:
    color = OUTCOME_COLORS.get(outcome, "white")
    return f"[{color}]{outcome.value}[/{color}]"


def styled_committed(committed: bool) -> str:
    return "[green]committed[/green]" if committed else "[red bold]kept previous[/red bold]"
