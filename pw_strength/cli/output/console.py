"""Rich rendering of evaluation reports and criterion listings for the terminal."""

from rich.console import Console
from rich.progress_bar import ProgressBar
from rich.table import Table
from rich.text import Text

from pw_strength.criterion.domain.descriptor import CriterionDescriptor
from pw_strength.evaluation.domain.report import MAX_TOTAL_SCORE, Report
from pw_strength.evaluation.domain.strength import StrengthLabel

# Meter colors per label, matching the browser front end's palette.
_LABEL_STYLES: dict[StrengthLabel, str] = {
    "Very Strong": "green",
    "Strong": "yellow",
    "Medium": "dark_orange",
    "Weak": "red",
    "N/A": "grey50",
}

# Width of the criterion name column in the per-criterion rows.
_NAME_W = 30
_METER_W = 40
_RULE_W = 54


def _rule(console: Console) -> None:
    console.print("-" * _RULE_W, style="dim", highlight=False)


def render_report(report: Report, label: StrengthLabel, console: Console) -> None:
    """Print the score, label, strength meter, and one row per criterion."""
    style = _LABEL_STYLES[label]

    console.print()
    _rule(console)
    console.print(
        Text.assemble(
            "Strength Score: ",
            (f"{report.total_score}/{MAX_TOTAL_SCORE}", f"bold {style}"),
            "  ",
            (f"({label})", style),
        )
    )
    console.print(
        ProgressBar(
            total=MAX_TOTAL_SCORE,
            completed=report.total_score,
            width=_METER_W,
            complete_style=style,
            finished_style=style,
        )
    )
    console.print(Text("Evaluation Criteria:"))
    _rule(console)

    for outcome in report.outcomes:
        status = ("[PASS]", "green") if outcome.verdict.met else ("[FAIL]", "yellow")
        console.print(
            Text.assemble(
                "  ",
                status,
                " ",
                (f"{outcome.name:<{_NAME_W}}", "bold"),
                " | ",
                outcome.verdict.message,
            )
        )

    _rule(console)


def render_criteria(descriptors: list[CriterionDescriptor], console: Console) -> None:
    """Print a table of the enabled criteria and their maximum scores."""
    table = Table(title="Evaluation Criteria", title_justify="left")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Criterion", min_width=_NAME_W)
    table.add_column("Max Score", justify="right")

    for index, descriptor in enumerate(descriptors, start=1):
        table.add_row(str(index), descriptor.name, str(descriptor.max_score))

    attainable = min(MAX_TOTAL_SCORE, sum(d.max_score for d in descriptors))
    table.caption = f"Maximum attainable score: {attainable}/{MAX_TOTAL_SCORE}"
    console.print(table)
