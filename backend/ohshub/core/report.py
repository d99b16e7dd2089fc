"""Plain-text summary of a wizard session for pasting into an RI&E report."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

from ohshub.core.answers import AnswerSet
from ohshub.core.enums import RiskLevel
from ohshub.schemas.verdict import Verdict
from ohshub.schemas.wizard import Question, Step

NOT_ANSWERED = "(niet ingevuld)"

SEPARATOR = "═" * 55
SUB_SEPARATOR = "─" * 45

DUTCH_MONTHS = (
    "januari",
    "februari",
    "maart",
    "april",
    "mei",
    "juni",
    "juli",
    "augustus",
    "september",
    "oktober",
    "november",
    "december",
)

RISK_LEVEL_LABELS = {
    RiskLevel.UNKNOWN: "Onbekend",
    RiskLevel.LOW: "Laag",
    RiskLevel.MEDIUM: "Middel",
    RiskLevel.HIGH: "Hoog",
    RiskLevel.CRITICAL: "Kritiek",
}


def format_dutch_date(day: date) -> str:
    """Long Dutch date, e.g. ``17 oktober 2026``."""
    return f"{day.day} {DUTCH_MONTHS[day.month - 1]} {day.year}"


def resolve_answer_text(question: Question, answers: AnswerSet) -> str:
    """Human-readable answer: option labels joined by commas.

    Values that are not declared options are shown as stored.
    """
    value = answers.get(question.id)
    if not value:
        return NOT_ANSWERED
    if isinstance(value, (list, tuple)):
        return ", ".join(question.label_for(str(v)) for v in value)
    return question.label_for(str(value))


def _verdict_lines(verdict: Verdict) -> list[str]:
    lines = [
        "Risicobeoordeling",
        SUB_SEPARATOR,
        f"Totaal risiconiveau: {RISK_LEVEL_LABELS[verdict.overall_level]}",
        "",
    ]

    if verdict.findings:
        lines.append("Bevindingen:")
        for finding in verdict.findings:
            lines.append(f"• [{RISK_LEVEL_LABELS[finding.level]}] {finding.topic}: {finding.summary}")
            if finding.legal_basis:
                lines.append(f"  Grondslag: {finding.legal_basis}")
        lines.append("")

    if verdict.recommendations:
        lines.append("Aanbevelingen:")
        for rec in verdict.recommendations:
            line = f"{rec.priority}. [{rec.stage}] {rec.action}"
            if rec.deadline:
                line += f" (termijn: {rec.deadline})"
            lines.append(line)
        lines.append("")

    if verdict.data_gaps:
        lines.append("Ontbrekende gegevens:")
        lines.extend(f"• {gap}" for gap in verdict.data_gaps)
        lines.append("")

    return lines


def generate_report_text(
    steps: Sequence[Step],
    answers: AnswerSet,
    theme_name: str,
    verdict: Verdict | None = None,
    on: date | None = None,
    product_name: str = "OHSHub",
) -> str:
    """Render the summary text.

    Only steps and questions visible under ``answers`` are listed, numbered
    by their position among the visible steps.

    Args:
        steps: Wizard schema of the theme
        answers: Collected answers
        theme_name: Display name used in the header
        verdict: Optional risk assessment appended after the answers
        on: Report date (default: today)
        product_name: Footer attribution

    Returns:
        Report text with ``\\n`` line endings
    """
    lines = [
        f"SAMENVATTING RI&E — {theme_name.upper()}",
        f"Datum: {format_dutch_date(on or date.today())}",
        SEPARATOR,
        "",
    ]

    visible_steps = [step for step in steps if step.is_visible(answers)]
    for number, step in enumerate(visible_steps, start=1):
        lines.append(f"Stap {number} — {step.title}")
        lines.append(SUB_SEPARATOR)
        for question in step.visible_questions(answers):
            lines.append(f"• {question.label}")
            lines.append(f"  → {resolve_answer_text(question, answers)}")
            lines.append("")
        lines.append("")

    if verdict is not None:
        lines.extend(_verdict_lines(verdict))

    lines.append(SEPARATOR)
    lines.append(f"Gegenereerd via {product_name}")
    return "\n".join(lines)
