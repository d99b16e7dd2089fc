"""Contract tests shared by every registered risk engine.

Each engine must be total, deterministic, read-only on its input and report
an overall level equal to the most severe finding.
"""

import copy
import random

import pytest

from ohshub.core.aggregation import max_level
from ohshub.core.enums import QuestionType
from ohshub.themes import list_wizard_configs

ENGINE_CONFIGS = [config for config in list_wizard_configs() if config.has_risk_assessment]


def _answer_sets(config) -> list[dict]:
    questions = [q for step in config.steps for q in step.questions]
    rng = random.Random(config.theme_id)

    first_options = {}
    last_options = {}
    malformed = {}
    for q in questions:
        if q.type is QuestionType.MULTI_CHOICE:
            first_options[q.id] = [q.options[0].value]
            last_options[q.id] = [q.options[-1].value]
            malformed[q.id] = q.options[0].value
        elif q.type is QuestionType.SINGLE_CHOICE:
            first_options[q.id] = q.options[0].value
            last_options[q.id] = q.options[-1].value
            malformed[q.id] = [q.options[0].value, 42]
        else:
            first_options[q.id] = "vrije tekst"
            last_options[q.id] = ""
            malformed[q.id] = None

    sampled = []
    for _ in range(25):
        answers = {}
        for q in questions:
            roll = rng.random()
            if roll < 0.3:
                continue
            if q.type is QuestionType.MULTI_CHOICE:
                values = [o.value for o in q.options]
                answers[q.id] = rng.sample(values, rng.randint(0, len(values)))
            elif q.type is QuestionType.SINGLE_CHOICE:
                answers[q.id] = rng.choice([o.value for o in q.options] + ["undeclared"])
            else:
                answers[q.id] = "tekst"
        sampled.append(answers)

    return [{}, first_options, last_options, malformed, {"unrelated": 3.5, "vib-type": None}, *sampled]


CASES = [
    pytest.param(config, answers, id=f"{config.theme_id}-{i}")
    for config in ENGINE_CONFIGS
    for i, answers in enumerate(_answer_sets(config))
]


def test_there_are_engines_to_check():
    assert {c.theme_id for c in ENGINE_CONFIGS} == {"vibration", "hazardous-substances"}


@pytest.mark.parametrize(("config", "answers"), CASES)
def test_overall_level_is_max_of_findings(config, answers):
    verdict = config.assess_risk(answers)
    assert verdict.findings
    assert verdict.overall_level == max_level(f.level for f in verdict.findings)


@pytest.mark.parametrize(("config", "answers"), CASES)
def test_engine_is_deterministic(config, answers):
    assert config.assess_risk(answers) == config.assess_risk(answers)


@pytest.mark.parametrize(("config", "answers"), CASES)
def test_engine_does_not_mutate_answers(config, answers):
    before = copy.deepcopy(answers)
    config.assess_risk(answers)
    assert answers == before


@pytest.mark.parametrize(("config", "answers"), CASES)
def test_recommendations_are_sorted_by_priority(config, answers):
    priorities = [r.priority for r in config.assess_risk(answers).recommendations]
    assert priorities == sorted(priorities)
