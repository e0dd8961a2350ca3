import math

import pytest

from sara_interviewer.core.session.phases import (
    DEFAULT_BANDS,
    InterviewPhase,
    PacingConfig,
    PhaseBand,
    Urgency,
)


@pytest.mark.parametrize(
    "progress, phase",
    [
        (0, InterviewPhase.INTRODUCTION),
        (14.99, InterviewPhase.INTRODUCTION),
        (15, InterviewPhase.MAIN_QUESTIONS),
        (74.99, InterviewPhase.MAIN_QUESTIONS),
        (75, InterviewPhase.WRAPPING_UP),
        (89.99, InterviewPhase.WRAPPING_UP),
        (90, InterviewPhase.CONCLUSION),
        (250, InterviewPhase.CONCLUSION),
    ],
)
def test_band_boundaries_are_half_open(config, progress, phase):
    assert config.band_for(progress).phase is phase


def test_each_phase_has_its_own_urgency():
    pairs = [(band.phase, band.urgency) for band in DEFAULT_BANDS]
    assert pairs == [
        (InterviewPhase.INTRODUCTION, Urgency.RELAXED),
        (InterviewPhase.MAIN_QUESTIONS, Urgency.NORMAL),
        (InterviewPhase.WRAPPING_UP, Urgency.ELEVATED),
        (InterviewPhase.CONCLUSION, Urgency.CRITICAL),
    ]


def test_phase_order_follows_session_order():
    assert [phase.order for phase in InterviewPhase] == [0, 1, 2, 3]


@pytest.mark.parametrize(
    "progress, expected",
    [(15, 9), (20, 8), (50, 5), (74, 3)],
)
def test_questions_remaining(config, progress, expected):
    assert config.questions_remaining(progress) == expected


def test_main_questions_recommendation_is_rendered(config):
    band = config.band_for(50)

    text, remaining = config.recommendation_for(band, 50)

    assert remaining == 5
    assert "{questions_remaining}" not in text
    assert "5 more questions" in text


def test_other_recommendations_are_fixed(config):
    band = config.band_for(95)

    text, remaining = config.recommendation_for(band, 95)

    assert remaining is None
    assert text.startswith("Interview time is nearly complete.")


def test_minutes_per_question(config):
    assert config.minutes_per_question == 6


@pytest.mark.parametrize(
    "kwargs",
    [
        {"total_duration_minutes": 0},
        {"total_questions": 0},
        {"bands": ()},
        {"bands": DEFAULT_BANDS[:3]},
    ],
)
def test_invalid_config_is_rejected(kwargs):
    with pytest.raises(ValueError):
        PacingConfig(**kwargs)


def test_custom_bands():
    bands = (
        PhaseBand(InterviewPhase.MAIN_QUESTIONS, Urgency.NORMAL, 50, "go"),
        PhaseBand(InterviewPhase.CONCLUSION, Urgency.CRITICAL, math.inf, "stop"),
    )
    config = PacingConfig(total_duration_minutes=30, bands=bands)

    assert config.band_for(49).recommendation == "go"
    assert config.band_for(50).recommendation == "stop"
