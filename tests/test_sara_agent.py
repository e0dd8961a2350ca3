import json

import pytest

from sara_interviewer.agents.sara.agent import SaraInterviewerAgent
from sara_interviewer.agents.sara.config import PACING_CONFIG, VoicePipelineConfig
from sara_interviewer.agents.sara.context import InterviewContext


def test_agent_builds_instructions_and_pacing():
    agent = SaraInterviewerAgent()

    assert "get_time_status" in agent.instructions
    assert agent.pacing.config is PACING_CONFIG
    assert not agent.pacing.is_started
    assert agent.metadata.name == "Sara Interviewer"


def test_greeting_uses_job_title():
    agent = SaraInterviewerAgent(context=InterviewContext(job_title="Staff ML Engineer"))

    assert agent.greeting() == (
        "Hi there! I'm Sara, and I'll be conducting your interview today for the "
        "Staff ML Engineer position. Can you hear me clearly?"
    )
    assert "**Staff ML Engineer**" in agent.instructions


def test_each_agent_owns_its_clock():
    first = SaraInterviewerAgent()
    second = SaraInterviewerAgent()

    first._init_timing()

    assert first.pacing.is_started
    assert not second.pacing.is_started


def _tool_name(tool):
    return getattr(tool, "id", None) or getattr(tool, "__name__", None)


def test_time_status_tool_is_registered():
    agent = SaraInterviewerAgent()

    assert "get_time_status" in [_tool_name(tool) for tool in agent.tools]


async def test_time_status_tool_returns_snapshot_json():
    agent = SaraInterviewerAgent()
    agent._init_timing()

    record = json.loads(await agent.get_time_status())

    assert set(record) == {
        "elapsedMinutes",
        "remainingMinutes",
        "progressPercent",
        "phase",
        "urgency",
        "recommendation",
        "currentTime",
    }
    assert record["elapsedMinutes"] == 0
    assert record["remainingMinutes"] == 60
    assert record["phase"] == "introduction"
    assert record["urgency"] == "relaxed"


async def test_time_status_event_is_skipped_outside_a_job():
    agent = SaraInterviewerAgent()

    published = await agent._publish_session_event(
        event_type="time_status",
        status="introduction",
    )
    record = json.loads(await agent.get_time_status())

    assert published is False
    assert record["phase"] == "introduction"
    assert agent.pacing.is_started


def test_voice_pipeline_config_from_env(monkeypatch):
    monkeypatch.setenv("SARA_LLM_MODEL", "gpt-4.1")
    monkeypatch.delenv("SARA_TTS_MODEL", raising=False)

    pipeline = VoicePipelineConfig.from_env()

    assert pipeline.llm_model == "gpt-4.1"
    assert pipeline.tts_model == "cartesia/sonic-3"
    assert pipeline.stt_model == "deepgram/nova-3"


@pytest.mark.parametrize(
    "metadata, candidate",
    [
        (None, None),
        ("{broken", None),
        ('{"agentType": "sara_interviewer", "candidateName": "Ada"}', "Ada"),
        ('{"jobTitle": ""}', None),
    ],
)
def test_context_from_room_metadata(metadata, candidate):
    context = InterviewContext.from_room_metadata(metadata)

    assert context.candidate_name == candidate
    assert context.job_title
