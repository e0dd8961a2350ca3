"""
Worker entry point for the Sara interviewer.

This file handles:
1. Loading environment configuration
2. Parsing room metadata into an interview context
3. Creating a fresh agent and voice pipeline session per job
"""

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from livekit.agents import (
    JobContext,
    JobProcess,
    WorkerOptions,
    AgentSession,
    RoomInputOptions,
    MetricsCollectedEvent,
    cli,
    inference,
    metrics,
)
from livekit.plugins import noise_cancellation, openai, silero
from livekit.plugins.turn_detector.multilingual import MultilingualModel

from sara_interviewer.core.agents.registry import registry
from sara_interviewer.core.agents.factory import AgentFactory
from sara_interviewer.agents.sara.agent import SaraInterviewerAgent
from sara_interviewer.agents.sara.context import InterviewContext
from sara_interviewer.agents.sara import config

logger = logging.getLogger("agent")


def find_env_file(names=(".env.local", ".env")) -> Optional[str]:
    """First env file found in the working directory or its parent."""
    for env_name in names:
        if Path(env_name).exists():
            return env_name
        elif Path(f"../{env_name}").exists():
            return f"../{env_name}"
    return None


env_file = find_env_file()
if env_file:
    load_dotenv(env_file)
    logger.info(f"Loaded environment from {env_file}")
else:
    load_dotenv()


def register_agents():
    """Register all available agents."""
    # Check if already registered to avoid errors on reconnection
    if config.REGISTRATION_NAME not in registry:
        registry.register(
            name=config.REGISTRATION_NAME,
            agent_class=SaraInterviewerAgent,
            is_default=True
        )

    logger.info(f"Registered {len(registry)} agents: {registry.list_agents()}")


def prewarm(proc: JobProcess):
    """Prewarm models for faster startup."""
    proc.userdata["vad"] = silero.VAD.load()
    register_agents()


async def entrypoint(ctx: JobContext):
    """Create the voice pipeline and start the interview for one room."""
    ctx.log_context_fields = {"room": ctx.room.name}

    register_agents()
    context = InterviewContext.from_room_metadata(ctx.job.room.metadata)
    logger.info(f"Created context: {context.agent_type}")

    pipeline = config.VoicePipelineConfig.from_env()
    logger.info(f"Using LLM {pipeline.llm_model}, STT {pipeline.stt_model}, TTS {pipeline.tts_model}")

    session = AgentSession(
        stt=inference.STT(model=pipeline.stt_model, language=pipeline.stt_language),
        llm=openai.LLM(model=pipeline.llm_model),
        tts=inference.TTS(model=pipeline.tts_model, voice=pipeline.tts_voice),
        turn_detection=MultilingualModel(),
        vad=ctx.proc.userdata["vad"],
        # Let the LLM start a reply while the end of turn is still being confirmed
        preemptive_generation=True,
    )

    # Setup metrics collection
    usage_collector = metrics.UsageCollector()

    @session.on("metrics_collected")
    def _on_metrics_collected(ev: MetricsCollectedEvent):
        metrics.log_metrics(ev.metrics)
        usage_collector.collect(ev.metrics)

    async def log_usage():
        summary = usage_collector.get_summary()
        logger.info(f"Usage: {summary}")

    ctx.add_shutdown_callback(log_usage)

    # A fresh agent per session owns its own pacing clock
    agent = AgentFactory().create(context.agent_type, context=context)
    if not agent:
        logger.error(f"Failed to create agent: {context.agent_type}")
        raise ValueError(f"Unable to create agent of type: {context.agent_type}")

    logger.info(f"Created agent for session: {agent.__class__.__name__}")

    await session.start(
        agent=agent,
        room=ctx.room,
        room_input_options=RoomInputOptions(
            noise_cancellation=noise_cancellation.BVC(),
        ),
    )

    await ctx.connect()
    logger.info(f"{config.AGENT_NAME} session started successfully")


def run():
    """Console-script entry point (`sara-interviewer dev|start|console`)."""
    register_agents()
    cli.run_app(
        WorkerOptions(
            entrypoint_fnc=entrypoint,
            prewarm_fnc=prewarm,
            agent_name=config.AGENT_NAME,
        )
    )


if __name__ == "__main__":
    run()
