import pytest

from sara_interviewer.core.agents.base import AgentMetadata
from sara_interviewer.core.agents.factory import AgentFactory
from sara_interviewer.core.agents.registry import AgentRegistry


class StubAgent:
    def __init__(self, context=None):
        self.context = context

    @property
    def metadata(self):
        return AgentMetadata(
            name="Stub",
            version="0.1.0",
            description="stub agent",
            supported_languages=["en"],
            capabilities=["testing"],
        )


class BrokenAgent:
    def __init__(self, **kwargs):
        raise RuntimeError("cannot build")


@pytest.fixture
def registry():
    return AgentRegistry()


def test_register_and_lookup(registry):
    registry.register("stub", StubAgent, is_default=True)

    assert "stub" in registry
    assert len(registry) == 1
    assert registry.list_agents() == ["stub"]
    assert registry.get("stub").metadata.name == "Stub"
    assert registry.get("missing") is None
    assert registry.default_agent_name == "stub"


def test_duplicate_registration_is_rejected(registry):
    registry.register("stub", StubAgent)

    with pytest.raises(ValueError):
        registry.register("stub", StubAgent)


def test_metadata_falls_back_when_agent_cannot_be_built(registry):
    registry.register("broken", BrokenAgent)

    registration = registry.get("broken")
    assert registration.metadata.name == "broken"
    assert registration.metadata.capabilities == []
    assert registration.agent_class is BrokenAgent


def test_registry_exposes_only_lookup_api(registry):
    assert not hasattr(registry, "unregister")
    assert not hasattr(registry, "get_agent_info")
    with pytest.raises(TypeError):
        registry.register("stub", StubAgent, factory_func=StubAgent)


def test_default_falls_back_to_first_registered(registry):
    registry.register("first", StubAgent)
    registry.register("second", StubAgent)

    assert registry.default_agent_name == "first"


def test_factory_creates_agent_with_context(registry):
    registry.register("stub", StubAgent)
    factory = AgentFactory(registry)

    agent = factory.create("stub", context="ctx")

    assert isinstance(agent, StubAgent)
    assert agent.context == "ctx"


def test_factory_uses_default_agent_when_type_missing(registry):
    registry.register("stub", StubAgent, is_default=True)

    assert isinstance(AgentFactory(registry).create(None), StubAgent)


def test_factory_returns_none_for_unknown_or_failing_agents(registry):
    registry.register("broken", BrokenAgent)
    factory = AgentFactory(registry)

    assert factory.create("missing") is None
    assert factory.create("broken") is None

