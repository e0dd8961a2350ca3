"""
Question bank for the Senior Data Scientist / ML Engineer interview.

Questions are asked in order. Each carries the evaluation criteria the
interviewer grades against and follow-ups for probing weak answers.
"""

from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True)
class Question:
    """A main interview question with its evaluation guide."""
    index: int
    prompt: str
    evaluation_criteria: Tuple[str, ...]
    follow_ups: Tuple[str, ...]


@dataclass(frozen=True)
class Skill:
    """A skill to assess and the years of experience expected."""
    name: str
    years_expected: int


SKILLS_TO_ASSESS: Tuple[Skill, ...] = (
    Skill("AI/ML techniques", 6),
    Skill("Deep learning architectures", 6),
    Skill("GenAI tools", 4),
    Skill("Retrieval-Augmented Generation (RAG)", 3),
    Skill("Large Language Models (LLMs)", 3),
    Skill("Autonomous Agents", 3),
    Skill("Prompt engineering", 2),
    Skill("Prompt optimization workflows", 2),
    Skill("LangChain / LangGraph", 2),
    Skill("Python", 5),
    Skill("FastAPI", 2),
    Skill("Production-grade AI systems", 3),
)


_QUESTIONS = [
    (
        "You have 100k proprietary docs and 50k labeled Q/A pairs. Target: 85% "
        "factual QA accuracy under 600 ms P95. Choose RAG, fine-tuning (LoRA), or "
        "a hybrid. Justify design, latency/cost, and evaluation/monitoring plan.",
        (
            "Makes a principled choice with trade-offs tied to constraints",
            "Proposes a realistic latency budget and model size/inference stack",
            "Understands when pure RAG or pure fine-tuning is preferable",
            "Includes solid data curation and artifact versioning",
            "Defines offline/online evaluation and drift monitoring",
            "Describes safe rollout with canaries and rollback",
        ),
        (
            "When would you move from LoRA to full fine-tuning or a domain-specific small model?",
            "How do you keep knowledge fresh without retraining the LoRA frequently?",
            "If retrieval must be <120 ms at P95 for global users, what would you change?",
            "What guardrails keep accuracy high while meeting 600 ms when load spikes 2x?",
        ),
    ),
    (
        "You need a FastAPI service that streams LLM tokens, supports tool-calling "
        "with background work, enforces per-tenant rate limits, and allows "
        "client-side cancellation. Describe the key code-level patterns and "
        "components you would use to achieve high throughput and reliability.",
        (
            "Explains async streaming with generators and non-blocking design",
            "Details rate limiting, timeouts, retries, and circuit breaking with proper idempotency",
            "Describes cancellation and backpressure mechanisms in FastAPI/asyncio",
            "Covers tool orchestration, background execution, and schema-validated structured outputs",
            "Includes observability with OpenTelemetry and meaningful SLO metrics",
            "Considers provider abstraction and fallback, plus CI/CD and canarying",
        ),
        (
            "How would you test a streaming SSE endpoint in pytest to assert ordering and backpressure behavior?",
            "What patterns avoid head-of-line blocking in the event loop under bursty traffic?",
            "How would you implement provider fallback without duplicating partial outputs to clients?",
            "Where do you store and propagate a cancellation token across tool calls?",
        ),
    ),
    (
        "You need to expose the RAG as a FastAPI service with streaming responses "
        "and strict SLAs. Describe the API design and key implementation details "
        "(async strategy, streaming method, rate limiting, idempotency, "
        "retries/circuit breaker, validation, observability). Provide a brief "
        "code outline for streaming tokens.",
        (
            "Sound async design avoiding blocking I/O",
            "Correct use of SSE/WebSockets with proper backpressure and cancellation",
            "Concrete rate limiting and idempotency strategy",
            "Clear retry/circuit breaker approach with timeouts",
            "Strong validation/authn/authz and multitenant boundaries",
            "Good observability plan with tracing/metrics/logs",
            "Scalable deployment and resource management choices",
            "Reasonable code outline reflecting FastAPI best practices",
        ),
        (
            "When would you choose SSE over WebSockets for token streaming?",
            "How do you prevent head-of-line blocking if a downstream provider stalls?",
            "What pitfalls exist when mixing async code with blocking SDKs?",
            "How would you implement per-tenant quotas and spike protection?",
        ),
    ),
    (
        "Design a multilingual RAG system for very long PDFs (hundreds of pages) "
        "that must return answers under 200 tokens with p95 latency under 800 ms "
        "and include precise source citations. Outline the end-to-end "
        "architecture and the key choices you would make to meet both quality "
        "and latency targets.",
        (
            "Selects hierarchical, sentence-aware chunking with overlap and metadata for citations",
            "Chooses hybrid retrieval and justifies dense+sparse with MMR and cross-encoder re-ranking",
            "Explains concrete latency budgets and how to achieve them (caching, micro-batching, streaming)",
            "Addresses multilingual handling without unnecessary translation",
            "Specifies precise citation strategy with span offsets and evaluation of faithfulness",
            "Provides a clear offline eval plan with retrieval and answer metrics, plus online monitoring",
            "Considers operational choices for vector DB, access control, and cost",
        ),
        (
            "How would you handle multi-hop questions that require evidence from multiple "
            "documents while staying within the 800 ms budget?",
            "Which vector store would you choose for high QPS and multi-tenant ACLs?",
            "How do you enforce citation fidelity so the model cannot cite content not retrieved?",
            "What offline metrics would you prioritize to detect regressions when you change chunk size?",
        ),
    ),
    (
        "Architect a FastAPI service that serves a streaming LLM/RAG endpoint at "
        "~1k RPS with P95 < 1 s. Outline concrete choices for concurrency, "
        "streaming, backpressure, rate limiting, timeouts/retries, circuit "
        "breakers, caching, observability, and autoscaling in cloud.",
        (
            "Uses async IO correctly and isolates CPU-bound tasks",
            "Explains streaming implementation and backpressure handling",
            "Implements robust retries, timeouts, and circuit breakers",
            "Defines rate limiting, idempotency, and caching with invalidation",
            "Provides clear observability plan with traces, metrics, and logs",
            "Describes realistic autoscaling and CI/CD rollout strategy",
        ),
        (
            "How would you implement SSE token streaming and allow clients to resume after a dropped connection?",
            "What load-test plan validates 1k RPS and P95 < 1 s? Which failure modes do you watch?",
            "How do you size uvicorn workers, connection pools, and thread/process pools?",
            "What do you cache at each layer and how do you ensure coherence after hourly document updates?",
        ),
    ),
    (
        "Design an hourly-updated, multi-tenant RAG system with p95 latency under "
        "1.5 s and high citation fidelity. Outline your end-to-end design "
        "(ingestion, chunking, embeddings, indexing, retrieval/reranking, "
        "prompt/generation, caching, evaluation, and safety). Justify your key "
        "choices and trade-offs.",
        (
            "Clear multi-tenant isolation strategy with secure metadata filtering",
            "Sound ingestion and structure-aware chunking rationale",
            "Appropriate embedding choice and versioning for backfills",
            "Hybrid retrieval design and justified reranking approach",
            "Prompt/generation plan that enforces citations and refusals",
            "Concrete safety measures against injection and PII leakage",
            "Layered caching with invalidation strategy tied to corpus updates",
            "Meaningful offline/online evaluation metrics and observability plan",
            "Latency-aware execution and parallelization choices",
            "Reasoned trade-offs between recall, precision, latency, and cost",
        ),
        (
            "How would you tune chunk size/overlap for code-heavy documentation versus prose?",
            "What's your plan if the vector store is temporarily unavailable?",
            "How would you measure and improve citation faithfulness systematically?",
            "How do you defend the system from prompt injection via retrieved context?",
        ),
    ),
    (
        "Outline how you'd take a new LLM/RAG feature from prototype to production "
        "on AWS with high reliability and cost control. Cover CI/CD gating, "
        "containerization, serving stack (e.g., Bedrock/vLLM/TGI), rollout "
        "strategy, monitoring/alerts, data/privacy controls, and rollback/fallbacks.",
        (
            "End-to-end path with enforceable quality gates before deploy",
            "Secure, reproducible containers and secret management",
            "Appropriate serving choice with autoscaling and index management",
            "Safe rollout with measurable guardrails and quick rollback",
            "Comprehensive observability tied to SLOs and runbooks",
            "Privacy/cost controls and practical fallback strategies",
        ),
        (
            "How would you prevent a bad embedding model change from silently degrading search quality?",
            "What signals would you track to trigger automatic rollback during canary?",
            "When would you prefer Bedrock over self-hosting vLLM/TGI?",
            "How do you gate releases for agent features vs core RAG answers differently?",
        ),
    ),
    (
        "Outline a FastAPI-based LLM service that supports streaming responses, "
        "request batching, backpressure, and idempotent retries. What key design "
        "and code-level decisions ensure reliability at scale?",
        (
            "Demonstrates correct use of async FastAPI, SSE/WebSockets, and batching",
            "Explains backpressure, rate limiting, circuit breakers, and idempotency",
            "Covers observability (metrics, tracing, logs) and security concerns",
            "Addresses GPU-aware deployment and autoscaling",
            "Shows testing and CI/CD integration with release safety",
        ),
        (
            "How would you implement server-side request batching without starving small requests?",
            "What's your strategy for streaming with retries if the upstream model disconnects mid-stream?",
            "How do you prevent head-of-line blocking in your FastAPI workers?",
            "How would you secure tenant isolation in a multi-tenant setting?",
        ),
    ),
]

QUESTION_BANK: List[Question] = [
    Question(index=i, prompt=prompt, evaluation_criteria=criteria, follow_ups=follow_ups)
    for i, (prompt, criteria, follow_ups) in enumerate(_QUESTIONS)
]
