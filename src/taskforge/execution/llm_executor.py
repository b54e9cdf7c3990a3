"""Execute tasks through a hosted chat-completion model"""
import json
import logging
import re

from taskforge.agents.protocol import Worker
from taskforge.execution.protocol import ExecutionResult, TaskExecutor
from taskforge.llm.client import LLMClient
from taskforge.orchestration.models import TaskRequest

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a specialist software engineering agent. Complete the task you are "
    "given. End your answer with a 'Recommendations' heading followed by short "
    "bullet points for follow-up work."
)

_HEADING_RE = re.compile(r"^\s*(?:#+\s*|\*\*)?recommendations\b", re.IGNORECASE)
_BULLET_RE = re.compile(r"^\s*(?:[-*•]|\d+[.)])\s+(.+?)\s*$")


class LLMExecutor(TaskExecutor):
    """Runs one completion call per task. No retry."""

    def __init__(
        self,
        client: LLMClient,
        model: str,
        temperature: float = 0.7,
        max_tokens: int = 1000,
    ):
        self.client = client
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    async def execute(self, worker: Worker, request: TaskRequest) -> ExecutionResult:
        prompt = self._build_prompt(worker, request)
        response = await self.client.complete(
            prompt=prompt,
            model=self.model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            system=SYSTEM_PROMPT,
        )
        logger.debug("%s used %d tokens on %s", worker.id, response.tokens_used, request.label)

        return ExecutionResult(
            success=True,
            data={
                "content": response.content,
                "model": response.model,
                "tokensUsed": response.tokens_used,
            },
            recommendations=self._extract_recommendations(response.content),
        )

    async def health_check(self) -> bool:
        return self.client is not None

    def _build_prompt(self, worker: Worker, request: TaskRequest) -> str:
        """Describe the worker's role and the task"""
        parts = [
            f"Role: {worker.name} ({worker.category.value})",
            "Capabilities:",
            *[f"- {capability}" for capability in worker.capabilities],
            "",
            f"Task type: {request.label}",
            f"Priority: {request.priority.value}",
        ]
        if request.project_id:
            parts.append(f"Project: {request.project_id}")
        parts.append(f"\nRequirements:\n{request.requirements}")

        if request.context is not None:
            parts.append(f"\nContext:\n{json.dumps(request.context, indent=2, default=str)}")

        return "\n".join(parts)

    def _extract_recommendations(self, content: str) -> list[str]:
        """Collect bullet lines that follow a 'Recommendations' heading"""
        recommendations: list[str] = []
        in_section = False
        for line in content.splitlines():
            if _HEADING_RE.match(line):
                in_section = True
                continue
            if not in_section:
                continue
            match = _BULLET_RE.match(line)
            if match:
                recommendations.append(match.group(1))
            elif line.strip() and recommendations:
                break
        return recommendations
