"""Generation With Retry — bounded, sequential attempts to get a parsable element.

Invariants:
    - At most max_attempts calls, each awaited before the next; no backoff
    - First attempt whose text parses wins; remaining attempts are skipped
    - GenerationAPIError is absorbed per attempt, never propagated
    - Every attempt leaves one AttemptRecord in the report (diagnostics only;
      callers only need report.result)
"""

import logging
from dataclasses import dataclass, field

from app.core.domain_types import AttemptStatus, CraftResult
from app.core.errors import GenerationAPIError
from app.core.parse_output import parse_model_output
from app.core.repository_protocols import TextGenerator

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 3


@dataclass(frozen=True)
class AttemptRecord:
    attempt: int
    status: AttemptStatus
    detail: str = ""


@dataclass
class GenerationReport:
    """Outcome of the retry loop: parsed result (or None) plus per-attempt trail."""
    result: CraftResult | None = None
    attempts: list[AttemptRecord] = field(default_factory=list)

    @property
    def succeeded(self) -> bool:
        return self.result is not None


async def generate_with_retry(
    generator: TextGenerator,
    prompt: str,
    max_attempts: int = DEFAULT_MAX_ATTEMPTS,
) -> GenerationReport:
    """Ask the model up to max_attempts times for a valid 'emoji,label' line."""
    report = GenerationReport()
    for attempt in range(1, max_attempts + 1):
        try:
            raw = await generator.generate(prompt)
        except GenerationAPIError as e:
            logger.error(
                f"Generation call failed (attempt {attempt}): {e.message}",
                extra={"attempt": attempt, "error_code": e.code},
            )
            report.attempts.append(
                AttemptRecord(attempt, AttemptStatus.TRANSPORT_ERROR, e.message),
            )
            continue

        if not raw:
            report.attempts.append(AttemptRecord(attempt, AttemptStatus.NO_TEXT))
            logger.warning(
                f"Attempt {attempt}: no text extracted from model response",
                extra={"attempt": attempt},
            )
            continue

        parsed = parse_model_output(raw)
        if parsed:
            report.attempts.append(AttemptRecord(attempt, AttemptStatus.PARSED, raw))
            report.result = parsed
            return report

        report.attempts.append(AttemptRecord(attempt, AttemptStatus.UNPARSABLE, raw))
        logger.warning(
            f"Attempt {attempt}: failed to parse valid output. responseText='{raw}'",
            extra={"attempt": attempt},
        )
    return report
