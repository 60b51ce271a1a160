"""Combine Elements — request handler for merging two elements into a new one.

Invariants:
    - Pair lookup happens before any generation call; a hit ends the request
    - Generation never fails the request: no parse after all attempts -> fallback
    - Label lookup happens before every create, for model and fallback results
    - At most one record is created per request, always for the ordered pair
    - Stored text is lower-cased
    - Normalized words longer than MAX_WORD_LENGTH are rejected before any IO

Design Decisions:
    - Repository and generator injected as Protocols: the service is testable
      with in-memory fakes and never touches SQLAlchemy or httpx directly
    - Outcome enum carries `discovered`; messages derived from the outcome
"""

import logging
from dataclasses import dataclass
from types import MappingProxyType

from app.core.combination_prompt import build_combination_prompt
from app.core.domain_types import CombinationOutcome, CraftResult, ElementRecord, WordPair
from app.core.errors import ErrorContext, MissingParametersError, WordTooLongError
from app.core.fallback import select_fallback
from app.core.normalize_pair import MAX_WORD_LENGTH, normalize_pair
from app.core.repository_protocols import ElementRepository, TextGenerator
from app.core.vocabulary import is_known_term
from app.services.generate_element import DEFAULT_MAX_ATTEMPTS, generate_with_retry

logger = logging.getLogger(__name__)

OUTCOME_MESSAGES: MappingProxyType[CombinationOutcome, str] = MappingProxyType({
    CombinationOutcome.PAIR_CACHE_HIT: "Element already exists",
    CombinationOutcome.TEXT_CACHE_HIT: "Text already exists",
    CombinationOutcome.CREATED: "New element created",
    CombinationOutcome.CREATED_WITH_FALLBACK: "Element created with fallback",
})


@dataclass(frozen=True)
class CombinationResult:
    outcome: CombinationOutcome
    emoji: str
    text: str

    @property
    def discovered(self) -> bool:
        return self.outcome.discovered

    @property
    def message(self) -> str:
        return OUTCOME_MESSAGES[self.outcome]


class CombinationService:
    """Normalize -> pair lookup -> generate/fallback -> label lookup -> persist."""

    def __init__(
        self,
        repository: ElementRepository,
        generator: TextGenerator,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ):
        self.repository = repository
        self.generator = generator
        self.max_attempts = max_attempts

    async def combine(self, first: str | None, second: str | None) -> CombinationResult:
        """Combine two raw element labels; raises on blank or overlong words."""
        missing = [
            name for name, value in (("word1", first), ("word2", second))
            if not value or not value.strip()
        ]
        context = ErrorContext(word1=first, word2=second)
        if missing:
            raise MissingParametersError(missing, context)

        pair = normalize_pair(first, second)
        for name, word in (("word1", pair.low), ("word2", pair.high)):
            if len(word) > MAX_WORD_LENGTH:
                raise WordTooLongError(name, MAX_WORD_LENGTH, context)

        existing = await self.repository.find_one(
            {"word1": pair.low, "word2": pair.high},
        )
        if existing:
            return self._finish(pair, CombinationOutcome.PAIR_CACHE_HIT, existing)

        candidate, outcome = await self._generate_or_fallback(pair)
        text = candidate.text.lower()

        by_text = await self.repository.find_one({"text": text})
        if by_text:
            return self._finish(pair, CombinationOutcome.TEXT_CACHE_HIT, by_text)

        if not is_known_term(text):
            logger.info(
                f"New term discovered (not in base vocabulary): {text}",
                extra={"text": text},
            )
        created = await self.repository.create(ElementRecord(
            word1=pair.low, word2=pair.high, emoji=candidate.emoji, text=text,
        ))
        return self._finish(pair, outcome, created)

    async def _generate_or_fallback(
        self, pair: WordPair,
    ) -> tuple[CraftResult, CombinationOutcome]:
        logger.info(
            f"Generating combination for: {pair.low} + {pair.high}",
            extra={"word1": pair.low, "word2": pair.high},
        )
        report = await generate_with_retry(
            self.generator, build_combination_prompt(pair), self.max_attempts,
        )
        if report.result:
            return report.result, CombinationOutcome.CREATED

        fallback = select_fallback(pair)
        logger.warning(
            f"Using fallback for {pair.low} + {pair.high}: {fallback.text}",
            extra={
                "word1": pair.low, "word2": pair.high,
                "attempt": len(report.attempts),
                "attempt_status": [a.status.value for a in report.attempts],
            },
        )
        return fallback, CombinationOutcome.CREATED_WITH_FALLBACK

    def _finish(
        self, pair: WordPair, outcome: CombinationOutcome, record: ElementRecord,
    ) -> CombinationResult:
        logger.info(
            f"{OUTCOME_MESSAGES[outcome]}: {record.emoji} {record.text}",
            extra={
                "word1": pair.low, "word2": pair.high,
                "outcome": outcome.value, "emoji": record.emoji,
            },
        )
        return CombinationResult(outcome=outcome, emoji=record.emoji, text=record.text)
