"""
Transaction replay - feed a recorded script through the processor.

Script format (JSON):
    {
      "users": [{"id": "solivan@email.com", "firstName": "Solivan", "lastName": "S"}],
      "transactions": [
        {"participant": "solivan@email.com",
         "record": {"$class": "StartNewGroupChat", "newChatId": "32556",
                    "newChatTitle": "Chat Group Test", "type": "PUBLIC_GROUP"}}
      ]
    }

Each step runs as its own transaction acting as its participant. A
rejected step is reported and the replay moves on to the next one.
"""

import logging
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from chatnet.application.processor import DOMAIN_ERRORS, TransactionProcessor
from chatnet.domain.entities import User
from chatnet.domain.exceptions import DomainValidationError
from chatnet.domain.ports import Ledger
from chatnet.domain.value_objects import UserId
from chatnet.infrastructure.identity import ContextIdentityProvider
from chatnet.setup.seed import seed_users

logger = logging.getLogger(__name__)


class UserEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")

    @field_validator("id")
    @classmethod
    def _email_id(cls, value: str) -> str:
        return UserId(value).value

    def to_user(self) -> User:
        return User(id=UserId(self.id), first_name=self.first_name, last_name=self.last_name)


class ReplayStep(BaseModel):
    participant: str
    record: dict[str, Any]


class ReplayScript(BaseModel):
    users: list[UserEntry] = Field(default_factory=list)
    transactions: list[ReplayStep] = Field(default_factory=list)


class StepResult(BaseModel):
    index: int
    participant: str
    ok: bool
    result: Optional[str] = None
    error: Optional[str] = None


def _participant(step: ReplayStep) -> UserId:
    try:
        return UserId(step.participant)
    except ValueError as e:
        raise DomainValidationError(str(e)) from e


def _describe(result: Any) -> Optional[str]:
    if result is None:
        return None
    return str(getattr(result, "value", result))


async def replay(
    script: ReplayScript,
    ledger: Ledger,
    processor: TransactionProcessor,
    identity: ContextIdentityProvider,
) -> list[StepResult]:
    await seed_users(ledger, [u.to_user() for u in script.users])

    results: list[StepResult] = []
    for index, step in enumerate(script.transactions):
        try:
            participant = _participant(step)
            with identity.acting_as(participant):
                result = await processor.submit(step.record)
        except DOMAIN_ERRORS as e:
            results.append(
                StepResult(
                    index=index,
                    participant=step.participant,
                    ok=False,
                    error=f"{type(e).__name__}: {e}",
                )
            )
            continue
        results.append(
            StepResult(
                index=index,
                participant=step.participant,
                ok=True,
                result=_describe(result),
            )
        )

    failed = sum(1 for r in results if not r.ok)
    logger.info(f"[Replay] {len(results)} step(s), {failed} rejected")
    return results
