import logging
from collections import deque
from dataclasses import dataclass
from typing import Any, Deque, List

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecordedStatement:
    sql: str
    parameters: Any

    @property
    def verb(self) -> str:
        return self.sql.lstrip().split(None, 1)[0].upper() if self.sql.strip() else ""


class StatementRecorder:
    """
    Keeps the most recent SQL statements an engine sends to the database,
    oldest first. Older statements are dropped once ``max_statements`` is hit.
    """

    def __init__(self, max_statements: int = 1000) -> None:
        self._statements: Deque[RecordedStatement] = deque(maxlen=max_statements)

    def attach(self, engine: AsyncEngine) -> None:
        event.listen(engine.sync_engine, "before_cursor_execute", self._record)

    def _record(self, conn, cursor, statement, parameters, context, executemany) -> None:
        self.record(statement, parameters)

    def record(self, sql: str, parameters: Any = None) -> None:
        self._statements.append(RecordedStatement(sql=sql, parameters=parameters))
        logger.debug(f"Executing SQL: {sql} | params={parameters}")

    def of_verb(self, verb: str) -> List[RecordedStatement]:
        verb = verb.upper()
        return [s for s in self._statements if s.verb == verb]

    def last(self, verb: str) -> RecordedStatement:
        matches = self.of_verb(verb)
        if not matches:
            raise LookupError(f"No {verb} statement recorded")
        return matches[-1]

    def clear(self) -> None:
        self._statements.clear()
