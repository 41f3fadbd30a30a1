from __future__ import annotations

from datetime import date, datetime, time, timedelta
from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import PunchEvent
from .repository import PunchRepository


class MySQLPunchRepository(PunchRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_punches(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[str] = None,
    ) -> Sequence[PunchEvent]:
        # Half-open on the upper bound so the whole end day is included.
        lower = datetime.combine(start_date, time())
        upper = datetime.combine(end_date + timedelta(days=1), time())

        sql = """
            SELECT employee_id, record_type, record_time
            FROM time_records
            WHERE record_time >= %s AND record_time < %s
        """
        params: list = [lower, upper]
        if employee_id:
            sql += " AND employee_id=%s"
            params.append(employee_id)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            rows = fetchall(cur)

        return [PunchEvent.from_mapping(r) for r in rows]
